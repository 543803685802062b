"""
identifier.py - The 128-bit identifier value type.

An Identifier is an immutable pair of logical 64-bit words, high and
low. Text and UUID conversions are delegated to the standard library's
uuid.UUID; nothing here reimplements the canonical string format.
"""

import uuid
from dataclasses import dataclass
from typing import Union

from uuid_reorder.config import VERSION_MASK, VERSION_SHIFT, WORD_BITS, WORD_MASK
from uuid_reorder.errors import ValidationError

IDENTIFIER_BYTES = 16


@dataclass(frozen=True, slots=True, order=True)
class Identifier:
    """
    Immutable 128-bit identifier split into two unsigned 64-bit words.

    Field order makes comparison follow the unsigned 128-bit value,
    which is also the order of the 16 big-endian bytes.
    """
    high: int
    low: int

    def __post_init__(self) -> None:
        """Reject words that do not fit in 64 unsigned bits."""
        for field_name in ("high", "low"):
            word = getattr(self, field_name)
            if isinstance(word, bool) or not isinstance(word, int):
                raise ValidationError(
                    f"{field_name} must be an int, got {type(word).__name__}",
                    field=field_name,
                    value=word,
                )
            if word < 0 or word > WORD_MASK:
                raise ValidationError(
                    f"{field_name} must fit in {WORD_BITS} unsigned bits",
                    field=field_name,
                    value=hex(word),
                )

    @classmethod
    def from_int(cls, value: int) -> "Identifier":
        """Split a 128-bit integer into its high and low words."""
        if value < 0 or value >> (2 * WORD_BITS):
            raise ValidationError(
                "value must fit in 128 unsigned bits", field="value", value=value
            )
        return cls(value >> WORD_BITS, value & WORD_MASK)

    @classmethod
    def from_uuid(cls, value: uuid.UUID) -> "Identifier":
        return cls.from_int(value.int)

    @classmethod
    def from_bytes(cls, data: bytes) -> "Identifier":
        """
        Build an identifier from 16 big-endian bytes.

        Args:
            data: Raw identifier bytes, most significant first

        Raises:
            ValidationError: If data is not exactly 16 bytes
        """
        if len(data) != IDENTIFIER_BYTES:
            raise ValidationError(
                f"identifier must be {IDENTIFIER_BYTES} bytes, got {len(data)}",
                field="data",
                value=data,
            )
        return cls.from_int(int.from_bytes(data, byteorder="big"))

    @classmethod
    def parse(cls, text: str) -> "Identifier":
        """Parse the canonical hexadecimal form via uuid.UUID."""
        try:
            return cls.from_uuid(uuid.UUID(text))
        except (TypeError, ValueError) as e:
            raise ValidationError(
                f"Cannot parse UUID: {e}", field="text", value=text
            ) from e

    @property
    def version(self) -> int:
        """The 4-bit version tag at bits 15-12 of the high word."""
        return (self.high & VERSION_MASK) >> VERSION_SHIFT

    def to_uuid(self) -> uuid.UUID:
        return uuid.UUID(int=self.int)

    def __str__(self) -> str:
        return str(self.to_uuid())

    @property
    def int(self) -> int:
        return (self.high << WORD_BITS) | self.low

    @property
    def bytes(self) -> bytes:
        return self.int.to_bytes(IDENTIFIER_BYTES, byteorder="big")


IdentifierLike = Union[Identifier, uuid.UUID]


def as_identifier(value: IdentifierLike) -> Identifier:
    """
    Coerce an accepted input into an Identifier.

    Raises:
        ValidationError: If value is neither an Identifier nor a uuid.UUID
    """
    if isinstance(value, Identifier):
        return value
    if isinstance(value, uuid.UUID):
        return Identifier.from_uuid(value)
    raise ValidationError(
        f"Expected Identifier or UUID, got {type(value).__name__}",
        field="value",
        value=value,
    )


def same_kind(original: IdentifierLike, result: Identifier) -> IdentifierLike:
    """Return result as the same type the caller passed in."""
    if isinstance(original, uuid.UUID):
        return result.to_uuid()
    return result
