"""
timestamp.py - Instants and the version 1 timestamp counter.

A version 1 UUID counts 100ns ticks since the Gregorian calendar
reform, 1582-10-15T00:00:00Z, in 60 bits. datetime only resolves
microseconds, so instants are kept as whole seconds plus nanoseconds
since the Unix epoch; this is enough to name the rollover instant
exactly.
"""

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Union

from uuid_reorder.codec import sortable_ticks, standard_ticks
from uuid_reorder.config import (
    GREGORIAN_TO_UNIX_SECONDS,
    NANOS_PER_SECOND,
    NANOS_PER_TICK,
    ROLLOVER_EPOCH_SECONDS,
    ROLLOVER_NANOS,
    TICKS_PER_SECOND,
)
from uuid_reorder.errors import ValidationError
from uuid_reorder.identifier import IdentifierLike
from uuid_reorder.invariants import Invariants

UNIX_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


@dataclass(frozen=True, slots=True, order=True)
class Timestamp:
    """
    Immutable instant: seconds since the Unix epoch plus nanoseconds.

    Seconds may be negative; nanos always counts forward from the
    start of that second.
    """
    seconds: int
    nanos: int = 0

    def __post_init__(self) -> None:
        """Validate the nanosecond field after initialization."""
        if not isinstance(self.seconds, int) or not isinstance(self.nanos, int):
            raise ValidationError(
                "seconds and nanos must be ints",
                field="timestamp",
                value=(self.seconds, self.nanos),
            )
        if self.nanos < 0 or self.nanos >= NANOS_PER_SECOND:
            raise ValidationError(
                f"nanos must be in [0, {NANOS_PER_SECOND}), got {self.nanos}",
                field="nanos",
                value=self.nanos,
            )

    @property
    def ticks(self) -> int:
        """100ns intervals since the Gregorian epoch, truncating sub-tick nanos."""
        return (
            (self.seconds + GREGORIAN_TO_UNIX_SECONDS) * TICKS_PER_SECOND
            + self.nanos // NANOS_PER_TICK
        )

    @classmethod
    def from_ticks(cls, ticks: int) -> "Timestamp":
        """
        Convert a timestamp counter back into an instant.

        Raises:
            OutOfRangeError: If ticks does not fit in 60 unsigned bits
        """
        Invariants.assert_ticks_in_range(ticks)
        seconds, remainder = divmod(ticks, TICKS_PER_SECOND)
        return cls(seconds - GREGORIAN_TO_UNIX_SECONDS, remainder * NANOS_PER_TICK)

    @classmethod
    def from_datetime(cls, when: datetime) -> "Timestamp":
        """Convert a datetime; naive values are taken to be UTC."""
        if when.tzinfo is None:
            when = when.replace(tzinfo=timezone.utc)
        delta = when - UNIX_EPOCH
        return cls(delta.days * 86_400 + delta.seconds, delta.microseconds * 1_000)

    def to_datetime(self) -> datetime:
        """UTC datetime for this instant, truncated to microseconds."""
        return UNIX_EPOCH + timedelta(
            seconds=self.seconds, microseconds=self.nanos // 1_000
        )

    def isoformat(self) -> str:
        whole = self.to_datetime().replace(microsecond=0, tzinfo=None).isoformat()
        if self.nanos:
            return f"{whole}.{self.nanos:09d}Z"
        return f"{whole}Z"

    def __str__(self) -> str:
        return self.isoformat()


TimestampLike = Union[Timestamp, datetime]

# tick 0 of the version 1 counter
GREGORIAN_EPOCH = Timestamp(-GREGORIAN_TO_UNIX_SECONDS, 0)

# 5236-03-31T21:21:00.6846975Z, tick 2^60 - 1
MAX_TIMESTAMP = Timestamp(ROLLOVER_EPOCH_SECONDS, ROLLOVER_NANOS)


def as_timestamp(when: TimestampLike) -> Timestamp:
    """
    Coerce an accepted instant into a Timestamp.

    Raises:
        ValidationError: If when is neither a Timestamp nor a datetime
    """
    if isinstance(when, Timestamp):
        return when
    if isinstance(when, datetime):
        return Timestamp.from_datetime(when)
    raise ValidationError(
        f"Expected Timestamp or datetime, got {type(when).__name__}",
        field="when",
        value=when,
    )


def standard_timestamp(identifier: IdentifierLike) -> Timestamp:
    """
    Instant embedded in an RFC-order version 1 UUID.

    Raises:
        InvalidVersionError: If the input is not version 1
    """
    return Timestamp.from_ticks(standard_ticks(identifier))


def sortable_timestamp(identifier: IdentifierLike) -> Timestamp:
    """Instant embedded in a sortable-order version 1 UUID."""
    return Timestamp.from_ticks(sortable_ticks(identifier))
