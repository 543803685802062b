"""
errors.py - Domain-specific exceptions for uuid_reorder.

All exceptions inherit from ReorderError for unified handling.
Each exception type represents a distinct failure mode.
"""

from typing import Any


class ReorderError(Exception):
    """Base exception for all uuid_reorder errors."""

    def __init__(self, message: str, context: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.context = context or {}

    def __str__(self) -> str:
        if self.context:
            context_str = ", ".join(f"{k}={v!r}" for k, v in self.context.items())
            return f"{self.message} [{context_str}]"
        return self.message


class InvalidVersionError(ReorderError):
    """
    Raised when an identifier is not a version 1 (time-based) UUID.

    Only version 1 identifiers carry the timestamp layout the codec
    rearranges, so anything else is rejected rather than transformed.
    """

    def __init__(self, version: int) -> None:
        super().__init__(
            f"Input UUID was version {version}, expected version 1",
            context={"version": version},
        )
        self.version = version


class OutOfRangeError(ReorderError):
    """
    Raised when a timestamp does not fit the 60-bit UUID counter.

    The value is never clamped: a clamped bound would no longer
    order correctly against real identifiers.
    """

    def __init__(self, value: Any, maximum: Any, message: str | None = None) -> None:
        super().__init__(
            message or f"Timestamp {value} overflows the 60-bit UUID timestamp",
            context={"value": value, "maximum": maximum},
        )
        self.value = value
        self.maximum = maximum


class ValidationError(ReorderError):
    """
    Raised when input validation fails.

    This includes words wider than 64 bits, byte strings of the
    wrong length, unparsable UUID text and malformed timestamps.
    """

    def __init__(
        self, message: str, field: str | None = None, value: Any = None
    ) -> None:
        context = {}
        if field is not None:
            context["field"] = field
        if value is not None:
            context["value"] = repr(value)[:100]
        super().__init__(message, context=context)
        self.field = field
        self.value = value
