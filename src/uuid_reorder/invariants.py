"""
invariants.py - Preconditions shared by the reordering operations.

Every operation that reads an existing identifier checks its version
first. A version 1 tag is what makes the timestamp bit layout valid,
so the check is a hard precondition and never a correction.
"""

import logging

from uuid_reorder.config import MAX_TICKS, VERSION_ONE, VERSION_SHIFT
from uuid_reorder.errors import InvalidVersionError, OutOfRangeError
from uuid_reorder.identifier import Identifier

logger = logging.getLogger(__name__)


class Invariants:
    """
    Structural checks over identifiers and timestamp counters.

    The *_error methods return the failure instead of raising it so
    callers can inspect a result without exception handling.
    """

    EXPECTED_VERSION = VERSION_ONE >> VERSION_SHIFT

    @staticmethod
    def version_error(identifier: Identifier) -> InvalidVersionError | None:
        """
        Check that an identifier is tagged version 1.

        Args:
            identifier: Identifier in either layout (the version nibble
                occupies the same bits in both)

        Returns:
            InvalidVersionError carrying the observed version, or None
        """
        version = identifier.version
        if version != Invariants.EXPECTED_VERSION:
            return InvalidVersionError(version)
        return None

    @staticmethod
    def assert_version_one(identifier: Identifier) -> None:
        """
        Raising form of version_error.

        Raises:
            InvalidVersionError: If the version nibble is not 1
        """
        error = Invariants.version_error(identifier)
        if error is not None:
            logger.debug("Rejected %s: version %d", identifier, error.version)
            raise error

    @staticmethod
    def assert_ticks_in_range(ticks: int) -> None:
        """
        Check a timestamp counter fits in 60 unsigned bits.

        Raises:
            OutOfRangeError: If ticks is negative or above 2^60 - 1
        """
        if ticks < 0 or ticks > MAX_TICKS:
            logger.debug("Rejected timestamp counter %d", ticks)
            raise OutOfRangeError(
                ticks,
                MAX_TICKS,
                f"Timestamp counter {ticks} does not fit in 60 bits",
            )
