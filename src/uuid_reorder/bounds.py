"""
bounds.py - Range-scan boundaries for sortable version 1 UUIDs.

A bound packs an instant into the sortable layout with every other
variable bit cleared. Real generators never emit an all-zero clock
sequence together with an all-zero node, so the bound cannot collide
with a generated UUID and is safe as an inclusive or exclusive limit.
"""

import logging
from typing import Final

from uuid_reorder.config import VARIANT_RFC_4122, VERSION_ONE
from uuid_reorder.errors import OutOfRangeError
from uuid_reorder.identifier import Identifier
from uuid_reorder.invariants import Invariants
from uuid_reorder.timestamp import (
    GREGORIAN_EPOCH,
    MAX_TIMESTAMP,
    TimestampLike,
    as_timestamp,
)

logger = logging.getLogger(__name__)

# Counter bits above and below the version nibble's insertion point
ABOVE_VERSION_MASK: Final[int] = 0x0FFF_FFFF_FFFF_F000
BELOW_VERSION_MASK: Final[int] = 0x0000_0000_0000_0FFF
VERSION_GAP_BITS: Final[int] = 4


def lowest_bound(when: TimestampLike) -> Identifier:
    """
    Smallest sortable-order identifier for the given instant.

    The timestamp fills the timestamp bits in big-endian order, the
    version nibble is 1 and the low word holds only the RFC 4122
    variant bit.

    Args:
        when: Timestamp or datetime (naive datetimes are UTC)

    Returns:
        Identifier in sortable order

    Raises:
        OutOfRangeError: If when is after MAX_TIMESTAMP or before
            the Gregorian epoch
    """
    instant = as_timestamp(when)
    if instant > MAX_TIMESTAMP:
        logger.debug("Rejected bound for %r: after rollover", instant)
        raise OutOfRangeError(
            instant,
            MAX_TIMESTAMP,
            f"The provided timestamp {instant!r} overflows the 60-bit UUID timestamp",
        )
    if instant < GREGORIAN_EPOCH:
        logger.debug("Rejected bound for %r: before Gregorian epoch", instant)
        raise OutOfRangeError(
            instant,
            MAX_TIMESTAMP,
            f"The provided timestamp {instant!r} precedes the Gregorian epoch",
        )

    return lowest_bound_for_ticks(instant.ticks)


def lowest_bound_for_ticks(ticks: int) -> Identifier:
    """
    Smallest sortable-order identifier carrying a raw timestamp counter.

    Raises:
        OutOfRangeError: If ticks does not fit in 60 unsigned bits
    """
    Invariants.assert_ticks_in_range(ticks)
    above_version = ticks & ABOVE_VERSION_MASK
    below_version = ticks & BELOW_VERSION_MASK

    high = above_version << VERSION_GAP_BITS | VERSION_ONE | below_version
    return Identifier(high, VARIANT_RFC_4122)
