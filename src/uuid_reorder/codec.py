"""
codec.py - Reordering between RFC 4122 and sortable version 1 layouts.

The RFC 4122 version 1 UUID stores its 60-bit timestamp middle-endian:

     0                   1                   2                   3
     0 1 2 3 4 5 6 7 8 9 0 1 2 3 4 5 6 7 8 9 0 1 2 3 4 5 6 7 8 9 0 1
    +-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+
    |                          time_low                             |
    +-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+
    |       time_mid                |  version  |      time_hi      |
    +-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+
    |clk_seq_hi_res |  clk_seq_low  |         node (0-1)            |
    +-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+
    |                         node (2-5)                            |
    +-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+

so raw byte order is unrelated to creation order. The sortable layout
packs the timestamp big-endian around the version nibble, which stays
where it is:

    +-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+
    |        time_hi        |           time_mid            |tl(0:3)|
    +-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+
    |        time_low(4:19)         |version|    time_low(20:31)    |
    +-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+

The low word (variant, clock sequence, node) is never touched. The
clock sequence is not formally monotonic so it is not reordered.

If every version 1 UUID an application stores is reordered, collision
risk is unchanged. Reordering only some of them can in theory collide
with an unreordered UUID, never with another UUID version.

Hibernate's CustomVersionOneStrategy puts the machine identifier in
the most significant bytes and counts milliseconds since the Unix
epoch. That timestamp is not bit compatible with the RFC's 100ns
ticks, so no converter for it is provided.
"""

from typing import Final

from uuid_reorder.config import VERSION_ONE
from uuid_reorder.identifier import (
    Identifier,
    IdentifierLike,
    as_identifier,
    same_kind,
)
from uuid_reorder.invariants import Invariants

# Standard (RFC) layout of the high word
STANDARD_TIME_LOW_HI_MASK: Final[int]  = 0xFFFF_F000_0000_0000  # time_low bits 31-12
STANDARD_TIME_LOW_HI_SHIFT: Final[int] = 44
STANDARD_TIME_LOW_LO_MASK: Final[int]  = 0x0000_0FFF_0000_0000  # time_low bits 11-0
STANDARD_TIME_LOW_LO_SHIFT: Final[int] = 32
STANDARD_TIME_MID_MASK: Final[int]     = 0x0000_0000_FFFF_0000
STANDARD_TIME_MID_SHIFT: Final[int]    = 16
STANDARD_TIME_HI_MASK: Final[int]      = 0x0000_0000_0000_0FFF
STANDARD_TIME_HI_SHIFT: Final[int]     = 0

# Sortable (big-endian) layout of the high word
SORTABLE_TIME_HI_MASK: Final[int]      = 0xFFF0_0000_0000_0000
SORTABLE_TIME_HI_SHIFT: Final[int]     = 52
SORTABLE_TIME_MID_MASK: Final[int]     = 0x000F_FFF0_0000_0000
SORTABLE_TIME_MID_SHIFT: Final[int]    = 36
SORTABLE_TIME_LOW_HI_MASK: Final[int]  = 0x0000_000F_FFFF_0000  # time_low bits 31-12
SORTABLE_TIME_LOW_HI_SHIFT: Final[int] = 16
SORTABLE_TIME_LOW_LO_MASK: Final[int]  = 0x0000_0000_0000_0FFF  # time_low bits 11-0
SORTABLE_TIME_LOW_LO_SHIFT: Final[int] = 0

# Widths of the sub-fields inside the 60-bit counter
TIME_LOW_LO_BITS: Final[int] = 12
TIME_LOW_BITS: Final[int] = 32
TIME_MID_BITS: Final[int] = 16


def _standard_fields(high: int) -> tuple[int, int, int, int]:
    """Split a standard-order high word into (time_hi, time_mid, time_low_hi, time_low_lo)."""
    return (
        (high & STANDARD_TIME_HI_MASK) >> STANDARD_TIME_HI_SHIFT,
        (high & STANDARD_TIME_MID_MASK) >> STANDARD_TIME_MID_SHIFT,
        (high & STANDARD_TIME_LOW_HI_MASK) >> STANDARD_TIME_LOW_HI_SHIFT,
        (high & STANDARD_TIME_LOW_LO_MASK) >> STANDARD_TIME_LOW_LO_SHIFT,
    )


def _sortable_fields(high: int) -> tuple[int, int, int, int]:
    """Split a sortable-order high word into (time_hi, time_mid, time_low_hi, time_low_lo)."""
    return (
        (high & SORTABLE_TIME_HI_MASK) >> SORTABLE_TIME_HI_SHIFT,
        (high & SORTABLE_TIME_MID_MASK) >> SORTABLE_TIME_MID_SHIFT,
        (high & SORTABLE_TIME_LOW_HI_MASK) >> SORTABLE_TIME_LOW_HI_SHIFT,
        (high & SORTABLE_TIME_LOW_LO_MASK) >> SORTABLE_TIME_LOW_LO_SHIFT,
    )


def _ticks(time_hi: int, time_mid: int, time_low_hi: int, time_low_lo: int) -> int:
    time_low = (time_low_hi << TIME_LOW_LO_BITS) | time_low_lo
    return (time_hi << (TIME_MID_BITS + TIME_LOW_BITS)) | (time_mid << TIME_LOW_BITS) | time_low


def to_sortable(identifier: IdentifierLike) -> IdentifierLike:
    """
    Reorder an RFC 4122 version 1 UUID into a big-endian timestamp.

    Args:
        identifier: Version 1 Identifier or uuid.UUID in RFC order

    Returns:
        Version 1 identifier of the same type with timestamp bits in
        big-endian order and the low word unchanged

    Raises:
        InvalidVersionError: If the input is not version 1
    """
    rfc = as_identifier(identifier)
    Invariants.assert_version_one(rfc)

    time_hi, time_mid, time_low_hi, time_low_lo = _standard_fields(rfc.high)
    high = (
        VERSION_ONE
        | time_hi << SORTABLE_TIME_HI_SHIFT
        | time_mid << SORTABLE_TIME_MID_SHIFT
        | time_low_hi << SORTABLE_TIME_LOW_HI_SHIFT
        | time_low_lo << SORTABLE_TIME_LOW_LO_SHIFT
    )
    return same_kind(identifier, Identifier(high, rfc.low))


def to_standard(identifier: IdentifierLike) -> IdentifierLike:
    """
    Reorder a version 1 UUID with a big-endian timestamp to RFC 4122 order.

    Exact inverse of to_sortable.

    Raises:
        InvalidVersionError: If the input is not version 1
    """
    sortable = as_identifier(identifier)
    Invariants.assert_version_one(sortable)

    time_hi, time_mid, time_low_hi, time_low_lo = _sortable_fields(sortable.high)
    high = (
        VERSION_ONE
        | time_low_hi << STANDARD_TIME_LOW_HI_SHIFT
        | time_low_lo << STANDARD_TIME_LOW_LO_SHIFT
        | time_mid << STANDARD_TIME_MID_SHIFT
        | time_hi << STANDARD_TIME_HI_SHIFT
    )
    return same_kind(identifier, Identifier(high, sortable.low))


def standard_ticks(identifier: IdentifierLike) -> int:
    """
    Read the 60-bit timestamp counter of an RFC-order version 1 UUID.

    Raises:
        InvalidVersionError: If the input is not version 1
    """
    rfc = as_identifier(identifier)
    Invariants.assert_version_one(rfc)
    return _ticks(*_standard_fields(rfc.high))


def sortable_ticks(identifier: IdentifierLike) -> int:
    """Read the 60-bit timestamp counter of a sortable-order version 1 UUID."""
    sortable = as_identifier(identifier)
    Invariants.assert_version_one(sortable)
    return _ticks(*_sortable_fields(sortable.high))
