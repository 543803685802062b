"""
uuid_reorder - Lexically sortable version 1 UUIDs

Reorders the timestamp bits of RFC 4122 version 1 UUIDs into big-endian
order so raw byte comparison follows creation time, converts them back
losslessly, and builds range-scan bounds for a given instant.
"""

from uuid_reorder.bounds import lowest_bound, lowest_bound_for_ticks
from uuid_reorder.codec import sortable_ticks, standard_ticks, to_sortable, to_standard
from uuid_reorder.errors import (
    ReorderError,
    InvalidVersionError,
    OutOfRangeError,
    ValidationError,
)
from uuid_reorder.identifier import Identifier
from uuid_reorder.invariants import Invariants
from uuid_reorder.timestamp import (
    GREGORIAN_EPOCH,
    MAX_TIMESTAMP,
    Timestamp,
    sortable_timestamp,
    standard_timestamp,
)

__version__ = "0.1.0"
__all__ = [
    # Core
    "to_sortable",
    "to_standard",
    "lowest_bound",
    "lowest_bound_for_ticks",
    "standard_ticks",
    "sortable_ticks",
    "standard_timestamp",
    "sortable_timestamp",
    "Invariants",
    # Values
    "Identifier",
    "Timestamp",
    "GREGORIAN_EPOCH",
    "MAX_TIMESTAMP",
    # Errors
    "ReorderError",
    "InvalidVersionError",
    "OutOfRangeError",
    "ValidationError",
]
