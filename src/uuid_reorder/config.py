"""
config.py - Configuration constants for uuid_reorder.

All configuration is immutable and defined at module level.
No mutable global state is permitted.
"""

from typing import Final

# Each identifier is handled as two logical 64-bit words
WORD_BITS: Final[int] = 64
WORD_MASK: Final[int] = (1 << WORD_BITS) - 1

# Version nibble sits at bits 15-12 of the high word in both layouts
VERSION_SHIFT: Final[int] = 12
VERSION_MASK: Final[int] = 0x0000_0000_0000_F000
VERSION_ONE: Final[int] = 0x0000_0000_0000_1000

# Low word of a range bound: RFC 4122 variant bit only, no clock or node
VARIANT_RFC_4122: Final[int] = 0x8000_0000_0000_0000

# The version 1 timestamp: 100ns ticks since 1582-10-15T00:00:00Z
TIMESTAMP_BITS: Final[int] = 60
MAX_TICKS: Final[int] = (1 << TIMESTAMP_BITS) - 1
TICKS_PER_SECOND: Final[int] = 10_000_000
NANOS_PER_TICK: Final[int] = 100
NANOS_PER_SECOND: Final[int] = 1_000_000_000

# Seconds between the Gregorian epoch and the Unix epoch
GREGORIAN_TO_UNIX_SECONDS: Final[int] = 12_219_292_800

# When the 60-bit counter rolls over: 5236-03-31T21:21:00.6846975Z
ROLLOVER_EPOCH_SECONDS: Final[int] = 103_072_857_660
ROLLOVER_NANOS: Final[int] = 684_697_500

# Environment variable read by the CLI for its default log level
LOG_LEVEL_ENV: Final[str] = "UUID_REORDER_LOG_LEVEL"
