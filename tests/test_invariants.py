"""
test_invariants.py - Tests for the version guard and counter range checks.
"""

import uuid

import pytest

from uuid_reorder import Identifier, InvalidVersionError, OutOfRangeError, ReorderError
from uuid_reorder.invariants import Invariants


class TestVersionGuard:
    """Tests for the version 1 precondition."""

    def test_expected_version_is_nibble_value(self):
        """The guard compares the unshifted nibble, not the placed pattern."""
        assert Invariants.EXPECTED_VERSION == 1
        assert Identifier(0x1000, 0).version == Invariants.EXPECTED_VERSION

    def test_version_one_passes(self):
        identifier = Identifier.parse("0d0b40f8-e965-11e8-88b6-ac7ba1c62b04")
        assert Invariants.version_error(identifier) is None
        Invariants.assert_version_one(identifier)

    @pytest.mark.parametrize("version", [0] + list(range(2, 16)))
    def test_failure_is_returned(self, version):
        """version_error hands back the failure without raising."""
        identifier = Identifier(version << 12, 0)
        error = Invariants.version_error(identifier)
        assert isinstance(error, InvalidVersionError)
        assert error.version == version

    def test_failure_is_raised(self):
        identifier = Identifier.from_uuid(uuid.uuid4())
        with pytest.raises(InvalidVersionError) as exc_info:
            Invariants.assert_version_one(identifier)
        assert exc_info.value.version == 4
        assert exc_info.value.context == {"version": 4}

    def test_only_version_bits_matter(self):
        """Timestamp and low-word bits do not affect the check."""
        identifier = Identifier(0xFFFF_FFFF_FFFF_1FFF, (1 << 64) - 1)
        assert Invariants.version_error(identifier) is None


class TestTickRange:
    """Tests for the 60-bit counter range check."""

    @pytest.mark.parametrize("ticks", [0, 1, (1 << 60) - 1])
    def test_in_range(self, ticks):
        Invariants.assert_ticks_in_range(ticks)

    @pytest.mark.parametrize("ticks", [-1, 1 << 60])
    def test_out_of_range(self, ticks):
        with pytest.raises(OutOfRangeError) as exc_info:
            Invariants.assert_ticks_in_range(ticks)
        assert exc_info.value.maximum == (1 << 60) - 1


class TestErrors:
    """Tests for error hierarchy and rendering."""

    def test_common_base(self):
        assert issubclass(InvalidVersionError, ReorderError)
        assert issubclass(OutOfRangeError, ReorderError)

    def test_str_includes_context(self):
        assert str(InvalidVersionError(4)) == (
            "Input UUID was version 4, expected version 1 [version=4]"
        )

    def test_str_without_context(self):
        assert str(ReorderError("plain")) == "plain"
