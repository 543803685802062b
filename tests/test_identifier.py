"""
test_identifier.py - Tests for the Identifier value type.
"""

import uuid

import pytest

from uuid_reorder import Identifier, ValidationError


class TestConstruction:
    """Tests for building identifiers."""

    def test_words_from_uuid(self):
        """high and low are the logical halves of the 128-bit value."""
        value = uuid.UUID("0d0b40f8-e965-11e8-88b6-ac7ba1c62b04")
        identifier = Identifier.from_uuid(value)
        assert identifier.high == 0x0D0B40F8_E965_11E8
        assert identifier.low == 0x88B6_AC7B_A1C6_2B04

    def test_uuid_round_trip(self):
        value = uuid.uuid1()
        assert Identifier.from_uuid(value).to_uuid() == value

    def test_bytes_round_trip(self):
        value = uuid.uuid4()
        identifier = Identifier.from_bytes(value.bytes)
        assert identifier.bytes == value.bytes
        assert identifier.int == value.int

    def test_parse_and_str(self):
        text = "1e8e9650-d0b4-10f8-88b6-ac7ba1c62b04"
        assert str(Identifier.parse(text)) == text
        assert str(Identifier.parse(text.upper())) == text

    def test_version(self):
        assert Identifier.parse("0d0b40f8-e965-11e8-88b6-ac7ba1c62b04").version == 1
        assert Identifier.from_uuid(uuid.uuid4()).version == 4

    def test_immutable(self):
        identifier = Identifier(1, 2)
        with pytest.raises(AttributeError):
            identifier.high = 3


class TestValidation:
    """Tests for rejected inputs."""

    @pytest.mark.parametrize("high, low", [(-1, 0), (1 << 64, 0), (0, -1), (0, 1 << 64)])
    def test_words_must_fit_64_bits(self, high, low):
        with pytest.raises(ValidationError):
            Identifier(high, low)

    def test_words_must_be_ints(self):
        with pytest.raises(ValidationError):
            Identifier("0", 0)

    @pytest.mark.parametrize("length", [0, 15, 17])
    def test_bytes_length(self, length):
        with pytest.raises(ValidationError):
            Identifier.from_bytes(b"\x00" * length)

    def test_unparsable_text(self):
        with pytest.raises(ValidationError) as exc_info:
            Identifier.parse("not-a-uuid")
        assert exc_info.value.field == "text"


class TestOrdering:
    """Tests that comparison follows the unsigned 128-bit value."""

    def test_order_matches_bytes(self):
        values = [uuid.uuid4() for _ in range(200)]
        identifiers = sorted(Identifier.from_uuid(v) for v in values)
        assert [i.bytes for i in identifiers] == sorted(v.bytes for v in values)

    def test_high_word_dominates(self):
        assert Identifier(1, 0) > Identifier(0, (1 << 64) - 1)

    def test_top_bit_is_unsigned(self):
        """A set top bit sorts last, not first."""
        assert Identifier(1 << 63, 0) > Identifier((1 << 63) - 1, 0)
