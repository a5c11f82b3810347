"""Unit tests for the ULID codec."""

import random

import pytest

from codec.base32 import (
    MAX_TIMESTAMP,
    canonicalize,
    decode_randomness,
    decode_timestamp,
    encode,
    from_bytes,
    increment_randomness,
    is_valid,
    to_bytes,
    validate,
)
from core.errors import (
    InvalidByteLength,
    InvalidCharacter,
    InvalidLength,
    RandomnessOverflow,
    TimestampOverflow,
)

KNOWN = "01ARZ3NDEKTSV4RRFFQ69G5FAV"
KNOWN_BYTES = bytes.fromhex("01563e3ab5d3d6764c61efb99302bd5b")


class TestValidate:
    """Tests for validate() and is_valid()."""

    @pytest.mark.parametrize("text", [KNOWN, "01BX5ZZKBKACTAV9WEVGEMMVRY", "7ZZZZZZZZZZZZZZZZZZZZZZZZZ"])
    def test_accepts_valid(self, text):
        """Valid ULIDs come back canonical."""
        assert validate(text) == text

    def test_rejects_short(self):
        """10 characters is InvalidLength(10)."""
        assert validate("01ARZ3NDEK") == InvalidLength(10)

    def test_rejects_long(self):
        """27 characters is InvalidLength(27)."""
        assert validate(KNOWN + "X") == InvalidLength(27)

    def test_rejects_empty(self):
        assert validate("") == InvalidLength(0)

    def test_rejects_invalid_character(self):
        """Bad character reports char and position."""
        result = validate("01ARZ3NDEKTSV4RRFFQ69G5FA!")
        assert result == InvalidCharacter("!", 25)
        assert result.position == 25

    def test_reports_first_invalid_character(self):
        """Only the first offending position is reported."""
        assert validate("0U!RZ3NDEKTSV4RRFFQ69G5FAV") == InvalidCharacter("U", 1)

    def test_reports_original_case(self):
        """Reported char comes from the original input."""
        assert validate("01ARZ3NDEKTSV4RRFFQ69G5FAu") == InvalidCharacter("u", 25)

    def test_rejects_non_ascii(self):
        result = validate("01ARZ3NDEKTSV4RRFFQ69G5FAé")
        assert isinstance(result, InvalidCharacter)
        assert result.char == "é"

    def test_rejects_timestamp_overflow(self):
        """First symbol above 7 overflows 48 bits."""
        assert validate("8ZZZZZZZZZZZZZZZZZZZZZZZZZ") == TimestampOverflow()

    def test_length_checked_before_characters(self):
        assert validate("!!!") == InvalidLength(3)

    def test_characters_checked_before_overflow(self):
        assert validate("8ZZZZZZZZZZZZZZZZZZZZZZZZ!") == InvalidCharacter("!", 25)

    def test_case_insensitive(self):
        """Upper, lower and mixed case validate to the same value."""
        upper = validate(KNOWN)
        assert validate(KNOWN.lower()) == upper
        assert validate("01ArZ3nDeKtSv4RrFfQ69g5FaV") == upper

    def test_aliases_accepted(self):
        """Alias letters pass and are only uppercased."""
        assert validate("oiL" + "0" * 23) == "OIL" + "0" * 23

    def test_canonicalize_rewrites_aliases(self):
        """canonicalize also maps O/I/L to the digits they decode to."""
        assert canonicalize("oiL" + "0" * 23) == "011" + "0" * 23
        assert canonicalize(KNOWN.lower()) == KNOWN

    def test_canonicalize_alias_roundtrip(self):
        text = canonicalize("0000000000000000000000000O")
        assert from_bytes(to_bytes(text)) == text
        assert encode(decode_timestamp(text), decode_randomness(text)) == text

    def test_canonicalize_returns_errors(self):
        assert canonicalize("01ARZ3NDEK") == InvalidLength(10)
        assert canonicalize("8ZZZZZZZZZZZZZZZZZZZZZZZZZ") == TimestampOverflow()

    def test_is_valid(self):
        assert is_valid(KNOWN)
        assert not is_valid("invalid")
        assert not is_valid("01ARZ3NDEK")


class TestEncodeDecode:
    """Tests for encode() and the decode helpers."""

    def test_encode_length(self):
        assert len(encode(1702300800000, bytes([0x42] * 10))) == 26

    def test_encode_vector(self):
        """Fixed timestamp and 0x42 randomness encode to a known string."""
        assert encode(1702300800000, [0x42] * 10) == "01HHCGHN0089144GJ289144GJ2"

    def test_vector_decodes_back(self):
        text = encode(1702300800000, [0x42] * 10)
        assert decode_timestamp(text) == 1702300800000
        assert decode_randomness(text) == bytes([0x42] * 10)

    def test_encode_bounds(self):
        assert encode(0, bytes(10)) == "0" * 26
        assert encode(MAX_TIMESTAMP, b"\xff" * 10) == "7" + "Z" * 25

    def test_encode_rejects_bad_input(self):
        with pytest.raises(ValueError):
            encode(MAX_TIMESTAMP + 1, bytes(10))
        with pytest.raises(ValueError):
            encode(-1, bytes(10))
        with pytest.raises(ValueError):
            encode(0, bytes(9))

    def test_decode_known_timestamp(self):
        assert decode_timestamp(KNOWN) == 1469922850259

    def test_decode_known_randomness(self):
        assert decode_randomness(KNOWN) == KNOWN_BYTES[6:]

    def test_decode_aliases(self):
        """O and I/L decode as 0 and 1."""
        assert decode_timestamp("OOOOOOOOOI" + "0" * 16) == 1
        assert decode_timestamp("000000000L" + "0" * 16) == 1

    def test_text_roundtrip(self):
        """encode(decode(t)) reproduces canonical text."""
        rng = random.Random(7)
        for _ in range(50):
            text = encode(rng.randint(0, MAX_TIMESTAMP), rng.randbytes(10))
            assert encode(decode_timestamp(text), decode_randomness(text)) == text

    def test_ordering_follows_timestamp(self):
        """Earlier timestamp sorts first whatever the randomness."""
        assert encode(1000, b"\xff" * 10) < encode(1001, bytes(10))
        assert encode(0, b"\xff" * 10) < encode(MAX_TIMESTAMP, bytes(10))


class TestBytes:
    """Tests for to_bytes() and from_bytes()."""

    def test_to_bytes_known(self):
        assert to_bytes(KNOWN) == KNOWN_BYTES

    def test_to_bytes_length(self):
        assert len(to_bytes(KNOWN)) == 16

    def test_from_bytes_known(self):
        assert from_bytes(KNOWN_BYTES) == KNOWN

    def test_roundtrip_known(self):
        assert from_bytes(to_bytes(KNOWN)) == KNOWN

    def test_bytes_roundtrip(self):
        rng = random.Random(11)
        for _ in range(50):
            data = rng.randbytes(16)
            assert to_bytes(from_bytes(data)) == data

    def test_from_bytes_rejects_length(self):
        assert from_bytes(bytes(10)) == InvalidByteLength(10)
        assert from_bytes(bytes(17)) == InvalidByteLength(17)

    def test_from_bytes_bounds(self):
        assert from_bytes(bytes(16)) == "0" * 26
        assert from_bytes(b"\xff" * 16) == "7" + "Z" * 25

    def test_from_bytes_accepts_bytearray(self):
        assert from_bytes(bytearray(KNOWN_BYTES)) == KNOWN


class TestIncrementRandomness:
    """Tests for increment_randomness()."""

    def test_increment_zero(self):
        assert increment_randomness(bytes(10)) == bytes(9) + b"\x01"

    def test_increment_carries(self):
        assert increment_randomness(bytes(8) + b"\x00\xff") == bytes(8) + b"\x01\x00"
        assert increment_randomness(b"\x00" + b"\xff" * 9) == b"\x01" + bytes(9)

    def test_increment_overflow(self):
        assert increment_randomness(b"\xff" * 10) == RandomnessOverflow()

    def test_increment_does_not_mutate(self):
        data = bytearray(b"\x00" * 9 + b"\xff")
        increment_randomness(data)
        assert data == bytearray(b"\x00" * 9 + b"\xff")

    def test_incremented_sorts_higher(self):
        randomness = bytes.fromhex("0102030405060708ffff")
        incremented = increment_randomness(randomness)
        assert encode(5, randomness) < encode(5, incremented)
