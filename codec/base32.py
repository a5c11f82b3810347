"""
ULID codec.

Converts between the 26-character text form, the 16-byte binary form and
the (timestamp, randomness) parts. Operations that can fail return an error
value from core.errors instead of raising.
"""

from codec.alphabet import ENCODING, INVALID, decode_char, replace_aliases
from core.errors import (
    InvalidByteLength,
    InvalidCharacter,
    InvalidLength,
    RandomnessOverflow,
    TimestampOverflow,
)

MAX_TIMESTAMP = 0xFFFFFFFFFFFF  # 2^48 - 1
ULID_STRING_LENGTH = 26
ULID_BYTE_LENGTH = 16
TIMESTAMP_CHARS = 10
TIMESTAMP_BYTES = 6
RANDOMNESS_BYTES = 10
# 8 * 32^25 is already past MAX_TIMESTAMP
MAX_FIRST_CHAR_VALUE = 7


def validate(text):
    """Return the canonical (uppercase) form of text, or a DecodeError.

    Rules are checked in order: length, characters, timestamp range.
    """
    if len(text) != ULID_STRING_LENGTH:
        return InvalidLength(len(text))

    for position, char in enumerate(text):
        if decode_char(char) == INVALID:
            return InvalidCharacter(char, position)

    canonical = text.upper()
    if decode_char(canonical[0]) > MAX_FIRST_CHAR_VALUE:
        return TimestampOverflow()

    return canonical


def canonicalize(text):
    """Like validate, but with O/I/L also rewritten to 0/1/1.

    Two texts canonicalize equal exactly when they decode to the same bytes.
    """
    result = validate(text)
    if isinstance(result, str):
        return replace_aliases(result)
    return result


def is_valid(text):
    return isinstance(validate(text), str)


def encode(timestamp, randomness):
    """Encode a 48-bit timestamp and 10 random bytes as 26 characters."""
    data = bytes(randomness)
    if not 0 <= timestamp <= MAX_TIMESTAMP:
        raise ValueError(f"timestamp out of range: {timestamp}")
    if len(data) != RANDOMNESS_BYTES:
        raise ValueError(f"randomness must be {RANDOMNESS_BYTES} bytes, got {len(data)}")

    chars = [ENCODING[(timestamp >> shift) & 0x1F] for shift in range(45, -1, -5)]

    bit_buffer = 0
    bit_count = 0
    for byte in data:
        bit_buffer = (bit_buffer << 8) | byte
        bit_count += 8
        while bit_count >= 5:
            bit_count -= 5
            chars.append(ENCODING[(bit_buffer >> bit_count) & 0x1F])
        bit_buffer &= (1 << bit_count) - 1

    return "".join(chars)


def decode_timestamp(canonical):
    """Timestamp of an already validated ULID string."""
    timestamp = 0
    for char in canonical[:TIMESTAMP_CHARS]:
        timestamp = (timestamp << 5) | decode_char(char)
    return timestamp


def decode_randomness(canonical):
    """The 10 randomness bytes of an already validated ULID string."""
    out = bytearray()
    bit_buffer = 0
    bit_count = 0
    for char in canonical[TIMESTAMP_CHARS:ULID_STRING_LENGTH]:
        bit_buffer = (bit_buffer << 5) | decode_char(char)
        bit_count += 5
        while bit_count >= 8 and len(out) < RANDOMNESS_BYTES:
            bit_count -= 8
            out.append((bit_buffer >> bit_count) & 0xFF)
        bit_buffer &= (1 << bit_count) - 1
    return bytes(out)


def to_bytes(canonical):
    """16 bytes: big-endian timestamp followed by randomness."""
    timestamp = decode_timestamp(canonical)
    return timestamp.to_bytes(TIMESTAMP_BYTES, "big") + decode_randomness(canonical)


def from_bytes(data):
    """Canonical ULID string for 16 bytes, or a DecodeError."""
    data = bytes(data)
    if len(data) != ULID_BYTE_LENGTH:
        return InvalidByteLength(len(data))

    timestamp = int.from_bytes(data[:TIMESTAMP_BYTES], "big")
    if timestamp > MAX_TIMESTAMP:
        return TimestampOverflow()

    return encode(timestamp, data[TIMESTAMP_BYTES:])


def increment_randomness(randomness):
    """Big-endian +1 with carry. Returns new bytes or RandomnessOverflow."""
    result = bytearray(randomness)
    index = len(result) - 1
    carry = True
    while index >= 0 and carry:
        value = result[index] + 1
        result[index] = value & 0xFF
        carry = value > 0xFF
        index -= 1

    if carry:
        return RandomnessOverflow()
    return bytes(result)
