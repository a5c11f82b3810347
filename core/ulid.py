"""ULID value type."""

from functools import total_ordering

from codec import base32
from core.errors import UlidError
from utils.timestamp import format_timestamp, to_datetime


@total_ordering
class Ulid:
    """Immutable, validated 26-character ULID.

    ``Ulid(text)`` parses and raises on invalid input; ``Ulid.parse`` returns
    the error instead. The stored text is uppercase with O/I/L rewritten to
    0/1/1, so ordering by it matches unsigned comparison of the 128-bit value.
    """

    __slots__ = ("_value",)

    def __init__(self, text):
        result = base32.canonicalize(text)
        if isinstance(result, UlidError):
            raise result
        object.__setattr__(self, "_value", result)

    @classmethod
    def _trusted(cls, canonical):
        ulid = object.__new__(cls)
        object.__setattr__(ulid, "_value", canonical)
        return ulid

    @classmethod
    def parse(cls, text):
        """Ulid for text, or the DecodeError explaining why not."""
        result = base32.canonicalize(text)
        if isinstance(result, UlidError):
            return result
        return cls._trusted(result)

    @classmethod
    def parse_or_none(cls, text):
        result = cls.parse(text)
        return result if isinstance(result, Ulid) else None

    @classmethod
    def from_string(cls, text):
        """Parse or raise the DecodeError."""
        return cls(text)

    @classmethod
    def parse_bytes(cls, data):
        result = base32.from_bytes(data)
        if isinstance(result, UlidError):
            return result
        return cls._trusted(result)

    @classmethod
    def from_bytes(cls, data):
        result = cls.parse_bytes(data)
        if isinstance(result, UlidError):
            raise result
        return result

    @classmethod
    def from_parts(cls, timestamp, randomness):
        return cls._trusted(base32.encode(timestamp, randomness))

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name):
        raise AttributeError(f"{type(self).__name__} is immutable")

    @property
    def value(self):
        return self._value

    @property
    def timestamp(self):
        return base32.decode_timestamp(self._value)

    @property
    def randomness(self):
        return base32.decode_randomness(self._value)

    @property
    def datetime(self):
        """UTC datetime, or None when the timestamp is past year 9999."""
        return to_datetime(self.timestamp)

    def isoformat(self):
        return format_timestamp(self.timestamp)

    def to_bytes(self):
        return base32.to_bytes(self._value)

    def __bytes__(self):
        return self.to_bytes()

    def __int__(self):
        return int.from_bytes(self.to_bytes(), "big")

    def __str__(self):
        return self._value

    def __repr__(self):
        return f"Ulid('{self._value}')"

    def __eq__(self, other):
        if not isinstance(other, Ulid):
            return NotImplemented
        return self._value == other._value

    def __lt__(self, other):
        if not isinstance(other, Ulid):
            return NotImplemented
        return self._value < other._value

    def __hash__(self):
        return hash(self._value)

    def __reduce__(self):
        return (Ulid, (self._value,))
