"""ULID error variants.

Codec functions return these as values; the boundary API raises them.
"""

from typing import Union

MAX_TIMESTAMP_TEXT = "281474976710655"


class UlidError(Exception):
    """Base error carrying a message and the offending values."""

    def __init__(self, message, context=None):
        super().__init__(message)
        self.message = message
        self.context = context or {}

    def __eq__(self, other):
        if type(self) is not type(other):
            return NotImplemented
        return self.context == other.context

    def __hash__(self):
        return hash((type(self).__name__, tuple(sorted(self.context.items()))))

    def __repr__(self):
        args = ", ".join(f"{key}={value!r}" for key, value in self.context.items())
        return f"{type(self).__name__}({args})"


class InvalidLength(UlidError):
    """Text is not 26 characters."""

    def __init__(self, actual):
        super().__init__(f"ULID must be 26 characters, got {actual}", context={"actual": actual})
        self.actual = actual


class InvalidCharacter(UlidError):
    """Character outside the decode alphabet; position is zero-based."""

    def __init__(self, char, position):
        super().__init__(
            f"Invalid character '{char}' at position {position}",
            context={"char": char, "position": position},
        )
        self.char = char
        self.position = position


class TimestampOverflow(UlidError):
    def __init__(self):
        super().__init__(f"Timestamp exceeds maximum value ({MAX_TIMESTAMP_TEXT})")


class InvalidByteLength(UlidError):
    """Binary input is not 16 bytes."""

    def __init__(self, actual):
        super().__init__(f"ULID must be 16 bytes, got {actual}", context={"actual": actual})
        self.actual = actual


class RandomnessOverflow(UlidError):
    """All 2^80 randomness values used up within one timestamp."""

    def __init__(self):
        super().__init__("Randomness overflow during monotonic generation")


DecodeError = Union[InvalidLength, InvalidCharacter, TimestampOverflow, InvalidByteLength]
