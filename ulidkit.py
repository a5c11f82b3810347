"""ulidkit - Universally Unique Lexicographically Sortable Identifiers."""

from codec.base32 import MAX_TIMESTAMP, canonicalize, is_valid, validate
from core.errors import (
    DecodeError,
    InvalidByteLength,
    InvalidCharacter,
    InvalidLength,
    RandomnessOverflow,
    TimestampOverflow,
    UlidError,
)
from core.ulid import Ulid
from generation.generator import (
    MonotonicGenerator,
    RandomGenerator,
    create_generator,
    monotonic_default,
    random_default,
)
from service.ulid_service import UlidService

__version__ = "1.0.0"

__all__ = [
    "MAX_TIMESTAMP",
    "canonicalize",
    "is_valid",
    "validate",
    "DecodeError",
    "InvalidByteLength",
    "InvalidCharacter",
    "InvalidLength",
    "RandomnessOverflow",
    "TimestampOverflow",
    "UlidError",
    "Ulid",
    "MonotonicGenerator",
    "RandomGenerator",
    "create_generator",
    "monotonic_default",
    "random_default",
    "UlidService",
]
