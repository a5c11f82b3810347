"""Pytest fixtures for all tests."""

import io

import pytest

from core.ulid import Ulid
from generation.generator import MonotonicGenerator, RandomGenerator
from generation.sources import constant_clock, constant_random
from internal.logging import LogLevel, StructuredLogger
from service.ulid_service import UlidService

KNOWN_ULID = "01ARZ3NDEKTSV4RRFFQ69G5FAV"
FIXED_TIMESTAMP = 1702300800000


@pytest.fixture
def known_ulid():
    """Reference ULID from the ULID format description."""
    return Ulid.from_string(KNOWN_ULID)


@pytest.fixture
def fixed_timestamp():
    return FIXED_TIMESTAMP


@pytest.fixture
def fixed_randomness():
    return bytes([0x42] * 10)


@pytest.fixture
def random_generator(fixed_timestamp, fixed_randomness):
    """Random generator with fixed clock and randomness."""
    return RandomGenerator(constant_random(fixed_randomness), constant_clock(fixed_timestamp))


@pytest.fixture
def monotonic_generator(fixed_timestamp):
    """Monotonic generator stuck on one millisecond, zero randomness."""
    return MonotonicGenerator(constant_random(bytes(10)), constant_clock(fixed_timestamp))


@pytest.fixture
async def service(random_generator):
    return UlidService(random_generator)


@pytest.fixture
def log_stream():
    """Capture structured log output at DEBUG."""
    stream = io.StringIO()
    StructuredLogger.configure(min_level=LogLevel.DEBUG, stream=stream)
    yield stream
    StructuredLogger.configure()
