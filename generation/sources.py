"""
Randomness and clock sources consumed by the generators.

Each source is a zero-argument callable: randomness sources return 10
bytes, clocks return milliseconds since the Unix epoch.
"""

import os
import random

from utils.timestamp import now_millis

RANDOMNESS_LEN = 10


def secure_random():
    """OS CSPRNG; the production source."""
    def source():
        return os.urandom(RANDOMNESS_LEN)
    return source


def constant_random(data):
    """Always the same bytes, zero-padded or truncated to 10."""
    fixed = bytes(data)[:RANDOMNESS_LEN].ljust(RANDOMNESS_LEN, b"\x00")

    def source():
        return bytes(fixed)
    return source


def seeded_random(seed):
    """Deterministic pseudo-random bytes. Not for production ids."""
    rng = random.Random(seed)

    def source():
        return rng.randbytes(RANDOMNESS_LEN)
    return source


def system_clock():
    return now_millis


def constant_clock(millis):
    def clock():
        return millis
    return clock


def sequence_clock(values):
    """Yields values in order, then keeps returning the last one."""
    remaining = list(values)
    if not remaining:
        raise ValueError("sequence_clock needs at least one value")
    last = [remaining[0]]

    def clock():
        if remaining:
            last[0] = remaining.pop(0)
        return last[0]
    return clock
