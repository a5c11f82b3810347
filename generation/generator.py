import threading
from codec.base32 import increment_randomness
from core.errors import RandomnessOverflow
from core.ulid import Ulid
from generation.sources import secure_random, system_clock
from generation.state import GeneratorState
from internal.logging import get_logger

class GeneratorMode:
    RANDOM = "random"
    MONOTONIC = "monotonic"

class RandomGenerator:
    """Fresh randomness for every id. No ordering within a millisecond."""

    mode = GeneratorMode.RANDOM

    def __init__(self, random_source, clock):
        self._random = random_source
        self._clock = clock

    def next(self):
        timestamp = self._clock()
        randomness = self._random()
        return Ulid.from_parts(timestamp, randomness)

class MonotonicGenerator:
    """Strictly increasing ids within one instance.

    Within a millisecond, or when the clock goes backwards, the previous
    timestamp is kept and the randomness is incremented by one.
    """

    mode = GeneratorMode.MONOTONIC

    def __init__(self, random_source, clock):
        self._random = random_source
        self._clock = clock
        self._lock = threading.Lock()
        self._state = GeneratorState()

    @property
    def state(self):
        return self._state

    def next(self):
        with self._lock:
            timestamp = self._clock()
            state = self._state

            if timestamp > state.last_timestamp:
                ulid = Ulid.from_parts(timestamp, self._random())
                if state.last_timestamp:
                    get_logger().debug("ulid tick", timestamp=timestamp, previous=state.last_timestamp)
            else:
                incremented = increment_randomness(state.last_randomness)
                if isinstance(incremented, RandomnessOverflow):
                    get_logger().error("randomness exhausted", error=incremented, timestamp=state.last_timestamp)
                    raise incremented
                ulid = Ulid.from_parts(state.last_timestamp, incremented)

            self._state = GeneratorState(ulid.timestamp, ulid.randomness)
            return ulid

def random_default():
    return RandomGenerator(secure_random(), system_clock())

def monotonic_default():
    return MonotonicGenerator(secure_random(), system_clock())

def create_generator(config):
    """Build the generator named by a GeneratorConfig."""
    if config.mode == GeneratorMode.RANDOM:
        return random_default()
    if config.mode == GeneratorMode.MONOTONIC:
        return monotonic_default()
    raise ValueError(f"unknown generator mode: {config.mode}")
