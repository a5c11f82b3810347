RANDOMNESS_LEN = 10


class GeneratorState:
    __slots__ = ("last_timestamp", "last_randomness")

    def __init__(self, last_timestamp=0, last_randomness=None):
        self.last_timestamp = last_timestamp
        self.last_randomness = last_randomness if last_randomness is not None else bytes(RANDOMNESS_LEN)
