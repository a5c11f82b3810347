"""Async facade over a ULID generator."""

from core.errors import UlidError
from core.ulid import Ulid
from generation.generator import create_generator, random_default
from internal.logging import get_logger


class UlidService:
    def __init__(self, generator):
        self.generator = generator

    @classmethod
    def default(cls):
        """Random strategy, OS randomness, system clock."""
        return cls(random_default())

    @classmethod
    def from_config(cls, config):
        return cls(create_generator(config.generator))

    async def generate(self):
        return (await self.generate_ulid()).value

    async def generate_ulid(self):
        return self.generator.next()

    async def timestamp(self, text):
        """Timestamp of text, or None when it is not a valid ULID."""
        ulid = await self.parse_ulid(text)
        return ulid.timestamp if ulid is not None else None

    async def ulid_timestamp(self, ulid):
        return ulid.timestamp

    async def is_valid(self, text):
        return isinstance(Ulid.parse(text), Ulid)

    async def parse_ulid(self, text):
        result = Ulid.parse(text)
        if isinstance(result, UlidError):
            get_logger().debug("ulid rejected", error=result, input=text)
            return None
        return result
