"""Seed variants and state snapshots for the generator."""

import time
import zlib
from dataclasses import dataclass
from enum import Enum
from typing import Union

U64_MASK = (1 << 64) - 1


def crc32_text(text: str) -> int:
    """IEEE 802.3 CRC-32 of the UTF-8 bytes, as an unsigned 32-bit int."""
    return zlib.crc32(text.encode("utf-8")) & 0xFFFFFFFF


class SeedKind(Enum):
    TEXT = "text"
    NUMBER = "number"
    CLOCK = "clock"


@dataclass(frozen=True)
class Seed:
    """Tagged seed: text, number, or wall-clock.

    Build one through ``Seed.text``, ``Seed.number`` or ``Seed.clock`` rather
    than the raw constructor.
    """

    kind: SeedKind
    value: Union[str, int, None] = None

    def __post_init__(self):
        if not isinstance(self.kind, SeedKind):
            raise TypeError(f"Seed kind must be a SeedKind, received {self.kind!r}.")
        if self.kind is SeedKind.TEXT and not isinstance(self.value, str):
            raise TypeError(f"Text seed must be a str, received {type(self.value).__name__}.")
        if self.kind is SeedKind.NUMBER and (
            isinstance(self.value, bool) or not isinstance(self.value, int)
        ):
            raise TypeError(f"Numeric seed must be an int, received {type(self.value).__name__}.")
        if self.kind is SeedKind.CLOCK and self.value is not None:
            raise TypeError("Clock seeds carry no value.")

    @classmethod
    def text(cls, value: str) -> "Seed":
        return cls(SeedKind.TEXT, value)

    @classmethod
    def number(cls, value: int) -> "Seed":
        return cls(SeedKind.NUMBER, value)

    @classmethod
    def clock(cls) -> "Seed":
        return cls(SeedKind.CLOCK)

    @classmethod
    def coerce(cls, value: "SeedLike") -> "Seed":
        """Map a plain ``str``/``int``/``None`` (or an existing Seed) to a Seed."""

        if isinstance(value, Seed):
            return value
        if value is None:
            return cls.clock()
        if isinstance(value, str):
            return cls.text(value)
        return cls.number(value)

    def derive(self) -> int:
        """Initial generator state for this seed."""

        if self.kind is SeedKind.TEXT:
            return crc32_text(self.value)
        if self.kind is SeedKind.NUMBER:
            # magnitudes wider than 64 bits fold to their low 64 bits
            return abs(self.value) & U64_MASK
        return int(time.time())


SeedLike = Union[Seed, str, int, None]


@dataclass(frozen=True)
class GeneratorSnapshot:
    state: int
    counter: int
