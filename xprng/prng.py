# CRC-stepped LCG for reproducible cross-language sampling (not for security use)
# Multiplier/modulus are the Numerical Recipes LCG constants; the increment is
# re-derived from CRC-32 of the counter and state on every step.
import logging
from typing import Optional

from .errors import InvalidBound, InvalidLength, InvalidRange
from .models import GeneratorSnapshot, Seed, SeedLike, crc32_text

logger = logging.getLogger(__name__)

MULTIPLIER = 1664525
INCREMENT = 1013904223  # classic fixed increment, only reported before the first step
MODULUS = 1 << 32
BOUND_LIMIT = 1 << 32  # keeps min + span well inside float precision

READABLE_RANGE = (32, 126)
BYTE_RANGE = (0, 255)


def _require_int(name: str, value) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int, received {type(value).__name__}.")


def _require_bound(name: str, value: int) -> None:
    _require_int(name, value)
    if not -BOUND_LIMIT <= value <= BOUND_LIMIT:
        raise InvalidBound(name, value, BOUND_LIMIT)


class PseudoRandom:
    """Deterministic generator; same seed and call sequence, same output.

    Each instance owns its state. Instances are not thread-safe: wrap each
    call in a lock if one generator is shared between threads.
    """

    def __init__(self, seed: SeedLike = None):
        self.state = 0
        self.counter = 0
        self.last_increment = INCREMENT
        self.saved_state: Optional[GeneratorSnapshot] = None
        self.reseed(seed)

    def __repr__(self) -> str:
        return f"PseudoRandom(state={self.state}, counter={self.counter})"

    def reseed(self, seed: SeedLike = None) -> None:
        """Jump to the state derived from ``seed`` and zero the call counter.

        Text seeds hash through CRC-32, integers use their magnitude, and
        ``None`` takes the current Unix time in seconds. The saved snapshot
        is left alone.
        """

        resolved = Seed.coerce(seed)
        self.state = resolved.derive()
        self.counter = 0
        self.last_increment = INCREMENT
        logger.debug("reseeded from %s seed -> state=%d", resolved.kind.value, self.state)

    def snapshot(self) -> GeneratorSnapshot:
        return GeneratorSnapshot(state=self.state, counter=self.counter)

    def load(self, snapshot: GeneratorSnapshot) -> None:
        self.state = snapshot.state
        self.counter = snapshot.counter

    def save_state(self) -> None:
        self.saved_state = self.snapshot()
        logger.debug("saved state=%d counter=%d", self.state, self.counter)

    def restore_state(self, rewind_counter: bool = True) -> None:
        """Return to the last saved snapshot; does nothing if none was saved.

        The counter is rewound by default because the next step's increment
        depends on it; without that the draws after a restore would not
        repeat. With ``rewind_counter=False`` only the state is restored and
        the counter keeps running, as the Java and JavaScript ports do.
        """

        if self.saved_state is None:
            logger.warning("restore_state() called before save_state(); ignoring")
            return
        self.state = self.saved_state.state
        if rewind_counter:
            self.counter = self.saved_state.counter
        logger.debug("restored state=%d counter=%d", self.state, self.counter)

    def next_u32(self) -> int:
        derivation = f"{self.counter}{self.state}{self.counter}"
        self.last_increment = crc32_text(derivation)
        self.state = (self.state * MULTIPLIER + self.last_increment) % MODULUS
        self.counter += 1
        return self.state

    def rand_int(self, min_value: int = 0, max_value: int = 255) -> int:
        # inclusive min_value..max_value
        _require_bound("min_value", min_value)
        _require_bound("max_value", max_value)
        if max_value < min_value:
            raise InvalidRange(min_value, max_value)
        span = max_value - min_value + 1
        value = int((self.next_u32() / MODULUS) * span + min_value)
        # float rounding can land on max_value + 1 for ranges far from zero
        return min(value, max_value)

    def rand_bytes(self, length: int, readable: bool = False) -> bytes:
        """``length`` sampled bytes, printable ASCII only when ``readable``."""

        _require_int("length", length)
        if length < 0:
            raise InvalidLength(length)
        low, high = READABLE_RANGE if readable else BYTE_RANGE
        return bytes(self.rand_int(low, high) for _ in range(length))

    def rand_text(self, length: int) -> str:
        return self.rand_bytes(length, readable=True).decode("ascii")
