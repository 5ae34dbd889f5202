"""Public package surface for the xprng deterministic generator."""

from .errors import InvalidBound, InvalidLength, InvalidRange, PRNGError
from .models import GeneratorSnapshot, Seed, SeedKind, crc32_text
from .prng import PseudoRandom
from .sampling import SampleConfig, run_samples

__all__ = [
    "GeneratorSnapshot",
    "InvalidBound",
    "InvalidLength",
    "InvalidRange",
    "PRNGError",
    "PseudoRandom",
    "SampleConfig",
    "Seed",
    "SeedKind",
    "crc32_text",
    "run_samples",
]
