"""Seeded sampling runs that produce JSON-ready reports."""

import logging
from dataclasses import dataclass, asdict
from typing import Any, Dict, Union

from .prng import PseudoRandom

logger = logging.getLogger(__name__)


@dataclass
class SampleConfig:
    """Configuration for one sampling run."""

    seed: Union[int, str, None] = 0xA2B94D10
    count: int = 20
    min_value: int = 0
    max_value: int = 255
    byte_length: int = 16
    readable: bool = True


def run_samples(cfg: SampleConfig) -> Dict[str, Any]:
    """Draw ``cfg.count`` integers then one byte string from a fresh generator."""

    rng = PseudoRandom(cfg.seed)
    draws = [rng.rand_int(cfg.min_value, cfg.max_value) for _ in range(cfg.count)]
    payload = rng.rand_bytes(cfg.byte_length, readable=cfg.readable)

    logger.info(
        "sampled %d ints in [%d, %d] and %d bytes; final state=%d",
        cfg.count,
        cfg.min_value,
        cfg.max_value,
        cfg.byte_length,
        rng.state,
    )

    return {
        "config": asdict(cfg),
        "final": {
            "state": rng.state,
            "counter": rng.counter,
        },
        "draws": draws,
        "bytes": payload.decode("ascii") if cfg.readable else payload.hex(),
    }


if __name__ == "__main__":
    import json

    result = run_samples(SampleConfig())
    print(json.dumps(result, indent=2))
