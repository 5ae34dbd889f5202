"""Command line harness for xprng sampling runs."""

import argparse
import json
import logging
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
DEFAULT_LOG_PATH = PROJECT_ROOT / "prng_logs" / "latest_run.json"

if PROJECT_ROOT.as_posix() not in sys.path:
    sys.path.insert(0, PROJECT_ROOT.as_posix())

from xprng import PRNGError, SampleConfig, run_samples

logger = logging.getLogger("xprng.run_prng")


def _parse_bool(value: str) -> bool:
    """Accept a variety of truthy / falsy CLI inputs."""

    if isinstance(value, bool):  # argparse may pass in already parsed bools
        return value

    normalized = value.strip().lower()
    if normalized in {"1", "true", "t", "yes", "y", "on"}:
        return True
    if normalized in {"0", "false", "f", "no", "n", "off"}:
        return False
    raise argparse.ArgumentTypeError(
        "Expected a boolean value (true/false). Received: %s" % value
    )


def _parse_count(value: str) -> int:
    try:
        count = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"Expected an integer, received '{value}'.") from exc
    if count < 0:
        raise argparse.ArgumentTypeError("Counts must be non-negative.")
    return count


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Draw a reproducible sample from the xprng generator")
    seed_group = parser.add_mutually_exclusive_group()
    seed_group.add_argument(
        "--seed",
        type=lambda value: int(value, 0),
        default=0xA2B94D10,
        help="Numeric seed (accepts decimal or 0x-prefixed hex)",
    )
    seed_group.add_argument(
        "--text-seed",
        dest="text_seed",
        help="Text seed, hashed with CRC-32",
    )
    seed_group.add_argument(
        "--clock-seed",
        dest="clock_seed",
        action="store_true",
        help="Seed from the current Unix time (output is not reproducible)",
    )
    parser.add_argument("--count", type=_parse_count, default=20, help="Number of integers to draw")
    parser.add_argument("--min", dest="min_value", type=int, default=0, help="Inclusive lower bound")
    parser.add_argument("--max", dest="max_value", type=int, default=255, help="Inclusive upper bound")
    parser.add_argument(
        "--bytes",
        dest="byte_length",
        type=_parse_count,
        default=16,
        help="Length of the byte string drawn after the integers",
    )
    parser.add_argument(
        "--readable",
        type=_parse_bool,
        default=True,
        help="Restrict bytes to printable ASCII (32-126); raw bytes are reported as hex",
    )
    parser.add_argument(
        "--log",
        nargs="?",
        type=Path,
        const=DEFAULT_LOG_PATH,
        help=(
            "Persist the JSON report to disk. Provide a path or pass the flag alone to use "
            "prng_logs/latest_run.json under the repository root."
        ),
    )
    parser.add_argument(
        "--log-level",
        dest="log_level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity written to stderr",
    )
    return parser


def main() -> None:
    parser = build_parser()
    args = parser.parse_args()
    logging.basicConfig(level=args.log_level, format="%(levelname)s %(name)s: %(message)s")

    if args.clock_seed:
        seed = None
    elif args.text_seed is not None:
        seed = args.text_seed
    else:
        seed = args.seed

    cfg = SampleConfig(
        seed=seed,
        count=args.count,
        min_value=args.min_value,
        max_value=args.max_value,
        byte_length=args.byte_length,
        readable=args.readable,
    )
    try:
        result = run_samples(cfg)
    except PRNGError as exc:
        parser.error(str(exc))

    log_path: Path | None = args.log
    if log_path is not None:
        if not log_path.is_absolute():
            log_path = (PROJECT_ROOT / log_path).resolve()

        log_path.parent.mkdir(parents=True, exist_ok=True)
        log_path.write_text(json.dumps(result, indent=2))
        logger.info("wrote report to %s", log_path)

    print(json.dumps(result, indent=2))


if __name__ == "__main__":
    main()
