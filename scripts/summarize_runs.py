"""Summarise saved xprng reports into CSV and Markdown uniformity sheets."""

from __future__ import annotations

import argparse
import csv
import json
import logging
import sys
from pathlib import Path
from typing import Iterable, List

PROJECT_ROOT = Path(__file__).resolve().parents[1]
LOG_DIR = PROJECT_ROOT / "prng_logs"
DOCS_DIR = PROJECT_ROOT / "docs" / "prng"

if PROJECT_ROOT.as_posix() not in sys.path:
    sys.path.insert(0, PROJECT_ROOT.as_posix())

from xprng.stats import CSV_HEADER, RunSummary

logger = logging.getLogger("xprng.summarize_runs")


def _load_runs(paths: Iterable[Path]) -> List[RunSummary]:
    runs: List[RunSummary] = []
    for payload_path in paths:
        if not payload_path.exists():
            raise FileNotFoundError(f"Missing required report: {payload_path}")
        payload = json.loads(payload_path.read_text())
        runs.append(RunSummary.from_payload(payload_path.stem, payload))
    return runs


def _write_csv(runs: Iterable[RunSummary], out_dir: Path) -> Path:
    csv_path = out_dir / "prng_summary.csv"
    with csv_path.open("w", newline="") as handle:
        writer = csv.writer(handle)
        writer.writerow(CSV_HEADER)
        for run in runs:
            writer.writerow(run.as_csv_row())
    return csv_path


def _write_md(runs: Iterable[RunSummary], out_dir: Path) -> Path:
    md_path = out_dir / "prng_summary.md"
    table_header = (
        "| Run | Seed | Range | Count | Mean | Distinct | Chi-square |\n"
        "| --- | --- | --- | --- | --- | --- | --- |"
    )
    table_rows = [
        "| {name} | {seed} | {low}..{high} | {count} | {mean:.3f} | {distinct} | {chi:.3f} |".format(
            name=run.name,
            seed=run.seed,
            low=run.min_value,
            high=run.max_value,
            count=run.count,
            mean=run.mean,
            distinct=run.distinct,
            chi=run.chi_square,
        )
        for run in runs
    ]
    content = ["# xprng sample summary", "", table_header, *table_rows]
    md_path.write_text("\n".join(content) + "\n")
    return md_path


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Summarise saved xprng JSON reports")
    parser.add_argument(
        "reports",
        nargs="*",
        type=Path,
        help="Report files to summarise (defaults to every *.json under prng_logs/)",
    )
    parser.add_argument("--out", type=Path, default=DOCS_DIR, help="Directory for the CSV and Markdown output")
    return parser


def main(argv: List[str] | None = None) -> None:
    args = build_parser().parse_args(argv)
    reports = args.reports or sorted(LOG_DIR.glob("*.json"))
    if not reports:
        raise FileNotFoundError(f"No reports given and none found under {LOG_DIR}")

    args.out.mkdir(parents=True, exist_ok=True)
    runs = _load_runs(reports)
    csv_path = _write_csv(runs, args.out)
    md_path = _write_md(runs, args.out)
    logger.info("summarised %d reports into %s and %s", len(runs), csv_path, md_path)


if __name__ == "__main__":
    main()
