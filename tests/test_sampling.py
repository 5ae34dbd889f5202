"""Sampling harness and CLI tests."""

import argparse
import json
import sys

import pytest

from xprng import SampleConfig, run_samples
from scripts import run_prng


def test_run_samples_is_deterministic():
    cfg = SampleConfig(seed=0xDEADBEEF, count=50)
    assert run_samples(cfg) == run_samples(cfg)


def test_run_samples_reports_draws_and_final_state():
    cfg = SampleConfig(seed=42, count=10, min_value=1, max_value=6, byte_length=0)
    result = run_samples(cfg)

    assert result["draws"] == [2, 3, 6, 4, 1, 2, 2, 5, 4, 5]
    assert result["bytes"] == ""
    assert result["final"]["counter"] == 10
    assert result["config"]["seed"] == 42


def test_run_samples_readable_bytes_as_text():
    result = run_samples(SampleConfig(seed="hello", count=0, byte_length=16, readable=True))
    assert result["bytes"] == "tdB'|d{~4WBpNlZC"


def test_run_samples_raw_bytes_as_hex():
    result = run_samples(SampleConfig(seed="hello", count=0, byte_length=8, readable=False))
    assert result["bytes"] == "e4b85c14f8b7f6ff"


def test_cli_text_seed_prints_json(monkeypatch, capsys):
    monkeypatch.setattr(
        sys,
        "argv",
        ["run_prng.py", "--text-seed", "hello", "--count", "0", "--bytes", "16"],
    )

    run_prng.main()
    payload = json.loads(capsys.readouterr().out)

    assert payload["bytes"] == "tdB'|d{~4WBpNlZC"
    assert payload["config"]["seed"] == "hello"


def test_cli_hex_seed_and_range(monkeypatch, capsys):
    monkeypatch.setattr(
        sys,
        "argv",
        ["run_prng.py", "--seed", "0x2a", "--count", "10", "--min", "1", "--max", "6", "--bytes", "0"],
    )

    run_prng.main()
    payload = json.loads(capsys.readouterr().out)

    assert payload["draws"] == [2, 3, 6, 4, 1, 2, 2, 5, 4, 5]


def test_cli_log_flag_writes_json(tmp_path, monkeypatch, capsys):
    log_path = tmp_path / "reports" / "out.json"
    monkeypatch.setattr(
        sys,
        "argv",
        ["run_prng.py", "--count", "5", "--log", str(log_path)],
    )

    run_prng.main()
    captured = capsys.readouterr()

    assert log_path.exists()
    payload = json.loads(log_path.read_text())
    assert payload == json.loads(captured.out)
    assert len(payload["draws"]) == 5


def test_cli_inverted_range_exits_with_usage_error(monkeypatch, capsys):
    monkeypatch.setattr(sys, "argv", ["run_prng.py", "--min", "9", "--max", "1"])

    with pytest.raises(SystemExit) as excinfo:
        run_prng.main()

    assert excinfo.value.code == 2
    assert "Empty range" in capsys.readouterr().err


def test_cli_rejects_negative_count(monkeypatch):
    monkeypatch.setattr(sys, "argv", ["run_prng.py", "--count", "-1"])

    with pytest.raises(SystemExit):
        run_prng.main()


def test_parse_bool_variants():
    assert run_prng._parse_bool("Yes") is True
    assert run_prng._parse_bool("off") is False
    with pytest.raises(argparse.ArgumentTypeError):
        run_prng._parse_bool("maybe")
