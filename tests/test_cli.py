"""Tests for tsframekit CLI (python -m tsframekit)."""

from __future__ import annotations

import json

import tsframekit
from tsframekit.__main__ import main


def test_cli_version_via_main(capsys) -> None:
    """main(['version']) prints the package version."""
    assert main(["version"]) == 0
    assert capsys.readouterr().out.strip() == tsframekit.__version__


def test_cli_no_command_shows_help(capsys) -> None:
    """No subcommand prints help and exits 0."""
    ret = main([])
    assert ret == 0
    captured = capsys.readouterr()
    assert "tsframekit" in captured.out


def test_cli_doctor_detects_core_deps(capsys) -> None:
    """Doctor output mentions core dependencies."""
    assert main(["doctor"]) == 0
    captured = capsys.readouterr()
    assert "Core dependencies" in captured.out
    for dep in ["pandas", "numpy", "pytest"]:
        assert dep in captured.out


def test_cli_doctor_shows_verdict(capsys) -> None:
    """Doctor output contains a verdict line."""
    main(["doctor"])
    captured = capsys.readouterr()
    assert "All systems go" in captured.out or "WARNING" in captured.out


def test_cli_describe_outputs_valid_json(capsys) -> None:
    """describe prints the API schema as JSON."""
    assert main(["describe"]) == 0
    data = json.loads(capsys.readouterr().out)
    assert data["version"] == tsframekit.__version__
    assert "E_CONTRACT_VIOLATION" in data["error_codes"]
