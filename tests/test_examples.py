"""Smoke tests for the scripts under examples/."""

from __future__ import annotations

import runpy
from pathlib import Path

import pytest

EXAMPLES_DIR = Path(__file__).resolve().parent.parent / "examples"


@pytest.mark.parametrize("script", ["quickstart.py", "thread_safety.py"])
def test_example_runs(script: str, capsys: pytest.CaptureFixture[str]) -> None:
    """Each example runs to completion and prints its sections."""
    runpy.run_path(str(EXAMPLES_DIR / script), run_name="__main__")

    output = capsys.readouterr().out
    assert "Example 1" in output
    assert "MISMATCH" not in output
