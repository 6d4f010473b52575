"""Smoke tests for the command-line calculator script."""

from __future__ import annotations

import importlib.util
from pathlib import Path
from types import ModuleType

import pytest

SCRIPT_PATH: Path = Path(__file__).resolve().parents[1] / "scripts" / "bend_calculator.py"


@pytest.fixture(scope="module")
def cli() -> ModuleType:
    """Import the script as a module so main() can be called directly."""
    spec = importlib.util.spec_from_file_location("bend_calculator", SCRIPT_PATH)
    assert spec is not None and spec.loader is not None
    module: ModuleType = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


def test_log_predict_and_summary(cli: ModuleType, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    """Logging two angles then predicting prints the rounded BND point."""
    store: list[str] = ["--store", str(tmp_path / "bending_data.txt")]

    assert cli.main([*store, "log", "16", "90", "5.00"]) == 0
    assert cli.main([*store, "log", "16", "100", "6.00"]) == 0
    capsys.readouterr()

    assert cli.main([*store, "predict", "16", "95"]) == 0
    assert capsys.readouterr().out.strip() == "5.500"

    assert cli.main([*store, "summary"]) == 0
    assert "gauge 16: 2 samples, slope 0.100000, reference 90 deg @ 5.000" in capsys.readouterr().out


def test_predict_without_fit_exits_nonzero(
    cli: ModuleType, tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    """Predicting before calibration reports that no prediction is available."""
    store: list[str] = ["--store", str(tmp_path / "bending_data.txt")]

    assert cli.main([*store, "predict", "16", "95"]) == 1
    assert "No prediction available" in capsys.readouterr().out


def test_invalid_input_exits_with_error(cli: ModuleType, tmp_path: Path) -> None:
    """Validation errors give exit code 2 and log nothing."""
    store_path: Path = tmp_path / "bending_data.txt"

    assert cli.main(["--store", str(store_path), "log", "16", "ninety", "5.0"]) == 2
    assert not store_path.exists()
