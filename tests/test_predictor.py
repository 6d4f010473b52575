"""Unit tests for BND offset prediction."""

from __future__ import annotations

from pathlib import Path

import pytest

from press_brake_calibration.errors import NotCalibratedError
from press_brake_calibration.predictor import predict_offset
from press_brake_calibration.registry import CalibrationRegistry
from press_brake_calibration.samples import FileSampleStore


@pytest.fixture
def registry(tmp_path: Path) -> CalibrationRegistry:
    """Empty registry over a temp log."""
    reg = CalibrationRegistry(FileSampleStore(tmp_path / "bending_data.txt"))
    reg.rebuild_from_store()
    return reg


def test_end_to_end_prediction(registry: CalibrationRegistry) -> None:
    """Two logged points give slope 0.1 anchored at (90, 5.00)."""
    registry.record_observation(1, 90.0, 5.00)
    registry.record_observation(1, 100.0, 6.00)

    assert predict_offset(registry, 1, 95.0) == pytest.approx(5.50)
    # At the reference angle the prediction is the reference offset itself.
    assert predict_offset(registry, 1, 90.0) == pytest.approx(5.00)


def test_prediction_uses_reference_point_not_intercept(registry: CalibrationRegistry) -> None:
    """The line is anchored at the reference sample, not the regression intercept."""
    # Points off a straight line: OLS slope is 0.05 and the 90 sample is the anchor.
    registry.record_observation(16, 80.0, 5.0)
    registry.record_observation(16, 90.0, 6.0)
    registry.record_observation(16, 100.0, 6.0)

    assert registry.fit_for(16) == pytest.approx(0.05)
    assert predict_offset(registry, 16, 110.0) == pytest.approx(6.0 + 0.05 * 20.0)


def test_unknown_gauge_is_not_calibrated(registry: CalibrationRegistry) -> None:
    """A gauge with no samples cannot be predicted."""
    with pytest.raises(NotCalibratedError):
        predict_offset(registry, 16, 90.0)


def test_single_sample_is_not_calibrated(registry: CalibrationRegistry) -> None:
    """A reference point alone is not enough without a fit."""
    registry.record_observation(16, 90.0, 5.96)

    with pytest.raises(NotCalibratedError):
        predict_offset(registry, 16, 95.0)


def test_degenerate_gauge_is_not_calibrated(registry: CalibrationRegistry) -> None:
    """Samples that never produce a fit leave predictions unavailable."""
    registry.record_observation(16, 90.0, 5.9)
    registry.record_observation(16, 90.0, 6.0)

    with pytest.raises(NotCalibratedError):
        predict_offset(registry, 16, 95.0)


def test_prediction_has_no_side_effects(registry: CalibrationRegistry) -> None:
    """Predicting does not change the registry."""
    registry.record_observation(1, 90.0, 5.0)
    registry.record_observation(1, 100.0, 6.0)
    before = registry.summaries()

    predict_offset(registry, 1, 120.0)

    assert registry.summaries() == before
