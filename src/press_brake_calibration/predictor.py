"""Predict the BND offset for a target angle from a gauge's fitted line."""

from __future__ import annotations

from press_brake_calibration.errors import NotCalibratedError
from press_brake_calibration.gauge.dataset import ReferencePoint
from press_brake_calibration.registry import CalibrationRegistry


def predict_offset(registry: CalibrationRegistry, gauge: int, angle: float) -> float:
    """Return the offset expected to produce ``angle`` on ``gauge``.

    The fitted slope is anchored at the gauge's reference point:
    ``ref.offset + slope * (angle - ref.angle)``.
    """
    slope: float | None = registry.fit_for(gauge)
    reference: ReferencePoint | None = registry.reference_point_for(gauge)
    if slope is None or reference is None:
        raise NotCalibratedError(f"Gauge {gauge} has no usable fit yet.")
    return reference.offset + slope * (angle - reference.angle)
