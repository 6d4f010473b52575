"""Entry points the bend calculator form calls into.

The form passes raw field text; these functions validate it, drive the
registry, and return display-ready text. Errors are raised as the
``CalibrationError`` subclasses in ``press_brake_calibration.errors`` so the
form can withhold the action or show "no prediction available".
"""

from __future__ import annotations

from dataclasses import dataclass

from press_brake_calibration.config import CalculatorConfig, load_config
from press_brake_calibration.errors import ValidationError
from press_brake_calibration.predictor import predict_offset
from press_brake_calibration.registry import CalibrationRegistry, RebuildReport
from press_brake_calibration.samples import FileSampleStore
from press_brake_calibration.validation import parse_decimal, parse_gauge


@dataclass
class CalculatorHandle:
    """Registry plus the settings the form needs for validation and display."""

    config: CalculatorConfig
    registry: CalibrationRegistry
    startup_report: RebuildReport


def format_bend_point(value: float, decimals: int = 3) -> str:
    """Round a BND offset for display."""
    return f"{value:.{decimals}f}"


def _checked_gauge(handle: CalculatorHandle, gauge: int | str) -> int:
    value: int = parse_gauge(gauge)
    supported: tuple[int, ...] = handle.config.supported_gauges
    if supported and value not in supported:
        raise ValidationError(
            f"Gauge {value} is not supported (expected one of {', '.join(map(str, supported))})."
        )
    return value


def on_startup(config: CalculatorConfig | None = None) -> CalculatorHandle:
    """Build the registry from the bending log (cold rebuild)."""
    if config is None:
        config = load_config()
    registry = CalibrationRegistry(
        FileSampleStore(config.store_path), nominal_angle=config.nominal_angle_deg
    )
    report: RebuildReport = registry.rebuild_from_store()
    return CalculatorHandle(config=config, registry=registry, startup_report=report)


def on_observation_entered(
    handle: CalculatorHandle, gauge: int | str, angle_text: str, offset_text: str
) -> None:
    """Validate and log one (angle, BND offset) observation.

    Raises ValidationError for bad field text and StorageError when the log
    could not be written; in both cases nothing is recorded.
    """
    gauge_id: int = _checked_gauge(handle, gauge)
    angle: float = parse_decimal(angle_text, "angle")
    offset: float = parse_decimal(offset_text, "BND point")
    handle.registry.record_observation(gauge_id, angle, offset)


def on_angle_or_gauge_changed(handle: CalculatorHandle, gauge: int | str, angle_text: str) -> str:
    """Return the predicted BND offset for the entered angle as display text.

    Raises NotCalibratedError when the gauge has no usable fit yet.
    """
    gauge_id: int = _checked_gauge(handle, gauge)
    angle: float = parse_decimal(angle_text, "angle")
    predicted: float = predict_offset(handle.registry, gauge_id, angle)
    return format_bend_point(predicted, handle.config.display_decimals)
