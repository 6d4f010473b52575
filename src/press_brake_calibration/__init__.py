"""Per-gauge bend angle to BND offset calibration for a press brake."""

# Re-export the stable interfaces so imports stay clean.

from .calculator import (  # Form-facing entry points.
    CalculatorHandle,
    format_bend_point,
    on_angle_or_gauge_changed,
    on_observation_entered,
    on_startup,
)
from .config import CalculatorConfig, load_config
from .errors import (
    CalibrationError,
    DegenerateFitError,
    InsufficientDataError,
    MalformedRecordError,
    NotCalibratedError,
    StorageError,
    ValidationError,
)
from .gauge import GaugeDataset, ReferencePoint
from .predictor import predict_offset
from .regression import least_squares_slope
from .registry import CalibrationRegistry, GaugeSummary, RebuildReport
from .samples import FileSampleStore, Sample, SampleStore

__all__ = [
    "CalculatorConfig",
    "CalculatorHandle",
    "CalibrationError",
    "CalibrationRegistry",
    "DegenerateFitError",
    "FileSampleStore",
    "GaugeDataset",
    "GaugeSummary",
    "InsufficientDataError",
    "MalformedRecordError",
    "NotCalibratedError",
    "RebuildReport",
    "ReferencePoint",
    "Sample",
    "SampleStore",
    "StorageError",
    "ValidationError",
    "format_bend_point",
    "least_squares_slope",
    "load_config",
    "on_angle_or_gauge_changed",
    "on_observation_entered",
    "on_startup",
    "predict_offset",
]
