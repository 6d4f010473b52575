"""Error types raised by the calibration engine."""

from __future__ import annotations


class CalibrationError(Exception):
    """Base class for every error raised by this package."""


class ValidationError(CalibrationError, ValueError):
    """Operator input is not a usable number (or not a usable gauge)."""


class MalformedRecordError(CalibrationError):
    """A persisted record could not be parsed into a Sample."""

    def __init__(self, raw_line: str, line_number: int, reason: str) -> None:
        self.raw_line = raw_line
        self.line_number = line_number
        self.reason = reason
        super().__init__(f"Malformed record on line {line_number} ({reason}): {raw_line!r}")


class InsufficientDataError(CalibrationError):
    """Fewer than two samples are available for a fit."""


class DegenerateFitError(CalibrationError):
    """The least-squares slope is not finite (e.g. every angle is the same)."""


class NotCalibratedError(CalibrationError):
    """A prediction was requested for a gauge with no usable fit yet."""


class StorageError(CalibrationError):
    """Appending to the sample store failed; the observation was not recorded."""
