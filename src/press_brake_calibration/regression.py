"""Ordinary least-squares slope of offset against angle."""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np

from press_brake_calibration.errors import DegenerateFitError, InsufficientDataError

MIN_SAMPLES_FOR_FIT: int = 2  # A line needs at least two points.


def least_squares_slope(pairs: Sequence[tuple[float, float]]) -> float:
    """Return the OLS slope over (angle, offset) pairs.

    Uses the closed-form sums formula
    ``(n*Sxy - Sx*Sy) / (n*Sxx - Sx**2)`` recomputed over every pair.

    Raises:
        InsufficientDataError: fewer than two pairs were given.
        DegenerateFitError: every angle is the same, or the slope is infinite or NaN.
    """
    n: int = len(pairs)  # Sample count drives both the guard and the formula.
    if n < MIN_SAMPLES_FOR_FIT:
        raise InsufficientDataError(f"Need at least {MIN_SAMPLES_FOR_FIT} samples for a fit, got {n}.")

    data: np.ndarray = np.asarray(pairs, dtype=np.float64)  # Shape (n, 2) in double precision.
    x: np.ndarray = data[:, 0]  # Angles.
    y: np.ndarray = data[:, 1]  # Offsets.

    # Repeated angles leave rounding residue in the denominator (e.g. 90.1),
    # so reject them before the sums instead of trusting an exact zero.
    if np.all(x == x[0]):
        raise DegenerateFitError(f"All {n} samples share angle {x[0]}; slope is undefined.")

    # Overflowing sums become inf/nan and are rejected below.
    with np.errstate(over="ignore", divide="ignore", invalid="ignore"):
        sum_x: np.float64 = x.sum()
        sum_y: np.float64 = y.sum()
        sum_xx: np.float64 = (x * x).sum()
        sum_xy: np.float64 = (x * y).sum()

        numerator: np.float64 = n * sum_xy - sum_x * sum_y  # n*Sxy - Sx*Sy
        denominator: np.float64 = n * sum_xx - sum_x * sum_x  # n*Sxx - Sx^2
        slope: np.float64 = numerator / denominator  # Zero denominator gives inf/nan.

    if not np.isfinite(slope):  # Covers both overflow and a zero denominator.
        raise DegenerateFitError(
            f"Slope is not finite over {n} samples (numerator={numerator}, denominator={denominator})."
        )
    return float(slope)  # Plain float so callers never see numpy scalars.
