"""Per-gauge dataset public API."""

# Re-export the stable interfaces so imports stay clean.

from .dataset import (  # Re-export gauge dataset types.
    NOMINAL_ANGLE_DEG,
    GaugeDataset,  # Samples plus reference point for one gauge.
    ReferencePoint,  # Anchor point used by predictions.
)

__all__ = [  # Define the public symbols for this package.
    "NOMINAL_ANGLE_DEG",  # Angle the reference point is chosen against.
    "GaugeDataset",  # Per-gauge sample collection.
    "ReferencePoint",  # (angle, offset) anchor.
]
