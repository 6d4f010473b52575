"""
Per-gauge sample collection and reference ("base") point selection.
"""

from __future__ import annotations

from dataclasses import dataclass, field

NOMINAL_ANGLE_DEG: float = 90.0  # Reference points are chosen closest to a right-angle bend.


@dataclass(frozen=True)
class ReferencePoint:
    """The logged (angle, offset) pair predictions are anchored to."""

    angle: float  # Bend angle in degrees.
    offset: float  # BND point logged for that angle.


@dataclass
class GaugeDataset:
    """All (angle, offset) pairs logged for one gauge plus its reference point."""

    gauge: int  # Gauge this dataset belongs to.
    nominal_angle: float = NOMINAL_ANGLE_DEG  # Angle the reference point is chosen against.
    angles: list[float] = field(default_factory=list)  # x values, in logging order.
    offsets: list[float] = field(default_factory=list)  # y values, parallel to angles.
    reference_point: ReferencePoint | None = None  # Undefined until the first sample.

    def add_sample(self, angle: float, offset: float) -> None:
        """Append one pair, then re-evaluate the reference point."""
        self.angles.append(angle)  # Keep x and y lists in lockstep.
        self.offsets.append(offset)

        # Strictly closer only: an equally close later sample keeps the incumbent.
        if self.reference_point is None or abs(self.nominal_angle - angle) < abs(
            self.nominal_angle - self.reference_point.angle
        ):
            self.reference_point = ReferencePoint(angle=angle, offset=offset)

    def sample_count(self) -> int:
        return len(self.angles)

    def pairs(self) -> list[tuple[float, float]]:
        """Return the (angle, offset) pairs in the order they were added."""
        return list(zip(self.angles, self.offsets))  # Fresh list so callers cannot mutate ours.
