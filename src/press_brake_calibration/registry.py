"""
Calibration registry: per-gauge datasets and fitted slopes.

The registry is rebuilt once from the sample store at startup and then kept
current one observation at a time.
"""

from __future__ import annotations

from dataclasses import dataclass, field
import logging
import math

from press_brake_calibration.errors import (
    DegenerateFitError,
    InsufficientDataError,
    MalformedRecordError,
    ValidationError,
)
from press_brake_calibration.gauge.dataset import (
    NOMINAL_ANGLE_DEG,
    GaugeDataset,
    ReferencePoint,
)
from press_brake_calibration.regression import least_squares_slope
from press_brake_calibration.samples import Sample, SampleStore
from press_brake_calibration.validation import parse_gauge

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RebuildReport:
    """What a cold rebuild loaded and what it had to skip."""

    samples_loaded: int
    gauges: tuple[int, ...]
    fitted_gauges: tuple[int, ...]
    malformed: tuple[MalformedRecordError, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class GaugeSummary:
    """Calibration state of one gauge, for display."""

    gauge: int
    sample_count: int
    slope: float | None
    reference_point: ReferencePoint | None


class CalibrationRegistry:
    """
    Owns every gauge's dataset and fitted slope.

    Usage:
        registry = CalibrationRegistry(FileSampleStore(path))
        registry.rebuild_from_store()
        registry.record_observation(16, 92.0, 5.98)
        slope = registry.fit_for(16)
    """

    def __init__(self, store: SampleStore, *, nominal_angle: float = NOMINAL_ANGLE_DEG) -> None:
        self.store = store
        self.nominal_angle = nominal_angle
        self._datasets: dict[int, GaugeDataset] = {}
        self._slopes: dict[int, float] = {}

    def rebuild_from_store(self, store: SampleStore | None = None) -> RebuildReport:
        """Discard in-memory state and replay the whole store, then fit every gauge."""
        if store is not None:
            self.store = store

        malformed: list[MalformedRecordError] = []

        def _skip(err: MalformedRecordError) -> None:
            logger.warning("Skipping malformed record: %s", err)
            malformed.append(err)

        datasets: dict[int, GaugeDataset] = {}
        samples_loaded: int = 0
        for sample in self.store.read_all(on_malformed=_skip):
            self._dataset_in(datasets, sample.gauge).add_sample(sample.angle, sample.offset)
            samples_loaded += 1

        slopes: dict[int, float] = {}
        for gauge, dataset in datasets.items():
            slope: float | None = self._compute_slope(dataset)
            if slope is not None:
                slopes[gauge] = slope

        # Swap in only once the replay has completed.
        self._datasets = datasets
        self._slopes = slopes

        report = RebuildReport(
            samples_loaded=samples_loaded,
            gauges=tuple(sorted(datasets)),
            fitted_gauges=tuple(sorted(slopes)),
            malformed=tuple(malformed),
        )
        logger.info(
            "Rebuilt calibration from %d samples: %d gauges, %d fitted, %d malformed records skipped",
            report.samples_loaded,
            len(report.gauges),
            len(report.fitted_gauges),
            len(report.malformed),
        )
        return report

    def record_observation(self, gauge: int, angle: float, offset: float) -> Sample:
        """Persist one observation and refit its gauge.

        The store append happens first; if it raises StorageError the
        registry is left exactly as it was.
        """
        sample = Sample(gauge=parse_gauge(gauge), angle=float(angle), offset=float(offset))
        if not (math.isfinite(sample.angle) and math.isfinite(sample.offset)):
            raise ValidationError(f"angle and offset must be finite, got {angle!r}, {offset!r}.")
        self.store.append(sample)
        logger.info("Recorded gauge %d: angle=%s offset=%s", sample.gauge, sample.angle, sample.offset)

        dataset: GaugeDataset = self._dataset_in(self._datasets, sample.gauge)
        dataset.add_sample(sample.angle, sample.offset)

        slope: float | None = self._compute_slope(dataset)
        if slope is not None:
            self._slopes[sample.gauge] = slope
        return sample

    def fit_for(self, gauge: int) -> float | None:
        return self._slopes.get(gauge)

    def reference_point_for(self, gauge: int) -> ReferencePoint | None:
        dataset: GaugeDataset | None = self._datasets.get(gauge)
        return dataset.reference_point if dataset is not None else None

    def dataset_for(self, gauge: int) -> GaugeDataset | None:
        return self._datasets.get(gauge)

    def gauges(self) -> list[int]:
        """Return every gauge with at least one sample, ascending."""
        return sorted(self._datasets)

    def summaries(self) -> list[GaugeSummary]:
        """Summarize sample count, slope and reference point for each gauge."""
        return [
            GaugeSummary(
                gauge=gauge,
                sample_count=dataset.sample_count(),
                slope=self._slopes.get(gauge),
                reference_point=dataset.reference_point,
            )
            for gauge, dataset in sorted(self._datasets.items())
        ]

    def _dataset_in(self, datasets: dict[int, GaugeDataset], gauge: int) -> GaugeDataset:
        dataset: GaugeDataset | None = datasets.get(gauge)
        if dataset is None:
            dataset = GaugeDataset(gauge=gauge, nominal_angle=self.nominal_angle)
            datasets[gauge] = dataset
        return dataset

    def _compute_slope(self, dataset: GaugeDataset) -> float | None:
        """Fit one gauge; sparse or degenerate data simply means no new slope."""
        try:
            slope: float = least_squares_slope(dataset.pairs())
        except InsufficientDataError:
            logger.debug("Gauge %d has %d sample(s), no fit yet", dataset.gauge, dataset.sample_count())
            return None
        except DegenerateFitError as err:
            logger.debug("Gauge %d fit is degenerate: %s", dataset.gauge, err)
            return None
        logger.debug("Gauge %d slope=%s over %d samples", dataset.gauge, slope, dataset.sample_count())
        return slope
