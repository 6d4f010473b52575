"""
Sample records and the append-only log they are persisted in.
One line per observation: ``gauge,angle,offset`` with no header row.
"""

from __future__ import annotations

# Standard library imports
from collections.abc import Callable, Iterator
from dataclasses import dataclass
import logging
import math
from pathlib import Path
from typing import Protocol

from press_brake_calibration.errors import MalformedRecordError, StorageError

logger = logging.getLogger(__name__)


# Default location of the bending log.
DATA_DIR: Path = Path.home() / ".press-brake-calibration"
STORE_FILE_NAME: str = "bending_data.txt"


@dataclass(frozen=True)  # samples are never mutated once logged
class Sample:
    """One logged observation: the BND offset that produced an angle on a gauge."""

    gauge: int
    angle: float
    offset: float


def format_record(sample: Sample) -> str:
    """Encode a Sample as one log line (without the newline).

    Floats use ``repr`` so they round-trip at full precision.
    """
    return f"{sample.gauge},{sample.angle!r},{sample.offset!r}"


def parse_record(line: str, line_number: int = 0) -> Sample:
    """Decode one log line into a Sample, raising MalformedRecordError on bad input."""
    fields: list[str] = line.split(",")
    if len(fields) != 3:
        raise MalformedRecordError(line, line_number, f"expected 3 fields, got {len(fields)}")

    gauge_str, angle_str, offset_str = (f.strip() for f in fields)
    try:
        gauge: int = int(gauge_str)
        angle: float = float(angle_str)
        offset: float = float(offset_str)
    except ValueError as exc:
        raise MalformedRecordError(line, line_number, "non-numeric field") from exc

    if gauge <= 0:
        raise MalformedRecordError(line, line_number, "gauge must be positive")
    if not (math.isfinite(angle) and math.isfinite(offset)):
        raise MalformedRecordError(line, line_number, "non-finite angle or offset")
    return Sample(gauge=gauge, angle=angle, offset=offset)


def _decode_line(raw: bytes, line_number: int) -> str:
    """Decode one raw log line as UTF-8 and strip surrounding whitespace."""
    try:
        return raw.decode("utf-8").strip()
    except UnicodeDecodeError as exc:
        # Keep a readable form of the bad line for the error report.
        shown: str = raw.decode("utf-8", errors="replace").strip()
        raise MalformedRecordError(shown, line_number, "invalid UTF-8") from exc


MalformedHandler = Callable[[MalformedRecordError], None]


class SampleStore(Protocol):
    """The narrow persistence interface the registry depends on."""

    def append(self, sample: Sample) -> None: ...

    def read_all(self, *, on_malformed: MalformedHandler | None = None) -> Iterator[Sample]: ...


class FileSampleStore:
    """Append-only text log of Samples backed by a single file."""

    def __init__(self, path: Path | str | None = None) -> None:
        self.path: Path = Path(path) if path is not None else DATA_DIR / STORE_FILE_NAME

    def append(self, sample: Sample) -> None:
        """Persist one record at the end of the log."""
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with self.path.open("a", encoding="utf-8") as f:
                f.write(format_record(sample) + "\n")
        except OSError as exc:
            raise StorageError(f"Could not append to {self.path}: {exc}") from exc

    def read_all(self, *, on_malformed: MalformedHandler | None = None) -> Iterator[Sample]:
        """Yield every Sample in write order.

        A missing file yields nothing. Malformed lines are passed to
        ``on_malformed`` and skipped; without a handler the first one is raised.
        Each call reopens the file, so the sequence can be restarted.
        """
        if not self.path.exists():  # No log yet reads as an empty store.
            return
        # Read bytes so one corrupted line is reported instead of aborting the pass.
        with self.path.open("rb") as f:
            for line_number, raw in enumerate(f, start=1):
                try:
                    line: str = _decode_line(raw, line_number)
                    if not line:  # Blank and trailing lines are skipped.
                        continue
                    logger.debug("Reading line %d: %s", line_number, line)
                    sample: Sample = parse_record(line, line_number)
                except MalformedRecordError as err:
                    if on_malformed is None:
                        raise
                    on_malformed(err)
                    continue
                yield sample

    def __iter__(self) -> Iterator[Sample]:
        return self.read_all()
