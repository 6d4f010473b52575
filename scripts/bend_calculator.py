"""Log bend observations and look up predicted BND points from the terminal."""

from __future__ import annotations

import argparse
from dataclasses import replace
import logging
from pathlib import Path
import sys

# Add `src` to sys.path so this script works even before `poetry install`.
PROJECT_ROOT: Path = Path(__file__).resolve().parents[1]
SRC_DIR: Path = PROJECT_ROOT / "src"
if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))

from press_brake_calibration import (
    CalibrationError,
    NotCalibratedError,
    format_bend_point,
    load_config,
    on_angle_or_gauge_changed,
    on_observation_entered,
    on_startup,
)
from press_brake_calibration.config import SETTINGS_TOML_PATH

logger = logging.getLogger("bend_calculator")


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse CLI arguments."""
    parser = argparse.ArgumentParser(description="Press brake BND point calculator.")
    parser.add_argument(
        "--config",
        type=Path,
        default=SETTINGS_TOML_PATH,
        help="Calculator settings TOML file.",
    )
    parser.add_argument(
        "--store",
        type=Path,
        default=None,
        help="Bending log to use instead of the configured one.",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    log_cmd = sub.add_parser("log", help="Record the BND point that produced an angle.")
    log_cmd.add_argument("gauge", type=str)
    log_cmd.add_argument("angle", type=str)
    log_cmd.add_argument("bnd_point", type=str)

    predict_cmd = sub.add_parser("predict", help="Predict the BND point for an angle.")
    predict_cmd.add_argument("gauge", type=str)
    predict_cmd.add_argument("angle", type=str)

    sub.add_parser("summary", help="Show the calibration state of every gauge.")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Run one calculator command and return a process exit code."""
    args = parse_args(argv)
    config = load_config(args.config)
    if args.store is not None:
        config = replace(config, store_path=args.store)

    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    handle = on_startup(config)

    try:
        if args.command == "log":
            on_observation_entered(handle, args.gauge, args.angle, args.bnd_point)
            print(f"Logged gauge {args.gauge}: {args.angle} deg -> BND {args.bnd_point}")
        elif args.command == "predict":
            print(on_angle_or_gauge_changed(handle, args.gauge, args.angle))
        else:
            summaries = handle.registry.summaries()
            if not summaries:
                print("No observations logged yet.")
            for summary in summaries:
                slope: str = "no fit" if summary.slope is None else f"slope {summary.slope:.6f}"
                ref = summary.reference_point
                ref_text: str = (
                    "-"
                    if ref is None
                    else f"{ref.angle:g} deg @ {format_bend_point(ref.offset, config.display_decimals)}"
                )
                print(f"gauge {summary.gauge}: {summary.sample_count} samples, {slope}, reference {ref_text}")
    except NotCalibratedError:
        print("No prediction available yet; log at least two different angles for this gauge.")
        return 1
    except CalibrationError as exc:
        logger.error("%s", exc)
        return 2
    return 0


if __name__ == "__main__":
    sys.exit(main())
