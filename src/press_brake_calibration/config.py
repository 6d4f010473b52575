"""
Calculator settings and the TOML loader for them.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
import tomllib  # used for the calculator settings file
from typing import Any

from press_brake_calibration.gauge.dataset import NOMINAL_ANGLE_DEG
from press_brake_calibration.samples import DATA_DIR, STORE_FILE_NAME

SETTINGS_TOML_PATH: Path = (  # Default location for calculator settings.
    Path(__file__).resolve().parent / "calculator_settings.toml"
)  # Shipped beside the package.

DEFAULT_SUPPORTED_GAUGES: tuple[int, ...] = (16, 18, 20, 24)
_LOG_LEVELS: frozenset[str] = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})


@dataclass(frozen=True)
class CalculatorConfig:
    """Settings for one calculator process."""

    store_path: Path = field(default_factory=lambda: DATA_DIR / STORE_FILE_NAME)
    nominal_angle_deg: float = NOMINAL_ANGLE_DEG
    display_decimals: int = 3
    supported_gauges: tuple[int, ...] = DEFAULT_SUPPORTED_GAUGES  # Empty accepts any gauge.
    log_level: str = "INFO"


def _validate_config(config: CalculatorConfig) -> None:
    """Guard against settings the calculator cannot work with."""
    if config.display_decimals < 0:
        raise ValueError("calculator.display_decimals must be >= 0.")
    if any(gauge <= 0 for gauge in config.supported_gauges):
        raise ValueError("gauges.supported must contain positive integers only.")
    if config.log_level not in _LOG_LEVELS:
        raise ValueError(f"calculator.log_level must be one of {sorted(_LOG_LEVELS)}.")


def _check_keys(table: dict[str, Any], allowed: set[str], section: str) -> None:
    unknown: set[str] = set(table) - allowed
    if unknown:
        raise ValueError(f"Unknown key(s) in [{section}]: {', '.join(sorted(unknown))}")


def _typed(table: dict[str, Any], key: str, kinds: tuple[type, ...], default: Any, name: str) -> Any:
    """Return table[key] (or default) after checking its TOML type; bools never count as numbers."""
    value: Any = table.get(key, default)
    if isinstance(value, bool) or not isinstance(value, kinds):
        raise ValueError(f"{name} has the wrong type: {value!r}.")
    return value


def _supported_gauges(gauges: dict[str, Any], default: tuple[int, ...]) -> tuple[int, ...]:
    """Read gauges.supported, which must be an array of integers."""
    value: Any = gauges.get("supported", list(default))
    if not isinstance(value, list) or any(isinstance(g, bool) or not isinstance(g, int) for g in value):
        raise ValueError(f"gauges.supported must be an array of integers, got {value!r}.")
    return tuple(value)


def load_config(path: Path = SETTINGS_TOML_PATH) -> CalculatorConfig:
    """Load calculator settings from a TOML file.

    Missing keys keep their defaults. A relative ``store_path`` is resolved
    against the settings file's directory.
    """
    raw: dict[str, Any] = tomllib.loads(path.read_text(encoding="utf-8"))
    _check_keys(raw, {"calculator", "gauges"}, "root")

    calculator: dict[str, Any] = raw.get("calculator", {})
    gauges: dict[str, Any] = raw.get("gauges", {})
    _check_keys(
        calculator,
        {"store_path", "nominal_angle_deg", "display_decimals", "log_level"},
        "calculator",
    )
    _check_keys(gauges, {"supported"}, "gauges")

    defaults = CalculatorConfig()
    store_path: Path = defaults.store_path
    if "store_path" in calculator:
        store_path = Path(_typed(calculator, "store_path", (str,), None, "calculator.store_path")).expanduser()
        if not store_path.is_absolute():
            store_path = path.resolve().parent / store_path

    config = CalculatorConfig(
        store_path=store_path,
        nominal_angle_deg=float(
            _typed(calculator, "nominal_angle_deg", (int, float), defaults.nominal_angle_deg, "calculator.nominal_angle_deg")
        ),
        display_decimals=_typed(
            calculator, "display_decimals", (int,), defaults.display_decimals, "calculator.display_decimals"
        ),
        supported_gauges=_supported_gauges(gauges, defaults.supported_gauges),
        log_level=_typed(calculator, "log_level", (str,), defaults.log_level, "calculator.log_level").upper(),
    )
    _validate_config(config)
    return config
