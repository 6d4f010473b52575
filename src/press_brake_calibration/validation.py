"""Validation of operator-entered numeric text."""

from __future__ import annotations

from press_brake_calibration.errors import ValidationError


def is_number(text: str) -> bool:
    """Return True when text is non-empty digits with at most one decimal point."""
    if text == "" or text == ".":
        return False
    # Only ASCII digits count; str.isdigit() would also accept superscripts.
    return text.count(".") <= 1 and all(ch in "0123456789." for ch in text)


def parse_decimal(text: str, field: str = "value") -> float:
    """Convert validated numeric text to a float, raising ValidationError otherwise."""
    if not is_number(text):
        raise ValidationError(f"{field} must be a positive decimal number, got {text!r}.")
    return float(text)


def parse_gauge(gauge: int | str) -> int:
    """Return gauge as a positive int, accepting either an int or integer text."""
    if isinstance(gauge, bool):
        raise ValidationError(f"gauge must be a positive integer, got {gauge!r}.")
    if isinstance(gauge, str):
        # Gauge text follows the same numeric rule but must be whole.
        if not is_number(gauge) or "." in gauge:
            raise ValidationError(f"gauge must be a positive integer, got {gauge!r}.")
        gauge = int(gauge)
    if not isinstance(gauge, int) or gauge <= 0:
        raise ValidationError(f"gauge must be a positive integer, got {gauge!r}.")
    return gauge
