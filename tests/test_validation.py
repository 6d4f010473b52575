"""Unit tests for operator input validation."""

from __future__ import annotations

import pytest

from press_brake_calibration.errors import ValidationError
from press_brake_calibration.validation import is_number, parse_decimal, parse_gauge


@pytest.mark.parametrize("text", ["0", "90", "5.96", ".5", "5.", "0012.30"])
def test_is_number_accepts_digits_with_one_point(text: str) -> None:
    assert is_number(text)


@pytest.mark.parametrize("text", ["", ".", "1.2.3", "-5", "+5", "5e3", " 5", "abc", "5,0", "²"])
def test_is_number_rejects_everything_else(text: str) -> None:
    assert not is_number(text)


def test_parse_decimal_returns_float() -> None:
    assert parse_decimal("5.96") == pytest.approx(5.96)


def test_parse_decimal_names_field_in_error() -> None:
    """The error message says which field was bad."""
    with pytest.raises(ValidationError, match="angle"):
        parse_decimal("9o", "angle")


def test_validation_error_is_value_error() -> None:
    """Callers catching ValueError also see validation failures."""
    with pytest.raises(ValueError):
        parse_decimal("")


@pytest.mark.parametrize(("gauge", "expected"), [(16, 16), ("18", 18), ("024", 24), (3, 3)])
def test_parse_gauge_accepts_positive_integers(gauge: int | str, expected: int) -> None:
    assert parse_gauge(gauge) == expected


@pytest.mark.parametrize("gauge", [0, -16, "0", "16.0", "", "sixteen", True, 16.0])
def test_parse_gauge_rejects_invalid(gauge: object) -> None:
    with pytest.raises(ValidationError):
        parse_gauge(gauge)  # type: ignore[arg-type]
