"""Tests for date normalization and day counting."""

from datetime import date, datetime

import pytest

from app.exceptions import InvalidDateError, ValidationError
from app.services.date_normalizer import days_between, normalize_date, parse_date


def test_canonical_date_is_returned_unchanged() -> None:
    assert normalize_date("2025-06-01") == "2025-06-01"


@pytest.mark.parametrize(
    "raw",
    [
        "2025-06-01T10:30:00",
        "2025-06-01T10:30:00Z",
        "2025/06/01",
        "06/01/2025",
        "1 Jun 2025",
        "1 June 2025",
        "Jun 1, 2025",
        "June 1, 2025",
        date(2025, 6, 1),
        datetime(2025, 6, 1, 23, 59),
    ],
)
def test_various_inputs_normalize_to_iso(raw) -> None:
    assert normalize_date(raw) == "2025-06-01"


@pytest.mark.parametrize("raw", ["", "   ", "not a date", "2025-13-40", "31/31/2025"])
def test_unparseable_input_raises_invalid_date(raw: str) -> None:
    with pytest.raises(InvalidDateError):
        normalize_date(raw)


def test_invalid_date_is_a_validation_error() -> None:
    with pytest.raises(ValidationError):
        parse_date("tomorrow-ish")


def test_days_between_three_calendar_days() -> None:
    assert days_between("2025-01-10", "2025-01-13") == 3
    assert days_between(date(2025, 2, 27), date(2025, 3, 2)) == 3


def test_days_between_is_symmetric() -> None:
    assert days_between("2025-01-13", "2025-01-10") == 3


def test_days_between_same_day_is_zero() -> None:
    assert days_between("2025-01-10", "2025-01-10") == 0


def test_partial_day_rounds_up() -> None:
    assert days_between("2025-01-10T00:00:00", "2025-01-11T06:00:00") == 2
    assert days_between("2025-01-10T08:00:00", "2025-01-10T09:00:00") == 1


def test_days_between_rejects_garbage() -> None:
    with pytest.raises(InvalidDateError):
        days_between("2025-01-10", "soon")
