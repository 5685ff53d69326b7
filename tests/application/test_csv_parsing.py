"""Tests for shared CSV parsing helpers."""

import pytest

from src.application.use_cases.csv_parsing import (
    PaidStatus,
    cell,
    parse_german_date,
    parse_paid_status,
)


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("15-01-2024", "2024-01-15T12:00:00+00:00"),
        ("5.3.2024", "2024-03-05T12:00:00+00:00"),
        ("05/03/2024", "2024-03-05T12:00:00+00:00"),
        ("2024-03-05", "2024-03-05T12:00:00+00:00"),
        ("31-02-2024", None),
        ("yesterday", None),
        ("", None),
        (None, None),
    ],
)
def test_parse_german_date(raw, expected) -> None:
    assert parse_german_date(raw) == expected


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("", PaidStatus(paid=False)),
        (None, PaidStatus(paid=False)),
        ("STATUS_PAID", PaidStatus(paid=True)),
        ("yes", PaidStatus(paid=True)),
        ("unpaid", PaidStatus(paid=False)),
        ("02.04.2024", PaidStatus(True, "2024-04-02T12:00:00+00:00")),
        ("maybe", PaidStatus(paid=False)),
    ],
)
def test_parse_paid_status(raw, expected) -> None:
    assert parse_paid_status(raw) == expected


def test_cell_trims_and_defaults() -> None:
    row = {"name": "  Anna ", "amount": None}

    assert cell(row, "name") == "Anna"
    assert cell(row, "amount") == ""
    assert cell(row, "missing") == ""
