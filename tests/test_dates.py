import logging

import pytest

from pharmadesk.dates import Date


def test_defaults():
    d = Date()
    assert (d.day, d.month, d.year) == (1, 1, 2023)


def test_valid_values_kept():
    d = Date(31, 12, 2000)
    assert (d.day, d.month, d.year) == (31, 12, 2000)


@pytest.mark.parametrize("day", [0, 32, -4])
def test_invalid_day_falls_back(day, caplog):
    with caplog.at_level(logging.WARNING):
        d = Date(day, 5, 2024)
    assert d.day == 1
    assert "Invalid day entered, set to default." in caplog.text


@pytest.mark.parametrize("month", [0, 13])
def test_invalid_month_falls_back(month, caplog):
    with caplog.at_level(logging.WARNING):
        d = Date(10, month, 2024)
    assert d.month == 1
    assert "Invalid month entered" in caplog.text


def test_invalid_year_falls_back(caplog):
    with caplog.at_level(logging.WARNING):
        d = Date(10, 5, 1999)
    assert d.year == 2000
    assert "Invalid year entered" in caplog.text


def test_setters_validate():
    d = Date(5, 6, 2024)
    d.day = 40
    d.month = 7
    assert d.day == 1
    assert d.month == 7


def test_str_format():
    assert str(Date(5, 6, 2024)) == "5-6-2024"


def test_equality():
    assert Date(3, 4, 2025) == Date(3, 4, 2025)
    assert not Date(3, 4, 2025) == Date(4, 4, 2025)