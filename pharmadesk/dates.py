"""Calendar dates with lenient, self-correcting fields."""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)

MIN_YEAR = 2000


class Date:
    """A day-month-year date; out-of-range fields fall back to defaults."""

    def __init__(self, day: int = 1, month: int = 1, year: int = 2023) -> None:
        self.day = day
        self.month = month
        self.year = year

    @property
    def day(self) -> int:
        return self._day

    @day.setter
    def day(self, value: int) -> None:
        if 1 <= value <= 31:
            self._day = value
        else:
            self._day = 1
            logger.warning("Invalid day entered, set to default.")

    @property
    def month(self) -> int:
        return self._month

    @month.setter
    def month(self, value: int) -> None:
        if 1 <= value <= 12:
            self._month = value
        else:
            self._month = 1
            logger.warning("Invalid month entered, set to default.")

    @property
    def year(self) -> int:
        return self._year

    @year.setter
    def year(self, value: int) -> None:
        if value >= MIN_YEAR:
            self._year = value
        else:
            self._year = MIN_YEAR
            logger.warning("Invalid year entered, set to default.")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Date):
            return NotImplemented
        return (self.day, self.month, self.year) == (other.day, other.month, other.year)

    def __repr__(self) -> str:
        return f"Date(day={self.day}, month={self.month}, year={self.year})"

    def __str__(self) -> str:
        return f"{self.day}-{self.month}-{self.year}"