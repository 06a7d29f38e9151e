"""Calendar dates with zero-based months and days, and intervals to shift them by."""

from __future__ import annotations

from dataclasses import dataclass

_MONTH_LENGTHS = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


def _is_leap(year: int) -> bool:
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def _month_length(year: int, month: int) -> int:
    if not 0 <= month < 12:
        raise ValueError(f"month index {month} is out of range 0..11")
    if month == 1 and _is_leap(year):
        return 29
    return _MONTH_LENGTHS[month]


def _normalised(year: int, month: int, day: int) -> tuple[int, int, int]:
    """Carry overflowing months into years and overflowing days into months."""
    year += month // 12
    month %= 12
    while True:
        length = _month_length(year, month)
        if day >= length:
            day -= length
            month += 1
            if month == 12:
                month = 0
                year += 1
        elif day < 0:
            month -= 1
            if month < 0:
                month = 11
                year -= 1
            day += _month_length(year, month)
        else:
            return year, month, day


@dataclass(frozen=True)
class DateInterval:
    """A span of years, months and days; each part may be negative."""

    years: int = 0
    months: int = 0
    days: int = 0

    @classmethod
    def of_days(cls, days: int) -> DateInterval:
        return cls(0, 0, days)

    @classmethod
    def of_months(cls, months: int) -> DateInterval:
        return cls(0, months, 0)

    @classmethod
    def of_years(cls, years: int) -> DateInterval:
        return cls(years, 0, 0)

    def __add__(self, other: object) -> DateInterval:
        if not isinstance(other, DateInterval):
            return NotImplemented
        return DateInterval(self.years + other.years, self.months + other.months, self.days + other.days)

    def __sub__(self, other: object) -> DateInterval:
        if not isinstance(other, DateInterval):
            return NotImplemented
        return DateInterval(self.years - other.years, self.months - other.months, self.days - other.days)


@dataclass(frozen=True, order=True)
class Date:
    """A date whose month (0-11) and day (0 to month length - 1) count from zero."""

    year: int
    month: int
    day: int

    def __post_init__(self) -> None:
        if not 0 <= self.month < 12:
            raise ValueError(f"month index {self.month} is out of range 0..11")
        if not 0 <= self.day < self.month_length():
            raise ValueError(
                f"day index {self.day} is out of range for month {self.month} of {self.year}"
            )

    def __add__(self, interval: object) -> Date:
        if not isinstance(interval, DateInterval):
            return NotImplemented
        return Date(*_normalised(
            self.year + interval.years,
            self.month + interval.months,
            self.day + interval.days,
        ))

    def __sub__(self, interval: object) -> Date:
        if not isinstance(interval, DateInterval):
            return NotImplemented
        return Date(*_normalised(
            self.year - interval.years,
            self.month - interval.months,
            self.day - interval.days,
        ))

    def is_leap_year(self) -> bool:
        return _is_leap(self.year)

    def month_length(self) -> int:
        """Number of days in this date's month."""
        return _month_length(self.year, self.month)