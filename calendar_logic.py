"""Pure calendar calculations — no UI dependencies.

Months are 0-based (0 = January … 11 = December) throughout the engine.
"""

from __future__ import annotations

import calendar
from dataclasses import dataclass
from datetime import MAXYEAR, MINYEAR, date, timedelta

MONDAY = calendar.MONDAY
SUNDAY = calendar.SUNDAY

DAY_ABBR = ["Mo", "Tu", "We", "Th", "Fr", "Sa", "Su"]

MONTH_NAMES = [
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
]

MONTH_ABBR = [name[:3] for name in MONTH_NAMES]


class CalendarError(Exception):
    """Base class for calendar engine errors."""


class InvalidDateComponent(CalendarError, ValueError):
    """A year, month or day outside the supported Gregorian range."""


def check_year(year: int) -> None:
    if not MINYEAR <= year <= MAXYEAR:
        raise InvalidDateComponent(
            f"year {year} outside supported range {MINYEAR}..{MAXYEAR}")


def check_month(month: int) -> None:
    if not 0 <= month <= 11:
        raise InvalidDateComponent(f"month {month} not in 0..11")


@dataclass(frozen=True, order=True)
class CalendarDate:
    """An immutable (year, month, day) triple."""

    year: int
    month: int
    day: int

    def __post_init__(self) -> None:
        n = days_in_month(self.year, self.month)
        if not 1 <= self.day <= n:
            raise InvalidDateComponent(
                f"day {self.day} not in 1..{n} for {MONTH_NAMES[self.month]} {self.year}")

    @classmethod
    def from_date(cls, d: date) -> "CalendarDate":
        return cls(d.year, d.month - 1, d.day)

    def to_date(self) -> date:
        return date(self.year, self.month + 1, self.day)

    @property
    def weekday(self) -> int:
        """Monday = 0 … Sunday = 6."""
        return self.to_date().weekday()

    def add_days(self, n: int) -> "CalendarDate":
        try:
            return CalendarDate.from_date(self.to_date() + timedelta(days=n))
        except OverflowError as exc:
            raise InvalidDateComponent(f"{self} + {n} days is out of range") from exc

    def isoformat(self) -> str:
        return self.to_date().isoformat()

    def __str__(self) -> str:
        return self.isoformat()


def days_in_month(year: int, month: int) -> int:
    """Return the number of days (28–31) in the given month."""
    check_year(year)
    check_month(month)
    if month == 1:
        return 29 if calendar.isleap(year) else 28
    return calendar.mdays[month + 1]


def first_weekday_offset(year: int, month: int, week_start: int = MONDAY) -> int:
    """Return how many grid columns precede day 1 of the month.

    ``week_start`` uses the ``calendar`` module constants (MONDAY = 0).
    """
    check_year(year)
    check_month(month)
    if not 0 <= week_start <= 6:
        raise InvalidDateComponent(f"week start {week_start} not in 0..6")
    return (date(year, month + 1, 1).weekday() - week_start) % 7


def same_date(a: CalendarDate | None, b: CalendarDate | None) -> bool:
    """Structural (year, month, day) equality; ``None`` never matches."""
    if a is None or b is None:
        return False
    return (a.year, a.month, a.day) == (b.year, b.month, b.day)


def is_next_day(a: CalendarDate, b: CalendarDate) -> bool:
    """Return True if ``b`` falls exactly one calendar day after ``a``."""
    return b.to_date().toordinal() - a.to_date().toordinal() == 1


def day_of_year(d: CalendarDate) -> int:
    """Return the 1-based day-of-year for the given date."""
    return d.to_date().timetuple().tm_yday


def prev_month(year: int, month: int) -> tuple[int, int]:
    """Return (year, month) for one month earlier."""
    if month == 0:
        return year - 1, 11
    return year, month - 1


def next_month(year: int, month: int) -> tuple[int, int]:
    """Return (year, month) for one month later."""
    if month == 11:
        return year + 1, 0
    return year, month + 1
