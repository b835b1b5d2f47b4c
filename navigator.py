"""Viewport state for the calendar: which month is on screen."""

from __future__ import annotations

from dataclasses import dataclass

from calendar_logic import CalendarDate, check_month, next_month, prev_month

YEARS_BEFORE = 100
YEARS_AFTER = 50


@dataclass(frozen=True)
class Viewport:
    year: int
    month: int

    @classmethod
    def containing(cls, d: CalendarDate) -> "Viewport":
        return cls(d.year, d.month)


class ViewportNavigator:
    """Holds the displayed month and applies navigation transitions.

    Every transition is total; any year is accepted here since the year
    range is a picker concern.
    """

    def __init__(self, viewport: Viewport) -> None:
        self.viewport = viewport

    @classmethod
    def for_date(cls, d: CalendarDate) -> "ViewportNavigator":
        return cls(Viewport.containing(d))

    def next(self) -> Viewport:
        self.viewport = Viewport(*next_month(self.viewport.year, self.viewport.month))
        return self.viewport

    def previous(self) -> Viewport:
        self.viewport = Viewport(*prev_month(self.viewport.year, self.viewport.month))
        return self.viewport

    def set_month(self, month: int) -> Viewport:
        check_month(month)
        self.viewport = Viewport(self.viewport.year, month)
        return self.viewport

    def set_year(self, year: int) -> Viewport:
        self.viewport = Viewport(year, self.viewport.month)
        return self.viewport

    def go_to(self, d: CalendarDate) -> Viewport:
        self.viewport = Viewport.containing(d)
        return self.viewport


def supported_year_range(reference_year: int,
                         years_before: int = YEARS_BEFORE,
                         years_after: int = YEARS_AFTER) -> tuple[int, int]:
    """Return the inclusive (first, last) years offered by the year picker."""
    return reference_year - years_before, reference_year + years_after


def year_options(reference_year: int,
                 years_before: int = YEARS_BEFORE,
                 years_after: int = YEARS_AFTER) -> list[int]:
    first, last = supported_year_range(reference_year, years_before, years_after)
    return list(range(first, last + 1))
