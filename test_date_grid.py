"""Tests for the 42-cell month grid and the week strip."""

import pytest

from calendar_logic import CalendarDate, InvalidDateComponent, days_in_month, is_next_day
from date_grid import GRID_SIZE, build_grid, grid_rows, week_numbers, week_strip
from navigator import Viewport

ALL_MONTHS = [(y, m) for y in (1900, 1999, 2000, 2023, 2024, 2025, 2026) for m in range(12)]


@pytest.mark.parametrize("year, month", ALL_MONTHS)
def test_grid_always_has_42_cells(year, month):
    assert len(build_grid(Viewport(year, month))) == GRID_SIZE == 42


@pytest.mark.parametrize("year, month", ALL_MONTHS)
def test_in_month_cells_match_month_length(year, month):
    cells = build_grid(Viewport(year, month))
    inside = [c for c in cells if c.belongs_to_viewport_month]
    assert len(inside) == days_in_month(year, month)
    assert [c.day_number for c in inside] == list(range(1, len(inside) + 1))
    assert all((c.date.year, c.date.month) == (year, month) for c in inside)


@pytest.mark.parametrize("year, month", ALL_MONTHS)
def test_grid_is_continuous_and_monday_first(year, month):
    cells = build_grid(Viewport(year, month))
    assert cells[0].date.weekday == 0
    for a, b in zip(cells, cells[1:]):
        assert is_next_day(a.date, b.date)
        assert a.day_number == a.date.day


def test_january_borrows_from_previous_december():
    # 1 Jan 2025 is a Wednesday: two December days lead
    cells = build_grid(Viewport(2025, 0))
    assert [c.date for c in cells[:2]] == [CalendarDate(2024, 11, 30), CalendarDate(2024, 11, 31)]
    assert not cells[0].belongs_to_viewport_month
    assert cells[2].date == CalendarDate(2025, 0, 1)


def test_december_spills_into_next_january():
    cells = build_grid(Viewport(2024, 11))
    assert cells[-1].date.year == 2025
    assert cells[-1].date.month == 0
    assert not cells[-1].belongs_to_viewport_month


def test_four_row_february_still_renders_six_rows():
    # February 2021 starts on Monday and has 28 days
    cells = build_grid(Viewport(2021, 1))
    rows = grid_rows(cells)
    assert len(rows) == 6
    assert all(c.belongs_to_viewport_month for row in rows[:4] for c in row)
    assert not any(c.belongs_to_viewport_month for row in rows[4:] for c in row)
    assert cells[28].date == CalendarDate(2021, 2, 1)


def test_week_numbers_per_row():
    weeks = week_numbers(build_grid(Viewport(2024, 0)))
    assert weeks == ["1", "2", "3", "4", "5", "6"]


def test_week_strip_monday_first():
    strip = week_strip(CalendarDate(2024, 4, 15))
    assert len(strip) == 7
    assert strip[0].date == CalendarDate(2024, 4, 13)
    assert strip[-1].date == CalendarDate(2024, 4, 19)
    assert all(c.belongs_to_viewport_month for c in strip)


def test_week_strip_across_month_boundary():
    strip = week_strip(CalendarDate(2024, 4, 1))
    assert strip[0].date == CalendarDate(2024, 3, 29)
    assert [c.belongs_to_viewport_month for c in strip] == [False, False, True, True, True, True, True]


def test_first_supported_month_needs_no_previous_cells():
    # 1 January of year 1 is a Monday, so nothing from year 0 is requested
    cells = build_grid(Viewport(1, 0))
    assert len(cells) == 42
    assert cells[0].date == CalendarDate(1, 0, 1)
    assert cells[0].belongs_to_viewport_month


def test_last_supported_month_fails_fast():
    with pytest.raises(InvalidDateComponent):
        build_grid(Viewport(9999, 11))
