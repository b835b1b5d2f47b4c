"""Tests for selection state, cell classification and dose markers."""

from calendar_logic import CalendarDate
from markers import DOT_COLORS, DoseStatus, dots_for_date, dots_for_dates
from selection import CellState, SelectionState

TODAY = CalendarDate(2026, 9, 19)


def test_selected_takes_precedence_over_today():
    sel = SelectionState(TODAY, selected_date=CalendarDate(2026, 9, 19))
    assert sel.is_selected(TODAY)
    assert sel.is_today(TODAY)
    assert sel.classify(TODAY) is CellState.SELECTED


def test_today_marker_when_not_selected():
    sel = SelectionState(TODAY, selected_date=CalendarDate(2026, 9, 1))
    assert sel.classify(TODAY) is CellState.TODAY
    assert sel.classify(CalendarDate(2026, 9, 1)) is CellState.SELECTED
    assert sel.classify(CalendarDate(2026, 9, 2)) is CellState.NONE


def test_no_selection():
    sel = SelectionState(TODAY)
    assert not sel.is_selected(TODAY)
    assert sel.classify(TODAY) is CellState.TODAY


def test_select_replaces_selection():
    sel = SelectionState(TODAY)
    sel.select(CalendarDate(2026, 9, 5))
    sel.select(CalendarDate(2026, 9, 6))
    assert not sel.is_selected(CalendarDate(2026, 9, 5))
    assert sel.is_selected(CalendarDate(2026, 9, 6))


def test_dots_are_deterministic_and_deduplicated():
    d = CalendarDate(2026, 9, 19)
    schedule = {d: [DoseStatus.TAKEN, DoseStatus.MISSED, DoseStatus.TAKEN]}
    expected = [DOT_COLORS[DoseStatus.TAKEN], DOT_COLORS[DoseStatus.MISSED]]
    assert dots_for_date(d, schedule) == expected
    assert dots_for_date(d, schedule) == expected
    assert dots_for_date(CalendarDate(2026, 9, 20), schedule) == []


def test_dots_for_dates_skips_empty_days():
    a, b = CalendarDate(2026, 9, 1), CalendarDate(2026, 9, 2)
    result = dots_for_dates([a, b], {b: [DoseStatus.SCHEDULED]})
    assert result == {b: [DOT_COLORS[DoseStatus.SCHEDULED]]}
