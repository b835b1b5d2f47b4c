"""Tests for picker scroll positions and the deferred scroll."""

import pytest

from navigator import year_options
from picker import (
    MONTH_PICKER,
    YEAR_PICKER,
    DeferredScroll,
    MissingPickerTarget,
    index_of,
    layout_position,
    position_for,
    schedule_scroll,
)


def test_position_for_middle_of_list():
    assert position_for(37, 4, 32, 80) == 208


def test_position_for_clamps_to_zero():
    assert position_for(1, 4, 32, 80) == 0
    assert position_for(0, 4, 32, 80) == 0


def test_position_for_is_deterministic():
    results = {position_for(101, 4, 32, 80) for _ in range(50)}
    assert results == {720}


def test_layout_constants():
    assert (YEAR_PICKER.items_per_row, YEAR_PICKER.item_height, YEAR_PICKER.lead_in) == (4, 32, 80)
    assert MONTH_PICKER.items_per_row == 3
    assert layout_position(YEAR_PICKER, 37) == 208
    assert layout_position(MONTH_PICKER, 11) == 96


def test_current_year_in_year_list():
    years = year_options(2026)
    assert index_of(years, 2026) == 100
    assert layout_position(YEAR_PICKER, 100) == 720


def test_index_of_missing_value():
    with pytest.raises(MissingPickerTarget):
        index_of([2024, 2025], 1800)
    with pytest.raises(LookupError):
        index_of([], 0)


def test_deferred_scroll_fires_once_after_delay(scheduler):
    seen = []
    scroll = DeferredScroll(scheduler, 208, seen.append, delay_ms=200)
    assert scheduler.delays == [200]
    assert seen == []
    assert scroll.pending
    scheduler.run()
    assert seen == [208]
    assert scroll.fired and not scroll.pending
    scroll._fire()
    assert seen == [208]


def test_cancelled_scroll_is_noop(scheduler):
    seen = []
    scroll = DeferredScroll(scheduler, 208, seen.append)
    scroll.cancel()
    scheduler.run()
    assert seen == []
    assert not scroll.fired
    # a late callback after cancel must not reach the target either
    scroll._fire()
    assert seen == []


def test_schedule_scroll_resolves_target(scheduler):
    seen = []
    scroll = schedule_scroll(scheduler, YEAR_PICKER, year_options(2026), 2026, seen.append)
    assert scroll.offset == 720
    scheduler.run()
    assert seen == [720]


def test_schedule_scroll_missing_target_schedules_nothing(scheduler):
    with pytest.raises(MissingPickerTarget):
        schedule_scroll(scheduler, YEAR_PICKER, year_options(2026), 1800, lambda _o: None)
    assert scheduler.delays == []
