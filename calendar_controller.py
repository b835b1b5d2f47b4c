"""Calendar dialog state, independent of any widget toolkit.

The controller owns one navigator and one selection; the window (or a test)
drives it with user events and draws whatever ``render()`` returns.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable

from calendar_logic import MONTH_NAMES, CalendarDate
from date_grid import GridCell, build_grid, week_strip
from markers import DoseSchedule, dots_for_dates
from navigator import YEARS_AFTER, YEARS_BEFORE, Viewport, ViewportNavigator, year_options
from picker import (
    SCROLL_DELAY_MS,
    YEAR_PICKER,
    DeferredScroll,
    Scheduler,
    schedule_scroll,
)
from selection import CellState, SelectionState

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RenderedCell:
    cell: GridCell
    state: CellState
    dots: tuple[str, ...] = ()


class CalendarController:
    """Date-picker dialog: month grid, navigation and month/year pickers."""

    def __init__(
        self,
        today: CalendarDate,
        scheduler: Scheduler,
        on_date_select: Callable[[CalendarDate], None],
        selected_date: CalendarDate | None = None,
        visible: bool = False,
        schedule: DoseSchedule | None = None,
        years_before: int = YEARS_BEFORE,
        years_after: int = YEARS_AFTER,
        scroll_delay_ms: int = SCROLL_DELAY_MS,
    ) -> None:
        self.selection = SelectionState(today, selected_date or today)
        self.navigator = ViewportNavigator.for_date(self.selection.selected_date)
        self.visible = visible
        self.schedule: DoseSchedule = schedule or {}
        self.month_picker_open = False
        self.year_picker_open = False
        self._scheduler = scheduler
        self._on_date_select = on_date_select
        self._years_before = years_before
        self._years_after = years_after
        self._scroll_delay_ms = scroll_delay_ms
        self._pending_scroll: DeferredScroll | None = None

    # ------------------------------------------------------------------
    # Read-only views
    # ------------------------------------------------------------------
    @property
    def viewport(self) -> Viewport:
        return self.navigator.viewport

    @property
    def title(self) -> str:
        return f"{MONTH_NAMES[self.viewport.month]} {self.viewport.year}"

    def _rendered(self, cells: list[GridCell]) -> list[RenderedCell]:
        dots = dots_for_dates((c.date for c in cells), self.schedule)
        return [
            RenderedCell(c, self.selection.classify(c.date),
                         tuple(dots.get(c.date, ())))
            for c in cells
        ]

    def render(self) -> list[RenderedCell]:
        """Return the 42 classified cells, or nothing while hidden."""
        if not self.visible:
            return []
        return self._rendered(build_grid(self.viewport))

    def render_week(self) -> list[RenderedCell]:
        """Return the week strip around the selected date (empty while hidden)."""
        if not self.visible:
            return []
        return self._rendered(week_strip(self.selection.selected_date))

    def year_options(self) -> list[int]:
        return year_options(self.selection.today.year,
                            self._years_before, self._years_after)

    # ------------------------------------------------------------------
    # Show / hide
    # ------------------------------------------------------------------
    def show(self, selected_date: CalendarDate | None = None) -> None:
        if selected_date is not None:
            self.selection.select(selected_date)
        self.navigator.go_to(self.selection.selected_date)
        self.visible = True

    def hide(self) -> None:
        self.close_pickers()
        self.visible = False

    # ------------------------------------------------------------------
    # User events
    # ------------------------------------------------------------------
    def tap(self, cell: GridCell) -> None:
        """Select a grid cell, report it once and close the dialog."""
        if not self.visible:
            return
        self.selection.select(cell.date)
        self._on_date_select(cell.date)
        self.hide()

    def next_month(self) -> None:
        if self.visible:
            self.navigator.next()

    def previous_month(self) -> None:
        if self.visible:
            self.navigator.previous()

    def open_month_picker(self) -> None:
        if not self.visible:
            return
        self.close_pickers()
        self.month_picker_open = True
        logger.debug("Month picker opened on %s", self.title)

    def choose_month(self, month: int) -> None:
        if not self.visible:
            return
        self.navigator.set_month(month)
        self.month_picker_open = False

    def open_year_picker(self, scroll_to: Callable[[float], None]) -> DeferredScroll | None:
        """Open the year list and schedule one scroll to the current year.

        The viewport year is used when the list contains it, otherwise
        today's year.
        """
        if not self.visible:
            return None
        self.close_pickers()
        self.year_picker_open = True
        years = self.year_options()
        target = self.viewport.year
        if target not in years:
            target = self.selection.today.year
        self._pending_scroll = schedule_scroll(
            self._scheduler, YEAR_PICKER, years, target, scroll_to,
            self._scroll_delay_ms,
        )
        return self._pending_scroll

    def choose_year(self, year: int) -> None:
        if not self.visible:
            return
        self.navigator.set_year(year)
        self.close_pickers()

    def close_pickers(self) -> None:
        self.month_picker_open = False
        self.year_picker_open = False
        if self._pending_scroll is not None:
            self._pending_scroll.cancel()
            self._pending_scroll = None
