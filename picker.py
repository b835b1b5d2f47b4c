"""Scroll positioning for the month/year picker lists."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Protocol, Sequence

from calendar_logic import CalendarError

logger = logging.getLogger(__name__)

SCROLL_DELAY_MS = 200


class MissingPickerTarget(CalendarError, LookupError):
    """The requested value is not present in the picker's backing list."""


@dataclass(frozen=True)
class PickerLayout:
    """Static geometry of a picker grid (pixels)."""

    items_per_row: int
    item_height: float
    lead_in: float = 0


# 12px vertical padding ×2 + 4px margin ×2 per row of years
YEAR_PICKER = PickerLayout(items_per_row=4, item_height=32, lead_in=80)
MONTH_PICKER = PickerLayout(items_per_row=3, item_height=32)


def position_for(target_index: int, items_per_row: int,
                 item_height: float, lead_in: float) -> float:
    """Return the scroll offset that brings ``target_index`` into view.

    The target's row is placed ``lead_in`` below the top edge, never
    scrolling above 0.
    """
    row = target_index // items_per_row
    return max(0, row * item_height - lead_in)


def layout_position(layout: PickerLayout, target_index: int) -> float:
    return position_for(target_index, layout.items_per_row,
                        layout.item_height, layout.lead_in)


def index_of(items: Sequence[Any], value: Any) -> int:
    try:
        return list(items).index(value)
    except ValueError:
        raise MissingPickerTarget(f"{value!r} not in picker list") from None


class Scheduler(Protocol):
    """The subset of ``tkinter.Misc`` used for deferred calls."""

    def after(self, ms: int, func: Callable[[], None]) -> Any: ...

    def after_cancel(self, id: Any) -> None: ...


class DeferredScroll:
    """A single scroll request, fired once after the picker has laid out.

    ``cancel()`` before the delay elapses drops the request; the scroll
    callback is released and never invoked.
    """

    def __init__(self, scheduler: Scheduler, offset: float,
                 scroll_to: Callable[[float], None],
                 delay_ms: int = SCROLL_DELAY_MS) -> None:
        self.offset = offset
        self.fired = False
        self._scheduler = scheduler
        self._scroll_to: Callable[[float], None] | None = scroll_to
        self._after_id = scheduler.after(delay_ms, self._fire)

    @property
    def pending(self) -> bool:
        return self._scroll_to is not None

    def _fire(self) -> None:
        self._after_id = None
        scroll_to, self._scroll_to = self._scroll_to, None
        if scroll_to is None:
            return
        self.fired = True
        scroll_to(self.offset)

    def cancel(self) -> None:
        if self._after_id is not None:
            self._scheduler.after_cancel(self._after_id)
            self._after_id = None
        self._scroll_to = None


def schedule_scroll(scheduler: Scheduler, layout: PickerLayout,
                    items: Sequence[Any], target: Any,
                    scroll_to: Callable[[float], None],
                    delay_ms: int = SCROLL_DELAY_MS) -> DeferredScroll:
    """Resolve ``target`` in ``items`` and schedule one scroll to it."""
    index = index_of(items, target)
    offset = layout_position(layout, index)
    logger.debug("Scrolling to %r, index %d, row %d, position %s",
                 target, index, index // layout.items_per_row, offset)
    return DeferredScroll(scheduler, offset, scroll_to, delay_ms)
