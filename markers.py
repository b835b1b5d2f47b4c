"""Medication dose markers ("dots") shown under calendar days."""

from __future__ import annotations

import enum
from typing import Iterable, Mapping

from calendar_logic import CalendarDate


class DoseStatus(enum.Enum):
    TAKEN = "taken"
    MISSED = "missed"
    SCHEDULED = "scheduled"


DOT_COLORS: dict[DoseStatus, str] = {
    DoseStatus.TAKEN: "#22C55E",
    DoseStatus.MISSED: "#EF4444",
    DoseStatus.SCHEDULED: "#3B82F6",
}

DoseSchedule = Mapping[CalendarDate, Iterable[DoseStatus]]


def dots_for_date(d: CalendarDate, schedule: DoseSchedule) -> list[str]:
    """Return the dot colours for one day, first-seen order, de-duplicated."""
    seen: set[DoseStatus] = set()
    colors: list[str] = []
    for status in schedule.get(d, ()):
        if status not in seen:
            seen.add(status)
            colors.append(DOT_COLORS[status])
    return colors


def dots_for_dates(dates: Iterable[CalendarDate],
                   schedule: DoseSchedule) -> dict[CalendarDate, list[str]]:
    """Return {date: [colour, ...]} for every date that has at least one dot."""
    result: dict[CalendarDate, list[str]] = {}
    for d in dates:
        colors = dots_for_date(d, schedule)
        if colors:
            result[d] = colors
    return result
