"""Entry point: open the date-picker dialog and report the chosen day."""

import argparse
import logging
from datetime import date

from calendar_logic import DAY_ABBR, CalendarDate
from calendar_window import CalendarWindow
from date_grid import week_strip

logger = logging.getLogger("medcal")


def main() -> None:
    parser = argparse.ArgumentParser(description="Medication calendar date picker")
    parser.add_argument("--date", type=date.fromisoformat, default=None,
                        help="initially selected date (YYYY-MM-DD)")
    parser.add_argument("-v", "--verbose", action="store_true")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    selected = CalendarDate.from_date(args.date) if args.date else None

    def on_date_select(d: CalendarDate) -> None:
        week = " ".join(f"{DAY_ABBR[c.date.weekday]} {c.day_number:2d}"
                        for c in week_strip(d))
        logger.info("Selected %s | week: %s", d, week)
        cal_win.root.after(0, cal_win.close)

    cal_win = CalendarWindow(on_date_select, selected_date=selected)
    cal_win.show()
    cal_win.root.mainloop()


if __name__ == "__main__":
    main()
