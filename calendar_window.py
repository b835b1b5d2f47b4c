"""Date-picker dialog (tkinter) drawing a CalendarController."""

from __future__ import annotations

import logging
import tkinter as tk
from datetime import date
from tkinter import font as tkfont
from typing import Callable

from PIL import ImageTk

from calendar_controller import CalendarController, RenderedCell
from calendar_logic import DAY_ABBR, MONTH_NAMES, CalendarDate, day_of_year
from date_grid import GRID_COLS, GRID_ROWS, GridCell, week_numbers
from icon_gen import create_icon_image
from markers import DoseSchedule
from picker import MONTH_PICKER, YEAR_PICKER
from selection import CellState
from settings import load_settings

logger = logging.getLogger(__name__)

# Colours
ACCENT = "#3B82F6"
TODAY_BG = "#DBEAFE"
SURFACE = "#F3F4F6"
GRID_BG = "white"
TEXT_FG = "#111827"
MUTED_FG = "#9CA3AF"


class CalendarWindow:
    """Modal-style calendar: header, weekday row, 6×7 grid, pickers."""

    def __init__(self, on_date_select: Callable[[CalendarDate], None],
                 selected_date: CalendarDate | None = None,
                 schedule: DoseSchedule | None = None,
                 today: CalendarDate | None = None) -> None:
        self.root = tk.Tk()
        self.root.resizable(False, False)
        self.root.configure(bg=GRID_BG)

        settings = load_settings()

        today = today or CalendarDate.from_date(date.today())
        self.controller = CalendarController(
            today=today,
            scheduler=self.root,
            on_date_select=on_date_select,
            selected_date=selected_date,
            schedule=schedule,
            years_before=settings["years_before"],
            years_after=settings["years_after"],
            scroll_delay_ms=settings["scroll_delay_ms"],
        )

        self._setup_fonts()
        self._icon = ImageTk.PhotoImage(create_icon_image(today))
        self.root.iconphoto(True, self._icon)

        # Widget-to-cell mapping (filled during _refresh)
        self._widget_cells: dict[int, GridCell] = {}
        self._overlay: tk.Frame | None = None
        self._year_canvas: tk.Canvas | None = None
        self._closed = False

        self._build_shell()
        self._refresh()

        self.root.bind("<Escape>", self._on_escape)
        self.root.protocol("WM_DELETE_WINDOW", self.close)
        self.root.withdraw()

    # ------------------------------------------------------------------
    # Fonts
    # ------------------------------------------------------------------
    def _setup_fonts(self) -> None:
        families = tkfont.families(self.root)
        base = "Segoe UI" if "Segoe UI" in families else "TkDefaultFont"
        self.font_normal = tkfont.Font(family=base, size=11)
        self.font_bold = tkfont.Font(family=base, size=11, weight="bold")
        self.font_header = tkfont.Font(family=base, size=13, weight="bold")
        self.font_nav = tkfont.Font(family=base, size=16, weight="bold")
        self.font_small = tkfont.Font(family=base, size=9)

    # ------------------------------------------------------------------
    # Build shell (once): nav bar + weekday row + pooled grid cells
    # ------------------------------------------------------------------
    def _build_shell(self) -> None:
        self._outer = tk.Frame(self.root, bg=GRID_BG, padx=16, pady=12)
        self._outer.pack()

        nav = tk.Frame(self._outer, bg=GRID_BG)
        nav.pack(fill="x", pady=(0, 12))

        btn_prev = tk.Label(nav, text="‹", font=self.font_nav, bg=GRID_BG,
                            fg=TEXT_FG, cursor="hand2", width=2)
        btn_prev.pack(side="left")
        btn_prev.bind("<Button-1>", lambda _e: self._navigate(-1))

        btn_next = tk.Label(nav, text="›", font=self.font_nav, bg=GRID_BG,
                            fg=TEXT_FG, cursor="hand2", width=2)
        btn_next.pack(side="right")
        btn_next.bind("<Button-1>", lambda _e: self._navigate(1))

        center = tk.Frame(nav, bg=GRID_BG)
        center.pack(expand=True)
        self._month_btn = tk.Label(center, font=self.font_header, bg=SURFACE,
                                   fg=ACCENT, padx=10, pady=4, cursor="hand2")
        self._month_btn.pack(side="left", padx=4)
        self._month_btn.bind("<Button-1>", lambda _e: self._open_month_picker())
        self._year_btn = tk.Label(center, font=self.font_header, bg=SURFACE,
                                  fg=ACCENT, padx=10, pady=4, cursor="hand2")
        self._year_btn.pack(side="left", padx=4)
        self._year_btn.bind("<Button-1>", lambda _e: self._open_year_picker())

        self._body = tk.Frame(self._outer, bg=GRID_BG)
        self._body.pack()

        tk.Label(self._body, text="Wk", font=self.font_small, bg=GRID_BG,
                 fg=MUTED_FG, width=3).grid(row=0, column=0, pady=(0, 6))
        for col, abbr in enumerate(DAY_ABBR):
            tk.Label(self._body, text=abbr, font=self.font_small, bg=GRID_BG,
                     fg=MUTED_FG, width=4).grid(row=0, column=col + 1, pady=(0, 6))

        self._week_nums: list[tk.Label] = []
        self._cells: list[tk.Canvas] = []
        for r in range(GRID_ROWS):
            wn = tk.Label(self._body, font=self.font_small, bg=GRID_BG,
                          fg=MUTED_FG, width=3)
            wn.grid(row=r + 1, column=0)
            self._week_nums.append(wn)
            for c in range(GRID_COLS):
                cell = tk.Canvas(self._body, width=40, height=40, bg=GRID_BG,
                                 highlightthickness=0, borderwidth=0,
                                 cursor="hand2")
                cell.grid(row=r + 1, column=c + 1, pady=2)
                cell.bind("<Button-1>", self._on_cell_press)
                self._cells.append(cell)

    # ------------------------------------------------------------------
    # Redraw from controller state
    # ------------------------------------------------------------------
    def _refresh(self) -> None:
        vp = self.controller.viewport
        self._month_btn.configure(text=MONTH_NAMES[vp.month])
        self._year_btn.configure(text=str(vp.year))
        today = self.controller.selection.today
        self.root.title(f"{self.controller.title}  Day: {day_of_year(today)}")

        rendered_cells = self.controller.render()
        weeks = week_numbers([r.cell for r in rendered_cells]) if rendered_cells else []
        for label, week in zip(self._week_nums, weeks):
            label.configure(text=week)

        self._widget_cells.clear()
        for widget, rendered in zip(self._cells, rendered_cells):
            self._widget_cells[id(widget)] = rendered.cell
            self._draw_cell(widget, rendered)

    @staticmethod
    def _cell_colors(rendered: RenderedCell) -> tuple[str, str]:
        if rendered.state is CellState.SELECTED:
            return ACCENT, "white"
        if rendered.state is CellState.TODAY:
            return TODAY_BG, ACCENT
        if not rendered.cell.belongs_to_viewport_month:
            return GRID_BG, MUTED_FG
        return GRID_BG, TEXT_FG

    def _draw_cell(self, canvas: tk.Canvas, rendered: RenderedCell) -> None:
        canvas.delete("all")
        w = int(canvas["width"])
        h = int(canvas["height"])
        bg, fg = self._cell_colors(rendered)
        canvas.configure(bg=bg)
        bold = rendered.state is not CellState.NONE
        canvas.create_text(w // 2, h // 2 - 3, text=str(rendered.cell.day_number),
                           fill=fg, font=self.font_bold if bold else self.font_normal)

        # Dots centred in a row under the number
        n = len(rendered.dots)
        r, gap = 2, 6
        x0 = w / 2 - (n - 1) * gap / 2
        for i, color in enumerate(rendered.dots):
            x = x0 + i * gap
            canvas.create_oval(x - r, h - 9 - r, x + r, h - 9 + r,
                               fill=color, outline="")

    # ------------------------------------------------------------------
    # Events
    # ------------------------------------------------------------------
    def _on_cell_press(self, event: tk.Event) -> None:
        cell = self._widget_cells.get(id(event.widget))
        if cell is not None:
            self.controller.tap(cell)
            self._sync_visibility()

    def _navigate(self, direction: int) -> None:
        if direction < 0:
            self.controller.previous_month()
        else:
            self.controller.next_month()
        self._refresh()

    def _on_escape(self, _event: tk.Event) -> None:
        if self._overlay is not None:
            self._close_overlay()
        else:
            self.close()

    # ------------------------------------------------------------------
    # Month / year picker overlays
    # ------------------------------------------------------------------
    def _make_overlay(self, title: str) -> tk.Frame:
        self._close_overlay()
        overlay = tk.Frame(self._outer, bg=GRID_BG)
        overlay.place(relx=0, rely=0, relwidth=1, relheight=1)
        hdr = tk.Frame(overlay, bg=GRID_BG)
        hdr.pack(fill="x", pady=(0, 10))
        tk.Label(hdr, text=title, font=self.font_header, bg=GRID_BG,
                 fg=TEXT_FG).pack(side="left")
        close = tk.Label(hdr, text="✕", font=self.font_normal, bg=GRID_BG,
                         fg=MUTED_FG, cursor="hand2")
        close.pack(side="right")
        close.bind("<Button-1>", lambda _e: self._close_overlay())
        self._overlay = overlay
        return overlay

    def _close_overlay(self) -> None:
        self.controller.close_pickers()
        if self._overlay is not None:
            self._overlay.destroy()
            self._overlay = None
            self._year_canvas = None

    def _picker_item(self, parent: tk.Widget, text: str, selected: bool,
                     on_pick: Callable[[], None]) -> tk.Label:
        item = tk.Label(
            parent, text=text, font=self.font_bold if selected else self.font_normal,
            bg=ACCENT if selected else SURFACE, fg="white" if selected else TEXT_FG,
            cursor="hand2",
        )
        item.bind("<Button-1>", lambda _e: on_pick())
        return item

    def _open_month_picker(self) -> None:
        overlay = self._make_overlay("Select Month")
        self.controller.open_month_picker()
        grid = tk.Frame(overlay, bg=GRID_BG)
        grid.pack(fill="both", expand=True)
        current = self.controller.viewport.month
        per_row = MONTH_PICKER.items_per_row
        for col in range(per_row):
            grid.columnconfigure(col, weight=1, uniform="m")
        for i, name in enumerate(MONTH_NAMES):
            item = self._picker_item(grid, name, i == current,
                                     lambda m=i: self._choose_month(m))
            item.grid(row=i // per_row, column=i % per_row, sticky="we",
                      padx=3, pady=4, ipady=8)

    def _choose_month(self, month: int) -> None:
        self.controller.choose_month(month)
        self._close_overlay()
        self._refresh()

    def _open_year_picker(self) -> None:
        overlay = self._make_overlay("Select Year")
        body = tk.Frame(overlay, bg=GRID_BG)
        body.pack(fill="both", expand=True)
        canvas = tk.Canvas(body, bg=GRID_BG, highlightthickness=0, height=300)
        bar = tk.Scrollbar(body, orient="vertical", command=canvas.yview)
        canvas.configure(yscrollcommand=bar.set)
        bar.pack(side="right", fill="y")
        canvas.pack(side="left", fill="both", expand=True)

        grid = tk.Frame(canvas, bg=GRID_BG)
        canvas.create_window((0, 0), window=grid, anchor="nw")
        years = self.controller.year_options()
        current = self.controller.viewport.year
        per_row = YEAR_PICKER.items_per_row
        row_h = int(YEAR_PICKER.item_height)
        for col in range(per_row):
            grid.columnconfigure(col, weight=1, uniform="y", minsize=64)
        for r in range((len(years) + per_row - 1) // per_row):
            grid.rowconfigure(r, minsize=row_h)
        for i, year in enumerate(years):
            item = self._picker_item(grid, str(year), year == current,
                                     lambda y=year: self._choose_year(y))
            item.grid(row=i // per_row, column=i % per_row, sticky="nswe",
                      padx=2, pady=2)
        grid.update_idletasks()
        total_h = len(range(0, len(years), per_row)) * row_h
        canvas.configure(scrollregion=(0, 0, grid.winfo_reqwidth(), total_h))
        self._year_canvas = canvas

        self.controller.open_year_picker(self._scroll_year_list)

    def _scroll_year_list(self, offset: float) -> None:
        canvas = self._year_canvas
        if canvas is None:
            return
        top, bottom = (float(v) for v in canvas.cget("scrollregion").split()[1::2])
        height = bottom - top
        if height > 0:
            canvas.yview_moveto(offset / height)

    def _choose_year(self, year: int) -> None:
        self.controller.choose_year(year)
        self._close_overlay()
        self._refresh()

    # ------------------------------------------------------------------
    # Show / Hide / Close
    # ------------------------------------------------------------------
    def show(self, selected_date: CalendarDate | None = None) -> None:
        self.controller.show(selected_date)
        self._refresh()
        self.root.deiconify()
        self.root.lift()
        self.root.focus_force()

    def hide(self) -> None:
        self._close_overlay()
        self.controller.hide()
        self.root.withdraw()

    def close(self) -> None:
        """Dismiss without choosing a date and end the Tk main loop."""
        if self._closed:
            return
        self._closed = True
        self._close_overlay()
        self.controller.hide()
        self.root.destroy()

    def _sync_visibility(self) -> None:
        if not self.controller.visible:
            self.hide()
        else:
            self._refresh()
