"""Single-month multi-date picker window (tkinter)."""

import logging
from datetime import date
from tkinter import font as tkfont
import tkinter as tk
from typing import Callable

from calendar_logic import (
    format_chip,
    format_month_header,
    grid_weeks,
    weekday_labels,
)
from cell_style import GRID_BG, cell_style
from picker_state import PickerController, PickerState
from selection import classify, selection_summary, sorted_dates
from settings import SETTINGS_PATH, load_settings, save_settings

logger = logging.getLogger(__name__)

# Colours
HEADER_FG = "#333333"
DIM_FG = "#888888"
PANEL_BG = "#F3F3F3"

MAX_WEEKS = 6


class PickerWindow:
    """Month grid where each click toggles one date in the selection."""

    def __init__(self, on_change: Callable[[list[date]], None] | None = None,
                 first_weekday: int | None = None,
                 quit_on_hide: bool = False,
                 settings_path: str = SETTINGS_PATH) -> None:
        self.root = tk.Tk()
        self.root.title("Multi-Date Picker")
        self.root.resizable(True, True)
        self.root.configure(bg=GRID_BG)

        self._setup_fonts()

        self.settings_path = settings_path
        settings = load_settings(settings_path)
        self.first_weekday: int = (settings["first_weekday"]
                                   if first_weekday is None else first_weekday)
        self.accent: str = settings["accent"]
        self._saved_width: int | None = settings["window_width"]
        self._saved_height: int | None = settings["window_height"]

        self.controller = PickerController(on_change=on_change)
        self.quit_on_hide = quit_on_hide

        # Widget-to-date mapping (filled during _fill_grid)
        self._widget_dates: dict[int, date] = {}
        self._date_widgets: dict[date, tk.Canvas] = {}

        self._build_shell()
        self._rebuild()

        self.root.bind("<Escape>", self._on_escape)
        self.root.protocol("WM_DELETE_WINDOW", self.hide)

    # ------------------------------------------------------------------
    # Fonts
    # ------------------------------------------------------------------
    def _setup_fonts(self) -> None:
        families = tkfont.families(self.root)
        base = "Segoe UI" if "Segoe UI" in families else "TkDefaultFont"
        self.font_normal = tkfont.Font(family=base, size=11)
        self.font_bold = tkfont.Font(family=base, size=11, weight="bold")
        self.font_header = tkfont.Font(family=base, size=13, weight="bold")
        self.font_nav = tkfont.Font(family=base, size=13, weight="bold")
        self.font_caption = tkfont.Font(family=base, size=9)
        self.font_caption_bold = tkfont.Font(family=base, size=9, weight="bold")

    # ------------------------------------------------------------------
    # Build shell (once): nav bar, weekday row, grid, chips, footer
    # ------------------------------------------------------------------
    def _build_shell(self) -> None:
        self._outer = tk.Frame(self.root, bg=GRID_BG)
        self._outer.pack(padx=10, pady=8)

        # Navigation row: ◀  March 2024  ▶   Today
        nav = tk.Frame(self._outer, bg=GRID_BG)
        nav.pack(fill="x", pady=(0, 6))

        btn_prev = tk.Label(
            nav, text="◀", font=self.font_nav, bg=GRID_BG,
            fg=self.accent, cursor="hand2",
        )
        btn_prev.pack(side="left", padx=6)
        btn_prev.bind("<Button-1>", lambda _e: self._navigate(-1))

        btn_next = tk.Label(
            nav, text="▶", font=self.font_nav, bg=GRID_BG,
            fg=self.accent, cursor="hand2",
        )
        btn_next.pack(side="right", padx=6)
        btn_next.bind("<Button-1>", lambda _e: self._navigate(1))

        btn_today = tk.Label(
            nav, text="Today", font=self.font_caption_bold, bg=GRID_BG,
            fg=self.accent, cursor="hand2",
        )
        btn_today.pack(side="right", padx=6)
        btn_today.bind("<Button-1>", lambda _e: self._go_today())

        self._header = tk.Label(
            nav, font=self.font_header, bg=GRID_BG, fg=HEADER_FG,
        )
        self._header.pack(side="left", expand=True)

        # Weekday row + day cells share one grid so the columns line up
        grid = tk.Frame(self._outer, bg=GRID_BG)
        grid.pack()

        _tmp = tk.Label(self.root, text="00", font=self.font_bold, width=4)
        _tmp.update_idletasks()
        cell_w = _tmp.winfo_reqwidth()
        cell_h = _tmp.winfo_reqheight() + 10
        _tmp.destroy()

        for col, abbr in enumerate(weekday_labels(self.first_weekday)):
            tk.Label(
                grid, text=abbr, font=self.font_caption_bold, bg=GRID_BG,
                fg=DIM_FG, width=4,
            ).grid(row=0, column=col, pady=(0, 4))

        self._cells: list[list[tk.Canvas]] = []
        for r in range(MAX_WEEKS):
            row_cells: list[tk.Canvas] = []
            for c in range(7):
                cell = tk.Canvas(
                    grid, width=cell_w, height=cell_h,
                    bg=GRID_BG, highlightthickness=0, borderwidth=0,
                )
                cell.grid(row=r + 1, column=c, padx=2, pady=2)
                # Bound once: handler checks _widget_dates
                cell.bind("<Button-1>", self._on_click)
                row_cells.append(cell)
            self._cells.append(row_cells)

        # Selected dates panel (shown only when something is selected)
        self._chips_panel = tk.Frame(self._outer, bg=PANEL_BG, padx=8, pady=6)
        self._chips_title = tk.Label(
            self._chips_panel, font=self.font_bold, bg=PANEL_BG, fg=HEADER_FG,
            anchor="w",
        )
        self._chips_title.pack(fill="x")

        self._chips_canvas = tk.Canvas(
            self._chips_panel, height=30, bg=PANEL_BG,
            highlightthickness=0, borderwidth=0,
        )
        self._chips_canvas.pack(fill="x", pady=(4, 0))
        self._chips_scroll = tk.Scrollbar(
            self._chips_panel, orient="horizontal",
            command=self._chips_canvas.xview,
        )
        self._chips_canvas.configure(xscrollcommand=self._chips_scroll.set)
        self._chips_scroll.pack(fill="x")
        self._chips_row = tk.Frame(self._chips_canvas, bg=PANEL_BG)
        self._chips_canvas.create_window((0, 0), window=self._chips_row, anchor="nw")
        self._chips_row.bind(
            "<Configure>",
            lambda _e: self._chips_canvas.configure(
                scrollregion=self._chips_canvas.bbox("all")),
        )

        # Footer
        self._footer_label = tk.Label(
            self._outer, font=self.font_caption, bg=GRID_BG, fg="#555555",
        )
        self._footer_label.pack(side="bottom", pady=(6, 0))

    # ------------------------------------------------------------------
    # Rebuild: header, grid, chips and footer from self.state
    # ------------------------------------------------------------------
    def _rebuild(self) -> None:
        self._header.configure(text=format_month_header(self.state.visible_month))
        self._fill_grid()
        self._update_chips()

    def _fill_grid(self) -> None:
        """Reconfigure the pooled cells: no widget creation."""
        self._widget_dates.clear()
        self._date_widgets.clear()
        weeks = grid_weeks(self.state.cells(self.first_weekday))

        for r in range(MAX_WEEKS):
            row_days = weeks[r] if r < len(weeks) else []
            for c in range(7):
                cell = self._cells[r][c]
                d = row_days[c] if c < len(row_days) else None
                if d is None:
                    cell.delete("all")
                    cell.configure(bg=GRID_BG, cursor="")
                    continue
                self._widget_dates[id(cell)] = d
                self._date_widgets[d] = cell
        self._update_highlight()

    def _update_highlight(self) -> None:
        today = date.today()
        selected = self.state.selected
        for d, cell in self._date_widgets.items():
            style = cell_style(classify(selected, d), self.accent)
            font = self.font_bold if (style.bold or d == today) else self.font_normal
            self._draw_cell(cell, str(d.day), style.bg, style.fg, font)

    # ------------------------------------------------------------------
    # Canvas cell drawing (rounded tile)
    # ------------------------------------------------------------------
    def _draw_cell(self, cell: tk.Canvas, text: str, bg: str, fg: str,
                   font) -> None:
        cell.delete("all")
        w = cell.winfo_width()
        h = cell.winfo_height()
        if w <= 1:
            w = int(cell["width"])
        if h <= 1:
            h = int(cell["height"])

        cell.configure(bg=GRID_BG, cursor="hand2")
        if bg != GRID_BG:
            r = 10
            points = [
                r, 0, w - r, 0, w, 0, w, r, w, h - r, w, h,
                w - r, h, r, h, 0, h, 0, h - r, 0, r, 0, 0,
            ]
            cell.create_polygon(points, smooth=True, fill=bg, outline="")
        cell.create_text(w // 2, h // 2, text=text, fill=fg, font=font)

    # ------------------------------------------------------------------
    # Chips and footer
    # ------------------------------------------------------------------
    def _update_chips(self) -> None:
        for child in self._chips_row.winfo_children():
            child.destroy()

        dates = sorted_dates(self.state.selected)
        if not dates:
            self._chips_panel.pack_forget()
        else:
            self._chips_title.configure(text=f"Selected Dates ({len(dates)})")
            for d in dates:
                tk.Label(
                    self._chips_row, text=format_chip(d), font=self.font_caption,
                    bg=PANEL_BG, fg=self.accent, padx=10, pady=3,
                    relief="groove", borderwidth=1,
                ).pack(side="left", padx=(0, 6))
            if not self._chips_panel.winfo_ismapped():
                self._chips_panel.pack(fill="x", pady=(8, 0),
                                       before=self._footer_label)

        self._footer_label.configure(text=selection_summary(self.state.selected))

    # ------------------------------------------------------------------
    # State transitions
    # ------------------------------------------------------------------
    @property
    def state(self) -> PickerState:
        return self.controller.state

    def selected_dates(self) -> list[date]:
        return self.controller.selected_dates()

    def _render(self, changes: tuple[bool, bool]) -> None:
        month_changed, selection_changed = changes
        if month_changed:
            self._rebuild()
        elif selection_changed:
            self._update_highlight()
            self._update_chips()

    def _set_state(self, new_state: PickerState) -> None:
        self._render(self.controller.apply(new_state))

    def _on_click(self, event: tk.Event) -> None:
        d = self._widget_dates.get(id(event.widget))
        if d:
            self._render(self.controller.toggle(d))

    def clear_selection(self) -> None:
        self._render(self.controller.clear())

    def _navigate(self, direction: int) -> None:
        self._render(self.controller.navigate(direction))

    def _go_today(self) -> None:
        self._render(self.controller.go_today())

    # ------------------------------------------------------------------
    # ESC clears selection first, then hides
    # ------------------------------------------------------------------
    def _on_escape(self, _event: tk.Event) -> None:
        if self.state.selected:
            self.clear_selection()
        else:
            self.hide()

    # ------------------------------------------------------------------
    # Persist window size
    # ------------------------------------------------------------------
    def _persist_size(self) -> None:
        settings = load_settings(self.settings_path)
        settings["window_width"] = self._saved_width
        settings["window_height"] = self._saved_height
        logger.debug("Persisting window size %sx%s", self._saved_width, self._saved_height)
        save_settings(settings, self.settings_path)

    # ------------------------------------------------------------------
    # Show / Hide / Toggle
    # ------------------------------------------------------------------
    def toggle(self) -> None:
        if self.root.state() == "withdrawn" or not self.root.winfo_viewable():
            self.show()
        else:
            self.hide()

    def show(self) -> None:
        self.root.deiconify()
        self.root.update_idletasks()
        if self._saved_width is not None and self._saved_height is not None:
            self.root.geometry(f"{self._saved_width}x{self._saved_height}")
        self.root.lift()
        self.root.focus_force()

    def hide(self) -> None:
        if self.root.winfo_viewable():
            self._saved_width = self.root.winfo_width()
            self._saved_height = self.root.winfo_height()
            self._persist_size()
        if self.quit_on_hide:
            self.root.destroy()
        else:
            self.root.withdraw()
