"""Single-month calendar widget (tkinter) embedded in a host container."""

import logging
import tkinter as tk
from datetime import date
from tkinter import font as tkfont

from calendar_widget import CalendarLite
from month_grid import DayCell

logger = logging.getLogger(__name__)

# Colours
ACCENT = "#0078D4"
SEL_BG = "#B3D7F2"
HEADER_BG = "#F3F3F3"
GRID_BG = "white"
PASSED_FG = "#AAAAAA"

_MAX_WEEKS = 6


class CalendarWindow:
    """Draws a CalendarLite into ``container`` (a new Tk root if omitted).

    When embedded, the host places ``frame`` with whichever geometry
    manager it already uses for ``container``.
    """

    def __init__(self, container: tk.Misc | None = None, seed=None,
                 options: dict | None = None, today: date | None = None) -> None:
        self.root = container if container is not None else tk.Tk()
        self.calendar = CalendarLite(seed, options, today=today)
        self._owns_root = container is None
        if self._owns_root:
            self.root.title("Calendar Lite")
            self.root.resizable(False, False)
            self.root.configure(bg=GRID_BG)

        self._setup_fonts()

        # Label id -> cell it currently shows (filled during _fill)
        self._cell_for_widget: dict[int, DayCell] = {}
        self._day_labels: list[list[tk.Label]] = []
        self._weekday_labels: list[tk.Label] = []
        self._bindings: list[tuple[tk.Misc, str]] = []
        # Payload of the last <<DaySelected>> event
        self.selected_date: date | None = None
        self._visible = True
        # (manager, options) the host used to place self.frame, saved by hide()
        self._placement: tuple[str, dict] | None = None

        self._build_shell()
        self._fill()

        self.calendar.on_rebuild(lambda _cal: self._fill())
        self.calendar.on_select(self._emit_selected)

        self._bind(self.root, "<Escape>", self._on_escape)
        if self._owns_root:
            self.root.protocol("WM_DELETE_WINDOW", self.hide)

    # ------------------------------------------------------------------
    # Fonts
    # ------------------------------------------------------------------
    def _setup_fonts(self) -> None:
        families = tkfont.families(self.root)
        base = "Segoe UI" if "Segoe UI" in families else "TkDefaultFont"
        self.font_normal = tkfont.Font(family=base, size=9)
        self.font_bold = tkfont.Font(family=base, size=9, weight="bold")
        self.font_header = tkfont.Font(family=base, size=10, weight="bold")
        self.font_nav = tkfont.Font(family=base, size=12, weight="bold")
        self.font_footer = tkfont.Font(family=base, size=9)

    def _bind(self, widget: tk.Misc, sequence: str, handler) -> None:
        widget.bind(sequence, handler)
        self._bindings.append((widget, sequence))

    # ------------------------------------------------------------------
    # Build shell (once): nav bar + weekday header + day pool + footer
    # ------------------------------------------------------------------
    def _build_shell(self) -> None:
        self.frame = tk.Frame(self.root, bg=GRID_BG)
        if self._owns_root:
            self.frame.pack(padx=6, pady=4)

        nav = tk.Frame(self.frame, bg=HEADER_BG)
        nav.grid(row=0, column=0, columnspan=7, sticky="we", pady=(0, 2))

        btn_prev = tk.Label(
            nav, text="◀", font=self.font_nav, bg=HEADER_BG, cursor="hand2"
        )
        btn_prev.pack(side="left", padx=6)
        self._bind(btn_prev, "<Button-1>", lambda _e: self.navigate("previous"))

        btn_next = tk.Label(
            nav, text="▶", font=self.font_nav, bg=HEADER_BG, cursor="hand2"
        )
        btn_next.pack(side="right", padx=6)
        self._bind(btn_next, "<Button-1>", lambda _e: self.navigate("next"))

        self._title_label = tk.Label(
            nav, font=self.font_header, bg=HEADER_BG, fg="#333333",
        )
        self._title_label.pack(side="top")
        self._bind(self._title_label, "<Double-Button-1>",
                   lambda _e: self.calendar.go_today())

        for col in range(7):
            lbl = tk.Label(
                self.frame, font=self.font_bold, bg=GRID_BG, fg="#333333", width=3,
            )
            lbl.grid(row=1, column=col)
            self._weekday_labels.append(lbl)

        for r in range(_MAX_WEEKS):
            row_labels: list[tk.Label] = []
            for c in range(7):
                cell = tk.Label(
                    self.frame, font=self.font_normal, bg=GRID_BG, width=3,
                )
                cell.grid(row=r + 2, column=c)
                self._bind(cell, "<Button-1>", self._on_cell_click)
                row_labels.append(cell)
            self._day_labels.append(row_labels)

        self._footer_label = tk.Label(
            self.frame, font=self.font_footer, bg=GRID_BG, fg="#555555",
            wraplength=220, justify="center",
        )
        self._footer_label.grid(row=_MAX_WEEKS + 2, column=0, columnspan=7,
                                pady=(4, 0))

    # ------------------------------------------------------------------
    # Fill the pooled labels from the current view
    # ------------------------------------------------------------------
    def _fill(self) -> None:
        view = self.calendar.view()
        self._cell_for_widget.clear()

        self._title_label.configure(text=view.title)
        for lbl, name in zip(self._weekday_labels, view.weekday_names):
            lbl.configure(text=name)

        today = self.calendar.state.reference_today
        for r in range(_MAX_WEEKS):
            row = view.rows[r] if r < len(view.rows) else []
            for c in range(7):
                lbl = self._day_labels[r][c]
                cell = row[c] if c < len(row) else None
                if cell is None or cell.is_padding:
                    lbl.configure(text="", bg=GRID_BG, cursor="")
                    continue
                self._cell_for_widget[id(lbl)] = cell
                self._paint(lbl, cell, today)

        if view.footer_text:
            self._footer_label.configure(text=view.footer_text)
            self._footer_label.grid()
        else:
            self._footer_label.grid_remove()

    def _paint(self, lbl: tk.Label, cell: DayCell, today: date) -> None:
        is_today = cell.date == today
        bg, fg = self._day_colors(is_today, cell.passed,
                                  self.calendar.is_selected(cell))
        lbl.configure(
            text=cell.label, bg=bg, fg=fg, cursor="hand2",
            font=self.font_bold if is_today else self.font_normal,
        )

    @staticmethod
    def _day_colors(is_today: bool, passed: bool, selected: bool) -> tuple[str, str]:
        if selected:
            return SEL_BG, "black"
        if is_today:
            return ACCENT, "white"
        if passed:
            return GRID_BG, PASSED_FG
        return GRID_BG, "black"

    def _update_highlight(self) -> None:
        today = self.calendar.state.reference_today
        for row_labels in self._day_labels:
            for lbl in row_labels:
                cell = self._cell_for_widget.get(id(lbl))
                if cell is not None:
                    self._paint(lbl, cell, today)

    # ------------------------------------------------------------------
    # Events
    # ------------------------------------------------------------------
    def _on_cell_click(self, event: tk.Event) -> None:
        cell = self._cell_for_widget.get(id(event.widget))
        if cell is None:
            return
        self.calendar.select_day(cell)
        self._update_highlight()

    def _emit_selected(self, d: date) -> None:
        self.selected_date = d
        self.root.event_generate("<<DaySelected>>", when="tail")

    def _on_escape(self, _event: tk.Event) -> None:
        if self.calendar.selection.active:
            self.calendar.selection.clear()
            self._update_highlight()
        else:
            self.hide()

    # ------------------------------------------------------------------
    # Control surface
    # ------------------------------------------------------------------
    def navigate(self, direction) -> None:
        self.calendar.navigate(direction)

    def show(self) -> None:
        if self._owns_root:
            self.root.deiconify()
            self.root.lift()
        elif self._placement is not None:
            manager, info = self._placement
            getattr(self.frame, f"{manager}_configure")(**info)
            self._placement = None
        self._visible = True

    def hide(self) -> None:
        if self._owns_root:
            self.root.withdraw()
        else:
            manager = self.frame.winfo_manager()
            if manager in ("pack", "grid", "place"):
                info = getattr(self.frame, f"{manager}_info")()
                # Tk reports the master as "in"; tkinter takes it as "in_"
                if "in" in info:
                    info["in_"] = info.pop("in")
                self._placement = (manager, info)
                getattr(self.frame, f"{manager}_forget")()
        self._visible = False

    def is_visible(self) -> bool:
        return self._visible

    def toggle(self) -> None:
        if self.is_visible():
            self.hide()
        else:
            self.show()

    def destroy(self) -> None:
        """Unbind every handler and detach the core listeners."""
        for widget, sequence in self._bindings:
            widget.unbind(sequence)
        self._bindings.clear()
        self.calendar.destroy()
        logger.debug("Calendar widget destroyed")
