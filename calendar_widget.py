"""CalendarLite: navigation and selection glue between state, grid and host."""

import logging
from datetime import date
from typing import Callable, NamedTuple

from calendar_logic import CalendarState
from month_grid import DayCell, GridBuilder
from selection import SelectionState
from settings import merge_options

logger = logging.getLogger(__name__)

_DIRECTIONS = {"previous": -1, "next": 1, -1: -1, 1: 1}


class MonthView(NamedTuple):
    """Everything a host needs to draw one month."""

    title: str
    weekday_names: list[str]
    rows: list[list[DayCell]]
    footer_text: str | None


class CalendarLite:
    """One widget instance. Owns its own state; nothing is shared between instances."""

    def __init__(self, seed=None, options: dict | None = None,
                 today: date | None = None) -> None:
        self.options = merge_options(options)
        self.state = CalendarState(seed, today=today,
                                   first_weekday=self.options["first_weekday"])
        self.grid = GridBuilder(self.state)
        self.selection = SelectionState()
        self.rows: list[list[DayCell]] = self.grid.rows()
        self._select_listeners: list[Callable[[date], None]] = []
        self._rebuild_listeners: list[Callable[["CalendarLite"], None]] = []

    # ------------------------------------------------------------------
    # Listeners
    # ------------------------------------------------------------------
    def on_select(self, callback: Callable[[date], None]) -> None:
        self._select_listeners.append(callback)

    def on_rebuild(self, callback: Callable[["CalendarLite"], None]) -> None:
        self._rebuild_listeners.append(callback)

    def destroy(self) -> None:
        """Detach every listener."""
        self._select_listeners.clear()
        self._rebuild_listeners.clear()

    # ------------------------------------------------------------------
    # Navigation
    # ------------------------------------------------------------------
    def navigate(self, direction) -> None:
        """Move one month back or forward ("previous"/"next" or -1/+1)."""
        if isinstance(direction, bool):
            raise ValueError(f"Unknown navigation direction: {direction!r}")
        try:
            delta = _DIRECTIONS[direction]
        except (KeyError, TypeError):
            raise ValueError(f"Unknown navigation direction: {direction!r}") from None
        self.state.advance_month(delta)
        self._rebuild()

    def go_today(self) -> None:
        self.state.initialize(self.state.reference_today)
        self._rebuild()

    def _rebuild(self) -> None:
        self.rows = self.grid.rows()
        self.selection.clear()
        for callback in list(self._rebuild_listeners):
            callback(self)

    # ------------------------------------------------------------------
    # Selection
    # ------------------------------------------------------------------
    def select_day(self, cell: DayCell) -> date | None:
        """Toggle ``cell``'s selection and notify listeners with its date."""
        result = self.selection.select(cell)
        if result is None:
            return None
        logger.debug("Day selected: %s", result.isoformat())
        for callback in list(self._select_listeners):
            callback(result)
        return result

    def is_selected(self, cell: DayCell) -> bool:
        return self.selection.is_selected(cell.date)

    # ------------------------------------------------------------------
    # Rendering output
    # ------------------------------------------------------------------
    def view(self) -> MonthView:
        return MonthView(
            title=self.state.get_title(),
            weekday_names=self.state.get_weekday_short_names(),
            rows=self.rows,
            footer_text=self.options["footer_text"],
        )
