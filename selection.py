"""Single-day selection state machine."""

import logging
from datetime import date

from month_grid import DayCell

logger = logging.getLogger(__name__)


class SelectionState:
    """Tracks at most one selected day.

    States are *none* or *selected(date, active)*. Clicking the current
    cell flips ``active``, so two clicks on the same day deselect and then
    reselect it. Clicking another day moves the selection there.
    """

    def __init__(self) -> None:
        self.selected_date: date | None = None
        self.active = False

    def select(self, cell: DayCell) -> date | None:
        """Apply a click on ``cell`` and return its date (None for padding)."""
        if cell.is_padding:
            return None
        if self.selected_date == cell.date:
            self.active = not self.active
        else:
            self.selected_date = cell.date
            self.active = True
        logger.debug("Selection %s: %s", "on" if self.active else "off",
                     self.selected_date)
        return cell.date

    def is_selected(self, d: date | None) -> bool:
        return d is not None and self.active and d == self.selected_date

    def clear(self) -> None:
        self.selected_date = None
        self.active = False
