"""Turn a CalendarState into rows of day cells ready for rendering."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from calendar_logic import CalendarMonth, CalendarState


@dataclass(frozen=True)
class DayCell:
    """One slot of the month grid. Padding cells carry no date."""

    label: str
    passed: bool = False
    date: date | None = None

    @property
    def is_padding(self) -> bool:
        return self.date is None


PADDING = DayCell("")


def is_passed(cell_date: date, today: date) -> bool:
    """Return True if ``cell_date`` lies before ``today``'s day.

    Whole months before today's month are passed; months after it are not.
    """
    cell_month = CalendarMonth.from_date(cell_date)
    today_month = CalendarMonth.from_date(today)
    if cell_month == today_month:
        return cell_date.day < today.day
    return cell_month < today_month


def build_cells(month: CalendarMonth, start_weekday: int, day_count: int,
                today: date) -> list[DayCell]:
    """Return the flat cell sequence: leading padding, then one cell per day."""
    cells: list[DayCell] = []
    for i in range(1, day_count + start_weekday + 1):
        if i <= start_weekday:
            cells.append(PADDING)
            continue
        d = month.day(i - start_weekday)
        cells.append(DayCell(str(d.day), is_passed(d, today), d))
    return cells


def group_rows(cells: list[DayCell]) -> list[list[DayCell]]:
    """Group cells into weeks of 7; a short trailing week is kept."""
    rows: list[list[DayCell]] = []
    row: list[DayCell] = []
    for cell in cells:
        row.append(cell)
        if len(row) == 7:
            rows.append(row)
            row = []
    if row:
        rows.append(row)
    return rows


def build_grid(state: CalendarState) -> list[list[DayCell]]:
    """Return the week rows for ``state``'s current month."""
    params = state.params()
    cells = build_cells(state.current, params.start_weekday,
                        params.day_count, state.reference_today)
    return group_rows(cells)


class GridBuilder:
    """Re-derives the grid from a CalendarState each time it's asked."""

    def __init__(self, state: CalendarState) -> None:
        self.state = state

    def cells(self) -> list[DayCell]:
        return [cell for row in self.rows() for cell in row]

    def rows(self) -> list[list[DayCell]]:
        return build_grid(self.state)

    def padding_count(self) -> int:
        return sum(1 for cell in self.cells() if cell.is_padding)
