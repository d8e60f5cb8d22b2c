import calendar
from datetime import date

from calendar_logic import CalendarMonth, CalendarState
from month_grid import DayCell, GridBuilder, build_cells, build_grid, group_rows, is_passed

TODAY = date(2024, 6, 15)


def _real_cells(rows: list[list[DayCell]]) -> list[DayCell]:
    return [cell for row in rows for cell in row if not cell.is_padding]


def test_leading_padding_equals_start_weekday() -> None:
    state = CalendarState(date(2024, 1, 1), today=TODAY)
    builder = GridBuilder(state)
    for _ in range(24):
        cells = builder.cells()
        leading = 0
        for cell in cells:
            if not cell.is_padding:
                break
            leading += 1
        assert leading == state.get_start_weekday()
        assert builder.padding_count() == leading
        state.advance_month(1)


def test_real_cell_count_equals_month_length() -> None:
    state = CalendarState(date(2023, 1, 1), today=TODAY)
    for _ in range(24):
        assert len(_real_cells(build_grid(state))) == state.get_month_length()
        state.advance_month(1)


def test_grid_matches_stdlib_calendar_layout() -> None:
    state = CalendarState(date(2024, 9, 1), today=TODAY, first_weekday=calendar.SUNDAY)
    rows = build_grid(state)
    expected = calendar.Calendar(firstweekday=calendar.SUNDAY).monthdayscalendar(2024, 9)
    for row, week in zip(rows, expected):
        labels = [cell.label for cell in row]
        assert labels == [str(d) if d else "" for d in week][:len(row)]


def test_leap_february_last_cell() -> None:
    rows = build_grid(CalendarState(date(2024, 2, 1), today=TODAY))
    last = _real_cells(rows)[-1]
    assert last.label == "29"
    assert last.date == date(2024, 2, 29)


def test_non_leap_february_has_28_days() -> None:
    rows = build_grid(CalendarState(date(2023, 2, 1), today=TODAY))
    assert len(_real_cells(rows)) == 28


def test_passed_flags_in_reference_month() -> None:
    rows = build_grid(CalendarState(date(2024, 6, 1), today=TODAY))
    for cell in _real_cells(rows):
        assert cell.passed == (cell.date.day < 15)


def test_padding_cells_are_never_passed() -> None:
    rows = build_grid(CalendarState(date(2024, 5, 1), today=TODAY))
    padding = [cell for row in rows for cell in row if cell.is_padding]
    assert padding
    assert all(cell.label == "" and not cell.passed for cell in padding)


def test_earlier_months_fully_passed() -> None:
    for seed in (date(2024, 5, 1), date(2023, 12, 1), date(2023, 9, 1)):
        rows = build_grid(CalendarState(seed, today=TODAY))
        assert all(cell.passed for cell in _real_cells(rows))


def test_later_months_not_passed() -> None:
    # January of the following year is in the future even though 1 < 6
    for seed in (date(2024, 7, 1), date(2025, 1, 1), date(2025, 3, 1)):
        rows = build_grid(CalendarState(seed, today=TODAY))
        assert not any(cell.passed for cell in _real_cells(rows))


def test_is_passed_uses_full_chronology() -> None:
    assert is_passed(date(2023, 12, 31), TODAY)
    assert is_passed(date(2024, 6, 14), TODAY)
    assert not is_passed(date(2024, 6, 15), TODAY)
    assert not is_passed(date(2025, 2, 1), TODAY)


def test_rows_for_start_three_and_thirty_days() -> None:
    cells = build_cells(CalendarMonth(2024, 4), start_weekday=3, day_count=30, today=TODAY)
    rows = group_rows(cells)
    assert len(cells) == 33
    assert len(rows) == 5
    assert [len(row) for row in rows] == [7, 7, 7, 7, 5]
    assert rows[-1][-1].date == date(2024, 4, 30)


def test_exact_multiple_of_seven_has_no_trailing_row() -> None:
    # February 2026 starts on a Sunday and has 28 days
    rows = build_grid(CalendarState(date(2026, 2, 1), today=TODAY))
    assert [len(row) for row in rows] == [7, 7, 7, 7]


def test_grid_builder_follows_state_changes() -> None:
    state = CalendarState(date(2024, 2, 1), today=TODAY)
    builder = GridBuilder(state)
    assert _real_cells(builder.rows())[-1].date == date(2024, 2, 29)
    state.advance_month(1)
    assert _real_cells(builder.rows())[-1].date == date(2024, 3, 31)
