"""Pure calendar calculations, no UI dependencies."""

import calendar
import logging
from dataclasses import dataclass
from datetime import MAXYEAR, MINYEAR, date, datetime, timedelta
from functools import lru_cache
from typing import NamedTuple

logger = logging.getLogger(__name__)

# Captured once per process; instances copy it at construction.
TODAY = date.today()

# 2024-01-01 was a Monday, so REFERENCE_MONDAY + n falls on weekday n.
_REFERENCE_MONDAY = date(2024, 1, 1)

# Month ordinals (year * 12 + month - 1) of date.min and date.max
_MIN_TOTAL = MINYEAR * 12
_MAX_TOTAL = MAXYEAR * 12 + 11


@dataclass(frozen=True, order=True)
class CalendarMonth:
    """A (year, month) pair, month in 1–12. Ordering is chronological."""

    year: int
    month: int

    def __post_init__(self) -> None:
        if not 1 <= self.month <= 12:
            raise ValueError(f"month must be in 1..12, got {self.month}")

    @classmethod
    def from_date(cls, d: date) -> "CalendarMonth":
        return cls(d.year, d.month)

    def offset(self, delta: int) -> "CalendarMonth":
        """Return the month ``delta`` months away, rolling over the year.

        The result is clamped to the months ``datetime.date`` can represent
        (January of year 1 to December 9999).
        """
        total = self.year * 12 + self.month - 1 + delta
        total = max(_MIN_TOTAL, min(total, _MAX_TOTAL))
        year, month = divmod(total, 12)
        return CalendarMonth(year, month + 1)

    def first_day(self) -> date:
        return date(self.year, self.month, 1)

    def day(self, n: int) -> date:
        return date(self.year, self.month, n)


class DerivedGridParams(NamedTuple):
    start_weekday: int
    day_count: int
    weekday_short_names: list[str]


@lru_cache(maxsize=None)
def month_length(year: int, month: int) -> int:
    """Return the number of days in the given month (28–31)."""
    return calendar.monthrange(year, month)[1]


def weekday_short_names(first_weekday: int = calendar.SUNDAY) -> list[str]:
    """Return 7 locale-formatted weekday abbreviations starting at ``first_weekday``.

    Walks 7 consecutive days from a reference date falling on
    ``first_weekday`` so the labels always line up with the grid columns.
    """
    begin = _REFERENCE_MONDAY + timedelta(days=first_weekday % 7)
    return [(begin + timedelta(days=i)).strftime("%a") for i in range(7)]


def month_display_name(month: int) -> str:
    """Return the locale long-form name of a month (1–12)."""
    return calendar.month_name[month]


def coerce_seed(seed) -> date | None:
    """Turn a seed value into a date, or None when it can't be read."""
    if isinstance(seed, datetime):
        return seed.date()
    if isinstance(seed, date):
        return seed
    if isinstance(seed, str):
        try:
            return date.fromisoformat(seed.strip())
        except ValueError:
            return None
    return None


class CalendarState:
    """Owns the current month pointer and derives the grid parameters from it."""

    def __init__(self, seed=None, today: date | None = None,
                 first_weekday: int = calendar.SUNDAY) -> None:
        self.reference_today: date = today or TODAY
        self.first_weekday = first_weekday % 7
        self.initialize(seed)

    def initialize(self, seed=None) -> None:
        """Point ``current`` at the month of ``seed``.

        Missing or unreadable seeds fall back to the real current date.
        """
        seed_date = coerce_seed(seed)
        if seed_date is None:
            if seed is not None:
                logger.warning("Invalid seed date %r, falling back to today", seed)
            seed_date = date.today()
        self.current = CalendarMonth.from_date(seed_date)

    def advance_month(self, delta: int) -> None:
        self.current = self.current.offset(delta)
        logger.debug("Advanced %+d month(s) to %04d-%02d",
                     delta, self.current.year, self.current.month)

    def get_weekday_short_names(self) -> list[str]:
        return weekday_short_names(self.first_weekday)

    def get_month_length(self) -> int:
        return month_length(self.current.year, self.current.month)

    def get_start_weekday(self) -> int:
        """Offset (0–6) of the 1st of the month from the first day of week."""
        return (self.current.first_day().weekday() - self.first_weekday) % 7

    def get_month_name(self) -> str:
        return month_display_name(self.current.month)

    def get_title(self) -> str:
        return f"{self.get_month_name()} {self.current.year}"

    def params(self) -> DerivedGridParams:
        return DerivedGridParams(
            self.get_start_weekday(),
            self.get_month_length(),
            self.get_weekday_short_names(),
        )
