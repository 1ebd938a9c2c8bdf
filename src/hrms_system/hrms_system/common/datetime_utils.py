from __future__ import annotations

from datetime import date, datetime, timedelta


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()


def days_ahead(now: datetime, days: int) -> date:
    return (now + timedelta(days=days)).date()


def inclusive_days(start: date, end: date) -> int:
    return (end - start).days + 1


def month_bounds(year: int, month: int) -> tuple[date, date]:
    """First and last day of a calendar month."""
    first = date(year, month, 1)
    if month == 12:
        next_first = date(year + 1, 1, 1)
    else:
        next_first = date(year, month + 1, 1)
    return first, next_first - timedelta(days=1)


def newest_first(rows, *, key):
    """Sort by timestamp descending; ties put the later-inserted row first."""
    return sorted(reversed(list(rows)), key=key, reverse=True)
