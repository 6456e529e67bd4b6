"""Pure calendar calculations: no UI dependencies."""

import calendar
from datetime import date, datetime

DAY_ABBR = ["Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"]


def as_day(value: date) -> date:
    """Truncate a datetime to its calendar day; dates pass through."""
    if isinstance(value, datetime):
        return value.date()
    return value


def month_bounds(reference: date) -> tuple[date, date] | None:
    """Return (first, last) day of the month containing *reference*.

    None if the month cannot be resolved.
    """
    try:
        ndays = calendar.monthrange(reference.year, reference.month)[1]
        first = date(reference.year, reference.month, 1)
        last = date(reference.year, reference.month, ndays)
    except (ValueError, OverflowError):
        return None
    return first, last


def month_grid(reference: date,
               first_weekday: int = calendar.SUNDAY) -> list[date | None]:
    """Return the cells for the month containing *reference*.

    Leading None cells pad day 1 under its weekday column; then one date
    per day in ascending order. No trailing padding.
    """
    bounds = month_bounds(as_day(reference))
    if bounds is None:
        return []
    first, last = bounds
    leading = (first.weekday() - first_weekday) % 7

    cells: list[date | None] = [None] * leading
    for day in range(1, last.day + 1):
        cells.append(first.replace(day=day))
    return cells


def grid_weeks(cells: list[date | None]) -> list[list[date | None]]:
    """Split a flat cell list into rows of 7 (the last row may be short)."""
    return [cells[i:i + 7] for i in range(0, len(cells), 7)]


def weekday_labels(first_weekday: int = calendar.SUNDAY) -> list[str]:
    """Day abbreviations in grid column order."""
    return [DAY_ABBR[(first_weekday + i) % 7] for i in range(7)]


def shift_month(current: date, delta: int) -> date:
    """Move *current* by *delta* whole months, clamping the day.

    Returns *current* unchanged if the target month is out of range.
    """
    current = as_day(current)
    index = current.year * 12 + (current.month - 1) + delta
    year, month0 = divmod(index, 12)
    try:
        ndays = calendar.monthrange(year, month0 + 1)[1]
        return date(year, month0 + 1, min(current.day, ndays))
    except (ValueError, OverflowError):
        return current


def format_month_header(d: date) -> str:
    return f"{calendar.month_name[d.month]} {d.year}"


def format_chip(d: date) -> str:
    """Medium-length date, e.g. 'Mar 10, 2024'."""
    return f"{calendar.month_abbr[d.month]} {d.day}, {d.year}"
