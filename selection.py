"""Selection tracking for a set of individually picked dates.

The earliest and latest selected dates are the range endpoints; every day
between them (inclusive) is "in range" once two or more dates are picked.
All functions are pure and take the selection as a frozenset of dates.
"""

from __future__ import annotations

import enum
from datetime import date
from typing import AbstractSet

from calendar_logic import as_day, format_chip


class Endpoint(enum.Enum):
    NONE = "none"
    START = "start"
    END = "end"
    BOTH = "both"


class DayState(enum.Enum):
    """Display classification of one day cell."""

    DEFAULT = "default"
    IN_RANGE = "in_range"
    SELECTED = "selected"
    ENDPOINT = "endpoint"


def toggle(selected: AbstractSet[date], d: date) -> frozenset[date]:
    """Remove *d* if present, otherwise add it."""
    d = as_day(d)
    if d in selected:
        return frozenset(selected) - {d}
    return frozenset(selected) | {d}


def is_selected(selected: AbstractSet[date], d: date) -> bool:
    return as_day(d) in selected


def endpoint(selected: AbstractSet[date], d: date) -> Endpoint:
    if not selected:
        return Endpoint.NONE
    d = as_day(d)
    is_start = d == min(selected)
    is_end = d == max(selected)
    if is_start and is_end:
        return Endpoint.BOTH
    if is_start:
        return Endpoint.START
    if is_end:
        return Endpoint.END
    return Endpoint.NONE


def is_in_range(selected: AbstractSet[date], d: date) -> bool:
    """True if *d* lies within [min, max] of a selection of 2+ dates."""
    if len(selected) <= 1:
        return False
    return min(selected) <= as_day(d) <= max(selected)


def classify(selected: AbstractSet[date], d: date) -> DayState:
    if endpoint(selected, d) is not Endpoint.NONE:
        return DayState.ENDPOINT
    if is_selected(selected, d):
        return DayState.SELECTED
    if is_in_range(selected, d):
        return DayState.IN_RANGE
    return DayState.DEFAULT


def sorted_dates(selected: AbstractSet[date]) -> list[date]:
    return sorted(selected)


def selection_summary(selected: AbstractSet[date]) -> str:
    """One-line description of the selection for the footer."""
    count = len(selected)
    if count == 0:
        return ""
    if count == 1:
        return "1 date selected"

    lo, hi = min(selected), max(selected)
    total_days = (hi - lo).days + 1
    full_weeks, rem_days = divmod(total_days, 7)

    parts: list[str] = []
    if full_weeks:
        parts.append(f"{full_weeks} week{'s' if full_weeks != 1 else ''}")
    if rem_days:
        parts.append(f"{rem_days} day{'s' if rem_days != 1 else ''}")

    range_str = f"{format_chip(lo)} → {format_chip(hi)}"
    return (f"{count} dates selected · {range_str}, "
            f"{total_days} days ({', '.join(parts)})")
