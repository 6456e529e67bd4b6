"""Immutable picker state: the visible month plus the selected dates."""

from __future__ import annotations

import calendar
import logging
from dataclasses import dataclass, field, replace
from datetime import date
from typing import Callable

from calendar_logic import as_day, format_month_header, month_grid, shift_month
from selection import sorted_dates, toggle

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PickerState:
    visible_month: date
    selected: frozenset[date] = field(default_factory=frozenset)

    @classmethod
    def initial(cls, today: date | None = None) -> "PickerState":
        """Current month, nothing selected."""
        return cls(visible_month=as_day(today or date.today()))

    def toggled(self, d: date) -> "PickerState":
        return replace(self, selected=toggle(self.selected, d))

    def shifted(self, delta: int) -> "PickerState":
        return replace(self, visible_month=shift_month(self.visible_month, delta))

    def cleared(self) -> "PickerState":
        return replace(self, selected=frozenset())

    def at_today(self, today: date | None = None) -> "PickerState":
        return replace(self, visible_month=as_day(today or date.today()))

    def cells(self, first_weekday: int = calendar.SUNDAY) -> list[date | None]:
        return month_grid(self.visible_month, first_weekday)


class PickerController:
    """Owns the current PickerState and reports selection changes.

    *on_change* gets the sorted selection whenever a transition changes it;
    an exception from the callback is logged and the new state kept.
    """

    def __init__(self, state: PickerState | None = None,
                 on_change: Callable[[list[date]], None] | None = None) -> None:
        self.state = state or PickerState.initial()
        self.on_change = on_change

    def selected_dates(self) -> list[date]:
        return sorted_dates(self.state.selected)

    def apply(self, new_state: PickerState) -> tuple[bool, bool]:
        """Replace the state; return (month_changed, selection_changed)."""
        old_state = self.state
        self.state = new_state
        month_changed = new_state.visible_month != old_state.visible_month
        selection_changed = new_state.selected != old_state.selected
        if month_changed:
            logger.debug("Showing %s", format_month_header(new_state.visible_month))
        if selection_changed:
            self._notify()
        return month_changed, selection_changed

    def _notify(self) -> None:
        dates = self.selected_dates()
        logger.debug("Selection changed: %d date(s)", len(dates))
        if self.on_change is None:
            return
        try:
            self.on_change(dates)
        except Exception:
            logger.exception("on_change callback failed")

    def toggle(self, d: date) -> tuple[bool, bool]:
        return self.apply(self.state.toggled(d))

    def clear(self) -> tuple[bool, bool]:
        return self.apply(self.state.cleared())

    def navigate(self, delta: int) -> tuple[bool, bool]:
        return self.apply(self.state.shifted(delta))

    def go_today(self, today: date | None = None) -> tuple[bool, bool]:
        return self.apply(self.state.at_today(today))
