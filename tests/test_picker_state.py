import calendar
import dataclasses
from datetime import date, datetime

import pytest

from picker_state import PickerController, PickerState


def test_initial_state_is_current_month_and_empty():
    state = PickerState.initial(today=date(2024, 3, 17))
    assert state.visible_month == date(2024, 3, 17)
    assert state.selected == frozenset()


def test_initial_defaults_to_today():
    assert PickerState.initial().visible_month == date.today()


def test_initial_truncates_datetime():
    state = PickerState.initial(today=datetime(2024, 3, 17, 12, 0))
    assert state.visible_month == date(2024, 3, 17)


def test_transitions_return_new_states():
    start = PickerState.initial(today=date(2024, 3, 17))
    picked = start.toggled(date(2024, 3, 10))

    assert start.selected == frozenset()
    assert picked.selected == {date(2024, 3, 10)}
    assert picked.visible_month == start.visible_month

    moved = picked.shifted(1)
    assert moved.visible_month == date(2024, 4, 17)
    assert moved.selected == picked.selected

    assert moved.cleared().selected == frozenset()
    assert moved.at_today(today=date(2024, 3, 1)).visible_month == date(2024, 3, 1)


def test_toggle_twice_restores_state():
    state = PickerState.initial(today=date(2024, 3, 17))
    assert state.toggled(date(2024, 3, 10)).toggled(date(2024, 3, 10)) == state


def test_navigation_keeps_selection_across_months():
    state = (PickerState.initial(today=date(2024, 3, 17))
             .toggled(date(2024, 3, 10))
             .shifted(1)
             .toggled(date(2024, 4, 2)))
    assert state.selected == {date(2024, 3, 10), date(2024, 4, 2)}


def test_cells_follow_visible_month():
    state = PickerState.initial(today=date(2024, 3, 17))
    assert len(state.cells(calendar.SUNDAY)) == 36
    assert len(state.shifted(-1).cells(calendar.SUNDAY)) == 4 + 29


def test_state_is_frozen():
    state = PickerState.initial(today=date(2024, 3, 17))
    with pytest.raises(dataclasses.FrozenInstanceError):
        state.visible_month = date(2024, 4, 1)


def make_controller(calls):
    return PickerController(PickerState.initial(today=date(2024, 3, 17)),
                            on_change=calls.append)


def test_controller_reports_sorted_selection():
    calls = []
    controller = make_controller(calls)
    assert controller.toggle(date(2024, 3, 15)) == (False, True)
    assert controller.toggle(date(2024, 3, 10)) == (False, True)
    assert calls == [[date(2024, 3, 15)], [date(2024, 3, 10), date(2024, 3, 15)]]
    assert controller.selected_dates() == [date(2024, 3, 10), date(2024, 3, 15)]


def test_navigation_does_not_fire_on_change():
    calls = []
    controller = make_controller(calls)
    assert controller.navigate(1) == (True, False)
    assert controller.go_today(today=date(2024, 3, 1)) == (True, False)
    assert controller.clear() == (False, False)
    assert calls == []


def test_clear_fires_with_empty_list():
    calls = []
    controller = make_controller(calls)
    controller.toggle(date(2024, 3, 10))
    controller.clear()
    assert calls[-1] == []
    assert controller.state.selected == frozenset()


def test_failing_callback_is_logged_and_state_kept(caplog):
    def broken(_dates):
        raise RuntimeError("host blew up")

    controller = PickerController(PickerState.initial(today=date(2024, 3, 17)),
                                  on_change=broken)
    with caplog.at_level("ERROR", logger="picker_state"):
        assert controller.toggle(date(2024, 3, 10)) == (False, True)

    assert controller.state.selected == {date(2024, 3, 10)}
    assert "on_change callback failed" in caplog.text
    assert "host blew up" in caplog.text
    # Later transitions still work
    controller.toggle(date(2024, 3, 10))
    assert controller.state.selected == frozenset()


def test_controller_without_callback():
    controller = PickerController(PickerState.initial(today=date(2024, 3, 17)))
    assert controller.toggle(date(2024, 3, 10)) == (False, True)
