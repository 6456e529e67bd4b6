from datetime import date, datetime, timedelta

import pytest

from calendar_logic import month_grid
from selection import (
    DayState,
    Endpoint,
    classify,
    endpoint,
    is_in_range,
    is_selected,
    selection_summary,
    sorted_dates,
    toggle,
)

MAR = lambda day: date(2024, 3, day)  # noqa: E731


def test_empty_selection_classifies_nothing():
    selected = frozenset()
    for d in filter(None, month_grid(MAR(1))):
        assert not is_selected(selected, d)
        assert endpoint(selected, d) is Endpoint.NONE
        assert not is_in_range(selected, d)
        assert classify(selected, d) is DayState.DEFAULT


def test_two_dates_form_a_range():
    selected = toggle(toggle(frozenset(), MAR(15)), MAR(10))

    assert endpoint(selected, MAR(10)) is Endpoint.START
    assert endpoint(selected, MAR(15)) is Endpoint.END
    assert endpoint(selected, MAR(12)) is Endpoint.NONE

    for day in range(10, 16):
        assert is_in_range(selected, MAR(day))
    assert not is_in_range(selected, MAR(9))
    assert not is_in_range(selected, MAR(16))

    assert classify(selected, MAR(10)) is DayState.ENDPOINT
    assert classify(selected, MAR(12)) is DayState.IN_RANGE
    assert classify(selected, MAR(20)) is DayState.DEFAULT


def test_single_date_is_both_endpoints_and_not_in_range():
    selected = toggle(frozenset(), MAR(10))
    assert endpoint(selected, MAR(10)) is Endpoint.BOTH
    assert endpoint(selected, MAR(11)) is Endpoint.NONE
    assert not is_in_range(selected, MAR(10))
    assert classify(selected, MAR(10)) is DayState.ENDPOINT


def test_interior_selected_date():
    selected = frozenset({MAR(5), MAR(8), MAR(20)})
    assert endpoint(selected, MAR(8)) is Endpoint.NONE
    assert classify(selected, MAR(8)) is DayState.SELECTED
    assert classify(selected, MAR(9)) is DayState.IN_RANGE
    assert classify(selected, MAR(5)) is DayState.ENDPOINT
    assert classify(selected, MAR(20)) is DayState.ENDPOINT


def test_toggle_twice_from_empty_is_empty():
    assert toggle(toggle(frozenset(), MAR(10)), MAR(10)) == frozenset()


@pytest.mark.parametrize("selected", [
    frozenset(),
    frozenset({MAR(10)}),
    frozenset({MAR(1), MAR(10), MAR(31)}),
])
@pytest.mark.parametrize("d", [MAR(1), MAR(10), MAR(11)])
def test_toggle_is_self_inverse(selected, d):
    assert toggle(toggle(selected, d), d) == selected


def test_toggle_does_not_mutate_input():
    selected = {MAR(1)}
    result = toggle(selected, MAR(2))
    assert selected == {MAR(1)}
    assert result == {MAR(1), MAR(2)}


def test_datetime_inputs_compare_by_day():
    selected = toggle(frozenset(), datetime(2024, 3, 10, 9, 30))
    assert is_selected(selected, datetime(2024, 3, 10, 22, 0))
    assert toggle(selected, datetime(2024, 3, 10, 1, 0)) == frozenset()


@pytest.mark.parametrize("selected", [frozenset(), frozenset({MAR(10)})])
def test_in_range_false_for_small_selections(selected):
    for offset in range(-3, 4):
        assert not is_in_range(selected, MAR(10) + timedelta(days=offset))


def test_both_only_for_single_member():
    assert endpoint(frozenset({MAR(3)}), MAR(3)) is Endpoint.BOTH
    many = frozenset({MAR(3), MAR(4)})
    assert all(endpoint(many, d) is not Endpoint.BOTH for d in many)


def test_range_spans_months():
    selected = frozenset({date(2024, 2, 27), date(2024, 3, 2)})
    assert is_in_range(selected, date(2024, 2, 29))
    assert is_in_range(selected, MAR(1))
    assert not is_in_range(selected, MAR(3))


def test_sorted_dates():
    assert sorted_dates({MAR(15), MAR(1), MAR(9)}) == [MAR(1), MAR(9), MAR(15)]


def test_selection_summary():
    assert selection_summary(frozenset()) == ""
    assert selection_summary({MAR(10)}) == "1 date selected"
    assert selection_summary({MAR(10), MAR(15)}) == (
        "2 dates selected · Mar 10, 2024 → Mar 15, 2024, 6 days (6 days)"
    )
    assert selection_summary({MAR(1), MAR(5), MAR(15)}) == (
        "3 dates selected · Mar 1, 2024 → Mar 15, 2024, 15 days (2 weeks, 1 day)"
    )
