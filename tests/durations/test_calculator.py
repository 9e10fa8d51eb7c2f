from datetime import date

import pytest

from src.employee_records.employee_records.durations.calculator import calculate_duration, days_in_previous_month
from src.employee_records.employee_records.durations.model import ZERO, Duration


def test_same_day_is_zero():
    d = date(2023, 7, 9)
    assert calculate_duration(d, d) == ZERO


def test_missing_side_is_zero():
    assert calculate_duration(None, date(2020, 1, 1)) == ZERO
    assert calculate_duration(date(2020, 1, 1), None) == ZERO


def test_whole_year():
    assert calculate_duration(date(2018, 1, 1), date(2019, 1, 1)) == Duration(1, 0, 0)


def test_borrow_across_leap_february():
    assert calculate_duration(date(2000, 1, 31), date(2000, 3, 1)) == Duration(0, 1, 1)


def test_borrow_across_common_february():
    assert calculate_duration(date(2001, 1, 31), date(2001, 3, 1)) == Duration(0, 1, 1)


def test_borrow_from_december_of_previous_year():
    assert calculate_duration(date(2019, 12, 15), date(2020, 1, 10)) == Duration(0, 0, 26)


def test_day_before_birthday():
    assert calculate_duration(date(1990, 6, 15), date(2024, 6, 14)) == Duration(33, 11, 30)


def test_start_after_end_is_not_rejected():
    assert calculate_duration(date(2020, 1, 1), date(2019, 1, 1)) == Duration(-1, 0, 0)


def test_start_after_end_goes_through_both_borrows():
    assert calculate_duration(date(2020, 3, 15), date(2020, 1, 10)) == Duration(-1, 9, 26)


@pytest.mark.parametrize(
    "start,end,expected",
    [
        (date(2020, 3, 31), date(2020, 5, 1), Duration(0, 1, 0)),
        (date(2001, 1, 31), date(2001, 3, 3), Duration(0, 1, 0)),
        (date(2001, 1, 29), date(2001, 3, 1), Duration(0, 1, 0)),
        (date(1990, 5, 31), date(2024, 7, 1), Duration(34, 1, 0)),
    ],
)
def test_month_end_start_borrows_full_previous_month(start, end, expected):
    assert calculate_duration(start, end) == expected


@pytest.mark.parametrize(
    "start,end",
    [
        (date(2000, 1, 31), date(2000, 2, 29)),
        (date(1999, 3, 31), date(2000, 3, 1)),
        (date(2020, 5, 31), date(2020, 7, 1)),
        (date(2021, 8, 30), date(2022, 3, 2)),
        (date(1985, 12, 31), date(2024, 1, 1)),
        (date(2023, 10, 19), date(2026, 10, 19)),
    ],
)
def test_ordered_dates_give_normalized_non_negative_fields(start, end):
    result = calculate_duration(start, end)
    assert result.years >= 0
    assert 0 <= result.months <= 11
    assert result.days >= 0


def test_days_in_previous_month():
    assert days_in_previous_month(date(2024, 3, 10)) == 29
    assert days_in_previous_month(date(2023, 3, 10)) == 28
    assert days_in_previous_month(date(2024, 1, 10)) == 31
