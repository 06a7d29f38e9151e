import dataclasses

import pytest

from strawcore.date import Date, DateInterval


@pytest.mark.parametrize("year, leap", [(2024, True), (2023, False), (1900, False), (2000, True)])
def test_leap_years(year, leap):
    assert Date(year, 0, 0).is_leap_year() is leap


def test_month_lengths_fixed_by_calendar():
    assert Date(2024, 1, 0).month_length() == 29
    assert Date(2023, 1, 0).month_length() == 28
    assert Date(2023, 0, 0).month_length() == 31
    assert Date(2023, 3, 0).month_length() == 30


@pytest.mark.parametrize("year, month, day", [(2024, 12, 0), (2024, -1, 0), (2023, 1, 28), (2023, 0, 31), (2023, 0, -1)])
def test_invalid_dates_rejected(year, month, day):
    with pytest.raises(ValueError):
        Date(year, month, day)


def test_last_day_of_leap_february_is_valid():
    assert Date(2024, 1, 28).day == 28


def test_replace_revalidates():
    with pytest.raises(ValueError):
        dataclasses.replace(Date(2024, 1, 28), year=2023)


def test_day_rolls_into_next_month():
    assert Date(2024, 0, 30) + DateInterval.of_days(1) == Date(2024, 1, 0)


def test_day_rolls_into_next_year():
    assert Date(2023, 11, 30) + DateInterval.of_days(1) == Date(2024, 0, 0)


def test_subtracting_a_day_goes_to_end_of_previous_month():
    start = Date(2024, 2, 0)
    result = start - DateInterval.of_days(1)
    assert result.month == 1
    assert result.day == result.month_length() - 1


def test_months_carry_into_years():
    assert Date(2024, 10, 5) + DateInterval.of_months(3) == Date(2025, 1, 5)


def test_years_added():
    assert Date(2020, 4, 10) + DateInterval.of_years(4) == Date(2024, 4, 10)


def test_whole_year_of_days():
    total = sum(Date(2024, month, 0).month_length() for month in range(12))
    assert Date(2024, 0, 0) + DateInterval.of_days(total) == Date(2025, 0, 0)
    assert Date(2025, 0, 0) - DateInterval.of_days(total) == Date(2024, 0, 0)


@pytest.mark.parametrize("days", [0, 1, 27, 59, 365, 1000, -1, -400])
def test_add_then_subtract_round_trip(days):
    start = Date(2023, 5, 14)
    interval = DateInterval.of_days(days)
    assert (start + interval) - interval == start


def test_stepwise_addition_matches_single_addition():
    start = Date(2023, 10, 20)
    stepped = start
    for _ in range(100):
        stepped += DateInterval.of_days(1)
    assert stepped == start + DateInterval.of_days(100)


def test_interval_arithmetic():
    a = DateInterval(1, 2, 3)
    b = DateInterval(4, 5, 6)
    assert a + b == DateInterval(5, 7, 9)
    assert (a + b) - b == a


def test_interval_constructors():
    assert DateInterval.of_days(3) == DateInterval(0, 0, 3)
    assert DateInterval.of_months(3) == DateInterval(0, 3, 0)
    assert DateInterval.of_years(3) == DateInterval(3, 0, 0)


def test_ordering():
    assert Date(2024, 0, 1) < Date(2024, 1, 0) < Date(2025, 0, 0)
    assert sorted([Date(2025, 0, 0), Date(2024, 0, 1)]) == [Date(2024, 0, 1), Date(2025, 0, 0)]


def test_adding_non_interval_fails():
    with pytest.raises(TypeError):
        Date(2024, 0, 0) + 1