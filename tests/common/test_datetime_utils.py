from datetime import date, datetime

import pytest

from worktime.common.datetime_utils import YearMonth, end_of_day, start_of_day
from worktime.core.exceptions import ValidationError


def test_year_month_bounds_leap_february():
    start, end = YearMonth(2024, 2).bounds()

    assert start == datetime(2024, 2, 1, 0, 0)
    assert end == datetime(2024, 2, 29, 23, 59, 59, 999999)


def test_year_month_parse_and_str():
    ym = YearMonth.parse("2024-03")

    assert ym == YearMonth(2024, 3)
    assert str(ym) == "2024-03"
    assert YearMonth.of(ym) is ym
    assert ym.last_day() == date(2024, 3, 31)


@pytest.mark.parametrize("value", ["2024-13", "March 2024", ""])
def test_year_month_parse_invalid(value):
    with pytest.raises(ValidationError):
        YearMonth.parse(value)


def test_year_month_rejects_bad_month():
    with pytest.raises(ValidationError):
        YearMonth(2024, 0)


def test_day_bounds():
    day = date(2024, 3, 4)

    assert start_of_day(day) == datetime(2024, 3, 4)
    assert end_of_day(day) == datetime(2024, 3, 4, 23, 59, 59, 999999)
