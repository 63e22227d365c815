"""
Unit tests for weekday <-> day number conversion.
"""

import pytest

from domain.converters import DayNumbering, day_number, weekday_for, weekdays_in_day_order
from domain.models import WEEKDAYS, Weekday


@pytest.mark.unit
class TestMondayFirst:
    @pytest.mark.parametrize(
        "weekday,number",
        [
            (Weekday.MON, 1),
            (Weekday.TUE, 2),
            (Weekday.WED, 3),
            (Weekday.THU, 4),
            (Weekday.FRI, 5),
            (Weekday.SAT, 6),
            (Weekday.SUN, 7),
        ],
    )
    def test_day_number(self, weekday, number):
        assert day_number(weekday) == number
        assert weekday_for(number) == weekday

    def test_day_order(self):
        assert weekdays_in_day_order()[0] == Weekday.MON
        assert weekdays_in_day_order()[-1] == Weekday.SUN


@pytest.mark.unit
class TestSundayFirst:
    def test_sunday_is_one(self):
        assert day_number(Weekday.SUN, DayNumbering.SUNDAY_FIRST) == 1
        assert day_number(Weekday.SAT, DayNumbering.SUNDAY_FIRST) == 7
        assert weekday_for(2, DayNumbering.SUNDAY_FIRST) == Weekday.MON

    def test_accepts_string_value(self):
        assert day_number(Weekday.SUN, "sunday_first") == 1

    def test_day_order_matches_display_order(self):
        assert weekdays_in_day_order(DayNumbering.SUNDAY_FIRST) == list(WEEKDAYS)


@pytest.mark.unit
class TestConversionRoundTrip:
    @pytest.mark.parametrize("numbering", list(DayNumbering))
    def test_every_weekday_maps_to_a_distinct_number(self, numbering):
        numbers = {day_number(weekday, numbering) for weekday in WEEKDAYS}
        assert numbers == set(range(1, 8))


@pytest.mark.unit
@pytest.mark.parametrize("number", [0, 8, -1])
def test_weekday_for_out_of_range(number):
    with pytest.raises(ValueError, match="between 1 and 7"):
        weekday_for(number)
