"""Tests for tenor parsing and tenor date resolution."""

import pytest
from datetime import date

from ficcdate.business_calendar import tenor as tenors
from ficcdate.business_calendar.tenor import STANDARD_TENORS, Tenor
from ficcdate.business_calendar.tenor_calculator import compute_tenor_date, get_spot_date
from ficcdate.conventions.calendars import HolidayCalendar
from ficcdate.conventions.types import HolidayHandlerType, TenorCode
from ficcdate.errors import InputError
from ficcdate.schedule.adjustments import MODIFIED_FOLLOWING_HANDLER

MF = HolidayHandlerType.MODIFIED_FOLLOWING


class TestTenorParse:
    """Tests for Tenor.parse and its string form."""

    @pytest.mark.parametrize(
        "text, units, code",
        [
            ("ON", 0, TenorCode.OVERNIGHT),
            ("TN", 0, TenorCode.TOM_NEXT),
            ("SP", 0, TenorCode.SPOT),
            ("SN", 0, TenorCode.SPOT_NEXT),
            ("1D", 1, TenorCode.DAY),
            ("2W", 2, TenorCode.WEEK),
            ("3m", 3, TenorCode.MONTH),
            (" 10Y ", 10, TenorCode.YEAR),
        ],
    )
    def test_parse(self, text, units, code) -> None:
        parsed = Tenor.parse(text)
        assert parsed.units == units
        assert parsed.code == code

    @pytest.mark.parametrize("text", ["", "M", "3X", "ABC", "1ON", "1.5M"])
    def test_parse_rejects_garbage(self, text) -> None:
        with pytest.raises(InputError):
            Tenor.parse(text)

    def test_parse_rejects_non_string(self) -> None:
        with pytest.raises(InputError):
            Tenor.parse(3)

    def test_str(self) -> None:
        assert str(Tenor(3, TenorCode.MONTH)) == "3M"
        assert str(tenors.OVERNIGHT) == "ON"
        assert str(Tenor.parse("sn")) == "SN"

    def test_named_tenors_take_no_units(self) -> None:
        with pytest.raises(InputError):
            Tenor(1, TenorCode.OVERNIGHT)
        assert not tenors.SPOT.has_units
        assert tenors.T_3M.has_units

    def test_units_must_be_integer(self) -> None:
        with pytest.raises(InputError):
            Tenor(1.5, TenorCode.MONTH)
        with pytest.raises(InputError):
            Tenor(True, TenorCode.MONTH)

    def test_standard_tenors(self) -> None:
        assert STANDARD_TENORS["3M"] == Tenor(3, TenorCode.MONTH)
        assert STANDARD_TENORS["ON"] is tenors.OVERNIGHT
        assert "50Y" in STANDARD_TENORS


def _tenor_date(make_calculator, start, tenor, days_to_spot):
    cal = make_calculator(MF, holidays=[date(2006, 8, 28), date(2006, 12, 25), date(2006, 12, 26)])
    cal.set_start_date(start)
    return cal.move_by_tenor(tenor, days_to_spot)


class TestMoveByTenor:
    """Tenor moves under modified following, for spot lags of 0, 1 and 2."""

    @pytest.mark.parametrize(
        "start, tenor, expected",
        [
            (date(2006, 8, 8), "1D", (date(2006, 8, 9), date(2006, 8, 10), date(2006, 8, 11))),
            (date(2006, 8, 8), "2D", (date(2006, 8, 10), date(2006, 8, 11), date(2006, 8, 14))),
            (date(2006, 8, 8), "1W", (date(2006, 8, 15), date(2006, 8, 16), date(2006, 8, 17))),
            (date(2006, 8, 8), "2W", (date(2006, 8, 22), date(2006, 8, 23), date(2006, 8, 24))),
            (date(2006, 8, 8), "4W", (date(2006, 9, 5), date(2006, 9, 6), date(2006, 9, 7))),
            (date(2006, 8, 31), "1M", (date(2006, 9, 29), date(2006, 10, 2), date(2006, 10, 4))),
            (date(2006, 8, 31), "2M", (date(2006, 10, 31), date(2006, 11, 1), date(2006, 11, 6))),
            (date(2006, 1, 31), "1M", (date(2006, 2, 28), date(2006, 3, 1), date(2006, 3, 2))),
            (date(2008, 1, 31), "1M", (date(2008, 2, 29), date(2008, 3, 3), date(2008, 3, 4))),
            (date(2006, 8, 8), "1M", (date(2006, 9, 8), date(2006, 9, 11), date(2006, 9, 11))),
            (date(2006, 8, 9), "1M", (date(2006, 9, 11), date(2006, 9, 11), date(2006, 9, 11))),
            (date(2006, 8, 8), "2M", (date(2006, 10, 9), date(2006, 10, 9), date(2006, 10, 10))),
            (date(2006, 8, 8), "5M", (date(2007, 1, 8), date(2007, 1, 9), date(2007, 1, 10))),
            (date(2006, 8, 31), "1Y", (date(2007, 8, 31), date(2007, 9, 3), date(2007, 9, 4))),
            (date(2006, 8, 31), "2Y", (date(2008, 8, 29), date(2008, 9, 1), date(2008, 9, 4))),
            (date(2008, 2, 29), "1Y", (date(2009, 2, 27), date(2009, 3, 3), date(2009, 3, 4))),
            (date(2008, 2, 29), "4Y", (date(2012, 2, 29), date(2012, 3, 5), date(2012, 3, 5))),
            (date(2006, 8, 31), "SP", (date(2006, 8, 31), date(2006, 9, 1), date(2006, 9, 4))),
            (date(2006, 8, 28), "SP", (date(2006, 8, 29), date(2006, 8, 30), date(2006, 8, 31))),
        ],
    )
    def test_tenor_table(self, make_calculator, start, tenor, expected) -> None:
        for days_to_spot, expected_date in enumerate(expected):
            assert _tenor_date(make_calculator, start, tenor, days_to_spot) == expected_date

    @pytest.mark.parametrize(
        "start, days_to_spot, tenor, expected",
        [
            (date(2006, 8, 8), 0, "10D", date(2006, 8, 18)),
            (date(2006, 8, 8), 0, "11D", date(2006, 8, 21)),
            (date(2006, 8, 8), 0, "12D", date(2006, 8, 21)),
            (date(2006, 8, 8), 0, "13D", date(2006, 8, 21)),
            (date(2006, 9, 26), 0, "4D", date(2006, 9, 29)),
            (date(2006, 8, 7), 1, "10D", date(2006, 8, 18)),
            (date(2006, 8, 7), 1, "13D", date(2006, 8, 21)),
            (date(2006, 8, 7), 2, "10D", date(2006, 8, 21)),
            (date(2006, 8, 7), 2, "12D", date(2006, 8, 21)),
            (date(2006, 8, 7), 2, "13D", date(2006, 8, 22)),
        ],
    )
    def test_day_tenors_count_calendar_days(self, make_calculator, start, days_to_spot, tenor, expected) -> None:
        assert _tenor_date(make_calculator, start, tenor, days_to_spot) == expected

    @pytest.mark.parametrize(
        "start, expected",
        [
            (date(2006, 8, 24), date(2006, 8, 25)),
            (date(2006, 8, 25), date(2006, 8, 29)),
            (date(2006, 8, 31), date(2006, 9, 1)),
            (date(2006, 8, 28), date(2006, 8, 30)),
        ],
    )
    def test_overnight_ignores_spot_lag(self, make_calculator, start, expected) -> None:
        for days_to_spot in (0, 1, 2):
            assert _tenor_date(make_calculator, start, "ON", days_to_spot) == expected

    def test_tom_next_and_spot_next(self, make_calculator) -> None:
        assert _tenor_date(make_calculator, date(2006, 8, 24), "TN", 0) == date(2006, 8, 29)
        assert _tenor_date(make_calculator, date(2006, 8, 24), "SN", 0) == date(2006, 8, 25)
        assert _tenor_date(make_calculator, date(2006, 8, 24), "SN", 2) == date(2006, 8, 30)

    def test_move_by_tenor_accepts_tenor_instances(self, make_calculator) -> None:
        assert _tenor_date(make_calculator, date(2006, 8, 8), tenors.T_1M, 0) == date(2006, 9, 8)

    def test_move_by_tenor_moves_cursor(self, make_calculator) -> None:
        cal = make_calculator(MF)
        cal.set_start_date(date(2006, 8, 8))
        cal.move_by_tenor("1W")
        assert cal.current_date == date(2006, 8, 15)
        assert cal.start_date == date(2006, 8, 8)

    def test_bad_tenor_string_leaves_cursor(self, make_calculator) -> None:
        cal = make_calculator(MF)
        cal.set_start_date(date(2006, 8, 8))
        with pytest.raises(InputError):
            cal.move_by_tenor("3Q")
        assert cal.current_date == date(2006, 8, 8)


class TestCalculateTenorDates:
    """Tests for resolving a strip of tenors from one date."""

    TENORS = ["ON", "SP", "1D", "2D", "1W", "1M", "2M", "3M", "6M", "9M", "1Y"]

    def _calculator(self, make_calculator, uk_holidays: HolidayCalendar):
        cal = make_calculator(MF)
        cal.holiday_calendar = uk_holidays
        cal.set_start_date(date(2006, 8, 24))
        return cal

    def test_no_spot_lag(self, make_calculator, uk_holidays) -> None:
        cal = self._calculator(make_calculator, uk_holidays)
        assert cal.calculate_tenor_dates(self.TENORS) == [
            date(2006, 8, 25),
            date(2006, 8, 24),
            date(2006, 8, 25),
            date(2006, 8, 29),
            date(2006, 8, 31),
            date(2006, 9, 25),
            date(2006, 10, 24),
            date(2006, 11, 24),
            date(2007, 2, 26),
            date(2007, 5, 24),
            date(2007, 8, 24),
        ]
        assert cal.current_date == date(2006, 8, 24)

    def test_two_day_spot_lag(self, make_calculator, uk_holidays) -> None:
        cal = self._calculator(make_calculator, uk_holidays)
        assert cal.calculate_tenor_dates(self.TENORS, 2) == [
            date(2006, 8, 25),
            date(2006, 8, 29),
            date(2006, 8, 30),
            date(2006, 8, 31),
            date(2006, 9, 5),
            date(2006, 9, 29),
            date(2006, 10, 30),
            date(2006, 11, 29),
            date(2007, 2, 28),
            date(2007, 5, 29),
            date(2007, 8, 29),
        ]
        assert cal.current_date == date(2006, 8, 24)

    def test_none_and_empty(self, make_calculator, uk_holidays) -> None:
        cal = self._calculator(make_calculator, uk_holidays)
        assert cal.calculate_tenor_dates(None) == []
        assert cal.calculate_tenor_dates([]) == []


class TestComputeTenorDate:
    """Tests for the stateless tenor functions."""

    def test_spot_date(self, bank_holidays: HolidayCalendar) -> None:
        assert get_spot_date(date(2006, 8, 24), bank_holidays, 0) == date(2006, 8, 24)
        assert get_spot_date(date(2006, 8, 24), bank_holidays, 2) == date(2006, 8, 29)

    def test_no_handler_leaves_landing_date(self) -> None:
        calendar = HolidayCalendar()
        result = compute_tenor_date(date(2006, 8, 8), Tenor(4, TenorCode.DAY), calendar, None)
        assert result == date(2006, 8, 12)

    def test_with_handler(self) -> None:
        calendar = HolidayCalendar()
        result = compute_tenor_date(date(2006, 8, 8), Tenor(4, TenorCode.DAY), calendar, MODIFIED_FOLLOWING_HANDLER)
        assert result == date(2006, 8, 14)

    def test_none_tenor(self) -> None:
        with pytest.raises(InputError):
            compute_tenor_date(date(2006, 8, 8), None, HolidayCalendar(), MODIFIED_FOLLOWING_HANDLER)

    @pytest.mark.parametrize(
        "tenor, expected",
        [
            (tenors.SPOT, date(2006, 8, 7)),
            (tenors.OVERNIGHT, date(2006, 8, 8)),
            (tenors.TOM_NEXT, date(2006, 8, 9)),
            (tenors.SPOT_NEXT, date(2006, 8, 8)),
        ],
    )
    def test_weekend_start_is_snapped(self, tenor, expected) -> None:
        saturday = date(2006, 8, 5)
        result = compute_tenor_date(saturday, tenor, HolidayCalendar(), MODIFIED_FOLLOWING_HANDLER)
        assert result == expected

    def test_holiday_start_is_snapped_before_spot_lag(self, bank_holidays: HolidayCalendar) -> None:
        result = compute_tenor_date(date(2006, 8, 28), tenors.SPOT, bank_holidays, MODIFIED_FOLLOWING_HANDLER, 1)
        assert result == date(2006, 8, 30)

    def test_no_handler_keeps_weekend_start(self) -> None:
        result = compute_tenor_date(date(2006, 8, 5), tenors.SPOT, HolidayCalendar(), None)
        assert result == date(2006, 8, 5)
