"""
Shared pytest fixtures for ficcdate tests.

Provides holiday sets and calculator builders used across the suite.
"""

import pytest
from datetime import date
from typing import Callable, Iterable, Optional

from ficcdate.business_calendar.date_calculator import DateCalculator
from ficcdate.conventions.calendars import HolidayCalendar
from ficcdate.conventions.types import HolidayHandlerType


BANK_HOLIDAYS_2006 = {
    date(2006, 8, 28),
    date(2006, 12, 25),
    date(2006, 12, 26),
}

UK_HOLIDAYS_2006_2007 = {
    date(2006, 1, 2),
    date(2006, 4, 14),
    date(2006, 4, 17),
    date(2006, 5, 1),
    date(2006, 5, 29),
    date(2006, 8, 28),
    date(2006, 12, 25),
    date(2006, 12, 26),
    date(2007, 1, 1),
    date(2007, 4, 6),
    date(2007, 4, 9),
    date(2007, 5, 7),
    date(2007, 5, 28),
    date(2007, 8, 27),
    date(2007, 12, 25),
    date(2007, 12, 26),
}


@pytest.fixture
def bank_holidays() -> HolidayCalendar:
    """Three 2006 holidays: August bank holiday, Christmas and Boxing Day."""
    return HolidayCalendar(BANK_HOLIDAYS_2006, name="bla")


@pytest.fixture
def uk_holidays() -> HolidayCalendar:
    """UK bank holidays for 2006 and 2007."""
    return HolidayCalendar(UK_HOLIDAYS_2006_2007, name="UK")


@pytest.fixture
def make_calculator() -> Callable[..., DateCalculator]:
    """Builder for calculators with an optional holiday set."""

    def _make(
        handler_type: Optional[HolidayHandlerType] = HolidayHandlerType.MODIFIED_FOLLOWING,
        holidays: Optional[Iterable[date]] = None,
        name: str = "bla",
    ) -> DateCalculator:
        calendar = HolidayCalendar(holidays, name=name) if holidays is not None else None
        return DateCalculator(name, handler_type, calendar)

    return _make
