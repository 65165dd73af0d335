"""
QuantLib-backed holiday sets.

Materialises the holidays of QuantLib's market calendars over a date range
into a HolidayCalendar, so the date calculators can run on official TARGET,
UK or US holiday data.
"""

import logging
from datetime import date
from typing import Dict, Optional, Union

import QuantLib as ql

from ficcdate.conventions.calendars import HolidayCalendar
from ficcdate.conventions.working_week import WorkingWeek
from ficcdate.errors import InputError
from ficcdate.utils.date import DateLike, to_date

logger = logging.getLogger(__name__)


def _to_ql_date(date_like: DateLike) -> ql.Date:
    """Convert a date-like to QuantLib Date."""
    dt = to_date(date_like)
    return ql.Date(dt.day, dt.month, dt.year)


def _to_py_date(ql_date: ql.Date) -> date:
    """Convert QuantLib Date to Python date."""
    return date(ql_date.year(), ql_date.month(), ql_date.dayOfMonth())


QUANTLIB_CALENDARS: Dict[str, ql.Calendar] = {
    "TARGET": ql.TARGET(),
    "EUR": ql.TARGET(),  # Alias
    "UK": ql.UnitedKingdom(ql.UnitedKingdom.Settlement),
    "USNY": ql.UnitedStates(ql.UnitedStates.Settlement),
    "WEEKEND": ql.WeekendsOnly(),
}


def get_quantlib_calendar(name: str) -> ql.Calendar:
    """Get a QuantLib calendar by name."""
    key = name.upper()
    if key not in QUANTLIB_CALENDARS:
        raise InputError(
            f"Unknown calendar: {name}. Available: {list(QUANTLIB_CALENDARS.keys())}"
        )
    return QUANTLIB_CALENDARS[key]


def holiday_calendar_from_quantlib(
    calendar: Union[str, ql.Calendar],
    start: DateLike,
    end: DateLike,
    name: Optional[str] = None,
    working_week: Optional[WorkingWeek] = None,
) -> HolidayCalendar:
    """
    Build a HolidayCalendar from a QuantLib calendar over [start, end].

    Only weekday holidays are collected; weekends come from the working week.
    The range becomes the calendar's boundaries, so dates outside it raise
    instead of silently looking like working days.
    """
    ql_calendar = get_quantlib_calendar(calendar) if isinstance(calendar, str) else calendar
    if name is None:
        name = calendar if isinstance(calendar, str) else ql_calendar.name()

    start_date = to_date(start)
    end_date = to_date(end)
    if start_date > end_date:
        raise InputError(f"Start {start_date} is after end {end_date}")

    holidays = set()
    current = _to_ql_date(start_date)
    last = _to_ql_date(end_date)
    while current <= last:
        if ql_calendar.isHoliday(current) and not ql_calendar.isWeekend(current.weekday()):
            holidays.add(_to_py_date(current))
        current += 1

    logger.debug("Collected %s %s holidays between %s and %s", len(holidays), name, start_date, end_date)
    return HolidayCalendar(
        holidays,
        working_week,
        name=name,
        early_boundary=start_date,
        late_boundary=end_date,
    )
