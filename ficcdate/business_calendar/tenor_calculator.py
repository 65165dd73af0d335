"""
Tenor resolution: spot lag first, then raw date arithmetic, then a single
holiday adjustment of the landing date.
"""

import logging
from datetime import date, timedelta
from typing import Optional

from ficcdate.business_calendar.tenor import Tenor
from ficcdate.conventions.calendars import HolidayCalendar
from ficcdate.conventions.types import TenorCode
from ficcdate.errors import InputError
from ficcdate.schedule.adjustments import HolidayHandler, move_by_business_days
from ficcdate.utils.date import add_months, add_years

logger = logging.getLogger(__name__)

DEFAULT_DAYS_TO_SPOT = 0
DAYS_IN_WEEK = 7


def _adjust(dt: date, calendar: HolidayCalendar, handler: Optional[HolidayHandler]) -> date:
    if handler is None:
        return dt
    return handler.adjust(dt, calendar)


def get_spot_date(start: date, calendar: HolidayCalendar, days_to_spot: int = DEFAULT_DAYS_TO_SPOT) -> date:
    """Spot date: ``days_to_spot`` business days after ``start`` (``start`` itself for zero)."""
    return move_by_business_days(start, calendar, days_to_spot)


def compute_tenor_date(
    start: date,
    tenor: Tenor,
    calendar: HolidayCalendar,
    handler: Optional[HolidayHandler],
    days_to_spot: int = DEFAULT_DAYS_TO_SPOT,
) -> date:
    """Resolve a tenor from ``start`` into a target date.

    ``start`` is first snapped through the handler, which is a no-op for the
    already adjusted current date of a DateCalculator.

    * OVERNIGHT / TOM_NEXT: 1 / 2 business days from the snapped ``start``;
      the spot lag is ignored.
    * SPOT: the spot date, which is the snapped ``start`` for a zero lag.
      SPOT_NEXT: one business day after spot.
    * DAY / WEEK: calendar days (7 per week) added to spot, then adjusted.
    * MONTH / YEAR: months / years added to spot with end-of-month clamping,
      then adjusted.

    After the start is snapped only the landing date is adjusted, so a
    month-end tenor under modified following can land before the naive calendar date.
    """
    if tenor is None:
        raise InputError("Tenor cannot be None")

    start = _adjust(start, calendar, handler)
    code = tenor.code
    if code == TenorCode.OVERNIGHT:
        result = move_by_business_days(start, calendar, 1)
    elif code == TenorCode.TOM_NEXT:
        result = move_by_business_days(start, calendar, 2)
    else:
        spot = get_spot_date(start, calendar, days_to_spot)
        if code == TenorCode.SPOT:
            result = spot
        elif code == TenorCode.SPOT_NEXT:
            result = move_by_business_days(spot, calendar, 1)
        elif code == TenorCode.DAY:
            result = _adjust(spot + timedelta(days=tenor.units), calendar, handler)
        elif code == TenorCode.WEEK:
            result = _adjust(spot + timedelta(days=DAYS_IN_WEEK * tenor.units), calendar, handler)
        elif code == TenorCode.MONTH:
            result = _adjust(add_months(spot, tenor.units), calendar, handler)
        elif code == TenorCode.YEAR:
            result = _adjust(add_years(spot, tenor.units), calendar, handler)
        else:
            raise InputError(f"Unsupported tenor code: {code}")

    logger.debug("Tenor %s from %s (days to spot %s) -> %s", tenor, start, days_to_spot, result)
    return result
