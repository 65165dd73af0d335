"""
Holiday handlers: roll conventions and business-day stepping.
"""

import logging
from dataclasses import dataclass
from datetime import date, timedelta
from typing import Dict, Optional, Union

from ficcdate.conventions.calendars import HolidayCalendar
from ficcdate.conventions.types import HolidayHandlerType
from ficcdate.errors import ConfigurationError

logger = logging.getLogger(__name__)

_ONE_DAY = timedelta(days=1)


def _check_terminates(calendar: HolidayCalendar) -> None:
    if not calendar.working_week.has_working_day():
        raise ConfigurationError(
            f"Working week of calendar '{calendar.name}' has no working day; "
            "no business day can ever be reached"
        )


def roll_forward(dt: date, calendar: HolidayCalendar) -> date:
    """First working day on or after ``dt``."""
    _check_terminates(calendar)
    while calendar.is_non_working_day(dt):
        dt += _ONE_DAY
    return dt


def roll_backward(dt: date, calendar: HolidayCalendar) -> date:
    """Last working day on or before ``dt``."""
    _check_terminates(calendar)
    while calendar.is_non_working_day(dt):
        dt -= _ONE_DAY
    return dt


def adjust_date(dt: date, handler_type: HolidayHandlerType, calendar: HolidayCalendar) -> date:
    """Apply a roll convention to a date."""
    if handler_type == HolidayHandlerType.FORWARD:
        return roll_forward(dt, calendar)

    elif handler_type == HolidayHandlerType.BACKWARD:
        return roll_backward(dt, calendar)

    elif handler_type == HolidayHandlerType.MODIFIED_FOLLOWING:
        adjusted = roll_forward(dt, calendar)
        # If month changed, use preceding instead
        if adjusted.month != dt.month:
            adjusted = roll_backward(dt, calendar)
        return adjusted

    elif handler_type == HolidayHandlerType.MODIFIED_PRECEDING:
        adjusted = roll_backward(dt, calendar)
        # If month changed, use following instead
        if adjusted.month != dt.month:
            adjusted = roll_forward(dt, calendar)
        return adjusted

    else:
        raise ConfigurationError(f"Unknown holiday handler: {handler_type}")


def move_by_business_days(dt: date, calendar: HolidayCalendar, business_days: int) -> date:
    """Step ``business_days`` working days away from ``dt``.

    Each step moves one calendar day in the sign of ``business_days``; only
    landings on working days are counted. Zero returns ``dt`` unchanged.
    """
    if business_days == 0:
        return dt
    _check_terminates(calendar)

    step = _ONE_DAY if business_days > 0 else -_ONE_DAY
    remaining = abs(business_days)
    current = dt
    while remaining > 0:
        current += step
        if not calendar.is_non_working_day(current):
            remaining -= 1

    logger.debug("Moved %s business days: %s -> %s", business_days, dt, current)
    return current


@dataclass(frozen=True)
class HolidayHandler:
    """Stateless roll convention bound to a handler type."""

    handler_type: HolidayHandlerType

    def adjust(self, dt: date, calendar: HolidayCalendar) -> date:
        return adjust_date(dt, self.handler_type, calendar)

    def move_by_business_days(self, dt: date, calendar: HolidayCalendar, business_days: int) -> date:
        """Step working days from ``dt``; zero returns ``dt`` rolled by this handler."""
        if business_days == 0:
            return self.adjust(dt, calendar)
        return move_by_business_days(dt, calendar, business_days)

    def __str__(self) -> str:
        return self.handler_type.value


FORWARD_HANDLER = HolidayHandler(HolidayHandlerType.FORWARD)
BACKWARD_HANDLER = HolidayHandler(HolidayHandlerType.BACKWARD)
MODIFIED_FOLLOWING_HANDLER = HolidayHandler(HolidayHandlerType.MODIFIED_FOLLOWING)
MODIFIED_PRECEDING_HANDLER = HolidayHandler(HolidayHandlerType.MODIFIED_PRECEDING)

HANDLERS: Dict[HolidayHandlerType, HolidayHandler] = {
    HolidayHandlerType.FORWARD: FORWARD_HANDLER,
    HolidayHandlerType.BACKWARD: BACKWARD_HANDLER,
    HolidayHandlerType.MODIFIED_FOLLOWING: MODIFIED_FOLLOWING_HANDLER,
    HolidayHandlerType.MODIFIED_PRECEDING: MODIFIED_PRECEDING_HANDLER,
}


def parse_handler_type(
    handler_type: Optional[Union[str, HolidayHandlerType]],
) -> Optional[HolidayHandlerType]:
    """Validate a handler type given as enum or string; None means no adjustment."""
    if handler_type is None or isinstance(handler_type, HolidayHandlerType):
        return handler_type
    if isinstance(handler_type, str):
        try:
            return HolidayHandlerType(handler_type)
        except ValueError:
            pass
    raise ConfigurationError(
        f"Unsupported HolidayHandler: {handler_type!r}. "
        f"Available: {[t.value for t in HolidayHandlerType]}"
    )


def get_holiday_handler(
    handler_type: Optional[Union[str, HolidayHandlerType]],
) -> Optional[HolidayHandler]:
    """Shared handler instance for a type, or None for no adjustment."""
    parsed = parse_handler_type(handler_type)
    if parsed is None:
        return None
    return HANDLERS[parsed]
