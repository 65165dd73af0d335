"""
Calculator factory: holiday calendar registry and calculator construction.
"""

import logging
from typing import Dict, List, Optional, Union

from ficcdate.business_calendar.date_calculator import DateCalculator
from ficcdate.business_calendar.imm import DEFAULT_IMM_CALCULATOR, IMMDateCalculator
from ficcdate.conventions.calendars import HolidayCalendar
from ficcdate.conventions.calendars_quantlib import holiday_calendar_from_quantlib
from ficcdate.conventions.daycount import DEFAULT_PERIOD_COUNT_CALCULATOR, PeriodCountCalculator
from ficcdate.conventions.types import HolidayHandlerType
from ficcdate.errors import InputError
from ficcdate.schedule.adjustments import parse_handler_type
from ficcdate.utils.date import DateLike

logger = logging.getLogger(__name__)


class CalculatorsFactory:
    """Creates date calculators bound to named holiday calendars.

    Calendars are looked up by name at construction time. Re-registering a
    name replaces the calendar for calculators created afterwards; existing
    calculators keep the calendar they were built with.
    """

    def __init__(self):
        self._holidays: Dict[str, HolidayCalendar] = {}

    def register_holidays(self, name: str, calendar: HolidayCalendar) -> None:
        if not name:
            raise InputError("Holiday calendar name must not be empty")
        if not isinstance(calendar, HolidayCalendar):
            raise InputError(f"Expected a HolidayCalendar, got {type(calendar)}")
        if name in self._holidays:
            logger.info("Replacing holiday calendar '%s'", name)
        else:
            logger.info("Registering holiday calendar '%s' with %s holidays", name, len(calendar))
        self._holidays[name] = calendar

    def get_holiday_calendar(self, name: str) -> HolidayCalendar:
        """Registered calendar for ``name``, or an empty weekend-only calendar."""
        calendar = self._holidays.get(name)
        if calendar is None:
            logger.warning("No holiday calendar registered as '%s'; using weekends only", name)
            return HolidayCalendar(name=name)
        return calendar

    def is_holiday_calendar_registered(self, name: str) -> bool:
        return name in self._holidays

    @property
    def registered_holiday_calendar_names(self) -> List[str]:
        return sorted(self._holidays)

    def unregister_holiday_calendar(self, name: str) -> None:
        if self._holidays.pop(name, None) is not None:
            logger.info("Unregistered holiday calendar '%s'", name)

    def unregister_all_holiday_calendars(self) -> None:
        self._holidays.clear()

    def get_date_calculator(
        self,
        name: str,
        holiday_handler_type: Optional[Union[str, HolidayHandlerType]] = None,
    ) -> DateCalculator:
        """
        Create a new DateCalculator for a calendar name and handler type.

        Args:
            name: Calendar name; unknown names give a weekends-only calendar
            holiday_handler_type: None (no adjustment), a HolidayHandlerType or
                one of "FORWARD", "BACKWARD", "MODIFIED_FOLLOWING", "MODIFIED_PRECEDING"

        Raises:
            ConfigurationError: if the handler type is not supported
        """
        handler_type = parse_handler_type(holiday_handler_type)
        calculator = DateCalculator(
            name,
            handler_type,
            self.get_holiday_calendar(name),
            imm_calculator=self.get_imm_date_calculator(),
        )
        logger.debug("Created date calculator '%s' with handler %s", name, handler_type)
        return calculator

    def get_imm_date_calculator(self) -> IMMDateCalculator:
        return DEFAULT_IMM_CALCULATOR

    def get_period_count_calculator(self) -> PeriodCountCalculator:
        return DEFAULT_PERIOD_COUNT_CALCULATOR


DEFAULT_FACTORY = CalculatorsFactory()


def get_default_factory() -> CalculatorsFactory:
    return DEFAULT_FACTORY


def get_date_calculator(
    name: str,
    holiday_handler_type: Optional[Union[str, HolidayHandlerType]] = None,
) -> DateCalculator:
    """Create a calculator from the default factory."""
    return DEFAULT_FACTORY.get_date_calculator(name, holiday_handler_type)


def register_holidays(name: str, calendar: HolidayCalendar) -> None:
    """Register a holiday calendar with the default factory."""
    DEFAULT_FACTORY.register_holidays(name, calendar)


def register_quantlib_calendar(
    name: str,
    start: DateLike,
    end: DateLike,
    factory: Optional[CalculatorsFactory] = None,
) -> HolidayCalendar:
    """Register a QuantLib market calendar under ``name`` with a factory (default: DEFAULT_FACTORY)."""
    calendar = holiday_calendar_from_quantlib(name, start, end)
    (factory if factory is not None else DEFAULT_FACTORY).register_holidays(name, calendar)
    return calendar
