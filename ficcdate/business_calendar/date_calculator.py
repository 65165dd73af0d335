"""
Stateful date calculator: a cursor over business days for one calendar.
"""

import logging
from datetime import date, timedelta
from typing import Iterable, List, Optional, Union

from ficcdate.business_calendar.imm import DEFAULT_IMM_CALCULATOR, IMMDateCalculator
from ficcdate.business_calendar.tenor import Tenor
from ficcdate.business_calendar.tenor_calculator import DEFAULT_DAYS_TO_SPOT, compute_tenor_date
from ficcdate.conventions.calendars import HolidayCalendar
from ficcdate.conventions.types import HolidayHandlerType, IMMPeriod
from ficcdate.conventions.working_week import WorkingWeek
from ficcdate.errors import ConfigurationError
from ficcdate.schedule.adjustments import HolidayHandler, get_holiday_handler, move_by_business_days
from ficcdate.utils.date import DateLike, add_months, add_years, to_date

logger = logging.getLogger(__name__)


class DateCalculator:
    """Mutable cursor moving through dates of a holiday calendar.

    The calculator owns a current date. Every ``move_*`` call replaces it and
    returns the new value; nothing is changed when a move raises. When a
    holiday handler is configured, every landing date (including the start
    date) is rolled through it; without a handler, moves are raw calendar
    arithmetic.

    The holiday calendar is a shared, read-only reference. The working week
    starts as the calendar's and can be overridden per calculator.

    Not safe for concurrent use; give each computation its own calculator.
    """

    def __init__(
        self,
        name: str = "",
        holiday_handler_type: Optional[Union[str, HolidayHandlerType]] = None,
        holiday_calendar: Optional[HolidayCalendar] = None,
        working_week: Optional[WorkingWeek] = None,
        imm_calculator: Optional[IMMDateCalculator] = None,
    ):
        self.name = name
        self._handler: Optional[HolidayHandler] = get_holiday_handler(holiday_handler_type)
        self._holiday_calendar = holiday_calendar if holiday_calendar is not None else HolidayCalendar(name=name)
        self._working_week_override = working_week
        self._effective_calendar = self._build_effective_calendar()
        self._imm_calculator = imm_calculator if imm_calculator is not None else DEFAULT_IMM_CALCULATOR
        self._start_date: Optional[date] = None
        self._current_date: Optional[date] = None

    def _build_effective_calendar(self) -> HolidayCalendar:
        week = self._working_week_override
        if week is None or week == self._holiday_calendar.working_week:
            return self._holiday_calendar
        return self._holiday_calendar.with_working_week(week)

    # ------------------------------------------------------------------
    # configuration
    # ------------------------------------------------------------------

    @property
    def holiday_handler(self) -> Optional[HolidayHandler]:
        return self._handler

    @property
    def holiday_handler_type(self) -> Optional[HolidayHandlerType]:
        return self._handler.handler_type if self._handler is not None else None

    @property
    def holiday_calendar(self) -> HolidayCalendar:
        return self._holiday_calendar

    @holiday_calendar.setter
    def holiday_calendar(self, calendar: Optional[HolidayCalendar]) -> None:
        """Replace the holiday calendar; an overridden working week is kept."""
        self._holiday_calendar = calendar if calendar is not None else HolidayCalendar(name=self.name)
        self._effective_calendar = self._build_effective_calendar()

    @property
    def working_week(self) -> WorkingWeek:
        return self._effective_calendar.working_week

    @working_week.setter
    def working_week(self, working_week: Optional[WorkingWeek]) -> None:
        """Override the calendar's working week; None reverts to the calendar's own."""
        self._working_week_override = working_week
        self._effective_calendar = self._build_effective_calendar()

    @property
    def calendar(self) -> HolidayCalendar:
        """Holiday calendar combined with this calculator's working week."""
        return self._effective_calendar

    # ------------------------------------------------------------------
    # cursor
    # ------------------------------------------------------------------

    def _adjust(self, dt: date) -> date:
        if self._handler is None:
            return dt
        return self._handler.adjust(dt, self._effective_calendar)

    def _require_current(self) -> date:
        if self._current_date is None:
            raise ConfigurationError(f"Start date of calculator '{self.name}' has not been set")
        return self._current_date

    @property
    def start_date(self) -> Optional[date]:
        return self._start_date

    @property
    def current_date(self) -> Optional[date]:
        return self._current_date

    def set_start_date(self, date_like: DateLike) -> date:
        """Set the start date; the current date becomes its holiday-adjusted value."""
        start = to_date(date_like)
        current = self._adjust(start)
        self._start_date = start
        self._current_date = current
        return current

    def set_current_date(self, date_like: DateLike) -> date:
        """Move the cursor to a date, rolled through the holiday handler."""
        current = self._adjust(to_date(date_like))
        self._current_date = current
        return current

    def _set(self, dt: date) -> date:
        self._current_date = dt
        return dt

    def move_by_days(self, days: int) -> date:
        """Add calendar days to the current date, then roll through the handler."""
        current = self._require_current()
        return self._set(self._adjust(current + timedelta(days=days)))

    def move_by_business_days(self, business_days: int) -> date:
        """Step a number of working days from the current date (negative moves back)."""
        current = self._require_current()
        return self._set(move_by_business_days(current, self._effective_calendar, business_days))

    def move_by_months(self, months: int) -> date:
        current = self._require_current()
        return self._set(self._adjust(add_months(current, months)))

    def move_by_years(self, years: int) -> date:
        current = self._require_current()
        return self._set(self._adjust(add_years(current, years)))

    def _tenor_date(self, current: date, tenor: Union[Tenor, str], days_to_spot: int) -> date:
        if isinstance(tenor, str):
            tenor = Tenor.parse(tenor)
        return compute_tenor_date(current, tenor, self._effective_calendar, self._handler, days_to_spot)

    def move_by_tenor(self, tenor: Union[Tenor, str], days_to_spot: int = DEFAULT_DAYS_TO_SPOT) -> date:
        """Move the current date by a tenor after applying the spot lag."""
        current = self._require_current()
        return self._set(self._tenor_date(current, tenor, days_to_spot))

    def calculate_tenor_dates(
        self, tenors: Optional[Iterable[Union[Tenor, str]]], days_to_spot: int = DEFAULT_DAYS_TO_SPOT
    ) -> List[date]:
        """Resolve each tenor independently from the current date; the cursor is not moved."""
        current = self._require_current()
        if tenors is None:
            return []
        return [self._tenor_date(current, tenor, days_to_spot) for tenor in tenors]

    # ------------------------------------------------------------------
    # queries
    # ------------------------------------------------------------------

    def is_non_working_day(self, date_like: DateLike) -> bool:
        return self._effective_calendar.is_non_working_day(date_like)

    def is_weekend(self, date_like: DateLike) -> bool:
        return not self.working_week.is_working_day(to_date(date_like))

    def is_current_date_non_working(self) -> bool:
        return self.is_non_working_day(self._require_current())

    def next_imm_date(self, period: IMMPeriod = IMMPeriod.QUARTERLY) -> date:
        return self._imm_calculator.next_imm_date(self._require_current(), period)

    def previous_imm_date(self, period: IMMPeriod = IMMPeriod.QUARTERLY) -> date:
        return self._imm_calculator.previous_imm_date(self._require_current(), period)

    def imm_dates(self, end: DateLike, period: IMMPeriod = IMMPeriod.QUARTERLY) -> List[date]:
        """IMM dates after the current date up to ``end``."""
        return self._imm_calculator.get_imm_dates(self._require_current(), end, period)

    def combine(self, other: Optional["DateCalculator"]) -> "DateCalculator":
        """New calculator closed whenever either calculator is closed.

        Both calculators must use the same holiday handler. The result has no
        start date unless this calculator has one.
        """
        if other is None or other is self:
            return self
        if other.holiday_handler_type != self.holiday_handler_type:
            raise ConfigurationError(
                f"Cannot combine calculator '{self.name}' ({self.holiday_handler_type}) "
                f"with '{other.name}' ({other.holiday_handler_type}): holiday handlers differ"
            )
        name = f"{self.name}/{other.name}"
        combined_calendar = self.calendar.union(other.calendar, name=name)
        combined = DateCalculator(
            name,
            self.holiday_handler_type,
            combined_calendar,
            imm_calculator=self._imm_calculator,
        )
        if self._start_date is not None:
            combined.set_start_date(self._start_date)
        logger.debug("Combined calculators '%s' and '%s'", self.name, other.name)
        return combined

    def __repr__(self) -> str:
        return (
            f"DateCalculator(name={self.name!r}, handler={self.holiday_handler_type}, "
            f"current_date={self._current_date})"
        )

