"""Business-day date calculations for fixed income and FX.

This package rolls dates over weekends and holidays, resolves tenors with a
spot lag and finds IMM dates.

Key modules:
- business_calendar: DateCalculator cursor, tenors, IMM dates, factory
- schedule: Roll conventions and business-day stepping
- conventions: Working weeks, holiday calendars, day counts
- utils: Date coercion and month arithmetic
"""

__version__ = "1.0.0"

from ficcdate.business_calendar import (
    CalculatorsFactory,
    DateCalculator,
    IMMDateCalculator,
    Tenor,
    get_date_calculator,
)
from ficcdate.conventions import (
    HolidayCalendar,
    HolidayHandlerType,
    IMMPeriod,
    TenorCode,
    Weekday,
    WorkingWeek,
)
from ficcdate.errors import ConfigurationError, InputError, OutOfBoundaryError

__all__ = [
    "__version__",
    "CalculatorsFactory",
    "ConfigurationError",
    "DateCalculator",
    "HolidayCalendar",
    "HolidayHandlerType",
    "IMMDateCalculator",
    "IMMPeriod",
    "InputError",
    "OutOfBoundaryError",
    "Tenor",
    "TenorCode",
    "Weekday",
    "WorkingWeek",
    "get_date_calculator",
]
