from .calendars import EMPTY_CALENDAR, HolidayCalendar, calendar_from_csv, read_holidays_csv
from .types import HolidayHandlerType, IMMPeriod, PeriodCountBasis, TenorCode, Weekday
from .working_week import ARABIC_WEEK, DEFAULT_WORKING_WEEK, WorkingWeek
