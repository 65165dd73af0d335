"""
IMM dates: the 3rd Wednesday of March, June, September and December.
"""

import logging
from datetime import date, timedelta
from typing import List

from ficcdate.conventions.types import IMMPeriod, Weekday
from ficcdate.errors import InputError
from ficcdate.utils.date import DateLike, add_months, to_date

logger = logging.getLogger(__name__)

MONTHS_IN_QUARTER = 3
MONTHS_IN_YEAR = 12
IMM_MONTHS = (3, 6, 9, 12)

# Number of quarterly jumps after the first one for an annual period.
_ANNUAL_EXTRA_JUMPS = 4


class IMMDateCalculator:
    """Finds IMM dates forward or backward from a reference date.

    Holds no state; a single instance can be shared freely.
    """

    @staticmethod
    def get_3rd_wednesday(date_like: DateLike) -> date:
        """3rd Wednesday of the month of the given date."""
        dt = to_date(date_like)
        first_of_month = dt.replace(day=1)
        offset = (Weekday.WEDNESDAY - first_of_month.weekday()) % 7
        return first_of_month + timedelta(days=offset, weeks=2)

    @staticmethod
    def is_imm_month(date_like: DateLike) -> bool:
        return to_date(date_like).month in IMM_MONTHS

    def is_imm_date(self, date_like: DateLike) -> bool:
        """Check if the date is an official quarterly IMM date."""
        dt = to_date(date_like)
        dates = self.get_imm_dates(dt - timedelta(days=1), dt, IMMPeriod.QUARTERLY)
        return bool(dates) and dates[0] == dt

    def _imm_month(self, forward: bool, dt: date) -> date:
        """Move ``dt`` into the quarter month whose IMM date comes next in the requested direction."""
        month = dt.month
        if month in IMM_MONTHS:
            imm_date = self.get_3rd_wednesday(dt)
            if forward and dt >= imm_date:
                return add_months(dt, MONTHS_IN_QUARTER)
            if not forward and dt <= imm_date:
                return add_months(dt, -MONTHS_IN_QUARTER)
            return dt
        if forward:
            return add_months(dt, (MONTHS_IN_YEAR - month) % MONTHS_IN_QUARTER)
        return add_months(dt, -(month % MONTHS_IN_QUARTER))

    def _quarterly_imm_date(self, forward: bool, dt: date) -> date:
        return self.get_3rd_wednesday(self._imm_month(forward, dt))

    def get_next_imm_date(
        self, forward: bool, date_like: DateLike, period: IMMPeriod = IMMPeriod.QUARTERLY
    ) -> date:
        """First IMM date strictly after (``forward``) or before the given date.

        Bi-annual periods skip the excluded quarter months; the annual period
        takes four further quarterly jumps from the first quarterly date, so
        it lands in the same quarter one year later.
        """
        dt = to_date(date_like)
        imm = self._quarterly_imm_date(forward, dt)

        if period == IMMPeriod.BI_ANNUALLY_JUN_DEC:
            while imm.month in (3, 9):
                imm = self._quarterly_imm_date(forward, imm)
        elif period == IMMPeriod.BI_ANNUALLY_MAR_SEP:
            while imm.month in (6, 12):
                imm = self._quarterly_imm_date(forward, imm)
        elif period == IMMPeriod.ANNUALLY:
            for _ in range(_ANNUAL_EXTRA_JUMPS):
                imm = self._quarterly_imm_date(forward, imm)
        elif period != IMMPeriod.QUARTERLY:
            raise InputError(f"Unsupported IMM period: {period}")

        return imm

    def next_imm_date(self, date_like: DateLike, period: IMMPeriod = IMMPeriod.QUARTERLY) -> date:
        return self.get_next_imm_date(True, date_like, period)

    def previous_imm_date(self, date_like: DateLike, period: IMMPeriod = IMMPeriod.QUARTERLY) -> date:
        return self.get_next_imm_date(False, date_like, period)

    def get_imm_dates(
        self, start: DateLike, end: DateLike, period: IMMPeriod = IMMPeriod.QUARTERLY
    ) -> List[date]:
        """IMM dates after ``start`` (excluded) up to ``end`` (included)."""
        end_date = to_date(end)
        dates: List[date] = []
        current = to_date(start)
        while True:
            current = self.get_next_imm_date(True, current, period)
            if current > end_date:
                break
            dates.append(current)
        logger.debug("Found %s IMM dates in (%s, %s] for %s", len(dates), start, end, period)
        return dates


DEFAULT_IMM_CALCULATOR = IMMDateCalculator()
