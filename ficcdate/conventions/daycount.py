"""
QuantLib-backed period counting.

Day differences and year fractions between two dates under the usual money
market and bond bases.
"""

from typing import Dict, Union

import QuantLib as ql

from ficcdate.conventions.types import PeriodCountBasis
from ficcdate.errors import InputError
from ficcdate.utils.date import DateLike, to_date

MONTHS_IN_YEAR = 12


def _to_ql_date(date_like: DateLike) -> ql.Date:
    """Convert a date-like to QuantLib Date."""
    py_date = to_date(date_like)
    return ql.Date(py_date.day, py_date.month, py_date.year)


class DayCountConvention:
    """A named QuantLib day counter."""

    def __init__(self, name: str, ql_daycount: ql.DayCounter):
        self.name = name
        self._ql_daycount = ql_daycount

    def year_fraction(self, start: DateLike, end: DateLike) -> float:
        return self._ql_daycount.yearFraction(_to_ql_date(start), _to_ql_date(end))

    def day_count(self, start: DateLike, end: DateLike) -> int:
        return self._ql_daycount.dayCount(_to_ql_date(start), _to_ql_date(end))

    def __str__(self) -> str:
        return self.name


# 30/360 US bond basis
THIRTY_360 = DayCountConvention("30/360", ql.Thirty360(ql.Thirty360.BondBasis))
# 30E/360 ISDA, where the last day of February counts as the 30th
THIRTY_360E_ISDA = DayCountConvention("30E/360 ISDA", ql.Thirty360(ql.Thirty360.German))
THIRTY_360E = DayCountConvention("30E/360", ql.Thirty360(ql.Thirty360.European))
ACT_360 = DayCountConvention("ACT/360", ql.Actual360())
ACT_365F = DayCountConvention("ACT/365F", ql.Actual365Fixed())
ACT_ACT = DayCountConvention("ACT/ACT", ql.ActualActual(ql.ActualActual.ISDA))

DAY_COUNT_CONVENTIONS: Dict[PeriodCountBasis, DayCountConvention] = {
    PeriodCountBasis.CONV_30_360: THIRTY_360,
    PeriodCountBasis.CONV_360E_ISDA: THIRTY_360E_ISDA,
    PeriodCountBasis.CONV_360E_ISMA: THIRTY_360E,
    PeriodCountBasis.ACT_360: ACT_360,
    PeriodCountBasis.ACT_365: ACT_365F,
    PeriodCountBasis.ACT_ACT: ACT_ACT,
}


def get_day_count_convention(basis: Union[PeriodCountBasis, str]) -> DayCountConvention:
    """Get a day count convention by basis or by its name (e.g. 'ACT/360')."""
    if isinstance(basis, PeriodCountBasis):
        return DAY_COUNT_CONVENTIONS[basis]
    name_upper = str(basis).upper().strip()
    for member, convention in DAY_COUNT_CONVENTIONS.items():
        if name_upper in (member.name, member.value):
            return convention
    raise InputError(
        f"Unknown day count convention: {basis}. "
        f"Available: {[m.value for m in PeriodCountBasis]}"
    )


class PeriodCountCalculator:
    """Counts days, months and years between two dates under a basis."""

    def day_diff(self, start: DateLike, end: DateLike, basis: Union[PeriodCountBasis, str]) -> int:
        return get_day_count_convention(basis).day_count(start, end)

    def year_diff(self, start: DateLike, end: DateLike, basis: Union[PeriodCountBasis, str]) -> float:
        return get_day_count_convention(basis).year_fraction(start, end)

    def month_diff(self, start: DateLike, end: DateLike, basis: Union[PeriodCountBasis, str]) -> float:
        return self.year_diff(start, end, basis) * MONTHS_IN_YEAR


DEFAULT_PERIOD_COUNT_CALCULATOR = PeriodCountCalculator()
