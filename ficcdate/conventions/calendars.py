"""
Holiday calendars: a set of explicit holidays plus a working week.
"""

import logging
from datetime import date
from pathlib import Path
from typing import FrozenSet, Iterable, Optional, Union

import pandas as pd

from ficcdate.conventions.working_week import DEFAULT_WORKING_WEEK, WorkingWeek
from ficcdate.errors import InputError, OutOfBoundaryError
from ficcdate.utils.date import DateLike, to_date

logger = logging.getLogger(__name__)


def _to_holiday_set(holidays: Optional[Iterable[DateLike]]) -> FrozenSet[date]:
    if holidays is None:
        return frozenset()
    if isinstance(holidays, (str, date)):
        raise InputError("Holidays must be a collection of dates, not a single date")
    return frozenset(to_date(h) for h in holidays)


class HolidayCalendar:
    """Business day calendar with a fixed holiday set.

    A date is non-working when it is a registered holiday or when its weekday
    is not a working day of the calendar's working week. The holiday set is
    frozen at construction; to change it, build a new calendar and assign it.

    When ``early_boundary`` and/or ``late_boundary`` are given, the holiday set
    is only trusted inside that range and queries outside it raise
    ``OutOfBoundaryError``.
    """

    def __init__(
        self,
        holidays: Optional[Iterable[DateLike]] = None,
        working_week: Optional[WorkingWeek] = None,
        name: str = "",
        early_boundary: Optional[DateLike] = None,
        late_boundary: Optional[DateLike] = None,
    ):
        self.name = name
        self._holidays = _to_holiday_set(holidays)
        self._working_week = working_week if working_week is not None else DEFAULT_WORKING_WEEK
        self._early_boundary = to_date(early_boundary) if early_boundary is not None else None
        self._late_boundary = to_date(late_boundary) if late_boundary is not None else None
        if (
            self._early_boundary is not None
            and self._late_boundary is not None
            and self._early_boundary > self._late_boundary
        ):
            raise InputError(
                f"Early boundary {self._early_boundary} is after late boundary {self._late_boundary}"
            )

    @property
    def holidays(self) -> FrozenSet[date]:
        return self._holidays

    @property
    def working_week(self) -> WorkingWeek:
        return self._working_week

    @property
    def early_boundary(self) -> Optional[date]:
        return self._early_boundary

    @property
    def late_boundary(self) -> Optional[date]:
        return self._late_boundary

    def check_boundary(self, dt: date) -> None:
        """Raise if ``dt`` is outside the range the holiday set covers."""
        if self._early_boundary is not None and dt < self._early_boundary:
            raise OutOfBoundaryError(
                f"{dt} is before the early boundary {self._early_boundary} of calendar '{self.name}'"
            )
        if self._late_boundary is not None and dt > self._late_boundary:
            raise OutOfBoundaryError(
                f"{dt} is after the late boundary {self._late_boundary} of calendar '{self.name}'"
            )

    def is_holiday(self, dt: DateLike) -> bool:
        """Check if date is a registered holiday (weekends excluded)."""
        dt = to_date(dt)
        self.check_boundary(dt)
        return dt in self._holidays

    def is_weekend(self, dt: DateLike) -> bool:
        """Check if date falls on a non-working weekday."""
        return not self._working_week.is_working_day(to_date(dt))

    def is_non_working_day(self, dt: DateLike) -> bool:
        dt = to_date(dt)
        self.check_boundary(dt)
        return dt in self._holidays or not self._working_week.is_working_day(dt)

    def is_business_day(self, dt: DateLike) -> bool:
        return not self.is_non_working_day(dt)

    def with_working_week(self, working_week: WorkingWeek) -> "HolidayCalendar":
        """Same holidays and boundaries, different working week."""
        return HolidayCalendar(
            self._holidays,
            working_week,
            name=self.name,
            early_boundary=self._early_boundary,
            late_boundary=self._late_boundary,
        )

    def union(self, other: "HolidayCalendar", name: Optional[str] = None) -> "HolidayCalendar":
        """Calendar closed whenever either calendar is closed.

        The boundaries of the result are the intersection of both ranges.
        """
        early = _latest(self._early_boundary, other.early_boundary)
        late = _earliest(self._late_boundary, other.late_boundary)
        return HolidayCalendar(
            self._holidays | other.holidays,
            self._working_week.intersection(other.working_week),
            name=name if name is not None else f"{self.name}/{other.name}",
            early_boundary=early,
            late_boundary=late,
        )

    def __len__(self) -> int:
        return len(self._holidays)

    def __eq__(self, other) -> bool:
        if not isinstance(other, HolidayCalendar):
            return NotImplemented
        return (
            self._holidays == other.holidays
            and self._working_week == other.working_week
            and self._early_boundary == other.early_boundary
            and self._late_boundary == other.late_boundary
        )

    def __hash__(self) -> int:
        return hash((self._holidays, self._working_week, self._early_boundary, self._late_boundary))

    def __repr__(self) -> str:
        return (
            f"HolidayCalendar(name={self.name!r}, holidays={len(self._holidays)}, "
            f"working_week={self._working_week})"
        )


def _latest(a: Optional[date], b: Optional[date]) -> Optional[date]:
    if a is None:
        return b
    if b is None:
        return a
    return max(a, b)


def _earliest(a: Optional[date], b: Optional[date]) -> Optional[date]:
    if a is None:
        return b
    if b is None:
        return a
    return min(a, b)


def read_holidays_csv(path: Union[str, Path], column: str = "date") -> FrozenSet[date]:
    """Load holiday dates from one column of a CSV file.

    Values are read as text and parsed like any other date input, so
    ``YYYY-MM-DD`` and ``YYYYMMDD`` can be mixed in one column.
    """
    df = pd.read_csv(path, dtype=str)
    if column not in df.columns:
        raise InputError(f"Column '{column}' not found in {path}. Available: {list(df.columns)}")
    holidays = set()
    bad = []
    for value in df[column].dropna():
        try:
            holidays.add(to_date(value))
        except InputError:
            bad.append(value)
    if bad:
        raise InputError(f"Unparseable holiday dates in {path}: {bad}")
    logger.debug("Loaded %s holidays from %s", len(holidays), path)
    return frozenset(holidays)


def calendar_from_csv(
    path: Union[str, Path],
    name: str,
    column: str = "date",
    working_week: Optional[WorkingWeek] = None,
) -> HolidayCalendar:
    """Build a HolidayCalendar whose holidays come from a CSV column."""
    return HolidayCalendar(read_holidays_csv(path, column), working_week, name=name)


EMPTY_CALENDAR = HolidayCalendar(name="WEEKEND")
