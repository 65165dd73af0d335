"""
Working week definition: which weekdays are business days.
"""

from dataclasses import dataclass
from datetime import date
from typing import Iterable, Tuple, Union

from ficcdate.conventions.types import Weekday
from ficcdate.errors import InputError

WeekdayLike = Union[Weekday, int]


def _weekday(day: WeekdayLike) -> Weekday:
    try:
        return Weekday(day)
    except ValueError as exc:
        raise InputError(f"Weekday must be 0 (Monday) to 6 (Sunday), got {day!r}") from exc


@dataclass(frozen=True)
class WorkingWeek:
    """Per-weekday working flags, indexed Monday=0 .. Sunday=6.

    Instances are immutable; ``with_working_day`` returns a new week so a week
    shared between calculators can never change under them.
    """

    flags: Tuple[bool, bool, bool, bool, bool, bool, bool] = (
        True, True, True, True, True, False, False,
    )

    def __post_init__(self):
        if len(self.flags) != 7:
            raise InputError(f"A working week needs 7 flags, got {len(self.flags)}")
        object.__setattr__(self, "flags", tuple(bool(f) for f in self.flags))

    @classmethod
    def from_weekdays(cls, weekdays: Iterable[WeekdayLike]) -> "WorkingWeek":
        """Build a week where exactly the given weekdays are working."""
        working = {_weekday(d) for d in weekdays}
        return cls(tuple(day in working for day in Weekday))

    def is_working_weekday(self, weekday: WeekdayLike) -> bool:
        return self.flags[_weekday(weekday)]

    def is_working_day(self, dt: date) -> bool:
        """Check if the weekday of ``dt`` is a working day."""
        return self.flags[dt.weekday()]

    def with_working_day(self, weekday: WeekdayLike, working: bool = True) -> "WorkingWeek":
        flags = list(self.flags)
        flags[_weekday(weekday)] = bool(working)
        return WorkingWeek(tuple(flags))

    @property
    def working_days(self) -> Tuple[Weekday, ...]:
        return tuple(day for day in Weekday if self.flags[day])

    def has_working_day(self) -> bool:
        return any(self.flags)

    def intersection(self, other: "WorkingWeek") -> "WorkingWeek":
        """A day works only if it works in both weeks."""
        return WorkingWeek(tuple(a and b for a, b in zip(self.flags, other.flags)))

    def __str__(self) -> str:
        names = ",".join(day.name[:3].title() for day in self.working_days)
        return f"WorkingWeek[{names}]"


DEFAULT_WORKING_WEEK = WorkingWeek()

# Sunday to Thursday
ARABIC_WEEK = WorkingWeek.from_weekdays(
    [Weekday.SUNDAY, Weekday.MONDAY, Weekday.TUESDAY, Weekday.WEDNESDAY, Weekday.THURSDAY]
)
