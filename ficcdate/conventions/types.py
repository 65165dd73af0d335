"""
Basic types and enums used across the date calculators.
"""

from enum import Enum, IntEnum


class Weekday(IntEnum):
    """Days of the week, numbered like ``date.weekday()``."""

    MONDAY = 0
    TUESDAY = 1
    WEDNESDAY = 2
    THURSDAY = 3
    FRIDAY = 4
    SATURDAY = 5
    SUNDAY = 6


class HolidayHandlerType(str, Enum):
    """Roll conventions applied when a date lands on a non-working day."""

    FORWARD = "FORWARD"
    BACKWARD = "BACKWARD"
    MODIFIED_FOLLOWING = "MODIFIED_FOLLOWING"
    MODIFIED_PRECEDING = "MODIFIED_PRECEDING"


class TenorCode(Enum):
    """Tenor units. ``has_units`` is False for the named money-market tenors."""

    OVERNIGHT = ("ON", False)
    TOM_NEXT = ("TN", False)
    SPOT = ("SP", False)
    SPOT_NEXT = ("SN", False)
    DAY = ("D", True)
    WEEK = ("W", True)
    MONTH = ("M", True)
    YEAR = ("Y", True)

    def __init__(self, code: str, has_units: bool):
        self.code = code
        self.has_units = has_units

    @classmethod
    def from_code(cls, code: str) -> "TenorCode":
        key = code.upper().strip()
        for member in cls:
            if member.code == key:
                return member
        raise KeyError(code)


class IMMPeriod(Enum):
    """How far apart consecutive IMM dates are."""

    QUARTERLY = "QUARTERLY"
    BI_ANNUALLY_JUN_DEC = "BI_ANNUALLY_JUN_DEC"
    BI_ANNUALLY_MAR_SEP = "BI_ANNUALLY_MAR_SEP"
    ANNUALLY = "ANNUALLY"


class PeriodCountBasis(Enum):
    """Day count bases for period counting."""

    CONV_30_360 = "30/360"
    CONV_360E_ISDA = "30E/360 ISDA"
    CONV_360E_ISMA = "30E/360"
    ACT_360 = "ACT/360"
    ACT_365 = "ACT/365F"
    ACT_ACT = "ACT/ACT"
