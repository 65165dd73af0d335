"""
Tenor value type and the standard market tenors.
"""

import re
from dataclasses import dataclass

from ficcdate.conventions.types import TenorCode
from ficcdate.errors import InputError

_TENOR_PATTERN = re.compile(r"^([+-]?\d+)([A-Z])$")


@dataclass(frozen=True)
class Tenor:
    """A relative offset: a number of units of a tenor code (e.g. 3M, 2W, ON)."""

    units: int
    code: TenorCode

    def __post_init__(self):
        if not isinstance(self.units, int) or isinstance(self.units, bool):
            raise InputError(f"Tenor units must be an integer, got {self.units!r}")
        if not self.code.has_units and self.units != 0:
            raise InputError(f"Tenor {self.code.name} does not take units, got {self.units}")

    @classmethod
    def parse(cls, text: str) -> "Tenor":
        """Parse a tenor string such as '1D', '2W', '3M', '10Y', 'ON', 'TN', 'SP', 'SN'."""
        if not isinstance(text, str):
            raise InputError(f"Tenor must be a string, got {type(text)}")
        t = text.upper().strip()
        try:
            code = TenorCode.from_code(t)
        except KeyError:
            pass
        else:
            if not code.has_units:
                return cls(0, code)

        match = _TENOR_PATTERN.match(t)
        if match is None:
            raise InputError(f"Unsupported tenor: {text}")
        try:
            code = TenorCode.from_code(match.group(2))
        except KeyError as exc:
            raise InputError(f"Unsupported tenor: {text}") from exc
        if not code.has_units:
            raise InputError(f"Unsupported tenor: {text}")
        return cls(int(match.group(1)), code)

    @property
    def has_units(self) -> bool:
        return self.code.has_units

    def __str__(self) -> str:
        if not self.code.has_units:
            return self.code.code
        return f"{self.units}{self.code.code}"


OVERNIGHT = Tenor(0, TenorCode.OVERNIGHT)
TOM_NEXT = Tenor(0, TenorCode.TOM_NEXT)
SPOT = Tenor(0, TenorCode.SPOT)
SPOT_NEXT = Tenor(0, TenorCode.SPOT_NEXT)

T_1D = Tenor(1, TenorCode.DAY)
T_2D = Tenor(2, TenorCode.DAY)
T_3D = Tenor(3, TenorCode.DAY)
T_1W = Tenor(1, TenorCode.WEEK)
T_2W = Tenor(2, TenorCode.WEEK)
T_3W = Tenor(3, TenorCode.WEEK)
T_1M = Tenor(1, TenorCode.MONTH)
T_2M = Tenor(2, TenorCode.MONTH)
T_3M = Tenor(3, TenorCode.MONTH)
T_4M = Tenor(4, TenorCode.MONTH)
T_5M = Tenor(5, TenorCode.MONTH)
T_6M = Tenor(6, TenorCode.MONTH)
T_7M = Tenor(7, TenorCode.MONTH)
T_8M = Tenor(8, TenorCode.MONTH)
T_9M = Tenor(9, TenorCode.MONTH)
T_10M = Tenor(10, TenorCode.MONTH)
T_11M = Tenor(11, TenorCode.MONTH)
T_15M = Tenor(15, TenorCode.MONTH)
T_18M = Tenor(18, TenorCode.MONTH)
T_21M = Tenor(21, TenorCode.MONTH)
T_1Y = Tenor(1, TenorCode.YEAR)
T_2Y = Tenor(2, TenorCode.YEAR)
T_3Y = Tenor(3, TenorCode.YEAR)
T_4Y = Tenor(4, TenorCode.YEAR)
T_5Y = Tenor(5, TenorCode.YEAR)
T_6Y = Tenor(6, TenorCode.YEAR)
T_7Y = Tenor(7, TenorCode.YEAR)
T_8Y = Tenor(8, TenorCode.YEAR)
T_9Y = Tenor(9, TenorCode.YEAR)
T_10Y = Tenor(10, TenorCode.YEAR)
T_12Y = Tenor(12, TenorCode.YEAR)
T_15Y = Tenor(15, TenorCode.YEAR)
T_20Y = Tenor(20, TenorCode.YEAR)
T_25Y = Tenor(25, TenorCode.YEAR)
T_30Y = Tenor(30, TenorCode.YEAR)
T_50Y = Tenor(50, TenorCode.YEAR)

STANDARD_TENORS = {
    str(t): t
    for t in (
        OVERNIGHT, TOM_NEXT, SPOT, SPOT_NEXT,
        T_1D, T_2D, T_3D, T_1W, T_2W, T_3W,
        T_1M, T_2M, T_3M, T_4M, T_5M, T_6M, T_7M, T_8M, T_9M, T_10M, T_11M,
        T_15M, T_18M, T_21M,
        T_1Y, T_2Y, T_3Y, T_4Y, T_5Y, T_6Y, T_7Y, T_8Y, T_9Y, T_10Y,
        T_12Y, T_15Y, T_20Y, T_25Y, T_30Y, T_50Y,
    )
}
