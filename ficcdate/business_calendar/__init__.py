"""Date calculator, tenor resolution, IMM dates and the calculator factory."""

from .date_calculator import DateCalculator
from .factory import (
    DEFAULT_FACTORY,
    CalculatorsFactory,
    get_date_calculator,
    get_default_factory,
    register_holidays,
    register_quantlib_calendar,
)
from .imm import IMMDateCalculator
from .tenor import Tenor
from .tenor_calculator import compute_tenor_date, get_spot_date

__all__ = [
    "CalculatorsFactory",
    "DEFAULT_FACTORY",
    "DateCalculator",
    "IMMDateCalculator",
    "Tenor",
    "compute_tenor_date",
    "get_date_calculator",
    "get_default_factory",
    "get_spot_date",
    "register_holidays",
    "register_quantlib_calendar",
]
