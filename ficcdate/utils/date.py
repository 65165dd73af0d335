from typing import Union
from datetime import datetime, date, timedelta
from dateutil.relativedelta import relativedelta
from pandas import Timestamp

from ficcdate.errors import InputError

DATE_FMT = "%Y-%m-%d"
COMPACT_FMT = "%Y%m%d"

DateLike = Union[str, date, datetime, Timestamp]

# Excel's 1900 system counts 1900-02-29, which never existed.
_EXCEL_1900_EPOCH = date(1899, 12, 30)
_EXCEL_1900_EARLY_EPOCH = date(1899, 12, 31)
_EXCEL_1904_EPOCH = date(1904, 1, 1)
_EXCEL_LEAP_BUG_SERIAL = 61


def to_date(date_like: DateLike) -> date:
    """
    Convert a string, datetime or Timestamp to a plain date.
    Accepts 'YYYY-MM-DD' and 'YYYYMMDD' string formats.
    """
    if isinstance(date_like, Timestamp):
        return date_like.date()
    if isinstance(date_like, datetime):
        return date_like.date()
    if isinstance(date_like, date):
        return date_like
    if isinstance(date_like, str):
        text = date_like.strip()
        for fmt in (DATE_FMT, COMPACT_FMT):
            try:
                return datetime.strptime(text, fmt).date()
            except ValueError:
                continue
        raise InputError(f"Unsupported date string format: {date_like!r}")
    raise InputError(f"Unsupported type for date: {type(date_like)}")


def datetime_to_str(date_like: DateLike) -> str:
    """
    Format a date-like into 'YYYY-MM-DD' string.
    """
    return to_date(date_like).strftime(DATE_FMT)


def is_end_of_month(dt: date) -> bool:
    """Check if date is the last calendar day of its month."""
    return (dt + timedelta(days=1)).month != dt.month


def add_months(dt: date, months: int) -> date:
    """Add months, clamping to the last valid day (Jan 31 + 1M -> Feb 28/29)."""
    return dt + relativedelta(months=months)


def add_years(dt: date, years: int) -> date:
    """Add years, clamping Feb 29 to Feb 28 in non-leap target years."""
    return dt + relativedelta(years=years)


def excel_to_date(serial: float, use_1904_windowing: bool = False) -> date:
    """
    Convert an Excel serial number to a date; any fraction (time of day) is dropped.

    In the 1900 system serial 1 is 1900-01-01 and serials from 61 onwards are
    shifted by one day to absorb Excel's fictitious 1900-02-29.
    """
    days = int(serial)
    if days < 0:
        raise InputError(f"Excel serial must not be negative: {serial}")
    if use_1904_windowing:
        return _EXCEL_1904_EPOCH + timedelta(days=days)
    if days < _EXCEL_LEAP_BUG_SERIAL:
        return _EXCEL_1900_EARLY_EPOCH + timedelta(days=days)
    return _EXCEL_1900_EPOCH + timedelta(days=days)


def date_to_excel(date_like: DateLike, use_1904_windowing: bool = False) -> int:
    """Convert a date to its Excel serial number."""
    dt = to_date(date_like)
    if use_1904_windowing:
        serial = (dt - _EXCEL_1904_EPOCH).days
    else:
        serial = (dt - _EXCEL_1900_EPOCH).days
        if serial < _EXCEL_LEAP_BUG_SERIAL:
            serial = (dt - _EXCEL_1900_EARLY_EPOCH).days
    if serial < 0:
        raise InputError(f"Date {dt} precedes the Excel epoch")
    return serial
