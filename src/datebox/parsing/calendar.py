"""Gregorian calendar arithmetic: month lengths, validity, day offsets."""

from __future__ import annotations

from datetime import date

from ..models.dates import CalendarDate
from ..models.errors import DateBoxError, DateError, ErrorKind
from ..models.locale import LocaleDefinition

MIN_YEAR = 1
MAX_YEAR = 9999

_MONTH_DAYS = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


def is_leap_year(year: int) -> bool:
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def _month_error(year: int, month: int) -> DateError:
    return DateError(kind=ErrorKind.MONTH_OUT_OF_RANGE, year=year, month=month, value=str(month + 1))


def days_in_month(year: int, month: int) -> int:
    """Number of days in 0-based *month* of *year* (proleptic Gregorian).

    Raises ``DateBoxError`` (``MONTH_OUT_OF_RANGE``) for a month outside 0..11.
    """
    if not 0 <= month <= 11:
        raise DateBoxError(_month_error(year, month))
    if month == 1 and is_leap_year(year):
        return 29
    return _MONTH_DAYS[month]


def check_date(year: int, month: int, day: int) -> DateError | None:
    """Return the first range error for the triple, or None if it is valid."""
    if not 0 <= month <= 11:
        return _month_error(year, month)
    max_day = days_in_month(year, month)
    if not 1 <= day <= max_day:
        return DateError(
            kind=ErrorKind.DAY_OUT_OF_RANGE, year=year, month=month, max_day=max_day, value=str(day),
        )
    if not MIN_YEAR <= year <= MAX_YEAR:
        return DateError(kind=ErrorKind.YEAR_OUT_OF_RANGE, year=year, value=str(year))
    return None


def is_valid_date(year: int, month: int, day: int) -> bool:
    return check_date(year, month, day) is None


def validate_date(year: int, month: int, day: int) -> None:
    """Raise ``DateBoxError`` if the triple is not a real calendar date."""
    error = check_date(year, month, day)
    if error is not None:
        raise DateBoxError(error)


def make_date(year: int, month: int, day: int) -> CalendarDate:
    validate_date(year, month, day)
    return CalendarDate(year=year, month=month, day=day)


def add_days(value: CalendarDate, n: int) -> CalendarDate:
    """Offset *value* by *n* days (either sign) via the absolute day ordinal."""
    ordinal = value.to_date().toordinal() + n
    if not date.min.toordinal() <= ordinal <= date.max.toordinal():
        year = MIN_YEAR - 1 if n < 0 else MAX_YEAR + 1
        raise DateBoxError(DateError(kind=ErrorKind.YEAR_OUT_OF_RANGE, year=year, value=str(year)))
    return CalendarDate.from_date(date.fromordinal(ordinal))


def today() -> CalendarDate:
    return CalendarDate.from_date(date.today())


def weekday_index(value: CalendarDate, locale: LocaleDefinition) -> int:
    """Position of *value*'s weekday in ``locale.weekdays``."""
    return (value.to_date().isoweekday() - locale.week_starts_on) % 7
