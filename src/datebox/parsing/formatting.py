"""Render resolved dates back to text."""

from __future__ import annotations

from ..models.dates import CalendarDate
from ..models.locale import LocaleDefinition
from .calendar import weekday_index


def format_date(value: CalendarDate, locale: LocaleDefinition) -> str:
    """Canonical short form, e.g. ``01/04/2010`` (en) or ``04-01-2010`` (da).

    The output only depends on the date and the locale template, so it always
    parses back to the same date in that locale.
    """
    output = locale.output_format
    output = output.replace("yyyy", f"{value.year:04d}")
    output = output.replace("mm", f"{value.month + 1:02d}")
    output = output.replace("dd", f"{value.day:02d}")
    return output


def format_long(value: CalendarDate, locale: LocaleDefinition) -> str:
    """Long display form built from the locale's month and weekday names."""
    return locale.long_format.format(
        weekday=locale.weekdays[weekday_index(value, locale)],
        day=value.day,
        month=locale.months[value.month],
        year=value.year,
    )
