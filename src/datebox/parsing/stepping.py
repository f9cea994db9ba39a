"""Day stepping for arrow-key and wheel adjustment."""

from __future__ import annotations

from datetime import date

from ..models.dates import CalendarDate
from ..models.errors import DateBoxError
from ..models.locale import LocaleDefinition
from ..models.outcome import ParseFailure
from .calendar import add_days
from .formatting import format_date
from .rules import parse


def step(value: CalendarDate, delta: int) -> CalendarDate:
    return add_days(value, delta)


def step_text(
    text: str,
    locale: LocaleDefinition,
    delta: int,
    today: CalendarDate | date | None = None,
) -> str | ParseFailure | None:
    """Parse *text*, move it *delta* days and return the canonical form.

    Empty text gives None and a text that does not parse gives its
    ``ParseFailure``; in neither case is there a new value to show.
    """
    if not text.strip():
        return None
    outcome = parse(text, locale, today)
    if isinstance(outcome, ParseFailure):
        return outcome
    try:
        moved = step(outcome.date, delta)
    except DateBoxError as exc:
        return ParseFailure(error=exc.error)
    return format_date(moved, locale)
