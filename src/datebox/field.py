"""Headless model of a date entry field and its status message.

``DateField`` keeps the text a user typed and the message shown next to it,
and applies the same transitions a browser widget would on change, arrow
keys, wheel scroll and double click. It has no UI of its own.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date

import structlog

from .messages import render_error
from .models.dates import CalendarDate
from .models.locale import LocaleDefinition
from .models.outcome import ParseFailure
from .parsing.calendar import today as current_date
from .parsing.formatting import format_date, format_long
from .parsing.rules import parse
from .parsing.stepping import step_text

logger = structlog.get_logger(__name__)


@dataclass
class DateField:
    locale: LocaleDefinition
    value: str = ""
    message: str = ""
    is_error: bool = False
    # Fixed "now" for relative input; None means the real current date.
    today: CalendarDate | date | None = None

    def validate(self) -> bool:
        """Interpret ``value``; on success rewrite it to the canonical form.

        Returns True when the field holds a date. An empty field clears the
        message and is not an error. A failed parse leaves ``value`` as typed.
        """
        if self.value == "":
            self.message = ""
            self.is_error = False
            return False

        outcome = parse(self.value, self.locale, self.today)
        if isinstance(outcome, ParseFailure):
            self._show_error(outcome)
            return False

        self.value = format_date(outcome.date, self.locale)
        self.message = format_long(outcome.date, self.locale)
        self.is_error = False
        return True

    def step(self, delta: int) -> bool:
        """Move a non-empty, parseable value by *delta* days."""
        if self.value == "":
            return False
        result = step_text(self.value, self.locale, delta, self.today)
        if isinstance(result, ParseFailure):
            self._show_error(result)
            return False
        if result is None:
            return False
        self.value = result
        return self.validate()

    def step_up(self) -> bool:
        return self.step(1)

    def step_down(self) -> bool:
        return self.step(-1)

    def scroll(self, wheel_delta: int) -> bool:
        # wheelDelta convention: scrolling down (<= 0) moves forward a day.
        return self.step(1 if wheel_delta <= 0 else -1)

    def insert_today(self) -> bool:
        """Fill an empty field with today's date."""
        if self.value != "":
            return False
        now = self.today if self.today is not None else current_date()
        if isinstance(now, date):
            now = CalendarDate.from_date(now)
        self.value = format_date(now, self.locale)
        return self.validate()

    def _show_error(self, failure: ParseFailure) -> None:
        self.message = render_error(failure.error, self.locale)
        self.is_error = True
        logger.debug("field_invalid", value=self.value, kind=str(failure.error.kind))
