"""Typed error taxonomy for date interpretation.

Errors are plain data: a kind plus the structured values that explain it.
Turning them into user-facing text is left to ``datebox.messages`` so the
parser never deals with locale message templates.
"""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict


class ErrorKind(StrEnum):
    UNSUPPORTED_LOCALE = "unsupported_locale"
    UNKNOWN_FORMAT = "unknown_format"
    YEAR_OUT_OF_RANGE = "year_out_of_range"
    MONTH_OUT_OF_RANGE = "month_out_of_range"
    DAY_OUT_OF_RANGE = "day_out_of_range"
    NO_SUCH_MONTH_NAME = "no_such_month_name"
    AMBIGUOUS_MONTH_NAME = "ambiguous_month_name"
    NO_SUCH_WEEKDAY_NAME = "no_such_weekday_name"
    AMBIGUOUS_WEEKDAY_NAME = "ambiguous_weekday_name"


class DateError(BaseModel):
    """A recoverable interpretation failure.

    ``value`` holds the offending input fragment (a month/weekday partial,
    the raw text, or the locale code). ``year``/``month``/``max_day`` are set
    for calendar range errors; ``month`` is 0-based.
    """

    model_config = ConfigDict(frozen=True)

    kind: ErrorKind
    value: str | None = None
    year: int | None = None
    month: int | None = None
    max_day: int | None = None
    locale: str | None = None


class DateBoxError(ValueError):
    """Raised inside the core to abort a rule with a definite error."""

    def __init__(self, error: DateError):
        detail = str(error.kind) if error.value is None else f"{error.kind}: {error.value}"
        super().__init__(detail)
        self.error = error

    @property
    def kind(self) -> ErrorKind:
        return self.error.kind
