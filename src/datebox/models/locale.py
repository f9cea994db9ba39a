"""Locale definitions used to interpret and render dates.

A ``LocaleDefinition`` bundles everything the parser needs to know about a
language/region: month and weekday vocabulary, which numeric date orders are
accepted, the canonical output template, the locale-specific surface
patterns, and the message templates for each error kind.
"""

from __future__ import annotations

import re

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from .errors import ErrorKind


class LocalePatterns(BaseModel):
    """Locale-specific surface patterns for the keyword and name rules.

    ``next``/``last`` capture the weekday partial in group 1.
    ``day_month_year`` captures (day, month name?, year?) and
    ``month_day_year`` captures (month name, day, year?).
    """

    model_config = ConfigDict(frozen=True)

    today: re.Pattern[str]
    tomorrow: re.Pattern[str]
    yesterday: re.Pattern[str]
    next: re.Pattern[str]
    last: re.Pattern[str]
    day_month_year: re.Pattern[str]
    month_day_year: re.Pattern[str]


class LocaleDefinition(BaseModel):
    """A read-only locale bundle."""

    model_config = ConfigDict(frozen=True)

    code: str
    months: list[str] = Field(min_length=12, max_length=12)
    weekdays: list[str] = Field(min_length=7, max_length=7)
    # ISO weekday (1=Monday .. 7=Sunday) stored at weekdays[0]
    week_starts_on: int = Field(default=7, ge=1, le=7)
    euro: bool = False
    us: bool = False
    iso: bool = True
    output_format: str
    long_format: str
    patterns: LocalePatterns
    errors: dict[ErrorKind, str]

    @field_validator("months", "weekdays")
    @classmethod
    def _no_duplicate_names(cls, names: list[str]) -> list[str]:
        folded = [n.casefold() for n in names]
        if len(set(folded)) != len(folded):
            raise ValueError(f"duplicate names in table: {names}")
        if any(not n for n in names):
            raise ValueError("empty name in table")
        return names

    @field_validator("output_format")
    @classmethod
    def _has_all_tokens(cls, template: str) -> str:
        missing = [tok for tok in ("yyyy", "mm", "dd") if tok not in template]
        if missing:
            raise ValueError(f"output_format {template!r} lacks {', '.join(missing)}")
        return template

    @model_validator(mode="after")
    def _messages_complete(self) -> "LocaleDefinition":
        missing = [kind for kind in ErrorKind if kind not in self.errors]
        if missing:
            raise ValueError(f"locale {self.code!r} has no message for {', '.join(missing)}")
        if self.euro and self.us:
            raise ValueError(f"locale {self.code!r} enables both day-first and month-first numeric dates")
        return self
