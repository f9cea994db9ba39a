"""Calendar date value type."""

from __future__ import annotations

from datetime import date

from pydantic import BaseModel, ConfigDict, model_validator


class CalendarDate(BaseModel):
    """An immutable, always-valid Gregorian date.

    ``month`` is 0-based (0 = January) to match the locale name tables;
    ``day`` is 1-based.
    """

    model_config = ConfigDict(frozen=True)

    year: int
    month: int
    day: int

    @model_validator(mode="after")
    def _check_calendar(self) -> "CalendarDate":
        from ..parsing.calendar import validate_date

        validate_date(self.year, self.month, self.day)
        return self

    @classmethod
    def from_date(cls, value: date) -> "CalendarDate":
        return cls(year=value.year, month=value.month - 1, day=value.day)

    def to_date(self) -> date:
        return date(self.year, self.month + 1, self.day)

    def __str__(self) -> str:
        return self.to_date().isoformat()
