"""Outcomes returned by the parser and by individual parse rules."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict

from .dates import CalendarDate
from .errors import DateError


# ---------------------------------------------------------------------------
# Parse outcome (public)
# ---------------------------------------------------------------------------


class ParseSuccess(BaseModel):
    model_config = ConfigDict(frozen=True)

    date: CalendarDate
    rule: str = ""

    @property
    def ok(self) -> bool:
        return True


class ParseFailure(BaseModel):
    model_config = ConfigDict(frozen=True)

    error: DateError

    @property
    def ok(self) -> bool:
        return False


ParseOutcome = ParseSuccess | ParseFailure


# ---------------------------------------------------------------------------
# Rule outcome (per rule, three-way)
# ---------------------------------------------------------------------------


class Matched(BaseModel):
    """The rule's pattern matched and its handler produced a date."""

    model_config = ConfigDict(frozen=True)

    status: Literal["matched"] = "matched"
    date: CalendarDate


class Declined(BaseModel):
    """The pattern matched but the rule is switched off for the locale."""

    model_config = ConfigDict(frozen=True)

    status: Literal["declined"] = "declined"


class NoMatch(BaseModel):
    model_config = ConfigDict(frozen=True)

    status: Literal["no_match"] = "no_match"


DECLINED = Declined()
NO_MATCH = NoMatch()

RuleOutcome = Matched | Declined | NoMatch
