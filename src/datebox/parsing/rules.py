"""Ordered rule table that turns loosely formatted text into a date.

Rules are tried in order against the trimmed input. Each rule reports one of
three outcomes: its pattern did not match, it matched but is switched off for
the locale (declined), or it produced a date. The first produced date wins.
A calendar or name error raised by a handler ends the parse at once; an
impossible date is a definite answer, not a reason to try the next rule.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import date
from typing import Callable

import structlog

from ..models.dates import CalendarDate
from ..models.errors import DateBoxError, DateError, ErrorKind
from ..models.locale import LocaleDefinition
from ..models.outcome import (
    DECLINED, NO_MATCH, Matched, ParseFailure, ParseOutcome, ParseSuccess, RuleOutcome,
)
from .calendar import add_days, make_date, today as current_date, weekday_index
from .names import resolve_month, resolve_weekday

logger = structlog.get_logger(__name__)

# Shared by the day-first and month-first numeric rules; the locale flags decide.
NUMERIC_DATE_RE = re.compile(r"^([0-9]{1,2})[/-]([0-9]{1,2})(?:[/-]([0-9]{2}|[0-9]{4}))?$")
ISO_DATE_RE = re.compile(r"^([0-9]{4})-([0-9]{1,2})-([0-9]{1,2})$")

Handler = Callable[[re.Match[str], LocaleDefinition, CalendarDate], RuleOutcome]
PatternSource = Callable[[LocaleDefinition], re.Pattern[str]]


@dataclass(frozen=True)
class ParseRule:
    """A pattern paired with the handler that interprets its captures."""

    name: str
    pattern: PatternSource
    handler: Handler

    def apply(self, text: str, locale: LocaleDefinition, today: CalendarDate) -> RuleOutcome:
        m = self.pattern(locale).search(text)
        if m is None:
            return NO_MATCH
        return self.handler(m, locale, today)


def _fixed(pattern: re.Pattern[str]) -> PatternSource:
    return lambda _locale: pattern


def _year(raw: str | None, today: CalendarDate) -> int:
    """Explicit year, two-digit year in the current century, or this year."""
    if raw is None:
        return today.year
    year = int(raw)
    if len(raw) == 2:
        year += today.year - today.year % 100
    return year


# ---------------------------------------------------------------------------
# Handlers
# ---------------------------------------------------------------------------


def _today(m: re.Match[str], locale: LocaleDefinition, today: CalendarDate) -> RuleOutcome:
    return Matched(date=today)


def _tomorrow(m: re.Match[str], locale: LocaleDefinition, today: CalendarDate) -> RuleOutcome:
    return Matched(date=add_days(today, 1))


def _yesterday(m: re.Match[str], locale: LocaleDefinition, today: CalendarDate) -> RuleOutcome:
    return Matched(date=add_days(today, -1))


def _next_weekday(m: re.Match[str], locale: LocaleDefinition, today: CalendarDate) -> RuleOutcome:
    # Strictly in the future: naming today's weekday jumps a full week.
    target = resolve_weekday(m.group(1), locale)
    offset = target - weekday_index(today, locale)
    if offset <= 0:
        offset += 7
    return Matched(date=add_days(today, offset))


def _last_weekday(m: re.Match[str], locale: LocaleDefinition, today: CalendarDate) -> RuleOutcome:
    # Strictly in the past, mirroring _next_weekday.
    target = resolve_weekday(m.group(1), locale)
    offset = -((weekday_index(today, locale) + 7 - target) % 7)
    if offset == 0:
        offset = -7
    return Matched(date=add_days(today, offset))


def _day_month_year(m: re.Match[str], locale: LocaleDefinition, today: CalendarDate) -> RuleOutcome:
    day = int(m.group(1))
    month = resolve_month(m.group(2), locale) if m.group(2) is not None else today.month
    return Matched(date=make_date(_year(m.group(3), today), month, day))


def _month_day_year(m: re.Match[str], locale: LocaleDefinition, today: CalendarDate) -> RuleOutcome:
    month = resolve_month(m.group(1), locale)
    return Matched(date=make_date(_year(m.group(3), today), month, int(m.group(2))))


def _numeric(day_first: bool) -> Handler:
    def handler(m: re.Match[str], locale: LocaleDefinition, today: CalendarDate) -> RuleOutcome:
        if not (locale.euro if day_first else locale.us):
            return DECLINED
        a, b = int(m.group(1)), int(m.group(2))
        day, month = (a, b) if day_first else (b, a)
        return Matched(date=make_date(_year(m.group(3), today), month - 1, day))

    return handler


def _iso(m: re.Match[str], locale: LocaleDefinition, today: CalendarDate) -> RuleOutcome:
    if not locale.iso:
        return DECLINED
    return Matched(date=make_date(int(m.group(1)), int(m.group(2)) - 1, int(m.group(3))))


RULES: tuple[ParseRule, ...] = (
    ParseRule("today", lambda loc: loc.patterns.today, _today),
    ParseRule("tomorrow", lambda loc: loc.patterns.tomorrow, _tomorrow),
    ParseRule("yesterday", lambda loc: loc.patterns.yesterday, _yesterday),
    ParseRule("next_weekday", lambda loc: loc.patterns.next, _next_weekday),
    ParseRule("last_weekday", lambda loc: loc.patterns.last, _last_weekday),
    ParseRule("day_month_year", lambda loc: loc.patterns.day_month_year, _day_month_year),
    ParseRule("month_day_year", lambda loc: loc.patterns.month_day_year, _month_day_year),
    ParseRule("numeric_day_first", _fixed(NUMERIC_DATE_RE), _numeric(day_first=True)),
    ParseRule("numeric_month_first", _fixed(NUMERIC_DATE_RE), _numeric(day_first=False)),
    ParseRule("iso", _fixed(ISO_DATE_RE), _iso),
)


def parse(
    text: str,
    locale: LocaleDefinition,
    today: CalendarDate | date | None = None,
) -> ParseOutcome:
    """Interpret *text* in *locale*.

    *today* fixes "now" for the relative rules and for defaulted month/year;
    it defaults to the current local date. Never raises for bad input.
    """
    s = text.strip()
    if today is None:
        now = current_date()
    elif isinstance(today, date):
        now = CalendarDate.from_date(today)
    else:
        now = today

    try:
        for rule in RULES:
            outcome = rule.apply(s, locale, now)
            if isinstance(outcome, Matched):
                logger.debug("date_parsed", text=s, locale=locale.code, rule=rule.name, date=str(outcome.date))
                return ParseSuccess(date=outcome.date, rule=rule.name)
    except DateBoxError as exc:
        logger.debug("date_parse_failed", text=s, locale=locale.code, rule=rule.name, kind=str(exc.kind))
        return ParseFailure(error=exc.error)

    logger.debug("date_parse_failed", text=s, locale=locale.code, kind=str(ErrorKind.UNKNOWN_FORMAT))
    return ParseFailure(error=DateError(kind=ErrorKind.UNKNOWN_FORMAT, value=s))
