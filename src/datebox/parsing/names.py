"""Prefix resolution of month and weekday names."""

from __future__ import annotations

from ..models.errors import DateBoxError, DateError, ErrorKind
from ..models.locale import LocaleDefinition


def _resolve(partial: str, names: list[str], missing: ErrorKind, ambiguous: ErrorKind) -> int:
    prefix = partial.casefold()
    matches = [i for i, name in enumerate(names) if name.casefold().startswith(prefix)]
    if not matches:
        raise DateBoxError(DateError(kind=missing, value=partial))
    if len(matches) > 1:
        raise DateBoxError(DateError(kind=ambiguous, value=partial))
    return matches[0]


def resolve_month(partial: str, locale: LocaleDefinition) -> int:
    """Return the 0-based month whose name starts with *partial*.

    Raises ``DateBoxError`` with ``NO_SUCH_MONTH_NAME`` or
    ``AMBIGUOUS_MONTH_NAME``; an ambiguous prefix is never settled by order.
    """
    return _resolve(partial, locale.months, ErrorKind.NO_SUCH_MONTH_NAME, ErrorKind.AMBIGUOUS_MONTH_NAME)


def resolve_weekday(partial: str, locale: LocaleDefinition) -> int:
    """Return the index into ``locale.weekdays`` whose name starts with *partial*."""
    return _resolve(
        partial, locale.weekdays, ErrorKind.NO_SUCH_WEEKDAY_NAME, ErrorKind.AMBIGUOUS_WEEKDAY_NAME,
    )
