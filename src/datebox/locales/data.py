"""Locale tables shipped with the package."""
from __future__ import annotations

import re

from ..models.errors import ErrorKind
from ..models.locale import LocaleDefinition, LocalePatterns

_I = re.IGNORECASE

EN = LocaleDefinition(
    code="en",
    months="January February March April May June July August September October November December".split(),
    weekdays="Sunday Monday Tuesday Wednesday Thursday Friday Saturday".split(),
    week_starts_on=7,
    euro=False,
    us=True,
    iso=True,
    output_format="mm/dd/yyyy",
    long_format="{weekday}, {month} {day}, {year}",
    patterns=LocalePatterns(
        today=re.compile(r"^tod", _I),
        tomorrow=re.compile(r"^tom", _I),
        yesterday=re.compile(r"^yes", _I),
        next=re.compile(r"^next (\w+)$", _I),
        last=re.compile(r"^last (\w+)$", _I),
        day_month_year=re.compile(r"^([0-9]{1,2})(?:st|nd|rd|th)?(?: (\w+)(?:,? ([0-9]{4}))?)?$", _I),
        month_day_year=re.compile(r"^(\w+) ([0-9]{1,2})(?:st|nd|rd|th)?(?:,? ([0-9]{4}))?$", _I),
    ),
    errors={
        ErrorKind.UNSUPPORTED_LOCALE: "Unsupported locale: %locale%",
        ErrorKind.UNKNOWN_FORMAT: "Invalid date string",
        ErrorKind.YEAR_OUT_OF_RANGE: "Invalid year. Valid years are 1 thru 9999.",
        ErrorKind.MONTH_OUT_OF_RANGE: "Invalid month. Valid months are 1 thru 12.",
        ErrorKind.DAY_OUT_OF_RANGE: "Invalid day. Valid days for %month% are 1 thru %day%.",
        ErrorKind.NO_SUCH_MONTH_NAME: "Invalid month string",
        ErrorKind.AMBIGUOUS_MONTH_NAME: "Ambiguous month",
        ErrorKind.NO_SUCH_WEEKDAY_NAME: "Invalid day string",
        ErrorKind.AMBIGUOUS_WEEKDAY_NAME: "Ambiguous weekday",
    },
)

DA = LocaleDefinition(
    code="da",
    months="januar februar marts april maj juni juli august september oktober november december".split(),
    weekdays="søndag mandag tirsdag onsdag torsdag fredag lørdag".split(),
    week_starts_on=7,
    euro=True,
    us=False,
    iso=True,
    output_format="dd-mm-yyyy",
    long_format="{weekday} den {day}. {month} {year}",
    patterns=LocalePatterns(
        # "i dag", "i morgen", "i går"
        today=re.compile(r"^i ?d", _I),
        tomorrow=re.compile(r"^i ?m", _I),
        yesterday=re.compile(r"^i ?g", _I),
        next=re.compile(r"^næste (\S+)$", _I),
        last=re.compile(r"^sidste (\S+)$", _I),
        day_month_year=re.compile(r"^([0-9]{1,2})\.?(?: (\w+)(?:,? ([0-9]{4}))?)?$", _I),
        month_day_year=re.compile(r"^(\w+) ([0-9]{1,2})(?:[.,]? ([0-9]{4}))?$", _I),
    ),
    errors={
        ErrorKind.UNSUPPORTED_LOCALE: "Unsupported locale: %locale%",
        ErrorKind.UNKNOWN_FORMAT: "Ukendt dato-format",
        ErrorKind.YEAR_OUT_OF_RANGE: "Ugyldig værdi for år. Gyldige år er 1 til 9999.",
        ErrorKind.MONTH_OUT_OF_RANGE: "Ugyldig værdi for måned. Gyldige måneder er 1 til 12.",
        ErrorKind.DAY_OUT_OF_RANGE: "Ugyldig værdi for dag. Gyldige dage for %month% er 1 til %day%.",
        ErrorKind.NO_SUCH_MONTH_NAME: "Ugyldig indtastning for månedsnavn",
        ErrorKind.AMBIGUOUS_MONTH_NAME: "Ikke entydigt månedsnavn",
        ErrorKind.NO_SUCH_WEEKDAY_NAME: "Ugyldig indtastning for ugedag",
        ErrorKind.AMBIGUOUS_WEEKDAY_NAME: "Ikke entydig ugedag",
    },
)

LOCALES: dict[str, LocaleDefinition] = {loc.code: loc for loc in (EN, DA)}
