#!/usr/bin/env python3
"""Interpret a date expression from the command line."""
import argparse
import sys
from datetime import date

# Load .env file
from dotenv import load_dotenv
load_dotenv()

from pydantic import ValidationError

from datebox.config import Settings
from datebox.locales.registry import LocaleRegistry
from datebox.messages import render_error
from datebox.models.errors import DateBoxError
from datebox.models.outcome import ParseFailure
from datebox.parsing.formatting import format_date, format_long
from datebox.parsing.rules import parse
from datebox.parsing.stepping import step
from datebox.utils.logging import setup_logging_from_settings


def main(argv: list[str] | None = None) -> int:
    """Parse one expression and print the canonical and long forms."""
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("text", nargs="+", help="date expression, e.g. 'next friday' or '4. jan 2003'")
    parser.add_argument("--locale", help="locale code (default: DATEBOX_DEFAULT_LOCALE)")
    parser.add_argument("--today", type=date.fromisoformat, help="fix the current date (YYYY-MM-DD)")
    parser.add_argument("--step", type=int, default=0, help="days to add after parsing")
    args = parser.parse_args(argv)

    try:
        settings = Settings()
    except ValidationError as e:
        print(f"Error: invalid configuration: {e}")
        return 1
    setup_logging_from_settings(settings)
    registry = LocaleRegistry(default=settings.default_locale)

    try:
        locale = registry.set_active_locale(args.locale) if args.locale else registry.active
    except DateBoxError as e:
        print(f"Error: {render_error(e.error, registry.active)}")
        return 1

    outcome = parse(" ".join(args.text), locale, args.today)
    if isinstance(outcome, ParseFailure):
        print(f"Error: {render_error(outcome.error, locale)}")
        return 1

    value = outcome.date
    if args.step:
        try:
            value = step(value, args.step)
        except DateBoxError as e:
            print(f"Error: {render_error(e.error, locale)}")
            return 1

    print(f"Rule: {outcome.rule}")
    print(f"Value: {format_date(value, locale)}")
    print(f"Display: {format_long(value, locale)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
