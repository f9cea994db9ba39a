"""Render typed date errors with a locale's message templates."""
from __future__ import annotations

from .models.errors import DateError
from .models.locale import LocaleDefinition


def render_error(error: DateError, locale: LocaleDefinition) -> str:
    """Fill ``%month%``, ``%day%`` and ``%locale%`` in the template for *error*.

    ``%month%`` becomes the locale's month name (when the error names a valid
    month), ``%day%`` the last valid day of that month.
    """
    message = locale.errors[error.kind]
    if error.month is not None and 0 <= error.month <= 11:
        message = message.replace("%month%", locale.months[error.month])
    if error.max_day is not None:
        message = message.replace("%day%", str(error.max_day))
    if error.locale is not None:
        message = message.replace("%locale%", error.locale)
    return message
