"""Locale lookup and the process-wide active locale reference."""
from __future__ import annotations

import threading
from collections.abc import Mapping
from functools import lru_cache

import structlog

from ..config import Settings
from ..models.errors import DateBoxError, DateError, ErrorKind
from ..models.locale import LocaleDefinition
from .data import LOCALES

logger = structlog.get_logger(__name__)


class LocaleRegistry:
    """Read-only locale table plus a swappable "active" reference.

    Core calls take a ``LocaleDefinition`` explicitly; the active locale only
    exists for callers that want a default. Swaps happen under a lock so a
    reader sees either the old or the new definition, never a mix.
    """

    def __init__(self, definitions: Mapping[str, LocaleDefinition] = LOCALES, default: str = "en"):
        self._definitions = dict(definitions)
        self._lock = threading.Lock()
        self._active = self.get_locale(default)

    def codes(self) -> list[str]:
        return sorted(self._definitions)

    def get_locale(self, code: str) -> LocaleDefinition:
        try:
            return self._definitions[code]
        except KeyError:
            logger.warning("unsupported_locale", locale=code, available=self.codes())
            raise DateBoxError(
                DateError(kind=ErrorKind.UNSUPPORTED_LOCALE, value=code, locale=code)
            ) from None

    def set_active_locale(self, code: str) -> LocaleDefinition:
        definition = self.get_locale(code)
        with self._lock:
            previous = self._active.code
            self._active = definition
        logger.info("active_locale_changed", previous=previous, locale=code)
        return definition

    @property
    def active(self) -> LocaleDefinition:
        with self._lock:
            return self._active


@lru_cache(maxsize=1)
def get_default_registry() -> LocaleRegistry:
    """Process-wide registry, built on first use from ``Settings``."""
    return LocaleRegistry(default=Settings().default_locale)


def get_locale(code: str) -> LocaleDefinition:
    return get_default_registry().get_locale(code)


def set_active_locale(code: str) -> LocaleDefinition:
    return get_default_registry().set_active_locale(code)


def get_active_locale() -> LocaleDefinition:
    return get_default_registry().active
