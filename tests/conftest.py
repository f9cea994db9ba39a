"""Shared test fixtures."""
import pytest
from datebox.locales.data import DA, EN
from datebox.locales.registry import LocaleRegistry
from datebox.models.dates import CalendarDate


@pytest.fixture
def en():
    return EN


@pytest.fixture
def da():
    return DA


@pytest.fixture
def today():
    """Wednesday 6 January 2010."""
    return CalendarDate(year=2010, month=0, day=6)


@pytest.fixture
def registry():
    """A fresh registry so tests never touch the process-wide one."""
    return LocaleRegistry(default="en")
