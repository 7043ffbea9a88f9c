"""
Pytest fixtures for the tabula test suite.

Provides:
- A fixed "today" so templates are deterministic
- The sample ledger under tests/fixtures
- A fresh configuration singleton and logger for every test
"""

import logging
from datetime import date
from pathlib import Path

import pytest

from config import ConfigurationManager
from tabula.utils.logger import APP_LOGGER_NAME

FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture(autouse=True)
def fresh_config():
    """Reload the default configuration around every test."""
    ConfigurationManager.reset()
    yield
    ConfigurationManager.reset()
    # Handlers hold the stream captured for the finished test
    logging.getLogger(APP_LOGGER_NAME).handlers.clear()


@pytest.fixture
def today() -> date:
    return date(2024, 3, 14)


@pytest.fixture
def ledger_path() -> Path:
    return FIXTURES_DIR / "invoices.beancount"


@pytest.fixture
def ledger_text(ledger_path) -> str:
    return ledger_path.read_text(encoding="utf-8")
