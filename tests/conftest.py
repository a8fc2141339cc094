"""Shared fixtures for the arrivals proxy tests."""

import os
from unittest.mock import patch

import pytest

from oba_arrivals.adapters.config import AppConfig
from oba_arrivals.adapters.web.formatters import LocaleTimeFormatter


@pytest.fixture
def clean_env():
    """Run with no environment variables leaking into AppConfig."""
    with patch.dict(os.environ, {}, clear=True):
        yield


@pytest.fixture
def config(clean_env: None) -> AppConfig:
    """Configuration with defaults and a fallback API key."""
    return AppConfig(_env_file=None, oba_api_key="config-key")


@pytest.fixture
def formatter() -> LocaleTimeFormatter:
    """Real locale time formatter."""
    return LocaleTimeFormatter()
