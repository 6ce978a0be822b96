"""
conftest.py

Shared fixtures for unit tests.

Every test runs without a settings file (the environment variable is removed)
and with the root logger restored afterwards, because main() and
setup_logging() attach handlers to it.
"""

import logging

import pytest

from thermistor_calculator.config_loader import CONFIG_PATH_ENV_VAR
from thermistor_calculator.configuration import Configuration


@pytest.fixture(autouse=True)
def no_settings_file(monkeypatch):
    monkeypatch.delenv(CONFIG_PATH_ENV_VAR, raising=False)


@pytest.fixture(autouse=True)
def clean_root_handlers():
    """Remove all root logger handlers before and after each test."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    root.handlers.clear()
    yield
    for handler in root.handlers:
        handler.close()
    root.handlers.clear()
    root.handlers.extend(original_handlers)
    root.setLevel(original_level)


@pytest.fixture
def default_configuration():
    return Configuration()
