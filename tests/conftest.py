"""Shared fixtures."""
import logging

import pytest

from virtex_engine.core import money
from virtex_engine.utils.logging import JsonFormatter, UtcFormatter


@pytest.fixture(autouse=True)
def restore_root_logger():
    """Drop handlers installed by setup_logging after each test."""
    root = logging.getLogger()
    level = root.level
    yield
    for handler in root.handlers[:]:
        if isinstance(handler.formatter, (UtcFormatter, JsonFormatter)):
            root.removeHandler(handler)
            handler.close()
    root.setLevel(level)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep VIRTEX_* settings from the host out of tests."""
    for name in ("VIRTEX_BASE_ASSET", "VIRTEX_QUOTE_CURRENCY", "VIRTEX_LOG_LEVEL", "VIRTEX_LOG_JSON"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture(autouse=True)
def restore_currency_registry():
    """Undo register_currency calls made by a test."""
    saved = set(money._REGISTRY)
    yield
    money._REGISTRY.clear()
    money._REGISTRY.update(saved)
