"""
Pytest configuration and shared fixtures.

This file is automatically loaded by pytest before any tests run.
"""

import logging
import os
import sys

# Set test environment variables BEFORE any package imports
os.environ["LOCALEDATA_RESOURCE_PACKAGE"] = "localedata.locales"
os.environ["LOCALEDATA_PRELOAD_KINDS"] = ""
os.environ["LOCALEDATA_LOG_FILE"] = "false"

import pytest

from localedata import LocaleData
from localedata.core.bundles import DEFAULT_RESOURCE_PACKAGE
from localedata.core.config import get_settings
from localedata.core.logging_config import LOGGING_CONFIG


@pytest.fixture(autouse=True)
def fresh_registry():
    """Start every test with the packaged resources and an empty cache."""
    LocaleData.configure(DEFAULT_RESOURCE_PACKAGE)
    yield
    LocaleData.configure(DEFAULT_RESOURCE_PACKAGE)
    get_settings.cache_clear()


@pytest.fixture
def restore_logging():
    """Undo root handler and level changes made by setup_logging."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)
    for name in LOGGING_CONFIG:
        logging.getLogger(name).setLevel(logging.NOTSET)


@pytest.fixture
def resource_package(tmp_path, monkeypatch):
    """Create an importable resource package and return a writer for tables.

    The writer takes (kind, locale, text) and returns the package name, so a
    test can point LocaleData at hand-made (possibly broken) tables.
    """
    package = tmp_path / "fake_locales"
    package.mkdir()
    (package / "__init__.py").write_text("", encoding="utf-8")
    monkeypatch.syspath_prepend(str(tmp_path))
    # Each test gets its own directory under the same package name
    monkeypatch.delitem(sys.modules, "fake_locales", raising=False)

    def write(kind: str, locale: str, text: str) -> str:
        folder = package / kind
        folder.mkdir(exist_ok=True)
        (folder / f"{locale}.json").write_text(text, encoding="utf-8")
        return "fake_locales"

    return write
