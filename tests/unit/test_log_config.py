"""Unit tests for the per-category logging setup."""

import logging

import pytest

from catalog_admin.config import get_settings
from catalog_admin.infrastructure.logging import log_config


@pytest.fixture
def fresh_settings(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    get_settings.cache_clear()
    yield monkeypatch
    get_settings.cache_clear()


def test_setup_logging_applies_category_levels(fresh_settings):
    fresh_settings.setenv("LOG_LEVEL_HTTP", "ERROR")
    fresh_settings.setenv("LOG_LEVEL_SCREENS", "DEBUG")

    log_config.setup_logging()

    assert logging.getLogger("httpx").level == logging.ERROR
    assert logging.getLogger("httpcore").level == logging.ERROR
    assert logging.getLogger("catalog_admin.application.screens").level == logging.DEBUG
    assert logging.getLogger("catalog_admin.application.forms").level == logging.DEBUG


def test_unknown_level_falls_back_to_info():
    assert log_config._parse_level("chatty") == logging.INFO
    assert log_config._parse_level("warning") == logging.WARNING
