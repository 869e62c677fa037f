"""Tests for settings and logging setup."""

import logging

import pytest
import structlog

from underbar import UnderbarSettings, configure_logging, get_logger, get_settings, set_settings


@pytest.fixture
def clean_env(monkeypatch):
    for name in ("UNDERBAR_SHUFFLE_SEED", "UNDERBAR_WARN_ON_SHAPE_MISMATCH", "UNDERBAR_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    set_settings(None)
    return monkeypatch


def test_defaults(clean_env):
    settings = UnderbarSettings()
    assert settings.shuffle_seed is None
    assert settings.warn_on_shape_mismatch is True
    assert settings.log_level == "WARNING"


def test_environment_overrides(clean_env):
    clean_env.setenv("UNDERBAR_SHUFFLE_SEED", "7")
    clean_env.setenv("UNDERBAR_WARN_ON_SHAPE_MISMATCH", "false")

    settings = get_settings()

    assert settings.shuffle_seed == 7
    assert settings.warn_on_shape_mismatch is False


def test_get_settings_is_loaded_once(clean_env):
    first = get_settings()
    clean_env.setenv("UNDERBAR_SHUFFLE_SEED", "3")
    assert get_settings() is first
    assert first.shuffle_seed is None


def test_set_settings_returns_previous(clean_env):
    assert set_settings(UnderbarSettings(shuffle_seed=1)) is None

    replacement = UnderbarSettings(shuffle_seed=2)
    previous = set_settings(replacement)

    assert previous is not None
    assert previous.shuffle_seed == 1
    assert get_settings() is replacement


def test_set_settings_none_reloads_from_environment(clean_env):
    set_settings(UnderbarSettings(shuffle_seed=1))
    set_settings(None)
    clean_env.setenv("UNDERBAR_SHUFFLE_SEED", "9")

    assert get_settings().shuffle_seed == 9


# Logging


@pytest.fixture
def restore_logging():
    underbar_logger = logging.getLogger("underbar")
    level = underbar_logger.level
    yield
    underbar_logger.setLevel(level)
    structlog.reset_defaults()


def test_configure_logging_sets_level(restore_logging):
    configure_logging("debug")
    assert logging.getLogger("underbar").level == logging.DEBUG


def test_configure_logging_accepts_numeric_level(restore_logging):
    configure_logging(logging.ERROR)
    assert logging.getLogger("underbar").level == logging.ERROR


def test_configure_logging_defaults_to_settings(restore_logging, clean_env):
    set_settings(UnderbarSettings(log_level="INFO"))
    configure_logging()
    assert logging.getLogger("underbar").level == logging.INFO


def test_logger_routes_through_stdlib(caplog):
    logger = get_logger("underbar.tests")
    with caplog.at_level(logging.INFO, logger="underbar"):
        logger.info("something_happened", answer=42)

    assert "something_happened" in caplog.text


def test_library_logger_has_null_handler():
    handlers = logging.getLogger("underbar").handlers
    assert any(isinstance(handler, logging.NullHandler) for handler in handlers)
