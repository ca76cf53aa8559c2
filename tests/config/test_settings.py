"""
Thirty - Configuration Tests

Tests for Settings loading and logging setup.
"""

import logging

import pytest
from pydantic import ValidationError
from thirty.config import configure_logging
from thirty.config.settings import Settings, get_settings


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for key in ("THIRTY_DEBUG", "THIRTY_LOG_LEVEL", "THIRTY_DICE_SEED", "THIRTY_SHOW_RULES"):
        monkeypatch.delenv(key, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


class TestSettings:
    """Tests for Settings."""

    def test_defaults(self):
        settings = Settings(_env_file=None)
        assert settings.debug is False
        assert settings.log_level == "INFO"
        assert settings.dice_seed is None
        assert settings.show_rules is True

    def test_reads_prefixed_env(self, monkeypatch):
        monkeypatch.setenv("THIRTY_LOG_LEVEL", "DEBUG")
        monkeypatch.setenv("THIRTY_DICE_SEED", "42")
        monkeypatch.setenv("THIRTY_SHOW_RULES", "false")
        settings = Settings(_env_file=None)
        assert settings.log_level == "DEBUG"
        assert settings.dice_seed == 42
        assert settings.show_rules is False

    def test_ignores_unprefixed_env(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "ERROR")
        assert Settings(_env_file=None).log_level == "INFO"

    def test_log_level_is_case_insensitive(self, monkeypatch):
        monkeypatch.setenv("THIRTY_LOG_LEVEL", "warning")
        assert Settings(_env_file=None).log_level == "WARNING"

    def test_rejects_unknown_log_level(self, monkeypatch):
        monkeypatch.setenv("THIRTY_LOG_LEVEL", "verbose")
        with pytest.raises(ValidationError):
            Settings(_env_file=None)

    def test_get_settings_is_cached(self):
        assert get_settings() is get_settings()


class TestConfigureLogging:
    """Tests for configure_logging()."""

    def test_applies_level(self):
        logger = configure_logging(Settings(_env_file=None, log_level="warning"))
        assert logger.name == "thirty"
        assert logger.level == logging.WARNING

    def test_debug_flag_wins(self):
        logger = configure_logging(Settings(_env_file=None, debug=True, log_level="ERROR"))
        assert logger.level == logging.DEBUG

    def test_handler_added_once(self):
        configure_logging(Settings(_env_file=None))
        count = len(logging.getLogger("thirty").handlers)
        configure_logging(Settings(_env_file=None))
        assert len(logging.getLogger("thirty").handlers) == count

    def test_engine_logs_propagate(self, caplog):
        from thirty.engine import RoundEngine

        configure_logging(Settings(_env_file=None, log_level="INFO"))
        engine = RoundEngine()
        engine.select_dice({0, 1, 2})
        with caplog.at_level(logging.INFO, logger="thirty"):
            engine.compute_score("Low")
        assert "scored 6 on Low" in caplog.text
