"""Tests for settings loading and logging setup."""

import json
import logging

import pytest
from pydantic import ValidationError

from wordslugs.core.config import CONFIG_FILE_ENV, Settings, get_settings
from wordslugs.core.logging import AppLogger, JSONFormatter, get_logger
from wordslugs.core.types import CaseStyle


@pytest.fixture
def reset_logging(monkeypatch):
    """Reconfigure logging per test and restore the default setup afterwards."""
    AppLogger.reset()
    yield monkeypatch
    monkeypatch.undo()
    AppLogger.reset()
    get_settings.cache_clear()
    get_logger("wordslugs")


def test_defaults():
    """Test the default settings values."""
    settings = Settings()
    assert settings.generator.default_word_count == 3
    assert settings.generator.default_case_style == CaseStyle.KEBAB
    assert settings.catalog.validate_on_load is True
    assert settings.logging.format in ("json", "text")


def test_get_settings_is_cached():
    """Test that get_settings returns a cached instance."""
    assert get_settings() is get_settings()


def test_env_override(monkeypatch):
    """Test that prefixed, nested environment variables override defaults."""
    monkeypatch.setenv("WORDSLUGS_GENERATOR__DEFAULT_WORD_COUNT", "4")
    monkeypatch.setenv("WORDSLUGS_LOGGING__LEVEL", "debug")
    settings = Settings()
    assert settings.generator.default_word_count == 4
    assert settings.logging.level == "DEBUG"


def test_config_file(monkeypatch, tmp_path):
    """Test loading settings from an explicit TOML file."""
    config_file = tmp_path / "slugs.toml"
    config_file.write_text('[generator]\ndefault_case_style = "camel"\n')
    monkeypatch.setenv(CONFIG_FILE_ENV, str(config_file))

    settings = Settings()
    assert settings.generator.default_case_style == CaseStyle.CAMEL


def test_invalid_log_level():
    """Test that an unknown log level is rejected."""
    with pytest.raises(ValidationError, match="level must be one of"):
        Settings(logging={"level": "LOUD"})


def test_invalid_log_format():
    """Test that an unknown log format is rejected."""
    with pytest.raises(ValidationError, match="format must be one of"):
        Settings(logging={"format": "xml"})


def test_word_count_must_be_positive():
    """Test that a zero default word count is rejected."""
    with pytest.raises(ValidationError):
        Settings(generator={"default_word_count": 0})


def test_default_cannot_exceed_max():
    """Test that the default word count must not exceed the maximum."""
    with pytest.raises(ValidationError, match="cannot exceed max_word_count"):
        Settings(generator={"default_word_count": 5, "max_word_count": 4})


def test_get_settings_logs_and_raises(monkeypatch, caplog):
    """Test that a settings failure is logged and re-raised."""
    monkeypatch.setenv("WORDSLUGS_LOGGING__FORMAT", "xml")
    # The package logger does not propagate to the root logger caplog listens on
    monkeypatch.setattr(logging.getLogger("wordslugs"), "propagate", True)
    with caplog.at_level(logging.ERROR, logger="wordslugs.core.config"):
        with pytest.raises(ValidationError):
            get_settings()
    assert "Failed to load configuration" in caplog.text


def test_logger_uses_configured_level(reset_logging):
    """Test that the package logger gets the configured level and one handler."""
    reset_logging.setenv("WORDSLUGS_LOGGING__LEVEL", "DEBUG")
    get_settings.cache_clear()

    logger = get_logger("wordslugs.tests")

    assert logger.getEffectiveLevel() == logging.DEBUG
    package_logger = logging.getLogger("wordslugs")
    assert len(package_logger.handlers) == 1


def test_package_logger_does_not_propagate(reset_logging):
    """Test that records are not passed on to the root logger's handlers."""
    get_logger("wordslugs.tests")

    assert logging.getLogger("wordslugs").propagate is False


def test_root_handler_does_not_receive_package_records(reset_logging):
    """Test that a host application's root handler sees no package records."""
    received = []

    class ListHandler(logging.Handler):
        def emit(self, record):
            received.append(record)

    root_handler = ListHandler()
    logging.getLogger().addHandler(root_handler)
    try:
        get_logger("wordslugs.tests").error("Only handled once")
    finally:
        logging.getLogger().removeHandler(root_handler)

    assert received == []


def test_json_logging(reset_logging):
    """Test that the JSON format installs the JSON formatter."""
    reset_logging.setenv("WORDSLUGS_LOGGING__FORMAT", "json")
    get_settings.cache_clear()

    get_logger("wordslugs.tests")

    handler = logging.getLogger("wordslugs").handlers[0]
    assert isinstance(handler.formatter, JSONFormatter)


def test_json_formatter_includes_extra_fields():
    """Test that structured extra fields end up in the JSON record."""
    record = logging.LogRecord(
        "wordslugs.generator", logging.DEBUG, __file__, 1, "Generated slug", None, None
    )
    record.pattern = ["adjective", "noun"]
    record.case_style = "kebab"

    entry = json.loads(JSONFormatter().format(record))

    assert entry["message"] == "Generated slug"
    assert entry["level"] == "DEBUG"
    assert entry["pattern"] == ["adjective", "noun"]
    assert entry["case_style"] == "kebab"
    assert "word_count" not in entry
