"""Tests for configuration."""

import os
from pathlib import Path

import pytest
from pydantic import ValidationError

from dayscounter.config import DaysCounterConfig, _parse_bool
from dayscounter.exceptions import ConfigError


def test_config_defaults():
    """Test DaysCounterConfig default values."""
    config = DaysCounterConfig()
    assert config.log_dir == Path("logs")
    assert config.log_filename == "dayscounter.log"
    assert config.export_filename == "event.ics"
    assert config.prodid == "-//DaysCounterApp//EN"
    assert config.uid_domain == "dayscounter"
    assert config.escape_text is True
    assert config.date_format == "%Y-%m-%d"


def test_config_from_env_all_vars(monkeypatch):
    """Test loading all config values from environment."""
    monkeypatch.setenv("DAYSCOUNTER_LOG_DIR", "/custom/logs")
    monkeypatch.setenv("DAYSCOUNTER_LOG_FILENAME", "custom.log")
    monkeypatch.setenv("DAYSCOUNTER_EXPORT_FILENAME", "reminder.ics")
    monkeypatch.setenv("DAYSCOUNTER_PRODID", "-//Custom//EN")
    monkeypatch.setenv("DAYSCOUNTER_UID_DOMAIN", "example.org")
    monkeypatch.setenv("DAYSCOUNTER_ESCAPE_TEXT", "no")
    monkeypatch.setenv("DAYSCOUNTER_DATE_FORMAT", "%d.%m.%Y")

    config = DaysCounterConfig.from_env()
    assert config.log_dir == Path("/custom/logs")
    assert config.log_filename == "custom.log"
    assert config.export_filename == "reminder.ics"
    assert config.prodid == "-//Custom//EN"
    assert config.uid_domain == "example.org"
    assert config.escape_text is False
    assert config.date_format == "%d.%m.%Y"


def test_config_from_env_file(tmp_path, monkeypatch):
    """Test values from a .env file in the working directory."""
    (tmp_path / ".env").write_text("DAYSCOUNTER_UID_DOMAIN=from-dotenv\n")
    monkeypatch.delenv("DAYSCOUNTER_UID_DOMAIN", raising=False)
    monkeypatch.chdir(tmp_path)

    try:
        config = DaysCounterConfig.from_env()
        assert config.uid_domain == "from-dotenv"
    finally:
        # load_dotenv writes to os.environ directly
        os.environ.pop("DAYSCOUNTER_UID_DOMAIN", None)


def test_config_env_overrides_env_file(tmp_path, monkeypatch):
    """Test real environment variables win over the .env file."""
    (tmp_path / ".env").write_text("DAYSCOUNTER_PRODID=-//FromFile//EN\n")
    monkeypatch.setenv("DAYSCOUNTER_PRODID", "-//FromEnv//EN")
    monkeypatch.chdir(tmp_path)

    config = DaysCounterConfig.from_env()
    assert config.prodid == "-//FromEnv//EN"


def test_config_invalid_escape_text_keeps_default(monkeypatch):
    """Test handling invalid DAYSCOUNTER_ESCAPE_TEXT."""
    monkeypatch.setenv("DAYSCOUNTER_ESCAPE_TEXT", "maybe")
    config = DaysCounterConfig.from_env()
    assert config.escape_text is True


def test_config_export_filename_must_be_ics():
    """Test the default export name is validated."""
    with pytest.raises(ValidationError):
        DaysCounterConfig(export_filename="event.txt")


@pytest.mark.parametrize("value", ["1", "true", "YES", " on "])
def test_parse_bool_true(value):
    assert _parse_bool(value) is True


@pytest.mark.parametrize("value", ["0", "false", "No", "off"])
def test_parse_bool_false(value):
    assert _parse_bool(value) is False


def test_parse_bool_invalid():
    with pytest.raises(ConfigError):
        _parse_bool("perhaps")
