"""Tests for configuration management."""

import os
from pathlib import Path

import pytest

import calperiod.config.settings as settings_module
from calperiod.config.settings import (
    ConfigError,
    Settings,
    generate_example_env,
    get_settings,
    load_env_file,
    load_settings,
    parse_str_list,
    reset_settings,
)


@pytest.fixture(autouse=True)
def clean_env():
    """Clean environment variables before each test."""
    original_env = os.environ.copy()

    calperiod_vars = [k for k in os.environ.keys() if k.startswith("CALPERIOD_")]
    for var in calperiod_vars:
        del os.environ[var]

    settings_module._settings = None

    yield

    os.environ.clear()
    os.environ.update(original_env)
    settings_module._settings = None


def test_settings_defaults():
    """Test settings defaults need no configuration."""
    settings = Settings()

    assert settings.default_timezone == "UTC"
    assert settings.default_locale == "en_US"
    assert settings.available_timezones == []
    assert settings.log_level == "INFO"
    assert settings.log_file is None


def test_settings_with_string_log_file():
    """Test settings converts string path to Path."""
    settings = Settings(log_file="/tmp/calperiod.jsonl")

    assert isinstance(settings.log_file, Path)


def test_log_level_normalized():
    assert Settings(log_level="debug").log_level == "DEBUG"


def test_invalid_log_level():
    with pytest.raises(ConfigError, match="CALPERIOD_LOG_LEVEL"):
        Settings(log_level="VERBOSE")


def test_invalid_default_timezone():
    with pytest.raises(ConfigError, match="CALPERIOD_DEFAULT_TZ"):
        Settings(default_timezone="Mars/Olympus_Mons")


def test_invalid_available_timezones():
    with pytest.raises(ConfigError, match="Atlantis/Capital"):
        Settings(available_timezones=["UTC", "Atlantis/Capital"])


def test_invalid_locale():
    with pytest.raises(ConfigError, match="CALPERIOD_DEFAULT_LOCALE"):
        Settings(default_locale="xx_YY")


def test_hyphenated_locale_accepted():
    assert Settings(default_locale="fr-FR").default_locale == "fr-FR"


def test_from_env(tmp_path):
    os.environ["CALPERIOD_DEFAULT_TZ"] = "Europe/Brussels"
    os.environ["CALPERIOD_DEFAULT_LOCALE"] = "nl_BE"
    os.environ["CALPERIOD_AVAILABLE_TIMEZONES"] = "UTC,Europe/Brussels"
    os.environ["CALPERIOD_LOG_LEVEL"] = "warning"
    os.environ["CALPERIOD_LOG_FILE"] = str(tmp_path / "calperiod.jsonl")

    settings = Settings.from_env(tmp_path / "missing.env")

    assert settings.default_timezone == "Europe/Brussels"
    assert settings.default_locale == "nl_BE"
    assert settings.available_timezones == ["UTC", "Europe/Brussels"]
    assert settings.log_level == "WARNING"
    assert settings.log_file == tmp_path / "calperiod.jsonl"


def test_from_env_file(tmp_path):
    env_file = tmp_path / ".env"
    env_file.write_text(
        "# comment\n"
        "\n"
        'CALPERIOD_DEFAULT_TZ="America/New_York"\n'
        "CALPERIOD_DEFAULT_LOCALE='de_DE'\n"
    )

    settings = Settings.from_env(str(env_file))

    assert settings.default_timezone == "America/New_York"
    assert settings.default_locale == "de_DE"


def test_load_env_file(tmp_path):
    env_file = tmp_path / ".env"
    env_file.write_text("CALPERIOD_TEST_KEY = value with spaces\nNOT_A_PAIR\n")

    load_env_file(env_file)

    assert os.environ["CALPERIOD_TEST_KEY"] == "value with spaces"


def test_parse_str_list():
    assert parse_str_list("") == []
    assert parse_str_list("UTC") == ["UTC"]
    assert parse_str_list(" UTC , Europe/Paris,,") == ["UTC", "Europe/Paris"]


def test_get_settings_loads_once(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)

    first = get_settings()
    second = get_settings()

    assert first is second
    assert first.default_timezone == "UTC"


def test_get_settings_reads_environment(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    os.environ["CALPERIOD_DEFAULT_TZ"] = "Asia/Tokyo"

    assert get_settings().default_timezone == "Asia/Tokyo"


def test_get_settings_invalid_environment(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    os.environ["CALPERIOD_LOG_LEVEL"] = "LOUD"

    with pytest.raises(ConfigError):
        get_settings()


def test_load_settings_replaces_current(tmp_path):
    env_file = tmp_path / ".env"
    env_file.write_text("CALPERIOD_DEFAULT_LOCALE=fr_FR\n")

    loaded = load_settings(env_file)

    assert get_settings() is loaded
    assert loaded.default_locale == "fr_FR"


def test_reset_settings(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    first = get_settings()

    reset_settings()

    assert get_settings() is not first


def test_generate_example_env(tmp_path):
    output = tmp_path / ".env.example"

    example = generate_example_env(output)

    assert output.read_text() == example
    for var in ("CALPERIOD_DEFAULT_TZ", "CALPERIOD_DEFAULT_LOCALE", "CALPERIOD_AVAILABLE_TIMEZONES"):
        assert var in example


def test_example_env_is_loadable(tmp_path):
    env_file = tmp_path / ".env"
    generate_example_env(env_file)

    settings = Settings.from_env(env_file)

    assert settings.default_timezone == "UTC"
    assert settings.log_level == "INFO"
