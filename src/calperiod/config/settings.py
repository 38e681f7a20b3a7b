"""Centralized configuration for calperiod.

Loads configuration from a .env file and the process environment and provides
typed access to settings. Every setting has a default, so a fresh checkout
works without any configuration.
"""

from __future__ import annotations

import os
import threading
from dataclasses import dataclass, field
from pathlib import Path

import pytz
from babel import Locale, UnknownLocaleError

__all__ = [
    "ConfigError",
    "Settings",
    "generate_example_env",
    "get_settings",
    "load_env_file",
    "load_settings",
    "parse_str_list",
    "reset_settings",
]

LOG_LEVELS = ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL")


class ConfigError(Exception):
    """Raised when configuration is missing or invalid."""

    pass


@dataclass
class Settings:
    """Centralized settings for calperiod.

    Attributes
    ----------
    default_timezone : str
        IANA zone used when a call does not pass one (default: UTC)
    default_locale : str
        Locale identifier used when a call does not pass one (default: en_US)
    available_timezones : list[str]
        Optional restriction of the zones returned by ``available_timezones()``.
        Empty means every zone known to pytz.
    log_level : str
        Logging level
    log_file : Path | None
        Log file path
    """

    default_timezone: str = "UTC"
    default_locale: str = "en_US"
    available_timezones: list[str] = field(default_factory=list)

    # Logging
    log_level: str = "INFO"
    log_file: Path | None = None

    def __post_init__(self):
        """Validate settings after initialization."""
        if self.log_file and isinstance(self.log_file, str):
            self.log_file = Path(self.log_file)

        self.log_level = self.log_level.upper()
        if self.log_level not in LOG_LEVELS:
            raise ConfigError(
                f"CALPERIOD_LOG_LEVEL must be one of {', '.join(LOG_LEVELS)}, got {self.log_level!r}"
            )

        if self.default_timezone not in pytz.all_timezones_set:
            raise ConfigError(
                f"CALPERIOD_DEFAULT_TZ is not a known time zone: {self.default_timezone!r}. "
                "Use an IANA name such as UTC or Europe/Brussels"
            )

        unknown = [tz_id for tz_id in self.available_timezones if tz_id not in pytz.all_timezones_set]
        if unknown:
            raise ConfigError(f"CALPERIOD_AVAILABLE_TIMEZONES contains unknown zones: {', '.join(unknown)}")

        try:
            Locale.parse(self.default_locale, sep="-" if "-" in self.default_locale else "_")
        except (UnknownLocaleError, ValueError) as exc:
            raise ConfigError(
                f"CALPERIOD_DEFAULT_LOCALE is not a known locale: {self.default_locale!r}"
            ) from exc

    @classmethod
    def from_env(cls, env_file: Path | str | None = None) -> Settings:
        """Load settings from environment.

        Loads from .env file if present, otherwise from os.environ.

        Parameters
        ----------
        env_file
            Path to .env file (default: .env in current directory)

        Returns
        -------
        Settings
            Loaded settings

        Raises
        ------
        ConfigError
            If settings are invalid
        """
        if env_file is None:
            env_file = Path(".env")

        if isinstance(env_file, str):
            env_file = Path(env_file)

        if env_file.exists():
            load_env_file(env_file)

        return cls(
            default_timezone=os.environ.get("CALPERIOD_DEFAULT_TZ", "UTC"),
            default_locale=os.environ.get("CALPERIOD_DEFAULT_LOCALE", "en_US"),
            available_timezones=parse_str_list(os.environ.get("CALPERIOD_AVAILABLE_TIMEZONES", "")),
            log_level=os.environ.get("CALPERIOD_LOG_LEVEL", "INFO"),
            log_file=Path(os.environ["CALPERIOD_LOG_FILE"]) if os.environ.get("CALPERIOD_LOG_FILE") else None,
        )


def load_env_file(env_file: Path) -> None:
    """Load environment variables from .env file.

    Parameters
    ----------
    env_file
        Path to .env file
    """
    with open(env_file) as f:
        for line in f:
            line = line.strip()

            # Skip comments and empty lines
            if not line or line.startswith("#"):
                continue

            if "=" in line:
                key, value = line.split("=", 1)
                key = key.strip()
                value = value.strip()

                if (value.startswith('"') and value.endswith('"')) or (value.startswith("'") and value.endswith("'")):
                    value = value[1:-1]

                os.environ[key] = value


def parse_str_list(value: str) -> list[str]:
    """Parse comma-separated list of identifiers.

    Parameters
    ----------
    value
        Comma-separated identifiers

    Returns
    -------
    list[str]
        Stripped, non-empty identifiers in their original order
    """
    if not value:
        return []

    return [item.strip() for item in value.split(",") if item.strip()]


# Global settings instance
_settings: Settings | None = None
_settings_lock = threading.Lock()


def load_settings(env_file: Path | str | None = None) -> Settings:
    """Load settings from environment and make them current.

    Parameters
    ----------
    env_file
        Path to .env file

    Returns
    -------
    Settings
        Loaded settings

    Raises
    ------
    ConfigError
        If settings are invalid
    """
    global _settings
    settings = Settings.from_env(env_file)
    with _settings_lock:
        _settings = settings
    return settings


def get_settings() -> Settings:
    """Get current settings, loading them from the environment on first use.

    Returns
    -------
    Settings
        Current settings
    """
    global _settings
    if _settings is None:
        with _settings_lock:
            if _settings is None:
                _settings = Settings.from_env()
    return _settings


def reset_settings() -> None:
    """Forget the current settings so the next access reloads them."""
    global _settings
    with _settings_lock:
        _settings = None


def generate_example_env(output_path: Path | None = None) -> str:
    """Generate example .env file with all settings.

    Parameters
    ----------
    output_path
        Optional path to write .env file

    Returns
    -------
    str
        Example .env contents
    """
    example = """# calperiod configuration
# Copy this to .env and adjust values. Every setting is optional.

# ====================
# Calendar defaults
# ====================

# Zone used when a call does not pass one (default: UTC)
# Examples: UTC, America/New_York, Europe/Brussels
CALPERIOD_DEFAULT_TZ=UTC

# Locale used for first day of week, week numbering and names (default: en_US)
CALPERIOD_DEFAULT_LOCALE=en_US

# Comma-separated list restricting available_timezones() (default: all zones)
# CALPERIOD_AVAILABLE_TIMEZONES=UTC,Europe/Brussels,America/New_York

# ====================
# Logging
# ====================

# Log level (optional, default: INFO)
# Options: TRACE, DEBUG, INFO, SUCCESS, WARNING, ERROR, CRITICAL
CALPERIOD_LOG_LEVEL=INFO

# Log file path (optional, logs to console if not set)
# CALPERIOD_LOG_FILE=logs/calperiod.jsonl
"""

    if output_path:
        output_path.write_text(example)

    return example
