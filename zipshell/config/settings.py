"""
Configuration settings for the application.

Settings come from a TOML file; environment variables (optionally loaded from
a .env file) override individual keys:

    ZIPSHELL_USER - user name shown in the prompt and stamped on log entries
    ZIPSHELL_COMPUTER - host name shown in the prompt
    ZIPSHELL_ARCHIVE_PATH - ZIP archive used as the filesystem
    ZIPSHELL_LOG_PATH - JSON file receiving the session log on exit
    ZIPSHELL_LOG_LEVEL - diagnostic logging level (default: WARNING)
"""

import os
import tomllib
from pathlib import Path
from typing import Any

from dotenv import load_dotenv

from zipshell.exceptions import ConfigurationError

# Load environment variables from .env file
_ = load_dotenv()

ENV_PREFIX = "ZIPSHELL_"

# Older configuration files use the names on the right.
KEY_ALIASES = {
    "archive_path": "zip_path",
    "log_path": "log_file",
}

REQUIRED_KEYS = ("user", "computer", "archive_path", "log_path")


class Settings:
    """Application settings loaded from a TOML file and environment variables."""

    def __init__(
        self,
        user: str,
        computer: str,
        archive_path: str,
        log_path: str,
        log_level: str = "WARNING",
    ):
        self.user: str = user
        self.computer: str = computer
        self.archive_path: str = archive_path
        self.log_path: str = log_path
        self.log_level: str = log_level.upper()

    @classmethod
    def from_file(cls, path: str | Path) -> "Settings":
        """
        Load settings from a TOML file, applying environment overrides.

        Relative archive and log paths are resolved against the directory
        holding the configuration file.

        Args:
            path: Path to the TOML configuration file

        Returns:
            Settings instance

        Raises:
            ConfigurationError: If the file is missing, is not valid TOML, or
                lacks a required string field
        """
        path = Path(path)
        data = cls._load_toml(path)

        values: dict[str, str] = {}
        for key in REQUIRED_KEYS:
            values[key] = cls._get_required(data, key)
        values["log_level"] = cls._get(data, "log_level", "WARNING")

        base = path.parent
        for key in ("archive_path", "log_path"):
            if not os.path.isabs(values[key]):
                values[key] = str(base / values[key])

        return cls(**values)

    @staticmethod
    def _load_toml(path: Path) -> dict[str, Any]:
        """Read and parse the TOML file."""
        if not path.is_file():
            raise ConfigurationError(f"Config file not found: {path}")
        try:
            with open(path, "rb") as f:
                return tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            raise ConfigurationError(f"Invalid TOML in {path}: {str(e)}")
        except OSError as e:
            raise ConfigurationError(f"Cannot read config file {path}: {str(e)}")

    @staticmethod
    def _lookup(data: dict[str, Any], key: str) -> Any:
        """Find a key in the environment first, then in the file (or its alias)."""
        env_value = os.getenv(ENV_PREFIX + key.upper())
        if env_value:
            return env_value
        if key in data:
            return data[key]
        alias = KEY_ALIASES.get(key)
        if alias is not None:
            return data.get(alias)
        return None

    @classmethod
    def _get_required(cls, data: dict[str, Any], key: str) -> str:
        """Get a required setting, raise error if missing or not a string."""
        value = cls._lookup(data, key)
        if value is None or value == "":
            raise ConfigurationError(f"Required setting {key} is not set")
        if not isinstance(value, str):
            raise ConfigurationError(
                f"Setting {key} must be a string, got {type(value).__name__}"
            )
        return value

    @classmethod
    def _get(cls, data: dict[str, Any], key: str, default: str) -> str:
        """Get an optional setting with a default value."""
        value = cls._lookup(data, key)
        if value is None:
            return default
        return str(value)

    def __repr__(self) -> str:
        return (
            f"Settings(user='{self.user}', computer='{self.computer}', "
            f"archive_path='{self.archive_path}', log_path='{self.log_path}')"
        )
