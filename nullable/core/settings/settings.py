"""
This module defines the settings for the nullable package.

Settings are read from the environment and from an optional `.env` file via
pydantic-settings. They currently govern how logging is configured.
"""

from pathlib import Path

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LOG_LEVELS = ("critical", "error", "warning", "info", "debug")


class AppSettings(BaseSettings):
    PRODUCTION: bool = False

    TESTING: bool = False

    LOG_CONFIG_OVERRIDE: Path | None = None
    """ path to custom logging configuration file"""

    LOG_LEVEL: str = "info"
    """ corresponds to standard Python Log levels """

    model_config = SettingsConfigDict(extra="ignore")

    @field_validator("LOG_LEVEL")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        v = v.strip().lower()
        if v not in LOG_LEVELS:
            raise ValueError(f"LOG_LEVEL must be one of {', '.join(LOG_LEVELS)}")
        return v

    @property
    def LOG_MODE(self) -> str:
        """The logging configuration to load: testing, production or development"""
        if self.TESTING:
            return "testing"
        if self.PRODUCTION:
            return "production"
        return "development"


def app_settings_constructor(
    production: bool,
    testing: bool,
    env_file: Path,
    env_encoding: str = "utf-8",
) -> AppSettings:
    """
    Factory function to create the `AppSettings` object.

    Args:
        production (bool): Flag indicating if in production mode.
        testing (bool): Flag indicating if running under the test suite.
        env_file (Path): Path to the .env file.
        env_encoding (str): Encoding for the .env file.

    Returns:
        AppSettings: The configured settings object.
    """
    return AppSettings(
        _env_file=env_file,  # type: ignore # pydantic-settings internal
        _env_file_encoding=env_encoding,  # type: ignore
        PRODUCTION=production,
        TESTING=testing,
    )
