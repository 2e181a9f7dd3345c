"""Centralized configuration using Pydantic Settings.

This module provides a single source of truth for all configuration:
default file locations, output mode and logging.

Configuration can be overridden via environment variables:
- ITIN_DATA_LOOKUP_FILE=/path/to/airport-lookup.csv
- ITIN_DATA_SETTINGS_FILE=/path/to/user_settings.txt
- ITIN_OUTPUT_STYLED=true
- ITIN_LOG_LEVEL=DEBUG
- etc.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class DataConfig(BaseSettings):
    """Input file configuration.

    Environment variables prefixed with ITIN_DATA_.
    """

    model_config = SettingsConfigDict(env_prefix="ITIN_DATA_")

    data_dir: Path = Field(default_factory=Path.cwd)
    input_file: str = "input.txt"
    lookup_file: str = "airport-lookup.csv"
    settings_file: str = "user_settings.txt"
    encoding: str = "utf-8"

    @property
    def input_path(self) -> Path:
        """Full path to the default input document."""
        return self.data_dir / self.input_file

    @property
    def lookup_path(self) -> Path:
        """Full path to the airport lookup CSV file."""
        return self.data_dir / self.lookup_file

    @property
    def settings_path(self) -> Path:
        """Full path to the style settings file."""
        return self.data_dir / self.settings_file


class OutputConfig(BaseSettings):
    """Output mode configuration.

    Environment variables prefixed with ITIN_OUTPUT_.
    """

    model_config = SettingsConfigDict(env_prefix="ITIN_OUTPUT_")

    styled: bool = False


class ObservabilityConfig(BaseSettings):
    """Logging configuration.

    Environment variables prefixed with ITIN_LOG_.
    """

    model_config = SettingsConfigDict(env_prefix="ITIN_LOG_")

    level: str = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    file: str = "app.log"  # Empty string disables the log file


class AppConfig(BaseSettings):
    """Main application configuration aggregating all sub-configs.

    Sub-configurations can be accessed via attributes:

        config = get_config()
        print(config.data.lookup_path)
        print(config.output.styled)

    Environment variables prefixed with ITIN_.
    """

    model_config = SettingsConfigDict(env_prefix="ITIN_")

    data: DataConfig = Field(default_factory=DataConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
    observability: ObservabilityConfig = Field(default_factory=ObservabilityConfig)


@lru_cache(maxsize=1)
def get_config() -> AppConfig:
    """Get the singleton application configuration.

    Configuration is loaded once and cached. To reload configuration
    (e.g., in tests), use reset_config() first.

    Returns:
        The application configuration instance.
    """
    return AppConfig()


def reset_config() -> None:
    """Reset the configuration cache.

    Call this in tests to ensure a fresh configuration is loaded.
    """
    get_config.cache_clear()
