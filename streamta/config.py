# streamta/config.py
"""
Configuration management for the streamta library.

Settings are loaded from environment variables or a .env file.

Optional environment variables:
    LOG_LEVEL                  - Logging level (default: INFO)
    STREAMTA_INDICATOR_CONFIG  - YAML file listing the indicators to run
    STREAMTA_CSV_DELIMITER     - Field delimiter for CSV input (default: ",")

Example .env file:
    LOG_LEVEL=DEBUG
    STREAMTA_INDICATOR_CONFIG=indicators.yaml

Example indicators.yaml:
    indicators:
      - ema
      - name: atr
        period: 14
      - name: bb
        period: 20
        multiplier: 2.0
"""

import logging
import os
from dataclasses import dataclass
from pathlib import Path

import yaml
from dotenv import load_dotenv

cwd_env = Path.cwd() / ".env"
if cwd_env.exists():
    load_dotenv(dotenv_path=cwd_env)
else:
    # Fallback to standard behavior (searches parents)
    load_dotenv()

log = logging.getLogger(__name__)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class Settings:
    """
    Global settings for the streamta library.

    Values are loaded from environment variables on initialization.
    Users can override these programmatically if needed:

        from streamta.config import settings
        settings.log_level = "DEBUG"
    """

    log_level: str = "INFO"
    indicator_config: str | None = None
    csv_delimiter: str = ","

    def __post_init__(self):
        """
        Refresh values from environment after load_dotenv has run.
        This allows the global 'settings' instance to be populated correctly.
        """
        self.log_level = os.getenv("LOG_LEVEL", self.log_level)
        self.indicator_config = os.getenv("STREAMTA_INDICATOR_CONFIG", self.indicator_config)
        self.csv_delimiter = os.getenv("STREAMTA_CSV_DELIMITER", self.csv_delimiter)

    def validate(self) -> None:
        """
        Validate settings.

        Raises:
            ValueError: If a setting is invalid
        """
        if self.log_level.upper() not in LOG_LEVELS:
            raise ValueError(
                f"LOG_LEVEL must be one of {', '.join(LOG_LEVELS)}, got '{self.log_level}'"
            )

        if len(self.csv_delimiter) != 1:
            raise ValueError(
                f"STREAMTA_CSV_DELIMITER must be a single character, got '{self.csv_delimiter}'"
            )


def load_indicator_config(config_path: str | Path) -> dict:
    """
    Load an indicator set from a YAML file.

    Args:
        config_path: Path to YAML config file

    Returns:
        Dictionary containing configuration
    """
    config_file = Path(config_path)
    if not config_file.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    try:
        with open(config_file) as f:
            config = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML in {config_path}: {e}") from e

    if config is None:
        raise ValueError(f"Empty config file: {config_path}")
    if not isinstance(config, dict):
        raise ValueError(f"Config file must contain a mapping: {config_path}")

    log.debug("Loaded indicator config from %s", config_file)
    return config


# Global settings instance - loaded when module is imported
settings = Settings()
