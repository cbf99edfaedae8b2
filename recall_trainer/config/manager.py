"""Configuration persistence manager."""

import json
import logging
from dataclasses import asdict
from pathlib import Path
from typing import Any

from .config import RecallTrainerConfig
from .defaults import create_default_config

logger = logging.getLogger(__name__)


class ConfigManager:
    """Manager for configuration persistence.

    Saves and loads user configuration to/from a JSON file stored in the
    user's home directory. Falls back to the default configuration if the
    file doesn't exist or is invalid.
    """

    CONFIG_FILE = Path.home() / ".recall_trainer" / "config.json"

    @classmethod
    def save_config(cls, config: RecallTrainerConfig) -> None:
        """Save configuration to JSON file.

        Args:
            config: Configuration to save

        Raises:
            OSError: If unable to create directory or write file
        """
        cls.CONFIG_FILE.parent.mkdir(parents=True, exist_ok=True)

        config_dict = cls._paths_to_strings(asdict(config))

        with cls.CONFIG_FILE.open("w", encoding="utf-8") as f:
            json.dump(config_dict, f, indent=2, ensure_ascii=False)

    @classmethod
    def load_config(cls, **overrides) -> RecallTrainerConfig:
        """Load configuration from JSON file.

        Args:
            **overrides: Values that take precedence over the stored ones

        Returns:
            Loaded configuration, or default configuration if file doesn't exist

        Note:
            If the file exists but is invalid, falls back to default configuration
            and logs a warning.
        """
        overrides = {key: value for key, value in overrides.items() if value is not None}

        if not cls.CONFIG_FILE.exists():
            return create_default_config(**overrides)

        try:
            with cls.CONFIG_FILE.open("r", encoding="utf-8") as f:
                config_dict = json.load(f)

            if not isinstance(config_dict, dict):
                raise TypeError("config root must be an object")

            config_dict.update(overrides)
            return RecallTrainerConfig(**config_dict)

        except (json.JSONDecodeError, TypeError, ValueError) as e:
            logger.warning(f"Invalid config file, using defaults: {e}")
            return create_default_config(**overrides)

    @classmethod
    def config_exists(cls) -> bool:
        """Check if configuration file exists."""
        return cls.CONFIG_FILE.exists()

    @classmethod
    def delete_config(cls) -> None:
        """Delete the configuration file."""
        if cls.CONFIG_FILE.exists():
            cls.CONFIG_FILE.unlink()

    @staticmethod
    def _paths_to_strings(data: dict[str, Any]) -> dict[str, Any]:
        """Convert Path values to strings so the dict is JSON serializable."""
        return {key: str(value) if isinstance(value, Path) else value for key, value in data.items()}
