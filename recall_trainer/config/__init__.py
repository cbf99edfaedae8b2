"""Configuration management for Recall Trainer."""

from .config import RecallTrainerConfig
from .defaults import create_default_config
from .manager import ConfigManager

__all__ = ["RecallTrainerConfig", "create_default_config", "ConfigManager"]
