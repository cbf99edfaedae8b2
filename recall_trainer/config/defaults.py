"""Default configuration values for Recall Trainer."""

from .config import RecallTrainerConfig


def create_default_config(**overrides) -> RecallTrainerConfig:
    """Create a default configuration with optional overrides.

    Args:
        **overrides: Keyword arguments to override default values

    Returns:
        RecallTrainerConfig with defaults and overrides applied

    Example:
        config = create_default_config(
            language_code="de",
            char_limit=2000
        )
    """
    return RecallTrainerConfig(**overrides)
