"""Configuration classes for Recall Trainer."""

from dataclasses import dataclass, field
from pathlib import Path


@dataclass(frozen=True)
class RecallTrainerConfig:
    """Immutable configuration for reading practice sessions.

    Frozen so that a running session never sees its settings change
    underneath it.
    """

    # Article settings
    language_code: str = "en"
    char_limit: int = 1200  # Extract length requested from the API
    api_url_template: str = "https://{language}.wikipedia.org/w/api.php"

    # Network settings
    max_attempts: int = 3
    backoff_base: float = 0.5  # Seconds, doubled after every failed attempt
    request_timeout: float = 10.0
    user_agent: str = "RecallTrainer/1.0 (speed reading practice)"

    # History settings
    history_db_path: Path = field(
        default_factory=lambda: Path.home() / ".recall_trainer" / "history.db"
    )
    history_key: str = "readingSessionHistory"

    # Export settings
    export_filename: str = "speed_reading_progress.csv"

    def __post_init__(self):
        """Convert string paths to Path objects if needed."""
        if isinstance(self.history_db_path, str):
            object.__setattr__(self, "history_db_path", Path(self.history_db_path))

    def api_url(self, language_code: str | None = None) -> str:
        """Build the API endpoint for a language.

        Args:
            language_code: Wikipedia language code, defaults to the configured one

        Returns:
            Endpoint URL
        """
        return self.api_url_template.format(language=language_code or self.language_code)
