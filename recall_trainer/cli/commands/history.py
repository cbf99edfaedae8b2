"""CLI command for listing past sessions."""

from recall_trainer.config import ConfigManager
from recall_trainer.orchestration.factory import create_history_service
from recall_trainer.presenters import ConsolePresenter


def history_command(args) -> int:
    """Execute the history subcommand.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 = success, 1 = failure)
    """
    config = ConfigManager.load_config()
    presenter = ConsolePresenter()

    try:
        history = create_history_service(config)
    except OSError as e:
        presenter.show_status(f"Could not open history: {e}")
        return 1

    presenter.show_history(history.entries())
    return 0
