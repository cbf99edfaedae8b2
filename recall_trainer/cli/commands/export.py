"""CLI command for exporting the session history."""

from pathlib import Path

from recall_trainer.config import ConfigManager
from recall_trainer.orchestration.factory import create_history_service
from recall_trainer.services import ExportService


def export_command(args) -> int:
    """Execute the export subcommand.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 = success, 1 = failure)
    """
    config = ConfigManager.load_config()
    output_path = Path(args.output) if args.output else Path(config.export_filename)

    try:
        history = create_history_service(config)
        rows = ExportService(config).export_csv(history.all(), output_path)
    except OSError as e:
        print(f"[ERROR] Export failed: {e}")
        return 1

    if rows == 0:
        print("[INFO] No sessions recorded yet, nothing exported")
        return 0

    print(f"[OK] Exported {rows} sessions to {output_path}")
    return 0
