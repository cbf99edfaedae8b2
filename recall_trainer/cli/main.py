"""Main CLI entry point for recall_trainer."""

import argparse
import logging
import sys

from recall_trainer import __version__
from recall_trainer.cli.commands import export, history, practice


def main(argv: list[str] | None = None):
    """Main CLI entry point with subcommands."""
    parser = argparse.ArgumentParser(
        prog="recall-trainer",
        description="Speed reading and recall practice with random Wikipedia articles",
        epilog="Use 'recall-trainer <command> --help' for command-specific help",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # recall-trainer practice
    practice_parser = subparsers.add_parser(
        "practice",
        help="Read, recall and grade random articles",
        description="Interactive reading practice in the terminal",
    )
    practice_parser.add_argument(
        "--language",
        default=None,
        help="Wikipedia language code (default: from config, 'en')",
    )
    practice_parser.add_argument(
        "--chars",
        type=int,
        default=None,
        help="Maximum article length in characters (default: from config, 1200)",
    )

    # recall-trainer history
    subparsers.add_parser(
        "history",
        help="Show past sessions",
        description="List every recorded reading session",
    )

    # recall-trainer export
    export_parser = subparsers.add_parser(
        "export",
        help="Export history as CSV",
        description="Write the session history to a CSV file",
    )
    export_parser.add_argument(
        "--output",
        default=None,
        help="Output file (default: speed_reading_progress.csv)",
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    # Dispatch to appropriate command
    if args.command == "practice":
        return practice.practice_command(args)
    elif args.command == "history":
        return history.history_command(args)
    elif args.command == "export":
        return export.export_command(args)
    else:
        parser.print_help()
        return 1


if __name__ == "__main__":
    sys.exit(main())
