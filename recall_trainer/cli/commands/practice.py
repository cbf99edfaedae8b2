"""CLI command for interactive reading practice."""

import asyncio
from collections.abc import Callable

from recall_trainer.config import ConfigManager
from recall_trainer.exceptions import RecallTrainerException, ValidationError
from recall_trainer.models import Phase, Signal
from recall_trainer.orchestration import CommandDispatcher, create_session
from recall_trainer.presenters import ConsolePresenter

RECALL_TERMINATOR = "."


def _read_recall(read_line: Callable[[str], str]) -> str:
    """Read lines until a line holding only the terminator (or EOF)."""
    lines: list[str] = []
    while True:
        try:
            line = read_line("")
        except EOFError:
            break
        if line.strip() == RECALL_TERMINATOR:
            break
        lines.append(line)
    return "\n".join(lines)


def _read_grade(read_line: Callable[[str], str]) -> int:
    while True:
        answer = read_line("Grade your recall (1-5): ").strip()
        if answer.isdigit() and 1 <= int(answer) <= 5:
            return int(answer)
        print("Please enter a number from 1 to 5.")


async def run_practice(
    dispatcher: CommandDispatcher,
    language_code: str | None = None,
    char_limit: int | None = None,
    read_line: Callable[[str], str] = input,
) -> int:
    """Run practice rounds until the user stops.

    Translates terminal input into session signals; all lifecycle logic
    stays in the state machine.

    Args:
        dispatcher: Dispatcher driving the session
        language_code: Wikipedia language code
        char_limit: Maximum article length
        read_line: Line reader, ``input`` by default

    Returns:
        Number of rounds saved to history
    """
    machine = dispatcher.machine
    saved = 0

    while True:
        started = await dispatcher.dispatch(
            Signal.START, language_code=language_code, char_limit=char_limit
        )
        if not started:
            if read_line("Try again? [Y/n] ").strip().lower() in ("n", "no"):
                return saved
            continue

        read_line("\nPress Enter when you are done reading...")
        await dispatcher.dispatch(Signal.DONE_READING)

        print(f"Type what you remember. End with a line containing only '{RECALL_TERMINATOR}'.")
        await dispatcher.dispatch(Signal.FINISH_RECALL, _read_recall(read_line))

        read_line("\nPress Enter to grade yourself...")
        await dispatcher.dispatch(Signal.PROCEED_TO_SCORE)

        while machine.phase == Phase.SCORE and machine.context.grade == 0:
            try:
                await dispatcher.dispatch(Signal.SELECT_GRADE, _read_grade(read_line))
            except ValidationError as e:
                print(f"[WARN] {e}")

        before = len(machine.history)
        await dispatcher.dispatch(Signal.RESTART)
        saved += len(machine.history) - before

        if read_line("\nAnother round? [Y/n] ").strip().lower() in ("n", "no"):
            return saved


def practice_command(args) -> int:
    """Execute the practice subcommand.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 = success, 1 = failure)
    """
    config = ConfigManager.load_config(language_code=args.language, char_limit=args.chars)
    presenter = ConsolePresenter()

    print("Recall Trainer - Speed Reading Practice")
    print("=" * 50)

    try:
        dispatcher = create_session(config, presenter)
        presenter.show_history(dispatcher.machine.history.entries())
        asyncio.run(run_practice(dispatcher, args.language, args.chars))
    except (KeyboardInterrupt, EOFError):
        print("\nBye.")
        return 0
    except RecallTrainerException as e:
        print(f"[ERROR] Error: {e}")
        return 1
    except OSError as e:
        print(f"[ERROR] Unexpected error: {e}")
        return 1

    return 0
