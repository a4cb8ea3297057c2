"""Console entry point for the horse track kiosk."""

import logging
import sys
from typing import Iterable, TextIO

from horsetrack.betting.engine import Kiosk, place_bet, restock, set_winner
from horsetrack.commands import (
    Command,
    InvalidCommand,
    PlaceBet,
    Quit,
    Restock,
    SetWinner,
    parse_command,
)
from horsetrack.config import get_settings
from horsetrack.formatters import format_invalid_command, format_result, format_status

logger = logging.getLogger(__name__)


def configure_logging() -> None:
    """Send logs to stderr so stdout carries only kiosk output."""
    settings = get_settings()
    logging.basicConfig(
        level=settings.effective_log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )


def _write(out: TextIO, lines: list[str]) -> None:
    for line in lines:
        out.write(line + "\n")
    out.flush()


def handle(kiosk: Kiosk, command: Command) -> list[str]:
    """Apply one parsed command and return its report plus status."""
    if isinstance(command, Restock):
        result = restock(kiosk)
    elif isinstance(command, SetWinner):
        result = set_winner(kiosk, command.horse_number)
    elif isinstance(command, PlaceBet):
        result = place_bet(kiosk, command.horse_number, command.amount)
    elif isinstance(command, InvalidCommand):
        logger.debug(f"Invalid command: {command.raw!r}")
        return format_invalid_command(command.raw) + format_status(kiosk)
    else:
        raise TypeError(f"Unhandled command: {command!r}")

    return format_result(result) + format_status(kiosk)


def run(kiosk: Kiosk, lines: Iterable[str], out: TextIO) -> int:
    """Process input lines until Q or end of input.

    Returns the process exit code.
    """
    _write(out, format_status(kiosk))

    for line in lines:
        command = parse_command(line)
        if command is None:
            continue
        if isinstance(command, Quit):
            logger.info("Quit received")
            break
        _write(out, handle(kiosk, command))

    return 0


def main() -> int:
    configure_logging()
    kiosk = Kiosk()
    logger.info(f"Kiosk started with ${kiosk.inventory.total()} in drawer")
    return run(kiosk, sys.stdin, sys.stdout)


if __name__ == "__main__":
    raise SystemExit(main())
