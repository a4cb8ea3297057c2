"""Parse kiosk input lines into commands.

Recognised forms (after trimming):
    R            restock the drawer
    Q            quit
    W <n>        set the winning horse
    <n> <amount> place a bet

Anything else parses to ``InvalidCommand`` carrying the trimmed line.
Blank lines parse to None and are skipped by the loop.
"""

import re
from dataclasses import dataclass
from typing import Optional, Union

_INT_RE = re.compile(r"^[+-]?\d+$", re.ASCII)
_DECIMAL_RE = re.compile(r"^[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?$", re.ASCII)

# Horse numbers are 32-bit signed integers; anything wider is malformed
INT_MIN = -(2**31)
INT_MAX = 2**31 - 1


@dataclass(frozen=True)
class Restock:
    pass


@dataclass(frozen=True)
class Quit:
    pass


@dataclass(frozen=True)
class SetWinner:
    horse_number: int


@dataclass(frozen=True)
class PlaceBet:
    horse_number: int
    amount: Union[int, float]


@dataclass(frozen=True)
class InvalidCommand:
    raw: str


Command = Union[Restock, Quit, SetWinner, PlaceBet, InvalidCommand]


def parse_int(token: str) -> Optional[int]:
    if _INT_RE.match(token):
        value = int(token)
        if INT_MIN <= value <= INT_MAX:
            return value
    return None


def parse_amount(token: str) -> Optional[Union[int, float]]:
    """Whole-number tokens stay int; other decimals become float."""
    if _INT_RE.match(token):
        return int(token)
    if _DECIMAL_RE.match(token):
        return float(token)
    return None


def parse_command(line: str) -> Optional[Command]:
    """Turn one input line into a command (None for blank lines)."""
    raw = line.strip()
    if not raw:
        return None

    lowered = raw.lower()
    if lowered == "r":
        return Restock()
    if lowered == "q":
        return Quit()

    parts = raw.split()

    if lowered.startswith("w"):
        if len(parts) == 2:
            number = parse_int(parts[1])
            if number is not None:
                return SetWinner(number)
        return InvalidCommand(raw)

    if len(parts) == 2:
        number = parse_int(parts[0])
        amount = parse_amount(parts[1])
        if number is not None and amount is not None:
            return PlaceBet(number, amount)

    return InvalidCommand(raw)
