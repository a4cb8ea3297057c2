"""Betting engine: validates bets, pays winners, manages the winner flag.

Every operation takes the ``Kiosk`` that owns the drawer and roster and
returns a ``BetResult``. Customer mistakes and losing tickets are outcomes,
not exceptions; the caller renders the result and then the status display
regardless of which outcome came back.

Bet flow:
    horse exists -> amount is a positive whole number -> horse is the winner
    -> winnings = floor(amount * odds) -> greedy payout plan -> dispense
"""

import logging
import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Union

from horsetrack.betting.payout import PAYOUT_ORDER, dispense, plan_payout
from horsetrack.models import Horse, Inventory, InvalidHorseNumber, Roster

logger = logging.getLogger(__name__)

Amount = Union[int, float]


class Outcome(str, Enum):
    """What happened to a command."""

    PAYOUT = "payout"
    NO_PAYOUT = "no_payout"
    INSUFFICIENT_FUNDS = "insufficient_funds"
    INVALID_HORSE = "invalid_horse"
    INVALID_BET = "invalid_bet"
    WINNER_SET = "winner_set"
    RESTOCKED = "restocked"


@dataclass
class Kiosk:
    """Machine state: the cash drawer and the field."""

    inventory: Inventory = field(default_factory=Inventory)
    roster: Roster = field(default_factory=Roster)


@dataclass
class BetResult:
    """Tagged result of one engine operation."""

    outcome: Outcome
    horse: Optional[Horse] = None
    horse_number: Optional[int] = None
    amount: Optional[Amount] = None
    winnings: Optional[int] = None
    plan: dict[int, int] = field(default_factory=dict)

    @property
    def dispensed(self) -> list[tuple[int, int]]:
        """(denomination, count) largest first, unused bills as zero."""
        return [(d, self.plan.get(d, 0)) for d in PAYOUT_ORDER]


def is_valid_amount(amount: Amount) -> bool:
    """Positive, finite and whole."""
    if isinstance(amount, bool):
        return False
    if isinstance(amount, int):
        return amount > 0
    return math.isfinite(amount) and amount.is_integer() and amount > 0


def calculate_winnings(amount: Amount, odds: int) -> Optional[int]:
    """Winnings truncated to whole dollars.

    Returns None when a float bet times the odds overflows to infinity;
    no drawer can cover that, so the caller reports insufficient funds.
    """
    product = amount * odds
    if isinstance(product, float) and not math.isfinite(product):
        return None
    return math.floor(product)


def place_bet(kiosk: Kiosk, horse_number: int, amount: Amount) -> BetResult:
    """Settle a bet against the current winner.

    The drawer is only touched once a complete payout plan exists, so any
    non-PAYOUT outcome leaves the inventory exactly as it was.
    """
    horse = kiosk.roster.lookup(horse_number)
    if horse is None:
        logger.debug(f"Bet rejected: no horse #{horse_number}")
        return BetResult(Outcome.INVALID_HORSE, horse_number=horse_number, amount=amount)

    if not is_valid_amount(amount):
        logger.debug(f"Bet rejected: invalid amount {amount!r} on #{horse_number}")
        return BetResult(Outcome.INVALID_BET, horse=horse, horse_number=horse_number, amount=amount)

    if not horse.is_winner:
        logger.debug(f"No payout: #{horse_number} {horse.name} did not win")
        return BetResult(Outcome.NO_PAYOUT, horse=horse, horse_number=horse_number, amount=amount)

    winnings = calculate_winnings(amount, horse.odds)
    plan = None if winnings is None else plan_payout(winnings, kiosk.inventory)
    if plan is None:
        logger.warning(
            f"Insufficient funds on #{horse_number}: ${amount} x {horse.odds} "
            f"(drawer holds ${kiosk.inventory.total()})"
        )
        return BetResult(
            Outcome.INSUFFICIENT_FUNDS,
            horse=horse,
            horse_number=horse_number,
            amount=amount,
            winnings=winnings,
        )

    dispense(plan, kiosk.inventory)
    logger.info(f"Paid ${winnings} on #{horse_number} {horse.name}: {plan}")
    return BetResult(
        Outcome.PAYOUT,
        horse=horse,
        horse_number=horse_number,
        amount=amount,
        winnings=winnings,
        plan=plan,
    )


def set_winner(kiosk: Kiosk, horse_number: int) -> BetResult:
    """Change the winning horse; unknown numbers leave the roster alone."""
    previous = kiosk.roster.winner
    try:
        horse = kiosk.roster.set_winner(horse_number)
    except InvalidHorseNumber:
        kept = previous.name if previous else "none"
        logger.debug(f"Winner unchanged ({kept}): no horse #{horse_number}")
        return BetResult(Outcome.INVALID_HORSE, horse_number=horse_number)
    if previous is not None and previous is not horse:
        logger.info(f"Winner moved from #{previous.number} {previous.name} to #{horse.number}")
    return BetResult(Outcome.WINNER_SET, horse=horse, horse_number=horse_number)


def restock(kiosk: Kiosk) -> BetResult:
    kiosk.inventory.restock()
    return BetResult(Outcome.RESTOCKED)
