"""Bet settlement and payout planning."""

from horsetrack.betting.engine import BetResult, Kiosk, Outcome, place_bet, restock, set_winner
from horsetrack.betting.payout import PAYOUT_ORDER, plan_payout

__all__ = [
    "BetResult",
    "Kiosk",
    "Outcome",
    "PAYOUT_ORDER",
    "place_bet",
    "plan_payout",
    "restock",
    "set_winner",
]
