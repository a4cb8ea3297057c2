"""Kiosk domain models: bill inventory and horse roster."""

from horsetrack.models.errors import InvalidHorseNumber, InventoryError, UnknownDenomination
from horsetrack.models.inventory import DENOMINATIONS, RESTOCK_QUANTITY, Bill, Inventory
from horsetrack.models.roster import DEFAULT_HORSES, Horse, Roster

__all__ = [
    "DENOMINATIONS",
    "DEFAULT_HORSES",
    "RESTOCK_QUANTITY",
    "Bill",
    "Horse",
    "Inventory",
    "InventoryError",
    "InvalidHorseNumber",
    "Roster",
    "UnknownDenomination",
]
