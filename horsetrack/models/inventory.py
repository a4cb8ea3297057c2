"""Cash drawer: bill counts per denomination."""

import logging
from dataclasses import dataclass
from typing import Iterator

from horsetrack.models.errors import InventoryError, UnknownDenomination

logger = logging.getLogger(__name__)

# Ascending face values stocked by the kiosk
DENOMINATIONS = (1, 5, 10, 20, 100)

# Bills per denomination at startup and after a restock
RESTOCK_QUANTITY = 10


@dataclass
class Bill:
    """One denomination slot in the drawer."""

    denomination: int
    quantity: int


class Inventory:
    """Bill counts keyed by denomination.

    The denomination set never changes; only quantities move, via
    ``restock()`` and ``debit()``.
    """

    def __init__(self, quantity: int = RESTOCK_QUANTITY):
        self._bills: dict[int, Bill] = {d: Bill(d, quantity) for d in DENOMINATIONS}

    def _bill(self, denomination: int) -> Bill:
        try:
            return self._bills[denomination]
        except KeyError:
            raise UnknownDenomination(denomination) from None

    def restock(self) -> None:
        """Reset every denomination to the restock level."""
        for bill in self._bills.values():
            bill.quantity = RESTOCK_QUANTITY
        logger.info(f"Inventory restocked to {RESTOCK_QUANTITY} bills each (${self.total()})")

    def quantity_of(self, denomination: int) -> int:
        return self._bill(denomination).quantity

    def debit(self, denomination: int, count: int) -> None:
        """Remove ``count`` bills of one denomination.

        The payout planner never proposes more than is available, so an
        overdraw here is a bug rather than a customer-facing condition.
        """
        bill = self._bill(denomination)
        if count < 0 or count > bill.quantity:
            raise InventoryError(
                f"Cannot debit {count} x ${denomination}: only {bill.quantity} in drawer"
            )
        bill.quantity -= count

    def bills(self) -> Iterator[Bill]:
        """Bills in ascending denomination order."""
        for denomination in DENOMINATIONS:
            yield self._bills[denomination]

    def snapshot(self) -> dict[int, int]:
        return {bill.denomination: bill.quantity for bill in self.bills()}

    def total(self) -> int:
        """Cash value held across all denominations."""
        return sum(bill.denomination * bill.quantity for bill in self.bills())
