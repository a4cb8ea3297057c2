"""Greedy bill selection for paying out winnings.

Takes the largest denomination first, as many bills as the amount and the
drawer allow, then moves down. This is not an optimal change-making search:
limited stock of a large bill can make it fail where another combination
would succeed, and the dispensing report depends on the greedy breakdown.
"""

from typing import Optional

from horsetrack.models.inventory import DENOMINATIONS, Inventory

# Largest first
PAYOUT_ORDER = tuple(sorted(DENOMINATIONS, reverse=True))


def plan_payout(amount: int, inventory: Inventory) -> Optional[dict[int, int]]:
    """Work out which bills to dispense for ``amount``.

    Args:
        amount: Whole-dollar winnings to pay
        inventory: Drawer to draw from (read only)

    Returns:
        Mapping of denomination -> bill count, omitting unused
        denominations, or None when the drawer cannot cover the amount.
    """
    plan: dict[int, int] = {}
    remaining = amount

    for denomination in PAYOUT_ORDER:
        needed = remaining // denomination
        used = min(needed, inventory.quantity_of(denomination))
        if used > 0:
            plan[denomination] = used
            remaining -= used * denomination

    if remaining > 0:
        return None
    return plan


def dispense(plan: dict[int, int], inventory: Inventory) -> None:
    """Debit the drawer for every bill in a plan."""
    for denomination, count in plan.items():
        inventory.debit(denomination, count)
