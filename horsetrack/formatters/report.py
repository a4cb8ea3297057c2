"""Plain-text reports for the kiosk console.

The output is line oriented and stable so sessions can be scripted and
diffed. Every function returns a list of lines without trailing newlines.
"""

from horsetrack.betting.engine import BetResult, Kiosk, Outcome


def format_amount(amount) -> str:
    """Render a bet amount as a decimal (0.0, -5.0, 10.5)."""
    if isinstance(amount, int):
        return f"{amount}.0"
    return repr(float(amount))


def format_winnings(winnings) -> str:
    """Whole-dollar winnings; None means the bet overflowed."""
    if winnings is None:
        return "inf"
    return str(winnings)


def format_status(kiosk: Kiosk) -> list[str]:
    """Inventory (ascending bills) followed by the field."""
    lines = ["Inventory:"]
    for bill in kiosk.inventory.bills():
        lines.append(f"${bill.denomination},{bill.quantity}")

    lines.append("Horses:")
    for horse in kiosk.roster.all():
        result = "won" if horse.is_winner else "lost"
        lines.append(f"{horse.number},{horse.name},{horse.odds},{result}")
    return lines


def format_payout(result: BetResult) -> list[str]:
    lines = [
        f"Payout: {result.horse.name},${result.winnings}",
        "Dispensing:",
    ]
    for denomination, count in result.dispensed:
        lines.append(f"${denomination},{count}")
    return lines


def format_result(result: BetResult) -> list[str]:
    """Report lines for an engine result (status not included)."""
    if result.outcome == Outcome.PAYOUT:
        return format_payout(result)
    if result.outcome == Outcome.NO_PAYOUT:
        return [f"No Payout: {result.horse.name}"]
    if result.outcome == Outcome.INSUFFICIENT_FUNDS:
        return [f"Insufficient Funds: {format_winnings(result.winnings)}"]
    if result.outcome == Outcome.INVALID_HORSE:
        return [f"Invalid Horse Number: {result.horse_number}"]
    if result.outcome == Outcome.INVALID_BET:
        return [f"Invalid Bet: {format_amount(result.amount)}"]
    # Restock and winner changes only show the status
    return []


def format_invalid_command(raw: str) -> list[str]:
    return [f"Invalid Command: {raw}"]
