"""Errors raised by the kiosk models."""


class UnknownDenomination(KeyError):
    """Denomination is not one the kiosk stocks."""


class InvalidHorseNumber(ValueError):
    """No horse on the roster carries this number."""

    def __init__(self, number: int):
        super().__init__(f"Invalid Horse Number: {number}")
        self.number = number


class InventoryError(RuntimeError):
    """A debit asked for more bills than are in the drawer."""
