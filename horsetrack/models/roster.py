"""Horse roster with a single winner flag."""

import logging
from dataclasses import dataclass
from typing import Optional

from horsetrack.models.errors import InvalidHorseNumber

logger = logging.getLogger(__name__)

# (number, name, odds) for the track's fixed field
DEFAULT_HORSES = (
    (1, "That Darn Gray Cat", 5),
    (2, "Fort Utopia", 10),
    (3, "Count Sheep", 9),
    (4, "Ms Traitour", 4),
    (5, "Real Princess", 3),
    (6, "Pa Kettle", 5),
    (7, "Gin Stinger", 6),
)

DEFAULT_WINNER = 1


@dataclass
class Horse:
    """A runner. Only ``is_winner`` changes after startup."""

    number: int
    name: str
    odds: int
    is_winner: bool = False


class Roster:
    """Fixed field of horses, ordered by number."""

    def __init__(
        self,
        horses: tuple = DEFAULT_HORSES,
        winner: Optional[int] = DEFAULT_WINNER,
    ):
        self._horses = sorted(
            (Horse(number, name, odds) for number, name, odds in horses),
            key=lambda h: h.number,
        )
        self.winning_number: Optional[int] = None
        if winner is not None:
            self.set_winner(winner)

    def lookup(self, number: int) -> Optional[Horse]:
        """Find a horse by number (numbers may have gaps)."""
        for horse in self._horses:
            if horse.number == number:
                return horse
        return None

    def all(self) -> list[Horse]:
        return list(self._horses)

    @property
    def winner(self) -> Optional[Horse]:
        if self.winning_number is None:
            return None
        return self.lookup(self.winning_number)

    def set_winner(self, number: int) -> Horse:
        """Make ``number`` the only winner.

        Raises InvalidHorseNumber and leaves the flags untouched when no
        horse carries that number.
        """
        horse = self.lookup(number)
        if horse is None:
            raise InvalidHorseNumber(number)

        for h in self._horses:
            h.is_winner = h is horse
        self.winning_number = number
        logger.info(f"Winner set to #{number} {horse.name}")
        return horse
