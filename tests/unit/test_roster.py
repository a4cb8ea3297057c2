"""Tests for the horse roster and winner flag."""

import pytest

from horsetrack.models import InvalidHorseNumber, Roster


def _winners(roster: Roster) -> list[int]:
    return [h.number for h in roster.all() if h.is_winner]


class TestDefaultRoster:
    def test_seven_horses_in_order(self, roster):
        assert [h.number for h in roster.all()] == [1, 2, 3, 4, 5, 6, 7]

    def test_names_and_odds(self, roster):
        assert [(h.name, h.odds) for h in roster.all()] == [
            ("That Darn Gray Cat", 5),
            ("Fort Utopia", 10),
            ("Count Sheep", 9),
            ("Ms Traitour", 4),
            ("Real Princess", 3),
            ("Pa Kettle", 5),
            ("Gin Stinger", 6),
        ]

    def test_horse_one_wins_by_default(self, roster):
        assert _winners(roster) == [1]
        assert roster.winning_number == 1
        assert roster.winner.name == "That Darn Gray Cat"

    def test_no_default_winner(self):
        roster = Roster(winner=None)
        assert _winners(roster) == []
        assert roster.winner is None


class TestSetWinner:
    def test_exactly_one_winner(self, roster):
        roster.set_winner(3)
        assert _winners(roster) == [3]
        assert roster.winning_number == 3

    def test_every_valid_number(self, roster):
        for number in range(1, 8):
            roster.set_winner(number)
            assert _winners(roster) == [number]

    def test_returns_horse(self, roster):
        assert roster.set_winner(2).name == "Fort Utopia"

    @pytest.mark.parametrize("number", [0, 8, 9, -1])
    def test_invalid_number_keeps_previous_winner(self, roster, number):
        roster.set_winner(4)
        with pytest.raises(InvalidHorseNumber) as exc:
            roster.set_winner(number)
        assert exc.value.number == number
        assert _winners(roster) == [4]
        assert roster.winning_number == 4


class TestLookup:
    def test_found(self, roster):
        assert roster.lookup(7).name == "Gin Stinger"

    def test_not_found(self, roster):
        assert roster.lookup(8) is None

    def test_gapped_numbers(self):
        """Lookup matches by number, not position."""
        roster = Roster(horses=((10, "Ten", 2), (3, "Three", 4)), winner=10)
        assert [h.number for h in roster.all()] == [3, 10]
        assert roster.lookup(10).name == "Ten"
        assert roster.lookup(2) is None
        with pytest.raises(InvalidHorseNumber):
            roster.set_winner(2)

    def test_all_returns_copy(self, roster):
        horses = roster.all()
        horses.clear()
        assert len(roster.all()) == 7
