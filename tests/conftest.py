"""Shared test fixtures for the horse track kiosk."""

import io

import pytest

from horsetrack.betting.engine import Kiosk
from horsetrack.config import get_settings
from horsetrack.main import run
from horsetrack.models import Inventory, Roster


FRESH_STATUS = [
    "Inventory:",
    "$1,10",
    "$5,10",
    "$10,10",
    "$20,10",
    "$100,10",
    "Horses:",
    "1,That Darn Gray Cat,5,won",
    "2,Fort Utopia,10,lost",
    "3,Count Sheep,9,lost",
    "4,Ms Traitour,4,lost",
    "5,Real Princess,3,lost",
    "6,Pa Kettle,5,lost",
    "7,Gin Stinger,6,lost",
]


@pytest.fixture(autouse=True)
def _fresh_settings():
    """Drop cached settings so env overrides don't leak between tests."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def inventory() -> Inventory:
    return Inventory()


@pytest.fixture
def roster() -> Roster:
    return Roster()


@pytest.fixture
def kiosk() -> Kiosk:
    """Fresh machine: ten of every bill, horse 1 winning."""
    return Kiosk()


@pytest.fixture
def fresh_status() -> list[str]:
    return list(FRESH_STATUS)


@pytest.fixture
def run_session(kiosk):
    """Run scripted input through the command loop, returning output lines."""

    def _run(*lines: str) -> list[str]:
        out = io.StringIO()
        exit_code = run(kiosk, [line + "\n" for line in lines], out)
        assert exit_code == 0
        return out.getvalue().splitlines()

    return _run
