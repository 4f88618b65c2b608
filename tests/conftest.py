"""
Shared fixtures for team and character tests.
"""

import pytest

from game_roster.models.character import Character
from game_roster.models.team import Team


@pytest.fixture
def team() -> Team:
    return Team()


@pytest.fixture
def bowman() -> Character:
    return Character(name="Legolas", type="Bowman")


@pytest.fixture
def swordsman() -> Character:
    return Character(name="Aragorn", type="Swordsman")


@pytest.fixture
def magician() -> Character:
    return Character(name="Gandalf", type="Magician")
