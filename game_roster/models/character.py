# game_roster/models/character.py
from typing import Any, Optional

from pydantic import BaseModel, field_validator, model_validator

CHARACTER_TYPES = ("Bowman", "Swordsman", "Magician", "Daemon", "Undead", "Zombie")

# (attack, defence) per character type
BASE_STATS = {
    "Bowman": (25, 25),
    "Swordsman": (40, 10),
    "Magician": (10, 40),
    "Daemon": (10, 40),
    "Undead": (40, 10),
    "Zombie": (40, 10),
}

DEFAULT_HEALTH = 100
DEFAULT_LEVEL = 1
MIN_NAME_LENGTH = 2
MAX_NAME_LENGTH = 10


class Character(BaseModel):
    name: str  # Display name, 2-10 characters
    type: str  # One of CHARACTER_TYPES
    health: int = DEFAULT_HEALTH  # Hit points, 0 means dead
    level: int = DEFAULT_LEVEL  # Experience level, starts at 1

    attack: Optional[int] = None  # Filled in from BASE_STATS when omitted
    defence: Optional[int] = None  # Filled in from BASE_STATS when omitted

    @field_validator("name")
    @classmethod
    def check_name(cls, value: str) -> str:
        if not MIN_NAME_LENGTH <= len(value) <= MAX_NAME_LENGTH:
            raise ValueError(
                f"name must be {MIN_NAME_LENGTH} to {MAX_NAME_LENGTH} characters long"
            )
        return value

    @field_validator("type")
    @classmethod
    def check_type(cls, value: str) -> str:
        if value not in CHARACTER_TYPES:
            raise ValueError(f"type must be one of {', '.join(CHARACTER_TYPES)}")
        return value

    @model_validator(mode="after")
    def fill_base_stats(self) -> "Character":
        attack, defence = BASE_STATS[self.type]
        if self.attack is None:
            self.attack = attack
        if self.defence is None:
            self.defence = defence
        return self


def is_character(value: Any) -> bool:
    """Return True if value can be a team member."""
    return isinstance(value, Character)
