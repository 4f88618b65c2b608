# game_roster/models/team.py
import logging
from typing import Any, Dict, Iterator, List, ValuesView

from game_roster.errors import DuplicateMemberError, InvalidTypeError, NotFoundError
from game_roster.models.character import Character, is_character

logger = logging.getLogger(__name__)


class Team:
    """A set of Character references.

    Membership is by object identity: adding the same Character twice is a
    duplicate, while two distinct Characters with equal fields are both kept.
    Characters are shared, never copied, so one Character may sit on several
    teams at once.
    """

    def __init__(self):
        # id(character) -> character, insertion ordered
        self._members: Dict[int, Character] = {}

    @property
    def members(self) -> ValuesView[Character]:
        """Live read-only view of the members.

        The view follows later add/remove/clear calls but cannot be used to
        change the team, so every mutation still goes through validation.
        Use to_list() for a snapshot.
        """
        return self._members.values()

    def add(self, character: Character) -> None:
        """Add one character.

        Raises:
            InvalidTypeError: if character is not a Character
            DuplicateMemberError: if character is already on the team
        """
        self._check_character(character)
        if id(character) in self._members:
            raise DuplicateMemberError("Character is already in the team", character)

        self._members[id(character)] = character
        logger.debug("Added %s to team (%d members)", character.name, len(self))

    def add_all(self, *characters: Any) -> None:
        """Add every Character given, skipping anything else.

        Duplicates are absorbed and nothing is raised.
        """
        for character in characters:
            if not is_character(character):
                logger.debug("Skipping non-Character value %r", character)
                continue
            self._members.setdefault(id(character), character)
        logger.debug("Bulk add done (%d members)", len(self))

    def remove(self, character: Character) -> None:
        """Remove one character.

        Raises:
            InvalidTypeError: if character is not a Character
            NotFoundError: if character is not on the team
        """
        self._check_character(character)
        if id(character) not in self._members:
            raise NotFoundError("Character is not in the team", character)

        del self._members[id(character)]
        logger.debug("Removed %s from team (%d members)", character.name, len(self))

    def clear(self) -> None:
        self._members.clear()

    def to_list(self) -> List[Character]:
        """Snapshot of the members in insertion order."""
        return list(self._members.values())

    def __iter__(self) -> Iterator[Character]:
        yield from self._members.values()

    def __len__(self) -> int:
        return len(self._members)

    def __contains__(self, character: object) -> bool:
        # members are kept alive by the dict, so their ids cannot be reused
        return id(character) in self._members

    def __repr__(self) -> str:
        names = ", ".join(character.name for character in self._members.values())
        return f"Team([{names}])"

    @staticmethod
    def _check_character(character: Any) -> None:
        if not is_character(character):
            raise InvalidTypeError("Character must be an instance of Character", character)
