# game_roster/errors.py


class TeamError(Exception):
    """Base class for team membership errors."""

    def __init__(self, message: str, character=None):
        super().__init__(message)
        self.character = character


class InvalidTypeError(TeamError, TypeError):
    """Raised when a value that is not a Character is offered to a team."""


class DuplicateMemberError(TeamError, ValueError):
    """Raised when the same character is added to a team twice."""


class NotFoundError(TeamError, LookupError):
    """Raised when removing a character that is not on the team."""
