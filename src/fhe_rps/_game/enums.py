# Area: Game
"""
fhe_rps._game.enums — Game State Machine Enums
==============================================

Defines the statuses, transition triggers, seats, choices and
notification names of the confidential Rock/Paper/Scissors game.
"""

from enum import Enum, IntEnum


class GameStatus(Enum):
    """
    Status of the game record.

    Status transitions:
    EMPTY -> WAITING (on START)
    WAITING -> IN_PROGRESS (on JOIN)
    WAITING -> WAITING (on SUBMIT by player 1 before anyone joined)
    IN_PROGRESS -> IN_PROGRESS (on SUBMIT, first of two)
    IN_PROGRESS -> COMPLETED (on COMPLETE, right after the second SUBMIT)
    COMPLETED -> WAITING (on START, replaces the finished game)
    """
    EMPTY = "EMPTY"
    WAITING = "WAITING"
    IN_PROGRESS = "IN_PROGRESS"
    COMPLETED = "COMPLETED"

    @property
    def is_live(self) -> bool:
        return self in (GameStatus.WAITING, GameStatus.IN_PROGRESS)


class GameTrigger(Enum):
    """Triggers that drive status transitions."""
    START = "START"
    JOIN = "JOIN"
    SUBMIT = "SUBMIT"
    COMPLETE = "COMPLETE"


class Seat(Enum):
    """The role a participant occupies: slot A or slot B."""
    ONE = 1
    TWO = 2


class Choice(IntEnum):
    """Plaintext encoding of a move. Only clients ever see these values."""
    ROCK = 0
    PAPER = 1
    SCISSORS = 2

    @classmethod
    def parse(cls, value: str) -> "Choice":
        """Parse 'rock'/'paper'/'scissors' (any case) or '0'/'1'/'2'."""
        text = str(value).strip()
        if text.isdigit():
            return cls(int(text))
        try:
            return cls[text.upper()]
        except KeyError:
            raise ValueError(f"Unknown choice: {value!r}") from None


class GameEvent(Enum):
    """Notifications emitted after a transition commits."""
    GAME_STARTED = "game-started"
    GAME_JOINED = "game-joined"
    CHOICE_SUBMITTED = "choice-submitted"
    GAME_COMPLETED = "game-completed"
