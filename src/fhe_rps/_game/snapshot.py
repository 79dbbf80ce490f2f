# Area: Game
"""
fhe_rps._game.snapshot — Record views and notification payloads
===============================================================

Builds the dictionaries the controller hands to callers and
subscribers. Only handles and participant names leave through here.
"""

from typing import Optional

from .enums import Seat
from .record import GameRecord
from ..types import (
    ChoiceSubmittedPayload,
    GameCompletedPayload,
    GameJoinedPayload,
    GameStartedPayload,
    GameView,
)


def _handle(value) -> Optional[str]:
    return value.handle if value is not None else None


def build_game_view(record: GameRecord) -> GameView:
    """
    Build the read-only view of a record.

    Args:
        record: The committed record

    Returns:
        GameView dict
    """
    return {
        "status": record.status.value,
        "game_number": record.game_number,
        "player1": record.player1,
        "player2": record.player2,
        "player1_submitted": record.seat1.submitted,
        "player2_submitted": record.seat2.submitted,
        "choice1_handle": _handle(record.seat1.choice),
        "choice2_handle": _handle(record.seat2.choice),
        "a_wins_handle": _handle(record.a_wins),
        "tie_handle": _handle(record.tie),
    }


def started_payload(record: GameRecord) -> GameStartedPayload:
    return {"game_number": record.game_number, "player1": record.player1}


def joined_payload(record: GameRecord) -> GameJoinedPayload:
    return {
        "game_number": record.game_number,
        "player1": record.player1,
        "player2": record.player2,
    }


def submitted_payload(record: GameRecord, player: str, seat: Seat) -> ChoiceSubmittedPayload:
    return {"game_number": record.game_number, "player": player, "seat": seat.value}


def completed_payload(record: GameRecord) -> GameCompletedPayload:
    return {
        "game_number": record.game_number,
        "player1": record.player1,
        "player2": record.player2,
        "a_wins_handle": record.a_wins.handle,
        "tie_handle": record.tie.handle,
    }
