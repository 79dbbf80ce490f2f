# Area: Game
"""
Confidential two-party game core.

This package contains:
- Game record, seat slots and the arena that owns records
- Status transition table
- Commitment guard (seat resolution, once-per-seat check)
- Winner evaluator over encrypted choices
- Lifecycle controller and its notification bus
"""

from .enums import Choice, GameEvent, GameStatus, GameTrigger, Seat
from .record import GameArena, GameRecord, SeatSlot
from .state_machine import TRANSITIONS, can_transition, next_status
from .guard import both_committed, ensure_slot_open, resolve_seat
from .evaluator import (
    WINNING_PAIRS,
    EncryptedOutcome,
    RevealedOutcome,
    declassify,
    evaluate_and_reveal,
    evaluate_winner,
)
from .events import EventBus
from .snapshot import build_game_view
from .controller import GameController

__all__ = [
    "Choice",
    "GameEvent",
    "GameStatus",
    "GameTrigger",
    "Seat",
    "GameArena",
    "GameRecord",
    "SeatSlot",
    "TRANSITIONS",
    "can_transition",
    "next_status",
    "both_committed",
    "ensure_slot_open",
    "resolve_seat",
    "WINNING_PAIRS",
    "EncryptedOutcome",
    "RevealedOutcome",
    "declassify",
    "evaluate_and_reveal",
    "evaluate_winner",
    "EventBus",
    "build_game_view",
    "GameController",
]
