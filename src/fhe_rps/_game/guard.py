# Area: Game
"""
fhe_rps._game.guard — Commitment guard
======================================

Caller → seat resolution and the once-per-seat commitment check used
by submit(). Pure predicates over a GameRecord; they raise and never
mutate.
"""

from .enums import Seat
from .record import GameRecord
from ..errors import DuplicateSubmissionError, NotAPlayerError

OPERATION = "submit"


def resolve_seat(record: GameRecord, caller: str) -> Seat:
    """
    Map a caller to their seat (player1 → slot A, player2 → slot B).

    Raises:
        NotAPlayerError: If the caller holds neither seat
    """
    seat = record.seat_of(caller)
    if seat is None:
        raise NotAPlayerError(OPERATION, caller, record.status.value)
    return seat


def ensure_slot_open(record: GameRecord, seat: Seat, caller: str) -> None:
    """
    Raises:
        DuplicateSubmissionError: If the seat has already committed
    """
    if record.slot(seat).submitted:
        raise DuplicateSubmissionError(
            OPERATION, caller, record.status.value,
            detail=f"seat {seat.value} already committed",
        )


def both_committed(record: GameRecord) -> bool:
    return record.both_submitted()
