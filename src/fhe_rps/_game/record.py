# Area: Game
"""
fhe_rps._game.record — Game record and arena
============================================

GameRecord is the only persistent state of a game: the two
participants, one commitment slot per seat, the two declassified
result handles and the status. Records are immutable; every accepted
call produces a new record which the arena swaps in as one step.

GameArena owns the records and hands out integer handles, so a
controller works on an explicitly passed-in record rather than
module-level state.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Dict, Iterator, Optional
import logging

from .enums import GameStatus, Seat
from .._fhe.handles import EncryptedUint, PublicEncryptedBool

logger = logging.getLogger("fhe_rps.game.record")


@dataclass(frozen=True)
class SeatSlot:
    """
    One seat's commitment slot.

    The explicit submitted flag, not the ciphertext value, says whether
    the seat has committed.
    """
    choice: Optional[EncryptedUint] = None
    submitted: bool = False


@dataclass(frozen=True)
class GameRecord:
    """Full state of one game between two players."""
    status: GameStatus = GameStatus.EMPTY
    game_number: int = 0

    player1: Optional[str] = None
    player2: Optional[str] = None

    seat1: SeatSlot = field(default_factory=SeatSlot)
    seat2: SeatSlot = field(default_factory=SeatSlot)

    # Declassified outputs of the winner evaluator
    a_wins: Optional[PublicEncryptedBool] = None
    tie: Optional[PublicEncryptedBool] = None

    # ── Lookups ──────────────────────────────────────────────

    def slot(self, seat: Seat) -> SeatSlot:
        return self.seat1 if seat is Seat.ONE else self.seat2

    def seat_of(self, caller: str) -> Optional[Seat]:
        if self.player1 is not None and caller == self.player1:
            return Seat.ONE
        if self.player2 is not None and caller == self.player2:
            return Seat.TWO
        return None

    def both_submitted(self) -> bool:
        return self.seat1.submitted and self.seat2.submitted

    @property
    def is_completed(self) -> bool:
        return self.status is GameStatus.COMPLETED

    # ── Invariants ───────────────────────────────────────────

    def check_invariants(self, previous: Optional[GameRecord] = None) -> None:
        """
        Validate this record, and its relation to the record it replaces.

        Args:
            previous: The currently committed record, if any

        Raises:
            ValueError: If any invariant is violated
        """
        for seat in Seat:
            slot = self.slot(seat)
            if slot.submitted != (slot.choice is not None):
                raise ValueError(f"Seat {seat.value}: submitted flag disagrees with choice slot")

        if self.player2 is not None:
            if self.player1 is None:
                raise ValueError("player2 set without player1")
            if self.player2 == self.player1:
                raise ValueError("player2 must differ from player1")

        if self.seat1.submitted and self.player1 is None:
            raise ValueError("Seat 1 submitted without a player")
        if self.seat2.submitted and self.player2 is None:
            raise ValueError("Seat 2 submitted without a player")

        if self.is_completed != self.both_submitted():
            raise ValueError("COMPLETED must hold exactly when both seats submitted")

        has_results = self.a_wins is not None and self.tie is not None
        if (self.a_wins is None) != (self.tie is None):
            raise ValueError("Result handles must be set together")
        if has_results != self.is_completed:
            raise ValueError("Result handles must be set exactly when COMPLETED")

        if self.status is GameStatus.EMPTY and self.player1 is not None:
            raise ValueError("EMPTY record cannot have players")
        if self.status is not GameStatus.EMPTY and self.player1 is None:
            raise ValueError(f"{self.status.value} record needs player1")

        if previous is None:
            return

        if previous.game_number != self.game_number:
            # New game: only over a finished or empty record, numbered next
            if previous.status.is_live:
                raise ValueError(
                    f"Game {previous.game_number} is {previous.status.value}; cannot replace it"
                )
            if self.game_number != previous.game_number + 1:
                raise ValueError(
                    f"Game number must advance by one "
                    f"(was {previous.game_number}, got {self.game_number})"
                )
            return

        # Same game: committed slots and results never change
        for seat in Seat:
            before = previous.slot(seat)
            if before.submitted and before != self.slot(seat):
                raise ValueError(f"Seat {seat.value} commitment cannot be overwritten")
        if previous.is_completed and (previous.a_wins, previous.tie) != (self.a_wins, self.tie):
            raise ValueError("Results are immutable once set")


class GameArena:
    """
    Owner of game records, addressed by integer handle.

    Usage:
        arena = GameArena()
        handle = arena.allocate()
        record = arena.get(handle)
        arena.commit(handle, new_record)
    """

    def __init__(self):
        self._records: Dict[int, GameRecord] = {}
        self._next_handle = 1

    def allocate(self) -> int:
        """Create an EMPTY record and return its handle."""
        handle = self._next_handle
        self._next_handle += 1
        self._records[handle] = GameRecord()
        logger.debug(f"Allocated game record #{handle}")
        return handle

    def get(self, handle: int) -> GameRecord:
        try:
            return self._records[handle]
        except KeyError:
            raise KeyError(f"No game record with handle {handle}") from None

    def commit(self, handle: int, record: GameRecord) -> None:
        """Validate and swap in a new record for handle."""
        previous = self.get(handle)
        record.check_invariants(previous)
        self._records[handle] = record

    def __contains__(self, handle: int) -> bool:
        return handle in self._records

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[int]:
        return iter(self._records)
