# Area: Game
"""
fhe_rps._game.controller — Lifecycle controller
===============================================

Entry points of the confidential Rock/Paper/Scissors game:

    start(caller)            EMPTY/COMPLETED → WAITING
    join(caller)             WAITING → IN_PROGRESS
    submit(caller, input)    commits one seat; the second commit runs
                             the winner evaluator → COMPLETED
    resolve()                read-only GameView

Every entry point is all-or-nothing. Preconditions are checked and the
capability is called against a candidate record; the arena commit is
the last step, so any exception leaves the committed record as it was.
Notifications go out only after the commit.
"""

from dataclasses import replace
from typing import Optional
import logging

from .enums import GameEvent, GameStatus, GameTrigger, Seat
from .events import EventBus
from .evaluator import evaluate_and_reveal
from .guard import both_committed, ensure_slot_open, resolve_seat
from .record import GameArena, GameRecord, SeatSlot
from .snapshot import (
    build_game_view,
    completed_payload,
    joined_payload,
    started_payload,
    submitted_payload,
)
from .state_machine import next_status
from .._fhe.backend import HomomorphicBackend
from .._fhe.handles import ExternalInput
from ..errors import (
    AlreadyInProgressError,
    GameRuleError,
    NoGameError,
    SeatTakenError,
    SelfJoinError,
)
from ..types import GameView

logger = logging.getLogger("fhe_rps.game.controller")


class GameController:
    """
    Owner of one game record inside an arena.

    Args:
        fhe: Homomorphic capability used to admit and evaluate choices
        arena: Arena holding the record (a private one is created if None)
        handle: Record handle inside the arena (allocated if None)
        events: Notification bus (a private one is created if None)
    """

    def __init__(
        self,
        fhe: HomomorphicBackend,
        arena: Optional[GameArena] = None,
        handle: Optional[int] = None,
        events: Optional[EventBus] = None,
    ):
        self.fhe = fhe
        self.arena = arena if arena is not None else GameArena()
        if handle is None:
            handle = self.arena.allocate()
        self.arena.get(handle)
        self.handle = handle
        self.events = events if events is not None else EventBus()

    @property
    def record(self) -> GameRecord:
        return self.arena.get(self.handle)

    # ── Precondition checks ──────────────────────────────────

    def _check_start(self, record: GameRecord, caller: str) -> None:
        if record.status.is_live:
            raise AlreadyInProgressError("start", caller, record.status.value)

    def _check_join(self, record: GameRecord, caller: str) -> None:
        status = record.status.value
        if record.status is GameStatus.EMPTY:
            raise NoGameError("join", caller, status)
        if record.player2 is not None or record.status is not GameStatus.WAITING:
            raise SeatTakenError("join", caller, status)
        if caller == record.player1:
            raise SelfJoinError("join", caller, status)

    def _check_submit(self, record: GameRecord, caller: str) -> Seat:
        if record.status is GameStatus.EMPTY:
            raise NoGameError("submit", caller, record.status.value)
        seat = resolve_seat(record, caller)
        ensure_slot_open(record, seat, caller)
        return seat

    def _commit(self, candidate: GameRecord) -> None:
        self.arena.commit(self.handle, candidate)

    # ── Entry points ─────────────────────────────────────────

    def start(self, caller: str) -> GameView:
        """
        Open a new game with caller in seat 1.

        Replaces a completed game; the old record is not archived.

        Raises:
            AlreadyInProgressError: If a WAITING or IN_PROGRESS game exists
        """
        record = self.record
        try:
            self._check_start(record, caller)
        except GameRuleError as e:
            logger.warning(str(e))
            raise

        candidate = GameRecord(
            status=next_status(record.status, GameTrigger.START),
            game_number=record.game_number + 1,
            player1=caller,
        )
        self._commit(candidate)
        logger.info(f"[game {candidate.game_number}] Started by {caller}")

        self.events.emit(GameEvent.GAME_STARTED, started_payload(candidate))
        return build_game_view(candidate)

    def join(self, caller: str) -> GameView:
        """
        Take seat 2 of the waiting game.

        Raises:
            NoGameError: If no game was ever started
            SeatTakenError: If seat 2 is occupied or the game is not WAITING
            SelfJoinError: If caller already holds seat 1
        """
        record = self.record
        try:
            self._check_join(record, caller)
        except GameRuleError as e:
            logger.warning(str(e))
            raise

        candidate = replace(
            record,
            player2=caller,
            status=next_status(record.status, GameTrigger.JOIN),
        )
        self._commit(candidate)
        logger.info(f"[game {candidate.game_number}] {caller} joined {candidate.player1}")

        self.events.emit(GameEvent.GAME_JOINED, joined_payload(candidate))
        return build_game_view(candidate)

    def submit(self, caller: str, encrypted_input: ExternalInput) -> GameView:
        """
        Commit caller's encrypted choice to their seat.

        When this is the second commitment, the winner evaluator runs
        and the game completes within the same call.

        Args:
            caller: Participant submitting
            encrypted_input: Client ciphertext handle and its input proof

        Raises:
            NoGameError: If no game was ever started
            NotAPlayerError: If caller holds no seat
            DuplicateSubmissionError: If caller's seat already committed
            InvalidInputProofError: If the proof is not bound to caller
        """
        record = self.record
        try:
            seat = self._check_submit(record, caller)
        except GameRuleError as e:
            logger.warning(str(e))
            raise

        # Admission grants caller and game on the handle. If the call aborts
        # later those grants stay on a handle no record references.
        choice = self.fhe.from_external(encrypted_input, caller)

        slot = SeatSlot(choice=choice, submitted=True)
        if seat is Seat.ONE:
            candidate = replace(record, seat1=slot)
        else:
            candidate = replace(record, seat2=slot)
        candidate = replace(candidate, status=next_status(record.status, GameTrigger.SUBMIT))

        completed = both_committed(candidate)
        if completed:
            revealed = evaluate_and_reveal(self.fhe, candidate.seat1.choice, candidate.seat2.choice)
            candidate = replace(
                candidate,
                status=next_status(candidate.status, GameTrigger.COMPLETE),
                a_wins=revealed.a_wins,
                tie=revealed.tie,
            )

        self._commit(candidate)
        logger.info(f"[game {candidate.game_number}] {caller} committed seat {seat.value}")

        self.events.emit(
            GameEvent.CHOICE_SUBMITTED, submitted_payload(candidate, caller, seat)
        )
        if completed:
            logger.info(f"[game {candidate.game_number}] Completed; results declassified")
            self.events.emit(GameEvent.GAME_COMPLETED, completed_payload(candidate))
        return build_game_view(candidate)

    def resolve(self) -> GameView:
        """Return a view of the committed record. Open to any caller."""
        return build_game_view(self.record)

    # ── Non-raising gates ────────────────────────────────────

    def can_start(self, caller: str) -> bool:
        return self._passes(self._check_start, caller)

    def can_join(self, caller: str) -> bool:
        return self._passes(self._check_join, caller)

    def can_submit(self, caller: str) -> bool:
        return self._passes(self._check_submit, caller)

    def _passes(self, check, caller: str) -> bool:
        try:
            check(self.record, caller)
        except GameRuleError:
            return False
        return True
