# Area: Game Tests
"""Tests for the commitment guard."""

from dataclasses import replace

import pytest
from fhe_rps._fhe.handles import EncryptedUint
from fhe_rps._game.enums import GameStatus, Seat
from fhe_rps._game.guard import both_committed, ensure_slot_open, resolve_seat
from fhe_rps._game.record import GameRecord, SeatSlot
from fhe_rps.errors import DuplicateSubmissionError, NotAPlayerError

COMMITTED = SeatSlot(EncryptedUint("0" * 64), True)


@pytest.fixture
def record():
    return GameRecord(
        status=GameStatus.IN_PROGRESS, game_number=1, player1="alice", player2="bob"
    )


class TestResolveSeat:
    """Tests for resolve_seat()."""

    def test_player1_gets_seat_one(self, record):
        assert resolve_seat(record, "alice") == Seat.ONE

    def test_player2_gets_seat_two(self, record):
        assert resolve_seat(record, "bob") == Seat.TWO

    def test_outsider_is_not_a_player(self, record):
        """Test that a non-seated caller is rejected."""
        with pytest.raises(NotAPlayerError) as exc_info:
            resolve_seat(record, "mallory")
        assert exc_info.value.caller == "mallory"
        assert exc_info.value.operation == "submit"
        assert exc_info.value.status == "IN_PROGRESS"

    def test_empty_seat_two_matches_nobody(self):
        """Test that an unset player2 does not match any caller."""
        record = GameRecord(status=GameStatus.WAITING, game_number=1, player1="alice")
        with pytest.raises(NotAPlayerError):
            resolve_seat(record, "bob")


class TestEnsureSlotOpen:
    """Tests for ensure_slot_open()."""

    def test_open_slot_passes(self, record):
        ensure_slot_open(record, Seat.ONE, "alice")
        ensure_slot_open(record, Seat.TWO, "bob")

    def test_committed_slot_is_duplicate(self, record):
        """Test a second commitment is refused."""
        record = replace(record, seat1=COMMITTED)
        with pytest.raises(DuplicateSubmissionError, match="seat 1 already committed"):
            ensure_slot_open(record, Seat.ONE, "alice")

    def test_other_seat_unaffected(self, record):
        """Test one seat's commitment does not close the other."""
        record = replace(record, seat1=COMMITTED)
        ensure_slot_open(record, Seat.TWO, "bob")

    def test_flag_not_value_decides(self, record):
        """Test that an all-zero handle is still a commitment once flagged."""
        record = replace(record, seat2=SeatSlot(EncryptedUint("0" * 64), True))
        with pytest.raises(DuplicateSubmissionError):
            ensure_slot_open(record, Seat.TWO, "bob")


class TestBothCommitted:
    """Tests for both_committed()."""

    def test_none_committed(self, record):
        assert both_committed(record) is False

    def test_one_committed(self, record):
        assert both_committed(replace(record, seat1=COMMITTED)) is False

    def test_both_committed(self, record):
        assert both_committed(replace(record, seat1=COMMITTED, seat2=COMMITTED)) is True
