# Area: Game Tests
"""Tests for GameRecord invariants and GameArena."""

from dataclasses import replace

import pytest
from fhe_rps._fhe.handles import EncryptedUint, PublicEncryptedBool
from fhe_rps._game.enums import GameStatus, Seat
from fhe_rps._game.record import GameArena, GameRecord, SeatSlot

CHOICE_A = EncryptedUint("a" * 64)
CHOICE_B = EncryptedUint("b" * 64)
A_WINS = PublicEncryptedBool("c" * 64)
TIE = PublicEncryptedBool("d" * 64)


def waiting(player1="alice"):
    return GameRecord(status=GameStatus.WAITING, game_number=1, player1=player1)


def in_progress():
    return replace(waiting(), player2="bob", status=GameStatus.IN_PROGRESS)


def completed():
    return replace(
        in_progress(),
        status=GameStatus.COMPLETED,
        seat1=SeatSlot(CHOICE_A, True),
        seat2=SeatSlot(CHOICE_B, True),
        a_wins=A_WINS,
        tie=TIE,
    )


class TestGameRecordLookups:
    """Tests for seat lookups on a record."""

    def test_default_record_is_empty(self):
        """Test that a fresh record is EMPTY with open seats."""
        record = GameRecord()
        assert record.status == GameStatus.EMPTY
        assert record.player1 is None
        assert record.seat1 == SeatSlot()
        assert record.both_submitted() is False

    def test_seat_of_maps_players(self):
        """Test caller → seat mapping."""
        record = in_progress()
        assert record.seat_of("alice") == Seat.ONE
        assert record.seat_of("bob") == Seat.TWO
        assert record.seat_of("carol") is None

    def test_slot_returns_matching_seat(self):
        """Test slot() returns the seat's slot."""
        record = completed()
        assert record.slot(Seat.ONE).choice == CHOICE_A
        assert record.slot(Seat.TWO).choice == CHOICE_B

    def test_record_is_immutable(self):
        """Test that records cannot be mutated in place."""
        record = waiting()
        with pytest.raises(Exception):
            record.player2 = "bob"


class TestGameRecordInvariants:
    """Tests for check_invariants()."""

    @pytest.mark.parametrize("factory", [GameRecord, waiting, in_progress, completed])
    def test_valid_records_pass(self, factory):
        """Test that well-formed records validate."""
        factory().check_invariants()

    def test_player2_requires_player1(self):
        """Test player2 cannot be set without player1."""
        record = GameRecord(status=GameStatus.IN_PROGRESS, player2="bob")
        with pytest.raises(ValueError):
            record.check_invariants()

    def test_player2_must_differ(self):
        """Test player2 cannot equal player1."""
        record = replace(in_progress(), player2="alice")
        with pytest.raises(ValueError, match="differ"):
            record.check_invariants()

    def test_submitted_flag_must_match_choice(self):
        """Test that the submitted flag and the choice slot agree."""
        record = replace(in_progress(), seat1=SeatSlot(choice=None, submitted=True))
        with pytest.raises(ValueError, match="submitted flag"):
            record.check_invariants()

    def test_completed_requires_both_seats(self):
        """Test COMPLETED with a single seat is rejected."""
        record = replace(completed(), seat2=SeatSlot())
        with pytest.raises(ValueError, match="COMPLETED"):
            record.check_invariants()

    def test_both_seats_require_completed(self):
        """Test that two commitments without COMPLETED are rejected."""
        record = replace(completed(), status=GameStatus.IN_PROGRESS, a_wins=None, tie=None)
        with pytest.raises(ValueError, match="COMPLETED"):
            record.check_invariants()

    def test_results_only_when_completed(self):
        """Test result handles cannot appear before completion."""
        record = replace(in_progress(), a_wins=A_WINS, tie=TIE)
        with pytest.raises(ValueError, match="Result handles"):
            record.check_invariants()

    def test_results_set_together(self):
        """Test a_wins and tie are set as a pair."""
        record = replace(completed(), tie=None)
        with pytest.raises(ValueError, match="together"):
            record.check_invariants()

    def test_commitment_cannot_be_overwritten(self):
        """Test a committed seat cannot change within the same game."""
        before = replace(in_progress(), seat1=SeatSlot(CHOICE_A, True))
        after = replace(before, seat1=SeatSlot(CHOICE_B, True))
        with pytest.raises(ValueError, match="overwritten"):
            after.check_invariants(before)

    def test_new_game_may_reset_seats(self):
        """Test a new game number starts with fresh seats."""
        before = completed()
        after = GameRecord(status=GameStatus.WAITING, game_number=2, player1="carol")
        after.check_invariants(before)

    @pytest.mark.parametrize("live", [waiting, in_progress])
    def test_new_game_cannot_replace_live_game(self, live):
        """Test a new game number is refused over a WAITING or IN_PROGRESS record."""
        after = GameRecord(status=GameStatus.WAITING, game_number=2, player1="mallory")
        with pytest.raises(ValueError, match="cannot replace"):
            after.check_invariants(live())

    @pytest.mark.parametrize("number", [0, 1, 4, 7])
    def test_game_number_advances_by_one(self, number):
        """Test game numbers neither go backwards nor skip."""
        before = replace(completed(), game_number=2)
        after = GameRecord(status=GameStatus.WAITING, game_number=number, player1="carol")
        with pytest.raises(ValueError, match="advance by one"):
            after.check_invariants(before)

    def test_results_are_immutable(self):
        """Test results of a completed game never change."""
        before = completed()
        after = replace(before, tie=PublicEncryptedBool("e" * 64))
        with pytest.raises(ValueError, match="immutable"):
            after.check_invariants(before)


class TestGameArena:
    """Tests for GameArena."""

    def test_allocate_returns_distinct_handles(self):
        """Test each allocation creates a separate EMPTY record."""
        arena = GameArena()
        first = arena.allocate()
        second = arena.allocate()
        assert first != second
        assert arena.get(first) == GameRecord()
        assert len(arena) == 2
        assert set(arena) == {first, second}

    def test_get_unknown_handle_raises(self):
        """Test that unknown handles raise KeyError."""
        with pytest.raises(KeyError):
            GameArena().get(99)

    def test_commit_swaps_record(self):
        """Test commit replaces the record under a handle."""
        arena = GameArena()
        handle = arena.allocate()
        arena.commit(handle, waiting())
        assert arena.get(handle).player1 == "alice"

    def test_commit_rejects_invalid_record(self):
        """Test commit leaves the old record when validation fails."""
        arena = GameArena()
        handle = arena.allocate()
        bad = GameRecord(status=GameStatus.WAITING, game_number=1)
        with pytest.raises(ValueError):
            arena.commit(handle, bad)
        assert arena.get(handle) == GameRecord()

    def test_commit_refuses_to_replace_live_game(self):
        """Test the arena keeps a live game when a new one is committed over it."""
        arena = GameArena()
        handle = arena.allocate()
        arena.commit(handle, waiting())
        arena.commit(handle, in_progress())
        live = arena.get(handle)

        usurper = GameRecord(
            status=GameStatus.WAITING, game_number=live.game_number + 1, player1="mallory"
        )
        with pytest.raises(ValueError):
            arena.commit(handle, usurper)
        assert arena.get(handle) == live

    def test_records_are_independent(self):
        """Test two handles never share state."""
        arena = GameArena()
        first, second = arena.allocate(), arena.allocate()
        arena.commit(first, waiting())
        assert arena.get(second).status == GameStatus.EMPTY
        assert first in arena
