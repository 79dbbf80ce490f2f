# Area: Game Tests
"""Tests for the game status transition table."""

import pytest
from fhe_rps._game.state_machine import TRANSITIONS, can_transition, next_status
from fhe_rps._game.enums import GameStatus, GameTrigger


class TestTransitionTableBase:
    """Tests for basic transition table lookups."""

    def test_every_status_has_an_entry(self):
        """Test that every status appears in the table."""
        assert set(TRANSITIONS) == set(GameStatus)

    def test_can_transition_returns_true_for_valid(self):
        """Test can_transition returns True for valid transitions."""
        assert can_transition(GameStatus.EMPTY, GameTrigger.START) is True

    def test_can_transition_returns_false_for_invalid(self):
        """Test can_transition returns False for invalid transitions."""
        assert can_transition(GameStatus.EMPTY, GameTrigger.JOIN) is False

    def test_next_status_raises_on_invalid(self):
        """Test that an invalid transition raises ValueError."""
        with pytest.raises(ValueError, match="Invalid transition: SUBMIT from EMPTY"):
            next_status(GameStatus.EMPTY, GameTrigger.SUBMIT)


class TestTransitionTablePaths:
    """Tests for specific transitions."""

    def test_full_happy_path(self):
        """Test the complete path through all statuses and back."""
        status = GameStatus.EMPTY

        status = next_status(status, GameTrigger.START)
        assert status == GameStatus.WAITING

        status = next_status(status, GameTrigger.JOIN)
        assert status == GameStatus.IN_PROGRESS

        status = next_status(status, GameTrigger.SUBMIT)
        assert status == GameStatus.IN_PROGRESS

        status = next_status(status, GameTrigger.COMPLETE)
        assert status == GameStatus.COMPLETED

        status = next_status(status, GameTrigger.START)
        assert status == GameStatus.WAITING

    def test_submit_allowed_while_waiting(self):
        """Test that player 1 may commit before anyone joins."""
        assert next_status(GameStatus.WAITING, GameTrigger.SUBMIT) == GameStatus.WAITING

    @pytest.mark.parametrize("status", [GameStatus.WAITING, GameStatus.IN_PROGRESS])
    def test_start_refused_while_live(self, status):
        """Test that a live game cannot be restarted."""
        assert can_transition(status, GameTrigger.START) is False

    def test_completed_game_is_terminal_except_start(self):
        """Test COMPLETED only accepts START."""
        for trigger in GameTrigger:
            expected = trigger is GameTrigger.START
            assert can_transition(GameStatus.COMPLETED, trigger) is expected

    def test_waiting_cannot_complete(self):
        """Test that completion requires a joined game."""
        assert can_transition(GameStatus.WAITING, GameTrigger.COMPLETE) is False
