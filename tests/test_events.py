# Area: Game Tests
"""Tests for the notification bus."""

from unittest.mock import Mock, patch

from fhe_rps._game.enums import GameEvent
from fhe_rps._game.events import EventBus


class TestEventBus:
    """Tests for EventBus class."""

    def test_emits_to_subscriber(self):
        """Test that events reach registered subscribers."""
        bus = EventBus()
        subscriber = Mock()
        bus.subscribe(GameEvent.GAME_STARTED, subscriber)

        payload = {"game_number": 1, "player1": "alice"}
        delivered = bus.emit(GameEvent.GAME_STARTED, payload)

        subscriber.assert_called_once_with(GameEvent.GAME_STARTED, payload)
        assert delivered == 1

    def test_no_subscribers(self):
        """Test that emitting without subscribers delivers nothing."""
        bus = EventBus()
        assert bus.emit(GameEvent.GAME_JOINED, {}) == 0

    def test_subscribers_are_per_event(self):
        """Test subscribers only receive the event they registered for."""
        bus = EventBus()
        started = Mock()
        completed = Mock()
        bus.subscribe(GameEvent.GAME_STARTED, started)
        bus.subscribe(GameEvent.GAME_COMPLETED, completed)

        bus.emit(GameEvent.GAME_STARTED, {})

        started.assert_called_once()
        completed.assert_not_called()

    def test_subscribe_all(self):
        """Test subscribe_all registers for every event."""
        bus = EventBus()
        subscriber = Mock()
        bus.subscribe_all(subscriber)
        for event in GameEvent:
            bus.emit(event, {})
        assert subscriber.call_count == len(GameEvent)

    def test_unsubscribe(self):
        """Test that unsubscribed callables stop receiving events."""
        bus = EventBus()
        subscriber = Mock()
        bus.subscribe(GameEvent.CHOICE_SUBMITTED, subscriber)

        assert bus.unsubscribe(GameEvent.CHOICE_SUBMITTED, subscriber) is True
        assert bus.unsubscribe(GameEvent.CHOICE_SUBMITTED, subscriber) is False

        bus.emit(GameEvent.CHOICE_SUBMITTED, {})
        subscriber.assert_not_called()

    def test_failing_subscriber_is_skipped(self):
        """Test a raising subscriber does not stop the others."""
        bus = EventBus()
        broken = Mock(side_effect=RuntimeError("bug"))
        healthy = Mock()
        bus.subscribe(GameEvent.GAME_COMPLETED, broken)
        bus.subscribe(GameEvent.GAME_COMPLETED, healthy)

        with patch("fhe_rps._game.events.logger") as mock_logger:
            delivered = bus.emit(GameEvent.GAME_COMPLETED, {})
            mock_logger.exception.assert_called_once()

        healthy.assert_called_once()
        assert delivered == 1

    def test_subscribers_returns_copy(self):
        """Test that the returned list cannot alter the registry."""
        bus = EventBus()
        bus.subscribe(GameEvent.GAME_JOINED, Mock())
        bus.subscribers(GameEvent.GAME_JOINED).clear()
        assert len(bus.subscribers(GameEvent.GAME_JOINED)) == 1

    def test_logs_emitted_event(self):
        """Test that emitted events are logged."""
        bus = EventBus()
        with patch("fhe_rps._game.events.logger") as mock_logger:
            bus.emit(GameEvent.GAME_JOINED, {})
            mock_logger.info.assert_called()
