# Area: Game
"""
fhe_rps._game.events — Notification bus
=======================================

Delivers game notifications (game-started, game-joined,
choice-submitted, game-completed) to subscribers, synchronously and
after the transition has been committed.
"""

import logging
from typing import Any, Callable, Dict, List, Mapping

from .enums import GameEvent

logger = logging.getLogger("fhe_rps.game.events")

Subscriber = Callable[[GameEvent, Mapping[str, Any]], None]


class EventBus:
    """
    Registry of notification subscribers.

    Delivery is best effort: a subscriber that raises is logged and
    skipped, and the remaining subscribers still run. There is no retry.

    Usage:
        bus = EventBus()
        bus.subscribe(GameEvent.GAME_COMPLETED, on_completed)
        bus.emit(GameEvent.GAME_COMPLETED, payload)
    """

    def __init__(self):
        self._subscribers: Dict[GameEvent, List[Subscriber]] = {}

    def subscribe(self, event: GameEvent, subscriber: Subscriber) -> None:
        """
        Register a subscriber for an event.

        Args:
            event: The notification to listen for
            subscriber: Called as subscriber(event, payload)
        """
        self._subscribers.setdefault(event, []).append(subscriber)
        logger.debug(f"Subscribed to {event.value}")

    def subscribe_all(self, subscriber: Subscriber) -> None:
        for event in GameEvent:
            self.subscribe(event, subscriber)

    def unsubscribe(self, event: GameEvent, subscriber: Subscriber) -> bool:
        """
        Remove a subscriber.

        Returns:
            True if it was registered, False otherwise
        """
        subscribers = self._subscribers.get(event, [])
        if subscriber in subscribers:
            subscribers.remove(subscriber)
            return True
        return False

    def subscribers(self, event: GameEvent) -> List[Subscriber]:
        return list(self._subscribers.get(event, []))

    def emit(self, event: GameEvent, payload: Mapping[str, Any]) -> int:
        """
        Deliver an event to its subscribers.

        Args:
            event: The notification
            payload: The event payload (see fhe_rps.types)

        Returns:
            Number of subscribers that handled it without raising
        """
        delivered = 0
        for subscriber in self.subscribers(event):
            try:
                subscriber(event, payload)
            except Exception:
                logger.exception(f"Subscriber failed on {event.value}")
                continue
            delivered += 1
        logger.info(f"Emitted {event.value} to {delivered} subscriber(s)")
        return delivered
