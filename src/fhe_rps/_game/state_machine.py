# Area: Game
"""
fhe_rps._game.state_machine — Game Status Transitions
=====================================================

Transition table for the game status. The controller checks the
discriminated preconditions first; this table is the final backstop
that refuses any status change it does not list.
"""

from typing import Dict

from .enums import GameStatus, GameTrigger


# Valid status transitions: {current_status: {trigger: next_status}}
TRANSITIONS: Dict[GameStatus, Dict[GameTrigger, GameStatus]] = {
    GameStatus.EMPTY: {
        GameTrigger.START: GameStatus.WAITING,
    },
    GameStatus.WAITING: {
        GameTrigger.JOIN: GameStatus.IN_PROGRESS,
        GameTrigger.SUBMIT: GameStatus.WAITING,
    },
    GameStatus.IN_PROGRESS: {
        GameTrigger.SUBMIT: GameStatus.IN_PROGRESS,
        GameTrigger.COMPLETE: GameStatus.COMPLETED,
    },
    GameStatus.COMPLETED: {
        GameTrigger.START: GameStatus.WAITING,
    },
}


def can_transition(status: GameStatus, trigger: GameTrigger) -> bool:
    """
    Check if a transition is valid from a status.

    Args:
        status: The current status
        trigger: The trigger to check

    Returns:
        True if the transition is valid, False otherwise
    """
    return trigger in TRANSITIONS.get(status, {})


def next_status(status: GameStatus, trigger: GameTrigger) -> GameStatus:
    """
    Resolve the status a trigger leads to.

    Raises:
        ValueError: If the transition is not valid
    """
    if not can_transition(status, trigger):
        raise ValueError(f"Invalid transition: {trigger.value} from {status.value}")
    return TRANSITIONS[status][trigger]
