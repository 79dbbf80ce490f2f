"""
fhe_rps.types — TypedDict schemas for reads and notifications
=============================================================

Documents the exact structure of the dictionaries the package hands
out: the GameView returned by GameController.resolve() and the
payload of each notification.

Handles are 64-character hex strings. They are opaque: they name a
ciphertext inside the backend and reveal nothing about its plaintext.

Use __annotations__ to inspect fields:

    >>> GameView.__annotations__
    {'status': str, 'game_number': int, 'player1': Optional[str], ...}
"""

from typing import Optional, TypedDict


# ============================================
# GameController.resolve() output
# ============================================

class GameView(TypedDict):
    """Snapshot of the committed game record.

    Fields
    ------
    status : str
        "EMPTY", "WAITING", "IN_PROGRESS" or "COMPLETED".
    game_number : int
        How many games this record has hosted (0 before the first start).
    player1 : Optional[str]
        Participant in seat 1, None while EMPTY.
    player2 : Optional[str]
        Participant in seat 2, None until someone joins.
    player1_submitted : bool
        Seat 1 has committed its encrypted choice.
    player2_submitted : bool
        Seat 2 has committed its encrypted choice.
    choice1_handle : Optional[str]
        Handle of seat 1's encrypted choice. Never publicly decryptable.
    choice2_handle : Optional[str]
        Handle of seat 2's encrypted choice. Never publicly decryptable.
    a_wins_handle : Optional[str]
        Publicly decryptable "player 1 wins" boolean, set once COMPLETED.
    tie_handle : Optional[str]
        Publicly decryptable "tie" boolean, set once COMPLETED.
    """
    status: str
    game_number: int
    player1: Optional[str]
    player2: Optional[str]
    player1_submitted: bool
    player2_submitted: bool
    choice1_handle: Optional[str]
    choice2_handle: Optional[str]
    a_wins_handle: Optional[str]
    tie_handle: Optional[str]


# ============================================
# Notification payloads
# ============================================

class GameStartedPayload(TypedDict):
    """Payload of "game-started"."""
    game_number: int
    player1: str


class GameJoinedPayload(TypedDict):
    """Payload of "game-joined"."""
    game_number: int
    player1: str
    player2: str


class ChoiceSubmittedPayload(TypedDict):
    """Payload of "choice-submitted". Carries no ciphertext."""
    game_number: int
    player: str
    seat: int


class GameCompletedPayload(TypedDict):
    """Payload of "game-completed"."""
    game_number: int
    player1: str
    player2: str
    a_wins_handle: str
    tie_handle: str


__all__ = [
    "GameView",
    "GameStartedPayload",
    "GameJoinedPayload",
    "ChoiceSubmittedPayload",
    "GameCompletedPayload",
]
