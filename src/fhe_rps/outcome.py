"""
fhe_rps.outcome — Caller-side outcome derivation
================================================

The game core stops at two publicly decryptable booleans. Turning
them into "who won" belongs to the caller: decrypt both handles
through the public-decryption oracle, then derive the outcome here.

    a_wins, tie = reveal(backend, controller.resolve())
    outcome = derive_outcome(a_wins, tie)
    print(describe_outcome(outcome, view))
"""

from enum import Enum
from typing import Optional, Tuple

from ._fhe.backend import HomomorphicBackend
from ._fhe.handles import PublicEncryptedBool
from .types import GameView


class Outcome(Enum):
    """Result of a completed game."""
    PLAYER1_WINS = "player1_wins"
    PLAYER2_WINS = "player2_wins"
    TIE = "tie"


def reveal(fhe: HomomorphicBackend, view: GameView) -> Tuple[bool, bool]:
    """
    Publicly decrypt the two result booleans of a completed game.

    Args:
        fhe: Backend acting as the public-decryption oracle
        view: A GameView from GameController.resolve()

    Returns:
        (a_wins, tie)

    Raises:
        ValueError: If the game has not completed
    """
    if view["status"] != "COMPLETED":
        raise ValueError(f"Game is not completed (status={view['status']})")
    a_wins = fhe.public_decrypt(PublicEncryptedBool(view["a_wins_handle"]))
    tie = fhe.public_decrypt(PublicEncryptedBool(view["tie_handle"]))
    return a_wins, tie


def derive_outcome(a_wins: bool, tie: bool) -> Outcome:
    """
    Map the decrypted booleans to an Outcome.

    Raises:
        ValueError: If both are true, which the evaluator never produces
    """
    if a_wins and tie:
        raise ValueError("a_wins and tie cannot both be true")
    if tie:
        return Outcome.TIE
    return Outcome.PLAYER1_WINS if a_wins else Outcome.PLAYER2_WINS


def winner_of(outcome: Outcome, view: GameView) -> Optional[str]:
    """Participant who won, or None on a tie."""
    if outcome is Outcome.PLAYER1_WINS:
        return view["player1"]
    if outcome is Outcome.PLAYER2_WINS:
        return view["player2"]
    return None


def describe_outcome(outcome: Outcome, view: GameView) -> str:
    if outcome is Outcome.TIE:
        return "It's a tie!"
    seat = 1 if outcome is Outcome.PLAYER1_WINS else 2
    return f"Player {seat} ({winner_of(outcome, view)}) wins!"
