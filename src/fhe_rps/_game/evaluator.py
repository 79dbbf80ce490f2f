# Area: Game
"""
fhe_rps._game.evaluator — Winner evaluator
==========================================

Computes "player 1 wins" and "tie" over two encrypted choices using
only the capability's equality, conjunction and disjunction. Player 1
wins in exactly three of the nine (a, b) pairs:

    (ROCK, SCISSORS), (PAPER, ROCK), (SCISSORS, PAPER)

The five remaining non-tie pairs are player 2 wins and need no branch
of their own: a_wins and tie are both false for them.

Only the two final booleans are declassified. The per-shape
intermediates and the choices themselves stay encrypted.
"""

from dataclasses import dataclass
import logging

from .enums import Choice
from .._fhe.backend import HomomorphicBackend
from .._fhe.handles import EncryptedBool, EncryptedUint, PublicEncryptedBool

logger = logging.getLogger("fhe_rps.game.evaluator")

# (player 1 choice, player 2 choice) pairs player 1 wins
WINNING_PAIRS = (
    (Choice.ROCK, Choice.SCISSORS),
    (Choice.PAPER, Choice.ROCK),
    (Choice.SCISSORS, Choice.PAPER),
)


@dataclass(frozen=True)
class EncryptedOutcome:
    """Evaluator output before declassification."""
    a_wins: EncryptedBool
    tie: EncryptedBool


@dataclass(frozen=True)
class RevealedOutcome:
    """Evaluator output after declassification."""
    a_wins: PublicEncryptedBool
    tie: PublicEncryptedBool


def evaluate_winner(
    fhe: HomomorphicBackend, a: EncryptedUint, b: EncryptedUint
) -> EncryptedOutcome:
    """
    Evaluate the winner predicate over two encrypted choices.

    Every operation runs as the game account (fhe.contract_id), which
    must already hold grants on both choices.

    Args:
        fhe: Homomorphic capability holding both ciphertexts
        a: Player 1's encrypted choice
        b: Player 2's encrypted choice

    Returns:
        EncryptedOutcome with encrypted a_wins and tie

    Raises:
        AccessDeniedError: If the game holds no grant on a or b
    """
    game = fhe.contract_id
    tie = fhe.eq(a, b, game)

    a_wins = None
    for mine, theirs in WINNING_PAIRS:
        wins_with_shape = fhe.and_(
            fhe.eq_scalar(a, mine, game), fhe.eq_scalar(b, theirs, game), game
        )
        a_wins = wins_with_shape if a_wins is None else fhe.or_(a_wins, wins_with_shape, game)

    return EncryptedOutcome(a_wins=a_wins, tie=tie)


def declassify(fhe: HomomorphicBackend, outcome: EncryptedOutcome) -> RevealedOutcome:
    """Grant the game access to both results and mark them publicly decryptable."""
    fhe.allow_this(outcome.a_wins)
    fhe.allow_this(outcome.tie)
    return RevealedOutcome(
        a_wins=fhe.make_publicly_decryptable(outcome.a_wins),
        tie=fhe.make_publicly_decryptable(outcome.tie),
    )


def evaluate_and_reveal(
    fhe: HomomorphicBackend, a: EncryptedUint, b: EncryptedUint
) -> RevealedOutcome:
    """Run the evaluator and declassify its two outputs."""
    revealed = declassify(fhe, evaluate_winner(fhe, a, b))
    logger.debug(f"Evaluated outcome: a_wins={revealed.a_wins!r} tie={revealed.tie!r}")
    return revealed
