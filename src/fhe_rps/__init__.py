"""
fhe_rps — Confidential Rock/Paper/Scissors
==========================================

Two participants commit encrypted choices; the winner predicate is
evaluated over the ciphertexts and only two booleans, "player 1 wins"
and "tie", are ever made publicly decryptable.

Quick Start:
    from fhe_rps import GameController, PlaintextShadowBackend, Choice

    fhe = PlaintextShadowBackend()
    game = GameController(fhe)
    game.start("alice")
    game.join("bob")
    game.submit("alice", fhe.encrypt_input("alice", Choice.ROCK))
    view = game.submit("bob", fhe.encrypt_input("bob", Choice.SCISSORS))

    from fhe_rps import reveal, derive_outcome
    outcome = derive_outcome(*reveal(fhe, view))     # Outcome.PLAYER1_WINS

Backends:
1. PlaintextShadowBackend - deterministic, for tests and demos
2. PaillierBackend - python-paillier ciphertexts
"""

from ._game import (
    Choice,
    EventBus,
    GameArena,
    GameController,
    GameEvent,
    GameRecord,
    GameStatus,
    Seat,
    evaluate_winner,
)
from ._fhe import (
    EncryptedBool,
    EncryptedUint,
    ExternalInput,
    HomomorphicBackend,
    PaillierBackend,
    PlaintextShadowBackend,
    PublicEncryptedBool,
)
from ._config import GameSettings, build_backend, load_settings
from ._shared import setup_logging, log_game_error
from .outcome import Outcome, derive_outcome, describe_outcome, reveal, winner_of
from .errors import (
    FheRpsError,
    GameRuleError,
    AlreadyInProgressError,
    NoGameError,
    SelfJoinError,
    SeatTakenError,
    NotAPlayerError,
    DuplicateSubmissionError,
    CiphertextError,
    InvalidInputProofError,
    UnknownHandleError,
    NotPubliclyDecryptableError,
    AccessDeniedError,
)
from .types import (
    GameView,
    GameStartedPayload,
    GameJoinedPayload,
    ChoiceSubmittedPayload,
    GameCompletedPayload,
)

__all__ = [
    # Game
    "Choice",
    "EventBus",
    "GameArena",
    "GameController",
    "GameEvent",
    "GameRecord",
    "GameStatus",
    "Seat",
    "evaluate_winner",
    # Capability
    "EncryptedBool",
    "EncryptedUint",
    "ExternalInput",
    "HomomorphicBackend",
    "PaillierBackend",
    "PlaintextShadowBackend",
    "PublicEncryptedBool",
    # Config and logging
    "GameSettings",
    "build_backend",
    "load_settings",
    "setup_logging",
    "log_game_error",
    # Outcome
    "Outcome",
    "derive_outcome",
    "describe_outcome",
    "reveal",
    "winner_of",
    # Errors
    "FheRpsError",
    "GameRuleError",
    "AlreadyInProgressError",
    "NoGameError",
    "SelfJoinError",
    "SeatTakenError",
    "NotAPlayerError",
    "DuplicateSubmissionError",
    "CiphertextError",
    "InvalidInputProofError",
    "UnknownHandleError",
    "NotPubliclyDecryptableError",
    "AccessDeniedError",
    # Types
    "GameView",
    "GameStartedPayload",
    "GameJoinedPayload",
    "ChoiceSubmittedPayload",
    "GameCompletedPayload",
]
__version__ = "1.0.0"
