# Area: Shared
"""
fhe_rps.cli — Command-line interface
=====================================

Plays one confidential game end to end: start, join, two encrypted
submissions, then public decryption of the two result booleans.

Usage:
    fhe-rps play --player1 alice --player2 bob --choice1 rock --choice2 scissors
    fhe-rps play ... --backend paillier            # real Paillier ciphertexts
    fhe-rps play ... --config settings.json --json

Backend and logging can also be set with FHE_RPS_* environment
variables or a .env file.

Exit codes: 0 success, 1 configuration error, 2 game rule violation.
"""

import argparse
import json
import sys
from typing import List, Optional, Tuple

from ._config import build_backend, load_settings
from ._fhe.backend import HomomorphicBackend
from ._game.controller import GameController
from ._game.enums import Choice
from ._shared.logging_config import log_game_error, setup_logging
from .errors import GameRuleError
from .outcome import Outcome, derive_outcome, describe_outcome, reveal, winner_of
from .types import GameView


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="fhe-rps",
        description="Confidential Rock/Paper/Scissors over encrypted choices",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  fhe-rps play --player1 alice --player2 bob --choice1 rock --choice2 scissors
  fhe-rps play --player1 alice --player2 bob --choice1 paper --choice2 paper --backend paillier
  FHE_RPS_BACKEND=paillier fhe-rps play --player1 a --player2 b --choice1 0 --choice2 2
        """,
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    play = subparsers.add_parser("play", help="Play one game between two participants")
    play.add_argument("--player1", required=True, help="Participant who starts the game")
    play.add_argument("--player2", required=True, help="Participant who joins the game")
    play.add_argument("--choice1", required=True, type=Choice.parse,
                      help="rock, paper or scissors (or 0/1/2)")
    play.add_argument("--choice2", required=True, type=Choice.parse,
                      help="rock, paper or scissors (or 0/1/2)")
    play.add_argument("--backend", choices=["shadow", "paillier"],
                      help="Homomorphic backend (overrides config)")
    play.add_argument("--config", type=str, help="Path to JSON config file")
    play.add_argument("--json", action="store_true", help="Print the result as JSON")
    play.add_argument("--quiet", action="store_true", help="Suppress terminal logs")

    return parser.parse_args(argv)


def play_game(
    controller: GameController,
    player1: str,
    choice1: Choice,
    player2: str,
    choice2: Choice,
) -> GameView:
    """
    Drive one game to completion.

    Each player's choice is encrypted client-side and only its handle
    and proof are passed to the controller.

    Returns:
        The completed GameView
    """
    fhe = controller.fhe
    controller.start(player1)
    controller.join(player2)
    controller.submit(player1, fhe.encrypt_input(player1, int(choice1)))
    return controller.submit(player2, fhe.encrypt_input(player2, int(choice2)))


def report(fhe: HomomorphicBackend, view: GameView) -> Tuple[bool, bool, Outcome]:
    a_wins, tie = reveal(fhe, view)
    return a_wins, tie, derive_outcome(a_wins, tie)


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    args = parse_args(argv)

    try:
        settings = load_settings(args.config)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    if args.backend:
        settings = settings.model_copy(update={"backend": args.backend})

    setup_logging(settings.log_file, settings.log_level_value, quiet=args.quiet)

    fhe = build_backend(settings)
    controller = GameController(fhe)

    try:
        view = play_game(controller, args.player1, args.choice1, args.player2, args.choice2)
    except GameRuleError as e:
        log_game_error(e)
        return 2

    a_wins, tie, outcome = report(fhe, view)

    if args.json:
        print(json.dumps({
            "backend": settings.backend,
            "game": view,
            "a_wins": a_wins,
            "tie": tie,
            "outcome": outcome.value,
            "winner": winner_of(outcome, view),
        }, indent=2))
    else:
        print(describe_outcome(outcome, view))
    return 0


if __name__ == "__main__":
    sys.exit(main())
