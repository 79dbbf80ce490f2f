"""
main.py — Host a confidential Rock/Paper/Scissors game
======================================================

Walks through one game by hand: two participants encrypt their
choices client-side, the game evaluates the winner over ciphertexts,
and only the two result booleans are ever decrypted.

    python main.py              # plaintext-shadow backend
    python main.py paillier     # real Paillier ciphertexts

Subscribers print each notification as the game moves along.
"""

import sys

from fhe_rps import (
    Choice,
    EventBus,
    GameController,
    build_backend,
    derive_outcome,
    describe_outcome,
    load_settings,
    reveal,
    setup_logging,
)

# ── Settings (FHE_RPS_* env vars or .env also work) ──
settings = load_settings()
if len(sys.argv) > 1:
    settings = settings.model_copy(update={"backend": sys.argv[1]})

setup_logging(settings.log_file, settings.log_level_value)

# ── Backend and game ──
fhe = build_backend(settings)
events = EventBus()
events.subscribe_all(lambda event, payload: print(f"  [{event.value}] {payload}"))
game = GameController(fhe, events=events)

# ── Play ──
game.start("alice")
game.join("bob")

# Each participant encrypts locally; only handle + proof go to the game
game.submit("alice", fhe.encrypt_input("alice", int(Choice.ROCK)))
view = game.submit("bob", fhe.encrypt_input("bob", int(Choice.SCISSORS)))

# ── Public decryption of the results ──
a_wins, tie = reveal(fhe, view)
print(f"a_wins={a_wins} tie={tie}")
print(describe_outcome(derive_outcome(a_wins, tie), view))
