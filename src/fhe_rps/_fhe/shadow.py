# Area: FHE
"""
fhe_rps._fhe.shadow — Plaintext-shadow backend
==============================================

Deterministic backend for tests and demos. Every "ciphertext" is the
plaintext integer itself, kept inside the backend's handle table, so
handles stay opaque to the game core while results are reproducible
run to run.
"""

from typing import Optional

from .backend import HomomorphicBackend

DEFAULT_PROOF_SECRET = b"fhe-rps-shadow-proof"


class PlaintextShadowBackend(HomomorphicBackend):
    """Homomorphic capability backed by plaintext shadows."""

    name = "shadow"

    def __init__(self, contract_id: str = "fhe-rps", proof_secret: Optional[bytes] = None):
        super().__init__(
            contract_id=contract_id,
            proof_secret=proof_secret if proof_secret is not None else DEFAULT_PROOF_SECRET,
        )

    def _encrypt(self, value: int) -> int:
        return int(value)

    def _decrypt(self, payload: int) -> int:
        return payload

    def _eq(self, x: int, y: int) -> int:
        return int(x == y)

    def _eq_scalar(self, x: int, k: int) -> int:
        return int(x == k)

    def _and(self, x: int, y: int) -> int:
        return int(bool(x) and bool(y))

    def _or(self, x: int, y: int) -> int:
        return int(bool(x) or bool(y))
