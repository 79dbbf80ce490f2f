# Area: FHE
"""
fhe_rps._fhe.paillier — Paillier-backed coprocessor
===================================================

Homomorphic capability built on python-paillier (phe).

Paillier is additively homomorphic only, so comparisons are delegated
to a key-holding coprocessor, the role the decryption network plays
for an on-chain FHE contract:

- Eq(x, y)   → zero-test of r·(x − y) for a random nonzero r
- Eq(x, k)   → zero-test of r·(x − k)
- And(x, y)  → zero-test of r·(x + y − 2)   (x, y ∈ {0, 1})
- Or(x, y)   → negated zero-test of r·(x + y)

The blinding factor hides the magnitude of the difference; only the
single equality bit is observed, and it is immediately re-encrypted
under the public key. The game core never sees any of it.
"""

from typing import Optional, Tuple
import logging
import secrets

from phe import paillier
from phe.paillier import EncryptedNumber, PaillierPrivateKey, PaillierPublicKey

from .backend import HomomorphicBackend

logger = logging.getLogger("fhe_rps.fhe.paillier")

DEFAULT_KEY_BITS = 1024


class PaillierBackend(HomomorphicBackend):
    """
    Homomorphic capability backed by the Paillier cryptosystem.

    Args:
        key_bits: Modulus size used when no keypair is supplied
        contract_id: Account name of the game
        proof_secret: Secret used to bind input proofs to their owner
        keypair: Optional pre-generated (public_key, private_key)
    """

    name = "paillier"

    def __init__(
        self,
        key_bits: int = DEFAULT_KEY_BITS,
        contract_id: str = "fhe-rps",
        proof_secret: Optional[bytes] = None,
        keypair: Optional[Tuple[PaillierPublicKey, PaillierPrivateKey]] = None,
    ):
        super().__init__(contract_id=contract_id, proof_secret=proof_secret)
        if keypair is None:
            logger.info(f"Generating {key_bits}-bit Paillier keypair")
            keypair = paillier.generate_paillier_keypair(n_length=key_bits)
        self.public_key, self._private_key = keypair

    def _encrypt(self, value: int) -> EncryptedNumber:
        return self.public_key.encrypt(int(value))

    def _decrypt(self, payload: EncryptedNumber) -> int:
        return self._private_key.decrypt(payload)

    def _is_zero(self, payload: EncryptedNumber) -> bool:
        r = secrets.randbelow(self.public_key.max_int) + 1
        blinded = payload * r
        return self._private_key.raw_decrypt(blinded.ciphertext(be_secure=False)) == 0

    def _bit(self, flag: bool) -> EncryptedNumber:
        return self.public_key.encrypt(1 if flag else 0)

    def _eq(self, x: EncryptedNumber, y: EncryptedNumber) -> EncryptedNumber:
        return self._bit(self._is_zero(x - y))

    def _eq_scalar(self, x: EncryptedNumber, k: int) -> EncryptedNumber:
        return self._bit(self._is_zero(x - k))

    def _and(self, x: EncryptedNumber, y: EncryptedNumber) -> EncryptedNumber:
        return self._bit(self._is_zero(x + y - 2))

    def _or(self, x: EncryptedNumber, y: EncryptedNumber) -> EncryptedNumber:
        return self._bit(not self._is_zero(x + y))
