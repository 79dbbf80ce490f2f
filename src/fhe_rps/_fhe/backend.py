# Area: FHE
"""
fhe_rps._fhe.backend — Homomorphic capability interface
=======================================================

Abstract base class for the encrypted-value capability the game core
is written against. The base class owns everything that does not
depend on the cryptosystem:

- the handle table (handle → ciphertext payload)
- input proof issuing and checking at the game boundary
- the access-control list, enforced on every operation, and the
  public-decryption set

Subclasses implement six raw primitives over their own payload type
(_encrypt, _decrypt, _eq, _eq_scalar, _and, _or). Booleans are
represented as encryptions of 0 or 1.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, Optional, Set, Tuple
import hashlib
import hmac
import logging
import secrets

from .handles import (
    EncryptedBool,
    EncryptedUint,
    ExternalInput,
    PublicEncryptedBool,
    short_handle,
)
from ..errors import (
    AccessDeniedError,
    InvalidInputProofError,
    NotPubliclyDecryptableError,
    UnknownHandleError,
)

logger = logging.getLogger("fhe_rps.fhe.backend")

# Plaintext domain of an encrypted input (euint32)
UINT_BITS = 32
UINT_MAX = (1 << UINT_BITS) - 1

KIND_UINT = "uint"
KIND_BOOL = "bool"


class HomomorphicBackend(ABC):
    """
    Opaque encrypted-value capability.

    The game core only ever sees handles. Ciphertexts stay inside the
    backend, and plaintext leaves it solely through public_decrypt()
    on handles that were explicitly declassified.

    Attributes:
        contract_id: Account name of the game itself (the evaluator acts
            as it, and it is bound into every input proof)
    """

    name = "abstract"

    def __init__(self, contract_id: str = "fhe-rps", proof_secret: Optional[bytes] = None):
        self.contract_id = contract_id
        self._proof_secret = proof_secret if proof_secret is not None else secrets.token_bytes(32)
        self._table: Dict[str, Tuple[str, Any]] = {}
        self._acl: Dict[str, Set[str]] = {}
        self._public: Set[str] = set()
        self._counter = 0

    # ── Raw primitives ───────────────────────────────────────────

    @abstractmethod
    def _encrypt(self, value: int) -> Any:
        """Encrypt a plaintext integer into a backend payload."""

    @abstractmethod
    def _decrypt(self, payload: Any) -> int:
        """Decrypt a backend payload. Only public_decrypt() may call this."""

    @abstractmethod
    def _eq(self, x: Any, y: Any) -> Any:
        """Encrypted 1 if x == y else encrypted 0."""

    @abstractmethod
    def _eq_scalar(self, x: Any, k: int) -> Any:
        """Encrypted 1 if x == k else encrypted 0."""

    @abstractmethod
    def _and(self, x: Any, y: Any) -> Any:
        """Conjunction of two encrypted 0/1 values."""

    @abstractmethod
    def _or(self, x: Any, y: Any) -> Any:
        """Disjunction of two encrypted 0/1 values."""

    # ── Handle table ─────────────────────────────────────────────

    def _store(self, kind: str, payload: Any) -> str:
        self._counter += 1
        seed = f"{self.contract_id}:{self.name}:{kind}:{self._counter}".encode()
        handle = hashlib.sha256(seed).hexdigest()
        self._table[handle] = (kind, payload)
        return handle

    def _load(self, handle: str, kind: str) -> Any:
        entry = self._table.get(handle)
        if entry is None or entry[0] != kind:
            raise UnknownHandleError(handle)
        return entry[1]

    def has_handle(self, handle: str) -> bool:
        return handle in self._table

    # ── Boundary: client encryption and admission ────────────────

    def _expected_proof(self, handle: str, owner: str) -> str:
        message = f"{self.contract_id}|{handle}|{owner}".encode()
        return hmac.new(self._proof_secret, message, hashlib.sha256).hexdigest()

    def encrypt_input(self, owner: str, value: int) -> ExternalInput:
        """
        Encrypt a value on behalf of a client.

        Stands in for the client-side encryption layer: registers the
        ciphertext and returns its handle with a proof bound to owner.

        Args:
            owner: Participant the input is bound to
            value: Plaintext in [0, 2**32)

        Returns:
            ExternalInput ready to pass to submit()

        Raises:
            ValueError: If value is outside the encrypted integer domain
        """
        if not isinstance(value, int) or isinstance(value, bool) or not 0 <= value <= UINT_MAX:
            raise ValueError(f"Input must be an integer in [0, {UINT_MAX}], got {value!r}")
        handle = self._store(KIND_UINT, self._encrypt(value))
        return ExternalInput(handle=handle, proof=self._expected_proof(handle, owner))

    def from_external(self, external: ExternalInput, owner: str) -> EncryptedUint:
        """
        Admit an external ciphertext into the game.

        On success both owner and the game itself are granted access
        to the admitted value.

        Raises:
            UnknownHandleError: If the handle was never registered
            InvalidInputProofError: If the proof is not bound to owner
        """
        self._load(external.handle, KIND_UINT)
        expected = self._expected_proof(external.handle, owner)
        if not hmac.compare_digest(expected, str(external.proof)):
            logger.warning(f"Rejected input proof for {owner} on {short_handle(external.handle)}")
            raise InvalidInputProofError(external.handle, owner)
        value = EncryptedUint(external.handle)
        self._grant(value.handle, owner)
        self._grant(value.handle, self.contract_id)
        logger.debug(f"Admitted {short_handle(external.handle)} from {owner}")
        return value

    # ── Evaluation ───────────────────────────────────────────────
    #
    # Every operation runs on behalf of an account. Each input must be
    # granted to that account; the result is granted to it alone.

    def eq(self, a: EncryptedUint, b: EncryptedUint, account: str) -> EncryptedBool:
        _require(a, EncryptedUint)
        _require(b, EncryptedUint)
        self._check_access(a, account)
        self._check_access(b, account)
        payload = self._eq(self._load(a.handle, KIND_UINT), self._load(b.handle, KIND_UINT))
        return self._result(payload, account)

    def eq_scalar(self, a: EncryptedUint, k: int, account: str) -> EncryptedBool:
        _require(a, EncryptedUint)
        self._check_access(a, account)
        payload = self._eq_scalar(self._load(a.handle, KIND_UINT), int(k))
        return self._result(payload, account)

    def and_(self, x: EncryptedBool, y: EncryptedBool, account: str) -> EncryptedBool:
        _require(x, EncryptedBool)
        _require(y, EncryptedBool)
        self._check_access(x, account)
        self._check_access(y, account)
        payload = self._and(self._load(x.handle, KIND_BOOL), self._load(y.handle, KIND_BOOL))
        return self._result(payload, account)

    def or_(self, x: EncryptedBool, y: EncryptedBool, account: str) -> EncryptedBool:
        _require(x, EncryptedBool)
        _require(y, EncryptedBool)
        self._check_access(x, account)
        self._check_access(y, account)
        payload = self._or(self._load(x.handle, KIND_BOOL), self._load(y.handle, KIND_BOOL))
        return self._result(payload, account)

    def _result(self, payload: Any, account: str) -> EncryptedBool:
        handle = self._store(KIND_BOOL, payload)
        self._grant(handle, account)
        return EncryptedBool(handle)

    # ── Access control ───────────────────────────────────────────

    def allow(self, value: Any, account: str, by: str) -> None:
        """
        Grant account the right to use the ciphertext behind value.

        Args:
            value: Handle object to share
            account: Account receiving the grant
            by: Account issuing it; must already hold a grant on value

        Raises:
            UnknownHandleError: If the handle was never registered
            AccessDeniedError: If by holds no grant on value
        """
        if not self.has_handle(value.handle):
            raise UnknownHandleError(value.handle)
        self._check_access(value, by)
        self._grant(value.handle, account)

    def allow_this(self, value: Any) -> None:
        """Persist the game's own grant on value."""
        self.allow(value, self.contract_id, by=self.contract_id)

    def is_allowed(self, value: Any, account: str) -> bool:
        return account in self._acl.get(value.handle, set())

    def _grant(self, handle: str, account: str) -> None:
        self._acl.setdefault(handle, set()).add(account)

    def _check_access(self, value: Any, account: str) -> None:
        if not self.is_allowed(value, account):
            logger.warning(f"Denied {account} on {short_handle(value.handle)}")
            raise AccessDeniedError(value.handle, account)

    # ── Declassification ─────────────────────────────────────────

    def make_publicly_decryptable(self, value: EncryptedBool) -> PublicEncryptedBool:
        """
        Mark an encrypted boolean as publicly decryptable.

        Only values the game itself holds a grant on can be declassified.
        One-way: the returned PublicEncryptedBool cannot be turned back
        into an EncryptedBool, and the mark is never removed.

        Raises:
            AccessDeniedError: If the game holds no grant on value
        """
        _require(value, EncryptedBool)
        self._load(value.handle, KIND_BOOL)
        self._check_access(value, self.contract_id)
        self._public.add(value.handle)
        logger.debug(f"Declassified {short_handle(value.handle)}")
        return PublicEncryptedBool(value.handle)

    def is_publicly_decryptable(self, handle: str) -> bool:
        return handle in self._public

    def public_decrypt(self, value: PublicEncryptedBool) -> bool:
        """
        Decrypt a declassified boolean (decryption oracle stand-in).

        Raises:
            NotPubliclyDecryptableError: If the handle was never declassified
        """
        if value.handle not in self._public:
            raise NotPubliclyDecryptableError(value.handle)
        return bool(self._decrypt(self._load(value.handle, KIND_BOOL)))


def _require(value: Any, expected: type) -> None:
    if not isinstance(value, expected):
        raise TypeError(f"Expected {expected.__name__}, got {type(value).__name__}")
