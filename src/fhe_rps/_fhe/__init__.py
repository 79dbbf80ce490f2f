# Area: FHE
"""
Encrypted-value capability used by the game core.

This package contains:
- Opaque handle types (EncryptedUint, EncryptedBool, PublicEncryptedBool)
- The abstract HomomorphicBackend interface
- A deterministic plaintext-shadow backend for tests and demos
- A Paillier-backed backend (python-paillier)
"""

from .handles import (
    EncryptedBool,
    EncryptedUint,
    ExternalInput,
    PublicEncryptedBool,
)
from .backend import HomomorphicBackend, UINT_MAX
from .shadow import PlaintextShadowBackend
from .paillier import PaillierBackend

__all__ = [
    "EncryptedBool",
    "EncryptedUint",
    "ExternalInput",
    "PublicEncryptedBool",
    "HomomorphicBackend",
    "UINT_MAX",
    "PlaintextShadowBackend",
    "PaillierBackend",
]
