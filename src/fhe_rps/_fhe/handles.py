# Area: FHE
"""
fhe_rps._fhe.handles — Opaque ciphertext handles
================================================

Value types the game core holds instead of ciphertexts. A handle is a
32-byte hex string that indexes the backend's ciphertext table; it
carries no plaintext and supports no operations by itself.

PublicEncryptedBool is only ever produced by a backend's
make_publicly_decryptable(). Nothing turns it back into an
EncryptedBool.
"""

from dataclasses import dataclass


def short_handle(handle: str) -> str:
    """Abbreviate a handle for log lines."""
    return f"{handle[:8]}…{handle[-4:]}"


@dataclass(frozen=True)
class EncryptedUint:
    """Handle to an encrypted unsigned integer."""
    handle: str

    def __repr__(self) -> str:
        return f"EncryptedUint({short_handle(self.handle)})"


@dataclass(frozen=True)
class EncryptedBool:
    """Handle to an encrypted boolean that has not been declassified."""
    handle: str

    def __repr__(self) -> str:
        return f"EncryptedBool({short_handle(self.handle)})"


@dataclass(frozen=True)
class PublicEncryptedBool:
    """Handle to an encrypted boolean anyone may ask the oracle to decrypt."""
    handle: str

    def __repr__(self) -> str:
        return f"PublicEncryptedBool({short_handle(self.handle)})"


@dataclass(frozen=True)
class ExternalInput:
    """
    A client-encrypted value as it arrives at the game boundary.

    Attributes:
        handle: Handle of the ciphertext registered by the client
        proof: Hex proof binding the handle to its owner
    """
    handle: str
    proof: str

    def __repr__(self) -> str:
        return f"ExternalInput({short_handle(self.handle)})"
