from __future__ import annotations

from dataclasses import dataclass

from nacl.bindings import crypto_core_ed25519_is_valid_point
from nacl.exceptions import BadSignatureError
from nacl.signing import VerifyKey


SCHEME = "ed25519"
PUBLIC_KEY_LENGTH = 32
SIGNATURE_LENGTH = 64


class KeyLengthError(ValueError):
    """Raised when public key bytes are not PUBLIC_KEY_LENGTH long."""

    def __init__(self, actual: int) -> None:
        self.actual = actual
        super().__init__(
            f"invalid public key length: expected {PUBLIC_KEY_LENGTH} bytes, got {actual}"
        )


class KeyMaterialError(ValueError):
    """Raised when public key bytes do not encode a usable curve point."""


@dataclass(frozen=True)
class Signature:
    signature: bytes
    scheme: str = SCHEME

    def __post_init__(self) -> None:
        if len(self.signature) != SIGNATURE_LENGTH:
            raise ValueError(
                f"invalid signature length: expected {SIGNATURE_LENGTH} bytes, "
                f"got {len(self.signature)}"
            )


def is_valid_public_key(public_key: bytes) -> bool:
    """Canonical encoding of a point in the prime-order subgroup, not of small order."""
    if len(public_key) != PUBLIC_KEY_LENGTH:
        return False
    return crypto_core_ed25519_is_valid_point(public_key)


def load_verify_key(public_key: bytes) -> VerifyKey:
    """Build a verifying key from raw bytes, rejecting malformed points."""
    if len(public_key) != PUBLIC_KEY_LENGTH:
        raise KeyLengthError(len(public_key))
    # Also rejects points with a torsion component, which plain decompression
    # would accept. Keys from a real key generator never have one.
    if not crypto_core_ed25519_is_valid_point(public_key):
        raise KeyMaterialError("public key is not a valid Ed25519 curve point")
    return VerifyKey(public_key)


def verify(payload: bytes, signature: Signature, verify_key: VerifyKey) -> bool:
    """Check an Ed25519 signature over payload. Never raises on a bad signature."""
    try:
        verify_key.verify(payload, signature.signature)
    except BadSignatureError:
        return False
    return True
