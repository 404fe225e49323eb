"""
Core cryptographic utilities.

encoding provides base64 and fingerprint helpers; signatures wraps
Ed25519 key validation and signature checks.
"""
from .encoding import (
    sha256,
    decode_base64,
    encode_base64,
    fingerprint,
)
from .signatures import (
    SCHEME,
    PUBLIC_KEY_LENGTH,
    SIGNATURE_LENGTH,
    KeyLengthError,
    KeyMaterialError,
    Signature,
    is_valid_public_key,
    load_verify_key,
    verify,
)

__all__ = [
    "sha256",
    "decode_base64",
    "encode_base64",
    "fingerprint",
    "SCHEME",
    "PUBLIC_KEY_LENGTH",
    "SIGNATURE_LENGTH",
    "KeyLengthError",
    "KeyMaterialError",
    "Signature",
    "is_valid_public_key",
    "load_verify_key",
    "verify",
]
