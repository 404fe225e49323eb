"""
Encoding Utilities
Base64 and hashing helpers shared by the key loader and the verifier.

This module provides:
- Strict standard-alphabet base64 decoding (padding required)
- Base64 encoding of raw bytes to text
- Short SHA-256 fingerprints for logging and reports

Security/Determinism Notes:
- Decoding never strips whitespace; callers trim where the format allows it
- Only the canonical encoding of a byte string is accepted, so every
  accepted text maps to exactly one byte string and back
"""
from __future__ import annotations

import base64
import binascii
import hashlib


FINGERPRINT_PREFIX = "ed25519:"
FINGERPRINT_HEX_CHARS = 16


def sha256(data: bytes) -> bytes:
    """
    Compute SHA-256 hash of raw bytes.

    Args:
        data: Raw bytes to hash

    Returns:
        32-byte SHA-256 digest
    """
    return hashlib.sha256(data).digest()


def decode_base64(text: str) -> bytes:
    """
    Decode standard base64 text, rejecting anything non-canonical.

    Args:
        text: Base64 text using the standard alphabet with padding

    Returns:
        Decoded bytes

    Raises:
        ValueError: If the text contains characters outside the alphabet,
                    has incorrect padding, or is not the canonical encoding
                    of its decoded bytes

    Example:
        >>> decode_base64("aGVsbG8=")
        b'hello'
    """
    try:
        raw = base64.b64decode(text, validate=True)
    except (binascii.Error, ValueError) as e:
        raise ValueError(f"invalid base64: {e}") from e

    if encode_base64(raw) != text:
        raise ValueError("invalid base64: non-canonical encoding")

    return raw


def encode_base64(data: bytes) -> str:
    """
    Encode raw bytes as standard padded base64 text.

    Example:
        >>> encode_base64(b"hello")
        'aGVsbG8='
    """
    return base64.b64encode(data).decode("ascii")


def fingerprint(public_key: bytes) -> str:
    """
    Short, log-safe identifier for a public key.

    Rule: "ed25519:" + first 16 hex chars of sha256(public_key)
    """
    return FINGERPRINT_PREFIX + sha256(public_key).hex()[:FINGERPRINT_HEX_CHARS]


__all__ = [
    "FINGERPRINT_PREFIX",
    "sha256",
    "decode_base64",
    "encode_base64",
    "fingerprint",
]
