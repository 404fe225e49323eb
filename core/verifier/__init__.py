"""
Envelope signature verification.
"""

from .signature_verifier import (
    CHECK_ORDER,
    CHECK_PUBLIC_KEY_MATCH,
    CHECK_SIGNATURE_DECODE,
    CHECK_SIGNATURE_VALID,
    CHECK_VERIFYING_KEY,
    SignatureVerifier,
    verify_envelope,
)

__all__ = [
    "CHECK_ORDER",
    "CHECK_PUBLIC_KEY_MATCH",
    "CHECK_SIGNATURE_DECODE",
    "CHECK_SIGNATURE_VALID",
    "CHECK_VERIFYING_KEY",
    "SignatureVerifier",
    "verify_envelope",
]
