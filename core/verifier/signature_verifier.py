"""
Signature Verifier

Confirms that an envelope was signed by the holder of the trusted key.

Steps run in order and the first failure ends verification:
1. public_key_match  - embedded key (if any) equals the trusted key
2. signature_decode  - signature is base64 of exactly 64 bytes
3. verifying_key     - trusted key bytes form a valid Ed25519 key
4. signature_valid   - Ed25519 signature over the UTF-8 message bytes

The trusted key is the only basis of trust. An embedded public key is
compared against it and never used for the cryptographic check.
"""

from __future__ import annotations

import hmac
import logging

from core.crypto.encoding import decode_base64, fingerprint
from core.crypto.signatures import (
    PUBLIC_KEY_LENGTH,
    SIGNATURE_LENGTH,
    KeyLengthError,
    KeyMaterialError,
    Signature,
    load_verify_key,
    verify,
)
from core.schemas.envelope import SignedEnvelope
from core.schemas.errors import VerifyError
from core.schemas.verification import CheckResult, VerificationResult


logger = logging.getLogger(__name__)


CHECK_PUBLIC_KEY_MATCH = "public_key_match"
CHECK_SIGNATURE_DECODE = "signature_decode"
CHECK_VERIFYING_KEY = "verifying_key"
CHECK_SIGNATURE_VALID = "signature_valid"

CHECK_ORDER = (
    CHECK_PUBLIC_KEY_MATCH,
    CHECK_SIGNATURE_DECODE,
    CHECK_VERIFYING_KEY,
    CHECK_SIGNATURE_VALID,
)


def _fail(
    checks: list[CheckResult], check_id: str, error: VerifyError
) -> VerificationResult:
    checks.append(CheckResult.failed(check_id, error.message, details=error.details))
    logger.info("Verification failed at %s: %s", check_id, error.code)
    return VerificationResult.failure(checks, error=error)


def verify_envelope(envelope: SignedEnvelope, trusted_key: bytes) -> VerificationResult:
    """
    Verify an envelope against the trusted public key.

    Args:
        envelope: Decoded envelope
        trusted_key: Raw trusted public key bytes

    Returns:
        VerificationResult; on failure ``error.code`` names the failing kind
    """
    checks: list[CheckResult] = []

    # Step 1: skipped entirely when the signer embedded no key
    if envelope.public_key is not None:
        try:
            embedded_key = decode_base64(envelope.public_key)
        except ValueError as e:
            return _fail(
                checks,
                CHECK_PUBLIC_KEY_MATCH,
                VerifyError.encoding_error(
                    f"base64 decode JSON public key error: {e}", field="public_key"
                ),
            )

        if not hmac.compare_digest(embedded_key, trusted_key):
            return _fail(
                checks,
                CHECK_PUBLIC_KEY_MATCH,
                VerifyError.key_mismatch(details={
                    "embedded_length": len(embedded_key),
                    "trusted_fingerprint": fingerprint(trusted_key),
                    "embedded_fingerprint": fingerprint(embedded_key),
                }),
            )

        checks.append(CheckResult.passed(
            CHECK_PUBLIC_KEY_MATCH,
            "Embedded public key matches trusted key",
        ))

    # Step 2
    try:
        signature_bytes = decode_base64(envelope.signature)
    except ValueError as e:
        return _fail(
            checks,
            CHECK_SIGNATURE_DECODE,
            VerifyError.encoding_error(
                f"base64 decode signature error: {e}", field="signature"
            ),
        )

    if len(signature_bytes) != SIGNATURE_LENGTH:
        return _fail(
            checks,
            CHECK_SIGNATURE_DECODE,
            VerifyError.invalid_signature_length(len(signature_bytes), SIGNATURE_LENGTH),
        )

    checks.append(CheckResult.passed(CHECK_SIGNATURE_DECODE, "Signature decoded"))

    # Step 3
    try:
        verify_key = load_verify_key(trusted_key)
    except KeyLengthError as e:
        return _fail(
            checks,
            CHECK_VERIFYING_KEY,
            VerifyError.invalid_key_length(e.actual, PUBLIC_KEY_LENGTH),
        )
    except KeyMaterialError as e:
        return _fail(
            checks,
            CHECK_VERIFYING_KEY,
            VerifyError.invalid_key_material(f"create verifying key error: {e}"),
        )

    checks.append(CheckResult.passed(
        CHECK_VERIFYING_KEY,
        "Verifying key constructed",
        details={"fingerprint": fingerprint(trusted_key)},
    ))

    # Step 4
    if not verify(envelope.message_bytes, Signature(signature_bytes), verify_key):
        return _fail(
            checks,
            CHECK_SIGNATURE_VALID,
            VerifyError.signature_invalid(
                "signature verification error: signature does not match message and key"
            ),
        )

    checks.append(CheckResult.passed(CHECK_SIGNATURE_VALID, "Signature is valid"))
    logger.info("Envelope verified against %s", fingerprint(trusted_key))
    return VerificationResult.success(checks)


class SignatureVerifier:
    """
    Verifies envelopes against one trusted public key.

    The key is only read, so one instance may serve many independent
    verifications.
    """

    def __init__(self, trusted_key: bytes):
        """
        Initialize signature verifier.

        Args:
            trusted_key: Raw trusted public key bytes
        """
        self._trusted_key = bytes(trusted_key)

    @property
    def trusted_key(self) -> bytes:
        return self._trusted_key

    @property
    def fingerprint(self) -> str:
        return fingerprint(self._trusted_key)

    def verify(self, envelope: SignedEnvelope) -> VerificationResult:
        """Verify one envelope."""
        return verify_envelope(envelope, self._trusted_key)
