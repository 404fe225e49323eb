"""
Verification Pipeline

File-level runner composing the key loader, envelope decoder and verifier.

Order:
1. Load the trusted key (authority anchor, independent of the envelope)
2. Load and decode the envelope
3. Verify the envelope against the trusted key

Each stage returns a value or an error; the first error becomes the
result and later stages do not run. Nothing is kept between runs.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from core.crypto.encoding import fingerprint
from core.envelope.decoder import load_envelope
from core.keys.loader import load_trusted_key
from core.schemas.verification import VerificationResult
from core.verifier.signature_verifier import verify_envelope


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class VerifyRun:
    """Result of one file-level verification."""
    envelope_path: str
    trusted_key_path: str
    result: VerificationResult
    trusted_key_fingerprint: Optional[str] = None
    has_embedded_key: Optional[bool] = None

    @property
    def ok(self) -> bool:
        return self.result.ok


def run_verification(
    envelope_path: str | Path,
    trusted_key_path: str | Path,
) -> VerifyRun:
    """
    Verify the envelope file against the trusted key file.

    Args:
        envelope_path: Path to the signer's JSON envelope
        trusted_key_path: Path to the base64 trusted public key

    Returns:
        VerifyRun wrapping the VerificationResult
    """
    run = dict(envelope_path=str(envelope_path), trusted_key_path=str(trusted_key_path))
    logger.info("Verifying %s against trusted key %s", envelope_path, trusted_key_path)

    key = load_trusted_key(trusted_key_path)
    if not key.ok:
        return VerifyRun(**run, result=VerificationResult.from_error(key.error))
    run["trusted_key_fingerprint"] = fingerprint(key.value)

    envelope = load_envelope(envelope_path)
    if not envelope.ok:
        return VerifyRun(**run, result=VerificationResult.from_error(envelope.error))
    run["has_embedded_key"] = envelope.value.has_public_key

    result = verify_envelope(envelope.value, key.value)
    return VerifyRun(**run, result=result)


def verify_from_files(
    envelope_path: str | Path,
    trusted_key_path: str | Path,
) -> VerificationResult:
    """Verify the envelope file against the trusted key file."""
    return run_verification(envelope_path, trusted_key_path).result
