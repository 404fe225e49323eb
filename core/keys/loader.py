"""
Trusted Key Loader

Loads the verifier's locally provisioned public key. The key file holds a
single base64 token; surrounding whitespace is ignored.

The key is validated as an Ed25519 point here, once, so a broken key file
is reported as such before any envelope is looked at.
"""

from __future__ import annotations

import logging
from pathlib import Path

from core.crypto.encoding import decode_base64, fingerprint
from core.crypto.signatures import PUBLIC_KEY_LENGTH, is_valid_public_key
from core.io.files import read_text
from core.schemas.errors import VerifyError
from core.schemas.verification import Outcome


logger = logging.getLogger(__name__)


def parse_trusted_key(text: str) -> Outcome[bytes]:
    """
    Decode trusted key text into raw key bytes.

    Args:
        text: Content of the trusted key source

    Returns:
        Outcome with 32 raw key bytes, or one of ENCODING_ERROR,
        INVALID_KEY_LENGTH, INVALID_KEY_MATERIAL
    """
    try:
        raw = decode_base64(text.strip())
    except ValueError as e:
        return Outcome[bytes].failure(
            VerifyError.encoding_error(
                f"base64 decode stored public key error: {e}", field="trusted_key"
            )
        )

    if len(raw) != PUBLIC_KEY_LENGTH:
        return Outcome[bytes].failure(
            VerifyError.invalid_key_length(len(raw), PUBLIC_KEY_LENGTH)
        )

    if not is_valid_public_key(raw):
        return Outcome[bytes].failure(
            VerifyError.invalid_key_material(
                "create verifying key error: stored public key is not a valid Ed25519 point"
            )
        )

    logger.info("Loaded trusted public key %s", fingerprint(raw))
    return Outcome[bytes].success(raw)


def load_trusted_key(path: str | Path) -> Outcome[bytes]:
    """Read and decode the trusted key file."""
    content = read_text(path, "stored public key")
    if not content.ok:
        return Outcome[bytes].failure(content.error)
    return parse_trusted_key(content.value)
