"""
Common test fixtures shared by all modules.

Provides factory functions for:
- Signing keys (deterministic seeds, so failures reproduce)
- Envelope dicts / JSON text / SignedEnvelope models
- Trusted key text and files

Signing is a test-only concern: production code never holds a private key.
"""

import json
from pathlib import Path
from typing import Any, Optional

from nacl.signing import SigningKey

from core.crypto.encoding import encode_base64
from core.schemas.envelope import SignedEnvelope


ALICE_SEED = bytes(range(32))
MALLORY_SEED = bytes(range(100, 132))

_OMIT = object()


def make_signing_key(seed: bytes = ALICE_SEED) -> SigningKey:
    """Create a deterministic Ed25519 signing key."""
    return SigningKey(seed)


def public_key_bytes(signing_key: SigningKey) -> bytes:
    """Raw 32-byte public key of a signing key."""
    return bytes(signing_key.verify_key)


def sign_message(signing_key: SigningKey, message: str) -> str:
    """Base64 Ed25519 signature over the UTF-8 bytes of message."""
    return encode_base64(signing_key.sign(message.encode("utf-8")).signature)


def make_envelope_dict(
    message: str = "hello",
    signing_key: Optional[SigningKey] = None,
    include_public_key: bool = False,
    signature: Any = _OMIT,
    public_key: Any = _OMIT,
    **extra: Any,
) -> dict[str, Any]:
    """
    Build the JSON object an honest signer would produce.

    Pass ``signature``/``public_key`` explicitly to override the honest
    values (including non-string values, to exercise shape checks).
    """
    signing_key = signing_key or make_signing_key()
    data: dict[str, Any] = {
        "message": message,
        "signature": sign_message(signing_key, message) if signature is _OMIT else signature,
    }
    if public_key is not _OMIT:
        data["public_key"] = public_key
    elif include_public_key:
        data["public_key"] = encode_base64(public_key_bytes(signing_key))
    data.update(extra)
    return data


def make_envelope_json(**kwargs: Any) -> str:
    """Envelope JSON text, see make_envelope_dict for arguments."""
    return json.dumps(make_envelope_dict(**kwargs))


def make_envelope(**kwargs: Any) -> SignedEnvelope:
    """SignedEnvelope model, see make_envelope_dict for arguments."""
    return SignedEnvelope.model_validate(make_envelope_dict(**kwargs))


def make_trusted_key_text(signing_key: Optional[SigningKey] = None, padding: str = "\n") -> str:
    """Content of a trusted key file for signing_key."""
    signing_key = signing_key or make_signing_key()
    return encode_base64(public_key_bytes(signing_key)) + padding


def write_text(path: Path, content: str) -> Path:
    """Write content as UTF-8 and return the path."""
    path.write_text(content, encoding="utf-8")
    return path


def flip_bit(data: bytes, index: int, bit: int = 0) -> bytes:
    """Return data with one bit flipped."""
    out = bytearray(data)
    out[index] ^= 1 << bit
    return bytes(out)
