"""
Envelope Decoder

Parses the signer's JSON document into a SignedEnvelope.

Rules:
- The document must be a JSON object with string "message" and "signature"
- "public_key" is optional; null is treated the same as absent
- Unknown fields are ignored
- NaN and Infinity literals are not JSON and are rejected
- Repeating one of the envelope fields is rejected rather than resolved
  last-wins, so the signed message is never ambiguous
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from core.io.files import read_text
from core.schemas.envelope import SignedEnvelope
from core.schemas.errors import VerifyError
from core.schemas.verification import Outcome


logger = logging.getLogger(__name__)


ENVELOPE_FIELDS = frozenset(SignedEnvelope.model_fields)


def _reject_duplicate_fields(pairs: list[tuple[str, Any]]) -> dict[str, Any]:
    obj: dict[str, Any] = {}
    for key, value in pairs:
        if key in obj and key in ENVELOPE_FIELDS:
            raise ValueError(f"duplicate field '{key}'")
        obj[key] = value
    return obj


def _reject_constant(name: str) -> Any:
    raise ValueError(f"invalid JSON constant '{name}'")


def _describe_validation_error(e: ValidationError) -> tuple[str, str | None]:
    """Turn the first pydantic error into (message, field)."""
    first = e.errors()[0]
    field = ".".join(str(part) for part in first.get("loc", ())) or None
    if first.get("type") == "missing":
        return f"missing field '{field}'", field
    return f"invalid field '{field}': {first.get('msg', 'invalid value')}", field


def decode_envelope(text: str) -> Outcome[SignedEnvelope]:
    """
    Decode envelope JSON text.

    Args:
        text: Raw JSON document

    Returns:
        Outcome with the envelope, or a MALFORMED_INPUT error
    """
    try:
        data = json.loads(
            text,
            object_pairs_hook=_reject_duplicate_fields,
            parse_constant=_reject_constant,
        )
    except RecursionError:
        return Outcome[SignedEnvelope].failure(
            VerifyError.malformed_input("parse JSON error: recursion limit exceeded")
        )
    except ValueError as e:
        return Outcome[SignedEnvelope].failure(
            VerifyError.malformed_input(f"parse JSON error: {e}")
        )

    if not isinstance(data, dict):
        return Outcome[SignedEnvelope].failure(
            VerifyError.malformed_input(
                f"parse JSON error: expected an object, got {type(data).__name__}"
            )
        )

    try:
        envelope = SignedEnvelope.model_validate(data)
    except ValidationError as e:
        message, field = _describe_validation_error(e)
        return Outcome[SignedEnvelope].failure(
            VerifyError.malformed_input(f"parse JSON error: {message}", field=field)
        )

    logger.debug(
        "Decoded envelope: message=%d bytes, embedded public key %s",
        len(envelope.message_bytes),
        "present" if envelope.has_public_key else "absent",
    )
    return Outcome[SignedEnvelope].success(envelope)


def load_envelope(path: str | Path) -> Outcome[SignedEnvelope]:
    """Read and decode an envelope file."""
    content = read_text(path, "JSON")
    if not content.ok:
        return Outcome[SignedEnvelope].failure(content.error)
    return decode_envelope(content.value)
