"""
Schemas
File: envelope.py

Purpose: The signed envelope delivered by the signer.

Wire format (UTF-8 JSON):
    {
      "message": "<text>",
      "signature": "<base64, 64 bytes>",
      "public_key": "<base64, 32 bytes>"   # optional
    }
"""

from pydantic import BaseModel, ConfigDict, Field, StrictStr, field_validator


class SignedEnvelope(BaseModel):
    """
    Parsed input unit of one verification.

    The envelope is immutable once built. ``public_key`` is None when the
    signer did not embed one; it is only ever compared against the trusted
    key, never used in its place.
    """

    model_config = ConfigDict(
        extra="ignore",
        frozen=True,
    )

    message: StrictStr = Field(
        ...,
        description="Signed payload, verified as its exact UTF-8 bytes",
    )
    signature: StrictStr = Field(
        ...,
        description="Base64-encoded Ed25519 signature",
    )
    public_key: StrictStr | None = Field(
        default=None,
        description="Optional base64-encoded public key of the signer",
    )

    @field_validator("message")
    @classmethod
    def _message_is_utf8(cls, value: str) -> str:
        # JSON escapes can smuggle in lone surrogates that have no UTF-8 form
        try:
            value.encode("utf-8")
        except UnicodeEncodeError as e:
            raise ValueError(f"message is not valid UTF-8 text: {e.reason}") from e
        return value

    @property
    def message_bytes(self) -> bytes:
        """The exact bytes the signature covers."""
        return self.message.encode("utf-8")

    @property
    def has_public_key(self) -> bool:
        return self.public_key is not None
