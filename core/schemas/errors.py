"""
Schemas
File: errors.py

Purpose: Error taxonomy for envelope verification.
Defines both Pydantic models for structured error communication
and Python exceptions for callers that prefer raising.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


# =============================================================================
# Error Codes (Machine-Readable Constants)
# =============================================================================

class ErrorCodes:
    """Stable machine-readable error codes used across the verifier."""

    # Input Errors
    IO_ERROR = "IO_ERROR"
    MALFORMED_INPUT = "MALFORMED_INPUT"

    # Decoding Errors
    ENCODING_ERROR = "ENCODING_ERROR"
    INVALID_KEY_LENGTH = "INVALID_KEY_LENGTH"
    INVALID_SIGNATURE_LENGTH = "INVALID_SIGNATURE_LENGTH"
    INVALID_KEY_MATERIAL = "INVALID_KEY_MATERIAL"

    # Verification Errors
    KEY_MISMATCH = "KEY_MISMATCH"
    SIGNATURE_INVALID = "SIGNATURE_INVALID"


# Codes caused by the inputs being unavailable or unparseable, rather than
# by the envelope failing verification.
INPUT_ERROR_CODES: frozenset[str] = frozenset({
    ErrorCodes.IO_ERROR,
    ErrorCodes.MALFORMED_INPUT,
})


# =============================================================================
# Pydantic Error Model (Structured Communication)
# =============================================================================

class VerifyError(BaseModel):
    """
    Error model for structured error communication between stages.

    Every failure in the pipeline is terminal, so ``retryable`` is always
    False; the field is kept so serialized reports stay self-describing.
    """

    model_config = ConfigDict(
        extra="forbid",
        frozen=True,
    )

    code: str = Field(
        ...,
        description="Stable machine-readable error code",
        examples=[ErrorCodes.SIGNATURE_INVALID],
    )
    message: str = Field(
        ...,
        description="Human-readable error message",
    )
    details: dict[str, Any] = Field(
        default_factory=dict,
        description="Additional structured details about the error",
    )
    retryable: bool = Field(
        default=False,
        description="Whether the operation can be retried",
    )

    @property
    def is_input_error(self) -> bool:
        """True when the failure came from reading or parsing the inputs."""
        return self.code in INPUT_ERROR_CODES

    def to_exception(self) -> "VerifyException":
        """Convert this error model to a raised exception."""
        return VerifyException(
            code=self.code,
            message=self.message,
            details=self.details,
            retryable=self.retryable,
        )

    # -------------------------------------------------------------------------
    # Factories, one per failure kind
    # -------------------------------------------------------------------------

    @classmethod
    def io_error(cls, message: str, path: str | None = None) -> "VerifyError":
        details = {"path": path} if path else {}
        return cls(code=ErrorCodes.IO_ERROR, message=message, details=details)

    @classmethod
    def malformed_input(cls, message: str, field: str | None = None) -> "VerifyError":
        details = {"field": field} if field else {}
        return cls(code=ErrorCodes.MALFORMED_INPUT, message=message, details=details)

    @classmethod
    def encoding_error(cls, message: str, field: str) -> "VerifyError":
        return cls(code=ErrorCodes.ENCODING_ERROR, message=message, details={"field": field})

    @classmethod
    def invalid_key_length(cls, actual: int, expected: int) -> "VerifyError":
        return cls(
            code=ErrorCodes.INVALID_KEY_LENGTH,
            message=f"invalid public key length: expected {expected} bytes, got {actual}",
            details={"expected": expected, "actual": actual},
        )

    @classmethod
    def invalid_signature_length(cls, actual: int, expected: int) -> "VerifyError":
        return cls(
            code=ErrorCodes.INVALID_SIGNATURE_LENGTH,
            message=f"invalid signature length: expected {expected} bytes, got {actual}",
            details={"expected": expected, "actual": actual},
        )

    @classmethod
    def invalid_key_material(cls, message: str) -> "VerifyError":
        return cls(code=ErrorCodes.INVALID_KEY_MATERIAL, message=message)

    @classmethod
    def key_mismatch(cls, details: dict[str, Any] | None = None) -> "VerifyError":
        return cls(
            code=ErrorCodes.KEY_MISMATCH,
            message="public key in envelope does not match trusted public key",
            details=details or {},
        )

    @classmethod
    def signature_invalid(cls, message: str) -> "VerifyError":
        return cls(code=ErrorCodes.SIGNATURE_INVALID, message=message)


# =============================================================================
# Python Exceptions (Control Flow)
# =============================================================================

class VerifyException(Exception):
    """
    Exception counterpart of VerifyError.

    Raised only on request (``VerificationResult.raise_for_error``); the
    pipeline itself reports failures as values.
    """

    def __init__(
        self,
        message: str,
        code: str = "VERIFY_ERROR",
        details: dict[str, Any] | None = None,
        retryable: bool = False,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.details = details or {}
        self.retryable = retryable

    def to_error_model(self) -> VerifyError:
        """Convert this exception to a VerifyError model."""
        return VerifyError(
            code=self.code,
            message=self.message,
            details=self.details,
            retryable=self.retryable,
        )

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(code={self.code!r}, message={self.message!r})"
