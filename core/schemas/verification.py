"""
Schemas
File: verification.py

Purpose: Standard result format for verification steps.
The decoder, key loader and verifier report their outcomes with these
models instead of raising, so callers can branch on the failure kind.
"""

from typing import Any, Generic, Literal, TypeVar

from pydantic import BaseModel, ConfigDict, Field, model_validator

from .errors import VerifyError


# Severity levels for checks
CheckSeverity = Literal["info", "warn", "error"]

T = TypeVar("T")


class CheckResult(BaseModel):
    """
    Result of a single verification check.

    Checks are atomic verification steps that can pass or fail.
    """

    model_config = ConfigDict(extra="forbid")

    check_id: str = Field(
        ...,
        description="Unique identifier for this check",
        min_length=1,
    )
    ok: bool = Field(
        ...,
        description="Whether the check passed",
    )
    severity: CheckSeverity = Field(
        ...,
        description="Severity level of this check",
    )
    message: str = Field(
        ...,
        description="Human-readable message describing the result",
    )
    details: dict[str, Any] = Field(
        default_factory=dict,
        description="Additional details about the check",
    )

    @property
    def is_error(self) -> bool:
        """Check if this is an error-level failure."""
        return not self.ok and self.severity == "error"

    @classmethod
    def passed(
        cls,
        check_id: str,
        message: str = "Check passed",
        details: dict[str, Any] | None = None,
    ) -> "CheckResult":
        """Create a passed check result."""
        return cls(
            check_id=check_id,
            ok=True,
            severity="info",
            message=message,
            details=details or {},
        )

    @classmethod
    def failed(
        cls,
        check_id: str,
        message: str,
        details: dict[str, Any] | None = None,
    ) -> "CheckResult":
        """Create a failed check result."""
        return cls(
            check_id=check_id,
            ok=False,
            severity="error",
            message=message,
            details=details or {},
        )


class VerificationResult(BaseModel):
    """
    Complete result of verifying one envelope.

    ``checks`` lists the steps that actually ran, in order. Verification
    stops at the first failing step, whose error is carried in ``error``.
    """

    model_config = ConfigDict(extra="forbid")

    ok: bool = Field(
        ...,
        description="Overall verification success",
    )
    checks: list[CheckResult] = Field(
        default_factory=list,
        description="Individual check results",
    )
    error: VerifyError | None = Field(
        default=None,
        description="Error details of the first failing step",
    )

    @property
    def error_code(self) -> str | None:
        """Machine-readable code of the failure, or None on success."""
        return self.error.code if self.error else None

    @property
    def passed_count(self) -> int:
        """Count of passed checks."""
        return sum(1 for check in self.checks if check.ok)

    def get_failed_checks(self) -> list[CheckResult]:
        """Get all failed checks."""
        return [check for check in self.checks if not check.ok]

    def has_check(self, check_id: str) -> bool:
        """Whether a step with this id was executed."""
        return any(check.check_id == check_id for check in self.checks)

    def raise_for_error(self) -> None:
        """Raise VerifyException if verification failed."""
        if self.error is not None:
            raise self.error.to_exception()

    @classmethod
    def success(cls, checks: list[CheckResult] | None = None) -> "VerificationResult":
        """Create a successful verification result."""
        return cls(ok=True, checks=checks or [])

    @classmethod
    def failure(
        cls,
        checks: list[CheckResult],
        error: VerifyError,
    ) -> "VerificationResult":
        """Create a failed verification result."""
        return cls(ok=False, checks=checks, error=error)

    @classmethod
    def from_error(cls, error: VerifyError) -> "VerificationResult":
        """Create a verification result from an error raised before any check ran."""
        return cls(ok=False, checks=[], error=error)


class Outcome(BaseModel, Generic[T]):
    """
    Value-or-error result of a decoding stage.

    Exactly one of ``value`` and ``error`` is set.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    value: T | None = None
    error: VerifyError | None = None

    @model_validator(mode="after")
    def _exactly_one(self) -> "Outcome[T]":
        if (self.value is None) == (self.error is None):
            raise ValueError("Outcome requires exactly one of value or error")
        return self

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, value: T) -> "Outcome[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, error: VerifyError) -> "Outcome[T]":
        return cls(error=error)
