"""
Schemas
File: __init__.py

Purpose: Export the public API for the schemas module.
This is the main entry point for other modules to import schema definitions.
"""

# Error models and exceptions
from .errors import (
    INPUT_ERROR_CODES,
    ErrorCodes,
    VerifyError,
    VerifyException,
)

# Envelope
from .envelope import SignedEnvelope

# Verification results
from .verification import (
    CheckResult,
    CheckSeverity,
    Outcome,
    VerificationResult,
)

__all__ = [
    # Errors
    "INPUT_ERROR_CODES",
    "ErrorCodes",
    "VerifyError",
    "VerifyException",
    # Envelope
    "SignedEnvelope",
    # Verification
    "CheckResult",
    "CheckSeverity",
    "Outcome",
    "VerificationResult",
]
