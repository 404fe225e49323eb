"""
Verification Pipeline

Wires the trusted key loader, envelope decoder and signature verifier
into a single file-level run.

Public API:
- run_verification: Verify files and return a VerifyRun
- verify_from_files: Verify files and return the VerificationResult
- VerifyRun: Result of one file-level run
"""

from orchestrator.pipeline import (
    VerifyRun,
    run_verification,
    verify_from_files,
)

__all__ = [
    "VerifyRun",
    "run_verification",
    "verify_from_files",
]
