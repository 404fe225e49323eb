"""
CLI Verify Command

Verify a signed envelope against the trusted public key:
- Load the trusted key from its provisioned location
- Decode the envelope
- Check the optional embedded key and the Ed25519 signature

Usage:
    bob-verify alice.json [--trusted-key PATH] [--json]
"""

from __future__ import annotations

import json
import logging
import sys
from argparse import Namespace
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any

from orchestrator.pipeline import VerifyRun, run_verification


logger = logging.getLogger(__name__)


# Exit codes
EXIT_SUCCESS = 0
EXIT_RUNTIME_ERROR = 1
EXIT_VERIFICATION_FAILED = 2


@dataclass
class VerifySummary:
    """Summary of one verification for CLI output."""
    envelope_path: str = ""
    trusted_key_path: str = ""
    ok: bool = False
    trusted_key_fingerprint: str | None = None
    embedded_public_key: bool | None = None
    error_code: str | None = None
    error: str | None = None
    checks: list[dict[str, Any]] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        d = asdict(self)
        for key in ("trusted_key_fingerprint", "embedded_public_key", "error_code", "error"):
            if d[key] is None:
                del d[key]
        return d


def build_summary(run: VerifyRun) -> VerifySummary:
    """Build a VerifySummary from a pipeline run."""
    result = run.result
    summary = VerifySummary(
        envelope_path=run.envelope_path,
        trusted_key_path=run.trusted_key_path,
        ok=result.ok,
        trusted_key_fingerprint=run.trusted_key_fingerprint,
        embedded_public_key=run.has_embedded_key,
        checks=[
            {"check_id": check.check_id, "ok": check.ok, "message": check.message}
            for check in result.checks
        ],
    )
    if result.error is not None:
        summary.error_code = result.error.code
        summary.error = result.error.message
    return summary


def exit_code_for(run: VerifyRun) -> int:
    """Map a run to the process exit code."""
    if run.ok:
        return EXIT_SUCCESS
    if run.result.error is not None and run.result.error.is_input_error:
        return EXIT_RUNTIME_ERROR
    return EXIT_VERIFICATION_FAILED


def print_summary_human(summary: VerifySummary) -> None:
    """Print summary in human-readable format."""
    if summary.ok:
        print("Verification succeeded.")
    else:
        print(f"Verification failed: {summary.error}", file=sys.stderr)


def print_summary_json(summary: VerifySummary) -> None:
    """Print summary as JSON."""
    print(json.dumps(summary.to_dict(), indent=2))


def verify_cmd(args: Namespace) -> int:
    """
    Execute the verify command.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code
    """
    config = args.cli_config
    trusted_key_path = Path(args.trusted_key or config.trusted_key_path)
    output_json = args.json or config.default_output_format == "json"

    run = run_verification(Path(args.envelope), trusted_key_path)
    summary = build_summary(run)

    if output_json:
        print_summary_json(summary)
        if not summary.ok:
            print(f"Verification failed: {summary.error}", file=sys.stderr)
    else:
        print_summary_human(summary)

    if run.ok:
        logger.info("Verification passed")
    else:
        logger.warning("Verification failed: %s", summary.error_code)

    return exit_code_for(run)
