"""
CLI Main Entry Point

Parses command-line arguments and runs the verification.

Usage:
    python -m bob_cli <envelope.json> [--trusted-key PATH] [--json]
    python -m bob_cli --show-config

Environment Variables:
    BOB_TRUSTED_KEY_PATH    Trusted public key file (default: alice_public_key_for_verify)
    BOB_LOG_LEVEL           Log level (default: WARNING)
    BOB_LOG_FILE            Also write logs to this file
    BOB_OUTPUT_FORMAT       human or json (default: human)
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Sequence

from bob_cli import __version__
from bob_cli.commands import verify
from bob_cli.commands.verify import EXIT_RUNTIME_ERROR, EXIT_SUCCESS
from bob_cli.config import load_config


def setup_logging(level: str = "WARNING", log_file: str | None = None) -> None:
    """Configure logging for the CLI."""
    log_level = getattr(logging, level.upper(), logging.WARNING)

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]

    if log_file:
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(
        level=log_level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        handlers=handlers,
    )


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="bob-verify",
        description="Verify a signed JSON envelope against a trusted Ed25519 public key.",
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )
    parser.add_argument(
        "envelope",
        type=str,
        nargs="?",
        default=None,
        help="Path to the signed JSON envelope (e.g. alice.json)",
    )
    parser.add_argument(
        "--trusted-key", "-k",
        type=str,
        default=None,
        help="Path to the trusted public key file (overrides config)",
    )
    parser.add_argument(
        "--config", "-c",
        type=Path,
        default=None,
        help="Path to configuration file (default: ./bob.json or ~/.config/bob/config.json)",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Log level (overrides config)",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        default=False,
        help="Output machine-readable JSON report",
    )
    parser.add_argument(
        "--show-config",
        action="store_true",
        default=False,
        help="Print the effective configuration and exit",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """
    Main entry point for the CLI.

    Args:
        argv: Command-line arguments (defaults to sys.argv[1:])

    Returns:
        Exit code (0=success, 1=input or usage error, 2=verification failed)
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    # Load configuration
    try:
        config = load_config(args.config)
    except (OSError, ValueError) as e:
        print(f"Error loading configuration: {e}", file=sys.stderr)
        return EXIT_RUNTIME_ERROR

    if args.show_config:
        print(json.dumps(config.to_dict(), indent=2))
        return EXIT_SUCCESS

    if args.envelope is None:
        print("Usage: bob-verify <alice.json>", file=sys.stderr)
        return EXIT_RUNTIME_ERROR

    # Setup logging
    log_level = args.log_level or config.log_level
    try:
        setup_logging(level=log_level, log_file=config.log_file)
    except OSError as e:
        print(f"Error opening log file: {e}", file=sys.stderr)
        return EXIT_RUNTIME_ERROR

    # Attach config to args for commands to use
    args.cli_config = config

    try:
        return verify.verify_cmd(args)
    except KeyboardInterrupt:
        print("\nInterrupted.", file=sys.stderr)
        return EXIT_RUNTIME_ERROR


if __name__ == "__main__":
    sys.exit(main())
