"""
bob-verify CLI

Command-line interface for verifying signed JSON envelopes.

Usage:
    python -m bob_cli alice.json
    python -m bob_cli alice.json --trusted-key ./alice_public_key_for_verify
    python -m bob_cli alice.json --json
"""

__version__ = "0.1.0"
