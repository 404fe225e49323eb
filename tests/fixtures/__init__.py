"""
Test fixtures package for bob-verify tests.

This package provides factory functions for creating test objects.

Usage:
    from fixtures import make_envelope, make_signing_key

    def test_something():
        envelope = make_envelope(message="hi", include_public_key=True)
"""

from .common import (
    ALICE_SEED,
    MALLORY_SEED,
    flip_bit,
    make_envelope,
    make_envelope_dict,
    make_envelope_json,
    make_signing_key,
    make_trusted_key_text,
    public_key_bytes,
    sign_message,
    write_text,
)

__all__ = [
    "ALICE_SEED",
    "MALLORY_SEED",
    "flip_bit",
    "make_envelope",
    "make_envelope_dict",
    "make_envelope_json",
    "make_signing_key",
    "make_trusted_key_text",
    "public_key_bytes",
    "sign_message",
    "write_text",
]
