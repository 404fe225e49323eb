"""
Envelope decoding.
"""

from .decoder import decode_envelope, load_envelope

__all__ = ["decode_envelope", "load_envelope"]
