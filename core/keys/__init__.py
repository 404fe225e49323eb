"""
Trusted key loading.
"""

from .loader import load_trusted_key, parse_trusted_key

__all__ = ["load_trusted_key", "parse_trusted_key"]
