"""
Input file helpers.
"""

from .files import read_text

__all__ = ["read_text"]
