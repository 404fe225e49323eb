"""
CLI command modules.
"""

from bob_cli.commands import verify

__all__ = ["verify"]
