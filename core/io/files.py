"""
Input file reading.

Both inputs are small UTF-8 text files read once per verification. Read
failures come back as IO_ERROR outcomes rather than exceptions.
"""

from __future__ import annotations

import logging
from pathlib import Path

from core.schemas.errors import VerifyError
from core.schemas.verification import Outcome


logger = logging.getLogger(__name__)


def read_text(path: str | Path, label: str) -> Outcome[str]:
    """
    Read a whole file as UTF-8 text.

    Args:
        path: File to read
        label: What the file holds, used in the error message

    Returns:
        Outcome with the file content, or an IO_ERROR
    """
    path = Path(path)
    try:
        content = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        logger.debug("Failed to read %s from %s: %s", label, path, e)
        return Outcome[str].failure(
            VerifyError.io_error(f"read {label} file error: {e}", path=str(path))
        )

    logger.debug("Read %s from %s (%d chars)", label, path, len(content))
    return Outcome[str].success(content)
