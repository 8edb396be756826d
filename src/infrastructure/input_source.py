"""Reading raw homework text from a file or stdin."""

import sys
from pathlib import Path

from loguru import logger

from domain.exceptions import InputSourceError

STDIN_MARKER = "-"


def read_input(path: str | Path) -> str:
    """
    Read the whole homework text.

    Args:
        path: File path, or "-" for standard input

    Returns:
        Raw text as UTF-8
    """
    logger.debug(f"Reading homework from {'stdin' if str(path) == STDIN_MARKER else path}")
    try:
        if str(path) == STDIN_MARKER:
            return sys.stdin.read()
        return Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise InputSourceError(f"Failed to read input {path}: {e}") from e
