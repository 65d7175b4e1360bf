"""
System utilities module.

Provides filesystem removal helpers and log sanitization.

Security:
    Paths come from the filesystem being cleaned and may contain control
    characters; sanitize them before logging.
"""

import re
import shutil
from pathlib import Path
from typing import Any

from config import LOG_VALUE_MAX_LENGTH


# ============================================================================
# Security: Log Sanitization
# ============================================================================

ANSI_ESCAPE_PATTERN = re.compile(r'\x1b\[[0-9;]*m')
CONTROL_CHAR_PATTERN = re.compile(r'[\x00-\x08\x0b-\x0c\x0e-\x1f\x7f-\x9f]')


def sanitize_for_log(value: Any) -> str:
    """
    Sanitize values before logging to prevent log injection attacks.

    Removes control characters that could manipulate log output:
    - Newlines (\\n, \\r) - prevent log splitting
    - ANSI escape codes - prevent terminal manipulation
    - Null bytes - prevent log truncation

    Order of operations:
    1. Replace newlines with spaces
    2. Remove ANSI escape sequences
    3. Remove other control characters

    Args:
        value: Any value to be logged

    Returns:
        Sanitized string safe for logging

    Examples:
        >>> sanitize_for_log("normal text")
        'normal text'
        >>> sanitize_for_log("line1\\nline2")
        'line1 line2'
        >>> sanitize_for_log("\\x1b[31mred\\x1b[0m")
        'red'
    """
    if value is None:
        return "None"

    text = str(value)

    # Newlines become spaces, not just disappear
    text = text.replace('\n', ' ').replace('\r', ' ')

    text = ANSI_ESCAPE_PATTERN.sub('', text)
    text = CONTROL_CHAR_PATTERN.sub('', text)

    # Limit length for logs (prevent log flooding)
    if len(text) > LOG_VALUE_MAX_LENGTH:
        text = text[:LOG_VALUE_MAX_LENGTH - 3] + "..."

    return text


# ============================================================================
# Filesystem Removal
# ============================================================================

def remove_path(path: Path) -> None:
    """
    Remove a matched directory.

    Symlinks are unlinked without touching their target. Real directories
    are removed recursively. A failure part way through leaves whatever
    was already removed deleted.

    Args:
        path: Directory (or symlink to a directory) to remove

    Raises:
        OSError: If the removal fails (permission denied, in use, vanished)
    """
    if path.is_symlink():
        path.unlink()
    else:
        shutil.rmtree(path)
