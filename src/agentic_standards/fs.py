"""
Filesystem utilities for the standards server.

The only primitive the rest of the package needs: read a whole markdown
document as UTF-8 in a single step, and split it into lines the same way
every time so search line numbers stay stable.
"""

import os
from pathlib import Path
from typing import Union

from .exceptions import DocumentNotFoundError


# =============================================================================
# Configuration Constants
# =============================================================================

# Documents are always decoded as UTF-8
ENCODING = "utf-8"


# =============================================================================
# Basic File Operations
# =============================================================================

def read_text(file_path: Union[str, Path], display_path: str = "") -> str:
    """
    Read the complete contents of a text file.

    The file is read in one round trip; nothing is cached, so every call
    sees the document as it is on disk right now.

    Args:
        file_path: Absolute or relative path to the file.
        display_path: Path to report in the error message (defaults to file_path).

    Returns:
        The full file contents.

    Raises:
        DocumentNotFoundError: If the file doesn't exist, isn't a regular
            file, or can't be read/decoded.
    """
    shown = display_path or str(file_path)

    if not os.path.exists(file_path) or not os.path.isfile(file_path):
        raise DocumentNotFoundError(shown)

    try:
        with open(file_path, "r", encoding=ENCODING) as f:
            return f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise DocumentNotFoundError(shown) from e


def split_lines(text: str) -> list[str]:
    """Split document text on newlines, keeping a trailing empty line if present."""
    return text.split("\n")
