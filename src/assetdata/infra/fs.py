from __future__ import annotations

"""
FileSystem Infrastructure Layer.

Small path and file helpers shared by the resolver and the scanner. Paths are
joined with '/' so that resolved roots stay identical to what templates see.
"""

import os
from typing import Optional

# -----------------------------------------------------------------------------
# PATH COMPOSITION API
# -----------------------------------------------------------------------------

def join_path(base: str, child: str) -> str:
    """
    Join a child segment onto a base path with a single '/'.

    Trailing separators on the base are trimmed. An empty child returns the
    trimmed base followed by '/', matching a listing of the base itself.

    Args:
        base: Parent path.
        child: Relative segment.

    Returns:
        str: Combined path.
    """
    return base.rstrip("/") + "/" + child


def normalize_site_folder(path: Optional[str], fallback: str) -> str:
    """
    Expand user and environment shortcuts in a site folder path.

    Args:
        path: Raw configured path.
        fallback: Path to use when the value is empty.

    Returns:
        str: Expanded path (not made absolute).
    """
    p = (path or "").strip() or fallback
    return os.path.expandvars(os.path.expanduser(p))

# -----------------------------------------------------------------------------
# FILE ACCESS API
# -----------------------------------------------------------------------------

def read_bytes(path: str) -> bytes:
    """Read the full contents of a file."""
    with open(path, "rb") as f:
        return f.read()
