from __future__ import annotations

"""
Domain Exception Hierarchy.

Absent folders are never reported through exceptions; only malformed
content and unusable configuration are.
"""

from typing import Optional


class AssetDataError(Exception):
    """Base class for every error raised by the asset data subsystem."""


class StructuredDataError(AssetDataError):
    """
    Raised when a structured-data file cannot be parsed.

    Attributes:
        path: Filesystem path of the offending file, if known.
    """

    def __init__(self, message: str, path: Optional[str] = None) -> None:
        super().__init__(message)
        self.path = path

    def __str__(self) -> str:
        base = super().__str__()
        if self.path:
            return f"{self.path}: {base}"
        return base


class ConfigError(AssetDataError):
    """Raised when the configuration cannot be loaded or fails strict validation."""
