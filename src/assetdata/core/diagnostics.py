from __future__ import annotations

"""
Debug Diagnostics Reporter.

Collects the debug events of a render request and emits them through the
'assetdata.diagnostics' logger. Nothing is emitted unless debug mode is on.
"""

import json
import logging
from typing import Optional, Sequence

from assetdata.domain.tree_models import AssetData

DIAGNOSTICS_LOGGER_NAME = "assetdata.diagnostics"


class DiagnosticsReporter:
    """
    Receives diagnostic events from the resolver pipeline.

    Args:
        enabled: Emit events only when True.
        logger: Target logger; defaults to the diagnostics logger.
    """

    def __init__(self, enabled: bool = False, logger: Optional[logging.Logger] = None) -> None:
        self.enabled = enabled
        self._logger = logger or logging.getLogger(DIAGNOSTICS_LOGGER_NAME)

    def roots_found(self, roots: Sequence[str]) -> None:
        if self.enabled:
            self._logger.debug(f"Found {len(roots)} asset folders to scan: {list(roots)}")

    def root_missing(self, scan_base: str) -> None:
        if self.enabled:
            self._logger.debug(f"Asset folder not found or not a directory: {scan_base}")

    def unreadable_folder(self, path: str, error: OSError) -> None:
        if self.enabled:
            self._logger.warning(f"Unable to read folder location: {path} ({error})")

    def unreadable_file(self, path: str, error: OSError) -> None:
        if self.enabled:
            self._logger.warning(f"Unable to read structured data file: {path} ({error})")

    def final_output(self, result: AssetData) -> None:
        """Log the serialized template variables; serialization is skipped when disabled."""
        if self.enabled:
            rendered = json.dumps(result.to_context(), ensure_ascii=False, indent=2, default=str)
            self._logger.debug(f"Final output:\n{rendered}")
