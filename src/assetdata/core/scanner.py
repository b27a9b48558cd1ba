from __future__ import annotations

"""
Asset Directory Scanner.

Walks an asset folder depth-first and builds an AssetTreeNode. Hidden entries
are skipped, output is sorted so repeated scans serialize identically, and
structured-data files can be inlined as parsed values.
"""

import os
from typing import Any, Callable, Dict, List, Optional, Tuple

from assetdata.core.diagnostics import DiagnosticsReporter
from assetdata.domain.config import ResolverConfig
from assetdata.domain.errors import StructuredDataError
from assetdata.domain.tree_models import AssetTreeNode, ScanResult
from assetdata.infra.fs import join_path, read_bytes
from assetdata.infra.yaml_parser import parse_structured_data

StructuredDataParser = Callable[[bytes], Any]

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def scan_directory(
        base_path: str,
        relative_name: str,
        remaining_depth: int,
        config: ResolverConfig,
        *,
        parser: Optional[StructuredDataParser] = None,
        reporter: Optional[DiagnosticsReporter] = None,
) -> ScanResult:
    """
    Scan base_path/relative_name into an asset tree.

    Args:
        base_path: Containing directory.
        relative_name: Directory name inside base_path; empty scans base_path itself.
        remaining_depth: Levels left to scan. Zero or less scans nothing.
        config: Active resolver configuration.
        parser: Structured-data parser; defaults to the YAML parser.
        reporter: Diagnostics collaborator for unreadable folders and files.

    Returns:
        ScanResult: The node, or None if the depth is exhausted or the path
                    is not a directory. An unreadable directory yields an
                    empty node; an unreadable structured-data file is left out.

    Raises:
        StructuredDataError: If an inlined file cannot be parsed.
    """
    if remaining_depth <= 0:
        return None

    full_path = join_path(base_path, relative_name)
    if not os.path.isdir(full_path):
        return None

    reporter = reporter or DiagnosticsReporter(enabled=config.debug_mode)
    node = _empty_node(config)

    try:
        entries = _list_visible_entries(full_path)
    except OSError as e:
        reporter.unreadable_folder(full_path, e)
        return node

    folder_names: List[str] = []
    structured: Dict[str, Any] = {}
    for name, is_dir in entries:
        if is_dir:
            folder_names.append(name)
        elif config.is_structured_data_file(name):
            file_path = join_path(full_path, name)
            try:
                data = read_bytes(file_path)
            except OSError as e:
                # Dangling links and unreadable files are left out of the tree
                reporter.unreadable_file(file_path, e)
                continue
            structured[name] = _parse_structured_file(file_path, data, parser)
        else:
            node.files.append(name)

    node.files.sort()
    for name in sorted(folder_names):
        node.folders[name] = scan_directory(
            full_path, name, remaining_depth - 1, config, parser=parser, reporter=reporter
        )
    if node.structured_data is not None:
        node.structured_data = dict(sorted(structured.items()))

    return node


def count_nodes(node: ScanResult) -> Dict[str, int]:
    """
    Count folders and files in a scanned tree.

    Returns:
        Dict[str, int]: {"folders": ..., "files": ..., "structured_data": ...}
    """
    totals = {"folders": 0, "files": 0, "structured_data": 0}
    if node is None:
        return totals

    totals["files"] += len(node.files)
    totals["structured_data"] += len(node.structured_data or {})
    for child in node.folders.values():
        totals["folders"] += 1
        sub = count_nodes(child)
        for key, value in sub.items():
            totals[key] += value
    return totals

# -----------------------------------------------------------------------------
# INTERNAL HELPERS
# -----------------------------------------------------------------------------

def _empty_node(config: ResolverConfig) -> AssetTreeNode:
    """Create a node with the structured-data slot set according to config."""
    return AssetTreeNode(
        files=[],
        folders={},
        structured_data={} if config.inline_structured_data else None,
    )


def _list_visible_entries(path: str) -> List[Tuple[str, bool]]:
    """
    List (name, is_dir) pairs for the non-hidden entries of a directory.

    The directory handle is closed before returning.
    """
    visible: List[Tuple[str, bool]] = []
    with os.scandir(path) as it:
        for entry in it:
            if entry.name.startswith("."):
                continue
            visible.append((entry.name, entry.is_dir()))
    return visible


def _parse_structured_file(path: str, data: bytes, parser: Optional[StructuredDataParser]) -> Any:
    """Parse the contents of one structured-data file."""
    if parser is None:
        return parse_structured_data(data, source=path)

    try:
        return parser(data)
    except StructuredDataError as e:
        if e.path is None:
            e.path = path
        raise

