from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line schema and translates parsed arguments into raw
site configuration overrides.
"""

import argparse
from typing import Any, Dict, List, Optional

from assetdata.domain.config import (
    KEY_ASSET_ROOTS,
    KEY_DEBUG_MODE,
    KEY_FOLDERIZE_NON_INDEX,
    KEY_LIMIT_BY_LOCATION,
    KEY_MAX_DEPTH,
    KEY_RENDER_YAML,
    KEY_SITE_FOLDER,
)

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the assetdata CLI.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog="assetdata",
        description="Print the asset tree template variables for a page as JSON.",
    )

    # --- Configuration Sources ---
    p.add_argument(
        "-c", "--config",
        dest="config_path",
        default=None,
        help="YAML site configuration file.",
    )
    p.add_argument(
        "-s", "--site-folder",
        dest="site_folder",
        default=None,
        help="Folder the asset roots are relative to (default: current directory).",
    )
    p.add_argument(
        "-a", "--assets",
        dest="asset_roots",
        default=None,
        help="Comma-separated asset roots (default: assets).",
    )

    # --- Page Selection ---
    p.add_argument(
        "-p", "--page",
        dest="page_id",
        default=None,
        help="Page identifier, e.g. 'blog/post1' or 'blog/index'.",
    )

    # --- Resolution Policy ---
    p.add_argument(
        "--max-depth",
        dest="max_depth",
        type=int,
        default=None,
        help="Maximum number of folder levels to scan.",
    )
    p.add_argument(
        "--limit",
        dest="limit_by_location",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Narrow the asset roots to the folder of the page (--no-limit scans whole roots).",
    )
    p.add_argument(
        "--folderize",
        dest="folderize_non_index",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Map non-index pages to a same-named folder (--no-folderize uses the parent folder).",
    )
    p.add_argument(
        "--render-yaml",
        dest="render_yaml",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Inline the parsed contents of .yml files.",
    )

    # --- Diagnostics ---
    p.add_argument(
        "--dump-config",
        action="store_true",
        help="Print the effective configuration and exit.",
    )
    p.add_argument(
        "--debug",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Enable diagnostic output and DEBUG logging.",
    )

    return p

# -----------------------------------------------------------------------------
# ARGUMENT MAPPING
# -----------------------------------------------------------------------------

def args_to_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """
    Translate parsed arguments into site configuration overrides.

    Only options given on the command line appear in the result.

    Args:
        args: Parsed command-line arguments.

    Returns:
        Dict[str, Any]: Overrides keyed by site config key.
    """
    overrides: Dict[str, Any] = {}

    if args.site_folder:
        overrides[KEY_SITE_FOLDER] = args.site_folder
    if args.asset_roots:
        roots = _split_csv(args.asset_roots)
        if roots:
            overrides[KEY_ASSET_ROOTS] = roots if len(roots) > 1 else roots[0]
    if args.max_depth is not None:
        overrides[KEY_MAX_DEPTH] = args.max_depth

    flag_keys = {
        "limit_by_location": KEY_LIMIT_BY_LOCATION,
        "folderize_non_index": KEY_FOLDERIZE_NON_INDEX,
        "render_yaml": KEY_RENDER_YAML,
        "debug": KEY_DEBUG_MODE,
    }
    for attr, key in flag_keys.items():
        value = getattr(args, attr)
        if value is not None:
            overrides[key] = value

    return overrides

# -----------------------------------------------------------------------------
# HELPERS
# -----------------------------------------------------------------------------

def _split_csv(value: Optional[str]) -> Optional[List[str]]:
    """Convert a comma-separated string into a list of non-empty items."""
    if value is None:
        return None
    parts = [x.strip() for x in value.split(",")]
    return [x for x in parts if x]
