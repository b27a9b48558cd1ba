from __future__ import annotations

"""
Configuration Domain Management.

Defines the immutable resolver configuration, the raw configuration keys
understood in a site config file, and the loader for YAML site configs.
"""

import logging
import os
from dataclasses import dataclass
from typing import Any, Dict, Tuple

import yaml

from assetdata.domain.errors import ConfigError

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# Constants & Defaults
# -----------------------------------------------------------------------------
DEFAULT_ASSET_ROOT = "assets"
DEFAULT_MAX_DEPTH = 3
DEFAULT_STRUCTURED_DATA_EXTENSIONS: Tuple[str, ...] = (".yml",)

# Raw site config keys
KEY_ASSET_ROOTS = "assets_folder"
KEY_SITE_FOLDER = "asset_data_site_folder"
KEY_LIMIT_BY_LOCATION = "asset_data_limit_by_location"
KEY_MAX_DEPTH = "asset_data_max_depth"
KEY_RENDER_YAML = "asset_data_render_yaml"
KEY_DEBUG_MODE = "asset_data_debug_mode_enable"
KEY_FOLDERIZE_NON_INDEX = "asset_data_use_non_index_content_as_tld"
KEY_YAML_EXTENSIONS = "asset_data_yaml_extensions"


# -----------------------------------------------------------------------------
# Configuration Models
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class ResolverConfig:
    """
    Immutable configuration for one render request.

    Attributes:
        asset_roots: Non-empty tuple of asset root paths, relative to the site folder.
        site_base_folder: Directory the asset roots are resolved against.
        max_depth: Number of directory levels to scan, root included.
        limit_by_location: Narrow each root to the folder matching the current page.
        inline_structured_data: Parse structured-data files into the tree.
        folderize_non_index: Treat non-index pages as owning a same-named folder.
        debug_mode: Emit diagnostic events.
        structured_data_extensions: Suffixes identifying structured-data files.
    """
    asset_roots: Tuple[str, ...] = (DEFAULT_ASSET_ROOT,)
    site_base_folder: str = "."
    max_depth: int = DEFAULT_MAX_DEPTH
    limit_by_location: bool = True
    inline_structured_data: bool = False
    folderize_non_index: bool = True
    debug_mode: bool = False
    structured_data_extensions: Tuple[str, ...] = DEFAULT_STRUCTURED_DATA_EXTENSIONS

    def is_structured_data_file(self, file_name: str) -> bool:
        """Check whether a file should be inlined instead of listed."""
        return self.inline_structured_data and file_name.endswith(self.structured_data_extensions)


def get_default_config() -> Dict[str, Any]:
    """
    Generate the default raw configuration.

    Returns:
        Dict[str, Any]: Default values keyed by site config key.
    """
    return {
        KEY_ASSET_ROOTS: DEFAULT_ASSET_ROOT,
        KEY_SITE_FOLDER: os.getcwd(),
        KEY_LIMIT_BY_LOCATION: True,
        KEY_MAX_DEPTH: DEFAULT_MAX_DEPTH,
        KEY_RENDER_YAML: False,
        KEY_DEBUG_MODE: False,
        KEY_FOLDERIZE_NON_INDEX: True,
        KEY_YAML_EXTENSIONS: list(DEFAULT_STRUCTURED_DATA_EXTENSIONS),
    }


# -----------------------------------------------------------------------------
# Persistence Logic
# -----------------------------------------------------------------------------
def load_config_file(path: str) -> Dict[str, Any]:
    """
    Load a YAML site configuration file.

    An empty file yields an empty mapping; unknown keys are kept so a full
    site config can be passed as is.

    Args:
        path: Path to the YAML file.

    Returns:
        Dict[str, Any]: The raw configuration mapping.

    Raises:
        ConfigError: If the file cannot be read, is not valid YAML, or its
                     top level is not a mapping.
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except OSError as e:
        raise ConfigError(f"Cannot read config file '{path}': {e}") from e
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in config file '{path}': {e}") from e

    if data is None:
        logger.debug(f"Config file '{path}' is empty. Using defaults.")
        return {}
    if not isinstance(data, dict):
        raise ConfigError(
            f"Config file '{path}' must contain a mapping, found {type(data).__name__}."
        )
    return data
