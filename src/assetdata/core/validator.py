from __future__ import annotations

"""
Configuration Validation Service.

Turns a raw site configuration mapping into a ResolverConfig. Values are
coerced where the intent is clear (e.g. 'yes' for a flag) and every coercion
or fallback is reported as a warning. In strict mode mismatches raise instead.
"""

import logging
import os
from typing import Any, Dict, List, Mapping, Tuple

from assetdata.domain.config import (
    DEFAULT_ASSET_ROOT,
    DEFAULT_STRUCTURED_DATA_EXTENSIONS,
    KEY_ASSET_ROOTS,
    KEY_DEBUG_MODE,
    KEY_FOLDERIZE_NON_INDEX,
    KEY_LIMIT_BY_LOCATION,
    KEY_MAX_DEPTH,
    KEY_RENDER_YAML,
    KEY_SITE_FOLDER,
    KEY_YAML_EXTENSIONS,
    ResolverConfig,
    get_default_config,
)
from assetdata.domain.errors import ConfigError
from assetdata.infra.fs import normalize_site_folder

logger = logging.getLogger(__name__)


# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def validate_config(
        config: Any,
        *,
        strict: bool = False,
) -> Tuple[ResolverConfig, List[str]]:
    """
    Validate and normalize a raw configuration mapping.

    Missing keys take their defaults. Asset roots may be a single string or a
    list and always come out as a non-empty tuple.

    Args:
        config: Raw configuration (usually the parsed site config).
        strict: Raise ConfigError on type mismatch instead of coercing.

    Returns:
        Tuple[ResolverConfig, List[str]]: The configuration and the warnings collected.
    """
    warnings: List[str] = []
    defaults = get_default_config()

    if config is None:
        config = {}
    if not isinstance(config, Mapping):
        msg = f"Invalid config type: expected mapping, received {type(config).__name__}."
        if strict:
            raise ConfigError(msg)
        warnings.append(f"{msg} Using defaults.")
        logger.warning(msg)
        config = {}

    merged: Dict[str, Any] = dict(defaults)
    merged.update({k: v for k, v in config.items() if v is not None})

    bool_fields = {
        KEY_LIMIT_BY_LOCATION: "limit_by_location",
        KEY_RENDER_YAML: "inline_structured_data",
        KEY_FOLDERIZE_NON_INDEX: "folderize_non_index",
        KEY_DEBUG_MODE: "debug_mode",
    }
    values: Dict[str, Any] = {}
    for key, attr in bool_fields.items():
        values[attr] = _as_bool(merged[key], defaults[key], key, warnings, strict)

    values["max_depth"] = _as_int(merged[KEY_MAX_DEPTH], defaults[KEY_MAX_DEPTH], KEY_MAX_DEPTH, warnings, strict)
    if values["max_depth"] <= 0:
        warnings.append(f"Field '{KEY_MAX_DEPTH}' is {values['max_depth']}; no folders will be scanned.")

    values["asset_roots"] = _as_roots(merged[KEY_ASSET_ROOTS], warnings, strict)

    site_folder = _as_str(merged[KEY_SITE_FOLDER], defaults[KEY_SITE_FOLDER], KEY_SITE_FOLDER, warnings, strict)
    values["site_base_folder"] = normalize_site_folder(site_folder, os.getcwd())

    values["structured_data_extensions"] = _as_extensions(merged[KEY_YAML_EXTENSIONS], warnings, strict)

    return ResolverConfig(**values), warnings


# -----------------------------------------------------------------------------
# PRIVATE HELPERS: TYPE COERCION
# -----------------------------------------------------------------------------

def _fail(msg: str, warnings: List[str], strict: bool) -> None:
    if strict:
        raise ConfigError(msg)
    warnings.append(f"{msg} Using fallback.")


def _as_str(value: Any, fallback: str, field: str, warnings: List[str], strict: bool) -> str:
    """Validate and strip string inputs."""
    if isinstance(value, str):
        v = value.strip()
        return v if v else fallback
    _fail(f"Invalid field '{field}': expected str, received {type(value).__name__}.", warnings, strict)
    return fallback


def _as_bool(value: Any, fallback: bool, field: str, warnings: List[str], strict: bool) -> bool:
    """Coerce flags given as numbers or keywords into booleans."""
    if isinstance(value, bool):
        return value

    if not strict:
        if isinstance(value, (int, float)) and value in (0, 1):
            warnings.append(f"Field '{field}' converted from number {value} to bool.")
            return bool(value)
        if isinstance(value, str):
            s = value.strip().lower()
            if s in ("true", "1", "yes", "y", "on"):
                warnings.append(f"Field '{field}' converted from '{value}' to True.")
                return True
            if s in ("false", "0", "no", "n", "off"):
                warnings.append(f"Field '{field}' converted from '{value}' to False.")
                return False

    _fail(f"Invalid field '{field}': expected bool, received {type(value).__name__}.", warnings, strict)
    return fallback


def _as_int(value: Any, fallback: int, field: str, warnings: List[str], strict: bool) -> int:
    """Coerce integer inputs, accepting numeric strings in lenient mode."""
    if isinstance(value, int) and not isinstance(value, bool):
        return value

    if not strict and isinstance(value, str):
        try:
            parsed = int(value.strip())
        except ValueError:
            pass
        else:
            warnings.append(f"Field '{field}' converted from '{value}' to {parsed}.")
            return parsed

    _fail(f"Invalid field '{field}': expected int, received {type(value).__name__}.", warnings, strict)
    return fallback


def _as_roots(value: Any, warnings: List[str], strict: bool) -> Tuple[str, ...]:
    """Normalize one root or a list of roots into a non-empty tuple."""
    if isinstance(value, str):
        items: List[Any] = [value]
    elif isinstance(value, (list, tuple)):
        items = list(value)
    else:
        _fail(
            f"Invalid field '{KEY_ASSET_ROOTS}': expected str or list, received {type(value).__name__}.",
            warnings, strict,
        )
        return (DEFAULT_ASSET_ROOT,)

    roots: List[str] = []
    for item in items:
        if isinstance(item, str) and item.strip():
            roots.append(item.strip())
        else:
            _fail(f"Invalid entry in '{KEY_ASSET_ROOTS}': {item!r}.", warnings, strict)

    if not roots:
        _fail(f"Field '{KEY_ASSET_ROOTS}' is empty.", warnings, strict)
        return (DEFAULT_ASSET_ROOT,)
    return tuple(roots)


def _as_extensions(value: Any, warnings: List[str], strict: bool) -> Tuple[str, ...]:
    """Normalize structured-data extensions so each starts with a dot."""
    if isinstance(value, str):
        value = [value]
    if not isinstance(value, (list, tuple)):
        _fail(
            f"Invalid field '{KEY_YAML_EXTENSIONS}': expected list, received {type(value).__name__}.",
            warnings, strict,
        )
        return DEFAULT_STRUCTURED_DATA_EXTENSIONS

    exts: List[str] = []
    for item in value:
        if not isinstance(item, str) or not item.strip():
            _fail(f"Invalid entry in '{KEY_YAML_EXTENSIONS}': {item!r}.", warnings, strict)
            continue
        ext = item.strip()
        exts.append(ext if ext.startswith(".") else f".{ext}")

    return tuple(exts) if exts else DEFAULT_STRUCTURED_DATA_EXTENSIONS
