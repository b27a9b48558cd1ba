from __future__ import annotations

"""
Structured-Data Parser.

Thin wrapper over PyYAML used to inline the contents of structured-data
files into the asset tree.
"""

from typing import Any, Optional

import yaml

from assetdata.domain.errors import StructuredDataError


def parse_structured_data(data: bytes, source: Optional[str] = None) -> Any:
    """
    Parse raw YAML bytes into native Python values.

    Only the safe subset of YAML is accepted. An empty document parses to None.

    Args:
        data: Raw file contents.
        source: Optional path used to annotate errors.

    Returns:
        Any: The parsed document.

    Raises:
        StructuredDataError: If the content is not valid YAML.
    """
    try:
        return yaml.safe_load(data)
    except yaml.YAMLError as e:
        raise StructuredDataError(f"Malformed structured data: {e}", path=source) from e
