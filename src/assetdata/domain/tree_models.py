from __future__ import annotations

"""
Asset Tree Data Models.

Provides the recursive node used to describe a scanned asset folder and the
aggregated result handed to the template context.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Union

# -----------------------------------------------------------------------------
# STRUCTURAL COMPONENTS
# -----------------------------------------------------------------------------

@dataclass
class AssetTreeNode:
    """
    Contents of one scanned directory.

    Attributes:
        files: Sorted plain file names.
        folders: Subfolder name to child node, in ascending key order. A child
                 is None when the depth budget ran out before it was scanned.
        structured_data: File name to parsed content, or None when inlining
                         is disabled.
    """
    files: List[str] = field(default_factory=list)
    folders: Dict[str, Optional["AssetTreeNode"]] = field(default_factory=dict)
    structured_data: Optional[Dict[str, Any]] = None

    def to_dict(self) -> Dict[str, Any]:
        """
        Serialize the node into plain lists and dictionaries.

        Returns:
            Dict[str, Any]: Template-ready representation of the node.
        """
        out: Dict[str, Any] = {
            "files": list(self.files),
            "folders": {
                name: (child.to_dict() if child is not None else None)
                for name, child in self.folders.items()
            },
        }
        if self.structured_data is not None:
            out["structured_data"] = dict(self.structured_data)
        return out


ScanResult = Optional[AssetTreeNode]


def serialize_node(node: ScanResult) -> Optional[Dict[str, Any]]:
    """Serialize a node that may be absent."""
    return node.to_dict() if node is not None else None


# -----------------------------------------------------------------------------
# AGGREGATED OUTPUT
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class AssetData:
    """
    Final per-request output exposed to templates.

    Attributes:
        asset_base: The effective root (single root) or the list of effective
                    roots (multiple roots).
        assets: The node of the single root, or a mapping of effective root
                to node.
    """
    asset_base: Union[str, List[str]]
    assets: Union[ScanResult, Dict[str, ScanResult]]

    @property
    def is_multi_root(self) -> bool:
        return isinstance(self.asset_base, list)

    def to_context(self) -> Dict[str, Any]:
        """
        Build the two template variables.

        Returns:
            Dict[str, Any]: {"asset_base": ..., "assets": ...} with nodes serialized.
        """
        if isinstance(self.assets, dict):
            assets = {root: serialize_node(node) for root, node in self.assets.items()}
            return {"asset_base": list(self.asset_base), "assets": assets}

        return {"asset_base": self.asset_base, "assets": serialize_node(self.assets)}
