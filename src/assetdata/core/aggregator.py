from __future__ import annotations

"""
Multi-Folder Aggregator.

Shapes the per-root scan results into the template output: flat for a single
asset root, keyed by effective root otherwise.
"""

from typing import Dict, List, Sequence, Tuple

from assetdata.domain.tree_models import AssetData, ScanResult


def aggregate(scanned: Sequence[Tuple[str, ScanResult]]) -> AssetData:
    """
    Build the AssetData output from (effective root, node) pairs.

    Args:
        scanned: One pair per configured asset root, in configured order.

    Returns:
        AssetData: Flat output for one root, mapping output for several.

    Raises:
        ValueError: If no roots were scanned.
    """
    if not scanned:
        raise ValueError("At least one asset root is required.")

    if len(scanned) == 1:
        root, node = scanned[0]
        return AssetData(asset_base=root, assets=node)

    bases: List[str] = []
    assets: Dict[str, ScanResult] = {}
    for root, node in scanned:
        bases.append(root)
        assets[root] = node
    return AssetData(asset_base=bases, assets=assets)
