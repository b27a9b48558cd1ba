from __future__ import annotations

"""
Unit tests for the Asset Tree Data Models.

Verifies serialization of nodes and of the aggregated output.
"""

from assetdata.domain.tree_models import AssetData, AssetTreeNode, serialize_node


def test_node_defaults_are_independent() -> None:
    a = AssetTreeNode()
    b = AssetTreeNode()
    a.files.append("x")
    assert b.files == []


def test_to_dict_nests_children_and_absent_children() -> None:
    leaf = AssetTreeNode(files=["b.png"])
    node = AssetTreeNode(files=["a.png"], folders={"img": leaf, "deep": None})

    assert node.to_dict() == {
        "files": ["a.png"],
        "folders": {"img": {"files": ["b.png"], "folders": {}}, "deep": None},
    }


def test_to_dict_includes_structured_data_when_enabled() -> None:
    node = AssetTreeNode(structured_data={"meta.yml": {"k": "v"}})
    assert node.to_dict()["structured_data"] == {"meta.yml": {"k": "v"}}

    empty = AssetTreeNode(structured_data={})
    assert empty.to_dict()["structured_data"] == {}


def test_to_dict_returns_copies() -> None:
    node = AssetTreeNode(files=["a"])
    out = node.to_dict()
    out["files"].append("b")
    assert node.files == ["a"]


def test_serialize_node_handles_absent() -> None:
    assert serialize_node(None) is None


def test_asset_data_multi_root_context() -> None:
    data = AssetData(asset_base=["a", "b"], assets={"a": AssetTreeNode(), "b": None})
    assert data.is_multi_root
    assert data.to_context() == {
        "asset_base": ["a", "b"],
        "assets": {"a": {"files": [], "folders": {}}, "b": None},
    }


def test_asset_data_single_root_context() -> None:
    data = AssetData(asset_base="assets", assets=AssetTreeNode(files=["a.png"]))
    assert not data.is_multi_root
    assert data.to_context() == {"asset_base": "assets", "assets": {"files": ["a.png"], "folders": {}}}
