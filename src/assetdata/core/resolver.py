from __future__ import annotations

"""
Asset Root Path Resolver.

Maps the current page identifier to the folder scanned under each asset root.
Pure string manipulation: nothing here touches the filesystem.
"""

from typing import Optional

from assetdata.domain.config import ResolverConfig
from assetdata.infra.fs import join_path

INDEX_PAGE_ID = "index"
INDEX_SUFFIX = "/index"


def page_segment(page_id: Optional[str], config: ResolverConfig) -> str:
    """
    Compute the sub-path a page contributes to every asset root.

    Args:
        page_id: Slash-separated page identifier, or None without a current page.
        config: Active resolver configuration.

    Returns:
        str: The segment to append; empty when the root is used as is.
    """
    if not config.limit_by_location or page_id is None or page_id == INDEX_PAGE_ID:
        return ""

    # Nested index pages own the folder they live in
    if page_id.endswith(INDEX_SUFFIX):
        return page_id[:-len(INDEX_SUFFIX)]

    if config.folderize_non_index:
        return page_id

    slash = page_id.rfind("/")
    return page_id[:slash] if slash >= 0 else ""


def resolve_effective_root(root: str, page_id: Optional[str], config: ResolverConfig) -> str:
    """
    Adjust an asset root for the current page.

    Examples with location limiting on:
        'index'       -> 'assets'
        'blog/index'  -> 'assets/blog'
        'blog/post1'  -> 'assets/blog/post1' (folderize) or 'assets/blog'
        'post1'       -> 'assets' when not folderizing

    Args:
        root: Configured asset root.
        page_id: Current page identifier or None.
        config: Active resolver configuration.

    Returns:
        str: The effective root.
    """
    segment = page_segment(page_id, config)
    if not segment:
        return root
    return join_path(root, segment)


def build_scan_base(site_base_folder: str, effective_root: str) -> str:
    """Join the site folder and an effective root into the path to scan."""
    return join_path(site_base_folder, effective_root)
