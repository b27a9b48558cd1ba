from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

Puts 'src' on sys.path and provides a sample site folder shared by the
scanner, service and CLI tests.
"""

import os
import sys
from pathlib import Path
from typing import Any, Dict

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture
def raw_config_dict(tmp_path: Path) -> Dict[str, Any]:
    """
    Return a complete raw site configuration.

    Returns:
        Dict[str, Any]: Site config keyed like a site config.yml.
    """
    return {
        "assets_folder": "assets",
        "asset_data_site_folder": str(tmp_path),
        "asset_data_limit_by_location": True,
        "asset_data_max_depth": 3,
        "asset_data_render_yaml": False,
        "asset_data_debug_mode_enable": False,
        "asset_data_use_non_index_content_as_tld": True,
    }


@pytest.fixture
def site_folder(tmp_path: Path) -> Path:
    """
    Create a sample site with an asset folder.

    Structure:
    /site
      /assets
        logo.png
        .DS_Store
        /.cache
          junk.bin
        /blog
          banner.jpg
          meta.yml
          /post1
            hero.jpg
            gallery.yml
            /thumbs
              a.jpg
      /downloads
        manual.pdf
    """
    site = tmp_path / "site"
    assets = site / "assets"
    (assets / ".cache").mkdir(parents=True)
    (assets / ".cache" / "junk.bin").write_bytes(b"\x00")
    (assets / "logo.png").write_bytes(b"png")
    (assets / ".DS_Store").write_bytes(b"")

    blog = assets / "blog"
    (blog / "post1" / "thumbs").mkdir(parents=True)
    (blog / "banner.jpg").write_bytes(b"jpg")
    (blog / "meta.yml").write_text("title: Blog\ntags: [a, b]\n", encoding="utf-8")
    (blog / "post1" / "hero.jpg").write_bytes(b"jpg")
    (blog / "post1" / "gallery.yml").write_text("- one.jpg\n- two.jpg\n", encoding="utf-8")
    (blog / "post1" / "thumbs" / "a.jpg").write_bytes(b"jpg")

    downloads = site / "downloads"
    downloads.mkdir()
    (downloads / "manual.pdf").write_bytes(b"pdf")

    return site
