from __future__ import annotations

"""
AssetData.

Exposes the contents of asset folders as a navigable tree so that templates
can branch on the presence of files and folders.
"""

__version__ = "1.0.0"
