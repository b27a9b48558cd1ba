from __future__ import annotations

"""
Main Entry Point.

Allows running the CLI directly from a source checkout
(python src/assetdata/main.py ...).
"""

import os
import sys

# Make the 'src' directory importable when run as a script
BASE_DIR = os.path.dirname(os.path.abspath(__file__))
SRC_DIR = os.path.dirname(BASE_DIR)
if SRC_DIR not in sys.path:
    sys.path.insert(0, SRC_DIR)

from assetdata.interface.cli.app import main  # noqa: E402

if __name__ == "__main__":
    sys.exit(main())
