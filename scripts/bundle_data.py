"""
bundle_data.py

Bundle the per-bank records under `data/` into a single `data.json`.

Both paths are resolved against the repository root (the parent of this
script's directory), not the current working directory:

    <repo>/data/<country>/<bank-id>/data.json   -> input
    <repo>/data.json                            -> output

Usage:
    poetry run python scripts/bundle_data.py
"""

from __future__ import annotations

import sys
from pathlib import Path

from mxm.werotracker.bundle.cli import main

ROOT_DIR = Path(__file__).resolve().parent.parent


if __name__ == "__main__":
    sys.exit(main(ROOT_DIR))
