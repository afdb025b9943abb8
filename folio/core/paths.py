#!/usr/bin/env python3
"""
paths.py
-------------------
Path constants and configuration for the Folio project.

The project structure:
    ROOT/
    ├── folio/         # Toolkit code
    ├── content/       # Authored documents
    │   └── posts/     # Blog posts
    ├── logs/          # Application logs
    └── build/         # Exported index for the site generator

Outside a source checkout the root is the current working directory.
Every CLI command accepts options overriding these defaults.
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from pathlib import Path
from typing import Optional


def _get_project_root(package_file: Optional[Path] = None) -> Path:
    """
    Determine project root directory.

    In a source checkout (or editable install) this file sits at
    ROOT/folio/core/paths.py next to ROOT/content. An installed copy lives
    in site-packages, away from any content, so the current working
    directory is used as the root instead.

    Args:
        package_file: Location of this module (defaults to __file__)

    Returns:
        Path object for project root
    """
    current_file = Path(package_file or __file__).resolve()

    # paths.py -> core/ -> folio/ -> ROOT/
    checkout = current_file.parent.parent.parent
    if (checkout / "content").is_dir():
        return checkout

    return Path.cwd()


# ----- Project directory -----
ROOT: Path = _get_project_root()

# ---- Content ----
CONTENT_DIR = ROOT / "content"
POSTS_DIR = CONTENT_DIR / "posts"

# ---- Logs & Exports ----
LOG_DIR = ROOT / "logs"
EXPORT_DIR = ROOT / "build"
INDEX_JSON = EXPORT_DIR / "index.json"
