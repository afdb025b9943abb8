#!/usr/bin/env python3
"""
slugify.py
----------
Slug utilities for document identities.

Key Features:
    - Lowercase transformation
    - Accent/diacritic normalization (Pessi → pessi, Ärrä → arra)
    - Special character handling (apostrophes, parentheses, etc.)
    - Space to hyphen conversion
    - Date prefix removal for post filenames

Usage:
    from folio.utils.slugify import slugify, document_id_from_stem

    slugify("Rust Error Handling")  # "rust-error-handling"
    document_id_from_stem("2025-12-26-pathfinding-visualizer")  # "pathfinding-visualizer"
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
import re
import unicodedata

_DATE_PREFIX = re.compile(r"^\d{4}-\d{2}-\d{2}[-_]")


def slugify(text: str, max_length: int = 200) -> str:
    """
    Convert text to a URL-safe slug.

    Args:
        text: Input text to slugify
        max_length: Maximum slug length (default 200)

    Returns:
        Slugified string

    Examples:
        >>> slugify("Rust Error Handling")
        'rust-error-handling'
        >>> slugify("Ärrä & Öljy")
        'arra-and-oljy'
        >>> slugify("Pathfinding (A*) Visualizer")
        'pathfinding-a-visualizer'
    """
    if not text:
        return ""

    # Normalize unicode (decompose accents) and keep ASCII only
    text = unicodedata.normalize("NFKD", text)
    text = text.encode("ascii", "ignore").decode("ascii")

    text = text.lower()
    text = text.replace("'", "")
    text = re.sub(r"[(){}\[\]]", " ", text)
    text = text.replace("&", "and")
    text = text.replace("/", "-")
    text = re.sub(r"[\s_]+", "-", text)
    text = re.sub(r"[^a-z0-9-]", "", text)
    text = re.sub(r"-+", "-", text)
    text = text.strip("-")

    if len(text) > max_length:
        text = text[:max_length].rstrip("-")

    return text


def document_id_from_stem(stem: str) -> str:
    """
    Derive a document id from a filename stem.

    A leading ``YYYY-MM-DD-`` date prefix is dropped, the rest slugified.

    Examples:
        >>> document_id_from_stem("2025-12-26-pathfinding-visualizer")
        'pathfinding-visualizer'
        >>> document_id_from_stem("Resume")
        'resume'
    """
    return slugify(_DATE_PREFIX.sub("", stem))
