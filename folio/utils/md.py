#!/usr/bin/env python3
"""
md.py
-------------------
Markdown file utilities for the Folio project.

Provides functions for splitting and joining Markdown files with YAML
frontmatter, including:
- Frontmatter extraction and splitting
- Reassembly of frontmatter and body
- Content hashing for change detection
- Word counts and reading time estimates

This module handles Markdown file structure only. YAML parsing lives in
folio.utils.frontmatter, body structure in folio.utils.markdown.
"""
from __future__ import annotations

# --- Standard library imports ---
import hashlib
import math
import re
from typing import List, Optional

FRONTMATTER_DELIMITER = "---"

# Default reading speed for reading time estimates
WORDS_PER_MINUTE = 250

_WORD_PATTERN = re.compile(r"\w[\w'’-]*")


# ----- YAML Frontmatter Parsing -----
def find_frontmatter_end(lines: List[str]) -> Optional[int]:
    """
    Find the index of the closing frontmatter delimiter.

    Args:
        lines: Document lines

    Returns:
        Index of the closing ``---`` line, or None if the document has no
        opening delimiter or the block is never closed
    """
    if not lines or lines[0].rstrip() != FRONTMATTER_DELIMITER:
        return None

    for i, line in enumerate(lines[1:], 1):
        if line.rstrip() == FRONTMATTER_DELIMITER:
            return i
    return None


def split_frontmatter(content: str) -> tuple[str, List[str]]:
    """
    Split markdown content into YAML frontmatter and body.

    Expected format:
        ---
        yaml: content
        ---

        Body content here...

    Args:
        content: Full markdown file content

    Returns:
        Tuple of (frontmatter_text, body_lines)
        - frontmatter_text: YAML content as string (empty if no frontmatter)
        - body_lines: List of body content lines

    Examples:
        >>> content = "---\\ntitle: Resume\\n---\\n\\nBody text"
        >>> fm, body = split_frontmatter(content)
        >>> fm
        'title: Resume'
        >>> body
        ['Body text']
    """
    lines = content.splitlines()

    frontmatter_end = find_frontmatter_end(lines)
    if frontmatter_end is None:
        return "", lines

    frontmatter_lines = lines[1:frontmatter_end]
    body_lines = lines[frontmatter_end + 1 :]

    # Remove empty lines at start of body
    while body_lines and body_lines[0].strip() == "":
        body_lines.pop(0)

    return "\n".join(frontmatter_lines), body_lines


def join_frontmatter(frontmatter_text: str, body: str) -> str:
    """
    Assemble a Markdown document from frontmatter YAML and a body.

    Args:
        frontmatter_text: YAML text (with or without trailing newline)
        body: Body text

    Returns:
        Full document text ending with a single newline

    Examples:
        >>> join_frontmatter("title: Resume\\n", "# Resume")
        '---\\ntitle: Resume\\n---\\n\\n# Resume\\n'
    """
    frontmatter_text = frontmatter_text.rstrip("\n")
    return (
        f"{FRONTMATTER_DELIMITER}\n{frontmatter_text}\n{FRONTMATTER_DELIMITER}\n\n"
        f"{body.rstrip()}\n"
    )


# ----- Content Hashing -----
def get_text_hash(text: str) -> str:
    """
    Compute MD5 hash of text content for change detection.

    Note: MD5 is used for change detection only, not cryptographic security.

    Args:
        text: Input string to hash

    Returns:
        Hexadecimal MD5 hash string

    Examples:
        >>> get_text_hash("Hello, world!")
        '6cd3556deb0da54bca060b4c39479839'
    """
    return hashlib.md5(text.encode("utf-8")).hexdigest()


# ----- Reading Statistics -----
def count_words(text: str) -> int:
    """
    Count words in prose text.

    Examples:
        >>> count_words("Dijkstra's algorithm is breadth-first search, weighted.")
        6
    """
    return len(_WORD_PATTERN.findall(text))


def estimate_reading_time(word_count: int, words_per_minute: int = WORDS_PER_MINUTE) -> float:
    """
    Estimate reading time in minutes, rounded up to one decimal.

    Args:
        word_count: Number of words
        words_per_minute: Reading speed

    Returns:
        Minutes as a float (0.0 for empty text)
    """
    if word_count <= 0:
        return 0.0
    return math.ceil(word_count * 10 / words_per_minute) / 10
