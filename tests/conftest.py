"""
conftest.py
-----------
Shared pytest fixtures for Folio tests.

Provides fixtures for:
- The real content directory
- Temporary content trees
- Sample document text
"""
import pytest
from pathlib import Path
from tempfile import TemporaryDirectory


# ----- Path Fixtures -----

@pytest.fixture
def project_root():
    """Repository root."""
    return Path(__file__).resolve().parent.parent


@pytest.fixture
def content_dir(project_root):
    """The authored content directory."""
    return project_root / "content"


@pytest.fixture
def tmp_dir():
    """Create a temporary directory for test file operations."""
    with TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def make_content(tmp_dir):
    """
    Factory writing documents into a temporary content tree.

    Usage:
        root = make_content({"resume.md": text, "posts/2025-01-01-a.md": text})
    """
    def _make(files):
        root = tmp_dir / "content"
        root.mkdir(exist_ok=True)
        for relative, text in files.items():
            path = root / relative
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(text, encoding="utf-8")
        return root

    return _make


# ----- Sample Markdown Content Fixtures -----

@pytest.fixture
def minimal_document():
    """Minimal valid document with only the required title."""
    return """---
title: Minimal
---

Just a body.
"""


@pytest.fixture
def post_document():
    """Post with all known frontmatter fields populated."""
    return """---
title: A Post About Graphs
date: 2025-12-26
description: Short description.
author: Joonas Pessi
tags:
  - algorithms
  - graphs
draft: false
---

# A Post About Graphs

Some intro text with a [link](https://example.com/graphs).

## Searching

### Breadth-First

```python
def bfs(start):
    return [start]
```

### Depth-First

Text.

## Summary

Done.
"""


@pytest.fixture
def draft_post_document():
    """Draft post."""
    return """---
title: Work In Progress
date: 2026-02-01
draft: true
---

Not ready yet.
"""
