"""
dataclasses package
-------------------
Dataclass definitions for site documents.

- Document: Markdown document with YAML frontmatter
"""
from folio.dataclasses.document import Document

__all__ = ["Document"]
