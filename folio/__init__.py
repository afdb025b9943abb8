"""
Folio
=====

Resume and blog content for a personal site, with the toolkit that loads,
validates and indexes it.

Documents are Markdown files with YAML frontmatter under content/. An
external static-site generator renders them; this package only reads them.

Main Components:
    - dataclasses: Document record (frontmatter + body)
    - store: DocumentStore, retrieval by identity and JSON index export
    - validators: Well-formedness checks and reports
    - utils: Frontmatter, Markdown structure and slug helpers
    - core: Logging, exceptions, paths, data normalization

Example Usage:
    >>> from folio import DocumentStore, CONTENT_DIR
    >>> store = DocumentStore.from_directory(CONTENT_DIR)
    >>> store.get("resume").title
    'Resume'
"""

__version__ = "1.0.0"

from folio.core.paths import CONTENT_DIR, LOG_DIR
from folio.dataclasses.document import Document
from folio.store.manager import DocumentStore

__all__ = [
    "CONTENT_DIR",
    "LOG_DIR",
    "Document",
    "DocumentStore",
]
