#!/usr/bin/env python3
"""
manager.py
----------
DocumentStore: the authored documents, held verbatim and retrievable by
identity.

The store loads every Markdown file under a content directory once.
Documents are immutable after loading; the store offers reads only,
plus a JSON index export for the external site generator.

Usage:
    from folio.store import DocumentStore
    from folio.core.paths import CONTENT_DIR

    store = DocumentStore.from_directory(CONTENT_DIR)
    resume = store.get("resume")
    for post in store.documents(kind="post"):
        print(post.date, post.title)
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
import json
from pathlib import Path
from typing import Dict, Iterable, Iterator, List, Optional

# --- Local imports ---
from folio.core.exceptions import (
    DocumentNotFoundError,
    DuplicateDocumentError,
    ExportError,
)
from folio.core.logging_manager import FolioLogger, safe_logger
from folio.dataclasses.document import PAGE, POST, Document


class DocumentStore:
    """
    Read-only collection of documents keyed by identity.

    Attributes:
        content_dir: Directory the documents were loaded from, if any
        logger: Optional logger instance
    """

    def __init__(
        self,
        documents: Iterable[Document] = (),
        content_dir: Optional[Path] = None,
        logger: Optional[FolioLogger] = None,
    ) -> None:
        """
        Build a store from parsed documents.

        Args:
            documents: Documents to hold
            content_dir: Source directory, used for relative paths in exports
            logger: Optional logger instance

        Raises:
            DuplicateDocumentError: If two documents share an id
        """
        self.content_dir = content_dir
        self.logger = logger
        self._documents: Dict[str, Document] = {}

        for document in documents:
            existing = self._documents.get(document.doc_id)
            if existing is not None:
                raise DuplicateDocumentError(
                    f"Document id '{document.doc_id}' defined by both "
                    f"{existing.file_path or '<text>'} and {document.file_path or '<text>'}"
                )
            self._documents[document.doc_id] = document

    @classmethod
    def from_directory(
        cls, content_dir: Path, logger: Optional[FolioLogger] = None
    ) -> DocumentStore:
        """
        Load every ``*.md`` file under a content directory.

        Args:
            content_dir: Content root; documents under ``posts/`` are posts
            logger: Optional logger instance

        Returns:
            Loaded DocumentStore

        Raises:
            FileNotFoundError: If content_dir does not exist
            DocumentParseError: If a file cannot be parsed
            DocumentValidationError: If a file violates the content model
            DuplicateDocumentError: If two files resolve to the same id
        """
        content_dir = Path(content_dir)
        log = safe_logger(logger)

        if not content_dir.is_dir():
            raise FileNotFoundError(f"Content directory not found: {content_dir}")

        md_files = sorted(content_dir.glob("**/*.md"))
        if not md_files:
            log.log_warning(f"No markdown files found in {content_dir}")

        documents = []
        for md_file in md_files:
            try:
                document = Document.from_file(md_file, content_root=content_dir)
            except Exception as e:
                log.log_error(e, {"operation": "load", "file": str(md_file)})
                raise
            log.log_document(
                "load", md_file, {"id": document.doc_id, "kind": document.kind}
            )
            documents.append(document)

        store = cls(documents, content_dir=content_dir, logger=logger)
        log.log_operation(
            "load_store",
            {"content_dir": str(content_dir), "documents": len(store)},
        )
        return store

    # ---- Retrieval ----
    def get(self, doc_id: str) -> Document:
        """
        Retrieve a document by identity.

        Args:
            doc_id: Document id (e.g. 'resume', 'pathfinding-visualizer')

        Returns:
            The document

        Raises:
            DocumentNotFoundError: If no document has that id
        """
        try:
            return self._documents[doc_id]
        except KeyError:
            known = ", ".join(sorted(self._documents)) or "none"
            raise DocumentNotFoundError(
                f"No document with id '{doc_id}' (known: {known})"
            ) from None

    def ids(self) -> List[str]:
        return sorted(self._documents)

    def documents(
        self, kind: Optional[str] = None, include_drafts: bool = False
    ) -> List[Document]:
        """
        List documents in listing order.

        Pages come first, sorted by title. Posts follow newest first,
        same-date posts by title; undated posts sort last.

        Args:
            kind: 'page', 'post' or None for both
            include_drafts: Whether to include documents marked draft

        Returns:
            Ordered list of documents
        """
        if kind not in (None, PAGE, POST):
            raise ValueError(f"Unknown document kind: {kind!r}")

        selected = [
            d
            for d in self._documents.values()
            if (kind is None or d.kind == kind) and (include_drafts or not d.draft)
        ]
        pages = sorted((d for d in selected if d.kind == PAGE), key=lambda d: d.title.lower())
        posts = sorted(
            (d for d in selected if d.kind == POST),
            key=lambda d: (
                d.date is None,
                -d.date.toordinal() if d.date else 0,
                d.title.lower(),
            ),
        )
        return pages + posts

    def __len__(self) -> int:
        return len(self._documents)

    def __contains__(self, doc_id: object) -> bool:
        return doc_id in self._documents

    def __iter__(self) -> Iterator[Document]:
        return iter(self.documents(include_drafts=True))

    # ---- Export ----
    def build_index(self, include_drafts: bool = False) -> List[Dict]:
        """
        JSON-friendly index of documents for the site generator.

        Source paths are made relative to the content directory when known.
        """
        index = []
        for document in self.documents(include_drafts=include_drafts):
            entry = document.to_dict()
            if self.content_dir is not None and document.file_path is not None:
                try:
                    entry["source"] = document.file_path.relative_to(self.content_dir).as_posix()
                except ValueError:
                    pass
            index.append(entry)
        return index

    def export_index(self, output_path: Path, include_drafts: bool = False) -> int:
        """
        Write the JSON index to a file.

        Args:
            output_path: Destination JSON file; parent directories are created
            include_drafts: Whether to include drafts

        Returns:
            Number of documents written

        Raises:
            ExportError: If the index cannot be written
        """
        log = safe_logger(self.logger)
        index = self.build_index(include_drafts=include_drafts)

        try:
            output_path.parent.mkdir(parents=True, exist_ok=True)
            output_path.write_text(
                json.dumps({"documents": index}, indent=2, ensure_ascii=False) + "\n",
                encoding="utf-8",
            )
        except (OSError, TypeError, ValueError) as e:
            log.log_error(e, {"operation": "export_index", "output": str(output_path)})
            raise ExportError(f"Cannot write index to {output_path}: {e}") from e

        log.log_operation(
            "export_index", {"output": str(output_path), "documents": len(index)}
        )
        return len(index)
