#!/usr/bin/env python3
"""
document.py
-------------------
Dataclass representing a site document with YAML frontmatter.

A Document is one self-contained unit of authored content: the resume
page or a blog post. It pairs the frontmatter mapping, kept exactly as
parsed so that it survives a write/read round trip, with the Markdown
body.

The Document class provides:
- Parsing from text or file, with strict frontmatter rules
- Enforcement of the content model (title present, body non-empty)
- Typed access to the known fields
- Derived data for the site generator (outline, code blocks, links,
  word count, reading time, content hash)
- Serialization back to Markdown

Key Design:
- Immutable once loaded: the dataclass is frozen
- Unknown frontmatter fields are preserved, not dropped
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
import logging
from dataclasses import dataclass, field
from datetime import date
from functools import cached_property
from pathlib import Path
from typing import Any, Dict, List, Optional, TypedDict, Union

# --- Local imports ---
from folio.core.exceptions import (
    DocumentParseError,
    DocumentValidationError,
    ValidationError,
)
from folio.core.validators import DataValidator
from folio.utils import markdown, md
from folio.utils.frontmatter import dump_frontmatter, load_frontmatter
from folio.utils.slugify import document_id_from_stem, slugify

logger = logging.getLogger(__name__)


# ----- Type Definitions -----


class DocumentMetadata(TypedDict, total=False):
    """Typed view of document frontmatter."""

    # Required
    title: str

    # Optional
    date: Union[str, date]
    description: str
    author: str
    tags: List[str]
    draft: bool
    slug: str


PAGE = "page"
POST = "post"
POSTS_DIRNAME = "posts"


@dataclass(frozen=True)
class Document:
    """
    A content document parsed from Markdown with YAML frontmatter.

    Attributes:
        doc_id: Identity used for retrieval (e.g. 'resume')
        metadata: Frontmatter mapping exactly as parsed; treat as read-only
        body: Markdown body after the frontmatter
        kind: 'page' or 'post'
        file_path: Source file path if loaded from file
        frontmatter_raw: Original YAML text for reference

    Examples:
        >>> doc = Document.from_file(Path("content/resume.md"))
        >>> doc.title
        'Resume'
        >>> text = doc.to_markdown()
    """

    REQUIRED_FIELDS = ["title"]

    doc_id: str
    metadata: Dict[str, Any] = field(hash=False)
    body: str
    kind: str = PAGE
    file_path: Optional[Path] = field(default=None, compare=False)
    frontmatter_raw: str = field(default="", compare=False, repr=False)

    # ---- Construction Methods ----
    @classmethod
    def from_text(
        cls,
        text: str,
        doc_id: Optional[str] = None,
        file_path: Optional[Path] = None,
        kind: Optional[str] = None,
    ) -> Document:
        """
        Parse document text.

        Args:
            text: Full document text (frontmatter + body)
            doc_id: Explicit identity; defaults to the 'slug' field, then the
                file stem, then the slugified title
            file_path: Source path, used for identity and error messages
            kind: 'page' or 'post'; defaults to 'post' for files in a
                posts/ directory

        Returns:
            Parsed Document

        Raises:
            DocumentParseError: If the frontmatter block is missing or
                unterminated
            FrontmatterError: If the frontmatter YAML is malformed
            DocumentValidationError: If the content model is violated
        """
        source = file_path.name if file_path else "<text>"
        lines = text.splitlines()

        if not lines or lines[0].rstrip() != md.FRONTMATTER_DELIMITER:
            raise DocumentParseError(f"{source}: missing frontmatter block")
        if md.find_frontmatter_end(lines) is None:
            raise DocumentParseError(f"{source}: unterminated frontmatter block")

        frontmatter_raw, body_lines = md.split_frontmatter(text)
        metadata = load_frontmatter(frontmatter_raw)
        body = "\n".join(body_lines).rstrip()

        try:
            cls._validate(metadata, body)
        except ValidationError as e:
            raise DocumentValidationError(f"{source}: {e}") from e

        if kind is None:
            kind = POST if file_path and file_path.parent.name == POSTS_DIRNAME else PAGE

        if doc_id is None:
            slug = DataValidator.normalize_string(metadata.get("slug"))
            if slug:
                doc_id = slugify(slug)
            elif file_path is not None:
                doc_id = document_id_from_stem(file_path.stem)
            else:
                doc_id = slugify(str(metadata["title"]))

        logger.debug(f"Parsed document '{doc_id}' from {source}")

        return cls(
            doc_id=doc_id,
            metadata=metadata,
            body=body,
            kind=kind,
            file_path=file_path,
            frontmatter_raw=frontmatter_raw,
        )

    @classmethod
    def from_file(cls, file_path: Path, content_root: Optional[Path] = None) -> Document:
        """
        Read and parse a Markdown file.

        Args:
            file_path: Path to .md file
            content_root: Content directory the file belongs to; documents
                under content_root/posts are posts

        Returns:
            Parsed Document

        Raises:
            DocumentParseError: If the file cannot be read or parsed
            DocumentValidationError: If the content model is violated
        """
        try:
            text = file_path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise DocumentParseError(f"{file_path}: cannot read file: {e}") from e

        kind = None
        if content_root is not None:
            try:
                relative = file_path.relative_to(content_root)
            except ValueError:
                relative = None
            if relative is not None:
                kind = POST if relative.parts[0] == POSTS_DIRNAME else PAGE

        return cls.from_text(text, file_path=file_path, kind=kind)

    # ---- Validation ----
    @staticmethod
    def _validate(metadata: Dict[str, Any], body: str) -> None:
        """
        Enforce the content model.

        Raises:
            ValidationError: On the first violation found
        """
        DataValidator.validate_required_fields(metadata, Document.REQUIRED_FIELDS)

        if not isinstance(metadata["title"], str):
            raise ValidationError("Field 'title' must be a string")

        if "date" in metadata and metadata["date"] is not None:
            if DataValidator.normalize_date(metadata["date"]) is None:
                raise ValidationError(
                    f"Invalid date '{metadata['date']}': expected YYYY-MM-DD"
                )

        for name in ("description", "author", "slug"):
            value = metadata.get(name)
            if value is not None and not isinstance(value, str):
                raise ValidationError(f"Field '{name}' must be a string")

        tags = metadata.get("tags")
        if tags is not None:
            if not isinstance(tags, (str, list)) or (
                isinstance(tags, list) and not all(isinstance(t, str) for t in tags)
            ):
                raise ValidationError("Field 'tags' must be a string or list of strings")

        if "draft" in metadata:
            DataValidator.normalize_bool(metadata["draft"])

        if not body.strip():
            raise ValidationError("Document body is empty")

    # ---- Field Access ----
    @property
    def title(self) -> str:
        return str(self.metadata["title"]).strip()

    @property
    def date(self) -> Optional[date]:
        return DataValidator.normalize_date(self.metadata.get("date"))

    @property
    def description(self) -> Optional[str]:
        return DataValidator.normalize_string(self.metadata.get("description"))

    @property
    def author(self) -> Optional[str]:
        return DataValidator.normalize_string(self.metadata.get("author"))

    @property
    def tags(self) -> List[str]:
        return DataValidator.normalize_str_list(self.metadata.get("tags"))

    @property
    def draft(self) -> bool:
        return bool(DataValidator.normalize_bool(self.metadata.get("draft")))

    # ---- Derived Data ----
    @cached_property
    def outline(self) -> List[markdown.Section]:
        """Heading tree of the body."""
        return markdown.build_outline(self.body)

    def headings(self) -> List[markdown.Heading]:
        return markdown.extract_headings(self.body)

    def section(self, title: str) -> Optional[markdown.Section]:
        """
        Find a section by heading text anywhere in the outline.

        Examples:
            >>> post.section("Five Patterns for Error Variants").children
        """
        return markdown.find_section(self.outline, title)

    @cached_property
    def code_blocks(self) -> List[markdown.CodeBlock]:
        return markdown.extract_code_blocks(self.body)

    @cached_property
    def links(self) -> List[markdown.Link]:
        return markdown.extract_links(self.body)

    @cached_property
    def word_count(self) -> int:
        """Prose words in the body; fenced code is not counted."""
        return md.count_words(markdown.strip_code_blocks(self.body))

    @property
    def reading_time(self) -> float:
        return md.estimate_reading_time(self.word_count)

    @property
    def content_hash(self) -> str:
        return md.get_text_hash(self.to_markdown())

    # ---- Serialization ----
    def to_markdown(self) -> str:
        """
        Serialize back to frontmatter + body text.

        Parsing the result yields the same metadata mapping and body.
        """
        return md.join_frontmatter(dump_frontmatter(self.metadata), self.body)

    def to_dict(self) -> Dict[str, Any]:
        """
        JSON-friendly summary for the site generator index.

        Returns:
            Metadata fields plus derived data; dates as ISO strings
        """
        return {
            "id": self.doc_id,
            "kind": self.kind,
            "title": self.title,
            "date": self.date.isoformat() if self.date else None,
            "description": self.description,
            "author": self.author,
            "tags": self.tags,
            "draft": self.draft,
            "word_count": self.word_count,
            "reading_time": self.reading_time,
            "headings": [
                {"level": h.level, "text": h.text} for h in self.headings()
            ],
            "languages": sorted(
                {b.language for b in self.code_blocks if b.language}
            ),
            "content_hash": self.content_hash,
            "source": self.file_path.as_posix() if self.file_path else None,
        }
