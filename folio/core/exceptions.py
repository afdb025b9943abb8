#!/usr/bin/env python3
"""
exceptions.py
--------------------
Custom exception classes for the Folio project.

Exception Hierarchy:
    Exception (built-in)
    ├── DocumentParseError - Document text cannot be split or read
    │   └── FrontmatterError - YAML frontmatter is malformed
    ├── ValidationError - Data validation failures
    │   └── DocumentValidationError - Document invariant violations
    └── StoreError - Base for all document store errors
        ├── DocumentNotFoundError - Unknown document identity
        ├── DuplicateDocumentError - Two files resolve to the same identity
        └── ExportError - Index export failures

Usage:
    from folio.core.exceptions import DocumentParseError, StoreError

    try:
        store = DocumentStore.from_directory(CONTENT_DIR)
    except DocumentParseError as e:
        logger.error(f"Malformed document: {e}")
    except StoreError as e:
        logger.error(f"Store operation failed: {e}")
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from typing import Optional


class DocumentParseError(Exception):
    """
    Exception for document parsing failures.

    Raised when a document cannot be turned into a Document record:
    - File reading or encoding errors
    - Missing frontmatter block
    - Unterminated frontmatter block

    Examples:
        >>> raise DocumentParseError("resume.md: missing frontmatter block")
    """

    pass


class FrontmatterError(DocumentParseError):
    """
    Exception for malformed YAML frontmatter.

    Raised for invalid YAML syntax, frontmatter that is not a mapping,
    non-string keys and duplicate keys.

    Attributes:
        line: 1-based line within the document where the problem was
            detected, when known
    """

    def __init__(self, message: str, line: Optional[int] = None) -> None:
        super().__init__(message)
        self.line = line


class ValidationError(Exception):
    """
    Exception for data validation failures.

    Raised when input data fails validation checks:
    - Invalid date formats
    - Missing required fields
    - Type mismatches

    Examples:
        >>> raise ValidationError("Invalid date format: expected YYYY-MM-DD")
        >>> raise ValidationError("Required field 'title' missing or empty")
    """

    pass


class DocumentValidationError(ValidationError):
    """
    Exception for document invariant violations.

    Raised when a parsed document breaks the content model:
    - Title missing or empty
    - Body empty
    - Known field with the wrong type

    Examples:
        >>> raise DocumentValidationError("Document body is empty")
    """

    pass


class StoreError(Exception):
    """
    Base exception for document store errors.

    Catch this to handle any store error, or catch specific subclasses
    for more granular handling.

    See Also:
        DocumentNotFoundError, DuplicateDocumentError, ExportError
    """

    pass


class DocumentNotFoundError(StoreError):
    """
    Exception for lookups of an unknown document identity.

    Examples:
        >>> raise DocumentNotFoundError("No document with id 'cv'")
    """

    pass


class DuplicateDocumentError(StoreError):
    """
    Exception for two source files resolving to the same document id.

    Examples:
        >>> raise DuplicateDocumentError("Document id 'resume' defined twice")
    """

    pass


class ExportError(StoreError):
    """
    Exception for index export failures.

    Raised when writing the JSON index for the site generator fails:
    - Output directory not writable
    - Metadata that cannot be serialized

    Examples:
        >>> raise ExportError("Cannot write index: permission denied")
    """

    pass
