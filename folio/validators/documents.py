#!/usr/bin/env python3
"""
documents.py
------------
Well-formedness validation for Folio documents.

Unlike Document.from_text, which stops at the first problem, the
validator collects every issue it can find in a file and keeps going.

Validates:
- Frontmatter block presence and YAML syntax
- Frontmatter is a mapping with no duplicate keys
- Required fields (title) and known field types
- Unknown fields (warnings)
- Body is non-empty
- Every code fence is closed; fences carry a language hint (warning)
- Every link and image target is a syntactically valid URL
- Frontmatter survives a serialize/parse round trip

Usage:
    folio validate all
    folio validate frontmatter content/resume.md
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from dataclasses import dataclass, field
from datetime import date
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional

# --- Local imports ---
from folio.core.exceptions import DocumentParseError, FrontmatterError, ValidationError
from folio.core.logging_manager import FolioLogger, safe_logger
from folio.core.validators import DataValidator
from folio.dataclasses.document import Document
from folio.utils import markdown
from folio.utils.frontmatter import load_frontmatter
from folio.utils.md import find_frontmatter_end


CATEGORIES = ("frontmatter", "structure", "content", "fence", "link", "roundtrip")


@dataclass
class DocumentIssue:
    """Represents a validation issue in a document."""

    file_path: Path
    line_number: Optional[int]
    severity: str  # error, warning
    category: str  # one of CATEGORIES
    message: str
    suggestion: Optional[str] = None


@dataclass
class DocumentValidationReport:
    """Complete validation report."""

    files_checked: int = 0
    files_with_errors: int = 0
    files_with_warnings: int = 0
    total_errors: int = 0
    total_warnings: int = 0
    issues: List[DocumentIssue] = field(default_factory=list)

    def add_issue(self, issue: DocumentIssue) -> None:
        """Add an issue to the report."""
        self.issues.append(issue)
        if issue.severity == "error":
            self.total_errors += 1
        elif issue.severity == "warning":
            self.total_warnings += 1

    @property
    def has_errors(self) -> bool:
        return self.total_errors > 0

    @property
    def has_warnings(self) -> bool:
        return self.total_warnings > 0

    @property
    def is_healthy(self) -> bool:
        """Check if all files are healthy (no errors)."""
        return not self.has_errors


class DocumentValidator:
    """Validates Markdown documents with YAML frontmatter."""

    REQUIRED_FIELDS = ["title"]

    OPTIONAL_FIELDS = {
        "date": (str, date),
        "description": str,
        "author": str,
        "tags": (str, list),
        "slug": str,
    }

    # Checked with DataValidator.normalize_bool, as Document does
    FLAG_FIELDS = ["draft"]

    def __init__(
        self,
        content_dir: Path,
        logger: Optional[FolioLogger] = None,
        categories: Optional[Iterable[str]] = None,
    ):
        """
        Initialize document validator.

        Args:
            content_dir: Directory containing documents
            logger: Optional logger instance
            categories: Issue categories to report (default: all);
                'structure' is always reported
        """
        self.content_dir = content_dir
        self.logger = logger
        self.categories = set(categories) | {"structure"} if categories else set(CATEGORIES)
        unknown = self.categories - set(CATEGORIES)
        if unknown:
            raise ValueError(f"Unknown validation categories: {', '.join(sorted(unknown))}")
        self.report = DocumentValidationReport()

    # --- Helpers ---

    def _issue(
        self,
        issues: List[DocumentIssue],
        file_path: Path,
        line_number: Optional[int],
        severity: str,
        category: str,
        message: str,
        suggestion: Optional[str] = None,
    ) -> None:
        if category in self.categories:
            issues.append(
                DocumentIssue(
                    file_path=file_path,
                    line_number=line_number,
                    severity=severity,
                    category=category,
                    message=message,
                    suggestion=suggestion,
                )
            )

    @staticmethod
    def _find_field_line_number(frontmatter_text: str, field_name: str) -> int:
        """
        Document line where a top-level field appears (1 if not found).

        Accounts for the opening ``---`` delimiter.
        """
        for i, line in enumerate(frontmatter_text.split("\n"), start=1):
            if line.startswith(f"{field_name}:"):
                return i + 1
        return 1

    # --- Validation ---

    def validate_file(self, file_path: Path) -> List[DocumentIssue]:
        """
        Validate a single document.

        Args:
            file_path: Path to markdown file

        Returns:
            List of issues found in the file
        """
        issues: List[DocumentIssue] = []
        self.report.files_checked += 1

        try:
            content = file_path.read_text(encoding="utf-8")
        except UnicodeDecodeError as e:
            self._issue(
                issues, file_path, None, "error", "structure",
                f"File encoding error: {e}",
                "Ensure file is UTF-8 encoded",
            )
            return self._record(file_path, issues)

        lines = content.splitlines()
        frontmatter_end = find_frontmatter_end(lines)

        if frontmatter_end is None:
            opened = bool(lines) and lines[0].rstrip() == "---"
            self._issue(
                issues, file_path, 1, "error", "structure",
                "Unterminated frontmatter block" if opened else "Missing frontmatter block",
                "Enclose frontmatter between two '---' lines at the top of the file",
            )
            return self._record(file_path, issues)

        frontmatter_text = "\n".join(lines[1:frontmatter_end])
        body_start = frontmatter_end + 1
        while body_start < len(lines) and not lines[body_start].strip():
            body_start += 1
        body = "\n".join(lines[body_start:])

        metadata = self._validate_frontmatter(file_path, frontmatter_text, issues)
        self._validate_body(file_path, body, body_start, issues)

        if metadata is not None:
            self._validate_roundtrip(file_path, content, issues)

        return self._record(file_path, issues)

    def _record(
        self, file_path: Path, issues: List[DocumentIssue]
    ) -> List[DocumentIssue]:
        """Add a file's issues to the running report."""
        errors = sum(1 for i in issues if i.severity == "error")
        safe_logger(self.logger).log_document(
            "validate", file_path, {"errors": errors, "warnings": len(issues) - errors}
        )
        for issue in issues:
            self.report.add_issue(issue)
        if any(i.severity == "error" for i in issues):
            self.report.files_with_errors += 1
        elif any(i.severity == "warning" for i in issues):
            self.report.files_with_warnings += 1
        return issues

    def _validate_frontmatter(
        self, file_path: Path, frontmatter_text: str, issues: List[DocumentIssue]
    ) -> Optional[Dict[str, Any]]:
        """Validate frontmatter; returns the mapping if it parsed."""
        try:
            frontmatter = load_frontmatter(frontmatter_text)
        except FrontmatterError as e:
            self._issue(
                issues, file_path, e.line, "error", "frontmatter", str(e),
                "Check YAML formatting (indentation, colons, quotes, repeated keys)",
            )
            return None

        for field_name in self.REQUIRED_FIELDS:
            value = frontmatter.get(field_name)
            if field_name not in frontmatter:
                self._issue(
                    issues, file_path, 1, "error", "frontmatter",
                    f"Required field '{field_name}' missing",
                    f"Add '{field_name}: <value>' to frontmatter",
                )
            elif not isinstance(value, str) or not value.strip():
                self._issue(
                    issues, file_path,
                    self._find_field_line_number(frontmatter_text, field_name),
                    "error", "frontmatter",
                    f"Required field '{field_name}' is empty or not text",
                )

        if frontmatter.get("date") is not None:
            if DataValidator.normalize_date(frontmatter["date"]) is None:
                self._issue(
                    issues, file_path,
                    self._find_field_line_number(frontmatter_text, "date"),
                    "error", "frontmatter",
                    f"Invalid date format: '{frontmatter['date']}'",
                    "Use YYYY-MM-DD format (e.g., 2025-12-26)",
                )

        for field_key, expected_type in self.OPTIONAL_FIELDS.items():
            value = frontmatter.get(field_key)
            if value is None or isinstance(value, expected_type):
                continue
            expected = (
                expected_type.__name__
                if isinstance(expected_type, type)
                else " or ".join(t.__name__ for t in expected_type)
            )
            self._issue(
                issues, file_path,
                self._find_field_line_number(frontmatter_text, field_key),
                "error", "frontmatter",
                f"Field '{field_key}' has unexpected type: {type(value).__name__}",
                f"Expected: {expected}",
            )

        tags = frontmatter.get("tags")
        if isinstance(tags, list) and not all(isinstance(t, str) for t in tags):
            self._issue(
                issues, file_path,
                self._find_field_line_number(frontmatter_text, "tags"),
                "error", "frontmatter",
                "Field 'tags' must only contain strings",
            )

        for field_key in self.FLAG_FIELDS:
            if frontmatter.get(field_key) is None:
                continue
            try:
                DataValidator.normalize_bool(frontmatter[field_key])
            except ValidationError as e:
                self._issue(
                    issues, file_path,
                    self._find_field_line_number(frontmatter_text, field_key),
                    "error", "frontmatter",
                    f"Field '{field_key}' is not a boolean: {e}",
                    "Use true or false",
                )

        known_fields = (
            set(self.REQUIRED_FIELDS) | set(self.OPTIONAL_FIELDS) | set(self.FLAG_FIELDS)
        )
        unknown_fields = sorted(set(frontmatter) - known_fields)
        if unknown_fields:
            self._issue(
                issues, file_path, 1, "warning", "frontmatter",
                f"Unknown fields: {', '.join(unknown_fields)}",
                "These fields are preserved but not interpreted",
            )

        return frontmatter

    def _validate_body(
        self, file_path: Path, body: str, body_start: int, issues: List[DocumentIssue]
    ) -> None:
        """Validate body content, fences and links."""
        # body line n is document line n + body_start
        if not body.strip():
            self._issue(
                issues, file_path, body_start + 1, "error", "content",
                "Document body is empty",
                "Add content after the frontmatter",
            )
            return

        for span in markdown.scan_fences(body):
            if not span.is_closed:
                self._issue(
                    issues, file_path, span.open_line + body_start, "error", "fence",
                    f"Code fence '{span.marker}' is never closed",
                    f"Add a closing '{span.marker}' line after the code",
                )
            elif not span.info:
                self._issue(
                    issues, file_path, span.open_line + body_start, "warning", "fence",
                    "Code fence has no language hint",
                    f"Tag the fence, e.g. '{span.marker}python'",
                )

        for link in markdown.extract_links(body):
            if not markdown.is_valid_url(link.target):
                self._issue(
                    issues, file_path, link.line + body_start, "error", "link",
                    f"Invalid {link.kind} target: '{link.target}'",
                    "Use an absolute http(s) URL, a mailto: address or a relative path",
                )

    def _validate_roundtrip(
        self, file_path: Path, content: str, issues: List[DocumentIssue]
    ) -> None:
        """Check that serializing and re-parsing keeps metadata and body."""
        try:
            document = Document.from_text(content, file_path=file_path)
        except (DocumentParseError, ValidationError):
            # Already reported by the structural checks
            return

        try:
            reparsed = Document.from_text(document.to_markdown(), file_path=file_path)
        except (DocumentParseError, ValidationError) as e:
            self._issue(
                issues, file_path, None, "error", "roundtrip",
                f"Serialized document no longer parses: {e}",
            )
            return

        if reparsed.metadata != document.metadata:
            changed = sorted(
                k
                for k in set(document.metadata) | set(reparsed.metadata)
                if document.metadata.get(k) != reparsed.metadata.get(k)
            )
            self._issue(
                issues, file_path, 1, "error", "roundtrip",
                f"Frontmatter changes on round trip: {', '.join(changed)}",
            )
        if reparsed.body != document.body:
            self._issue(
                issues, file_path, None, "error", "roundtrip",
                "Body changes on round trip",
            )

    def validate_all(self) -> DocumentValidationReport:
        """
        Validate all markdown files in the content directory.

        Returns:
            Complete validation report
        """
        md_files = sorted(self.content_dir.glob("**/*.md"))

        if not md_files:
            safe_logger(self.logger).log_warning(
                f"No markdown files found in {self.content_dir}"
            )

        for md_file in md_files:
            self.validate_file(md_file)

        safe_logger(self.logger).log_operation(
            "validate_all",
            {
                "content_dir": str(self.content_dir),
                "files": self.report.files_checked,
                "errors": self.report.total_errors,
                "warnings": self.report.total_warnings,
            },
        )
        return self.report


def format_validation_report(report: DocumentValidationReport) -> str:
    """
    Format validation report as readable text.

    Args:
        report: Validation report to format

    Returns:
        Formatted report string
    """
    lines = []
    lines.append("\n" + "=" * 60)
    lines.append("DOCUMENT VALIDATION REPORT")
    lines.append("=" * 60)
    lines.append("")

    clean = report.files_checked - report.files_with_errors - report.files_with_warnings
    lines.append(f"Files Checked: {report.files_checked}")
    lines.append(f"✅ Clean Files: {clean}")
    lines.append(f"⚠️  Files with Warnings: {report.files_with_warnings}")
    lines.append(f"❌ Files with Errors: {report.files_with_errors}")
    lines.append("")
    lines.append(f"Total Warnings: {report.total_warnings}")
    lines.append(f"Total Errors: {report.total_errors}")
    lines.append("")

    if report.is_healthy:
        lines.append("✅ ALL FILES VALID")
    else:
        lines.append("❌ VALIDATION FAILED")
    lines.append("")

    if report.issues:
        issues_by_file: Dict[Path, List[DocumentIssue]] = {}
        for issue in report.issues:
            issues_by_file.setdefault(issue.file_path, []).append(issue)

        lines.append("ISSUES BY FILE:")
        lines.append("")

        for file_path in sorted(issues_by_file):
            file_issues = issues_by_file[file_path]
            icon = "❌" if any(i.severity == "error" for i in file_issues) else "⚠️"
            lines.append(f"{icon} {file_path.name}")

            for issue in file_issues:
                severity_icon = "❌" if issue.severity == "error" else "⚠️"
                line_info = f":{issue.line_number}" if issue.line_number else ""
                lines.append(f"   {severity_icon} [{issue.category}]{line_info} {issue.message}")
                if issue.suggestion:
                    lines.append(f"      💡 {issue.suggestion}")

            lines.append("")

    lines.append("=" * 60)

    return "\n".join(lines)
