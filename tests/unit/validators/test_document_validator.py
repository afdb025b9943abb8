"""
test_document_validator.py
--------------------------
Unit tests for DocumentValidator and its report.
"""
from pathlib import Path

import pytest

from folio.validators import (
    DocumentIssue,
    DocumentValidationReport,
    DocumentValidator,
    format_validation_report,
)


def _validate(make_content, text, name="doc.md", categories=None):
    root = make_content({name: text})
    validator = DocumentValidator(root, categories=categories)
    return validator.validate_file(root / name), validator.report


def _messages(issues):
    return [i.message for i in issues]


class TestStructure:
    """Tests for frontmatter block structure."""

    def test_valid_document(self, make_content, post_document):
        issues, report = _validate(make_content, post_document)
        assert issues == []
        assert report.is_healthy
        assert report.files_checked == 1

    def test_missing_frontmatter(self, make_content):
        issues, _ = _validate(make_content, "# Title\n\nBody")
        assert len(issues) == 1
        assert issues[0].category == "structure"
        assert issues[0].message == "Missing frontmatter block"
        assert issues[0].line_number == 1

    def test_unterminated_frontmatter(self, make_content):
        issues, _ = _validate(make_content, "---\ntitle: T\n\nBody")
        assert _messages(issues) == ["Unterminated frontmatter block"]

    def test_encoding_error(self, make_content, tmp_dir):
        root = make_content({})
        path = root / "latin1.md"
        path.write_bytes("---\ntitle: Ärrä\n---\n\nBody\n".encode("latin-1"))
        issues = DocumentValidator(root).validate_file(path)
        assert issues[0].category == "structure"
        assert "encoding" in issues[0].message

    def test_structure_always_reported(self, make_content):
        issues, _ = _validate(make_content, "no frontmatter", categories=["link"])
        assert [i.category for i in issues] == ["structure"]


class TestFrontmatterChecks:
    """Tests for frontmatter content checks."""

    def test_duplicate_key_line(self, make_content):
        text = "---\ntitle: A\nauthor: B\ntitle: C\n---\n\nBody\n"
        issues, _ = _validate(make_content, text)
        assert len(issues) == 1
        assert issues[0].category == "frontmatter"
        assert "Duplicate" in issues[0].message
        assert issues[0].line_number == 4

    def test_invalid_yaml(self, make_content):
        issues, report = _validate(make_content, "---\ntitle: [oops\n---\n\nBody\n")
        assert issues[0].category == "frontmatter"
        assert "Invalid YAML" in issues[0].message
        assert report.files_with_errors == 1

    def test_missing_title(self, make_content):
        issues, _ = _validate(make_content, "---\nauthor: A\n---\n\nBody\n")
        assert "Required field 'title' missing" in _messages(issues)

    def test_empty_title_line(self, make_content):
        issues, _ = _validate(make_content, "---\nauthor: A\ntitle: ''\n---\n\nBody\n")
        empty = [i for i in issues if "empty or not text" in i.message]
        assert len(empty) == 1
        assert empty[0].line_number == 3

    def test_invalid_date(self, make_content):
        issues, _ = _validate(make_content, "---\ntitle: T\ndate: 26/12/2025\n---\n\nBody\n")
        assert any("Invalid date format" in m for m in _messages(issues))

    def test_impossible_date_reported(self, make_content):
        """An unquoted date that is not a calendar day is an issue, not a crash."""
        text = "---\ntitle: T\ndate: 2025-02-30\n---\n\nBody\n"
        issues, report = _validate(make_content, text)
        assert len(issues) == 1
        assert issues[0].category == "frontmatter"
        assert issues[0].line_number == 3
        assert "2025-02-30" in issues[0].message
        assert report.files_with_errors == 1

    @pytest.mark.parametrize("value", ["'yes'", "'off'", "1", "0", "true"])
    def test_draft_spellings_accepted(self, make_content, value):
        """Draft values Document accepts are not flagged."""
        issues, _ = _validate(make_content, f"---\ntitle: T\ndraft: {value}\n---\n\nBody\n")
        assert issues == []

    def test_bad_draft(self, make_content):
        """Draft values Document rejects are errors."""
        issues, _ = _validate(make_content, "---\ntitle: T\ndraft: maybe\n---\n\nBody\n")
        assert len(issues) == 1
        assert "not a boolean" in issues[0].message
        assert issues[0].line_number == 3

    def test_wrong_type(self, make_content):
        issues, _ = _validate(make_content, "---\ntitle: T\nauthor: [a, b]\n---\n\nBody\n")
        issue = next(i for i in issues if "author" in i.message)
        assert issue.suggestion == "Expected: str"
        assert issue.line_number == 3

    def test_non_string_tags(self, make_content):
        issues, _ = _validate(make_content, "---\ntitle: T\ntags: [1, 2]\n---\n\nBody\n")
        assert "Field 'tags' must only contain strings" in _messages(issues)

    def test_unknown_fields_warn(self, make_content):
        issues, report = _validate(make_content, "---\ntitle: T\nlayout: wide\n---\n\nBody\n")
        assert len(issues) == 1
        assert issues[0].severity == "warning"
        assert "layout" in issues[0].message
        assert report.is_healthy
        assert report.files_with_warnings == 1


class TestBodyChecks:
    """Tests for body, fence and link checks."""

    def test_empty_body(self, make_content):
        issues, _ = _validate(make_content, "---\ntitle: T\n---\n")
        assert [(i.category, i.message) for i in issues] == [("content", "Document body is empty")]

    def test_unclosed_fence_line(self, make_content):
        text = "---\ntitle: T\n---\n\nIntro\n\n```rust\nfn main() {}\n"
        issues, _ = _validate(make_content, text)
        fence = [i for i in issues if i.category == "fence"]
        assert len(fence) == 1
        assert fence[0].severity == "error"
        assert fence[0].line_number == 7

    def test_fence_without_language_warns(self, make_content):
        text = "---\ntitle: T\n---\n\n```\nplain\n```\n"
        issues, report = _validate(make_content, text)
        assert [(i.category, i.severity) for i in issues] == [("fence", "warning")]
        assert report.is_healthy

    def test_invalid_link_line(self, make_content):
        text = "---\ntitle: T\n---\n\nFirst paragraph.\n\nSee [bad](https://) here.\n"
        issues, _ = _validate(make_content, text)
        link = [i for i in issues if i.category == "link"]
        assert len(link) == 1
        assert link[0].line_number == 7
        assert "'https://'" in link[0].message

    def test_invalid_image(self, make_content):
        text = "---\ntitle: T\n---\n\n![grid](ftp://example.com/grid.png)\n"
        issues, _ = _validate(make_content, text)
        assert any(i.message.startswith("Invalid image target") for i in issues)

    @pytest.mark.parametrize(
        "target", ["file:///etc/passwd", "javascript:alert(1)", "vbscript:msgbox"]
    )
    def test_unsafe_scheme_links_reported(self, make_content, target):
        """Links markdown-it would silently drop are still checked."""
        text = f"---\ntitle: T\n---\n\nsee [a]({target})\n"
        issues, _ = _validate(make_content, text, categories=["link"])
        assert [i.category for i in issues] == ["link"]
        assert target in issues[0].message

    def test_links_in_code_not_checked(self, make_content):
        text = "---\ntitle: T\n---\n\n```md\n[x](https://)\n```\n"
        issues, _ = _validate(make_content, text)
        assert issues == []

    def test_category_filter(self, make_content):
        text = "---\ntitle: T\nlayout: x\n---\n\n[bad](https://)\n"
        issues, _ = _validate(make_content, text, categories=["frontmatter"])
        assert [i.category for i in issues] == ["frontmatter"]


class TestRoundtrip:
    """Tests for the round-trip check."""

    def test_stable_document(self, make_content, post_document):
        issues, _ = _validate(make_content, post_document, categories=["roundtrip"])
        assert issues == []

    def test_unusual_yaml_survives(self, make_content):
        text = (
            "---\n"
            "title: 'Quoted: with colon'\n"
            "version: '2025-01-01'\n"
            "notes: |\n"
            "  line one\n"
            "  ---\n"
            "  line two\n"
            "---\n\nBody\n"
        )
        issues, _ = _validate(make_content, text, categories=["roundtrip"])
        assert issues == []


class TestValidateAll:
    """Tests for directory validation and the report."""

    def test_report_counts(self, make_content, minimal_document):
        root = make_content(
            {
                "good.md": minimal_document,
                "warn.md": "---\ntitle: W\nlayout: x\n---\n\nBody\n",
                "posts/bad.md": "---\ntitle: B\n---\n",
            }
        )
        report = DocumentValidator(root).validate_all()
        assert report.files_checked == 3
        assert report.files_with_errors == 1
        assert report.files_with_warnings == 1
        assert report.total_errors == 1
        assert report.total_warnings == 1
        assert not report.is_healthy

    def test_unknown_category(self, tmp_dir):
        with pytest.raises(ValueError, match="Unknown validation categories"):
            DocumentValidator(tmp_dir, categories=["spelling"])

    def test_format_report(self):
        report = DocumentValidationReport(files_checked=2)
        report.add_issue(
            DocumentIssue(Path("resume.md"), 7, "error", "link", "Invalid link target: 'https://'", "Fix it")
        )
        report.files_with_errors = 1
        text = format_validation_report(report)
        assert "DOCUMENT VALIDATION REPORT" in text
        assert "❌ VALIDATION FAILED" in text
        assert "[link]:7 Invalid link target" in text
        assert "💡 Fix it" in text
        assert "✅ Clean Files: 1" in text

    def test_format_healthy_report(self):
        text = format_validation_report(DocumentValidationReport(files_checked=1))
        assert "✅ ALL FILES VALID" in text
        assert "ISSUES BY FILE" not in text
