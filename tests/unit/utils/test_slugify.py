"""
test_slugify.py
---------------
Unit tests for slug and document id derivation.
"""
import pytest

from folio.utils.slugify import document_id_from_stem, slugify


class TestSlugify:
    """Tests for slugify."""

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("Resume", "resume"),
            ("Rust Error Handling", "rust-error-handling"),
            ("Pathfinding (A*) Visualizer", "pathfinding-a-visualizer"),
            ("Ärrä & Öljy", "arra-and-oljy"),
            ("Dijkstra's Algorithm", "dijkstras-algorithm"),
            ("client/server", "client-server"),
            ("snake_case  name", "snake-case-name"),
            ("--Leading and trailing--", "leading-and-trailing"),
        ],
    )
    def test_examples(self, text, expected):
        """Common titles slugify predictably."""
        assert slugify(text) == expected

    def test_empty(self):
        """Empty input gives an empty slug."""
        assert slugify("") == ""

    def test_max_length_trims_trailing_hyphen(self):
        """Truncation never leaves a dangling hyphen."""
        assert slugify("abc def", max_length=4) == "abc"


class TestDocumentIdFromStem:
    """Tests for document_id_from_stem."""

    def test_date_prefix_removed(self):
        """Post filenames lose their date prefix."""
        assert document_id_from_stem("2025-12-26-pathfinding-visualizer") == "pathfinding-visualizer"

    def test_underscore_date_separator(self):
        """An underscore after the date also counts as separator."""
        assert document_id_from_stem("2026-01-18_rust-error-handling") == "rust-error-handling"

    def test_plain_stem(self):
        """Stems without a date are only slugified."""
        assert document_id_from_stem("Resume") == "resume"

    def test_date_only_inside_name_kept(self):
        """Dates not at the start are part of the id."""
        assert document_id_from_stem("notes-2025-12-26") == "notes-2025-12-26"
