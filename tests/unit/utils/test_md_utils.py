"""
test_md_utils.py
----------------
Unit tests for folio.utils.md.

Covers frontmatter splitting and joining, hashing and reading statistics.
"""
from folio.utils.md import (
    count_words,
    estimate_reading_time,
    find_frontmatter_end,
    get_text_hash,
    join_frontmatter,
    split_frontmatter,
)


class TestFindFrontmatterEnd:
    """Tests for locating the closing delimiter."""

    def test_closed_block(self):
        """Index of the closing delimiter is returned."""
        assert find_frontmatter_end(["---", "title: A", "---", "body"]) == 2

    def test_no_opening_delimiter(self):
        """Documents not starting with --- have no frontmatter."""
        assert find_frontmatter_end(["title: A", "---"]) is None

    def test_unterminated_block(self):
        """A block that never closes is reported as missing."""
        assert find_frontmatter_end(["---", "title: A", "body"]) is None

    def test_indented_delimiter_does_not_close(self):
        """Indented --- lines (e.g. inside block scalars) do not close."""
        lines = ["---", "notes: |", "  ---", "---"]
        assert find_frontmatter_end(lines) == 3

    def test_empty_block(self):
        """Adjacent delimiters form an empty block."""
        assert find_frontmatter_end(["---", "---"]) == 1


class TestSplitFrontmatter:
    """Tests for split_frontmatter."""

    def test_basic_split(self):
        """Frontmatter and body are separated."""
        fm, body = split_frontmatter("---\ntitle: Resume\n---\n\nBody text")
        assert fm == "title: Resume"
        assert body == ["Body text"]

    def test_leading_blank_body_lines_removed(self):
        """Blank lines between frontmatter and body are dropped."""
        _, body = split_frontmatter("---\ntitle: A\n---\n\n\n\n# Heading\n")
        assert body == ["# Heading"]

    def test_no_frontmatter_returns_all_lines(self):
        """Without frontmatter the whole content is body."""
        fm, body = split_frontmatter("# Heading\nText")
        assert fm == ""
        assert body == ["# Heading", "Text"]

    def test_thematic_break_in_body_kept(self):
        """A --- line in the body is not treated as a delimiter."""
        _, body = split_frontmatter("---\ntitle: A\n---\nOne\n\n---\n\nTwo")
        assert body == ["One", "", "---", "", "Two"]


class TestJoinFrontmatter:
    """Tests for join_frontmatter."""

    def test_join(self):
        """Frontmatter and body are assembled with delimiters."""
        assert join_frontmatter("title: Resume\n", "# Resume") == (
            "---\ntitle: Resume\n---\n\n# Resume\n"
        )

    def test_join_then_split(self):
        """Joined text splits back into the same parts."""
        text = join_frontmatter("title: A\nauthor: B", "Line 1\n\nLine 2\n\n")
        fm, body = split_frontmatter(text)
        assert fm == "title: A\nauthor: B"
        assert body == ["Line 1", "", "Line 2"]


class TestHashing:
    """Tests for get_text_hash."""

    def test_known_hash(self):
        """MD5 of a known string."""
        assert get_text_hash("Hello, world!") == "6cd3556deb0da54bca060b4c39479839"

    def test_different_text_different_hash(self):
        """Changing content changes the hash."""
        assert get_text_hash("a") != get_text_hash("b")


class TestReadingStatistics:
    """Tests for count_words and estimate_reading_time."""

    def test_count_words(self):
        """Apostrophes and hyphens stay inside words."""
        assert count_words("Dijkstra's algorithm is breadth-first search, weighted.") == 6

    def test_count_words_empty(self):
        """Empty text has no words."""
        assert count_words("") == 0
        assert count_words("  \n ") == 0

    def test_reading_time_rounds_up(self):
        """Reading time rounds up to one decimal."""
        assert estimate_reading_time(250) == 1.0
        assert estimate_reading_time(251) == 1.1
        assert estimate_reading_time(1) == 0.1

    def test_reading_time_zero(self):
        """No words, no reading time."""
        assert estimate_reading_time(0) == 0.0
