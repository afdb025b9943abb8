#!/usr/bin/env python3
"""
markdown.py
-----------
Body structure analysis for Folio documents.

Uses markdown-it-py to read the CommonMark structure of a document body
instead of regex guessing, so that headings, links and code blocks
inside code fences are never mistaken for real ones.

Key Features:
    - Headings with level, plain text and line number
    - Outline: headings nested into a section tree
    - Fenced code blocks with their language hint
    - Link and image targets with line numbers
    - Fence delimiter pairing (markdown-it-py silently runs an unclosed
      fence to the end of the document, so pairing is checked per line)
    - Syntactic URL validation

All line numbers are 1-based and relative to the text passed in.

Usage:
    from folio.utils.markdown import build_outline, extract_links

    outline = build_outline(document.body)
    for link in extract_links(document.body):
        print(link.line, link.target)

Dependencies:
    - markdown-it-py >= 3.0.0
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
import re
from dataclasses import dataclass, field
from functools import lru_cache
from typing import Iterator, List, Optional
from urllib.parse import urlsplit

# --- Third-party imports ---
from markdown_it import MarkdownIt
from markdown_it.token import Token


# ----- Data structures -----

@dataclass
class Heading:
    """A single ATX or setext heading."""

    level: int
    text: str
    line: int


@dataclass
class Section:
    """A heading together with the headings nested under it."""

    level: int
    title: str
    line: int
    children: List[Section] = field(default_factory=list)

    def walk(self) -> Iterator[Section]:
        """Yield this section and all descendants, depth first."""
        yield self
        for child in self.children:
            yield from child.walk()

    def find(self, title: str) -> Optional[Section]:
        """Find a descendant (or self) by exact title."""
        for section in self.walk():
            if section.title == title:
                return section
        return None


@dataclass
class CodeBlock:
    """A fenced code block."""

    language: Optional[str]
    info: str
    content: str
    line: int


@dataclass
class Link:
    """A hyperlink or image reference found in the body."""

    target: str
    text: str
    line: int
    kind: str = "link"  # link, image


@dataclass
class FenceSpan:
    """Opening and closing lines of a fence; close_line is None if unclosed."""

    marker: str
    info: str
    open_line: int
    close_line: Optional[int] = None

    @property
    def is_closed(self) -> bool:
        return self.close_line is not None


# ----- Parsing -----

@lru_cache(maxsize=1)
def _parser() -> MarkdownIt:
    """Shared CommonMark parser with GFM tables and strikethrough."""
    return MarkdownIt("commonmark").enable(["table", "strikethrough"])


@lru_cache(maxsize=1)
def _link_parser() -> MarkdownIt:
    """
    Parser for link extraction that keeps every link target.

    markdown-it-py drops links to javascript:, vbscript:, file: and data:
    targets before they reach the token stream; here they are kept so
    that is_valid_url can reject them.
    """
    parser = MarkdownIt("commonmark").enable(["table", "strikethrough"])
    parser.validateLink = lambda url: True
    return parser


def parse_tokens(text: str) -> List[Token]:
    """Parse text into a flat markdown-it token stream."""
    return _parser().parse(text)


def _inline_text(inline: Token) -> str:
    """Plain text of an inline token (markup stripped)."""
    parts = []
    for child in inline.children or []:
        if child.type in ("text", "code_inline"):
            parts.append(child.content)
        elif child.type in ("softbreak", "hardbreak"):
            parts.append(" ")
    return "".join(parts).strip()


def extract_headings(text: str) -> List[Heading]:
    """
    Extract all headings in document order.

    Args:
        text: Markdown text

    Returns:
        List of Heading records

    Examples:
        >>> [h.text for h in extract_headings("# Resume\\n\\n## Experience")]
        ['Resume', 'Experience']
    """
    tokens = parse_tokens(text)
    headings = []
    for i, token in enumerate(tokens):
        if token.type != "heading_open":
            continue
        inline = tokens[i + 1]
        line = token.map[0] + 1 if token.map else 0
        headings.append(Heading(level=int(token.tag[1]), text=_inline_text(inline), line=line))
    return headings


def build_outline(text: str) -> List[Section]:
    """
    Nest headings into a section tree.

    A section's children are the following headings of deeper level, up
    to the next heading of the same or shallower level. Skipped levels
    (## followed by ####) nest directly.

    Args:
        text: Markdown text

    Returns:
        Top-level sections
    """
    roots: List[Section] = []
    stack: List[Section] = []

    for heading in extract_headings(text):
        section = Section(level=heading.level, title=heading.text, line=heading.line)
        while stack and stack[-1].level >= heading.level:
            stack.pop()
        if stack:
            stack[-1].children.append(section)
        else:
            roots.append(section)
        stack.append(section)

    return roots


def find_section(outline: List[Section], title: str) -> Optional[Section]:
    """Find the first section with the given title anywhere in an outline."""
    for root in outline:
        found = root.find(title)
        if found is not None:
            return found
    return None


def extract_code_blocks(text: str) -> List[CodeBlock]:
    """
    Extract fenced code blocks.

    Indented code blocks carry no language hint and are not included.

    Args:
        text: Markdown text

    Returns:
        List of CodeBlock records in document order
    """
    blocks = []
    for token in parse_tokens(text):
        if token.type != "fence":
            continue
        info = token.info.strip()
        blocks.append(
            CodeBlock(
                language=info.split()[0] if info else None,
                info=info,
                content=token.content,
                line=token.map[0] + 1 if token.map else 0,
            )
        )
    return blocks


def extract_links(text: str) -> List[Link]:
    """
    Extract link and image targets.

    Covers inline links, reference-style links (resolved by markdown-it-py)
    and autolinks. Links inside code are not links.

    Args:
        text: Markdown text

    Returns:
        List of Link records in document order
    """
    links = []
    for token in _link_parser().parse(text):
        if token.type != "inline" or not token.children:
            continue
        line = token.map[0] + 1 if token.map else 0
        open_link: Optional[Link] = None

        for child in token.children:
            if child.type in ("softbreak", "hardbreak"):
                line += 1
            elif child.type == "link_open":
                open_link = Link(target=str(child.attrGet("href") or ""), text="", line=line)
            elif child.type == "link_close" and open_link is not None:
                open_link.text = open_link.text.strip()
                links.append(open_link)
                open_link = None
            elif child.type == "image":
                links.append(
                    Link(
                        target=str(child.attrGet("src") or ""),
                        text=child.content,
                        line=line,
                        kind="image",
                    )
                )
            elif open_link is not None and child.type in ("text", "code_inline"):
                open_link.text += child.content

    return links


# ----- Fences -----

_FENCE_OPEN = re.compile(r"^[ \t]*(?P<marker>`{3,}|~{3,})(?P<info>.*)$")


def scan_fences(text: str) -> List[FenceSpan]:
    """
    Pair fence delimiters line by line.

    An opening fence is a run of three or more backticks or tildes
    (backtick info strings may not contain backticks). It is closed by a
    line holding only the same character, at least as many times.

    Args:
        text: Markdown text

    Returns:
        FenceSpan per opening fence, in document order
    """
    spans: List[FenceSpan] = []
    current: Optional[FenceSpan] = None
    closing: Optional[re.Pattern] = None

    for number, line in enumerate(text.splitlines(), 1):
        if current is not None:
            if closing is not None and closing.match(line):
                current.close_line = number
                current = None
                closing = None
            continue

        match = _FENCE_OPEN.match(line)
        if not match:
            continue
        marker = match.group("marker")
        info = match.group("info").strip()
        if marker[0] == "`" and "`" in info:
            continue

        current = FenceSpan(marker=marker, info=info, open_line=number)
        closing = re.compile(
            rf"^[ \t]*{re.escape(marker[0])}{{{len(marker)},}}[ \t]*$"
        )
        spans.append(current)

    return spans


def find_unclosed_fences(text: str) -> List[int]:
    """
    Lines of fences that are opened but never closed.

    Examples:
        >>> find_unclosed_fences("```rust\\nfn main() {}\\n```")
        []
        >>> find_unclosed_fences("text\\n```rust\\nfn main() {}")
        [2]
    """
    return [span.open_line for span in scan_fences(text) if not span.is_closed]


def strip_code_blocks(text: str) -> str:
    """Remove fenced code blocks (delimiters included) from text."""
    lines = text.splitlines()
    drop = set()
    for span in scan_fences(text):
        end = span.close_line if span.close_line is not None else len(lines)
        drop.update(range(span.open_line, end + 1))
    return "\n".join(line for i, line in enumerate(lines, 1) if i not in drop)


# ----- URLs -----

WEB_SCHEMES = ("http", "https")


def is_valid_url(target: str) -> bool:
    """
    Check that a link target is a syntactically valid URL reference.

    - http/https: must name a host
    - mailto: must hold an address with a local part and a domain
    - no scheme: relative path, root path, query or #anchor; must be
      non-empty
    - any other scheme is rejected
    - whitespace is never allowed

    Examples:
        >>> is_valid_url("https://example.com/projects")
        True
        >>> is_valid_url("https://")
        False
        >>> is_valid_url("/posts/rust-error-handling")
        True
        >>> is_valid_url("ftp://example.com")
        False
    """
    if not target or any(ch.isspace() for ch in target):
        return False

    try:
        parts = urlsplit(target)
    except ValueError:
        return False

    scheme = parts.scheme.lower()
    if scheme in WEB_SCHEMES:
        return bool(parts.hostname)
    if scheme == "mailto":
        local, sep, domain = parts.path.partition("@")
        return bool(local and sep and domain)
    if scheme == "":
        return bool(parts.path or parts.query or parts.fragment or parts.netloc)
    return False
