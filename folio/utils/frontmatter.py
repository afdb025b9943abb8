#!/usr/bin/env python3
"""
frontmatter.py
--------------
Strict YAML frontmatter loading and dumping.

PyYAML's SafeLoader silently keeps the last value when a mapping repeats
a key. Frontmatter is hand-edited, so a repeated key almost always means
a lost value: UniqueKeyLoader rejects it instead, at every nesting level.

Usage:
    from folio.utils.frontmatter import load_frontmatter, dump_frontmatter

    metadata = load_frontmatter("title: Resume\\nauthor: Joonas Pessi")
    text = dump_frontmatter(metadata)
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from typing import Any, Dict

# --- Third party imports ---
import yaml
from yaml.constructor import ConstructorError
from yaml.nodes import MappingNode

# --- Local imports ---
from folio.core.exceptions import FrontmatterError


class DuplicateKeyError(ConstructorError):
    """A YAML mapping defines the same key more than once."""

    def __init__(self, key: Any, context_mark, problem_mark) -> None:
        super().__init__(
            "while constructing a mapping",
            context_mark,
            f"found duplicate key {key!r}",
            problem_mark,
        )
        self.key = key


class UniqueKeyLoader(yaml.SafeLoader):
    """SafeLoader that refuses duplicate mapping keys and impossible dates."""

    def construct_mapping(self, node, deep=False):
        if isinstance(node, MappingNode):
            self.flatten_mapping(node)
            seen = set()
            for key_node, _ in node.value:
                key = self.construct_object(key_node, deep=deep)
                try:
                    is_duplicate = key in seen
                except TypeError:
                    # Unhashable keys are reported by the base constructor
                    continue
                if is_duplicate:
                    raise DuplicateKeyError(key, node.start_mark, key_node.start_mark)
                seen.add(key)
        return super().construct_mapping(node, deep=deep)

    def construct_yaml_timestamp(self, node):
        # Unquoted dates like 2025-02-30 match the timestamp pattern but are
        # not calendar days; datetime raises ValueError without a mark
        try:
            return super().construct_yaml_timestamp(node)
        except ValueError as e:
            raise ConstructorError(
                None, None, f"invalid date {node.value!r}: {e}", node.start_mark
            ) from e


UniqueKeyLoader.add_constructor(
    "tag:yaml.org,2002:timestamp", UniqueKeyLoader.construct_yaml_timestamp
)



def load_frontmatter(text: str, line_offset: int = 1) -> Dict[str, Any]:
    """
    Parse frontmatter YAML into a mapping.

    Args:
        text: YAML text between the ``---`` delimiters
        line_offset: Number of document lines preceding the YAML text,
            used to report document line numbers (1 for the opening ``---``)

    Returns:
        Parsed mapping (empty for empty frontmatter)

    Raises:
        FrontmatterError: If the YAML is invalid, is not a mapping, has
            non-string keys, repeats a key or holds an impossible date

    Examples:
        >>> load_frontmatter("title: Resume")
        {'title': 'Resume'}
        >>> load_frontmatter("title: A\\ntitle: B")
        Traceback (most recent call last):
        ...
        folio.core.exceptions.FrontmatterError: Duplicate frontmatter key 'title' (line 3)
    """
    try:
        data = yaml.load(text, Loader=UniqueKeyLoader)
    except DuplicateKeyError as e:
        line = e.problem_mark.line + 1 + line_offset if e.problem_mark else None
        raise FrontmatterError(
            f"Duplicate frontmatter key {e.key!r} (line {line})", line=line
        ) from e
    except yaml.YAMLError as e:
        problem_mark = getattr(e, "problem_mark", None)
        line = problem_mark.line + 1 + line_offset if problem_mark else None
        raise FrontmatterError(f"Invalid YAML: {e}", line=line) from e
    except ValueError as e:
        raise FrontmatterError(f"Invalid value: {e}") from e

    if data is None:
        return {}

    if not isinstance(data, dict):
        raise FrontmatterError(
            f"Frontmatter must be a mapping, got {type(data).__name__}",
            line=1 + line_offset,
        )

    bad_keys = [k for k in data if not isinstance(k, str)]
    if bad_keys:
        raise FrontmatterError(
            f"Frontmatter keys must be strings: {', '.join(repr(k) for k in bad_keys)}",
            line=1 + line_offset,
        )

    return data


def dump_frontmatter(metadata: Dict[str, Any]) -> str:
    """
    Serialize a metadata mapping as block-style YAML.

    Key order is preserved so that hand-written frontmatter keeps its
    layout when a document is written back out.

    Args:
        metadata: Frontmatter mapping

    Returns:
        YAML text ending with a newline (empty string for an empty mapping)
    """
    if not metadata:
        return ""
    return yaml.safe_dump(
        metadata,
        sort_keys=False,
        allow_unicode=True,
        default_flow_style=False,
    )
