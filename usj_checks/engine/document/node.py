# Path: usj_checks/engine/document/node.py
"""
Document Model for USJ Scripture Documents

A USJ document is a tree whose content arrays mix raw strings and
structured objects. This module turns that JSON shape into an explicit
tagged variant:

- TextNode: raw character content
- MarkerNode: structured node with optional marker, number, style type
  and an ordered list of child nodes

The engine dispatches on the variant instead of probing dictionaries for
a 'content' key.
"""

from dataclasses import dataclass, field
from typing import Optional, Union

from ...constants import (
    MARKER_CHAPTER,
    MARKER_VERSE,
    EXCLUDED_REGION_MARKERS,
    TYPE_CHAR,
    TYPE_NOTE,
    TYPE_USJ,
    DEFAULT_MAX_DEPTH,
)


# USJ keys the model reads; every other key is kept in attrs
MODEL_KEYS = {'type', 'marker', 'number', 'content'}

# End of a content iterator
_END = object()


class DocumentDepthError(ValueError):
    """Document nesting exceeds the configured depth limit."""
    pass


@dataclass(frozen=True)
class TextNode:
    """
    Leaf text content.

    Attributes:
        text: Raw characters exactly as they appear in the document
    """
    text: str


@dataclass(frozen=True)
class MarkerNode:
    """
    Structured USJ node.

    Attributes:
        style_type: USJ 'type' field ('para', 'char', 'note', 'verse'...)
        marker: USFM marker ('c', 'v', 'f', 'fq'...)
        number: Chapter or verse number for 'c' / 'v' markers
        children: Ordered child nodes
        container: Whether the USJ object carried a content list, even an
            empty one
        attrs: Remaining USJ attributes (caller, sid, style...)
    """
    style_type: Optional[str] = None
    marker: Optional[str] = None
    number: Optional[str] = None
    children: tuple = ()
    container: bool = False
    attrs: dict = field(default_factory=dict, compare=False)

    @property
    def is_chapter(self) -> bool:
        """Chapter start carrying a number."""
        return self.marker == MARKER_CHAPTER and bool(self.number)

    @property
    def is_verse(self) -> bool:
        """Verse start carrying a number."""
        return self.marker == MARKER_VERSE and bool(self.number)

    @property
    def is_char(self) -> bool:
        """Inline styled span."""
        return self.style_type == TYPE_CHAR

    @property
    def opens_region(self) -> bool:
        """Footnote or cross-reference start."""
        return self.marker in EXCLUDED_REGION_MARKERS

    @property
    def encloses_region(self) -> bool:
        """
        Footnote or cross-reference that holds its own text.

        Notes close by nesting. Only a content-less marker of another
        type is a flat opener waiting for its closing marker.
        """
        return self.opens_region and (
            self.style_type == TYPE_NOTE or self.container or bool(self.children)
        )


Node = Union[TextNode, MarkerNode]


@dataclass(frozen=True)
class Document:
    """
    Parsed USJ document.

    Attributes:
        children: Top-level nodes (the USJ 'content' array)
        version: USJ version string when present
    """
    children: tuple = ()
    version: Optional[str] = None


def _content_of(value: dict) -> list:
    """The 'content' list of a USJ object, empty when absent."""
    content = value.get('content')
    if content is None:
        return []
    if not isinstance(content, list):
        raise ValueError(
            f"USJ 'content' must be a list, got {type(content).__name__} "
            f"(marker={value.get('marker')!r})"
        )
    return content


def _marker_node(value: dict, children: list) -> MarkerNode:
    number = value.get('number')
    if number is not None:
        number = str(number)

    return MarkerNode(
        style_type=value.get('type'),
        marker=value.get('marker'),
        number=number,
        children=tuple(children),
        container=isinstance(value.get('content'), list),
        attrs={k: v for k, v in value.items() if k not in MODEL_KEYS},
    )


def _convert_content(items: list, max_depth: int) -> tuple:
    """
    Convert a USJ content list into Nodes.

    Works on an explicit stack of open objects, so nesting depth is
    bounded by max_depth alone and never by the interpreter's recursion
    limit. Each frame holds the raw object, an iterator over its
    remaining content, the children converted so far and the depth of
    that content.
    """
    top_level = []
    frames = [(None, iter(items), top_level, 0)]

    while frames:
        value, pending, converted, depth = frames[-1]
        item = next(pending, _END)

        if item is _END:
            frames.pop()
            if value is not None:
                frames[-1][2].append(_marker_node(value, converted))
            continue

        if depth > max_depth:
            raise DocumentDepthError(f"USJ nesting deeper than {max_depth} levels")

        if isinstance(item, str):
            converted.append(TextNode(item))
        elif isinstance(item, dict):
            frames.append((item, iter(_content_of(item)), [], depth + 1))
        else:
            raise ValueError(f"Unsupported USJ content item: {type(item).__name__}")

    return tuple(top_level)


def node_from_usj(value, max_depth: int = DEFAULT_MAX_DEPTH) -> Node:
    """
    Convert one raw USJ content item into a Node.

    Args:
        value: A string or a USJ object (dict)
        max_depth: Deepest nesting accepted

    Returns:
        TextNode for strings, MarkerNode for objects

    Raises:
        ValueError: If the value is neither a string nor an object, or
            if an object's 'content' is not a list
        DocumentDepthError: If nesting goes deeper than max_depth
    """
    return _convert_content([value], max_depth)[0]


def document_from_usj(usj: dict, max_depth: int = DEFAULT_MAX_DEPTH) -> Document:
    """
    Convert a USJ envelope into a Document.

    Args:
        usj: Parsed USJ JSON object ({"type": "USJ", "content": [...]})
        max_depth: Deepest nesting accepted

    Returns:
        Document

    Raises:
        ValueError: If the envelope is not an object with a content list
    """
    if not isinstance(usj, dict):
        raise ValueError(f"USJ document must be an object, got {type(usj).__name__}")

    content = usj.get('content')
    if not isinstance(content, list):
        raise ValueError("USJ document has no 'content' list")

    doc_type = usj.get('type')
    if doc_type is not None and doc_type != TYPE_USJ:
        raise ValueError(f"Unexpected USJ document type: {doc_type!r}")

    return Document(
        children=_convert_content(content, max_depth),
        version=usj.get('version'),
    )


__all__ = [
    'DocumentDepthError',
    'TextNode',
    'MarkerNode',
    'Node',
    'Document',
    'node_from_usj',
    'document_from_usj',
]
