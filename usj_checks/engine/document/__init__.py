# Path: usj_checks/engine/document/__init__.py
"""
Document package: USJ document model, traversal and extraction.

- node: TextNode / MarkerNode tagged variant and USJ conversion
- traversal: explicit-stack pre-order walk
- extractor: verse text, chapter/verse index, footnote quotations
- usj_handler: chapter/verse queries over one document
"""

from .node import (
    DocumentDepthError,
    TextNode,
    MarkerNode,
    Node,
    Document,
    node_from_usj,
    document_from_usj,
)
from .traversal import iter_nodes, traverse, flatten_text
from .extractor import (
    parse_number,
    verse_key,
    DocumentViews,
    VerseExtractor,
    extract_views,
    extract_verse_text,
    extract_chapter_verse_index,
    extract_footnote_quotes,
)
from .usj_handler import USJHandler

__all__ = [
    'DocumentDepthError',
    'TextNode',
    'MarkerNode',
    'Node',
    'Document',
    'node_from_usj',
    'document_from_usj',
    'iter_nodes',
    'traverse',
    'flatten_text',
    'parse_number',
    'verse_key',
    'DocumentViews',
    'VerseExtractor',
    'extract_views',
    'extract_verse_text',
    'extract_chapter_verse_index',
    'extract_footnote_quotes',
    'USJHandler',
]
