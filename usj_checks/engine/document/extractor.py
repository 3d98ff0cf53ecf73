# Path: usj_checks/engine/document/extractor.py
"""
Verse/Chapter Extractor for USJ Documents

Builds the derived views every check reads, in ONE traversal pass:

- verse_text: "<chapter>:<verse>" -> trimmed canonical verse text
- chapter_index: chapter number -> verse numbers in document order
  (duplicates kept, they are data)
- footnote_quotes: "<chapter>:<verse>" -> quoted phrases ('fq' spans)
  found in that verse's footnotes

EXCLUDED REGIONS:
Footnote ('f') and cross-reference ('x') text never reaches verse_text.
Regions are tracked on an explicit stack so they nest:
- a note node (type 'note', or any node carrying a content list, even
  an empty one) excludes its whole subtree and nothing after it
- a content-less 'f'/'x' marker of another type opens a flat region
  that the matching 'f*'/'x*' marker closes

NUMBERS:
Verse keys keep the raw marker numbers ("1:1"). The chapter index holds
integers parsed by parse_number(); None marks an unparseable number and
is left out of every ordering comparison.
"""

import logging
import re
from dataclasses import dataclass, field
from typing import Iterable, Optional, Union

from .node import Document, Node, TextNode, MarkerNode
from .traversal import iter_nodes, flatten_text
from ...constants import (
    DEFAULT_MAX_DEPTH,
    EXCLUDED_REGION_MARKERS,
    MARKER_FOOTNOTE,
    MARKER_FOOTNOTE_QUOTE,
)


# Leading integer, the way verse bridges ("1-2") and segments ("3a") read
LEADING_INTEGER = re.compile(r'^\s*(\d+)')

# Closing marker -> opening marker
REGION_CLOSERS = {closer: opener for opener, closer in EXCLUDED_REGION_MARKERS.items()}


def parse_number(raw: Optional[str]) -> Optional[int]:
    """
    Parse a chapter or verse number.

    Reads the leading run of digits, so "12" -> 12, "1-2" -> 1 and
    "3a" -> 3. Anything without a leading digit yields None.

    Args:
        raw: Number as written on the marker

    Returns:
        Integer value or None when unparseable
    """
    if raw is None:
        return None
    match = LEADING_INTEGER.match(raw)
    if not match:
        return None
    return int(match.group(1))


def verse_key(chapter, verse) -> str:
    """Build a "<chapter>:<verse>" key."""
    return f'{chapter}:{verse}'


@dataclass
class DocumentViews:
    """
    Derived read-only views of one document.

    Attributes:
        verse_text: Verse key -> trimmed canonical text
        chapter_index: Chapter number -> verse numbers in document order
        footnote_quotes: Verse key -> footnote quotations in that verse
    """
    verse_text: dict = field(default_factory=dict)
    chapter_index: dict = field(default_factory=dict)
    footnote_quotes: dict = field(default_factory=dict)

    def text(self, key: str) -> str:
        """Verse text for key, empty string when the verse is absent."""
        return self.verse_text.get(key, '')


@dataclass
class _Region:
    """Open footnote/cross-reference region."""
    marker: str
    # Depth of the note node for subtree regions, None for flat regions
    depth: Optional[int]


@dataclass
class _ExtractionState:
    """Accumulator threaded through one extraction pass."""
    chapter: Optional[str] = None
    verse: Optional[str] = None
    buffer: list = field(default_factory=list)
    regions: list = field(default_factory=list)
    consumed_depth: Optional[int] = None
    index_chapter: Optional[int] = None
    index_started: bool = False

    @property
    def excluded(self) -> bool:
        return bool(self.regions)

    @property
    def key(self) -> Optional[str]:
        if self.chapter and self.verse:
            return verse_key(self.chapter, self.verse)
        return None


class VerseExtractor:
    """
    Extracts verse text, chapter/verse index and footnote quotations.

    Example:
        views = VerseExtractor(document).extract()
        views.verse_text['1:1']
        views.chapter_index[1]
    """

    def __init__(self, document: Union[Document, Iterable[Node]], max_depth: int = DEFAULT_MAX_DEPTH):
        """
        Initialize extractor.

        Args:
            document: Document or top-level node sequence
            max_depth: Deepest nesting accepted
        """
        if isinstance(document, Document):
            self.nodes = document.children
        else:
            self.nodes = tuple(document)
        self.max_depth = max_depth
        self.logger = logging.getLogger('process.verse_extractor')

    def extract(self) -> DocumentViews:
        """
        Run the extraction pass.

        Returns:
            DocumentViews built from a single traversal
        """
        views = DocumentViews()
        state = _ExtractionState()

        for node, depth in iter_nodes(self.nodes, self.max_depth):
            self._leave_finished_scopes(state, depth)
            self._index_node(node, state, views)
            self._text_node(node, depth, state, views)

        self._flush(state, views)

        if state.regions:
            self.logger.warning(
                f"{len(state.regions)} footnote/cross-reference region(s) never closed"
            )

        self.logger.debug(
            f"Extracted {len(views.verse_text)} verses in {len(views.chapter_index)} chapters"
        )
        return views

    # ------------------------------------------------------------------
    # Scope bookkeeping
    # ------------------------------------------------------------------

    def _leave_finished_scopes(self, state: _ExtractionState, depth: int) -> None:
        """Close subtree regions and char spans the walk has moved past."""
        while state.regions and state.regions[-1].depth is not None \
                and depth <= state.regions[-1].depth:
            state.regions.pop()

        if state.consumed_depth is not None and depth <= state.consumed_depth:
            state.consumed_depth = None

    def _close_flat_region(self, state: _ExtractionState, closer: str) -> None:
        """Close the innermost flat region opened by the closer's partner."""
        opener = REGION_CLOSERS[closer]
        for position in range(len(state.regions) - 1, -1, -1):
            region = state.regions[position]
            if region.depth is None and region.marker == opener:
                del state.regions[position:]
                return
        self.logger.warning(f"Closing marker '{closer}' without an open '{opener}' region")

    def _close_dangling_flat_regions(self, state: _ExtractionState) -> None:
        """A verse or chapter boundary ends any flat region left open."""
        if state.regions and all(region.depth is None for region in state.regions):
            self.logger.warning(
                f"Unterminated '{state.regions[-1].marker}' region closed at "
                f"verse boundary after {state.key or 'document start'}"
            )
            state.regions.clear()

    # ------------------------------------------------------------------
    # Chapter/verse index
    # ------------------------------------------------------------------

    def _index_node(self, node: Node, state: _ExtractionState, views: DocumentViews) -> None:
        """Record chapter and verse numbers. Regions do not apply here."""
        if not isinstance(node, MarkerNode):
            return

        if node.is_chapter:
            state.index_chapter = parse_number(node.number)
            state.index_started = True
            if state.index_chapter is None:
                self.logger.warning(f"Unparseable chapter number '{node.number}'")
                return
            views.chapter_index.setdefault(state.index_chapter, [])

        elif node.is_verse:
            if not state.index_started:
                self.logger.warning(f"Verse '{node.number}' appears before any chapter")
                return
            if state.index_chapter is None:
                return
            number = parse_number(node.number)
            if number is None:
                self.logger.warning(
                    f"Unparseable verse number '{node.number}' in chapter {state.index_chapter}"
                )
            views.chapter_index[state.index_chapter].append(number)

    # ------------------------------------------------------------------
    # Verse text
    # ------------------------------------------------------------------

    def _text_node(
        self,
        node: Node,
        depth: int,
        state: _ExtractionState,
        views: DocumentViews
    ) -> None:
        """Feed one node into the verse text accumulator."""
        # Descendants of a char span were already flattened into the buffer
        if state.consumed_depth is not None:
            return

        if isinstance(node, TextNode):
            if not state.excluded:
                state.buffer.append(node.text)
            return

        if node.is_chapter or node.is_verse:
            self._close_dangling_flat_regions(state)
            if state.excluded:
                return
            self._flush(state, views)
            if node.is_chapter:
                state.chapter = node.number
            state.verse = node.number if node.is_verse else None
            state.buffer = []

        elif node.opens_region:
            state.regions.append(_Region(node.marker, depth if node.encloses_region else None))

        elif node.marker in REGION_CLOSERS:
            self._close_flat_region(state, node.marker)

        elif node.is_char:
            state.consumed_depth = depth
            if not state.excluded:
                state.buffer.append(flatten_text(node, self.max_depth))
            elif node.marker == MARKER_FOOTNOTE_QUOTE and state.regions[-1].marker == MARKER_FOOTNOTE:
                self._record_quote(node, state, views)

    def _record_quote(self, node: MarkerNode, state: _ExtractionState, views: DocumentViews) -> None:
        """Attach a footnote quotation to the current verse."""
        key = state.key
        quote = flatten_text(node, self.max_depth).strip()
        if key is None or not quote:
            return
        views.footnote_quotes.setdefault(key, []).append(quote)

    def _flush(self, state: _ExtractionState, views: DocumentViews) -> None:
        """Store the buffered text under the current verse key."""
        key = state.key
        if key is not None:
            views.verse_text[key] = ''.join(state.buffer).strip()


def extract_views(document, max_depth: int = DEFAULT_MAX_DEPTH) -> DocumentViews:
    """Build all derived views of a document."""
    return VerseExtractor(document, max_depth).extract()


def extract_verse_text(document, max_depth: int = DEFAULT_MAX_DEPTH) -> dict:
    """
    Map every verse key to its canonical text.

    Args:
        document: Document or top-level node sequence
        max_depth: Deepest nesting accepted

    Returns:
        Dict of "<chapter>:<verse>" -> trimmed text
    """
    return extract_views(document, max_depth).verse_text


def extract_chapter_verse_index(document, max_depth: int = DEFAULT_MAX_DEPTH) -> dict:
    """
    Map every chapter number to its verse numbers in document order.

    Args:
        document: Document or top-level node sequence
        max_depth: Deepest nesting accepted

    Returns:
        Dict of chapter int -> list of verse ints (None if unparseable)
    """
    return extract_views(document, max_depth).chapter_index


def extract_footnote_quotes(document, max_depth: int = DEFAULT_MAX_DEPTH) -> dict:
    """Map verse keys to the 'fq' quotations of their footnotes."""
    return extract_views(document, max_depth).footnote_quotes


__all__ = [
    'parse_number',
    'verse_key',
    'DocumentViews',
    'VerseExtractor',
    'extract_views',
    'extract_verse_text',
    'extract_chapter_verse_index',
    'extract_footnote_quotes',
]
