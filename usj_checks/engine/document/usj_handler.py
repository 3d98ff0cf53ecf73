# Path: usj_checks/engine/document/usj_handler.py
"""
USJ Document Query Helper

Counts and text lookups over one document: number of chapters and
verses, a single verse, a verse range, a whole chapter.

References are compared as integers, never as raw strings, so "10"
sorts after "9".
"""

import logging
from typing import Optional

from .extractor import DocumentViews, extract_views, parse_number
from .node import Document, MarkerNode
from .traversal import iter_nodes
from ...constants import DEFAULT_MAX_DEPTH


class USJHandler:
    """
    Read-only queries over a parsed USJ document.

    Example:
        handler = USJHandler(document)
        handler.nb_chapters()          # 3
        handler.verse('1:1')           # 'Paul, a servant of God...'
        handler.verse_range('1:1-1:3')
        handler.chapter('2')
    """

    def __init__(self, document: Document, max_depth: int = DEFAULT_MAX_DEPTH):
        """
        Initialize handler.

        Args:
            document: Parsed USJ document
            max_depth: Deepest nesting accepted
        """
        self.document = document
        self.max_depth = max_depth
        self.logger = logging.getLogger('process.usj_handler')
        self._views: Optional[DocumentViews] = None

    @property
    def views(self) -> DocumentViews:
        """Extracted views, built on first use."""
        if self._views is None:
            self._views = extract_views(self.document, self.max_depth)
        return self._views

    def nb_chapters(self) -> int:
        """Count chapter markers carrying a number."""
        return self._count_markers(lambda node: node.is_chapter)

    def nb_verses(self) -> int:
        """Count verse markers carrying a number."""
        return self._count_markers(lambda node: node.is_verse)

    def _count_markers(self, predicate) -> int:
        return sum(
            1 for node, _ in iter_nodes(self.document.children, self.max_depth)
            if isinstance(node, MarkerNode) and predicate(node)
        )

    def verse(self, reference: str) -> str:
        """
        Text of one verse.

        Args:
            reference: "<chapter>:<verse>"

        Returns:
            Verse text, empty string when the verse does not exist
        """
        target = self._parse_reference(reference)
        if target is None:
            return ''

        for key, text in self.views.verse_text.items():
            if self._parse_reference(key) == target:
                return text
        return ''

    def verse_range(self, reference_range: str) -> str:
        """
        Text of an inclusive verse range, verses joined by a space.

        Args:
            reference_range: "<chapter>:<verse>-<chapter>:<verse>"

        Returns:
            Joined text, empty string when nothing falls in the range
        """
        start_ref, _, end_ref = reference_range.partition('-')
        start = self._parse_reference(start_ref)
        end = self._parse_reference(end_ref)
        if start is None or end is None:
            self.logger.warning(f"Invalid verse range '{reference_range}'")
            return ''

        parts = []
        for key, text in self.views.verse_text.items():
            position = self._parse_reference(key)
            if position is not None and start <= position <= end and text:
                parts.append(text)
        return ' '.join(parts)

    def chapter(self, chapter_number: str) -> str:
        """
        Text of a whole chapter, verses joined by a space.

        Args:
            chapter_number: Chapter number

        Returns:
            Joined text, empty string for an unknown chapter
        """
        wanted = parse_number(chapter_number)
        if wanted is None:
            return ''

        parts = []
        for key, text in self.views.verse_text.items():
            position = self._parse_reference(key)
            if position is not None and position[0] == wanted and text:
                parts.append(text)
        return ' '.join(parts)

    @staticmethod
    def _parse_reference(reference: str) -> Optional[tuple[int, int]]:
        """Parse "<chapter>:<verse>" into an integer pair."""
        chapter, separator, verse = reference.strip().partition(':')
        if not separator:
            return None
        chapter_number = parse_number(chapter)
        verse_number = parse_number(verse)
        if chapter_number is None or verse_number is None:
            return None
        return chapter_number, verse_number


__all__ = ['USJHandler']
