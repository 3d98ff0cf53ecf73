# Path: usj_checks/engine/checks/structure/integrity_checker.py
"""
Chapter/Verse Integrity Checker

Works on chapter/verse indexes (chapter -> verse numbers in document
order):

ORDERING & DUPLICATES (one document):
- a chapter numbered lower than the chapter before it is out of order
- a verse numbered lower than the verse before it is out of order
- a (chapter, verse) pair seen before is a duplicate
A verse can be both out of order and a duplicate; both are reported.

MISSING VERSES (source vs target):
Every source verse absent from the target's verses for the same chapter
is reported. Verses present only in the target are never reported:
the check measures completeness of the target.

Unparseable numbers (None in the index) take no part in any comparison.
"""

import logging
from typing import Optional

from ...document.extractor import verse_key
from ..core.check_constants import (
    ISSUE_OUT_OF_ORDER,
    ISSUE_DUPLICATE,
    ISSUE_MISSING,
    INITIAL_LAST_NUMBER,
    DEFAULT_DOCUMENT_LABEL,
)


class IntegrityChecker:
    """
    Detects out-of-order, duplicate and missing chapter/verse numbers.

    Example:
        checker = IntegrityChecker()
        issues = checker.check_ordering(target_index, target_text)
        issues += checker.check_missing(source_index, target_index, source_text)
    """

    def __init__(self):
        self.logger = logging.getLogger('process.integrity_checker')

    def check_ordering(
        self,
        chapter_index: dict,
        verse_text: Optional[dict] = None,
        label: str = DEFAULT_DOCUMENT_LABEL
    ) -> list[dict]:
        """
        Report out-of-order and duplicate chapter/verse numbers.

        Args:
            chapter_index: Chapter -> verse numbers, in document order
            verse_text: Optional verse key -> text, quoted in issues
            label: Document name used in comments ('Target', 'Source')

        Returns:
            List of issue dicts
        """
        verse_text = verse_text or {}
        issues = []
        seen = set()
        last_chapter = INITIAL_LAST_NUMBER

        for chapter, verses in chapter_index.items():
            if chapter < last_chapter:
                issues.append({
                    'type': ISSUE_OUT_OF_ORDER,
                    'chapter': chapter,
                    'comment': f"{label} has out-of-order chapter {chapter}.",
                })
            last_chapter = chapter

            last_verse = INITIAL_LAST_NUMBER
            for verse in verses:
                if verse is None:
                    continue

                key = verse_key(chapter, verse)
                if verse < last_verse:
                    issues.append({
                        'type': ISSUE_OUT_OF_ORDER,
                        'chapter': chapter,
                        'verse': verse,
                        'verse_text': verse_text.get(key, ''),
                        'comment': f"{label} has out-of-order verse {verse} in chapter {chapter}.",
                    })
                if (chapter, verse) in seen:
                    issues.append({
                        'type': ISSUE_DUPLICATE,
                        'chapter': chapter,
                        'verse': verse,
                        'verse_text': verse_text.get(key, ''),
                        'comment': f"{label} has duplicate verse {verse} in chapter {chapter}.",
                    })
                seen.add((chapter, verse))
                last_verse = verse

        self.logger.debug(f"{label} ordering check: {len(issues)} issue(s)")
        return issues

    def check_missing(
        self,
        source_index: dict,
        target_index: dict,
        source_text: Optional[dict] = None
    ) -> list[dict]:
        """
        Report source verses the target does not have.

        Args:
            source_index: Source chapter -> verse numbers
            target_index: Target chapter -> verse numbers
            source_text: Optional source verse key -> text, quoted in issues

        Returns:
            List of issue dicts, one per missing (chapter, verse)
        """
        source_text = source_text or {}
        issues = []

        for chapter, verses in source_index.items():
            present = set(target_index.get(chapter, []))
            reported = set()

            for verse in verses:
                if verse is None or verse in present or verse in reported:
                    continue
                reported.add(verse)
                issues.append({
                    'type': ISSUE_MISSING,
                    'chapter': chapter,
                    'verse': verse,
                    'verse_text': source_text.get(verse_key(chapter, verse), ''),
                    'comment': f"Target is missing verse {verse} in chapter {chapter}.",
                })

        if issues:
            self.logger.info(f"Target is missing {len(issues)} verse(s)")
        return issues


def check_structural_integrity(target_index: dict, target_text: Optional[dict] = None) -> list[dict]:
    """Ordering and duplicate check on one chapter/verse index."""
    return IntegrityChecker().check_ordering(target_index, target_text)


def check_missing_verses(
    source_index: dict,
    target_index: dict,
    source_text: Optional[dict] = None
) -> list[dict]:
    """Source verses absent from the target."""
    return IntegrityChecker().check_missing(source_index, target_index, source_text)


__all__ = [
    'IntegrityChecker',
    'check_structural_integrity',
    'check_missing_verses',
]
