# Path: usj_checks/engine/checks/text_quality/footnote_quote_checker.py
"""
Footnote Quotation Checker

A footnote quotation ('fq') repeats words of the verse the footnote is
attached to. Each quotation must still be found in that verse's text;
otherwise the verse or the footnote was edited without the other.

Comparison ignores case, collapses whitespace and drops the trailing
punctuation quotations usually end with.
"""

import logging

from ..core.check_constants import (
    WORD_SPLIT_PATTERN,
    QUOTE_TRAILING_PUNCTUATION,
    QUOTE_SEPARATOR,
)


def _normalize(text: str) -> str:
    return WORD_SPLIT_PATTERN.sub(' ', text).strip().casefold()


class FootnoteQuoteChecker:
    """Detects footnote quotations absent from their verse."""

    def __init__(self):
        self.logger = logging.getLogger('process.footnote_quote_checker')

    def check(self, footnote_quotes: dict, verse_text: dict) -> list[dict]:
        """
        Verify every footnote quotation against its verse.

        Args:
            footnote_quotes: Verse key -> quotations found in its footnotes
            verse_text: Verse key -> text of the same document

        Returns:
            List of issue dicts, one per verse with unmatched quotations
        """
        issues = []

        for key, quotes in footnote_quotes.items():
            verse = _normalize(verse_text.get(key, ''))
            unmatched = []
            for quote in quotes:
                needle = _normalize(quote).rstrip(QUOTE_TRAILING_PUNCTUATION)
                if needle and needle not in verse:
                    unmatched.append(quote)

            if unmatched:
                issues.append({
                    'verse': key,
                    'unmatched_quotes': unmatched,
                    'comment': (
                        f"Quoted text not found in the verse ({key}): "
                        f"{QUOTE_SEPARATOR.join(unmatched)}"
                    ),
                })

        self.logger.debug(f"Footnote quotation check: {len(issues)} verse(s) flagged")
        return issues


def check_footnote_quotations(footnote_quotes: dict, verse_text: dict) -> list[dict]:
    """Footnote quotations not found in their verse."""
    return FootnoteQuoteChecker().check(footnote_quotes, verse_text)


__all__ = [
    'FootnoteQuoteChecker',
    'check_footnote_quotations',
]
