# Path: usj_checks/engine/checks/text_quality/repeated_words_checker.py
"""
Repeated Word and Whitespace Checker

Scans each target verse for:
- the same word twice in a row ("il dit dit"), compared case-insensitively
  with surrounding punctuation removed; positions are word indexes
- runs of two or more whitespace characters; positions are character
  offsets of each run's start
"""

import logging

from ..core.check_constants import (
    WORD_SPLIT_PATTERN,
    EXCESSIVE_WHITESPACE_PATTERN,
    WORD_PUNCTUATION_PATTERN,
)


def _comparable(word: str) -> str:
    return WORD_PUNCTUATION_PATTERN.sub('', word.lower())


class RepeatedWordsChecker:
    """Detects consecutive repeated words and excessive whitespace."""

    def __init__(self):
        self.logger = logging.getLogger('process.repeated_words_checker')

    def check(self, verse_text: dict) -> list[dict]:
        """
        Scan every verse.

        Args:
            verse_text: Verse key -> text

        Returns:
            List of issue dicts, one per affected verse
        """
        issues = []

        for key, text in verse_text.items():
            words = [_comparable(word) for word in WORD_SPLIT_PATTERN.split(text)]
            repeated = []
            positions = []
            for index in range(len(words) - 1):
                if words[index] and words[index] == words[index + 1]:
                    repeated.append(words[index])
                    positions.append(index)

            whitespace_positions = [
                match.start() for match in EXCESSIVE_WHITESPACE_PATTERN.finditer(text)
            ]
            whitespace_issue = len(whitespace_positions) > 0

            if not repeated and not whitespace_issue:
                continue

            if repeated:
                comment = f"Consecutive repeated words: {', '.join(dict.fromkeys(repeated))}"
            else:
                comment = 'Excessive whitespace detected'

            issues.append({
                'verse': key,
                'repeated_words': repeated,
                'positions': positions,
                'whitespace_positions': whitespace_positions,
                'whitespace_issue': whitespace_issue,
                'comment': comment,
            })

        self.logger.debug(f"Repeated words/whitespace check: {len(issues)} verse(s) flagged")
        return issues


def check_repeated_words_whitespace(target_text: dict) -> list[dict]:
    """Consecutive repeated words and whitespace runs in the target."""
    return RepeatedWordsChecker().check(target_text)


__all__ = [
    'RepeatedWordsChecker',
    'check_repeated_words_whitespace',
]
