# Path: usj_checks/engine/checks/punctuation/punctuation_checker.py
"""
Punctuation Balance Checker

Finds unmatched opening and closing punctuation in the target text.

Verses are scanned in document order as one character stream, so a pair
may open in one verse and close in a later one: scripture sentences
cross verse breaks.

AUTOMATON:
- one shared stack of (character, verse) entries
- one toggle per symmetric character (a character that closes itself,
  like '"'); the toggle decides whether an occurrence opens or closes
- a closer that does not match the top of the stack is reported and
  leaves the stack untouched, so the opener is still reported later
- openers left on the stack at the end are reported once per distinct
  character, attributed to the verse where the stack last became
  non-empty
"""

import logging
from dataclasses import dataclass
from typing import Optional

from ..core.check_constants import DEFAULT_PUNCTUATION_PAIRS


@dataclass(frozen=True)
class _OpenMark:
    """Opening character waiting for its closer."""
    char: str
    verse: str


class PunctuationChecker:
    """
    Detects unbalanced punctuation across verses.

    Example:
        checker = PunctuationChecker({'(': ')', '"': '"'})
        issues = checker.check(target_text)
    """

    def __init__(self, pairs: Optional[dict] = None):
        """
        Initialize punctuation checker.

        Args:
            pairs: Opening character -> closing character
                   (defaults to DEFAULT_PUNCTUATION_PAIRS)

        Raises:
            ValueError: If a pair member is not a single character
        """
        self.pairs = dict(DEFAULT_PUNCTUATION_PAIRS if pairs is None else pairs)
        self._validate_pairs()
        self.symmetric = {char for char, closer in self.pairs.items() if char == closer}
        self.closers = {closer for char, closer in self.pairs.items() if char != closer}
        self.logger = logging.getLogger('process.punctuation_checker')

    def _validate_pairs(self) -> None:
        for opener, closer in self.pairs.items():
            if not (isinstance(opener, str) and isinstance(closer, str)
                    and len(opener) == 1 and len(closer) == 1):
                raise ValueError(
                    f"Punctuation pair must map one character to one character: "
                    f"{opener!r} -> {closer!r}"
                )

    def check(self, verse_text: dict) -> list[dict]:
        """
        Scan all verses for unmatched punctuation.

        Args:
            verse_text: Verse key -> text, in document order

        Returns:
            List of issue dicts
        """
        issues = []
        stack: list[_OpenMark] = []
        toggles = {char: False for char in self.symmetric}
        open_verse = None

        for key, text in verse_text.items():
            for char in text:
                if char in self.pairs:
                    if char in self.symmetric:
                        toggles[char] = not toggles[char]
                        opening = toggles[char]
                    else:
                        opening = True

                    if opening:
                        if not stack:
                            open_verse = key
                        stack.append(_OpenMark(char, key))
                        continue

                elif char not in self.closers:
                    continue

                # Closing occurrence: must match the innermost opener
                if stack and self.pairs[stack[-1].char] == char:
                    stack.pop()
                    if not stack:
                        open_verse = None
                else:
                    issues.append({
                        'verse': key,
                        'unmatched_punctuation': char,
                        'comment': f"Unmatched closing punctuation: {char}",
                    })

        reported = set()
        while stack:
            mark = stack.pop()
            if mark.char in reported:
                continue
            reported.add(mark.char)
            issues.append({
                'verse': open_verse,
                'unmatched_punctuation': mark.char,
                'comment': f"Unmatched opening punctuation: {mark.char}",
            })

        self.logger.debug(f"Punctuation check: {len(issues)} issue(s)")
        return issues


def check_punctuation_balance(target_text: dict, pair_config: Optional[dict] = None) -> list[dict]:
    """Unmatched punctuation in the target verse text."""
    return PunctuationChecker(pair_config).check(target_text)


__all__ = [
    'PunctuationChecker',
    'check_punctuation_balance',
]
