# Path: usj_checks/engine/checks/text_quality/verse_length_checker.py
"""
Verse Length Checker

Compares source and target verse lengths:
- empty on one side, text on the other -> 'empty'
- target longer than source by more than the threshold -> 'long'
- target shorter than source by more than the threshold -> 'short'

Difference = (target_length - source_length) / source_length * 100,
reported as an absolute percentage string ("25%", "23.08%").
"""

import logging
from typing import Optional

from ..core.check_constants import (
    DEFAULT_SHORT_THRESHOLD,
    LENGTH_EMPTY,
    LENGTH_SHORT,
    LENGTH_LONG,
    PERCENT_FACTOR,
    PERCENT_DECIMALS,
)


def format_percentage(value: float) -> str:
    """Format a percentage with at most two decimals: 25.0 -> '25%'."""
    text = f'{value:.{PERCENT_DECIMALS}f}'.rstrip('0').rstrip('.')
    return f'{text}%'


class VerseLengthChecker:
    """
    Detects empty, short and long target verses.

    Example:
        checker = VerseLengthChecker(threshold=30)
        issues = checker.check(source_text, target_text)
    """

    def __init__(self, threshold: Optional[float] = None):
        """
        Initialize verse length checker.

        Args:
            threshold: Percentage difference tolerated (default 20)
        """
        self.threshold = DEFAULT_SHORT_THRESHOLD if threshold is None else threshold
        self.logger = logging.getLogger('process.verse_length_checker')

    def check(self, source_text: dict, target_text: dict) -> list[dict]:
        """
        Compare every source verse with the target verse of the same key.

        Args:
            source_text: Source verse key -> text
            target_text: Target verse key -> text

        Returns:
            List of issue dicts
        """
        issues = []

        for key, source in source_text.items():
            target = target_text.get(key, '')
            source_length = len(source.strip())
            target_length = len(target.strip())

            if source_length == 0 and target_length > 0:
                issues.append(self._issue(
                    key, LENGTH_EMPTY, source_length, target_length, target, None,
                    'Source verse is empty, but target contains text.'
                ))
            elif source_length > 0 and target_length == 0:
                issues.append(self._issue(
                    key, LENGTH_EMPTY, source_length, target_length, source, None,
                    'Target verse is empty, but source contains text.'
                ))
            elif source_length > 0 and target_length > 0:
                difference = (target_length - source_length) / source_length * PERCENT_FACTOR
                if abs(difference) > self.threshold:
                    if difference > 0:
                        kind = LENGTH_LONG
                        comment = 'Target verse is too long compared to source.'
                    else:
                        kind = LENGTH_SHORT
                        comment = 'Target verse is too short compared to source.'
                    issues.append(self._issue(
                        key, kind, source_length, target_length, source,
                        format_percentage(abs(difference)), comment
                    ))

        self.logger.debug(f"Verse length check (threshold {self.threshold}%): {len(issues)} issue(s)")
        return issues

    @staticmethod
    def _issue(key, kind, source_length, target_length, text, difference, comment) -> dict:
        return {
            'verse': key,
            'type': kind,
            'source_length': source_length,
            'target_length': target_length,
            'verse_text': text,
            'difference': difference,
            'comment': comment,
        }


def check_verse_lengths(
    source_text: dict,
    target_text: dict,
    threshold_percent: float = DEFAULT_SHORT_THRESHOLD
) -> list[dict]:
    """Empty, short and long target verses."""
    return VerseLengthChecker(threshold_percent).check(source_text, target_text)


__all__ = [
    'VerseLengthChecker',
    'check_verse_lengths',
    'format_percentage',
]
