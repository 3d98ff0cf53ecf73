# Path: usj_checks/engine/checks/text_quality/numeral_checker.py
"""
Numeral Mismatch Checker

Compares the numbers written in each source verse with those in the
target verse of the same key. ASCII digits and Eastern Arabic digits
are recognised; both are normalised to ASCII before comparing, so
"42" in the source matches "٤٢" in the target.

Reported:
- missing_numbers: in the source, not in the target
- extra_numbers: in the target, not in the source
each with the character offset of its first occurrence.
"""

import logging

from ..core.check_constants import (
    NUMERAL_PATTERN,
    NUMERAL_TRANSLATION,
)


def extract_numerals(text: str) -> dict:
    """
    Collect the numerals of a text.

    Args:
        text: Verse text

    Returns:
        Normalised number -> (number as written, first offset), in order
        of first appearance
    """
    numerals = {}
    for match in NUMERAL_PATTERN.finditer(text):
        normalized = match.group(0).translate(NUMERAL_TRANSLATION)
        if normalized not in numerals:
            numerals[normalized] = (match.group(0), match.start())
    return numerals


class NumeralChecker:
    """Detects numbers that differ between source and target verses."""

    def __init__(self):
        self.logger = logging.getLogger('process.numeral_checker')

    def check(self, source_text: dict, target_text: dict) -> list[dict]:
        """
        Compare numerals verse by verse.

        Args:
            source_text: Source verse key -> text
            target_text: Target verse key -> text

        Returns:
            List of issue dicts
        """
        issues = []

        for key, source in source_text.items():
            source_numbers = extract_numerals(source)
            target_numbers = extract_numerals(target_text.get(key, ''))

            missing = [
                {'number': written, 'position': position}
                for normalized, (written, position) in source_numbers.items()
                if normalized not in target_numbers
            ]
            extra = [
                {'number': written, 'position': position}
                for normalized, (written, position) in target_numbers.items()
                if normalized not in source_numbers
            ]

            if not missing and not extra:
                continue

            missing_list = ', '.join(item['number'] for item in missing)
            extra_list = ', '.join(item['number'] for item in extra)
            issues.append({
                'verse': key,
                'verse_text': source,
                'missing_numbers': missing,
                'extra_numbers': extra,
                'comment': (
                    f"Number mismatches detected. Missing: [{missing_list}], "
                    f"Extra: [{extra_list}]"
                ),
            })

        self.logger.debug(f"Numeral check: {len(issues)} verse(s) with mismatches")
        return issues


def check_numeral_mismatch(source_text: dict, target_text: dict) -> list[dict]:
    """Numbers missing from or added to the target."""
    return NumeralChecker().check(source_text, target_text)


__all__ = [
    'NumeralChecker',
    'check_numeral_mismatch',
    'extract_numerals',
]
