# Path: usj_checks/engine/checks/__init__.py
"""
USJ Checks Package

Organized into logical subpackages:

- core/: Shared types and constants
  - check_report: CheckReport dataclass collected by the runner
  - check_constants: thresholds, punctuation pairs, patterns

- structure/: Chapter/verse structure
  - integrity_checker: out-of-order, duplicate and missing verses

- punctuation/: Paired punctuation
  - punctuation_checker: unmatched opening/closing punctuation

- text_quality/: Verse text quality
  - verse_length_checker: empty, short and long verses
  - repeated_words_checker: repeated words and whitespace runs
  - numeral_checker: numeral mismatches between source and target
  - footnote_quote_checker: footnote quotations absent from the verse
"""

from .core import CheckReport, DEFAULT_PUNCTUATION_PAIRS, DEFAULT_SHORT_THRESHOLD
from .structure import IntegrityChecker, check_structural_integrity, check_missing_verses
from .punctuation import PunctuationChecker, check_punctuation_balance
from .text_quality import (
    VerseLengthChecker,
    check_verse_lengths,
    RepeatedWordsChecker,
    check_repeated_words_whitespace,
    NumeralChecker,
    check_numeral_mismatch,
    FootnoteQuoteChecker,
    check_footnote_quotations,
)

__all__ = [
    'CheckReport',
    'DEFAULT_PUNCTUATION_PAIRS',
    'DEFAULT_SHORT_THRESHOLD',
    'IntegrityChecker',
    'check_structural_integrity',
    'check_missing_verses',
    'PunctuationChecker',
    'check_punctuation_balance',
    'VerseLengthChecker',
    'check_verse_lengths',
    'RepeatedWordsChecker',
    'check_repeated_words_whitespace',
    'NumeralChecker',
    'check_numeral_mismatch',
    'FootnoteQuoteChecker',
    'check_footnote_quotations',
]
