# Path: usj_checks/engine/checks/text_quality/__init__.py
"""
Text quality checks working on extracted verse text.

Contains:
- verse_length_checker: empty, short and long verses
- repeated_words_checker: consecutive repeated words, whitespace runs
- numeral_checker: numbers missing from or added to the target
- footnote_quote_checker: footnote quotations absent from their verse
"""

from .verse_length_checker import VerseLengthChecker, check_verse_lengths, format_percentage
from .repeated_words_checker import RepeatedWordsChecker, check_repeated_words_whitespace
from .numeral_checker import NumeralChecker, check_numeral_mismatch, extract_numerals
from .footnote_quote_checker import FootnoteQuoteChecker, check_footnote_quotations

__all__ = [
    'VerseLengthChecker',
    'check_verse_lengths',
    'format_percentage',
    'RepeatedWordsChecker',
    'check_repeated_words_whitespace',
    'NumeralChecker',
    'check_numeral_mismatch',
    'extract_numerals',
    'FootnoteQuoteChecker',
    'check_footnote_quotations',
]
