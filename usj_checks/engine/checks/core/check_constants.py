# Path: usj_checks/engine/checks/core/check_constants.py
"""
Constants for USJ Checks

Thresholds, character sets and patterns used by the checkers,
kept in one place to avoid magic values in the check code.
"""

import re


# ==============================================================================
# STRUCTURAL INTEGRITY CONSTANTS
# ==============================================================================

ISSUE_OUT_OF_ORDER = 'out_of_order'
ISSUE_DUPLICATE = 'duplicate'
ISSUE_MISSING = 'missing'

# Starting point for "last seen" chapter and verse numbers
INITIAL_LAST_NUMBER = 0

# Label of the document the ordering check runs on
DEFAULT_DOCUMENT_LABEL = 'Target'


# ==============================================================================
# PUNCTUATION BALANCE CONSTANTS
# ==============================================================================

# Opening character -> closing character. A character mapped to itself
# is symmetric: occurrence parity decides whether it opens or closes.
DEFAULT_PUNCTUATION_PAIRS = {
    '(': ')',
    '[': ']',
    '{': '}',
    '«': '»',
    '"': '"',
}


# ==============================================================================
# VERSE LENGTH CONSTANTS
# ==============================================================================

# Percentage difference above which a verse is reported short or long
DEFAULT_SHORT_THRESHOLD = 20

LENGTH_EMPTY = 'empty'
LENGTH_SHORT = 'short'
LENGTH_LONG = 'long'

PERCENT_FACTOR = 100
PERCENT_DECIMALS = 2


# ==============================================================================
# REPEATED WORD / WHITESPACE CONSTANTS
# ==============================================================================

WORD_SPLIT_PATTERN = re.compile(r'\s+')
EXCESSIVE_WHITESPACE_PATTERN = re.compile(r'\s{2,}')

# Characters stripped from a word before comparing it to its neighbour
WORD_PUNCTUATION_PATTERN = re.compile(r'[.,!?"()]')


# ==============================================================================
# NUMERAL CONSTANTS
# ==============================================================================

# Standalone runs of ASCII digits or of Eastern Arabic digits (U+0660..U+0669)
NUMERAL_PATTERN = re.compile(r'(?<!\w)(?:[0-9]+|[٠-٩]+)(?!\w)')

# Eastern Arabic -> ASCII
NUMERAL_TRANSLATION = str.maketrans('٠١٢٣٤٥٦٧٨٩', '0123456789')


# ==============================================================================
# FOOTNOTE QUOTATION CONSTANTS
# ==============================================================================

# Trailing punctuation USFM footnote quotations usually end with
QUOTE_TRAILING_PUNCTUATION = ' :;,.…'

QUOTE_SEPARATOR = ', '


__all__ = [
    'ISSUE_OUT_OF_ORDER',
    'ISSUE_DUPLICATE',
    'ISSUE_MISSING',
    'INITIAL_LAST_NUMBER',
    'DEFAULT_DOCUMENT_LABEL',
    'DEFAULT_PUNCTUATION_PAIRS',
    'DEFAULT_SHORT_THRESHOLD',
    'LENGTH_EMPTY',
    'LENGTH_SHORT',
    'LENGTH_LONG',
    'PERCENT_FACTOR',
    'PERCENT_DECIMALS',
    'WORD_SPLIT_PATTERN',
    'EXCESSIVE_WHITESPACE_PATTERN',
    'WORD_PUNCTUATION_PATTERN',
    'NUMERAL_PATTERN',
    'NUMERAL_TRANSLATION',
    'QUOTE_TRAILING_PUNCTUATION',
    'QUOTE_SEPARATOR',
]
