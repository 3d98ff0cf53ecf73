# Path: usj_checks/constants.py
"""
USJ Checks Module Constants

Module-wide constants for the translation check system.
Marker vocabulary, check names, levels and logging prefixes live here.
"""

# ==============================================================================
# USJ MARKER VOCABULARY
# ==============================================================================
# These are the external contract with upstream USJ tooling and must match
# byte-for-byte what the converters emit.
MARKER_CHAPTER = 'c'
MARKER_VERSE = 'v'
MARKER_FOOTNOTE = 'f'
MARKER_CROSS_REFERENCE = 'x'
MARKER_FOOTNOTE_END = 'f*'
MARKER_CROSS_REFERENCE_END = 'x*'
MARKER_FOOTNOTE_QUOTE = 'fq'

# Region openers mapped to the marker that closes them in flat documents
EXCLUDED_REGION_MARKERS = {
    MARKER_FOOTNOTE: MARKER_FOOTNOTE_END,
    MARKER_CROSS_REFERENCE: MARKER_CROSS_REFERENCE_END,
}

# USJ node types
TYPE_USJ = 'USJ'
TYPE_CHAR = 'char'
TYPE_NOTE = 'note'

# ==============================================================================
# CHECK NAMES
# ==============================================================================
CHECK_VERSE_STATS = 'versestats::verse_stats'
CHECK_INTEGRITY = 'chapterverse::integrity_check'
CHECK_MISSING_VERSES = 'chapterverse::missing_verses'
CHECK_REPEATED_WORDS_WHITESPACE = 'textquality::repeated_words_whitespace'
CHECK_UNMATCHED_PUNCTUATION = 'textquality::unmatched_punctuation'
CHECK_NUMBER_MISMATCHES = 'numbers_check::mismatches'
CHECK_FOOTNOTE_QUOTATION = 'footnote::quotation_mismatch'

CHECK_NAMES = [
    CHECK_VERSE_STATS,
    CHECK_INTEGRITY,
    CHECK_MISSING_VERSES,
    CHECK_REPEATED_WORDS_WHITESPACE,
    CHECK_UNMATCHED_PUNCTUATION,
    CHECK_NUMBER_MISMATCHES,
    CHECK_FOOTNOTE_QUOTATION,
]

# ==============================================================================
# CHECK LEVELS
# ==============================================================================
LEVEL_MAJOR = 'major'
LEVEL_MINOR = 'minor'

CHECK_LEVELS = [
    LEVEL_MAJOR,
    LEVEL_MINOR,
]

# ==============================================================================
# IPO LOGGING PREFIXES
# ==============================================================================
LOG_INPUT = '[INPUT]'
LOG_PROCESS = '[PROCESS]'
LOG_OUTPUT = '[OUTPUT]'

# ==============================================================================
# OUTPUT
# ==============================================================================
REPORT_FILE = 'report.json'
JSON_INDENT = 4

# ==============================================================================
# TRAVERSAL LIMITS
# ==============================================================================
# Deepest nesting accepted before a document is rejected as hostile
DEFAULT_MAX_DEPTH = 256


__all__ = [
    'MARKER_CHAPTER',
    'MARKER_VERSE',
    'MARKER_FOOTNOTE',
    'MARKER_CROSS_REFERENCE',
    'MARKER_FOOTNOTE_END',
    'MARKER_CROSS_REFERENCE_END',
    'MARKER_FOOTNOTE_QUOTE',
    'EXCLUDED_REGION_MARKERS',
    'TYPE_USJ',
    'TYPE_CHAR',
    'TYPE_NOTE',
    'CHECK_VERSE_STATS',
    'CHECK_INTEGRITY',
    'CHECK_MISSING_VERSES',
    'CHECK_REPEATED_WORDS_WHITESPACE',
    'CHECK_UNMATCHED_PUNCTUATION',
    'CHECK_NUMBER_MISMATCHES',
    'CHECK_FOOTNOTE_QUOTATION',
    'CHECK_NAMES',
    'LEVEL_MAJOR',
    'LEVEL_MINOR',
    'CHECK_LEVELS',
    'LOG_INPUT',
    'LOG_PROCESS',
    'LOG_OUTPUT',
    'REPORT_FILE',
    'JSON_INDENT',
    'DEFAULT_MAX_DEPTH',
]
