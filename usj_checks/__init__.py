# Path: usj_checks/__init__.py
"""
USJ Checks Module

Detects translation quality and structural defects by comparing a
target scripture translation with its source, both in USJ (Unified
Scripture JSON) form: missing, duplicated or out-of-order verses,
verse length anomalies, repeated words, whitespace irregularities,
unbalanced punctuation, numeral mismatches and stale footnote quotations.

Architecture (IPO):
- INPUT: loaders/ - USJ JSON reading and validation
- PROCESS: engine/ - document model, extraction, checks, runner
- OUTPUT: output/ - JSON report

Usage:
    usj-checks SOURCE.json TARGET.json

    # Or programmatically:
    from usj_checks import run_checks, get_available_checks

    recipe = get_available_checks()
    for check in recipe:
        check.enabled = True
    report = run_checks(source_json, target_json, recipe)
"""

__version__ = '0.1.0'

from .engine import (
    CheckDescriptor,
    get_available_checks,
    load_recipe,
    CheckRunner,
    run_checks,
    checks,
)
from .engine.document import (
    Document,
    USJHandler,
    extract_verse_text,
    extract_chapter_verse_index,
)
from .engine.checks import (
    check_structural_integrity,
    check_missing_verses,
    check_punctuation_balance,
    check_verse_lengths,
    check_repeated_words_whitespace,
    check_numeral_mismatch,
    check_footnote_quotations,
)
from .loaders import InvalidInputError, USJReader

__all__ = [
    '__version__',
    'CheckDescriptor',
    'get_available_checks',
    'load_recipe',
    'CheckRunner',
    'run_checks',
    'checks',
    'Document',
    'USJHandler',
    'extract_verse_text',
    'extract_chapter_verse_index',
    'check_structural_integrity',
    'check_missing_verses',
    'check_punctuation_balance',
    'check_verse_lengths',
    'check_repeated_words_whitespace',
    'check_numeral_mismatch',
    'check_footnote_quotations',
    'InvalidInputError',
    'USJReader',
]
