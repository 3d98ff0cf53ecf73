# Path: usj_checks/tests/test_checks.py
"""
Unit tests for the individual checkers.

Tests:
- IntegrityChecker: ordering, duplicates, missing verses
- PunctuationChecker: pairs across verses, mismatches, symmetric marks
- VerseLengthChecker: empty, short, long, percentage format
- RepeatedWordsChecker: repeated words and whitespace runs
- NumeralChecker: ASCII and Eastern Arabic digits
- FootnoteQuoteChecker: quotations absent from their verse
"""

import sys
from pathlib import Path

# Add parent to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent.parent))

import pytest

from usj_checks.engine.checks import (
    IntegrityChecker,
    PunctuationChecker,
    check_structural_integrity,
    check_missing_verses,
    check_punctuation_balance,
    check_verse_lengths,
    check_repeated_words_whitespace,
    check_numeral_mismatch,
    check_footnote_quotations,
)
from usj_checks.engine.checks.text_quality import format_percentage, extract_numerals


# ==============================================================================
# STRUCTURAL INTEGRITY
# ==============================================================================

def test_ordering_clean_index():
    assert check_structural_integrity({1: [1, 2, 3], 2: [1, 2]}) == []


def test_out_of_order_verse():
    issues = check_structural_integrity({1: [1, 3, 2]}, {'1:2': 'Second.'})

    assert len(issues) == 1
    assert issues[0]['type'] == 'out_of_order'
    assert issues[0]['chapter'] == 1
    assert issues[0]['verse'] == 2
    assert issues[0]['verse_text'] == 'Second.'
    assert issues[0]['comment'] == 'Target has out-of-order verse 2 in chapter 1.'

    print("[OK] Out-of-order verse detected")


def test_duplicate_verse_also_out_of_order():
    issues = check_structural_integrity({1: [1, 2, 3, 2]})

    types = [issue['type'] for issue in issues]
    assert types == ['out_of_order', 'duplicate']
    assert issues[1]['comment'] == 'Target has duplicate verse 2 in chapter 1.'


def test_duplicate_in_order():
    issues = check_structural_integrity({1: [1, 1, 2]})
    assert [issue['type'] for issue in issues] == ['duplicate']


def test_out_of_order_chapter():
    issues = check_structural_integrity({1: [1], 3: [1], 2: [1]})

    assert len(issues) == 1
    assert issues[0]['chapter'] == 2
    assert 'verse' not in issues[0]
    assert issues[0]['comment'] == 'Target has out-of-order chapter 2.'


def test_unparseable_verses_are_skipped():
    assert check_structural_integrity({1: [1, None, 2, None]}) == []


def test_ordering_label():
    issues = IntegrityChecker().check_ordering({1: [2, 1]}, label='Source')
    assert issues[0]['comment'].startswith('Source has out-of-order verse 1')


def test_missing_verses():
    source = {1: [1, 2, 3], 2: [1, 2]}
    target = {1: [1, 3], 2: [1, 2, 3]}
    issues = check_missing_verses(source, target, {'1:2': 'Deux.'})

    assert len(issues) == 1
    assert issues[0]['type'] == 'missing'
    assert (issues[0]['chapter'], issues[0]['verse']) == (1, 2)
    assert issues[0]['verse_text'] == 'Deux.'
    assert issues[0]['comment'] == 'Target is missing verse 2 in chapter 1.'

    print("[OK] Missing verse detected, target-only verse ignored")


def test_missing_whole_chapter_reported_once_per_verse():
    issues = check_missing_verses({1: [1], 2: [1, 2, 2]}, {1: [1]})
    assert [(i['chapter'], i['verse']) for i in issues] == [(2, 1), (2, 2)]


# ==============================================================================
# PUNCTUATION BALANCE
# ==============================================================================

def test_balanced_punctuation():
    text = {'1:1': 'He said (quietly) "peace" [to all] {amen} «ok».'}
    assert check_punctuation_balance(text) == []


def test_mismatched_closer_reports_both_sides():
    issues = check_punctuation_balance({'1:1': '(abc]'})

    assert len(issues) == 2
    assert issues[0]['unmatched_punctuation'] == ']'
    assert issues[0]['comment'] == 'Unmatched closing punctuation: ]'
    assert issues[0]['verse'] == '1:1'
    assert issues[1]['unmatched_punctuation'] == '('
    assert issues[1]['comment'] == 'Unmatched opening punctuation: ('
    assert issues[1]['verse'] == '1:1'

    print("[OK] Mismatched closer and dangling opener both reported")


def test_pair_across_verses_is_balanced():
    text = {'1:1': 'He said (this', '1:2': 'and that) to them.'}
    assert check_punctuation_balance(text) == []


def test_unclosed_opener_reported_at_opening_verse():
    text = {'1:1': 'Fine.', '1:2': 'He said (this', '1:3': 'and more [that]'}
    issues = check_punctuation_balance(text)

    assert len(issues) == 1
    assert issues[0]['verse'] == '1:2'
    assert issues[0]['unmatched_punctuation'] == '('


def test_repeated_unclosed_opener_reported_once():
    issues = check_punctuation_balance({'1:1': '((('})
    assert len(issues) == 1


def test_stray_closer():
    issues = check_punctuation_balance({'1:1': 'ok)', '1:2': 'fine'})
    assert issues == [{
        'verse': '1:1',
        'unmatched_punctuation': ')',
        'comment': 'Unmatched closing punctuation: )',
    }]


def test_symmetric_quote():
    assert check_punctuation_balance({'1:1': '"a" "b"'}) == []

    issues = check_punctuation_balance({'1:1': 'he said "go'})
    assert len(issues) == 1
    assert issues[0]['comment'] == 'Unmatched opening punctuation: "'


def test_custom_pairs():
    pairs = {'‹': '›'}
    assert check_punctuation_balance({'1:1': '(‹a›'}, pairs) == []

    issues = check_punctuation_balance({'1:1': '‹a'}, pairs)
    assert issues[0]['unmatched_punctuation'] == '‹'


def test_invalid_pairs_rejected():
    with pytest.raises(ValueError):
        PunctuationChecker({'((': ')'})
    with pytest.raises(ValueError):
        PunctuationChecker({'(': ''})


# ==============================================================================
# VERSE LENGTH
# ==============================================================================

def test_format_percentage():
    assert format_percentage(25.0) == '25%'
    assert format_percentage(23.076923) == '23.08%'
    assert format_percentage(12.5) == '12.5%'


def test_verse_length_within_threshold():
    source = {'1:1': 'a' * 100}
    target = {'1:1': 'b' * 110}
    assert check_verse_lengths(source, target) == []


def test_verse_length_long_and_short():
    source = {'1:1': 'a' * 100, '1:2': 'a' * 100}
    target = {'1:1': 'b' * 125, '1:2': 'b' * 70}
    issues = check_verse_lengths(source, target)

    assert len(issues) == 2
    assert issues[0]['type'] == 'long'
    assert issues[0]['difference'] == '25%'
    assert issues[0]['comment'] == 'Target verse is too long compared to source.'
    assert issues[1]['type'] == 'short'
    assert issues[1]['difference'] == '30%'
    assert issues[1]['source_length'] == 100
    assert issues[1]['target_length'] == 70

    print("[OK] Long and short verses detected with percentage")


def test_verse_length_empty_sides():
    source = {'1:1': 'Texte.', '1:2': ''}
    target = {'1:2': 'Text.'}
    issues = check_verse_lengths(source, target)

    assert [issue['type'] for issue in issues] == ['empty', 'empty']
    assert issues[0]['comment'] == 'Target verse is empty, but source contains text.'
    assert issues[1]['comment'] == 'Source verse is empty, but target contains text.'
    assert issues[0]['difference'] is None


def test_verse_length_custom_threshold():
    source = {'1:1': 'a' * 100}
    target = {'1:1': 'b' * 125}
    assert check_verse_lengths(source, target, threshold_percent=30) == []


# ==============================================================================
# REPEATED WORDS / WHITESPACE
# ==============================================================================

def test_repeated_word():
    issues = check_repeated_words_whitespace({'1:1': 'il dit dit bonjour'})

    assert len(issues) == 1
    assert issues[0]['repeated_words'] == ['dit']
    assert issues[0]['positions'] == [1]
    assert issues[0]['whitespace_issue'] is False
    assert issues[0]['comment'] == 'Consecutive repeated words: dit'

    print("[OK] Repeated word detected at word index")


def test_repeated_word_ignores_case_and_punctuation():
    issues = check_repeated_words_whitespace({'1:1': 'The the, end.'})
    assert issues[0]['repeated_words'] == ['the']


def test_excessive_whitespace():
    issues = check_repeated_words_whitespace({'1:1': 'a  b'})

    assert issues[0]['repeated_words'] == []
    assert issues[0]['whitespace_positions'] == [1]
    assert issues[0]['whitespace_issue'] is True
    assert issues[0]['comment'] == 'Excessive whitespace detected'


def test_clean_verse_not_reported():
    assert check_repeated_words_whitespace({'1:1': 'a b c', '1:2': ''}) == []


# ==============================================================================
# NUMERALS
# ==============================================================================

def test_extract_numerals():
    numerals = extract_numerals('In 12 days, 3 men and 12 women; v2 ignored')
    assert numerals == {'12': ('12', 3), '3': ('3', 12)}


def test_numeral_mismatch():
    issues = check_numeral_mismatch({'1:1': 'He had 42 sheep.'}, {'1:1': 'He had 99 sheep.'})

    assert len(issues) == 1
    assert issues[0]['missing_numbers'] == [{'number': '42', 'position': 7}]
    assert issues[0]['extra_numbers'] == [{'number': '99', 'position': 7}]
    assert issues[0]['comment'] == 'Number mismatches detected. Missing: [42], Extra: [99]'

    print("[OK] Numeral mismatch reported")


def test_eastern_arabic_numerals_match_ascii():
    assert check_numeral_mismatch({'1:1': 'He had 42 sheep.'}, {'1:1': 'كان له ٤٢ خروفا'}) == []


def test_numbers_missing_from_absent_target_verse():
    issues = check_numeral_mismatch({'1:1': 'Year 7.'}, {})
    assert issues[0]['missing_numbers'] == [{'number': '7', 'position': 5}]
    assert issues[0]['extra_numbers'] == []


# ==============================================================================
# FOOTNOTE QUOTATIONS
# ==============================================================================

def test_footnote_quote_found():
    quotes = {'1:1': ['Servant:', 'of  God']}
    text = {'1:1': 'Paul, a servant of God.'}
    assert check_footnote_quotations(quotes, text) == []


def test_footnote_quote_not_found():
    quotes = {'1:1': ['servant', 'apostle', 'bondman']}
    text = {'1:1': 'Paul, a slave of God and apostle.'}
    issues = check_footnote_quotations(quotes, text)

    assert len(issues) == 1
    assert issues[0]['verse'] == '1:1'
    assert issues[0]['unmatched_quotes'] == ['servant', 'bondman']
    assert issues[0]['comment'] == 'Quoted text not found in the verse (1:1): servant, bondman'

    print("[OK] Footnote quotation mismatch reported")
