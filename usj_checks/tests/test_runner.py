# Path: usj_checks/tests/test_runner.py
"""
Integration tests for the check runner.

Runs the sample source/target documents through the full path:
reader -> extractor -> checks -> report.

Tests:
- Recipe registry and normalization
- Dispatch of every check on the sample documents
- Failure isolation and unknown checks
- Invalid input handling
"""

import json
import sys
from pathlib import Path

# Add parent to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent.parent))

import pytest

from usj_checks import (
    CheckDescriptor,
    CheckRunner,
    InvalidInputError,
    USJReader,
    checks,
    get_available_checks,
    load_recipe,
    run_checks,
)
from usj_checks.constants import (
    CHECK_NAMES,
    CHECK_VERSE_STATS,
    CHECK_INTEGRITY,
    CHECK_MISSING_VERSES,
    CHECK_REPEATED_WORDS_WHITESPACE,
    CHECK_UNMATCHED_PUNCTUATION,
    CHECK_NUMBER_MISMATCHES,
    CHECK_FOOTNOTE_QUOTATION,
)
from usj_checks.tests.fixtures import (
    create_source_usj,
    create_target_usj,
    create_clean_usj,
    enabled_recipe,
    write_json,
)


def _by_name(report: dict) -> dict:
    return {check['name']: check for check in report['checks']}


# ==============================================================================
# RECIPES
# ==============================================================================

def test_available_checks_registry():
    available = get_available_checks()

    assert [d.name for d in available] == CHECK_NAMES
    assert all(not d.enabled for d in available)
    assert all(d.read_name and d.description and d.level for d in available)

    # Callers get copies
    available[0].enabled = True
    available[0].parameters['short_threshold'] = 99
    fresh = get_available_checks()[0]
    assert fresh.enabled is False
    assert fresh.parameters['short_threshold'] == 20

    print("[OK] Registry lists every check, disabled, as copies")


def test_descriptor_round_trip_keys():
    descriptor = CheckDescriptor.from_dict({
        'name': CHECK_VERSE_STATS,
        'readName': 'Stats',
        'enabled': True,
        'parameters': {'short_threshold': 30},
    })
    assert descriptor.read_name == 'Stats'
    assert descriptor.to_dict()['readName'] == 'Stats'
    assert descriptor.to_dict()['parameters'] == {'short_threshold': 30}


def test_load_recipe_accepts_json_and_objects():
    recipe = load_recipe(json.dumps(enabled_recipe(CHECK_INTEGRITY)))
    assert recipe[0].name == CHECK_INTEGRITY
    assert recipe[0].enabled is True

    mixed = load_recipe([CheckDescriptor(CHECK_INTEGRITY), {'name': CHECK_MISSING_VERSES}])
    assert [d.name for d in mixed] == [CHECK_INTEGRITY, CHECK_MISSING_VERSES]
    assert mixed[1].enabled is False


def test_load_recipe_rejects_bad_shapes():
    with pytest.raises(ValueError):
        load_recipe('{"name": "x"}')
    with pytest.raises(ValueError):
        load_recipe([{'enabled': True}])
    with pytest.raises(ValueError):
        load_recipe('not json')


# ==============================================================================
# DISPATCH
# ==============================================================================

def test_all_checks_on_sample_documents():
    recipe = get_available_checks()
    for descriptor in recipe:
        descriptor.enabled = True

    report = run_checks(create_source_usj(), create_target_usj(), recipe)
    found = _by_name(report)

    assert CHECK_INTEGRITY not in found
    assert set(found) == set(CHECK_NAMES) - {CHECK_INTEGRITY}

    missing = found[CHECK_MISSING_VERSES]
    assert missing['readName'] == 'Missing verses'
    assert missing['level'] == 'major'
    assert [(i['chapter'], i['verse']) for i in missing['issues']] == [(2, 2)]

    stats = found[CHECK_VERSE_STATS]['issues']
    assert [(i['verse'], i['type']) for i in stats] == [('2:2', 'empty')]

    repeated = found[CHECK_REPEATED_WORDS_WHITESPACE]['issues']
    assert repeated[0]['verse'] == '1:2'
    assert repeated[0]['repeated_words'] == ['the']
    assert repeated[0]['whitespace_positions'] == [18]

    punctuation = found[CHECK_UNMATCHED_PUNCTUATION]['issues']
    assert punctuation == [{
        'verse': '2:1',
        'unmatched_punctuation': '(',
        'comment': 'Unmatched opening punctuation: (',
    }]

    numbers = found[CHECK_NUMBER_MISMATCHES]['issues']
    assert numbers[0]['verse'] == '1:3'
    assert numbers[0]['comment'] == 'Number mismatches detected. Missing: [42], Extra: [99]'

    quotes = found[CHECK_FOOTNOTE_QUOTATION]['issues']
    assert quotes[0]['comment'] == 'Quoted text not found in the verse (1:1): servant'

    print("[OK] Every check dispatched on sample documents")


def test_only_enabled_checks_run():
    report = run_checks(
        create_source_usj(),
        create_target_usj(),
        enabled_recipe(CHECK_MISSING_VERSES) + [{'name': CHECK_NUMBER_MISMATCHES, 'enabled': False}],
    )
    assert [check['name'] for check in report['checks']] == [CHECK_MISSING_VERSES]


def test_clean_documents_produce_empty_report():
    recipe = enabled_recipe(*CHECK_NAMES)
    assert run_checks(create_clean_usj(), create_clean_usj(), recipe) == {'checks': []}


def test_checks_entry_point_takes_json_text():
    report = checks(
        json.dumps(create_source_usj()),
        json.dumps(create_target_usj()),
        json.dumps(enabled_recipe(CHECK_MISSING_VERSES)),
    )
    assert len(report['checks']) == 1
    assert report['checks'][0]['description'].startswith('Identifies verses that are missing')


def test_recipe_parameters_reach_the_check():
    recipe = [{
        'name': CHECK_UNMATCHED_PUNCTUATION,
        'enabled': True,
        'parameters': {'pairs': {'[': ']'}},
    }]
    # The unclosed '(' of 2:1 is not a configured pair
    assert run_checks(create_source_usj(), create_target_usj(), recipe) == {'checks': []}


def test_threshold_parameter():
    recipe = [{
        'name': CHECK_VERSE_STATS,
        'enabled': True,
        'parameters': {'short_threshold': 5},
    }]
    report = run_checks(create_source_usj(), create_target_usj(), recipe)
    kinds = {i['verse']: i['type'] for i in report['checks'][0]['issues']}
    assert kinds['2:1'] == 'short'
    assert kinds['2:2'] == 'empty'


def test_unknown_check_is_skipped():
    runner = CheckRunner()
    reports = runner.run(
        create_source_usj(),
        create_target_usj(),
        enabled_recipe('nonexistent::check', CHECK_MISSING_VERSES),
    )
    assert [r.name for r in reports] == [CHECK_MISSING_VERSES]


def test_failing_check_is_isolated():
    recipe = [
        {'name': CHECK_UNMATCHED_PUNCTUATION, 'enabled': True, 'parameters': {'pairs': {'((': ')'}}},
        {'name': CHECK_MISSING_VERSES, 'enabled': True},
    ]
    runner = CheckRunner(continue_on_error=True)
    reports = runner.run(create_source_usj(), create_target_usj(), recipe)

    assert reports[0].failed
    assert reports[0].error.startswith('Punctuation pair must map one character')
    assert reports[0].issues == []
    assert reports[1].has_issues

    report = runner.to_report(reports)
    assert 'error' in report['checks'][0]
    assert report['checks'][1]['name'] == CHECK_MISSING_VERSES

    print("[OK] A failing check does not stop the others")


def test_failing_check_raises_when_not_continuing():
    recipe = [{'name': CHECK_UNMATCHED_PUNCTUATION, 'enabled': True, 'parameters': {'pairs': {'((': ')'}}}]
    runner = CheckRunner(continue_on_error=False)
    with pytest.raises(ValueError):
        runner.run(create_source_usj(), create_target_usj(), recipe)


# ==============================================================================
# INVALID INPUT
# ==============================================================================

def test_invalid_document_json():
    with pytest.raises(InvalidInputError) as excinfo:
        checks('{not json', json.dumps(create_target_usj()), '[]')
    assert str(excinfo.value).startswith('Invalid input')


def test_invalid_recipe_json():
    with pytest.raises(InvalidInputError):
        checks(json.dumps(create_source_usj()), json.dumps(create_target_usj()), '{broken')


def test_document_without_content():
    with pytest.raises(InvalidInputError):
        run_checks({'type': 'USJ'}, create_target_usj(), [])


def test_document_too_deep():
    node = 'x'
    for _ in range(40):
        node = {'type': 'char', 'marker': 'w', 'content': [node]}
    deep = {'type': 'USJ', 'content': [node]}

    with pytest.raises(InvalidInputError):
        CheckRunner(max_depth=10).run(deep, create_target_usj(), [])


def test_deep_document_within_configured_depth():
    node = 'deep'
    for _ in range(3000):
        node = {'type': 'char', 'marker': 'w', 'content': [node]}
    deep = {'type': 'USJ', 'content': [
        {'type': 'chapter', 'marker': 'c', 'number': '1'},
        {'type': 'para', 'marker': 'p', 'content': [{'type': 'verse', 'marker': 'v', 'number': '1'}, node]},
    ]}

    runner = CheckRunner(max_depth=5000)
    reports = runner.run(deep, deep, enabled_recipe(*CHECK_NAMES))

    assert runner.to_report(reports) == {'checks': []}
    assert all(not report.failed for report in reports)

    print("[OK] Deep documents run through every check")


def test_json_text_too_deep_to_parse():
    text = '{"type": "USJ", "content": [' + '{"content": [' * 100000 + ']}' * 100000 + ']}'
    with pytest.raises(InvalidInputError):
        USJReader(max_depth=200000).read_text(text)


def test_reader_sources(tmp_path):
    reader = USJReader()
    path = write_json(tmp_path, 'source.json', create_source_usj())

    from_file = reader.load(path)
    from_text = reader.load(path.read_text(encoding='utf-8'))
    from_bytes = reader.load(path.read_bytes())
    from_object = reader.load(create_source_usj())

    assert from_file == from_text == from_bytes == from_object
    assert reader.load(from_file) is from_file

    with pytest.raises(InvalidInputError):
        reader.load(tmp_path / 'absent.json')
    with pytest.raises(InvalidInputError):
        reader.load(42)
