# Path: usj_checks/tests/fixtures.py
"""
Test Fixtures for USJ Checks

Small builders for USJ content plus sample source/target documents.

Contains:
- Node builders (chapter, verse, para, char, note, flat markers)
- A French source and an English target of the same two chapters,
  where the target carries one defect per check
- Helpers writing documents and recipes to temporary files
"""

import json
from pathlib import Path


# ==============================================================================
# NODE BUILDERS
# ==============================================================================

def usj(*content) -> dict:
    """USJ envelope."""
    return {'type': 'USJ', 'version': '3.0', 'content': list(content)}


def book(code: str = 'TIT') -> dict:
    return {'type': 'book', 'marker': 'id', 'code': code, 'content': []}


def chapter(number) -> dict:
    return {'type': 'chapter', 'marker': 'c', 'number': str(number), 'sid': f'TIT {number}'}


def verse(number) -> dict:
    return {'type': 'verse', 'marker': 'v', 'number': str(number)}


def para(*content, marker: str = 'p') -> dict:
    return {'type': 'para', 'marker': marker, 'content': list(content)}


def char(marker: str, *content) -> dict:
    return {'type': 'char', 'marker': marker, 'content': list(content)}


def note(marker: str, *content, caller: str = '+') -> dict:
    """Footnote/cross-reference node holding its content."""
    return {'type': 'note', 'marker': marker, 'caller': caller, 'content': list(content)}


def flat(marker: str) -> dict:
    """Content-less milestone marker, as flat converters emit 'f' / 'f*'."""
    return {'type': 'ms', 'marker': marker}


# ==============================================================================
# SAMPLE DOCUMENTS
# ==============================================================================

def create_source_usj() -> dict:
    """
    Source document (French), two chapters.

    1:1 has a footnote, 1:3 quotes the number 42, 2:2 exists only here.
    """
    return usj(
        book(),
        chapter(1),
        para(
            verse(1), 'Paul, serviteur de Dieu ',
            note('f', char('fr', '1.1 '), char('fq', 'serviteur'), char('ft', ' esclave')),
            'et apôtre.',
            verse(2), 'Dans l’espérance de la vie éternelle.',
            verse(3), 'Il avait 42 disciples.',
        ),
        chapter(2),
        para(
            verse(1), 'Pour toi, dis ce qui est conforme.',
            verse(2), 'Que les vieillards soient sobres.',
        ),
    )


def create_target_usj() -> dict:
    """
    Target document (English) with one defect per check.

    - 1:2 repeats a word and holds a double space
    - 1:3 writes 99 instead of 42
    - 2:1 opens a parenthesis it never closes
    - 2:2 is missing
    - the 1:1 footnote quotes a word the verse no longer has
    """
    return usj(
        book(),
        chapter(1),
        para(
            verse(1), 'Paul, a slave of God ',
            note('f', char('fr', '1.1 '), char('fq', 'servant'), char('ft', ' or bondman')),
            'and apostle.',
            verse(2), 'In the the hope of  eternal life.',
            verse(3), 'He had 99 disciples.',
        ),
        chapter(2),
        para(
            verse(1), 'But you, speak (what is fitting.',
        ),
    )


def create_clean_usj() -> dict:
    """A document with nothing to report when checked against itself."""
    return usj(
        chapter(1),
        para(
            verse(1), 'In the beginning (a word) was spoken.',
            verse(2), 'And the light shone in the darkness.',
        ),
    )


# ==============================================================================
# FILE HELPERS
# ==============================================================================

def write_json(directory: Path, name: str, data) -> Path:
    """Write data as JSON under directory and return the path."""
    path = Path(directory) / name
    with open(path, 'w', encoding='utf-8') as f:
        json.dump(data, f, ensure_ascii=False, indent=2)
    return path


def enabled_recipe(*names) -> list[dict]:
    """Recipe entries enabling the named checks."""
    return [{'name': name, 'enabled': True} for name in names]
