# Path: usj_checks/engine/recipe.py
"""
Check Recipe Registry

A recipe is the list of checks a caller wants to run. Each entry names
a check, says whether it is enabled and carries its parameters.

get_available_checks() returns every known check, all disabled, so a
caller can present the list and switch entries on.
"""

import copy
import json
from dataclasses import dataclass, field
from typing import Optional, Union

from ..constants import (
    CHECK_VERSE_STATS,
    CHECK_INTEGRITY,
    CHECK_MISSING_VERSES,
    CHECK_REPEATED_WORDS_WHITESPACE,
    CHECK_UNMATCHED_PUNCTUATION,
    CHECK_NUMBER_MISMATCHES,
    CHECK_FOOTNOTE_QUOTATION,
    LEVEL_MAJOR,
    LEVEL_MINOR,
)
from .checks.core.check_constants import DEFAULT_PUNCTUATION_PAIRS, DEFAULT_SHORT_THRESHOLD


@dataclass
class CheckDescriptor:
    """
    One recipe entry.

    Attributes:
        name: Check name (e.g., 'versestats::verse_stats')
        read_name: Human-readable name
        description: What the check looks for
        level: 'major' or 'minor'
        enabled: Whether the runner executes it
        parameters: Check-specific parameters
    """
    name: str
    read_name: Optional[str] = None
    description: Optional[str] = None
    level: Optional[str] = None
    enabled: bool = False
    parameters: dict = field(default_factory=dict)

    def to_dict(self) -> dict:
        """Serialize with the camelCase keys recipe files use."""
        result = {
            'name': self.name,
            'readName': self.read_name,
            'description': self.description,
            'level': self.level,
            'enabled': self.enabled,
        }
        if self.parameters:
            result['parameters'] = copy.deepcopy(self.parameters)
        return result

    @classmethod
    def from_dict(cls, data: dict) -> 'CheckDescriptor':
        """
        Build a descriptor from a recipe entry.

        Raises:
            ValueError: If the entry has no name
        """
        if not isinstance(data, dict) or not data.get('name'):
            raise ValueError(f"Recipe entry needs a 'name': {data!r}")
        return cls(
            name=data['name'],
            read_name=data.get('readName', data.get('read_name')),
            description=data.get('description'),
            level=data.get('level'),
            enabled=bool(data.get('enabled', False)),
            parameters=dict(data.get('parameters') or {}),
        )


AVAILABLE_CHECKS = (
    CheckDescriptor(
        name=CHECK_VERSE_STATS,
        read_name='Verse statistics',
        description='Checks for empty, short and long verses',
        level=LEVEL_MINOR,
        parameters={'short_threshold': DEFAULT_SHORT_THRESHOLD},
    ),
    CheckDescriptor(
        name=CHECK_INTEGRITY,
        read_name='Integrity check',
        description='Checks for duplicated or out-of-order chapter/verse numbers',
        level=LEVEL_MAJOR,
    ),
    CheckDescriptor(
        name=CHECK_MISSING_VERSES,
        read_name='Missing verses',
        description='Identifies verses that are missing in the target compared to the source text',
        level=LEVEL_MAJOR,
    ),
    CheckDescriptor(
        name=CHECK_REPEATED_WORDS_WHITESPACE,
        read_name='Repeated words and whitespace',
        description='Detects repeated words and excessive whitespace in verses',
        level=LEVEL_MINOR,
    ),
    CheckDescriptor(
        name=CHECK_UNMATCHED_PUNCTUATION,
        read_name='Unmatched punctuation',
        description='Checks for unmatched punctuation pairs like quotes, parentheses, or brackets',
        level=LEVEL_MINOR,
        parameters={'pairs': DEFAULT_PUNCTUATION_PAIRS},
    ),
    CheckDescriptor(
        name=CHECK_NUMBER_MISMATCHES,
        read_name='Missing numbers',
        description='Checks if numbers from the source are correctly reported in the target',
        level=LEVEL_MAJOR,
    ),
    CheckDescriptor(
        name=CHECK_FOOTNOTE_QUOTATION,
        read_name='Footnote quotation mismatch',
        description='Detects footnote quotations that do not match the verse or are missing words',
        level=LEVEL_MINOR,
    ),
)


def get_available_checks() -> list[CheckDescriptor]:
    """
    Return every known check, disabled, with default parameters.

    Returns:
        Fresh descriptors the caller may modify
    """
    return [copy.deepcopy(descriptor) for descriptor in AVAILABLE_CHECKS]


def get_check_descriptor(name: str) -> Optional[CheckDescriptor]:
    """Registry entry for a check name, or None if unknown."""
    for descriptor in AVAILABLE_CHECKS:
        if descriptor.name == name:
            return copy.deepcopy(descriptor)
    return None


def load_recipe(recipe: Union[str, list]) -> list[CheckDescriptor]:
    """
    Normalize a recipe into descriptors.

    Args:
        recipe: JSON text, or a list of dicts and/or CheckDescriptor

    Returns:
        List of CheckDescriptor in recipe order

    Raises:
        ValueError: If the recipe is not a list of named entries
    """
    if isinstance(recipe, (str, bytes)):
        recipe = json.loads(recipe)

    if not isinstance(recipe, list):
        raise ValueError(f"Recipe must be a list, got {type(recipe).__name__}")

    return [
        entry if isinstance(entry, CheckDescriptor) else CheckDescriptor.from_dict(entry)
        for entry in recipe
    ]


__all__ = [
    'CheckDescriptor',
    'AVAILABLE_CHECKS',
    'get_available_checks',
    'get_check_descriptor',
    'load_recipe',
]
