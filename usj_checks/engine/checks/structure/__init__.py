# Path: usj_checks/engine/checks/structure/__init__.py
"""
Chapter/verse structure checks.

Contains:
- integrity_checker: ordering, duplicate and missing verse detection
"""

from .integrity_checker import (
    IntegrityChecker,
    check_structural_integrity,
    check_missing_verses,
)

__all__ = [
    'IntegrityChecker',
    'check_structural_integrity',
    'check_missing_verses',
]
