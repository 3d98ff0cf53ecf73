# Path: usj_checks/engine/checks/core/__init__.py
"""
Core check types and constants.

- check_report: CheckReport dataclass collected by the runner
- check_constants: thresholds, character sets and patterns
"""

from .check_report import CheckReport
from .check_constants import (
    DEFAULT_PUNCTUATION_PAIRS,
    DEFAULT_SHORT_THRESHOLD,
)

__all__ = [
    'CheckReport',
    'DEFAULT_PUNCTUATION_PAIRS',
    'DEFAULT_SHORT_THRESHOLD',
]
