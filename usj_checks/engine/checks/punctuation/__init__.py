# Path: usj_checks/engine/checks/punctuation/__init__.py
"""
Punctuation checks.

Contains:
- punctuation_checker: stack/toggle automaton for paired punctuation
"""

from .punctuation_checker import PunctuationChecker, check_punctuation_balance

__all__ = [
    'PunctuationChecker',
    'check_punctuation_balance',
]
