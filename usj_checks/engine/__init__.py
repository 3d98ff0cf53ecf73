# Path: usj_checks/engine/__init__.py
"""
Check Engine

PROCESS layer:
- document/: Document Model, traversal and verse/chapter extraction
- checks/: structural, punctuation and text quality checkers
- recipe: registry of available checks
- runner: dispatch of enabled checks
"""

from .recipe import CheckDescriptor, get_available_checks, load_recipe
from .runner import CheckRunner, run_checks, checks

__all__ = [
    'CheckDescriptor',
    'get_available_checks',
    'load_recipe',
    'CheckRunner',
    'run_checks',
    'checks',
]
