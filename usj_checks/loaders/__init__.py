# Path: usj_checks/loaders/__init__.py
"""
Loaders Package

INPUT layer: reads USJ documents from JSON text, objects or files.
"""

from .usj_reader import InvalidInputError, DocumentSource, USJReader

__all__ = [
    'InvalidInputError',
    'DocumentSource',
    'USJReader',
]
