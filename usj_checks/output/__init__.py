# Path: usj_checks/output/__init__.py
"""
Output Package

OUTPUT layer: JSON report writing.
"""

from .report_generator import ReportGenerator

__all__ = ['ReportGenerator']
