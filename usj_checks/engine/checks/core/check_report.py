# Path: usj_checks/engine/checks/core/check_report.py
"""
Check Report Data Structure

Provides the CheckReport dataclass the runner uses to collect the
issues of one check together with the descriptor fields the caller
expects back.
"""

from dataclasses import dataclass, field
from typing import Optional


@dataclass
class CheckReport:
    """
    Result of running one check.

    Attributes:
        name: Check name (e.g., 'textquality::unmatched_punctuation')
        read_name: Human-readable check name
        description: What the check looks for
        level: 'major' or 'minor'
        issues: Issue dicts produced by the checker
        error: Error message when the check itself failed
    """
    name: str
    read_name: Optional[str] = None
    description: Optional[str] = None
    level: Optional[str] = None
    issues: list = field(default_factory=list)
    error: Optional[str] = None

    @property
    def has_issues(self) -> bool:
        """Whether the check reported anything."""
        return len(self.issues) > 0

    @property
    def failed(self) -> bool:
        """Whether the check raised instead of completing."""
        return self.error is not None

    def to_dict(self) -> dict:
        """Serialize in the report shape callers match on."""
        result = {
            'name': self.name,
            'readName': self.read_name,
            'description': self.description,
            'level': self.level,
            'issues': self.issues,
        }
        if self.error is not None:
            result['error'] = self.error
        return result


__all__ = ['CheckReport']
