# Path: usj_checks/output/report_generator.py
"""
Report Generator for USJ Checks

Writes the check report as JSON, wrapped with run metadata.
"""

import json
from datetime import datetime
from pathlib import Path
from typing import Optional

from ..core.config_loader import ConfigLoader
from ..constants import LOG_OUTPUT, REPORT_FILE, JSON_INDENT
from ..core.logger import get_output_logger


class ReportGenerator:
    """
    Creates the check report JSON file.

    Example:
        generator = ReportGenerator()
        path = generator.generate_report(report, source_name='TIT_FR', target_name='TIT_EN')
        print(f"Report saved to: {path}")
    """

    def __init__(self, config: Optional[ConfigLoader] = None):
        """
        Initialize report generator.

        Args:
            config: Optional ConfigLoader instance
        """
        self.config = config if config else ConfigLoader()
        self.output_dir = self.config.get('output_dir')
        self.logger = get_output_logger('report_generator')

    def build_report(
        self,
        report: dict,
        source_name: Optional[str] = None,
        target_name: Optional[str] = None
    ) -> dict:
        """
        Wrap a runner report with metadata and an issue summary.

        Args:
            report: Report from CheckRunner.to_report()
            source_name: Label of the source document
            target_name: Label of the target document

        Returns:
            Report dict ready to serialize
        """
        checks = report.get('checks', [])
        return {
            'report_type': 'usj_checks',
            'generated_at': datetime.now().isoformat(),
            'source': source_name,
            'target': target_name,
            'summary': {
                'checks_with_issues': len(checks),
                'total_issues': sum(len(c.get('issues', [])) for c in checks),
                'failed_checks': [c['name'] for c in checks if 'error' in c],
            },
            'checks': checks,
        }

    def generate_report(
        self,
        report: dict,
        output_path: Optional[Path] = None,
        source_name: Optional[str] = None,
        target_name: Optional[str] = None
    ) -> Path:
        """
        Write the report JSON.

        Args:
            report: Report from CheckRunner.to_report()
            output_path: Optional file path (defaults to output_dir/report.json)
            source_name: Label of the source document
            target_name: Label of the target document

        Returns:
            Path to the written report

        Raises:
            ValueError: If no output path is given and none is configured
        """
        if output_path is None:
            if not self.output_dir:
                raise ValueError("Output directory not configured")
            output_path = self.output_dir / REPORT_FILE

        self.logger.info(f"{LOG_OUTPUT} Writing report to {output_path}")

        content = self.build_report(report, source_name, target_name)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        with open(output_path, 'w', encoding='utf-8') as f:
            json.dump(content, f, indent=JSON_INDENT, ensure_ascii=False)

        self.logger.info(f"{LOG_OUTPUT} Report saved to: {output_path}")
        return output_path


__all__ = ['ReportGenerator']
