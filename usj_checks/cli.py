#!/usr/bin/env python3
# Path: usj_checks/cli.py
"""
USJ Checks CLI
==============

Command-line interface for checking a target translation against its
source.

Usage:
    usj-checks SOURCE.json TARGET.json                 # all checks
    usj-checks SOURCE.json TARGET.json --check textquality::unmatched_punctuation
    usj-checks SOURCE.json TARGET.json --recipe recipe.json --output report.json
    usj-checks --list

Exit codes: 0 no issues, 1 issues found, 2 invalid input.
"""

import argparse
import sys
from pathlib import Path
from typing import Optional

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from .constants import CHECK_VERSE_STATS, LOG_INPUT
from .core.config_loader import ConfigLoader
from .core.logger import setup_ipo_logging, get_input_logger
from .engine.recipe import CheckDescriptor, get_available_checks, load_recipe
from .engine.runner import CheckRunner
from .loaders.usj_reader import InvalidInputError
from .output.report_generator import ReportGenerator


EXIT_OK = 0
EXIT_ISSUES = 1
EXIT_INVALID_INPUT = 2

# Longest comment shown in a table cell
MAX_COMMENT_DISPLAY = 100

console = Console()


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog='usj-checks',
        description='Translation quality checks for USJ scripture documents',
    )
    parser.add_argument('source', nargs='?', type=Path, help='Source USJ JSON file')
    parser.add_argument('target', nargs='?', type=Path, help='Target USJ JSON file')
    parser.add_argument(
        '--check', action='append', default=[], metavar='NAME',
        help='Enable a check by name (repeatable)'
    )
    parser.add_argument('--all', action='store_true', help='Enable every check')
    parser.add_argument('--recipe', type=Path, help='Recipe JSON file')
    parser.add_argument('--threshold', type=float, help='Verse length threshold in percent')
    parser.add_argument('--output', type=Path, help='Write the JSON report to this file')
    parser.add_argument('--list', action='store_true', help='List available checks and exit')
    parser.add_argument('--verbose', '-v', action='store_true', help='Debug logging')
    return parser


def display_available_checks() -> None:
    """Show the registry as a table."""
    table = Table(title="Available Checks", show_header=True, header_style="bold")
    table.add_column("Name", style="cyan")
    table.add_column("Level")
    table.add_column("Description", style="white")

    for descriptor in get_available_checks():
        table.add_row(descriptor.name, descriptor.level, descriptor.description)

    console.print(table)


def display_report(report: dict) -> None:
    """Show every check that reported issues."""
    checks = report.get('checks', [])
    if not checks:
        console.print("[green bold]✓ No issues found[/green bold]")
        return

    for check in checks:
        if 'error' in check:
            console.print(f"[red]Check {check['name']} failed:[/red] {escape(check['error'])}")
            continue

        level_color = "red" if check.get('level') == 'major' else "yellow"
        table = Table(
            title=f"{check.get('readName') or check['name']} ({len(check['issues'])})",
            show_header=True,
            header_style=f"bold {level_color}",
        )
        table.add_column("#", style="dim", width=4)
        table.add_column("Verse", style="cyan")
        table.add_column("Comment", style="white")

        for i, issue in enumerate(check['issues'], 1):
            verse = issue.get('verse')
            if verse is None and 'chapter' in issue:
                verse = str(issue['chapter'])
            comment = issue.get('comment', '')
            if len(comment) > MAX_COMMENT_DISPLAY:
                comment = comment[:MAX_COMMENT_DISPLAY] + "..."
            table.add_row(str(i), str(verse) if verse is not None else "N/A", escape(comment))

        console.print(table)


def build_recipe(args: argparse.Namespace) -> list[CheckDescriptor]:
    """Recipe from --recipe, or the registry with --check/--all applied."""
    if args.recipe:
        recipe = load_recipe(args.recipe.read_text(encoding='utf-8'))
    else:
        recipe = get_available_checks()
        wanted = set(args.check)
        unknown = wanted - {d.name for d in recipe}
        if unknown:
            raise ValueError(f"Unknown check(s): {', '.join(sorted(unknown))}")
        for descriptor in recipe:
            descriptor.enabled = args.all or not wanted or descriptor.name in wanted

    if args.threshold is not None:
        for descriptor in recipe:
            if descriptor.name == CHECK_VERSE_STATS:
                descriptor.parameters['short_threshold'] = args.threshold

    return recipe


def main(argv: Optional[list[str]] = None) -> int:
    """
    Run the CLI.

    Args:
        argv: Arguments (defaults to sys.argv)

    Returns:
        Process exit code
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    config = ConfigLoader()
    log_level = 'DEBUG' if args.verbose else config.get('log_level')
    setup_ipo_logging(config.get('log_dir'), log_level, console_output=args.verbose)
    logger = get_input_logger('cli')

    if args.list:
        display_available_checks()
        return EXIT_OK

    if args.source is None or args.target is None:
        parser.error("source and target are required")

    try:
        recipe = build_recipe(args)
    except (ValueError, OSError) as e:
        console.print(f"[red]Invalid recipe:[/red] {escape(str(e))}")
        return EXIT_INVALID_INPUT

    # Errors raised by a check itself propagate: they are not input errors
    try:
        runner = CheckRunner(config)
        logger.info(f"{LOG_INPUT} Checking {args.target} against {args.source}")
        report = runner.to_report(runner.run(args.source, args.target, recipe))
    except (InvalidInputError, OSError) as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        return EXIT_INVALID_INPUT

    display_report(report)

    if args.output:
        path = ReportGenerator(config).generate_report(
            report, args.output, args.source.stem, args.target.stem
        )
        console.print(f"Report saved to: {path}")

    return EXIT_ISSUES if report['checks'] else EXIT_OK


if __name__ == '__main__':
    sys.exit(main())
