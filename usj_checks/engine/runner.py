# Path: usj_checks/engine/runner.py
"""
Check Runner

Runs the enabled checks of a recipe against a source and a target
document.

FLOW:
1. Load both documents (USJReader)
2. Extract the derived views ONCE per document
3. Run each enabled check in recipe order
4. Collect one CheckReport per check

A check that raises is logged and reported with its error; sibling
checks still run unless continue_on_error is off.
"""

from typing import Optional, Union

from ..constants import (
    CHECK_VERSE_STATS,
    CHECK_INTEGRITY,
    CHECK_MISSING_VERSES,
    CHECK_REPEATED_WORDS_WHITESPACE,
    CHECK_UNMATCHED_PUNCTUATION,
    CHECK_NUMBER_MISMATCHES,
    CHECK_FOOTNOTE_QUOTATION,
    LOG_PROCESS,
)
from ..core.config_loader import ConfigLoader
from ..core.logger import get_process_logger
from ..loaders.usj_reader import USJReader, InvalidInputError, DocumentSource
from .document.extractor import DocumentViews, extract_views
from .checks import (
    CheckReport,
    IntegrityChecker,
    PunctuationChecker,
    VerseLengthChecker,
    RepeatedWordsChecker,
    NumeralChecker,
    FootnoteQuoteChecker,
)
from .recipe import CheckDescriptor, get_check_descriptor, load_recipe


class CheckRunner:
    """
    Dispatches recipe entries to checkers.

    Example:
        runner = CheckRunner()
        reports = runner.run(source_document, target_document, recipe)
        report = runner.to_report(reports)
    """

    def __init__(
        self,
        config: Optional[ConfigLoader] = None,
        short_threshold: Optional[float] = None,
        continue_on_error: Optional[bool] = None,
        max_depth: Optional[int] = None
    ):
        """
        Initialize runner.

        Explicit arguments override the configuration.

        Args:
            config: Optional ConfigLoader instance
            short_threshold: Default verse length threshold (percent)
            continue_on_error: Keep running after a check raises
            max_depth: Deepest document nesting accepted
        """
        self.config = config if config else ConfigLoader()
        self.short_threshold = (
            short_threshold if short_threshold is not None
            else self.config.get('short_threshold')
        )
        self.continue_on_error = (
            continue_on_error if continue_on_error is not None
            else self.config.get('continue_on_error', True)
        )
        self.max_depth = max_depth if max_depth is not None else self.config.get('max_depth')
        self.reader = USJReader(self.max_depth)
        self.logger = get_process_logger('runner')

        self._handlers = {
            CHECK_VERSE_STATS: self._run_verse_stats,
            CHECK_INTEGRITY: self._run_integrity,
            CHECK_MISSING_VERSES: self._run_missing_verses,
            CHECK_REPEATED_WORDS_WHITESPACE: self._run_repeated_words,
            CHECK_UNMATCHED_PUNCTUATION: self._run_punctuation,
            CHECK_NUMBER_MISMATCHES: self._run_numerals,
            CHECK_FOOTNOTE_QUOTATION: self._run_footnote_quotes,
        }

    @property
    def check_names(self) -> list[str]:
        """Names this runner can dispatch."""
        return list(self._handlers)

    def run(
        self,
        source: DocumentSource,
        target: DocumentSource,
        recipe: Union[str, list]
    ) -> list[CheckReport]:
        """
        Run all enabled checks.

        Args:
            source: Source document (Document, USJ dict, JSON text or Path)
            target: Target document
            recipe: Recipe (JSON text or list of entries)

        Returns:
            One CheckReport per enabled, known check, in recipe order

        Raises:
            InvalidInputError: If a document or the recipe cannot be read
        """
        try:
            descriptors = load_recipe(recipe)
        except ValueError as e:
            raise InvalidInputError(f"Invalid input: {e}") from e

        enabled = [d for d in descriptors if d.enabled]
        self.logger.info(f"{LOG_PROCESS} Running {len(enabled)} enabled check(s)")

        source_views = self._views(source)
        target_views = self._views(target)

        reports = []
        for descriptor in enabled:
            handler = self._handlers.get(descriptor.name)
            if handler is None:
                self.logger.warning(f"Unknown check: {descriptor.name}")
                continue

            report = self._new_report(descriptor)
            try:
                report.issues = handler(descriptor.parameters, source_views, target_views)
            except Exception as e:
                self.logger.exception(f"Check {descriptor.name} failed: {e}")
                if not self.continue_on_error:
                    raise
                report.error = str(e)

            self.logger.info(
                f"{LOG_PROCESS} {descriptor.name}: {len(report.issues)} issue(s)"
            )
            reports.append(report)

        return reports

    def to_report(self, reports: list[CheckReport]) -> dict:
        """
        Build the report callers consume.

        Only checks with issues (or that failed) are listed.
        """
        return {
            'checks': [r.to_dict() for r in reports if r.has_issues or r.failed],
        }

    def _views(self, source: DocumentSource) -> DocumentViews:
        document = self.reader.load(source)
        return extract_views(document, self.max_depth)

    @staticmethod
    def _new_report(descriptor: CheckDescriptor) -> CheckReport:
        """Report carrying the descriptor fields, registry values as fallback."""
        known = get_check_descriptor(descriptor.name)
        return CheckReport(
            name=descriptor.name,
            read_name=descriptor.read_name or (known.read_name if known else None),
            description=descriptor.description or (known.description if known else None),
            level=descriptor.level or (known.level if known else None),
        )

    # ------------------------------------------------------------------
    # Check handlers: (parameters, source views, target views) -> issues
    # ------------------------------------------------------------------

    def _run_verse_stats(self, parameters, source: DocumentViews, target: DocumentViews) -> list[dict]:
        threshold = parameters.get('short_threshold')
        if threshold is None:
            threshold = self.short_threshold
        return VerseLengthChecker(threshold).check(source.verse_text, target.verse_text)

    def _run_integrity(self, parameters, source: DocumentViews, target: DocumentViews) -> list[dict]:
        return IntegrityChecker().check_ordering(target.chapter_index, target.verse_text)

    def _run_missing_verses(self, parameters, source: DocumentViews, target: DocumentViews) -> list[dict]:
        return IntegrityChecker().check_missing(
            source.chapter_index, target.chapter_index, source.verse_text
        )

    def _run_repeated_words(self, parameters, source: DocumentViews, target: DocumentViews) -> list[dict]:
        return RepeatedWordsChecker().check(target.verse_text)

    def _run_punctuation(self, parameters, source: DocumentViews, target: DocumentViews) -> list[dict]:
        return PunctuationChecker(parameters.get('pairs')).check(target.verse_text)

    def _run_numerals(self, parameters, source: DocumentViews, target: DocumentViews) -> list[dict]:
        return NumeralChecker().check(source.verse_text, target.verse_text)

    def _run_footnote_quotes(self, parameters, source: DocumentViews, target: DocumentViews) -> list[dict]:
        return FootnoteQuoteChecker().check(target.footnote_quotes, target.verse_text)


def run_checks(
    source: DocumentSource,
    target: DocumentSource,
    recipe: Union[str, list],
    config: Optional[ConfigLoader] = None
) -> dict:
    """
    Run a recipe and return the report.

    Args:
        source: Source document
        target: Target document
        recipe: Recipe entries
        config: Optional ConfigLoader instance

    Returns:
        {"checks": [{name, readName, description, level, issues}, ...]}
    """
    runner = CheckRunner(config)
    return runner.to_report(runner.run(source, target, recipe))


def checks(source: str, target: str, recipe: Union[str, list]) -> dict:
    """
    Entry point for callers holding raw JSON text.

    Args:
        source: Source USJ JSON text
        target: Target USJ JSON text
        recipe: Recipe JSON text or list

    Returns:
        Report dict

    Raises:
        InvalidInputError: If any input cannot be parsed
    """
    return run_checks(source, target, recipe)


__all__ = [
    'CheckRunner',
    'run_checks',
    'checks',
]
