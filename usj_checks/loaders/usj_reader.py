# Path: usj_checks/loaders/usj_reader.py
"""
USJ Reader

INPUT layer: turns USJ JSON (text, parsed object or file) into the
Document Model the engine works on.

This is the only place the envelope is validated. Anything that is not
a USJ object with a content list raises InvalidInputError; the engine
itself assumes a well-formed tree.
"""

import json
from pathlib import Path
from typing import Union

from ..constants import DEFAULT_MAX_DEPTH, LOG_INPUT
from ..core.logger import get_input_logger
from ..engine.document.node import Document, document_from_usj


class InvalidInputError(ValueError):
    """Input could not be read as a USJ document."""
    pass


DocumentSource = Union[Document, dict, str, bytes, Path]


class USJReader:
    """
    Loads USJ documents.

    Example:
        reader = USJReader()
        document = reader.read_file(Path('TIT.json'))
        document = reader.read_text('{"type": "USJ", "content": []}')
    """

    def __init__(self, max_depth: int = DEFAULT_MAX_DEPTH):
        """
        Initialize reader.

        Args:
            max_depth: Deepest nesting accepted
        """
        self.max_depth = max_depth
        self.logger = get_input_logger('usj_reader')

    def load(self, source: DocumentSource) -> Document:
        """
        Load a document from any supported source.

        Args:
            source: Document (returned as is), parsed USJ dict,
                    JSON text (str/bytes) or Path to a JSON file

        Returns:
            Document

        Raises:
            InvalidInputError: If the source is not a valid USJ document
        """
        if isinstance(source, Document):
            return source
        if isinstance(source, Path):
            return self.read_file(source)
        if isinstance(source, (str, bytes)):
            return self.read_text(source)
        if isinstance(source, dict):
            return self.read_object(source)
        raise InvalidInputError(f"Invalid input: unsupported source type {type(source).__name__}")

    def read_file(self, path: Path) -> Document:
        """
        Read a USJ JSON file.

        Raises:
            InvalidInputError: If the file cannot be read or parsed
        """
        self.logger.info(f"{LOG_INPUT} Reading USJ file: {path}")
        try:
            text = path.read_text(encoding='utf-8')
        except OSError as e:
            raise InvalidInputError(f"Invalid input: cannot read {path}: {e}") from e
        return self.read_text(text)

    def read_text(self, text: Union[str, bytes]) -> Document:
        """
        Parse USJ JSON text.

        Raises:
            InvalidInputError: If the text is not valid USJ JSON
        """
        try:
            data = json.loads(text)
        except ValueError as e:
            raise InvalidInputError(f"Invalid input: {e}") from e
        except RecursionError as e:
            # The json parser itself recurses per nesting level
            raise InvalidInputError("Invalid input: JSON nesting too deep to parse") from e
        return self.read_object(data)

    def read_object(self, data: dict) -> Document:
        """
        Convert a parsed USJ object.

        Raises:
            InvalidInputError: If the object is not a USJ document
        """
        try:
            document = document_from_usj(data, self.max_depth)
        except ValueError as e:
            raise InvalidInputError(f"Invalid input: {e}") from e

        self.logger.debug(
            f"{LOG_INPUT} Loaded USJ document with {len(document.children)} top-level nodes"
        )
        return document


__all__ = [
    'InvalidInputError',
    'DocumentSource',
    'USJReader',
]
