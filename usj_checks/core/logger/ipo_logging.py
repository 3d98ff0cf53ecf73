# Path: usj_checks/core/logger/ipo_logging.py
"""
IPO-Aware Logging for USJ Checks

Input-Process-Output separated logging.

When a log directory is given, this module sets up separate files for:
- INPUT layer (USJ reader, CLI)
- PROCESS layer (extractor, checkers, runner)
- OUTPUT layer (report generator)
- Full activity (everything combined)
"""

import logging
import sys
from pathlib import Path
from typing import Optional


LOG_FORMAT = '[%(levelname)s] %(name)s - %(message)s'

# Layer name -> log file name
LAYER_LOG_FILES = {
    'input': 'input_activity.log',
    'process': 'process_activity.log',
    'output': 'output_activity.log',
}
FULL_LOG_FILE = 'full_activity.log'


class IPOFilter(logging.Filter):
    """Filter logs by IPO layer prefix."""

    def __init__(self, layer: str):
        """
        Initialize filter for specific IPO layer.

        Args:
            layer: 'input', 'process', or 'output'
        """
        super().__init__()
        self.layer = layer

    def filter(self, record: logging.LogRecord) -> bool:
        """Keep records from the layer logger and its children."""
        return record.name == self.layer or record.name.startswith(self.layer + '.')


def setup_ipo_logging(
    log_dir: Optional[Path] = None,
    log_level: str = 'INFO',
    console_output: bool = True
) -> None:
    """
    Set up IPO-aware logging for USJ checks.

    Creates, when log_dir is given:
    - input_activity.log (INPUT layer)
    - process_activity.log (PROCESS layer)
    - output_activity.log (OUTPUT layer)
    - full_activity.log (all activities combined)

    Args:
        log_dir: Directory for log files (None for console only)
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        console_output: Whether to also output to console

    Example:
        setup_ipo_logging(
            log_dir=Path('/var/log/usj_checks'),
            log_level='INFO',
            console_output=True
        )
    """
    level = getattr(logging, log_level.upper(), logging.INFO)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # Clear any existing handlers
    root_logger.handlers.clear()

    formatter = logging.Formatter(LOG_FORMAT)

    if log_dir is not None:
        log_dir.mkdir(parents=True, exist_ok=True)

        full_handler = logging.FileHandler(log_dir / FULL_LOG_FILE, encoding='utf-8')
        full_handler.setLevel(logging.DEBUG)
        full_handler.setFormatter(formatter)
        root_logger.addHandler(full_handler)

        for layer, file_name in LAYER_LOG_FILES.items():
            handler = logging.FileHandler(log_dir / file_name, encoding='utf-8')
            handler.setLevel(logging.DEBUG)
            handler.setFormatter(formatter)
            handler.addFilter(IPOFilter(layer))
            root_logger.addHandler(handler)

    if console_output:
        # stderr keeps stdout free for JSON reports
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(level)
        console_handler.setFormatter(formatter)
        root_logger.addHandler(console_handler)


def get_layer_logger(layer: str, name: str) -> logging.Logger:
    """
    Get a logger routed to one IPO layer.

    Args:
        layer: 'input', 'process' or 'output'
        name: Component name (e.g., 'usj_reader', 'runner')

    Returns:
        Logger named '<layer>.<name>', picked up by that layer's IPOFilter
    """
    if layer not in LAYER_LOG_FILES:
        raise ValueError(f"Unknown IPO layer: {layer!r}")
    return logging.getLogger(f'{layer}.{name}')


def get_input_logger(name: str) -> logging.Logger:
    """INPUT layer logger (USJ reader, CLI)."""
    return get_layer_logger('input', name)


def get_process_logger(name: str) -> logging.Logger:
    """PROCESS layer logger (extractor, checkers, runner)."""
    return get_layer_logger('process', name)


def get_output_logger(name: str) -> logging.Logger:
    """OUTPUT layer logger (report generator)."""
    return get_layer_logger('output', name)


__all__ = [
    'IPOFilter',
    'setup_ipo_logging',
    'get_layer_logger',
    'get_input_logger',
    'get_process_logger',
    'get_output_logger',
]
