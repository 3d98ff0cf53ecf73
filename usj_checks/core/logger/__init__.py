# Path: usj_checks/core/logger/__init__.py
"""
USJ Checks Logger Package

IPO-aware logging for the check engine.
"""

from .ipo_logging import (
    IPOFilter,
    setup_ipo_logging,
    get_layer_logger,
    get_input_logger,
    get_process_logger,
    get_output_logger,
)

__all__ = [
    'IPOFilter',
    'setup_ipo_logging',
    'get_layer_logger',
    'get_input_logger',
    'get_process_logger',
    'get_output_logger',
]
