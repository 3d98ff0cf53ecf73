# Path: usj_checks/core/__init__.py
"""
Core infrastructure: configuration and logging.
"""

from .config_loader import ConfigLoader
from .logger import (
    setup_ipo_logging,
    get_input_logger,
    get_process_logger,
    get_output_logger,
)

__all__ = [
    'ConfigLoader',
    'setup_ipo_logging',
    'get_input_logger',
    'get_process_logger',
    'get_output_logger',
]
