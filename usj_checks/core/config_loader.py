# Path: usj_checks/core/config_loader.py
"""
Configuration Loader for USJ Checks

Reads settings from a .env file at the project root and from
USJ_CHECKS_* environment variables. One instance is shared by the
runner, the report generator and the CLI.

Every setting is optional: the check engine runs with the defaults below
when nothing is configured. The checker functions never read the
configuration themselves; the runner and the CLI pass values in.
"""

import os
from pathlib import Path
from typing import Callable, Optional

from dotenv import load_dotenv

from ..constants import DEFAULT_MAX_DEPTH


# ==============================================================================
# DEFAULT CONFIGURATION VALUES
# ==============================================================================

DEFAULT_LOG_LEVEL: str = 'INFO'
DEFAULT_SHORT_THRESHOLD: float = 20.0
DEFAULT_CONTINUE_ON_ERROR: bool = True

ENV_PREFIX = 'USJ_CHECKS_'

TRUE_VALUES = ('true', '1', 'yes', 'on')


class ConfigLoader:
    """
    Shared configuration for USJ checks.

    Example:
        config = ConfigLoader()
        threshold = config.get('short_threshold')  # float
        log_dir = config.get('log_dir')            # Path or None
    """

    _instance: Optional['ConfigLoader'] = None
    _initialized: bool = False

    def __new__(cls) -> 'ConfigLoader':
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self):
        """Load .env (first instantiation only) and read the settings."""
        if ConfigLoader._initialized:
            return

        # usj_checks/core/config_loader.py -> project root
        env_path = Path(__file__).resolve().parents[2] / '.env'
        if env_path.exists():
            load_dotenv(dotenv_path=env_path, interpolate=True)

        self._config = {
            # Logging
            'log_dir': self._read('LOG_DIR', Path, None),
            'log_level': self._read('LOG_LEVEL', str.upper, DEFAULT_LOG_LEVEL),

            # Output
            'output_dir': self._read('OUTPUT_DIR', Path, None),

            # Checks
            'short_threshold': self._read('SHORT_THRESHOLD', float, DEFAULT_SHORT_THRESHOLD),
            'max_depth': self._read('MAX_DEPTH', int, DEFAULT_MAX_DEPTH),
            'continue_on_error': self._read(
                'CONTINUE_ON_ERROR', lambda v: v.lower() in TRUE_VALUES, DEFAULT_CONTINUE_ON_ERROR
            ),
        }
        ConfigLoader._initialized = True

    @staticmethod
    def _read(key: str, convert: Callable, default):
        """
        Read one USJ_CHECKS_<key> variable.

        Unset or blank variables, and values the converter rejects,
        fall back to the default.
        """
        value = os.getenv(ENV_PREFIX + key)
        if value is None or not value.strip():
            return default

        try:
            return convert(value.strip())
        except ValueError:
            return default

    def get(self, key: str, default=None):
        """Get configuration value."""
        return self._config.get(key, default)

    def __getitem__(self, key: str):
        return self._config[key]

    @classmethod
    def reset(cls):
        """Reset singleton for testing purposes."""
        cls._instance = None
        cls._initialized = False


__all__ = [
    'ConfigLoader',
    'DEFAULT_LOG_LEVEL',
    'DEFAULT_SHORT_THRESHOLD',
    'DEFAULT_CONTINUE_ON_ERROR',
]
