"""
Utility modules for wordgen.
"""

from .config import Config, verbosity_to_level
from .exceptions import (
    WordgenError,
    ConfigError,
    TableLoadError,
    WorkerError,
)
from .logger import Logger, default_logger
