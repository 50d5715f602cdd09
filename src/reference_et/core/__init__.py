"""
Core utilities for reference evapotranspiration.

Provides configuration management, logging, calendar helpers and errors.
"""

from .config import Config
from .logger import setup_logger, LoggerContext
from . import constants
from .date_utils import DateUtils
from .exceptions import (
    ReferenceETError,
    MissingArgumentError,
    InvalidInputError,
    InvalidTimestepError,
)

__all__ = [
    "Config",
    "setup_logger",
    "LoggerContext",
    "constants",
    "DateUtils",
    "ReferenceETError",
    "MissingArgumentError",
    "InvalidInputError",
    "InvalidTimestepError",
]
