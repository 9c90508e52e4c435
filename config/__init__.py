"""
Configuration module for pdfcr.
"""
from .constants import *
from .logging_config import setup_logger, get_logger, logger
from .settings import Settings

__all__ = [
    # Logging
    'setup_logger',
    'get_logger',
    'logger',
    # Settings
    'Settings',
    # Constants (all exported via *)
]
