"""
Configuration module for the chapter pagination engine.
"""
from .constants import *
from .logging_config import setup_logger, get_logger, configure_logging
from .settings import Settings, get_settings

__all__ = [
    # Logging
    'setup_logger',
    'get_logger',
    'configure_logging',
    # Settings
    'Settings',
    'get_settings',
    # Constants (all exported via *)
]
