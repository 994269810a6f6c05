"""
Utility modules for logging, input validation, and configuration files.
"""

from .file_handler import load_config
from .validator import InputValidator
from .logger import setup_logger, get_logger

__all__ = ['load_config', 'InputValidator', 'setup_logger', 'get_logger']
