"""
Utility Module for tabula.

This module provides common utilities used across all other modules:
    - Logging configuration
    - Exception hierarchy
    - Input and date helpers
"""

from .logger import setup_logger, get_logger
from .helpers import read_ledger, today

__all__ = [
    'setup_logger',
    'get_logger',
    'read_ledger',
    'today'
]
