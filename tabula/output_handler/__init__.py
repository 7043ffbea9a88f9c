"""
Output Handler Module for tabula.

This module provides functionality for:
    - JSON encoding
    - Plain text rendering with tables
    - Beancount transaction templates
    - Selecting the encoding for a command output

"""

from .output import Output, InvoiceOutput, InvoiceListOutput
from .handler import OutputHandler

__all__ = ['Output', 'InvoiceOutput', 'InvoiceListOutput', 'OutputHandler']
