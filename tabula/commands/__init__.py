"""
Commands Module for tabula.

Use cases exposed by the CLI: build a template, list invoices, find one.
"""

from .commands import (
    BuildInvoiceCommand,
    Command,
    FindInvoiceCommand,
    ListInvoicesCommand,
)

__all__ = ['Command', 'BuildInvoiceCommand', 'ListInvoicesCommand', 'FindInvoiceCommand']
