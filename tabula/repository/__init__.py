"""
Repository Module for tabula.

Read access to the invoices recorded in a ledger.
"""

from .ledger_repository import LedgerRepository, TextLedgerRepository

__all__ = ['LedgerRepository', 'TextLedgerRepository']
