"""
Ledger Module for tabula.

This module turns Beancount ledger text into invoices:
    - Parsing ledger text into directives
    - Selecting transactions tagged with an invoice number
    - Mapping those transactions onto Invoice entities
"""

from .parser import LedgerParser
from .filters import filter_invoice_transactions, is_invoice
from .mapper import InvoiceMapper

__all__ = ['LedgerParser', 'InvoiceMapper', 'filter_invoice_transactions', 'is_invoice']
