"""
Domain Module for tabula.

Immutable invoice entities and the tagged metadata values they are
built from.
"""

from .metadata import MetaKind, MetaValue, get_meta, has_meta
from .invoice import (
    Invoice,
    InvoiceList,
    InvoiceNumber,
    LineItem,
    parse_date,
)

__all__ = [
    'Invoice',
    'InvoiceList',
    'InvoiceNumber',
    'LineItem',
    'MetaKind',
    'MetaValue',
    'get_meta',
    'has_meta',
    'parse_date'
]
