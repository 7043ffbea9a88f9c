"""
JSON Encoder Module.

Serializes invoices and invoice lists as pretty-printed JSON.
"""

import json
from typing import Optional

from config import get_config
from tabula.domain.invoice import Invoice, InvoiceList


def _indent(indent: Optional[int]) -> int:
    return indent if indent is not None else get_config("output.json.indent", 2)


def encode_invoice(invoice: Invoice, indent: Optional[int] = None) -> str:
    """
    Encode a single invoice.

    Args:
        invoice: Invoice to encode.
        indent: JSON indentation level. Defaults to configuration.

    Returns:
        JSON object with ``date, due_date, narration, number, total,
        line_items``; ``due_date`` is null when absent.
    """
    return json.dumps(invoice.to_dict(), indent=_indent(indent), ensure_ascii=False)


def encode_invoice_list(invoices: InvoiceList, indent: Optional[int] = None) -> str:
    """Encode a list of invoices as ``{"invoices": [...]}``."""
    return json.dumps(invoices.to_dict(), indent=_indent(indent), ensure_ascii=False)
