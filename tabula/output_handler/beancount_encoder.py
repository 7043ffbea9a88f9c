"""
Beancount Encoder Module.

Renders an invoice as a Beancount transaction to paste into a ledger.

The result is a template rather than a faithful round trip: it is dated
on the day it is generated, flagged for review, carries the placeholder
invoice number and books a placeholder amount from receivables to
income. Only the narration is taken from the invoice.
"""

from datetime import date

from beancount.core import data
from beancount.core.amount import Amount
from beancount.core.number import D
from beancount.parser import printer

from config import get_config
from tabula.domain.invoice import Invoice
from tabula.utils.logger import get_logger

# Initialize module logger
logger = get_logger(__name__)


def build_transaction(invoice: Invoice, today: date) -> data.Transaction:
    """
    Build the template transaction for ``invoice``.

    Args:
        invoice: Invoice whose narration is reused.
        today: Date of the transaction.

    Returns:
        An unbooked beancount Transaction.
    """
    number = get_config("invoice.placeholder_number", "TBD")
    units = Amount(
        D(str(get_config("beancount.amount", "1337"))),
        get_config("beancount.currency", "USD")
    )

    meta = data.new_metadata("<tabula>", 0)
    meta["invoice_number"] = number

    postings = [
        data.Posting(
            get_config("beancount.receivable_account", "Assets:AccountsReceivable"),
            units, None, None, None, None
        ),
        data.Posting(
            get_config("beancount.income_account", "Income:Work"),
            -units, None, None, None, None
        ),
    ]

    return data.Transaction(
        meta,
        today,
        get_config("beancount.flag", "!"),
        None,
        invoice.narration or f"Invoice #{number}",
        data.EMPTY_SET,
        data.EMPTY_SET,
        postings
    )


def encode_invoice(invoice: Invoice, today: date) -> str:
    """Render the template transaction for ``invoice`` as ledger text."""
    transaction = build_transaction(invoice, today)
    logger.debug(f"Rendering beancount template for invoice {invoice.number}")
    return printer.format_entry(transaction)
