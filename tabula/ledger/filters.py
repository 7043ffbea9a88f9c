"""
Transaction Filter Module.

Selects the transactions of a ledger that represent invoices.
"""

from typing import Any, Iterable, List

from beancount.core.data import Transaction

from tabula.domain.metadata import has_meta

INVOICE_NUMBER_KEY = "invoice_number"


def is_invoice(directive: Any) -> bool:
    """Return True if ``directive`` is a transaction tagged with an invoice number."""
    return isinstance(directive, Transaction) and has_meta(directive.meta, INVOICE_NUMBER_KEY)


def filter_invoice_transactions(directives: Iterable[Any]) -> List[Transaction]:
    """
    Keep the invoice transactions of a ledger.

    Args:
        directives: Parsed directives in ledger order.

    Returns:
        Transactions carrying ``invoice_number`` metadata, in the same
        order. Every other directive is dropped.
    """
    return [directive for directive in directives if is_invoice(directive)]
