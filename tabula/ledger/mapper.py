"""
Invoice Mapper Module.

This module converts one invoice transaction into one
:class:`~tabula.domain.invoice.Invoice`.

Field sources:
    - number: ``invoice_number`` transaction metadata (text or number)
    - date: the transaction date
    - due_date: ``due`` transaction metadata, only when it is a date
    - narration: the transaction narration
    - total: configured placeholder
    - line_items: postings carrying ``line_item_name`` metadata
"""

from typing import Optional, Tuple

from beancount.core.data import Posting, Transaction

from config import get_config
from tabula.utils.logger import get_logger
from tabula.utils.exceptions import MappingError
from tabula.domain.metadata import MetaKind, get_meta
from tabula.domain.invoice import (
    PLACEHOLDER_TOTAL,
    Invoice,
    InvoiceNumber,
    LineItem,
    parse_date,
)
from .filters import INVOICE_NUMBER_KEY

# Initialize module logger
logger = get_logger(__name__)

DUE_DATE_KEY = "due"
LINE_ITEM_NAME_KEY = "line_item_name"


class InvoiceMapper:
    """
    Maps invoice transactions onto Invoice entities.

    Totals and line item amounts are placeholders taken from
    configuration; posting amounts are not read.

    Attributes:
        placeholder_total: Total assigned to every invoice
        item_quantity: Quantity assigned to every line item
        item_unit_price: Unit price assigned to every line item
        item_total: Total assigned to every line item

    Example:
        >>> mapper = InvoiceMapper()
        >>> invoice = mapper.map(transaction)
        >>> print(invoice.number)
        2023-002
    """

    def __init__(self) -> None:
        """Initialize the mapper with placeholder values from configuration."""
        self.placeholder_total = get_config("invoice.placeholder_total", PLACEHOLDER_TOTAL)
        self.item_quantity = str(get_config("invoice.line_item.quantity", "100"))
        self.item_unit_price = get_config("invoice.line_item.unit_price", "13.37 USD")
        self.item_total = get_config("invoice.line_item.total", "1337 USD")

    def map(self, transaction: Transaction) -> Invoice:
        """
        Map one transaction to an invoice.

        Args:
            transaction: A transaction selected by the transaction filter.

        Returns:
            The mapped invoice.

        Raises:
            MappingError: If the invoice number or a line item name has an
                          unexpected metadata variant.
        """
        number = InvoiceNumber.from_meta(get_meta(transaction.meta, INVOICE_NUMBER_KEY))
        issued = parse_date(transaction.date)
        due_date = self._map_due_date(transaction, number)

        if due_date is not None and due_date < issued:
            logger.warning(
                f"Invoice {number} is due on {due_date.isoformat()}, "
                f"before its issue date {issued.isoformat()}"
            )

        invoice = Invoice(
            number=number,
            date=issued,
            due_date=due_date,
            narration=transaction.narration or "",
            total=self.placeholder_total,
            line_items=self._map_line_items(transaction.postings or [])
        )

        logger.debug(f"Mapped {invoice!r}")
        return invoice

    def _map_due_date(self, transaction: Transaction, number: InvoiceNumber):
        due = get_meta(transaction.meta, DUE_DATE_KEY)
        if due is None:
            return None

        if due.kind is not MetaKind.DATE:
            logger.debug(
                f"Ignoring '{DUE_DATE_KEY}' of invoice {number}: "
                f"expected date, got {due.kind.value}"
            )
            return None

        return parse_date(due, DUE_DATE_KEY)

    def _map_line_items(self, postings) -> Tuple[LineItem, ...]:
        items = []
        for posting in postings:
            item = self._map_line_item(posting)
            if item is not None:
                items.append(item)
        return tuple(items)

    def _map_line_item(self, posting: Posting) -> Optional[LineItem]:
        name = get_meta(posting.meta, LINE_ITEM_NAME_KEY)
        if name is None:
            return None

        if name.kind is not MetaKind.TEXT:
            raise MappingError(
                LINE_ITEM_NAME_KEY,
                name.value,
                f"expected text on posting {posting.account}, got {name.kind.value}"
            )

        return LineItem(
            description=name.value,
            unit_price=self.item_unit_price,
            quantity=self.item_quantity,
            total=self.item_total
        )
