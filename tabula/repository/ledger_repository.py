"""
Invoice Repository Module.

This module provides the repositories commands read invoices from. The
ledger text is the only source of truth: every call parses it again and
builds fresh Invoice instances, so repositories hold no mutable state.

Usage:
    from tabula.repository import TextLedgerRepository

    repository = TextLedgerRepository(ledger_text)
    invoices = repository.find_invoices()
    invoice = repository.find_invoice(InvoiceNumber("2023-002"))
"""

from abc import ABC, abstractmethod
from collections import Counter
from datetime import date
from typing import Optional, Union

from config import get_config
from tabula.utils.logger import get_logger
from tabula.utils.exceptions import NotFoundError
from tabula.domain.invoice import PLACEHOLDER_TOTAL, Invoice, InvoiceList, InvoiceNumber
from tabula.ledger.parser import LedgerParser
from tabula.ledger.filters import filter_invoice_transactions
from tabula.ledger.mapper import InvoiceMapper

# Initialize module logger
logger = get_logger(__name__)


class LedgerRepository(ABC):
    """Source of invoices for the command layer."""

    @abstractmethod
    def find_invoice(self, number: Union[InvoiceNumber, str]) -> Invoice:
        """Return the first invoice carrying ``number``."""

    @abstractmethod
    def find_invoices(self) -> InvoiceList:
        """Return every invoice in ledger order."""

    @abstractmethod
    def build(self, today: date) -> Invoice:
        """Return a template invoice issued on ``today``."""


class TextLedgerRepository(LedgerRepository):
    """
    Repository over an in-memory Beancount document.

    Attributes:
        ledger: The ledger text, already read by the caller
        parser: LedgerParser instance
        mapper: InvoiceMapper instance

    Example:
        >>> repository = TextLedgerRepository(sys.stdin.read())
        >>> for invoice in repository.find_invoices():
        ...     print(invoice.number, invoice.narration)
    """

    def __init__(
        self,
        ledger: str = "",
        parser: Optional[LedgerParser] = None,
        mapper: Optional[InvoiceMapper] = None
    ) -> None:
        """
        Initialize the repository.

        Args:
            ledger: Ledger text. Empty for commands that need no input.
            parser: Parser to use. Defaults to a new LedgerParser.
            mapper: Mapper to use. Defaults to a new InvoiceMapper.
        """
        self.ledger = ledger
        self.parser = parser or LedgerParser()
        self.mapper = mapper or InvoiceMapper()

    def find_invoice(self, number: Union[InvoiceNumber, str]) -> Invoice:
        """
        Find one invoice by number.

        Args:
            number: Invoice number to look for.

        Returns:
            The first invoice, in ledger order, whose number matches.

        Raises:
            ParseError: If the ledger cannot be parsed.
            MappingError: If an invoice transaction cannot be mapped.
            NotFoundError: If no invoice matches.
        """
        if not isinstance(number, InvoiceNumber):
            number = InvoiceNumber(str(number))

        for invoice in self.find_invoices():
            if invoice.number == number:
                logger.debug(f"Found invoice {number}")
                return invoice

        raise NotFoundError(str(number))

    def find_invoices(self) -> InvoiceList:
        """
        Extract all invoices from the ledger.

        Returns:
            InvoiceList in ledger appearance order.

        Raises:
            ParseError: If the ledger cannot be parsed.
            MappingError: If an invoice transaction cannot be mapped.
        """
        directives = self.parser.parse(self.ledger)
        transactions = filter_invoice_transactions(directives)
        invoices = InvoiceList(tuple(self.mapper.map(tx) for tx in transactions))

        self._warn_duplicates(invoices)
        logger.info(f"Found {len(invoices)} invoices in {len(directives)} directives")
        return invoices

    def build(self, today: date) -> Invoice:
        """
        Build a template invoice.

        Args:
            today: Issue date of the template.

        Returns:
            An invoice with the placeholder number and total, no due date
            and no line items.
        """
        return Invoice.template(
            issued=today,
            number=InvoiceNumber(get_config("invoice.placeholder_number", "TBD")),
            total=get_config("invoice.placeholder_total", PLACEHOLDER_TOTAL)
        )

    @staticmethod
    def _warn_duplicates(invoices: InvoiceList) -> None:
        counts = Counter(invoice.number for invoice in invoices)
        for number, count in counts.items():
            if count > 1:
                logger.warning(
                    f"Invoice number {number} is used by {count} transactions; "
                    f"lookups return the first one"
                )
