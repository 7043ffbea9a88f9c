"""
Command Layer Module.

One class per use case. A command holds a repository, runs a single
query against it and wraps the result in an Output. Commands do no I/O:
the CLI adapter reads the ledger beforehand and renders the output
afterwards.
"""

import copy
from abc import ABC, abstractmethod
from datetime import date
from typing import Optional

from tabula.utils.logger import get_logger
from tabula.utils.helpers import today as current_date
from tabula.domain.invoice import InvoiceNumber
from tabula.repository.ledger_repository import LedgerRepository
from tabula.output_handler.output import InvoiceListOutput, InvoiceOutput, Output

# Initialize module logger
logger = get_logger(__name__)


class Command(ABC):
    """
    Base class for invoice commands.

    Attributes:
        repository: Repository the command reads from
        today: Date used for templates. Defaults to the current date.
    """

    def __init__(self, repository: LedgerRepository, today: Optional[date] = None) -> None:
        self.repository = repository
        self.today = today or current_date()

    @abstractmethod
    def execute(self) -> Output:
        """Run the use case and return its output."""


class BuildInvoiceCommand(Command):
    """Produces a template invoice."""

    def execute(self) -> Output:
        logger.debug("Building template invoice")
        return InvoiceOutput(self.repository.build(self.today), self.today)


class ListInvoicesCommand(Command):
    """Produces every invoice of the ledger."""

    def execute(self) -> Output:
        logger.debug("Listing invoices")
        return InvoiceListOutput(self.repository.find_invoices())


class FindInvoiceCommand(Command):
    """
    Produces the invoice carrying one number.

    Example:
        >>> command = FindInvoiceCommand(repository).with_invoice_number("2023-002")
        >>> command.execute().as_txt()
    """

    def __init__(self, repository: LedgerRepository, today: Optional[date] = None) -> None:
        super().__init__(repository, today)
        self.invoice_number = InvoiceNumber("")

    def with_invoice_number(self, invoice_number: str) -> 'FindInvoiceCommand':
        """Return a copy of this command looking for ``invoice_number``."""
        command = copy.copy(self)
        command.invoice_number = InvoiceNumber(str(invoice_number))
        return command

    def execute(self) -> Output:
        logger.debug(f"Looking up invoice {self.invoice_number}")
        return InvoiceOutput(self.repository.find_invoice(self.invoice_number), self.today)
