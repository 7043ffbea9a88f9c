"""
Output Values Module.

Commands return an :class:`Output`: a rendered-on-demand view of their
result that knows how to encode itself in every supported format. The
CLI adapter picks the format; commands never see it.
"""

from abc import ABC, abstractmethod
from datetime import date

from tabula.domain.invoice import Invoice, InvoiceList
from tabula.utils.exceptions import UnsupportedFormatError
from . import beancount_encoder, json_encoder, text_encoder


class Output(ABC):
    """Format-agnostic result of a command."""

    @abstractmethod
    def as_json(self) -> str:
        """Encode as pretty-printed JSON."""

    @abstractmethod
    def as_txt(self) -> str:
        """Encode as human-readable text."""

    @abstractmethod
    def as_beancount(self) -> str:
        """Encode as Beancount ledger text."""


class InvoiceOutput(Output):
    """
    Output of a command producing one invoice.

    Attributes:
        invoice: The invoice to encode
        today: Date used for the Beancount template
    """

    def __init__(self, invoice: Invoice, today: date) -> None:
        self.invoice = invoice
        self.today = today

    def as_json(self) -> str:
        return json_encoder.encode_invoice(self.invoice)

    def as_txt(self) -> str:
        return text_encoder.encode_invoice(self.invoice)

    def as_beancount(self) -> str:
        return beancount_encoder.encode_invoice(self.invoice, self.today)


class InvoiceListOutput(Output):
    """Output of a command producing a list of invoices."""

    def __init__(self, invoices: InvoiceList) -> None:
        self.invoices = invoices

    def as_json(self) -> str:
        return json_encoder.encode_invoice_list(self.invoices)

    def as_txt(self) -> str:
        return text_encoder.encode_invoice_list(self.invoices)

    def as_beancount(self) -> str:
        raise UnsupportedFormatError("beancount", "invoice lists")
