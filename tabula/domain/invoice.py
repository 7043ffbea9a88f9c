"""
Invoice Domain Model.

This module defines the data structures tabula extracts from a ledger:
invoice numbers, line items, invoices and ordered invoice lists. All of
them are immutable; a repository call builds fresh instances every time.
"""

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Any, Dict, Iterator, Optional, Tuple, Union

from dateutil import parser as date_parser

from tabula.utils.exceptions import MappingError
from .metadata import MetaKind, MetaValue

PLACEHOLDER_NUMBER = "TBD"
PLACEHOLDER_TOTAL = "1337 USD"


@dataclass(frozen=True)
class InvoiceNumber:
    """
    Normalized invoice identifier.

    Two numbers are equal when their normalized strings are equal, so an
    invoice tagged ``invoice_number: 42`` matches a lookup for ``"42"``.

    Example:
        >>> InvoiceNumber.from_meta(MetaValue.of("2023-002"))
        InvoiceNumber(value='2023-002')
        >>> str(InvoiceNumber.placeholder())
        'TBD'
    """
    value: str

    @classmethod
    def placeholder(cls) -> 'InvoiceNumber':
        return cls(PLACEHOLDER_NUMBER)

    @classmethod
    def from_meta(cls, meta_value: Optional[MetaValue]) -> 'InvoiceNumber':
        """
        Build a number from an ``invoice_number`` metadata value.

        Args:
            meta_value: The tagged value, or None when the key is absent.

        Returns:
            The invoice number; the placeholder when absent.

        Raises:
            MappingError: If the value is neither text nor a number.
        """
        if meta_value is None:
            return cls.placeholder()

        if meta_value.kind is MetaKind.TEXT:
            return cls(meta_value.value)
        if meta_value.kind is MetaKind.NUMBER:
            # Arithmetic was already evaluated by the parser: 2023-42 -> 1981
            return cls(str(meta_value.value))

        raise MappingError(
            "invoice_number",
            meta_value.value,
            f"expected text or number, got {meta_value.kind.value}"
        )

    def __str__(self) -> str:
        return self.value


def parse_date(value: Union[str, date, MetaValue], field_name: str = "date") -> date:
    """
    Convert a metadata date or an ISO-8601 string into a calendar date.

    Args:
        value: A ``datetime.date``, a DATE metadata value or an ISO string.
        field_name: Field being parsed, used in errors.

    Returns:
        The calendar date.

    Raises:
        MappingError: If the value is not a date or the string is malformed.

    Example:
        >>> parse_date("2023-07-02")
        datetime.date(2023, 7, 2)
    """
    if isinstance(value, MetaValue):
        if value.kind is not MetaKind.DATE:
            raise MappingError(field_name, value.value, f"expected date, got {value.kind.value}")
        value = value.value

    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value

    if isinstance(value, str):
        try:
            return date_parser.isoparse(value.strip()).date()
        except (ValueError, OverflowError) as e:
            raise MappingError(field_name, value, f"not an ISO-8601 date: {e}")

    raise MappingError(field_name, value, f"unsupported date type {type(value).__name__}")


@dataclass(frozen=True)
class LineItem:
    """
    One billed line of an invoice.

    All amounts are display strings; nothing here is validated numerically.
    """
    description: str
    unit_price: str
    quantity: str
    total: str

    def to_dict(self) -> Dict[str, str]:
        return {
            'description': self.description,
            'unit_price': self.unit_price,
            'quantity': self.quantity,
            'total': self.total
        }


@dataclass(frozen=True)
class Invoice:
    """
    An invoice derived from one tagged ledger transaction.

    Attributes:
        number: Invoice identifier
        date: Date the invoice was issued
        due_date: Payment due date, if the ledger records one
        narration: Transaction narration, copied verbatim
        total: Total amount as a display string
        line_items: Billed lines in posting order

    Example:
        >>> invoice = Invoice(
        ...     number=InvoiceNumber("2023-002"),
        ...     date=date(2023, 6, 2),
        ...     narration="Invoice #2",
        ... )
        >>> invoice.to_dict()["due_date"] is None
        True
    """
    number: InvoiceNumber
    date: date
    narration: str = ""
    total: str = PLACEHOLDER_TOTAL
    due_date: Optional[date] = None
    line_items: Tuple[LineItem, ...] = ()

    @classmethod
    def template(
        cls,
        issued: date,
        number: Optional[InvoiceNumber] = None,
        total: str = PLACEHOLDER_TOTAL
    ) -> 'Invoice':
        """Build an empty invoice to be filled in by hand."""
        return cls(
            number=number or InvoiceNumber.placeholder(),
            date=issued,
            narration="",
            total=total,
        )

    @property
    def effective_due_date(self) -> date:
        """The due date, or the issue date when no due date is recorded."""
        return self.due_date if self.due_date is not None else self.date

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert to a JSON-ready dictionary.

        Returns:
            Dictionary with ISO-formatted dates and ``None`` for a missing
            due date.
        """
        return {
            'date': self.date.isoformat(),
            'due_date': self.due_date.isoformat() if self.due_date else None,
            'narration': self.narration,
            'number': str(self.number),
            'total': self.total,
            'line_items': [item.to_dict() for item in self.line_items]
        }

    def __repr__(self) -> str:
        return (
            f"Invoice("
            f"number={self.number}, "
            f"date={self.date.isoformat()}, "
            f"due={self.due_date.isoformat() if self.due_date else None}, "
            f"items={len(self.line_items)})"
        )


@dataclass(frozen=True)
class InvoiceList:
    """Invoices in the order they appear in the ledger."""
    invoices: Tuple[Invoice, ...] = field(default_factory=tuple)

    def __iter__(self) -> Iterator[Invoice]:
        return iter(self.invoices)

    def __len__(self) -> int:
        return len(self.invoices)

    def to_dict(self) -> Dict[str, Any]:
        return {'invoices': [invoice.to_dict() for invoice in self.invoices]}
