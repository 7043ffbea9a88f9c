"""
Text Encoder Module.

This module renders invoices for people reading a terminal:

    Invoice: 2023-002
    Date issued: 2023-06-02
    Due date: 2023-07-02
    Income:Work: 1337 USD

    +------+-----+------------+----------+
    | Name | Qty | Unit price | Amount   |
    +------+-----+------------+----------+
    | Uren | 100 | 13.37 USD  | 1337 USD |
    +------+-----+------------+----------+

    Invoice #2

The line item table is only present when the invoice has line items.
Invoice lists render as a single table. Tables use prettytable.
"""

from typing import Any, List, Sequence, Tuple

from prettytable import HRuleStyle, PrettyTable

from tabula.domain.invoice import Invoice, InvoiceList

LINE_ITEM_HEADERS = ["Name", "Qty", "Unit price", "Amount"]
INVOICE_LIST_HEADERS = ["Number", "Date", "Narration", "Due date"]


class KeyValueRenderer:
    """
    Renders ``key: value`` lines in insertion order.

    Example:
        >>> renderer = KeyValueRenderer()
        >>> renderer.add_field("Invoice", "TBD")
        >>> renderer.render()
        'Invoice: TBD\\n'
    """

    def __init__(self) -> None:
        self.fields: List[Tuple[str, Any]] = []

    def add_field(self, key: str, value: Any) -> None:
        self.fields.append((key, value))

    def render(self) -> str:
        return "".join(f"{key}: {value}\n" for key, value in self.fields)


def render_table(headers: Sequence[str], rows: Sequence[Sequence[str]]) -> str:
    """
    Render a boxed, left-aligned table with a rule under every row.

    Args:
        headers: Column titles.
        rows: Row cells, one string per column.

    Returns:
        The table without a trailing newline.
    """
    table = PrettyTable(field_names=list(headers))
    table.align = "l"
    table.hrules = HRuleStyle.ALL
    for row in rows:
        table.add_row(list(row))
    return table.get_string()


def encode_invoice(invoice: Invoice) -> str:
    """
    Render a single invoice.

    The due date falls back to the issue date when the ledger records
    none.
    """
    renderer = KeyValueRenderer()
    renderer.add_field("Invoice", invoice.number)
    renderer.add_field("Date issued", invoice.date.isoformat())
    renderer.add_field("Due date", invoice.effective_due_date.isoformat())
    renderer.add_field("Income:Work", invoice.total)
    header = renderer.render()

    if not invoice.line_items:
        return f"{header}\n{invoice.narration}"

    table = render_table(
        LINE_ITEM_HEADERS,
        [
            (item.description, item.quantity, item.unit_price, item.total)
            for item in invoice.line_items
        ]
    )
    return f"{header}\n{table}\n\n{invoice.narration}"


def encode_invoice_list(invoices: InvoiceList) -> str:
    """
    Render one table row per invoice, leaving missing due dates blank.

    The table is followed by a blank line.
    """
    rows = [
        (
            str(invoice.number),
            invoice.date.isoformat(),
            invoice.narration,
            invoice.due_date.isoformat() if invoice.due_date else "",
        )
        for invoice in invoices
    ]
    return render_table(INVOICE_LIST_HEADERS, rows) + "\n"
