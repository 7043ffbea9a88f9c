"""
Tests for ledger parsing, invoice transaction filtering and mapping.
"""

import textwrap
from datetime import date
from decimal import Decimal

import pytest
from beancount.core.data import Open, Transaction

from tabula.ledger import InvoiceMapper, LedgerParser, filter_invoice_transactions, is_invoice
from tabula.domain import InvoiceNumber, LineItem
from tabula.utils.exceptions import MappingError, ParseError


def parse(text: str):
    return LedgerParser().parse(textwrap.dedent(text))


def invoice_transactions(text: str):
    return filter_invoice_transactions(parse(text))


# =============================================================================
# Parser Tests
# =============================================================================


class TestLedgerParser:

    def test_empty_ledger(self):
        assert LedgerParser().parse("") == []
        assert LedgerParser().parse("   \n\n") == []

    def test_syntax_error_raises_parse_error(self):
        with pytest.raises(ParseError) as excinfo:
            parse("""
                2023-06-02 open
            """)
        assert excinfo.value.details["errors"]

    def test_unquoted_arithmetic_is_evaluated(self):
        (tx,) = parse("""
            2023-06-02 ! "Invoice #42"
              invoice_number: 2023-42
              Assets:AccountsReceivable  1337 USD
              Income:Work                1338 USD
        """)
        assert tx.meta["invoice_number"] == Decimal("1981")

    def test_directives_keep_ledger_order(self):
        directives = parse("""
            2023-06-05 ! "Later"
              invoice_number: "B"
              Assets:AccountsReceivable  1 USD
              Income:Work               -1 USD

            2023-06-01 ! "Earlier"
              invoice_number: "A"
              Assets:AccountsReceivable  1 USD
              Income:Work               -1 USD
        """)
        assert [d.narration for d in directives] == ["Later", "Earlier"]


# =============================================================================
# Filter Tests
# =============================================================================


class TestTransactionFilter:

    def test_keeps_only_tagged_transactions(self, ledger_text):
        directives = LedgerParser().parse(ledger_text)
        invoices = filter_invoice_transactions(directives)

        assert any(isinstance(d, Open) for d in directives)
        assert all(isinstance(tx, Transaction) for tx in invoices)
        assert [tx.narration for tx in invoices] == ["Invoice #1", "Invoice #2", "Invoice #TBD"]

    def test_empty_input(self):
        assert filter_invoice_transactions([]) == []

    def test_untagged_transaction_is_not_an_invoice(self):
        (tx,) = parse("""
            2023-06-03 * "Groceries"
              Expenses:Food   20 USD
              Assets:Bank    -20 USD
        """)
        assert not is_invoice(tx)


# =============================================================================
# Mapper Tests
# =============================================================================


class TestInvoiceMapper:

    def map_one(self, text: str):
        (tx,) = invoice_transactions(text)
        return InvoiceMapper().map(tx)

    def test_maps_transaction_fields(self):
        invoice = self.map_one("""
            2023-06-02 ! "Invoice #2"
              invoice_number: "2023-002"
              due: 2023-07-02
              Assets:AccountsReceivable  1337 USD
              Income:Work               -1337 USD
        """)

        assert invoice.number == InvoiceNumber("2023-002")
        assert invoice.date == date(2023, 6, 2)
        assert invoice.due_date == date(2023, 7, 2)
        assert invoice.narration == "Invoice #2"
        assert invoice.total == "1337 USD"
        assert invoice.line_items == ()

    def test_quoted_number_is_verbatim(self):
        invoice = self.map_one("""
            2023-06-02 ! "Invoice #42"
              invoice_number: "2023-42"
              Assets:AccountsReceivable  1337 USD
              Income:Work               -1337 USD
        """)
        assert str(invoice.number) == "2023-42"

    def test_unquoted_number_is_evaluated(self):
        invoice = self.map_one("""
            2023-06-02 ! "Invoice #42"
              invoice_number: 2023-42
              Assets:AccountsReceivable  1337 USD
              Income:Work                1338 USD
        """)
        assert str(invoice.number) == "1981"

    def test_plain_number(self):
        invoice = self.map_one("""
            2023-06-02 ! "Invoice #42"
              invoice_number: 42
              Assets:AccountsReceivable  1337 USD
              Income:Work               -1337 USD
        """)
        assert str(invoice.number) == "42"

    def test_currency_like_number_is_text(self):
        invoice = self.map_one("""
            2023-06-02 ! "Invoice ABC"
              invoice_number: ABC
              Assets:AccountsReceivable  1337 USD
              Income:Work               -1337 USD
        """)
        assert str(invoice.number) == "ABC"

    def test_due_of_wrong_variant_is_ignored(self):
        invoice = self.map_one("""
            2023-06-02 ! "Invoice #2"
              invoice_number: "2023-002"
              due: "2023-07-02"
              Assets:AccountsReceivable  1337 USD
              Income:Work               -1337 USD
        """)
        assert invoice.due_date is None

    def test_due_before_issue_date_is_kept(self):
        invoice = self.map_one("""
            2023-06-02 ! "Invoice #2"
              invoice_number: "2023-002"
              due: 2023-05-01
              Assets:AccountsReceivable  1337 USD
              Income:Work               -1337 USD
        """)
        assert invoice.due_date == date(2023, 5, 1)

    @pytest.mark.parametrize("value", ["2023-06-02", "TRUE", "10 USD"])
    def test_unexpected_number_variant_is_mapping_error(self, value):
        (tx,) = invoice_transactions(f"""
            2023-06-02 ! "Invoice"
              invoice_number: {value}
              Assets:AccountsReceivable  1337 USD
              Income:Work               -1337 USD
        """)
        with pytest.raises(MappingError):
            InvoiceMapper().map(tx)

    def test_line_items_from_posting_metadata(self):
        invoice = self.map_one("""
            2023-06-02 ! "Invoice #3"
              invoice_number: "2023-003"
              Assets:AccountsReceivable  1337 USD
              Income:Work               -1000 USD
                line_item_name: "Development"
              Income:Work               -337 USD
                line_item_name: "Hosting"
        """)

        assert invoice.line_items == (
            LineItem("Development", "13.37 USD", "100", "1337 USD"),
            LineItem("Hosting", "13.37 USD", "100", "1337 USD"),
        )

    def test_line_item_name_must_be_text(self):
        (tx,) = invoice_transactions("""
            2023-06-02 ! "Invoice #3"
              invoice_number: "2023-003"
              Assets:AccountsReceivable  1337 USD
              Income:Work               -1337 USD
                line_item_name: 42
        """)
        with pytest.raises(MappingError):
            InvoiceMapper().map(tx)
