"""
Tests for the command-line entry point.
"""

import io
import json
from datetime import date

import pytest

import main
from tabula.output_handler import OutputHandler
from tabula.utils.exceptions import LedgerError
from tabula.utils.helpers import read_ledger


INVALID_UTF8 = (
    b'2023-06-02 ! "Inv \xff"\n'
    b'  invoice_number: "1"\n'
    b'  Assets:AccountsReceivable  1 USD\n'
    b'  Income:Work               -1 USD\n'
)


def run(argv, stdin_text=""):
    return main.main(argv, stdin=io.StringIO(stdin_text))


class TestBuild:

    def test_build_renders_text_by_default(self, capsys):
        assert run(["invoices", "build"]) == 0

        out = capsys.readouterr().out
        today = date.today().isoformat()
        assert out == (
            "Invoice: TBD\n"
            f"Date issued: {today}\n"
            f"Due date: {today}\n"
            "Income:Work: 1337 USD\n"
            "\n"
            "\n"
        )

    def test_build_generates_template_json(self, capsys):
        assert run(["--format", "json", "invoices", "build"]) == 0

        assert json.loads(capsys.readouterr().out) == {
            "number": "TBD",
            "date": date.today().isoformat(),
            "due_date": None,
            "narration": "",
            "total": "1337 USD",
            "line_items": [],
        }

    def test_build_renders_ledger(self, capsys):
        assert run(["--format", "beancount", "invoices", "build"]) == 0

        out = capsys.readouterr().out
        assert f'{date.today().isoformat()} ! "Invoice #TBD"' in out
        assert 'invoice_number: "TBD"' in out

    def test_build_does_not_read_stdin(self, capsys):
        assert run(["invoices", "build"], stdin_text="2023-06-02 open\n") == 0


class TestList:

    def test_list_shows_all_invoices(self, capsys, ledger_text):
        assert run(["invoices", "list"], ledger_text) == 0

        out = capsys.readouterr().out
        assert "| 2023-002 | 2023-06-02 | Invoice #2   | 2023-07-02 |" in out
        assert out.endswith("+\n\n")

    def test_list_reads_ledger_file(self, capsys, ledger_path):
        assert run(["--format", "json", "--ledger", str(ledger_path), "invoices", "list"]) == 0

        invoices = json.loads(capsys.readouterr().out)["invoices"]
        assert len(invoices) == 3

    def test_list_as_beancount_fails(self, capsys, ledger_text):
        assert run(["--format", "beancount", "invoices", "list"], ledger_text) == 1

        captured = capsys.readouterr()
        assert captured.out == ""
        assert "not supported" in captured.err

    def test_malformed_ledger_fails(self, capsys):
        assert run(["invoices", "list"], "2023-06-02 open\n") == 1

        captured = capsys.readouterr()
        assert captured.out == ""
        assert "Could not parse ledger" in captured.err

    def test_missing_ledger_file_fails(self, capsys, tmp_path):
        missing = tmp_path / "nope.beancount"
        assert run(["--ledger", str(missing), "invoices", "list"]) == 1
        assert capsys.readouterr().out == ""

    def test_undecodable_ledger_file_fails(self, capsys, tmp_path):
        ledger = tmp_path / "latin1.beancount"
        ledger.write_bytes(INVALID_UTF8)

        assert run(["--ledger", str(ledger), "invoices", "list"]) == 1

        captured = capsys.readouterr()
        assert captured.out == ""
        assert "Error: Ledger is not valid UTF-8" in captured.err

    def test_undecodable_stdin_fails(self, capsys):
        stdin = io.TextIOWrapper(io.BytesIO(INVALID_UTF8), encoding="utf-8")

        assert main.main(["invoices", "list"], stdin=stdin) == 1

        captured = capsys.readouterr()
        assert captured.out == ""
        assert "Error: Ledger is not valid UTF-8: <stdin>" in captured.err


class TestConvert:

    def test_convert_to_json(self, capsys, ledger_text):
        argv = ["--format", "json", "invoices", "convert", "--invoice-number", "2023-002"]
        assert run(argv, ledger_text) == 0

        assert json.loads(capsys.readouterr().out) == {
            "date": "2023-06-02",
            "due_date": "2023-07-02",
            "narration": "Invoice #2",
            "number": "2023-002",
            "total": "1337 USD",
            "line_items": [
                {
                    "description": "Work done on project X",
                    "unit_price": "13.37 USD",
                    "quantity": "100",
                    "total": "1337 USD",
                },
            ],
        }

    def test_convert_to_text(self, capsys, ledger_text):
        argv = ["invoices", "convert", "--invoice-number", "2023-002"]
        assert run(argv, ledger_text) == 0

        assert capsys.readouterr().out == (
            "Invoice: 2023-002\n"
            "Date issued: 2023-06-02\n"
            "Due date: 2023-07-02\n"
            "Income:Work: 1337 USD\n"
            "\n"
            "+------------------------+-----+------------+----------+\n"
            "| Name                   | Qty | Unit price | Amount   |\n"
            "+------------------------+-----+------------+----------+\n"
            "| Work done on project X | 100 | 13.37 USD  | 1337 USD |\n"
            "+------------------------+-----+------------+----------+\n"
            "\n"
            "Invoice #2\n"
        )

    def test_convert_without_line_items(self, capsys, ledger_text):
        argv = ["invoices", "convert", "--invoice-number", "2023-001"]
        assert run(argv, ledger_text) == 0

        assert capsys.readouterr().out == (
            "Invoice: 2023-001\n"
            "Date issued: 2023-06-01\n"
            "Due date: 2023-06-01\n"
            "Income:Work: 1337 USD\n"
            "\n"
            "Invoice #1\n"
        )

    def test_convert_unknown_number(self, capsys, ledger_text):
        argv = ["invoices", "convert", "--invoice-number", "2099-001"]
        assert run(argv, ledger_text) == 1

        captured = capsys.readouterr()
        assert captured.out == ""
        assert "Invoice not found: 2099-001" in captured.err

    def test_convert_requires_invoice_number(self):
        with pytest.raises(SystemExit) as excinfo:
            run(["invoices", "convert"])
        assert excinfo.value.code == 2


class TestOptions:

    def test_rejects_unknown_format(self):
        with pytest.raises(SystemExit):
            run(["--format", "pdf", "invoices", "build"])

    @pytest.mark.parametrize("name", OutputHandler.supported_formats())
    def test_accepts_every_output_format(self, name):
        args = main.parse_arguments(["--format", name, "invoices", "build"])
        assert args.format == name

    def test_custom_config_changes_defaults(self, capsys, tmp_path):
        config_file = tmp_path / "settings.yaml"
        config_file.write_text(
            "output:\n"
            "  default_format: json\n"
            "invoice:\n"
            "  placeholder_total: \"99 EUR\"\n",
            encoding="utf-8"
        )

        assert run(["--config", str(config_file), "invoices", "build"]) == 0
        assert json.loads(capsys.readouterr().out)["total"] == "99 EUR"

    def test_debug_logs_to_stderr_only(self, capsys):
        assert run(["--debug", "--format", "json", "invoices", "build"]) == 0

        captured = capsys.readouterr()
        json.loads(captured.out)
        assert "Building template invoice" in captured.err
        assert "Configuration sections: beancount, invoice, logging" in captured.err


class TestRunInvoices:

    def test_programmatic_entry_point(self, ledger_text):
        rendered = main.run_invoices("convert", ledger_text, "json", "TBD", date(2024, 3, 14))
        assert json.loads(rendered)["narration"] == "Invoice #TBD"

    def test_unknown_action(self):
        with pytest.raises(ValueError):
            main.run_invoices("create")


class TestReadLedger:

    def test_reads_file_before_stream(self, ledger_path, ledger_text):
        assert read_ledger(ledger_path, io.StringIO("ignored")) == ledger_text

    def test_reads_stream(self):
        assert read_ledger(stream=io.StringIO("2023-01-01 open Assets:Bank\n")).startswith("2023")

    def test_undecodable_bytes_raise_ledger_error(self, tmp_path):
        ledger = tmp_path / "latin1.beancount"
        ledger.write_bytes(INVALID_UTF8)

        with pytest.raises(LedgerError) as excinfo:
            read_ledger(ledger)
        assert excinfo.value.details["position"] == INVALID_UTF8.index(b"\xff")
        assert isinstance(excinfo.value.__cause__, UnicodeDecodeError)
