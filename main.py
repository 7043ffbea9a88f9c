#!/usr/bin/env python3
"""
tabula - Main Entry Point.

Command-line interface for extracting invoices from a Beancount ledger.
The ledger is read from standard input (or --ledger) and the result is
written to standard output in the selected format.

Usage:
    Command Line:
        tabula invoices build
        tabula --format json invoices list < ledger.beancount
        tabula --format beancount invoices convert --invoice-number 2023-002 < ledger.beancount

    Python:
        from main import run_invoices
        text = run_invoices("list", ledger_text, output_format="json")
"""

import argparse
import sys
from datetime import date
from pathlib import Path
from typing import List, Optional, TextIO

# Add project root to path for imports
PROJECT_ROOT = Path(__file__).parent
sys.path.insert(0, str(PROJECT_ROOT))

from config import ConfigurationManager
from tabula.utils.logger import setup_logger_from_config, get_logger
from tabula.utils.helpers import read_ledger, today as current_date
from tabula.utils.exceptions import TabulaError
from tabula.output_handler import OutputHandler


def parse_arguments(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """
    Parse command-line arguments.

    Args:
        argv: Arguments to parse. Defaults to ``sys.argv[1:]``.

    Returns:
        Parsed argument namespace.
    """
    parser = argparse.ArgumentParser(
        prog="tabula",
        description="Extract invoices from a plain-text Beancount ledger",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    Template invoice:
        tabula --format json invoices build

    List invoices in a ledger:
        tabula invoices list < ledger.beancount

    Show one invoice:
        tabula invoices convert --invoice-number 2023-002 < ledger.beancount
        """
    )

    parser.add_argument(
        "--format", "-f",
        choices=OutputHandler.supported_formats(),
        default=None,
        help="Output format (default: txt, or output.default_format from config)"
    )

    parser.add_argument(
        "--config", "-c",
        type=str,
        default=None,
        help="Path to custom configuration file"
    )

    parser.add_argument(
        "--ledger", "-l",
        type=str,
        default=None,
        help="Read the ledger from this file instead of standard input"
    )

    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging"
    )

    namespaces = parser.add_subparsers(dest="namespace", metavar="NAMESPACE")
    namespaces.required = True

    invoices = namespaces.add_parser("invoices", help="Work with invoices")
    actions = invoices.add_subparsers(dest="action", metavar="ACTION")
    actions.required = True

    actions.add_parser("build", help="Build a template invoice")
    actions.add_parser("list", help="List all invoices in the ledger")

    convert = actions.add_parser(
        "convert",
        help="Show one invoice of the ledger in --format"
    )
    convert.add_argument(
        "--invoice-number",
        required=True,
        help="The invoice number. If multiple invoices match, the first one is used."
    )

    return parser.parse_args(argv)


def initialize_system(args: argparse.Namespace) -> ConfigurationManager:
    """
    Initialize configuration and logging.

    Args:
        args: Parsed command-line arguments.

    Returns:
        Initialized configuration manager.
    """
    if args.config:
        ConfigurationManager.reset()
    config = ConfigurationManager(args.config)

    logger = setup_logger_from_config()

    if args.debug:
        import logging
        logger.setLevel(logging.DEBUG)
        for handler in logger.handlers:
            handler.setLevel(logging.DEBUG)

    logger.debug(f"Version: {config.get('project.version', '0.0.0')}")
    logger.debug(f"Configuration sections: {', '.join(sorted(config.get_all()))}")
    logger.debug(f"Command: {args.namespace} {args.action}")

    return config


def run_invoices(
    action: str,
    ledger: str = "",
    output_format: Optional[str] = None,
    invoice_number: Optional[str] = None,
    today: Optional[date] = None
) -> str:
    """
    Run one invoice command and render its output.

    This is the main programmatic entry point.

    Args:
        action: One of ``build``, ``list`` or ``convert``.
        ledger: Ledger text. Ignored by ``build``.
        output_format: ``json``, ``txt`` or ``beancount``.
        invoice_number: Number to look up for ``convert``.
        today: Date used for templates. Defaults to the current date.

    Returns:
        The rendered output.

    Raises:
        TabulaError: If parsing, mapping, lookup or rendering fails.
        ValueError: If ``action`` is unknown.

    Example:
        >>> print(run_invoices("convert", ledger_text, "json", "2023-002"))
    """
    from tabula.repository import TextLedgerRepository
    from tabula.commands import BuildInvoiceCommand, FindInvoiceCommand, ListInvoicesCommand

    logger = get_logger(__name__)
    today = today or current_date()

    # Fail on a bad format before doing any work
    output_handler = OutputHandler(output_format)

    if action == "build":
        command = BuildInvoiceCommand(TextLedgerRepository(), today)
    elif action == "list":
        command = ListInvoicesCommand(TextLedgerRepository(ledger), today)
    elif action == "convert":
        command = FindInvoiceCommand(TextLedgerRepository(ledger), today) \
            .with_invoice_number(invoice_number)
    else:
        raise ValueError(f"Unknown action: {action}")

    output = command.execute()
    logger.info(f"Rendering {action} as {output_handler.output_format}")
    return output_handler.render(output)


def main(argv: Optional[List[str]] = None, stdin: Optional[TextIO] = None) -> int:
    """
    Main function - entry point for command-line execution.

    Args:
        argv: Command-line arguments. Defaults to ``sys.argv[1:]``.
        stdin: Stream to read the ledger from. Defaults to standard input.

    Returns:
        Exit code (0 for success, non-zero for errors).
    """
    args = parse_arguments(argv)

    try:
        initialize_system(args)
        logger = get_logger(__name__)

        ledger = ""
        if args.action != "build":
            ledger = read_ledger(args.ledger, stdin)
            logger.debug(f"Read {len(ledger)} characters of ledger text")

        rendered = run_invoices(
            action=args.action,
            ledger=ledger,
            output_format=args.format,
            invoice_number=getattr(args, "invoice_number", None)
        )

    except TabulaError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    except OSError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    except KeyboardInterrupt:
        print("\nOperation cancelled by user", file=sys.stderr)
        return 130

    print(rendered)
    return 0


if __name__ == "__main__":
    sys.exit(main())
