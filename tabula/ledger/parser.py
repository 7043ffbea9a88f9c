"""
Ledger Parser Module.

Thin wrapper around the beancount parser. It turns ledger text into
the ordered list of directives the rest of tabula works on, and turns
parser diagnostics into a single :class:`ParseError`.
"""

from typing import Any, List

from beancount.parser import parser as beancount_parser

from tabula.utils.logger import get_logger
from tabula.utils.exceptions import ParseError

# Initialize module logger
logger = get_logger(__name__)


class LedgerParser:
    """
    Parses Beancount ledger text.

    Only the grammar is applied: no booking, balancing or plugin runs,
    so incomplete or unbalanced transactions are still returned. The
    parser evaluates arithmetic in values, which is why an unquoted
    ``invoice_number: 2023-42`` comes back as ``Decimal('1981')``.

    Example:
        >>> directives = LedgerParser().parse(ledger_text)
        >>> len(directives)
        3
    """

    SOURCE_NAME = "<ledger>"

    def parse(self, text: str) -> List[Any]:
        """
        Parse ledger text into directives.

        Args:
            text: Full ledger document.

        Returns:
            Directives in the order they appear in the text.

        Raises:
            ParseError: If the parser reports any error.
        """
        if not text.strip():
            logger.debug("Empty ledger, nothing to parse")
            return []

        entries, errors, _ = beancount_parser.parse_string(
            text, report_filename=self.SOURCE_NAME
        )

        if errors:
            messages = [self._format_error(error) for error in errors]
            for message in messages:
                logger.debug(f"Parser error: {message}")
            raise ParseError(messages)

        # The parser sorts by date; invoices are listed in ledger order
        entries = sorted(entries, key=self._line_number)

        logger.debug(f"Parsed {len(entries)} directives")
        return entries

    @staticmethod
    def _line_number(entry: Any) -> int:
        meta = getattr(entry, 'meta', None) or {}
        return meta.get('lineno', 0)

    @staticmethod
    def _format_error(error: Any) -> str:
        source = getattr(error, 'source', None) or {}
        lineno = source.get('lineno')
        message = getattr(error, 'message', str(error))
        if lineno is None:
            return str(message)
        return f"line {lineno}: {message}"
