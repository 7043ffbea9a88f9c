"""
Custom Exceptions Module.

This module defines all custom exceptions raised by tabula. Every error
that can stop a command is one of these, so the CLI adapter only has to
catch the base class to turn a failure into a message and an exit code.

Exception Hierarchy:
    TabulaError (base)
    ├── LedgerError
    │   ├── ParseError
    │   └── MappingError
    ├── RepositoryError
    │   └── NotFoundError
    └── OutputError
        └── UnsupportedFormatError
"""

from typing import List, Optional


class TabulaError(Exception):
    """
    Base exception for all tabula errors.

    Attributes:
        message: Human-readable error message.
        details: Optional dictionary with additional error details.
    """

    def __init__(self, message: str, details: dict = None):
        """
        Initialize the exception.

        Args:
            message: Human-readable error message.
            details: Optional dictionary with additional context.
        """
        self.message = message
        self.details = details or {}
        super().__init__(self.message)

    def __str__(self) -> str:
        """Return string representation of the error."""
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


# =============================================================================
# LEDGER ERRORS
# =============================================================================

class LedgerError(TabulaError):
    """Base exception for errors while reading the ledger."""
    pass


class ParseError(LedgerError):
    """
    Raised when the ledger text cannot be parsed.

    Example:
        >>> raise ParseError(["<string>:3: syntax error"])
    """

    def __init__(self, errors: List[str]):
        count = len(errors)
        message = f"Could not parse ledger ({count} error{'s' if count != 1 else ''})"
        details = {"errors": errors}
        super().__init__(message, details)


class MappingError(LedgerError):
    """Raised when a transaction cannot be mapped onto an invoice."""

    def __init__(self, field: str, value: object, reason: str = None):
        message = f"Cannot map field '{field}'"
        details = {"field": field, "value": repr(value), "reason": reason}
        super().__init__(message, details)


# =============================================================================
# REPOSITORY ERRORS
# =============================================================================

class RepositoryError(TabulaError):
    """Base exception for invoice lookup errors."""
    pass


class NotFoundError(RepositoryError):
    """Raised when no invoice carries the requested number."""

    def __init__(self, invoice_number: str):
        message = f"Invoice not found: {invoice_number}"
        details = {"invoice_number": invoice_number}
        super().__init__(message, details)


# =============================================================================
# OUTPUT ERRORS
# =============================================================================

class OutputError(TabulaError):
    """Base exception for output rendering errors."""
    pass


class UnsupportedFormatError(OutputError):
    """Raised when an output cannot be rendered in the requested format."""

    def __init__(self, output_format: str, subject: Optional[str] = None):
        if subject:
            message = f"Format '{output_format}' is not supported for {subject}"
        else:
            message = f"Unsupported output format: '{output_format}'"
        details = {"format": output_format}
        super().__init__(message, details)
