"""
Helper Utilities Module.

Small functions shared by the CLI adapter and the core modules.

Functions:
    - today: The current local calendar date
    - read_ledger: Read ledger text from a file or a stream
"""

import sys
from datetime import date
from pathlib import Path
from typing import Optional, TextIO, Union

from .exceptions import LedgerError


def today() -> date:
    """
    Return the current local date.

    Core modules never call this themselves; the CLI adapter resolves
    "today" once and passes it down so the rest of the pipeline stays
    deterministic.

    Example:
        >>> today()
        datetime.date(2026, 10, 18)
    """
    return date.today()


def read_ledger(
    path: Optional[Union[str, Path]] = None,
    stream: Optional[TextIO] = None
) -> str:
    """
    Read the full ledger text.

    Args:
        path: Ledger file to read. Takes precedence over ``stream``.
        stream: Text stream to read when no path is given. Defaults to
                standard input.

    Returns:
        The ledger text.

    Raises:
        OSError: If the ledger file cannot be read.
        LedgerError: If the ledger is not valid UTF-8.
    """
    source = str(path) if path is not None else "<stdin>"
    try:
        if path is not None:
            return Path(path).read_text(encoding='utf-8')

        if stream is None:
            stream = sys.stdin
        return stream.read()
    except UnicodeDecodeError as e:
        raise LedgerError(
            f"Ledger is not valid UTF-8: {source}",
            {"position": e.start, "reason": e.reason}
        ) from e
