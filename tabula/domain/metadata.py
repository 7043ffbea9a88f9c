"""
Metadata Value Module.

Beancount attaches key/value metadata to directives and postings. The
parser hands back plain Python objects whose type encodes the variant
of the value; this module folds them into one closed tagged union so
that mapping code can dispatch on :class:`MetaKind` exhaustively.

Variant table:

    ============  ===========================  ===================
    MetaKind      Python type from the parser  Ledger syntax
    ============  ===========================  ===================
    TEXT          str                          "text", USD, Assets:Cash
    NUMBER        decimal.Decimal              42, 2023-42
    DATE          datetime.date                2023-07-02
    BOOLEAN       bool                         TRUE
    AMOUNT        beancount Amount             10 USD
    NULL          None                         NULL
    ============  ===========================  ===================

Currencies, accounts and tags are stored as ``str`` by the parser, so
they are TEXT values here.
"""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from enum import Enum
from typing import Any, Mapping, Optional

from beancount.core.amount import Amount

from tabula.utils.exceptions import MappingError

# Keys the parser adds to every metadata mapping for source locations
PARSER_META_KEYS = frozenset({'filename', 'lineno'})


class MetaKind(Enum):
    """Variants a metadata value can take."""

    TEXT = "text"
    NUMBER = "number"
    DATE = "date"
    BOOLEAN = "boolean"
    AMOUNT = "amount"
    NULL = "null"


@dataclass(frozen=True)
class MetaValue:
    """
    A metadata value tagged with its variant.

    Attributes:
        kind: The variant of the value.
        value: The raw value as produced by the ledger parser.

    Example:
        >>> MetaValue.of(Decimal("1981"))
        MetaValue(kind=<MetaKind.NUMBER: 'number'>, value=Decimal('1981'))
    """
    kind: MetaKind
    value: Any

    @classmethod
    def of(cls, raw: Any, key: str = "metadata") -> 'MetaValue':
        """
        Classify a raw parser value.

        Args:
            raw: Value taken from a beancount metadata mapping.
            key: Metadata key the value belongs to, used in errors.

        Returns:
            The tagged value.

        Raises:
            MappingError: If the value's type is outside the union.
        """
        # bool before anything numeric: it is an int subclass
        if isinstance(raw, bool):
            return cls(MetaKind.BOOLEAN, raw)
        if raw is None:
            return cls(MetaKind.NULL, None)
        if isinstance(raw, str):
            return cls(MetaKind.TEXT, raw)
        if isinstance(raw, Decimal):
            return cls(MetaKind.NUMBER, raw)
        if isinstance(raw, date):
            return cls(MetaKind.DATE, raw)
        if isinstance(raw, Amount):
            return cls(MetaKind.AMOUNT, raw)

        raise MappingError(key, raw, f"unsupported metadata type {type(raw).__name__}")


def get_meta(meta: Optional[Mapping[str, Any]], key: str) -> Optional[MetaValue]:
    """
    Look up ``key`` in a metadata mapping.

    Args:
        meta: Metadata mapping of a directive or posting (may be None).
        key: Key to look up.

    Returns:
        The tagged value, or None when the key is absent. A key present
        with a NULL value is returned as a NULL MetaValue.
    """
    if not meta or key in PARSER_META_KEYS or key not in meta:
        return None
    return MetaValue.of(meta[key], key)


def has_meta(meta: Optional[Mapping[str, Any]], key: str) -> bool:
    """Return True if ``key`` is user metadata present in ``meta``."""
    return bool(meta) and key not in PARSER_META_KEYS and key in meta
