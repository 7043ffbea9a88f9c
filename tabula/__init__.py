"""
tabula - invoices from a plain-text Beancount ledger.

This package contains the core modules of tabula. Each module has a
single responsibility.

Modules:
    - ledger: Parsing, filtering and mapping ledger transactions
    - domain: Invoice entities and tagged metadata values
    - repository: Invoice lookups over a ledger
    - commands: Build, list and find use cases
    - output_handler: JSON, text and Beancount encodings
    - utils: Logging, exceptions and helpers

Architecture:
    Ledger text → Parser → Filter → Mapper → Repository → Command → Output
"""

__version__ = "0.3.0"

__all__ = [
    'ledger',
    'domain',
    'repository',
    'commands',
    'output_handler',
    'utils'
]
