"""
Exceptions raised by the tradeledger package.

Undo and redo on an empty history are not errors; they report ``False``.
"""


class LedgerError(Exception):
    """Base exception for tradeledger errors."""
    pass


class InvalidTradeError(LedgerError):
    """Raised when a trade action fails validation."""
    pass


class ConfigError(LedgerError):
    """Raised when a ledger configuration cannot be loaded."""
    pass
