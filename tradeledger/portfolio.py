"""
Cash and share-count bookkeeping that trade actions are applied to.

Pure-Python and dependency-free so it can be unit-tested in isolation.
"""
from __future__ import annotations

import logging
from typing import Dict, Mapping

logger = logging.getLogger(__name__)


class Portfolio:
    """
    Mutable cash balance plus signed share counts per symbol.

    Cash may go negative and positions may go short; nothing is enforced.
    Absent symbols hold zero shares.
    """

    def __init__(self, initial_cash: float = 0.0):
        self.cash = initial_cash
        self._shares: Dict[str, int] = {}

    # --------------------------------------------------------------------- #
    # Public helpers
    # --------------------------------------------------------------------- #
    def position(self, symbol: str) -> int:
        return self._shares.get(symbol, 0)

    def positions(self) -> Dict[str, int]:
        """Copy of all non-zero positions."""
        return {sym: qty for sym, qty in self._shares.items() if qty != 0}

    def total_value(self, prices: Mapping[str, float]) -> float:
        """
        Portfolio market value = Σ(shares * price) + cash.
        Missing prices -> position valued at 0.
        """
        pos_val = sum(qty * prices.get(sym, 0.0) for sym, qty in self._shares.items())
        return pos_val + self.cash

    # --------------------------------------------------------------------- #
    # Mutation helpers
    # --------------------------------------------------------------------- #
    def buy(self, symbol: str, quantity: int, price: float) -> None:
        self._adjust(symbol, quantity, -(quantity * price))
        logger.debug(
            "[EXEC] BUY  %s %s @ $%.2f  (cash: $%.2f)", quantity, symbol, price, self.cash
        )

    def sell(self, symbol: str, quantity: int, price: float) -> None:
        self._adjust(symbol, -quantity, quantity * price)
        logger.debug(
            "[EXEC] SELL %s %s @ $%.2f  (cash: $%.2f)", quantity, symbol, price, self.cash
        )

    def reverse_buy(self, symbol: str, quantity: int, price: float) -> None:
        self._adjust(symbol, -quantity, quantity * price)
        logger.debug(
            "[UNDO] BUY  %s %s @ $%.2f reversed  (cash: $%.2f)", quantity, symbol, price, self.cash
        )

    def reverse_sell(self, symbol: str, quantity: int, price: float) -> None:
        self._adjust(symbol, quantity, -(quantity * price))
        logger.debug(
            "[UNDO] SELL %s %s @ $%.2f reversed  (cash: $%.2f)", quantity, symbol, price, self.cash
        )

    def _adjust(self, symbol: str, qty_delta: int, cash_delta: float) -> None:
        new_shares = self._shares.get(symbol, 0) + qty_delta
        new_cash = self.cash + cash_delta
        self._shares[symbol] = new_shares
        self.cash = new_cash

    # --------------------------------------------------------------------- #
    def __eq__(self, other) -> bool:
        if not isinstance(other, Portfolio):
            return NotImplemented
        return self.cash == other.cash and self.positions() == other.positions()

    __hash__ = None

    def __repr__(self) -> str:
        return f"Portfolio(cash={self.cash!r}, positions={self.positions()!r})"
