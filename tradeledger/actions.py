"""
Trade actions: immutable buy/sell instructions.

An action carries data only. The portfolio it acts on is passed in to
``apply`` and ``reverse`` for the duration of the call.
"""
from __future__ import annotations

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from numbers import Real
from typing import Any, ClassVar, Dict, Mapping, TYPE_CHECKING

from tradeledger.errors import InvalidTradeError

if TYPE_CHECKING:
    from tradeledger.portfolio import Portfolio


class TradeSide(Enum):
    """Trade side enumeration."""
    BUY = "BUY"
    SELL = "SELL"


@dataclass(frozen=True)
class TradeAction(ABC):
    """
    Base class for a trade instruction.

    Equality and hashing are by value and by concrete type, so
    ``Buy("AAPL", 1, 1.0) != Sell("AAPL", 1, 1.0)``.
    """
    symbol: str
    quantity: int       # shares, positive
    price: float        # per share, non-negative

    side: ClassVar[TradeSide]

    @abstractmethod
    def apply(self, portfolio: Portfolio) -> None:
        """Apply the trade to ``portfolio``."""

    @abstractmethod
    def reverse(self, portfolio: Portfolio) -> None:
        """Undo the effect of ``apply`` on ``portfolio``."""

    @property
    def notional(self) -> float:
        return self.quantity * self.price

    def description(self) -> str:
        return f"{self.side.value} {self.quantity} {self.symbol} @ ${self.price:.2f}"

    def __str__(self) -> str:
        return self.description()

    def validate(self) -> None:
        """
        Check the action's fields.

        Raises
        ------
        InvalidTradeError
            If the symbol is empty, the quantity is not a positive integer,
            or the price is negative or not finite.
        """
        if not isinstance(self.symbol, str) or not self.symbol.strip():
            raise InvalidTradeError(f"Invalid symbol: {self.symbol!r}")
        if isinstance(self.quantity, bool) or not isinstance(self.quantity, int):
            raise InvalidTradeError(f"Quantity must be an integer, got {self.quantity!r}")
        if self.quantity <= 0:
            raise InvalidTradeError(f"Quantity must be positive, got {self.quantity}")
        if isinstance(self.price, bool) or not isinstance(self.price, Real):
            raise InvalidTradeError(f"Price must be a number, got {self.price!r}")
        if not math.isfinite(self.price) or self.price < 0:
            raise InvalidTradeError(f"Price must be non-negative, got {self.price}")

    def to_dict(self) -> Dict[str, Any]:
        return {
            "side": self.side.value,
            "symbol": self.symbol,
            "quantity": self.quantity,
            "price": self.price,
        }

    @staticmethod
    def from_dict(data: Mapping[str, Any]) -> TradeAction:
        """
        Build a Buy or Sell from ``{"side", "symbol", "quantity", "price"}``.

        The side is case-insensitive. Field values are taken as given;
        call ``validate`` to check them.
        """
        if not isinstance(data, Mapping):
            raise InvalidTradeError(f"Trade must be a mapping, got {data!r}")
        try:
            side = TradeSide(str(data["side"]).upper())
            symbol = data["symbol"]
            quantity = data["quantity"]
            price = data["price"]
        except KeyError as exc:
            raise InvalidTradeError(f"Trade is missing field {exc.args[0]!r}: {dict(data)}") from exc
        except ValueError as exc:
            raise InvalidTradeError(f"Unknown trade side: {data['side']!r}") from exc

        return _ACTION_TYPES[side](symbol, quantity, price)


@dataclass(frozen=True)
class Buy(TradeAction):
    side: ClassVar[TradeSide] = TradeSide.BUY

    def apply(self, portfolio: Portfolio) -> None:
        portfolio.buy(self.symbol, self.quantity, self.price)

    def reverse(self, portfolio: Portfolio) -> None:
        portfolio.reverse_buy(self.symbol, self.quantity, self.price)


@dataclass(frozen=True)
class Sell(TradeAction):
    side: ClassVar[TradeSide] = TradeSide.SELL

    def apply(self, portfolio: Portfolio) -> None:
        portfolio.sell(self.symbol, self.quantity, self.price)

    def reverse(self, portfolio: Portfolio) -> None:
        portfolio.reverse_sell(self.symbol, self.quantity, self.price)


_ACTION_TYPES = {
    TradeSide.BUY: Buy,
    TradeSide.SELL: Sell,
}
