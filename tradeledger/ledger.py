"""
Undo/redo history of trade actions.

The ledger owns two stacks of actions: ``executed`` and ``undone``. It
never holds on to a portfolio; every operation that changes positions
takes the portfolio as an argument.
"""
from __future__ import annotations

import logging
from typing import Iterable, List, Tuple

from tradeledger.actions import TradeAction
from tradeledger.portfolio import Portfolio

logger = logging.getLogger(__name__)


class TradeLedger:
    """
    Linear execute/undo/redo history over trade actions.

    Undo and redo always act on the most recent action (LIFO). Executing a
    new action discards the redo stack. An action is in exactly one of
    ``executed`` and ``undone`` at any time.

    Parameters
    ----------
    validate : bool, default False
        If True, ``execute`` calls ``action.validate()`` before touching the
        portfolio, so an invalid action raises ``InvalidTradeError`` and
        leaves both ledger and portfolio unchanged. If False, actions are
        applied as given.
    """

    def __init__(self, validate: bool = False):
        self.validate = validate
        self._executed: List[TradeAction] = []
        self._undone: List[TradeAction] = []

    @property
    def executed(self) -> Tuple[TradeAction, ...]:
        """Applied actions, oldest first."""
        return tuple(self._executed)

    @property
    def undone(self) -> Tuple[TradeAction, ...]:
        """Actions available for redo; the last one is redone first."""
        return tuple(self._undone)

    @property
    def can_undo(self) -> bool:
        return bool(self._executed)

    @property
    def can_redo(self) -> bool:
        return bool(self._undone)

    def __len__(self) -> int:
        return len(self._executed)

    # --------------------------------------------------------------------- #
    # Transitions
    # --------------------------------------------------------------------- #
    def execute(self, action: TradeAction, portfolio: Portfolio) -> None:
        if self.validate:
            action.validate()
        action.apply(portfolio)
        self._executed.append(action)
        if self._undone:
            logger.debug("Discarding %d undone action(s)", len(self._undone))
        self._undone.clear()
        logger.debug("Executed %s (history: %d)", action, len(self._executed))

    def undo(self, portfolio: Portfolio) -> bool:
        """
        Reverse the most recently executed action.

        Returns
        -------
        bool
            False if there was nothing to undo; nothing is changed then.
        """
        if not self._executed:
            logger.debug("Nothing to undo")
            return False
        action = self._executed.pop()
        action.reverse(portfolio)
        self._undone.append(action)
        logger.debug("Undid %s", action)
        return True

    def redo(self, portfolio: Portfolio) -> bool:
        """
        Re-apply the most recently undone action.

        Returns
        -------
        bool
            False if there was nothing to redo; nothing is changed then.
        """
        if not self._undone:
            logger.debug("Nothing to redo")
            return False
        action = self._undone.pop()
        action.apply(portfolio)
        self._executed.append(action)
        logger.debug("Redid %s", action)
        return True

    def undo_all(self, portfolio: Portfolio) -> int:
        """Undo until the history is empty; returns how many were undone."""
        count = 0
        while self.undo(portfolio):
            count += 1
        return count

    def redo_all(self, portfolio: Portfolio) -> int:
        """Redo until the redo stack is empty; returns how many were redone."""
        count = 0
        while self.redo(portfolio):
            count += 1
        return count

    def clear(self) -> None:
        """Forget both stacks. No portfolio is touched."""
        self._executed.clear()
        self._undone.clear()

    # --------------------------------------------------------------------- #
    # Copies and replay
    # --------------------------------------------------------------------- #
    def snapshot(self) -> TradeLedger:
        """
        Independent copy of the history.

        Actions are immutable, so copying the two lists is enough: later
        execute/undo/redo on either ledger is invisible to the other.
        """
        clone = TradeLedger(validate=self.validate)
        clone._executed = list(self._executed)
        clone._undone = list(self._undone)
        return clone

    def __copy__(self) -> TradeLedger:
        return self.snapshot()

    def __deepcopy__(self, memo) -> TradeLedger:
        return self.snapshot()

    def replay(self, initial_cash: float = 0.0) -> Portfolio:
        """
        Apply ``executed`` in order to a fresh portfolio.

        Starting from the same initial cash, the result equals the portfolio
        this ledger has been driving.
        """
        portfolio = Portfolio(initial_cash)
        for action in self._executed:
            action.apply(portfolio)
        return portfolio

    @classmethod
    def from_actions(cls, actions: Iterable[TradeAction], portfolio: Portfolio,
                     validate: bool = False) -> TradeLedger:
        """Build a ledger by executing ``actions`` against ``portfolio`` in order."""
        ledger = cls(validate=validate)
        for action in actions:
            ledger.execute(action, portfolio)
        return ledger

    def __repr__(self) -> str:
        return f"TradeLedger(executed={len(self._executed)}, undone={len(self._undone)})"
