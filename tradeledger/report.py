"""
Read-only rendering of portfolios and trade histories.

Tables are built with Rich for the console and pandas for tabular export.
Nothing here mutates a portfolio or a ledger.
"""
from __future__ import annotations

from typing import Optional

import pandas as pd
from rich.console import Console
from rich.table import Table

from tradeledger.ledger import TradeLedger
from tradeledger.portfolio import Portfolio

HISTORY_COLUMNS = ["side", "symbol", "quantity", "price", "notional"]


def positions_table(portfolio: Portfolio, title: str = "Portfolio") -> Table:
    """
    Cash row followed by one row per non-zero position, sorted by symbol.
    """
    table = Table(title=title)
    table.add_column("Holding", style="bold magenta")
    table.add_column("Amount", justify="right", style="green")

    table.add_row("Cash", f"${portfolio.cash:,.2f}")
    for symbol, qty in sorted(portfolio.positions().items()):
        table.add_row(symbol, f"{qty} shares")
    return table


def history_table(ledger: TradeLedger, title: str = "Trade History") -> Table:
    table = Table(title=title)
    table.add_column("#", justify="right")
    table.add_column("Trade")

    if not ledger.executed:
        table.add_row("", "(empty)")
    for step, action in enumerate(ledger.executed, start=1):
        table.add_row(str(step), action.description())
    return table


def history_frame(ledger: TradeLedger) -> pd.DataFrame:
    """
    Executed actions as a DataFrame.

    Returns
    -------
    pd.DataFrame
        Columns ``side, symbol, quantity, price, notional``; index ``step``
        counts from 1.
    """
    rows = [dict(action.to_dict(), notional=action.notional) for action in ledger.executed]
    df = pd.DataFrame(rows, columns=HISTORY_COLUMNS)
    df.index = pd.RangeIndex(start=1, stop=len(df) + 1, name="step")
    return df


def print_portfolio(portfolio: Portfolio, console: Optional[Console] = None) -> None:
    (console or Console()).print(positions_table(portfolio))


def print_history(ledger: TradeLedger, console: Optional[Console] = None,
                  title: str = "Trade History") -> None:
    (console or Console()).print(history_table(ledger, title=title))
