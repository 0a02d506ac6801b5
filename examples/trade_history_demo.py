#!/usr/bin/env python3
"""
Walk through executing, undoing and redoing trades against a portfolio,
then snapshot the history and show that the copy is unaffected by later
trades.

Usage:
  python examples/trade_history_demo.py
  python examples/trade_history_demo.py --config path/to/ledger.yaml --verbose
"""

import argparse
import sys

from rich.console import Console

from tradeledger import Buy, Sell, LedgerConfig, LedgerError, load_config
from tradeledger.logging import Logger
from tradeledger.report import print_history, print_portfolio

DEFAULT_TRADES = [
    Buy("AAPL", 100, 185.50),
    Buy("GOOGL", 50, 140.25),
    Sell("MSFT", 75, 420.00),
]


def main():
    parser = argparse.ArgumentParser(description="Trade ledger undo/redo walk-through")
    parser.add_argument('-c', '--config', help='Path to YAML or JSON ledger config')
    parser.add_argument('-v', '--verbose', action='store_true', help='Show [EXEC]/[UNDO] trace')
    args = parser.parse_args()

    try:
        cfg = load_config(args.config) if args.config else LedgerConfig(initial_cash=1_000_000.0)
        trades = cfg.actions() or DEFAULT_TRADES
    except LedgerError as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        sys.exit(1)

    if args.verbose:
        cfg.log_level = "DEBUG"
    logger = Logger.from_config(cfg)
    console = Console()

    portfolio = cfg.build_portfolio()
    history = cfg.build_ledger()

    logger.info("Executing %d trades", len(trades))
    for trade in trades:
        history.execute(trade, portfolio)
    print_portfolio(portfolio, console)
    print_history(history, console)

    logger.info("Undo last trade")
    history.undo(portfolio)
    print_portfolio(portfolio, console)

    logger.info("Undo another")
    history.undo(portfolio)
    print_portfolio(portfolio, console)

    logger.info("Redo")
    history.redo(portfolio)
    print_portfolio(portfolio, console)

    snapshot = history.snapshot()
    logger.info("Snapshot has %d trades", len(snapshot))

    history.execute(Sell("AAPL", 50, 190.00), portfolio)
    print_history(history, console, title="Original history")
    print_history(snapshot, console, title="Snapshot unchanged")

    rebuilt = history.replay(cfg.initial_cash)
    logger.info("Replay matches live portfolio: %s", rebuilt == portfolio)


if __name__ == "__main__":
    main()
