"""
Ledger configuration loaded from YAML or JSON.

Example YAML::

    initial_cash: 1000000.0
    validate_actions: true
    log_level: DEBUG
    log_file: logs/ledger.log
    trades:
      - {side: BUY, symbol: AAPL, quantity: 100, price: 185.50}
      - {side: SELL, symbol: MSFT, quantity: 75, price: 420.00}
"""
from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass, field, fields
from typing import Any, Dict, List, Mapping, Optional

import yaml

from tradeledger.actions import TradeAction
from tradeledger.errors import ConfigError
from tradeledger.ledger import TradeLedger
from tradeledger.portfolio import Portfolio

logger = logging.getLogger(__name__)

_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class LedgerConfig:
    initial_cash: float = 0.0
    validate_actions: bool = False      # reject malformed trades in execute
    log_level: str = "INFO"
    log_file: Optional[str] = None
    trades: List[Dict[str, Any]] = field(default_factory=list)

    def __post_init__(self):
        self.log_level = str(self.log_level).upper()
        if self.log_level not in _LEVELS:
            raise ConfigError(f"Unknown log level: {self.log_level!r}")
        if not isinstance(self.validate_actions, bool):
            raise ConfigError(f"validate_actions must be true or false, got {self.validate_actions!r}")
        if isinstance(self.initial_cash, bool):
            raise ConfigError(f"initial_cash must be a number, got {self.initial_cash!r}")
        try:
            self.initial_cash = float(self.initial_cash)
        except (TypeError, ValueError) as exc:
            raise ConfigError(f"initial_cash must be a number, got {self.initial_cash!r}") from exc
        if not isinstance(self.trades, list):
            raise ConfigError("trades must be a list of trade mappings")

    @property
    def level(self) -> int:
        return getattr(logging, self.log_level)

    @classmethod
    def from_dict(cls, data: Optional[Mapping[str, Any]]) -> LedgerConfig:
        data = dict(data or {})
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ConfigError(f"Unknown config keys: {', '.join(unknown)}")
        return cls(**data)

    def build_portfolio(self) -> Portfolio:
        return Portfolio(self.initial_cash)

    def build_ledger(self) -> TradeLedger:
        return TradeLedger(validate=self.validate_actions)

    def actions(self) -> List[TradeAction]:
        """Parse ``trades`` into Buy/Sell actions."""
        return [TradeAction.from_dict(trade) for trade in self.trades]


def load_config(path: str) -> LedgerConfig:
    """
    Read a ``LedgerConfig`` from a ``.yaml``/``.yml`` or ``.json`` file.

    Raises
    ------
    ConfigError
        If the file is missing, has an unsupported extension, does not
        parse, or holds invalid values.
    """
    config_path = os.path.expanduser(str(path))
    if not os.path.exists(config_path):
        raise ConfigError(f"Config file not found: {config_path}")

    ext = os.path.splitext(config_path)[1].lower()
    try:
        if ext in ('.yaml', '.yml'):
            with open(config_path) as f:
                cfg = yaml.safe_load(f)
        elif ext == '.json':
            with open(config_path) as f:
                cfg = json.load(f)
        else:
            raise ConfigError(f"Unsupported config file extension: {ext}")
    except (yaml.YAMLError, json.JSONDecodeError) as exc:
        raise ConfigError(f"Could not parse {config_path}: {exc}") from exc

    if cfg is not None and not isinstance(cfg, Mapping):
        raise ConfigError(f"Config root must be a mapping: {config_path}")

    logger.debug("Loaded config from %s", config_path)
    return LedgerConfig.from_dict(cfg)
