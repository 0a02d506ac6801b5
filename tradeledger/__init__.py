from tradeledger.actions import TradeAction, TradeSide, Buy, Sell
from tradeledger.portfolio import Portfolio
from tradeledger.ledger import TradeLedger
from tradeledger.errors import LedgerError, InvalidTradeError, ConfigError
from tradeledger.config import LedgerConfig, load_config
