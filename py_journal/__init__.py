from .objects import Trade, TradeStatus, TradeSide
from .source import ITradeSource, InMemoryTradeSource, JsonTradeSource, TradeSourceError
from .config import JournalConfig, load_config
