"""
py_journal/objects.py
Core journal record. PURE DATA.
"""
import math
from enum import Enum
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional, Dict, Any

class TradeStatus(Enum):
    OPEN = "open"
    CLOSED = "closed"
    CANCELLED = "cancelled"

class TradeSide(Enum):
    BUY = "buy"
    SELL = "sell"
    LONG = "long"
    SHORT = "short"

# Sides that profit when price rises
BULLISH_SIDES = (TradeSide.BUY.value, TradeSide.LONG.value)


def naive_utc(ts: Optional[datetime]) -> Optional[datetime]:
    """
    Aware timestamps are converted to UTC and stripped of tzinfo.
    Naive ones are taken as UTC already. Keeps every trade time comparable.
    """
    if ts is None or ts.tzinfo is None:
        return ts
    return ts.astimezone(timezone.utc).replace(tzinfo=None)


def parse_timestamp(value: Any) -> Optional[datetime]:
    """
    Accepts datetime objects or ISO-8601 strings (trailing 'Z' allowed).
    Empty values map to None. Result is naive UTC.
    """
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return naive_utc(value)
    text = str(value).strip()
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    return naive_utc(datetime.fromisoformat(text))


def _finite_float(value: Any) -> float:
    number = float(value)
    if not math.isfinite(number):
        raise ValueError(f"Non-finite number: {value!r}")
    return number


def _optional_float(value: Any) -> Optional[float]:
    if value is None or value == "":
        return None
    return _finite_float(value)


@dataclass
class Trade:
    """
    A single journal entry as delivered by the storage layer.
    Read-only to the metrics engine. Categorical fields are kept as raw
    strings because stored rows may carry values outside the known enums.
    """
    id: str
    symbol: str
    trade_type: str
    market_type: Optional[str]
    entry_price: Optional[float]
    quantity: float
    entry_time: datetime
    status: str
    exit_price: Optional[float] = None
    profit_loss: Optional[float] = None
    profit_loss_percentage: Optional[float] = None
    exit_time: Optional[datetime] = None
    notes: str = ""

    def __post_init__(self):
        self.entry_time = naive_utc(self.entry_time)
        self.exit_time = naive_utc(self.exit_time)

    @property
    def is_closed(self) -> bool:
        return (self.status or "").strip().lower() == TradeStatus.CLOSED.value

    @property
    def is_open(self) -> bool:
        return (self.status or "").strip().lower() == TradeStatus.OPEN.value

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "symbol": self.symbol,
            "trade_type": self.trade_type,
            "market_type": self.market_type,
            "entry_price": self.entry_price,
            "exit_price": self.exit_price,
            "quantity": self.quantity,
            "profit_loss": self.profit_loss,
            "profit_loss_percentage": self.profit_loss_percentage,
            "entry_time": self.entry_time.isoformat(),
            "exit_time": self.exit_time.isoformat() if self.exit_time else None,
            "status": self.status,
            "notes": self.notes
        }

    @staticmethod
    def from_dict(data: Dict[str, Any]) -> 'Trade':
        entry_time = parse_timestamp(data.get("entry_time"))
        if entry_time is None:
            raise ValueError(f"Trade {data.get('id')!r} has no entry_time")

        return Trade(
            id=str(data["id"]),
            symbol=data.get("symbol", ""),
            trade_type=data.get("trade_type", ""),
            market_type=data.get("market_type"),
            entry_price=_optional_float(data.get("entry_price")),
            quantity=_finite_float(data["quantity"]),
            entry_time=entry_time,
            status=data.get("status", TradeStatus.OPEN.value),
            exit_price=_optional_float(data.get("exit_price")),
            profit_loss=_optional_float(data.get("profit_loss")),
            profit_loss_percentage=_optional_float(data.get("profit_loss_percentage")),
            exit_time=parse_timestamp(data.get("exit_time")),
            notes=data.get("notes") or ""
        )
