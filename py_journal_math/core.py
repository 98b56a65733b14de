from datetime import datetime
from typing import Optional

from py_journal.objects import Trade, TradeStatus, BULLISH_SIDES

# Null handling and win/loss classification live here so every
# aggregation applies the same rules.

def pnl_or_zero(trade: Trade) -> float:
    """P&L contribution to sums. Missing P&L counts as 0."""
    return trade.profit_loss if trade.profit_loss is not None else 0.0

def is_closed(trade: Trade) -> bool:
    return (trade.status or "").strip().lower() == TradeStatus.CLOSED.value

def is_open(trade: Trade) -> bool:
    return (trade.status or "").strip().lower() == TradeStatus.OPEN.value

def is_win(trade: Trade) -> bool:
    """Strictly positive, resolvable P&L."""
    return trade.profit_loss is not None and trade.profit_loss > 0

def is_loss(trade: Trade) -> bool:
    """Strictly negative, resolvable P&L."""
    return trade.profit_loss is not None and trade.profit_loss < 0

def point_in_time(trade: Trade) -> datetime:
    """Exit time for finished trades, entry time otherwise."""
    return trade.exit_time if trade.exit_time is not None else trade.entry_time

def safe_percentage(part: float, whole: float) -> float:
    if whole == 0:
        return 0.0
    return (part / whole) * 100.0

def calculate_pnl(entry_price: Optional[float], exit_price: Optional[float],
                  quantity: Optional[float], trade_type: str) -> Optional[float]:
    """
    Calculates absolute P&L for a closed position.
    buy/long profit from rising prices, every other side from falling ones.
    Returns None if any input is missing or zero.
    """
    if not entry_price or not exit_price or not quantity:
        return None

    if (trade_type or "").strip().lower() in BULLISH_SIDES:
        return (exit_price - entry_price) * quantity
    return (entry_price - exit_price) * quantity

def calculate_pnl_percentage(entry_price: Optional[float], exit_price: Optional[float],
                             trade_type: str) -> Optional[float]:
    """P&L relative to entry price, in percent."""
    if not entry_price or not exit_price:
        return None

    if (trade_type or "").strip().lower() in BULLISH_SIDES:
        return ((exit_price - entry_price) / entry_price) * 100.0
    return ((entry_price - exit_price) / entry_price) * 100.0
