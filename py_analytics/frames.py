from typing import Sequence

import pandas as pd

from py_journal.objects import Trade
from py_journal_math.core import pnl_or_zero, point_in_time

TRADE_COLUMNS = [
    "id", "symbol", "trade_type", "market_type", "status",
    "entry_time", "exit_time", "point_in_time", "profit_loss", "has_pnl",
]

def trades_frame(trades: Sequence[Trade]) -> pd.DataFrame:
    """
    Tabular view of a trade list for table renderers.
    profit_loss is already null-coalesced; has_pnl keeps the original nullness.
    """
    rows = [{
        "id": t.id,
        "symbol": t.symbol,
        "trade_type": t.trade_type,
        "market_type": t.market_type,
        "status": t.status,
        "entry_time": t.entry_time,
        "exit_time": t.exit_time,
        "point_in_time": point_in_time(t),
        "profit_loss": pnl_or_zero(t),
        "has_pnl": t.profit_loss is not None,
    } for t in trades]

    return pd.DataFrame(rows, columns=TRADE_COLUMNS)

def daily_frame(trades: Sequence[Trade]) -> pd.DataFrame:
    """
    Per entry-date P&L and trade count, one row per day with trades.
    Index: date (ascending). Columns: profit_loss, trade_count.
    """
    df = trades_frame(trades)
    if df.empty:
        return pd.DataFrame(columns=["profit_loss", "trade_count"], index=pd.Index([], name="date"))

    df["date"] = df["entry_time"].apply(lambda ts: ts.date())
    grouped = df.groupby("date").agg(
        profit_loss=("profit_loss", "sum"),
        trade_count=("id", "count"),
    )
    return grouped.sort_index()
