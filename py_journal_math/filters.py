from datetime import date, datetime
from typing import List, Optional, Sequence, Union

from py_journal.objects import Trade, naive_utc
from .grouping import category_label

DateBound = Union[date, datetime]

def _norm(value) -> str:
    return category_label(value).lower()

def _after_start(trade: Trade, bound: DateBound) -> bool:
    if isinstance(bound, datetime):
        return trade.entry_time >= naive_utc(bound)
    return trade.entry_time.date() >= bound

def _before_end(trade: Trade, bound: DateBound) -> bool:
    # A plain date includes the whole day
    if isinstance(bound, datetime):
        return trade.entry_time <= naive_utc(bound)
    return trade.entry_time.date() <= bound

def filter_trades(trades: Sequence[Trade],
                  date_from: Optional[DateBound] = None,
                  date_to: Optional[DateBound] = None,
                  market_type: Optional[str] = None,
                  trade_type: Optional[str] = None,
                  status: Optional[str] = None) -> List[Trade]:
    """
    Subset of `trades` matching every given criterion, in input order.
    Date bounds are inclusive and apply to the entry time.
    Categorical criteria match case-insensitively; "unknown" selects trades
    whose value is missing, the same way distributions bucket them.
    No criteria returns a copy of the whole list.
    """
    selected = []
    for trade in trades:
        if date_from is not None and not _after_start(trade, date_from):
            continue
        if date_to is not None and not _before_end(trade, date_to):
            continue
        if market_type is not None and _norm(trade.market_type) != _norm(market_type):
            continue
        if trade_type is not None and _norm(trade.trade_type) != _norm(trade_type):
            continue
        if status is not None and _norm(trade.status) != _norm(status):
            continue
        selected.append(trade)
    return selected
