from typing import List, Dict, Sequence

from py_journal.objects import Trade
from .core import pnl_or_zero, is_closed, is_win, safe_percentage
from .models import DistributionBucket, MonthlyRollup, CalendarDay, CalendarMonth

UNKNOWN_CATEGORY = "unknown"

# Accepts storage (snake_case) and display (camelCase) spellings
DISTRIBUTION_FIELDS = {
    "market_type": "market_type",
    "marketType": "market_type",
    "trade_type": "trade_type",
    "tradeType": "trade_type",
}

def category_label(value) -> str:
    if value is None:
        return UNKNOWN_CATEGORY
    text = str(value).strip()
    return text if text else UNKNOWN_CATEGORY

def month_key(trade: Trade) -> str:
    return f"{trade.entry_time.year:04d}-{trade.entry_time.month:02d}"

def compute_distribution(trades: Sequence[Trade], field: str) -> List[DistributionBucket]:
    """
    Counts ALL trades (open, closed, cancelled) by a categorical field.
    Missing values land in the "unknown" bucket. Buckets keep the order in
    which their category first appears.
    """
    attr = DISTRIBUTION_FIELDS.get(field)
    if attr is None:
        raise ValueError(f"Unsupported distribution field: {field!r}")

    counts: Dict[str, int] = {}
    for trade in trades:
        key = category_label(getattr(trade, attr, None))
        counts[key] = counts.get(key, 0) + 1

    return [DistributionBucket(category=k, count=v) for k, v in counts.items()]

def compute_monthly_rollup(trades: Sequence[Trade]) -> List[MonthlyRollup]:
    """
    Closed trades grouped by the month of their ENTRY time.
    A trade closed in a later month still counts toward its entry month.
    Returned in ascending month order.
    """
    groups: Dict[str, List[Trade]] = {}
    for trade in trades:
        if not is_closed(trade):
            continue
        groups.setdefault(month_key(trade), []).append(trade)

    rollups: List[MonthlyRollup] = []
    for key in sorted(groups):
        members = groups[key]
        wins = sum(1 for t in members if is_win(t))
        rollups.append(MonthlyRollup(
            month_key=key,
            trade_count=len(members),
            winning_trade_count=wins,
            win_rate=safe_percentage(wins, len(members)),
            monthly_profit_loss=sum(pnl_or_zero(t) for t in members)
        ))
    return rollups

def compute_calendar_month(trades: Sequence[Trade], year: int, month: int) -> CalendarMonth:
    """
    Calendar view of one month. Every trade entered in the month is placed
    on its entry date regardless of status; missing P&L adds 0.
    The annual figure covers all trades entered in `year`.
    """
    if not 1 <= month <= 12:
        raise ValueError(f"Invalid month: {month}")

    days: Dict[str, CalendarDay] = {}
    monthly = 0.0
    annual = 0.0
    total = 0

    for trade in sorted(trades, key=lambda t: t.entry_time):
        if trade.entry_time.year != year:
            continue
        pnl = pnl_or_zero(trade)
        annual += pnl
        if trade.entry_time.month != month:
            continue

        day = trade.entry_time.date()
        bucket = days.setdefault(day.isoformat(), CalendarDay(date=day))
        bucket.trade_count += 1
        bucket.profit_loss += pnl
        bucket.trade_ids.append(trade.id)
        monthly += pnl
        total += 1

    return CalendarMonth(
        year=year,
        month=month,
        days=days,
        monthly_profit_loss=monthly,
        annual_profit_loss=annual,
        total_trades=total
    )
