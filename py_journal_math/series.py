import logging
from typing import List, Sequence

from py_journal.objects import Trade
from .core import pnl_or_zero, is_closed, point_in_time, safe_percentage
from .models import CumulativePoint, WinRatePoint, DailyPoint

logger = logging.getLogger("journal.math")

def _first_unsorted_index(trades: Sequence[Trade]) -> int:
    """ Index of the first trade entered before its predecessor, or -1. """
    for i in range(1, len(trades)):
        if trades[i].entry_time < trades[i - 1].entry_time:
            return i
    return -1

def compute_cumulative_series(trades: Sequence[Trade]) -> List[CumulativePoint]:
    """
    Running P&L, one point per trade.
    Contract: `trades` are closed trades sorted ascending by entry time.
    The order is NOT corrected here. Unsorted input still produces a series
    (summed in the given order) and is reported as a warning.
    """
    if not trades:
        return []

    bad = _first_unsorted_index(trades)
    if bad != -1:
        logger.warning(f"Cumulative series input not sorted by entry time (index {bad}); using given order")

    points: List[CumulativePoint] = []
    running = 0.0
    for i, trade in enumerate(trades):
        period = pnl_or_zero(trade)
        running += period
        points.append(CumulativePoint(
            sequence_index=i + 1,
            point_in_time=point_in_time(trade),
            period_profit_loss=period,
            cumulative_profit_loss=running
        ))

    return points

def compute_win_rate_series(points: Sequence[CumulativePoint]) -> List[WinRatePoint]:
    """
    Running win rate per prefix of the cumulative series.
    Not monotonic: a loss lowers the rate.
    """
    series: List[WinRatePoint] = []
    wins = 0
    for k, point in enumerate(points, start=1):
        if point.period_profit_loss > 0:
            wins += 1
        series.append(WinRatePoint(sequence_index=k, win_rate=safe_percentage(wins, k)))
    return series

def compute_daily_series(trades: Sequence[Trade]) -> List[DailyPoint]:
    """
    Per-day P&L of closed trades (by point in time), with running total.
    Sorted by date; input order does not matter.
    """
    days = {}
    for trade in trades:
        if not is_closed(trade):
            continue
        day = point_in_time(trade).date()
        pnl, count = days.get(day, (0.0, 0))
        days[day] = (pnl + pnl_or_zero(trade), count + 1)

    series: List[DailyPoint] = []
    running = 0.0
    for day in sorted(days):
        pnl, count = days[day]
        running += pnl
        series.append(DailyPoint(
            date=day,
            profit_loss=pnl,
            cumulative_profit_loss=running,
            trade_count=count
        ))
    return series
