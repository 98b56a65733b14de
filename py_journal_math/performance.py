from typing import Optional, Sequence

from py_journal.objects import Trade
from .core import pnl_or_zero, is_closed, is_open, is_win, is_loss, safe_percentage
from .models import PerformanceSummary

RISK_RATIO_UNDEFINED = "N/A"

def compute_summary(trades: Sequence[Trade]) -> PerformanceSummary:
    """
    Summary statistics over the closed trades of an unordered trade list.
    Empty input and missing P&L degrade to zero-valued fields, never errors.
    """
    closed = [t for t in trades if is_closed(t)]
    open_count = sum(1 for t in trades if is_open(t))

    if not closed:
        return PerformanceSummary(
            total_trades=len(trades),
            closed_trades=0,
            open_trades=open_count,
            winning_trades=0,
            losing_trades=0,
            win_rate_percentage=0.0,
            total_profit_loss=0.0,
            average_profit_loss=0.0,
            best_trade=0.0,
            worst_trade=0.0
        )

    pnls = [pnl_or_zero(t) for t in closed]
    winning = sum(1 for t in closed if is_win(t))
    losing = sum(1 for t in closed if is_loss(t))
    total = sum(pnls)

    return PerformanceSummary(
        total_trades=len(trades),
        closed_trades=len(closed),
        open_trades=open_count,
        winning_trades=winning,
        losing_trades=losing,
        win_rate_percentage=safe_percentage(winning, len(closed)),
        total_profit_loss=total,
        average_profit_loss=total / len(closed),
        best_trade=max(pnls),
        worst_trade=min(pnls)
    )

def compute_risk_ratio(best: float, worst: float) -> Optional[float]:
    """
    Best trade over the magnitude of the worst trade.
    None when the worst trade is zero. The sign of `best` passes through.
    """
    if worst == 0:
        return None
    return best / abs(worst)

def format_risk_ratio(ratio: Optional[float], precision: int = 2) -> str:
    if ratio is None:
        return RISK_RATIO_UNDEFINED
    return f"{ratio:.{precision}f}"
