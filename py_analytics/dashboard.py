from typing import List

from py_journal.objects import Trade
from py_journal.source import ITradeSource
import py_journal_math.performance as perf_math
import py_journal_math.series as series_math
from .models import DashboardReport

class DashboardAnalyzer:
    """ Dashboard page: headline numbers, daily equity curve, latest trades. """

    def __init__(self, source: ITradeSource):
        self.source = source

    def analyze(self, recent_limit: int = 5) -> DashboardReport:
        trades = self.source.fetch_trades()

        summary = perf_math.compute_summary(trades)
        daily = series_math.compute_daily_series(trades)

        # Newest first, like the trade history table
        recent: List[Trade] = sorted(trades, key=lambda t: t.entry_time, reverse=True)[:max(recent_limit, 0)]

        return DashboardReport(
            summary=summary,
            daily_series=daily,
            recent_trades=recent,
            risk_ratio=perf_math.compute_risk_ratio(summary.best_trade, summary.worst_trade)
        )
