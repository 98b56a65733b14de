from py_journal.source import ITradeSource
import py_journal_math.performance as perf_math
import py_journal_math.series as series_math
import py_journal_math.grouping as group_math
from py_journal_math.core import is_closed
from .models import AnalyticsReport

class TradeAnalyticsAnalyzer:
    """ Analytics page: every chart derived from one trade snapshot. """

    def __init__(self, source: ITradeSource):
        self.source = source

    def analyze(self) -> AnalyticsReport:
        trades = self.source.fetch_trades()

        summary = perf_math.compute_summary(trades)

        # The cumulative series expects closed trades in entry order
        closed = sorted((t for t in trades if is_closed(t)), key=lambda t: t.entry_time)
        cumulative = series_math.compute_cumulative_series(closed)

        return AnalyticsReport(
            summary=summary,
            cumulative=cumulative,
            win_rate=series_math.compute_win_rate_series(cumulative),
            market_distribution=group_math.compute_distribution(trades, "market_type"),
            trade_type_distribution=group_math.compute_distribution(trades, "trade_type"),
            monthly=group_math.compute_monthly_rollup(trades),
            risk_ratio=perf_math.compute_risk_ratio(summary.best_trade, summary.worst_trade)
        )
