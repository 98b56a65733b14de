import sys
import os
from datetime import datetime, date
from unittest.mock import MagicMock

import pandas as pd
import pytest

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from py_journal.objects import Trade
from py_journal.source import ITradeSource, InMemoryTradeSource
from py_analytics.dashboard import DashboardAnalyzer
from py_analytics.performance import TradeAnalyticsAnalyzer
from py_analytics.calendar_view import CalendarAnalyzer
from py_analytics.frames import trades_frame, daily_frame
from py_journal_math.grouping import compute_calendar_month

def T(id, pnl, entry, status="closed", exit_at=None, market="stock", side="long"):
    return Trade(id=id, symbol=f"SYM{id}", trade_type=side, market_type=market,
                 entry_price=100.0, quantity=1, entry_time=entry, status=status,
                 profit_loss=pnl, exit_time=exit_at)

@pytest.fixture
def source():
    # Delivered newest first, like the storage query
    return InMemoryTradeSource([
        T("5", None, datetime(2024, 2, 10, 9), status="open", market="crypto"),
        T("4", 350.0, datetime(2024, 2, 1, 8), exit_at=datetime(2024, 2, 1, 13)),
        T("3", -120.0, datetime(2024, 1, 13, 11), exit_at=datetime(2024, 1, 13, 15), side="short"),
        T("2", 225.0, datetime(2024, 1, 14, 9), exit_at=datetime(2024, 1, 14, 16), side="short"),
        T("1", 275.0, datetime(2024, 1, 12, 10), exit_at=datetime(2024, 1, 16, 14), market=None),
    ])

def test_dashboard_analyzer(source):
    report = DashboardAnalyzer(source).analyze(recent_limit=3)

    s = report.summary
    assert s.total_trades == 5
    assert s.closed_trades == 4
    assert s.open_trades == 1
    assert s.total_profit_loss == 730.0
    assert s.win_rate_percentage == 75.0

    assert [t.id for t in report.recent_trades] == ["5", "4", "2"]
    assert [p.date for p in report.daily_series] == [date(2024, 1, 13), date(2024, 1, 14),
                                                    date(2024, 1, 16), date(2024, 2, 1)]
    assert report.daily_series[-1].cumulative_profit_loss == 730.0
    assert report.risk_ratio == pytest.approx(350.0 / 120.0)

    d = report.to_dict()
    assert d["risk_ratio_display"] == "2.92"
    assert d["recent_trades"][0]["entry_time"] == "2024-02-10T09:00:00"

def test_analytics_analyzer_sorts_before_cumulating(source):
    report = TradeAnalyticsAnalyzer(source).analyze()

    # Entry order: 1 (275), 3 (-120), 2 (225), 4 (350)
    assert [p.period_profit_loss for p in report.cumulative] == [275.0, -120.0, 225.0, 350.0]
    assert [p.cumulative_profit_loss for p in report.cumulative] == [275.0, 155.0, 380.0, 730.0]
    assert report.cumulative[-1].cumulative_profit_loss == report.summary.total_profit_loss

    assert [round(r.win_rate, 2) for r in report.win_rate] == [100.0, 50.0, 66.67, 75.0]

    market = {b.category: b.count for b in report.market_distribution}
    assert market == {"crypto": 1, "stock": 3, "unknown": 1}
    sides = [(b.category, b.count) for b in report.trade_type_distribution]
    assert sides == [("long", 3), ("short", 2)]

    assert [m.month_key for m in report.monthly] == ["2024-01", "2024-02"]
    assert report.monthly[0].monthly_profit_loss == 380.0
    assert report.monthly[1].trade_count == 1

def test_analytics_empty_source():
    report = TradeAnalyticsAnalyzer(InMemoryTradeSource()).analyze()
    assert report.summary.total_trades == 0
    assert report.cumulative == []
    assert report.win_rate == []
    assert report.monthly == []
    assert report.risk_ratio is None
    assert report.to_dict()["risk_ratio_display"] == "N/A"

def test_analyzer_fetches_fresh_snapshot():
    src = MagicMock(spec=ITradeSource)
    src.fetch_trades.return_value = []
    analyzer = TradeAnalyticsAnalyzer(src)
    analyzer.analyze()
    analyzer.analyze()
    assert src.fetch_trades.call_count == 2

def test_calendar_analyzer(source):
    analyzer = CalendarAnalyzer(source)
    cal = analyzer.analyze(2024, 1)
    assert cal.total_trades == 3
    assert cal.monthly_profit_loss == 380.0
    assert cal.annual_profit_loss == 730.0
    assert cal.days["2024-01-12"].trade_ids == ["1"]

    frame = analyzer.month_frame(2024, 1)
    assert list(frame.index) == [date(2024, 1, 12), date(2024, 1, 13), date(2024, 1, 14)]
    assert frame.loc[date(2024, 1, 13), "profit_loss"] == -120.0

def test_calendar_frame_matches_engine(source):
    analyzer = CalendarAnalyzer(source)
    for month in (1, 2):
        cal = analyzer.analyze(2024, month)
        frame = analyzer.month_frame(2024, month)
        assert len(frame) == len(cal.days)
        for day, row in frame.iterrows():
            bucket = cal.days[day.isoformat()]
            assert row["profit_loss"] == bucket.profit_loss
            assert row["trade_count"] == bucket.trade_count

def test_calendar_analyzer_invalid_month(source):
    with pytest.raises(ValueError):
        CalendarAnalyzer(source).month_frame(2024, 0)

def test_trades_frame(source):
    df = trades_frame(source.fetch_trades())
    assert isinstance(df, pd.DataFrame)
    assert len(df) == 5
    open_row = df[df["id"] == "5"].iloc[0]
    assert open_row["profit_loss"] == 0.0
    assert not open_row["has_pnl"]

    empty = trades_frame([])
    assert len(empty) == 0
    assert "profit_loss" in empty.columns

def test_daily_frame_empty():
    df = daily_frame([])
    assert df.empty
    assert list(df.columns) == ["profit_loss", "trade_count"]

def test_daily_frame_matches_engine_calendar(source):
    trades = source.fetch_trades()
    frame = daily_frame([t for t in trades if t.entry_time.month == 2])
    cal = compute_calendar_month(trades, 2024, 2)
    assert frame["trade_count"].sum() == cal.total_trades
    assert frame["profit_loss"].sum() == cal.monthly_profit_loss
