import sys
import os
import json
import logging
from datetime import datetime, timezone

import pytest

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from py_journal.objects import Trade
from py_journal.source import JsonTradeSource, InMemoryTradeSource, TradeSourceError
from py_journal.config import JournalConfig, load_config
from py_journal.logger import get_logger, log_event
from py_journal_math.series import compute_cumulative_series
from py_analytics.performance import TradeAnalyticsAnalyzer
from py_analytics.dashboard import DashboardAnalyzer

ROW = {
    "id": "1",
    "symbol": "AAPL",
    "trade_type": "long",
    "market_type": "stock",
    "entry_price": 150.25,
    "exit_price": 155.75,
    "quantity": 50,
    "profit_loss": 275.0,
    "profit_loss_percentage": 1.8,
    "entry_time": "2024-01-15T10:30:00Z",
    "exit_time": "2024-01-16T14:45:00Z",
    "status": "closed",
}

def test_trade_from_storage_row():
    t = Trade.from_dict(ROW)
    # Stored as naive UTC
    assert t.entry_time == datetime(2024, 1, 15, 10, 30)
    assert t.exit_time == datetime(2024, 1, 16, 14, 45)
    assert t.profit_loss == 275.0
    assert t.is_closed
    assert not t.is_open

def test_trade_open_row_optional_fields():
    row = dict(ROW, status="open", exit_price=None, profit_loss=None,
               profit_loss_percentage=None, exit_time=None)
    del row["market_type"]
    t = Trade.from_dict(row)
    assert t.exit_time is None
    assert t.profit_loss is None
    assert t.market_type is None
    assert t.is_open

def test_trade_offsets_normalized_to_utc():
    t = Trade.from_dict(dict(ROW, entry_time="2024-01-15T12:30:00+02:00", exit_time="2024-01-16T14:45:00"))
    assert t.entry_time == datetime(2024, 1, 15, 10, 30)
    assert t.entry_time.tzinfo is None
    assert t.exit_time == datetime(2024, 1, 16, 14, 45)

def test_trade_constructed_with_aware_datetime():
    t = Trade(id="9", symbol="BTCUSD", trade_type="long", market_type="crypto", entry_price=1.0,
              quantity=1, entry_time=datetime(2024, 3, 1, 9, 0, tzinfo=timezone.utc), status="open")
    assert t.entry_time == datetime(2024, 3, 1, 9, 0)
    assert t.entry_time.tzinfo is None

def test_trade_dict_round_trip():
    t = Trade.from_dict(ROW)
    assert Trade.from_dict(t.to_dict()) == t

def test_trade_requires_entry_time():
    with pytest.raises(ValueError):
        Trade.from_dict(dict(ROW, entry_time=None))

def test_json_source_reads_list_and_wrapped(tmp_path):
    plain = tmp_path / "plain.json"
    plain.write_text(json.dumps([ROW, dict(ROW, id="2")]))
    wrapped = tmp_path / "wrapped.json"
    wrapped.write_text(json.dumps({"trades": [ROW]}))

    assert [t.id for t in JsonTradeSource(str(plain)).fetch_trades()] == ["1", "2"]
    assert len(JsonTradeSource(str(wrapped)).fetch_trades()) == 1

def test_json_source_missing_file(tmp_path):
    assert JsonTradeSource(str(tmp_path / "nope.json")).fetch_trades() == []

def test_json_source_invalid_json(tmp_path):
    bad = tmp_path / "bad.json"
    bad.write_text("{not json")
    with pytest.raises(TradeSourceError):
        JsonTradeSource(str(bad)).fetch_trades()

def test_json_source_skips_malformed_rows(tmp_path, caplog):
    path = tmp_path / "mixed.json"
    path.write_text(json.dumps([ROW, {"id": "broken"}, dict(ROW, id="3", quantity="many")]))

    with caplog.at_level(logging.WARNING, logger="journal.source"):
        trades = JsonTradeSource(str(path)).fetch_trades()

    assert [t.id for t in trades] == ["1"]
    assert caplog.text.count("Skipping malformed trade row") == 2

def test_in_memory_source_returns_copy():
    t = Trade.from_dict(ROW)
    src = InMemoryTradeSource([t])
    first = src.fetch_trades()
    first.clear()
    assert len(src.fetch_trades()) == 1

def test_load_config(tmp_path):
    path = tmp_path / "journal_config.json"
    path.write_text(json.dumps({"trades_path": "x/trades.json", "recent_trades_limit": 10}))
    cfg = load_config(str(path))
    assert cfg.trades_path == "x/trades.json"
    assert cfg.recent_trades_limit == 10
    assert cfg.log_dir == "logs"
    assert cfg.validate()

def test_load_config_missing_or_invalid(tmp_path):
    assert load_config(str(tmp_path / "none.json")) is None
    bad = tmp_path / "bad.json"
    bad.write_text("[1, 2")
    assert load_config(str(bad)) is None

def test_config_validate():
    assert JournalConfig().validate()
    assert not JournalConfig(recent_trades_limit=0).validate()
    assert not JournalConfig(trades_path="").validate()

def test_logger_writes_to_log_dir(tmp_path):
    logger = get_logger("journal_test_logger", log_dir=str(tmp_path))
    again = get_logger("journal_test_logger", log_dir=str(tmp_path))
    assert logger is again
    assert len(logger.handlers) == 1

    logger.info("hello journal")
    for h in logger.handlers:
        h.flush()

    content = (tmp_path / "journal.log").read_text(encoding="utf-8")
    assert "hello journal" in content

def test_sample_journal_is_readable(tmp_path):
    from generate_sample_trades import create_journal

    rows = create_journal(30, seed=7)
    path = tmp_path / "trades.json"
    path.write_text(json.dumps({"trades": rows}))

    trades = JsonTradeSource(str(path)).fetch_trades()
    assert len(trades) == 30
    for t in trades:
        if t.is_closed:
            assert t.profit_loss is not None
            assert t.exit_time is not None
        else:
            assert t.profit_loss is None

def test_log_event_tags_actor(caplog):
    with caplog.at_level(logging.INFO, logger="journal"):
        log_event("CLI", "summary requested")
    assert "[CLI] summary requested" in caplog.text

def test_mixed_timestamp_shapes_can_be_analyzed(tmp_path):
    path = tmp_path / "mixed_tz.json"
    path.write_text(json.dumps([
        dict(ROW, id="a", entry_time="2024-01-03T10:00:00", exit_time="2024-01-03T12:00:00", profit_loss=-50.0),
        dict(ROW, id="b", entry_time="2024-01-02T10:00:00Z", exit_time="2024-01-02T11:00:00Z", profit_loss=100.0),
        dict(ROW, id="c", entry_time="2024-01-04T09:00:00+01:00", exit_time=None, status="open", profit_loss=None),
    ]))
    source = JsonTradeSource(str(path))

    closed = sorted((t for t in source.fetch_trades() if t.is_closed), key=lambda t: t.entry_time)
    points = compute_cumulative_series(closed)
    assert [p.cumulative_profit_loss for p in points] == [100.0, 50.0]

    report = TradeAnalyticsAnalyzer(source).analyze()
    assert report.summary.total_trades == 3
    assert [p.period_profit_loss for p in report.cumulative] == [100.0, -50.0]

    dash = DashboardAnalyzer(source).analyze(recent_limit=1)
    assert [t.id for t in dash.recent_trades] == ["c"]

def test_json_source_skips_non_finite_numbers(tmp_path, caplog):
    path = tmp_path / "nan.json"
    path.write_text(json.dumps([
        ROW,
        dict(ROW, id="2", profit_loss=float("nan")),
        dict(ROW, id="3", profit_loss="inf"),
        dict(ROW, id="4", quantity="-Infinity"),
    ]))

    with caplog.at_level(logging.WARNING, logger="journal.source"):
        trades = JsonTradeSource(str(path)).fetch_trades()

    assert [t.id for t in trades] == ["1"]
    assert caplog.text.count("Skipping malformed trade row") == 3
