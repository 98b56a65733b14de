# py_cli/handlers_report.py
from datetime import date
from typing import List, Dict, Any, Tuple

import pandas as pd

from .models import CLIContext, CommandResponse
from .commands import ICommand, registry, FILTER_KEYS
from py_analytics.dashboard import DashboardAnalyzer
from py_analytics.performance import TradeAnalyticsAnalyzer
from py_analytics.calendar_view import CalendarAnalyzer
from py_journal.objects import Trade, parse_timestamp
from py_journal.source import ITradeSource
import py_journal_math.performance as perf_math
import py_journal_math.series as series_math
import py_journal_math.grouping as group_math
from py_journal_math.core import is_closed
from py_journal_math.filters import filter_trades

DISTRIBUTION_ARGS = {
    "market": "market_type",
    "type": "trade_type",
}

def _table(rows: List[dict]) -> str:
    if not rows:
        return "(no data)"
    return pd.DataFrame(rows).to_string(index=False)

def _closed_in_entry_order(source: ITradeSource) -> List[Trade]:
    return sorted((t for t in source.fetch_trades() if is_closed(t)), key=lambda t: t.entry_time)

def _parse_bound(value: str):
    # 2024-01-31 covers the whole day, 2024-01-31T12:00 is exact
    if "T" in value:
        return parse_timestamp(value)
    return date.fromisoformat(value)

def split_filter_args(args: List[str]) -> Tuple[List[str], Dict[str, Any]]:
    """
    Separates key=value filter arguments from positional ones.
    Raises ValueError for unknown keys, empty values or bad dates.
    """
    positional: List[str] = []
    filters: Dict[str, Any] = {}
    for arg in args:
        if "=" not in arg:
            positional.append(arg)
            continue
        key, _, value = arg.partition("=")
        field = FILTER_KEYS.get(key.lower())
        if field is None or not value:
            raise ValueError(f"Invalid filter '{arg}'")
        if field in ("date_from", "date_to"):
            filters[field] = _parse_bound(value)
        else:
            filters[field] = value
    return positional, filters


class FilteredTradeSource(ITradeSource):
    """ Applies report filters to every snapshot of the wrapped source. """

    def __init__(self, inner: ITradeSource, filters: Dict[str, Any]):
        self.inner = inner
        self.filters = filters

    def fetch_trades(self) -> List[Trade]:
        return filter_trades(self.inner.fetch_trades(), **self.filters)


class ReportCommand(ICommand):
    """ Base for commands that report over an optionally filtered journal. """
    accepts_filters = True

    def execute(self, ctx: CLIContext, args: List[str]) -> CommandResponse:
        try:
            positional, filters = split_filter_args(args)
        except ValueError as e:
            return CommandResponse(False, f"{e}. Usage: {registry.usage(self)}", error_code="INVALID_ARGS")

        source = FilteredTradeSource(ctx.source, filters) if filters else ctx.source
        return self.report(ctx, positional, source)

    def report(self, ctx: CLIContext, args: List[str], source: ITradeSource) -> CommandResponse:
        raise NotImplementedError


class SummaryCommand(ReportCommand):
    name = "summary"
    description = "Performance summary over all trades."
    syntax = "summary"

    def report(self, ctx: CLIContext, args: List[str], source: ITradeSource) -> CommandResponse:
        s = perf_math.compute_summary(source.fetch_trades())
        payload = s.to_dict()
        payload["win_rate_display"] = s.win_rate_display
        msg = (f"{s.total_trades} trades ({s.closed_trades} closed, {s.open_trades} open), "
               f"win rate {s.win_rate_display:.1f}%, P&L {s.total_profit_loss:+.2f}")
        return CommandResponse(True, message=msg, payload=payload)

class DashboardCommand(ReportCommand):
    name = "dashboard"
    description = "Dashboard report: summary, daily P&L curve, recent trades."
    syntax = "dashboard"

    def report(self, ctx: CLIContext, args: List[str], source: ITradeSource) -> CommandResponse:
        report = DashboardAnalyzer(source).analyze(recent_limit=ctx.recent_trades_limit)
        return CommandResponse(True, message="Dashboard Report", payload=report.to_dict())

class AnalyticsCommand(ReportCommand):
    name = "analytics"
    description = "Full analytics report (all chart series)."
    syntax = "analytics"

    def report(self, ctx: CLIContext, args: List[str], source: ITradeSource) -> CommandResponse:
        report = TradeAnalyticsAnalyzer(source).analyze()
        return CommandResponse(True, message="Analytics Report", payload=report.to_dict())

class CumulativeCommand(ReportCommand):
    name = "cumulative"
    description = "Cumulative P&L per closed trade in entry order."
    syntax = "cumulative"

    def report(self, ctx: CLIContext, args: List[str], source: ITradeSource) -> CommandResponse:
        points = series_math.compute_cumulative_series(_closed_in_entry_order(source))
        rows = [p.to_dict() for p in points]
        return CommandResponse(True, message=f"Cumulative P&L ({len(points)} trades)",
                               payload={"points": rows}, table=_table(rows))

class WinRateCommand(ReportCommand):
    name = "winrate"
    description = "Running win rate per closed trade in entry order."
    syntax = "winrate"

    def report(self, ctx: CLIContext, args: List[str], source: ITradeSource) -> CommandResponse:
        points = series_math.compute_cumulative_series(_closed_in_entry_order(source))
        rows = [p.to_dict() for p in series_math.compute_win_rate_series(points)]
        return CommandResponse(True, message=f"Running Win Rate ({len(rows)} trades)",
                               payload={"points": rows}, table=_table(rows))

class DistributionCommand(ReportCommand):
    name = "distribution"
    description = "Trade counts by market or trade type."
    syntax = "distribution <market|type>"

    def report(self, ctx: CLIContext, args: List[str], source: ITradeSource) -> CommandResponse:
        if not args or args[0].lower() not in DISTRIBUTION_ARGS:
            return CommandResponse(False, f"Usage: {registry.usage(self)}", error_code="INVALID_ARGS")

        field = DISTRIBUTION_ARGS[args[0].lower()]
        buckets = group_math.compute_distribution(source.fetch_trades(), field)
        rows = [b.to_dict() for b in buckets]
        return CommandResponse(True, message=f"Distribution by {field}",
                               payload={"field": field, "buckets": rows}, table=_table(rows))

class MonthlyCommand(ReportCommand):
    name = "monthly"
    description = "Monthly rollup of closed trades (by entry month)."
    syntax = "monthly"

    def report(self, ctx: CLIContext, args: List[str], source: ITradeSource) -> CommandResponse:
        rollups = group_math.compute_monthly_rollup(source.fetch_trades())
        rows = [m.to_dict() for m in rollups]
        return CommandResponse(True, message=f"Monthly Performance ({len(rows)} months)",
                               payload={"months": rows}, table=_table(rows))

class CalendarCommand(ReportCommand):
    name = "calendar"
    description = "Daily P&L calendar for one month."
    syntax = "calendar <YYYY-MM>"

    def report(self, ctx: CLIContext, args: List[str], source: ITradeSource) -> CommandResponse:
        try:
            year_str, month_str = args[0].split("-")
            year, month = int(year_str), int(month_str)
        except (IndexError, ValueError):
            return CommandResponse(False, f"Usage: {registry.usage(self)}", error_code="INVALID_ARGS")

        analyzer = CalendarAnalyzer(source)
        try:
            cal = analyzer.analyze(year, month)
        except ValueError as e:
            return CommandResponse(False, str(e), error_code="INVALID_ARGS")

        frame = analyzer.month_frame(year, month)
        table = frame.to_string() if not frame.empty else "(no trades)"
        msg = (f"Calendar {year:04d}-{month:02d}: {cal.total_trades} trades, "
               f"month {cal.monthly_profit_loss:+.2f}, year {cal.annual_profit_loss:+.2f}")
        return CommandResponse(True, message=msg, payload=cal.to_dict(), table=table)

class RiskCommand(ReportCommand):
    name = "risk"
    description = "Best-trade / worst-trade ratio. Uses the journal when no values are given."
    syntax = "risk [<best> <worst>]"

    def report(self, ctx: CLIContext, args: List[str], source: ITradeSource) -> CommandResponse:
        if not args:
            s = perf_math.compute_summary(source.fetch_trades())
            best, worst = s.best_trade, s.worst_trade
        elif len(args) == 2:
            try:
                best, worst = float(args[0]), float(args[1])
            except ValueError:
                return CommandResponse(False, f"Usage: {registry.usage(self)}", error_code="INVALID_ARGS")
        else:
            return CommandResponse(False, f"Usage: {registry.usage(self)}", error_code="INVALID_ARGS")

        ratio = perf_math.compute_risk_ratio(best, worst)
        display = perf_math.format_risk_ratio(ratio)
        return CommandResponse(True, message=f"Risk/Reward: {display}", payload={
            "best": best,
            "worst": worst,
            "ratio": ratio,
            "display": display
        })

class HelpCommand(ICommand):
    name = "help"
    description = "Lists available commands."
    syntax = "help"
    accepts_filters = False

    def execute(self, ctx: CLIContext, args: List[str]) -> CommandResponse:
        rows = [{
            "command": registry.usage(c),
            "aliases": ", ".join(registry.aliases_for(c.name)),
            "description": c.description
        } for c in registry.list_commands()]
        return CommandResponse(True, message="Available commands",
                               payload={"commands": rows, "filters": sorted(FILTER_KEYS)},
                               table=_table(rows))


# Register
registry.register(SummaryCommand(), aliases=["stats"])
registry.register(DashboardCommand())
registry.register(AnalyticsCommand())
registry.register(CumulativeCommand())
registry.register(WinRateCommand())
registry.register(DistributionCommand(), aliases=["dist"])
registry.register(MonthlyCommand())
registry.register(CalendarCommand(), aliases=["cal"])
registry.register(RiskCommand())
registry.register(HelpCommand(), aliases=["?"])
