from dataclasses import dataclass, field, asdict
from datetime import datetime, date
from typing import List, Dict, Any

@dataclass
class PerformanceSummary:
    total_trades: int
    closed_trades: int
    open_trades: int
    winning_trades: int
    losing_trades: int
    win_rate_percentage: float # full precision
    total_profit_loss: float
    average_profit_loss: float
    best_trade: float
    worst_trade: float

    @property
    def win_rate_display(self) -> float:
        return round(self.win_rate_percentage, 1)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

@dataclass
class CumulativePoint:
    sequence_index: int # 1-based
    point_in_time: datetime
    period_profit_loss: float
    cumulative_profit_loss: float

    def to_dict(self) -> Dict[str, Any]:
        return {
            "sequence_index": self.sequence_index,
            "point_in_time": self.point_in_time.isoformat(),
            "period_profit_loss": self.period_profit_loss,
            "cumulative_profit_loss": self.cumulative_profit_loss
        }

@dataclass
class WinRatePoint:
    sequence_index: int
    win_rate: float

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

@dataclass
class DailyPoint:
    date: date
    profit_loss: float
    cumulative_profit_loss: float
    trade_count: int

    def to_dict(self) -> Dict[str, Any]:
        return {
            "date": self.date.isoformat(),
            "profit_loss": self.profit_loss,
            "cumulative_profit_loss": self.cumulative_profit_loss,
            "trade_count": self.trade_count
        }

@dataclass
class MonthlyRollup:
    month_key: str # YYYY-MM
    trade_count: int
    winning_trade_count: int
    win_rate: float
    monthly_profit_loss: float

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

@dataclass
class DistributionBucket:
    category: str
    count: int

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

@dataclass
class CalendarDay:
    date: date
    profit_loss: float = 0.0
    trade_count: int = 0
    trade_ids: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "date": self.date.isoformat(),
            "profit_loss": self.profit_loss,
            "trade_count": self.trade_count,
            "trade_ids": list(self.trade_ids)
        }

@dataclass
class CalendarMonth:
    year: int
    month: int
    days: Dict[str, CalendarDay] # keyed by ISO date
    monthly_profit_loss: float
    annual_profit_loss: float
    total_trades: int

    def to_dict(self) -> Dict[str, Any]:
        return {
            "year": self.year,
            "month": self.month,
            "days": {k: d.to_dict() for k, d in self.days.items()},
            "monthly_profit_loss": self.monthly_profit_loss,
            "annual_profit_loss": self.annual_profit_loss,
            "total_trades": self.total_trades
        }
