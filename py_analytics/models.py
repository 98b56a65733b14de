from dataclasses import dataclass, field
from typing import List, Optional, Dict, Any

from py_journal.objects import Trade
from py_journal_math.models import (PerformanceSummary, CumulativePoint, WinRatePoint,
                                    DailyPoint, MonthlyRollup, DistributionBucket)
from py_journal_math.performance import format_risk_ratio

@dataclass
class DashboardReport:
    summary: PerformanceSummary
    daily_series: List[DailyPoint] = field(default_factory=list)
    recent_trades: List[Trade] = field(default_factory=list)
    risk_ratio: Optional[float] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "summary": self.summary.to_dict(),
            "win_rate_display": self.summary.win_rate_display,
            "daily_series": [p.to_dict() for p in self.daily_series],
            "recent_trades": [t.to_dict() for t in self.recent_trades],
            "risk_ratio": self.risk_ratio,
            "risk_ratio_display": format_risk_ratio(self.risk_ratio)
        }

@dataclass
class AnalyticsReport:
    summary: PerformanceSummary
    cumulative: List[CumulativePoint] = field(default_factory=list)
    win_rate: List[WinRatePoint] = field(default_factory=list)
    market_distribution: List[DistributionBucket] = field(default_factory=list)
    trade_type_distribution: List[DistributionBucket] = field(default_factory=list)
    monthly: List[MonthlyRollup] = field(default_factory=list)
    risk_ratio: Optional[float] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "summary": self.summary.to_dict(),
            "win_rate_display": self.summary.win_rate_display,
            "cumulative": [p.to_dict() for p in self.cumulative],
            "win_rate": [p.to_dict() for p in self.win_rate],
            "market_distribution": [b.to_dict() for b in self.market_distribution],
            "trade_type_distribution": [b.to_dict() for b in self.trade_type_distribution],
            "monthly": [m.to_dict() for m in self.monthly],
            "risk_ratio": self.risk_ratio,
            "risk_ratio_display": format_risk_ratio(self.risk_ratio)
        }
