# Expose key functions for cleaner imports
from .models import (PerformanceSummary, CumulativePoint, WinRatePoint, DailyPoint,
                     MonthlyRollup, DistributionBucket, CalendarDay, CalendarMonth)
from .core import calculate_pnl, calculate_pnl_percentage, pnl_or_zero, is_closed, is_win, is_loss
from .performance import compute_summary, compute_risk_ratio, format_risk_ratio, RISK_RATIO_UNDEFINED
from .series import compute_cumulative_series, compute_win_rate_series, compute_daily_series
from .grouping import compute_distribution, compute_monthly_rollup, compute_calendar_month, UNKNOWN_CATEGORY
from .filters import filter_trades
