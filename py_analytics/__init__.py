from .models import DashboardReport, AnalyticsReport
from .calendar_view import CalendarAnalyzer
from .dashboard import DashboardAnalyzer
from .performance import TradeAnalyticsAnalyzer
from .frames import trades_frame, daily_frame
