import pandas as pd

from py_journal.source import ITradeSource
from py_journal_math.grouping import compute_calendar_month
from py_journal_math.models import CalendarMonth
from .frames import daily_frame

class CalendarAnalyzer:
    """ Calendar page: one month of trades, bucketed by entry date. """

    def __init__(self, source: ITradeSource):
        self.source = source

    def analyze(self, year: int, month: int) -> CalendarMonth:
        return compute_calendar_month(self.source.fetch_trades(), year, month)

    def month_frame(self, year: int, month: int) -> pd.DataFrame:
        """ Day table for the month (only days with trades). """
        if not 1 <= month <= 12:
            raise ValueError(f"Invalid month: {month}")

        in_month = [t for t in self.source.fetch_trades()
                    if t.entry_time.year == year and t.entry_time.month == month]
        return daily_frame(in_month)
