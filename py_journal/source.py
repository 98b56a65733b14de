"""
py_journal/source.py
Trade data sources. The metrics engine never talks to storage directly;
analyzers receive an ITradeSource and call fetch_trades().
"""
import os
import json
import logging
from abc import ABC, abstractmethod
from typing import List, Iterable, Dict, Any

from .objects import Trade

logger = logging.getLogger("journal.source")


class TradeSourceError(Exception):
    """Raised when a trade source cannot be read at all."""


class ITradeSource(ABC):
    """Responsible for DATA (the user's trade records)."""

    @abstractmethod
    def fetch_trades(self) -> List[Trade]:
        """Returns a fresh snapshot of all trades. Order is not guaranteed."""
        pass


class InMemoryTradeSource(ITradeSource):
    """Fixed trade list. Used by tests and demo runs."""

    def __init__(self, trades: Iterable[Trade] = ()):
        self._trades = list(trades)

    def fetch_trades(self) -> List[Trade]:
        return list(self._trades)


class JsonTradeSource(ITradeSource):
    """
    Reads trades from a JSON file holding either a list of rows
    or an object with a "trades" list.
    """

    def __init__(self, path: str):
        self.path = path

    def fetch_trades(self) -> List[Trade]:
        if not os.path.exists(self.path):
            logger.info(f"Trade file {self.path} not found, returning empty journal")
            return []

        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise TradeSourceError(f"Cannot read trades from {self.path}: {e}") from e

        rows = data.get("trades", []) if isinstance(data, dict) else data
        if not isinstance(rows, list):
            raise TradeSourceError(f"Unexpected trade file layout in {self.path}")

        return self._parse_rows(rows)

    def _parse_rows(self, rows: List[Dict[str, Any]]) -> List[Trade]:
        trades: List[Trade] = []
        for i, row in enumerate(rows):
            try:
                trades.append(Trade.from_dict(row))
            except (KeyError, TypeError, ValueError, AttributeError) as e:
                # One bad row must not hide the rest of the journal
                logger.warning(f"Skipping malformed trade row #{i} in {self.path}: {e}")
        return trades
