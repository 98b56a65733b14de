"""
py_cli/models.py
Strict Data Structures (DTOs/Enums) for the CLI context.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Any, Optional

from py_journal.source import ITradeSource, InMemoryTradeSource

class CLIMode(Enum):
    HUMAN = "HUMAN"
    BOT = "BOT"

@dataclass
class CLIContext:
    mode: CLIMode
    source: ITradeSource
    recent_trades_limit: int = 5

    @staticmethod
    def empty(mode: CLIMode) -> 'CLIContext':
        return CLIContext(mode=mode, source=InMemoryTradeSource())

@dataclass
class CommandResponse:
    success: bool
    message: str          # To be displayed to Human (Formatted Text)
    payload: Optional[Dict[str, Any]] = None # To be serialized for Bot (JSON)
    error_code: str = "OK" # Standardized Error Code for Bots
    table: Optional[str] = None # Pre-rendered text table (Human mode only)
