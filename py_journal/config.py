"""
py_journal/config.py
Loads journal settings from config/journal_config.json.
"""
import os
import json
from dataclasses import dataclass, asdict
from typing import Optional, Dict, Any

DEFAULT_CONFIG_PATH = "config/journal_config.json"


@dataclass
class JournalConfig:
    trades_path: str = "data/trades.json"
    log_dir: str = "logs"
    log_level: str = "INFO"
    recent_trades_limit: int = 5

    def validate(self) -> bool:
        """Returns True if paths are set and the recent-trades limit is usable."""
        return bool(self.trades_path) and bool(self.log_dir) and self.recent_trades_limit > 0

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def load_config(config_path: str = DEFAULT_CONFIG_PATH) -> Optional[JournalConfig]:
    """
    Loads journal configuration from JSON file.
    Returns None if the file does not exist or is invalid.
    """
    if not os.path.exists(config_path):
        return None

    defaults = JournalConfig()
    try:
        with open(config_path, "r") as f:
            data = json.load(f)

        return JournalConfig(
            trades_path=data.get("trades_path", defaults.trades_path),
            log_dir=data.get("log_dir", defaults.log_dir),
            log_level=data.get("log_level", defaults.log_level),
            recent_trades_limit=int(data.get("recent_trades_limit", defaults.recent_trades_limit)),
        )
    except (json.JSONDecodeError, AttributeError, TypeError, ValueError) as e:
        print(f"[Journal] Config Error: {e}")
        return None
