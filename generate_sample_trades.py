"""
generate_sample_trades.py
Writes a random demo journal (JSON) that JsonTradeSource and main_cli.py can read.
"""
import os
import json
import random
import uuid
import argparse
from datetime import datetime, timedelta
from typing import List, Dict, Any

from py_journal.objects import Trade, TradeStatus
from py_journal_math.core import calculate_pnl, calculate_pnl_percentage

# --- CONFIG ---
SYMBOLS = {
    "stocks": ['AAPL', 'NVDA', 'TSLA', 'AMD', 'MSFT', 'META', 'GOOGL'],
    "crypto": ['BTCUSD', 'ETHUSD', 'SOLUSD'],
    "forex": ['EURUSD', 'GBPUSD', 'USDJPY'],
    "indices": ['SPX', 'NDX'],
}
SIDES = ["long", "short", "buy", "sell"]
START_DATE = datetime(2024, 1, 1)
MIN_TRADE_DURATION = 0  # Days
MAX_TRADE_DURATION = 10 # Days

def random_trade(entry_time: datetime, now: datetime) -> Trade:
    market = random.choice(list(SYMBOLS))
    side = random.choice(SIDES)
    entry_price = round(random.uniform(10, 1000), 2)
    qty = max(1, int(10000 / entry_price)) # Roughly $10k position

    exit_time = entry_time + timedelta(days=random.randint(MIN_TRADE_DURATION, MAX_TRADE_DURATION),
                                       hours=random.randint(1, 6))
    roll = random.random()
    if exit_time > now or roll < 0.1:
        status = TradeStatus.OPEN.value
    elif roll < 0.15:
        status = TradeStatus.CANCELLED.value
    else:
        status = TradeStatus.CLOSED.value

    trade = Trade(
        id=str(uuid.uuid4()),
        symbol=random.choice(SYMBOLS[market]),
        trade_type=side,
        market_type=market,
        entry_price=entry_price,
        quantity=qty,
        entry_time=entry_time,
        status=status,
    )

    if status == TradeStatus.CLOSED.value:
        exit_price = round(entry_price * random.uniform(0.93, 1.08), 2)
        trade.exit_price = exit_price
        trade.exit_time = exit_time
        trade.profit_loss = round(calculate_pnl(entry_price, exit_price, qty, side), 2)
        trade.profit_loss_percentage = round(calculate_pnl_percentage(entry_price, exit_price, side), 2)

    return trade

def create_journal(count: int, seed: int = None) -> List[Dict[str, Any]]:
    if seed is not None:
        random.seed(seed)

    now = datetime.now()
    span = int((now - START_DATE).total_seconds())
    trades = []
    for _ in range(count):
        entry_time = START_DATE + timedelta(seconds=random.randrange(span))
        trades.append(random_trade(entry_time, now))

    trades.sort(key=lambda t: t.entry_time)
    return [t.to_dict() for t in trades]

def main():
    parser = argparse.ArgumentParser(description="Generate a demo trade journal")
    parser.add_argument("--count", type=int, default=50, help="Number of trades")
    parser.add_argument("--out", default="data/trades.json", help="Output JSON file")
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    args = parser.parse_args()

    rows = create_journal(args.count, args.seed)
    os.makedirs(os.path.dirname(args.out) or ".", exist_ok=True)
    with open(args.out, "w", encoding="utf-8") as f:
        json.dump({"trades": rows}, f, indent=2)

    print(f"Wrote {len(rows)} trades to {args.out}")

if __name__ == "__main__":
    main()
