"""
main_cli.py
Entry point for the Trade Journal reports.
Modes:
 - Interactive (Human): Standard Shell
 - Bot (JSON): Single command via args, output via stdout (JSON)
"""
import sys
import argparse
from py_cli.models import CLIMode
from py_cli.controller import CLIController
from py_journal.config import JournalConfig, load_config, DEFAULT_CONFIG_PATH
from py_journal.source import JsonTradeSource
from py_journal.logger import get_logger, log_event
# Import handlers to trigger registration
import py_cli.handlers_report

def main():
    parser = argparse.ArgumentParser(description="Trade Journal Reports CLI")
    parser.add_argument("--mode", choices=["human", "bot"], default="human", help="Operating Mode")
    parser.add_argument("--config", default=DEFAULT_CONFIG_PATH, help="Path to journal_config.json")
    parser.add_argument("--trades", default=None, help="Trade JSON file (overrides config)")
    parser.add_argument("command", nargs=argparse.REMAINDER, help="Command to execute")

    args = parser.parse_args()

    # 1. Setup Context
    config = load_config(args.config) or JournalConfig()
    if args.trades:
        config.trades_path = args.trades
    if not config.validate():
        print(f"Invalid journal config: {config.to_dict()}", file=sys.stderr)
        sys.exit(2)

    get_logger(log_dir=config.log_dir, level=config.log_level)

    mode = CLIMode.BOT if args.mode == "bot" else CLIMode.HUMAN
    controller = CLIController(mode=mode, source=JsonTradeSource(config.trades_path))
    controller.context.recent_trades_limit = config.recent_trades_limit

    # 2. Execution
    # If arguments are provided, execute single command and exit
    if args.command:
        input_str = " ".join(args.command)
        log_event("CLI", input_str)
        print(controller.process_input(input_str))
        return

    # 3. Interactive Loop (Only for Human Mode)
    if mode == CLIMode.HUMAN:
        print(f"Trade Journal (trades: {config.trades_path})")
        print("Type 'help' for commands, 'exit' or 'quit' to stop.")
        while True:
            try:
                user_input = input(">> ")
                if user_input.lower() in ["exit", "quit"]:
                    break

                log_event("USER", user_input)
                print(controller.process_input(user_input))
            except (KeyboardInterrupt, EOFError):
                print("\nExiting...")
                break
    else:
        print('{"success": false, "message": "No command provided", "error_code": "NO_INPUT"}')
        sys.exit(1)

if __name__ == "__main__":
    main()
