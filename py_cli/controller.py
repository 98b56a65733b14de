"""
py_cli/controller.py
Handles the Input -> Parse -> Execute -> Render loop.
"""
import json
import logging
from typing import Optional
from .models import CLIContext, CLIMode, CommandResponse
from .commands import CommandRegistry, registry as global_registry
from py_journal.source import ITradeSource, TradeSourceError

logger = logging.getLogger("journal.cli")

class CLIController:
    def __init__(self, mode: CLIMode, source: Optional[ITradeSource] = None,
                 registry: CommandRegistry = global_registry):
        self.context = CLIContext.empty(mode) if source is None else CLIContext(mode=mode, source=source)
        self.registry = registry

    def process_input(self, input_str: str) -> str:
        """
        Main Loop Entry.
        Returns FINAL output string (Formatted Text or JSON) ready for stdout.
        """
        if not input_str.strip():
            return ""

        parts = input_str.strip().split()
        cmd_name = parts[0].lower()
        args = parts[1:]

        command = self.registry.get_command(cmd_name)
        if not command:
            return self._render_error(f"Unknown command: {cmd_name}", "UNKNOWN_COMMAND")

        try:
            response = command.execute(self.context, args)
        except TradeSourceError as e:
            logger.error(f"Trade source failed during '{cmd_name}': {e}")
            return self._render_error(str(e), "SOURCE_ERROR")
        except Exception as e:
            # Catch-all so one failing command does not kill the shell
            logger.exception(f"Command '{cmd_name}' crashed")
            return self._render_error(f"Internal Error: {e}", "INTERNAL_ERROR")

        return self._render_response(response)

    def _render_response(self, response: CommandResponse) -> str:
        """ Renders the response based on the current mode. """

        if self.context.mode == CLIMode.BOT:
            output = {
                "success": response.success,
                "payload": response.payload,
                "message": response.message,
                "error_code": response.error_code
            }
            return json.dumps(output, default=str)

        if not response.success:
            return f"Error: {response.message} ({response.error_code})"

        out = []
        if response.message:
            out.append(response.message)

        if response.table is not None:
            out.append(response.table)
        elif response.payload:
            out.append(json.dumps(response.payload, indent=2, default=str))

        return "\n".join(out)

    def _render_error(self, message: str, code: str) -> str:
        """ Renders a generic error. """
        return self._render_response(CommandResponse(
            success=False,
            message=message,
            error_code=code
        ))
