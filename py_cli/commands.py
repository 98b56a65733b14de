"""
py_cli/commands.py
Command Registry and Interface Definition.
Report commands declare whether they take trade filters (key=value args);
the registry builds their usage line and help rows from that.
"""
from typing import Protocol, List, Dict, Optional
from .models import CLIContext, CommandResponse

# key=value arguments understood by filterable report commands
FILTER_KEYS = {
    "from": "date_from",
    "to": "date_to",
    "market": "market_type",
    "type": "trade_type",
    "status": "status",
}
FILTER_USAGE = "[from=YYYY-MM-DD] [to=YYYY-MM-DD] [market=M] [type=T] [status=S]"

class ICommand(Protocol):
    """ Interface that all CLI commands must implement. """
    name: str
    description: str
    syntax: str
    accepts_filters: bool

    def execute(self, ctx: CLIContext, args: List[str]) -> CommandResponse:
        """
        Executes the command logic.
        Returns structured CommandResponse.
        """
        ...

class CommandRegistry:
    """ Central registry for the journal report commands. """
    def __init__(self):
        self._commands: Dict[str, ICommand] = {}
        self._aliases: Dict[str, str] = {}

    def register(self, command: ICommand, aliases: Optional[List[str]] = None):
        """
        Registers a command instance with optional aliases.
        Re-registering a name replaces it; an alias may not shadow another command.
        """
        aliases = aliases or []
        for alias in aliases:
            if alias in self._commands or alias == command.name:
                raise ValueError(f"Alias '{alias}' collides with command '{alias}'")
            owner = self._aliases.get(alias)
            if owner is not None and owner != command.name:
                raise ValueError(f"Alias '{alias}' already taken by '{owner}'")

        self._commands[command.name] = command
        for alias in aliases:
            self._aliases[alias] = command.name

    def get_command(self, name: str) -> Optional[ICommand]:
        """ Resolves command by name or alias (case-insensitive). """
        key = name.lower()
        if key in self._commands:
            return self._commands[key]

        if key in self._aliases:
            return self._commands.get(self._aliases[key])

        return None

    def aliases_for(self, name: str) -> List[str]:
        return sorted(a for a, target in self._aliases.items() if target == name)

    def usage(self, command: ICommand) -> str:
        """ Syntax line, extended with the filter arguments where supported. """
        if getattr(command, "accepts_filters", False):
            return f"{command.syntax} {FILTER_USAGE}"
        return command.syntax

    def list_commands(self) -> List[ICommand]:
        """ Returns list of all registered commands (sorted by name). """
        return sorted(self._commands.values(), key=lambda c: c.name)

# Global Instance for convenience
registry = CommandRegistry()
