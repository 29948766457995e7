"""Console REPL."""

from .commands import Command, CommandError, CommandHandler
from .console import ConsoleREPL, clean_input, run_console
from .history import InputHistory

__all__ = [
    "Command",
    "CommandError",
    "CommandHandler",
    "ConsoleREPL",
    "InputHistory",
    "clean_input",
    "run_console",
]
