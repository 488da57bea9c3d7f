from .command_parser import (
    AddCommand,
    Command,
    CommandParseError,
    DeleteCommand,
    HelpCommand,
    ListCommand,
    UnknownCommand,
    UpdateCommand,
    parse_command,
)

__all__ = [
    "AddCommand",
    "Command",
    "CommandParseError",
    "DeleteCommand",
    "HelpCommand",
    "ListCommand",
    "UnknownCommand",
    "UpdateCommand",
    "parse_command",
]
