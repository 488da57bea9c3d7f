"""Command Parser.

Parses LINE text messages into interview commands:

    add <YYYY-MM-DD> <HH:MM> <description>
    list
    delete <id>
    update <id> <YYYY-MM-DD> <HH:MM> <description>
    help

A leading "/" is optional. Only formats are checked here; whether the
interview lies in the future is decided by the use cases.
"""

import re
from dataclasses import dataclass
from datetime import date, datetime, time

from app.core.domain.exceptions import ValidationException

TIME_PATTERN = re.compile(r"^([01]?\d|2[0-3]):([0-5]\d)$")
DATE_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}$")

ADD_USAGE = "add YYYY-MM-DD HH:MM description\nExample: add 2024-01-15 14:30 Interview with Google"
DELETE_USAGE = "delete <id>\nExample: delete 123"
UPDATE_USAGE = (
    "update <id> YYYY-MM-DD HH:MM description\nExample: update 123 2024-01-16 15:00 Second round with Google"
)


class CommandParseError(ValidationException):
    """Raised for a recognised command with malformed arguments."""

    def __init__(self, message: str, usage: str | None = None):
        super().__init__(message, details={"usage": usage} if usage else None)
        self.usage = usage


@dataclass(frozen=True)
class AddCommand:
    interview_date: date
    interview_time: time
    description: str


@dataclass(frozen=True)
class ListCommand:
    pass


@dataclass(frozen=True)
class DeleteCommand:
    interview_id: int


@dataclass(frozen=True)
class UpdateCommand:
    interview_id: int
    interview_date: date
    interview_time: time
    description: str


@dataclass(frozen=True)
class HelpCommand:
    pass


@dataclass(frozen=True)
class UnknownCommand:
    text: str


Command = AddCommand | ListCommand | DeleteCommand | UpdateCommand | HelpCommand | UnknownCommand


def parse_date(value: str) -> date:
    """Parse a YYYY-MM-DD calendar date."""
    if not DATE_PATTERN.match(value):
        raise CommandParseError(f"Invalid date '{value}', expected YYYY-MM-DD")
    try:
        return datetime.strptime(value, "%Y-%m-%d").date()
    except ValueError as e:
        raise CommandParseError(f"Invalid date '{value}'") from e


def parse_time(value: str) -> time:
    """Parse a 24-hour HH:MM time."""
    match = TIME_PATTERN.match(value)
    if not match:
        raise CommandParseError(f"Invalid time '{value}', expected HH:MM (24-hour)")
    return time(int(match.group(1)), int(match.group(2)))


def parse_interview_id(value: str, usage: str) -> int:
    if not (value.isascii() and value.isdigit()):
        raise CommandParseError(f"Invalid interview ID '{value}'", usage)
    return int(value)


def _parse_schedule(args: list[str], usage: str) -> tuple[date, time, str]:
    if len(args) < 3:
        raise CommandParseError("Missing arguments", usage)
    try:
        interview_date = parse_date(args[0])
        interview_time = parse_time(args[1])
    except CommandParseError as e:
        raise CommandParseError(e.message, usage) from e
    return interview_date, interview_time, " ".join(args[2:])


def parse_command(text: str) -> Command:
    """Parse a message into a command.

    Raises:
        CommandParseError: When a known command has malformed arguments.
    """
    stripped = (text or "").strip()
    parts = stripped.split()
    if not parts:
        return UnknownCommand(stripped)

    keyword = parts[0].lstrip("/").lower()
    args = parts[1:]

    if keyword == "help":
        return HelpCommand()

    if keyword == "list":
        return ListCommand()

    if keyword == "add":
        interview_date, interview_time, description = _parse_schedule(args, ADD_USAGE)
        return AddCommand(interview_date, interview_time, description)

    if keyword == "delete":
        if len(args) != 1:
            raise CommandParseError("Expected exactly one interview ID", DELETE_USAGE)
        return DeleteCommand(parse_interview_id(args[0], DELETE_USAGE))

    if keyword == "update":
        if not args:
            raise CommandParseError("Missing arguments", UPDATE_USAGE)
        interview_id = parse_interview_id(args[0], UPDATE_USAGE)
        interview_date, interview_time, description = _parse_schedule(args[1:], UPDATE_USAGE)
        return UpdateCommand(interview_id, interview_date, interview_time, description)

    return UnknownCommand(stripped)
