"""
Unit tests for the LINE command parser.
"""

from datetime import date, time

import pytest

from app.domains.interviews.application.utils.command_parser import (
    AddCommand,
    CommandParseError,
    DeleteCommand,
    HelpCommand,
    ListCommand,
    UnknownCommand,
    UpdateCommand,
    parse_command,
    parse_date,
    parse_time,
)


@pytest.mark.unit
class TestParseCommand:
    def test_add(self):
        command = parse_command("add 2024-01-15 14:30 Interview with Google")

        assert command == AddCommand(date(2024, 1, 15), time(14, 30), "Interview with Google")

    def test_leading_slash_and_case(self):
        assert isinstance(parse_command("/LIST"), ListCommand)
        assert isinstance(parse_command("Help"), HelpCommand)

    def test_delete(self):
        assert parse_command("delete 123") == DeleteCommand(123)

    def test_update(self):
        command = parse_command("/update 5 2024-01-16 09:00 Second round")

        assert command == UpdateCommand(5, date(2024, 1, 16), time(9, 0), "Second round")

    def test_unknown(self):
        assert parse_command("hello there") == UnknownCommand("hello there")

    def test_empty(self):
        assert isinstance(parse_command("   "), UnknownCommand)

    def test_add_missing_description(self):
        with pytest.raises(CommandParseError) as exc_info:
            parse_command("add 2024-01-15 14:30")

        assert exc_info.value.usage is not None
        assert exc_info.value.usage.startswith("add")

    def test_add_bad_time_keeps_usage(self):
        with pytest.raises(CommandParseError) as exc_info:
            parse_command("add 2024-01-15 25:00 Google")

        assert "Invalid time" in exc_info.value.message
        assert exc_info.value.usage is not None

    @pytest.mark.parametrize("text", ["delete", "delete 1 2", "delete abc", "delete \u00b2", "delete \u0663"])
    def test_delete_needs_one_numeric_id(self, text):
        with pytest.raises(CommandParseError):
            parse_command(text)

    @pytest.mark.parametrize("text", ["update", "update x 2024-01-16 09:00 a", "update 5 2024-01-16"])
    def test_update_errors(self, text):
        with pytest.raises(CommandParseError):
            parse_command(text)


@pytest.mark.unit
class TestParseDateTime:
    def test_valid_date(self):
        assert parse_date("2024-02-29") == date(2024, 2, 29)

    @pytest.mark.parametrize("value", ["2024-13-01", "2023-02-29", "15/01/2024", "2024-1-5"])
    def test_invalid_date(self, value):
        with pytest.raises(CommandParseError):
            parse_date(value)

    @pytest.mark.parametrize("value,expected", [("9:05", time(9, 5)), ("00:00", time(0, 0)), ("23:59", time(23, 59))])
    def test_valid_time(self, value, expected):
        assert parse_time(value) == expected

    @pytest.mark.parametrize("value", ["24:00", "12:60", "1230", "noon"])
    def test_invalid_time(self, value):
        with pytest.raises(CommandParseError):
            parse_time(value)
