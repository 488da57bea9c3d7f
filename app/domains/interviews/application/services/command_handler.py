# ============================================================================
# SCOPE: APPLICATION LAYER (Interviews)
# Description: Maps parsed LINE commands onto interview use cases.
# ============================================================================
"""Interview Command Handler.

Turns one text message from an authorized user into a reply text.
Validation problems become friendly replies; anything else propagates to
the webhook, which answers with a generic error.
"""

import logging
from typing import TYPE_CHECKING

from app.core.domain.exceptions import EntityNotFoundException, ValidationException

from ...domain.value_objects.interview_field import InterviewField
from ..dto.interview_dtos import CreateInterviewRequest, DeleteInterviewRequest, UpdateInterviewRequest
from ..utils.command_parser import (
    AddCommand,
    CommandParseError,
    DeleteCommand,
    HelpCommand,
    ListCommand,
    UpdateCommand,
    parse_command,
)

if TYPE_CHECKING:
    from ...domain.entities.interview import Interview
    from ..use_cases import (
        CreateInterviewUseCase,
        DeleteInterviewUseCase,
        ListInterviewsUseCase,
        UpdateInterviewUseCase,
    )

logger = logging.getLogger(__name__)

HELP_MESSAGE = """🤖 Interview Reminder Bot - Help

📝 Add interview:
add YYYY-MM-DD HH:MM description
Example: add 2024-01-15 14:30 Interview with Google

📋 List upcoming interviews:
list

🗑️ Delete interview:
delete <id>
Example: delete 123

✏️ Update interview:
update <id> YYYY-MM-DD HH:MM description
Example: update 123 2024-01-16 15:00 Second round with Google

❓ Help:
help

Date format: YYYY-MM-DD
Time format: HH:MM (24-hour)
Reminders are sent 24 hours and 3 hours before each interview."""

UNKNOWN_COMMAND_MESSAGE = "❓ Unknown command. Type `help` to see available commands."
UNAUTHORIZED_MESSAGE = "❌ Sorry, you are not authorized to use this bot."
GENERIC_ERROR_MESSAGE = "❌ An error occurred while processing your command. Please try again."


def format_interview_details(interview: "Interview") -> str:
    return (
        f"🆔 ID: {interview.id}\n"
        f"📅 Date: {interview.formatted_date}\n"
        f"⏰ Time: {interview.formatted_time}\n"
        f"📝 {interview.description}"
    )


class InterviewCommandHandler:
    """Dispatch parsed commands to the interview use cases."""

    def __init__(
        self,
        create_interview: "CreateInterviewUseCase",
        list_interviews: "ListInterviewsUseCase",
        delete_interview: "DeleteInterviewUseCase",
        update_interview: "UpdateInterviewUseCase",
    ):
        self._create = create_interview
        self._list = list_interviews
        self._delete = delete_interview
        self._update = update_interview

    async def handle(self, user_id: str, text: str) -> str:
        """Process one command and return the reply text."""
        try:
            command = parse_command(text)

            if isinstance(command, HelpCommand):
                return HELP_MESSAGE
            if isinstance(command, ListCommand):
                return await self._handle_list(user_id)
            if isinstance(command, AddCommand):
                return await self._handle_add(user_id, command)
            if isinstance(command, DeleteCommand):
                return await self._handle_delete(user_id, command)
            if isinstance(command, UpdateCommand):
                return await self._handle_update(user_id, command)

            logger.info(f"Unknown command from {user_id}")
            return UNKNOWN_COMMAND_MESSAGE

        except CommandParseError as e:
            reply = f"❌ {e.message}"
            if e.usage:
                reply += f"\nUsage: {e.usage}"
            return reply
        except EntityNotFoundException as e:
            return f"❌ Interview {e.entity_id} not found or you don't have permission to change it."
        except ValidationException as e:
            return f"❌ {e.message}"

    async def _handle_add(self, user_id: str, command: AddCommand) -> str:
        interview = await self._create.execute(
            CreateInterviewRequest(
                user_id=user_id,
                interview_date=command.interview_date,
                interview_time=command.interview_time,
                description=command.description,
            )
        )
        return f"✅ Interview scheduled!\n\n{format_interview_details(interview)}"

    async def _handle_list(self, user_id: str) -> str:
        interviews = await self._list.execute(user_id)
        if not interviews:
            return "📋 No upcoming interviews."

        lines = ["📋 Your upcoming interviews:", ""]
        for index, interview in enumerate(interviews, start=1):
            lines.append(f"{index}. {format_interview_details(interview)}")
            lines.append("")
        return "\n".join(lines).rstrip()

    async def _handle_delete(self, user_id: str, command: DeleteCommand) -> str:
        await self._delete.execute(DeleteInterviewRequest(interview_id=command.interview_id, user_id=user_id))
        return f"✅ Interview {command.interview_id} has been deleted."

    async def _handle_update(self, user_id: str, command: UpdateCommand) -> str:
        interview = await self._update.execute(
            UpdateInterviewRequest(
                interview_id=command.interview_id,
                user_id=user_id,
                changes={
                    InterviewField.DATE: command.interview_date,
                    InterviewField.TIME: command.interview_time,
                    InterviewField.DESCRIPTION: command.description,
                },
            )
        )
        return f"✅ Interview updated!\n\n{format_interview_details(interview)}"
