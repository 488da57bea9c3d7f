# ============================================================================
# SCOPE: PUBLIC API
# Description: Pydantic schemas for LINE webhook payloads.
# ============================================================================
"""
LINE Webhook Schemas.

Only the parts of the LINE event payload the bot reads are modelled; the
rest is kept as extra fields.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class LineSource(BaseModel):
    model_config = ConfigDict(extra="allow", populate_by_name=True)

    type: str = "user"
    user_id: str | None = Field(default=None, alias="userId")


class LineMessage(BaseModel):
    model_config = ConfigDict(extra="allow")

    id: str | None = None
    type: str
    text: str | None = None


class LineEvent(BaseModel):
    model_config = ConfigDict(extra="allow", populate_by_name=True)

    type: str
    reply_token: str | None = Field(default=None, alias="replyToken")
    source: LineSource | None = None
    message: LineMessage | None = None

    @property
    def is_text_message(self) -> bool:
        return self.type == "message" and self.message is not None and self.message.type == "text"

    @property
    def user_id(self) -> str | None:
        return self.source.user_id if self.source else None


class LineWebhookPayload(BaseModel):
    model_config = ConfigDict(extra="allow")

    destination: str | None = None
    events: list[LineEvent] = Field(default_factory=list)
