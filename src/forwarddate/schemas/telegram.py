"""Tolerant Telegram update schemas and the outbound reply payload.

Incoming updates are never rejected: a field holding a value of the wrong
shape is read as absent so that one bad field cannot hide the others.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator


def _strict_int(value: Any) -> int | None:
    # bool is an int subclass but never a valid Telegram id
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    return None


def _object_or_none(value: Any) -> Any:
    if isinstance(value, (dict, BaseModel)):
        return value
    return None


class TelegramChat(BaseModel):
    model_config = ConfigDict(extra="ignore")

    id: int | None = None

    @field_validator("id", mode="before")
    @classmethod
    def coerce_id(cls, v):
        return _strict_int(v)


class TelegramMessageOrigin(BaseModel):
    """``forward_origin`` object introduced in Bot API 7.0."""

    model_config = ConfigDict(extra="ignore")

    type: str | None = None
    date: int | None = None

    @field_validator("type", mode="before")
    @classmethod
    def coerce_type(cls, v):
        return v if isinstance(v, str) else None

    @field_validator("date", mode="before")
    @classmethod
    def coerce_date(cls, v):
        return _strict_int(v)


class TelegramMessage(BaseModel):
    model_config = ConfigDict(extra="ignore")

    message_id: int | None = None
    chat: TelegramChat | None = None
    forward_date: int | None = None
    forward_origin: TelegramMessageOrigin | None = None

    @field_validator("message_id", "forward_date", mode="before")
    @classmethod
    def coerce_ints(cls, v):
        return _strict_int(v)

    @field_validator("chat", "forward_origin", mode="before")
    @classmethod
    def coerce_objects(cls, v):
        return _object_or_none(v)

    @property
    def chat_id(self) -> int | None:
        if self.chat is None:
            return None
        return self.chat.id

    @property
    def forward_timestamp(self) -> int | None:
        """Original send time of a forwarded message, if this is a forward."""
        if self.forward_origin is not None and self.forward_origin.date is not None:
            return self.forward_origin.date
        return self.forward_date


class TelegramUpdate(BaseModel):
    model_config = ConfigDict(extra="ignore")

    update_id: int | None = None
    message: TelegramMessage | None = None
    edited_message: TelegramMessage | None = None

    @field_validator("update_id", mode="before")
    @classmethod
    def coerce_update_id(cls, v):
        return _strict_int(v)

    @field_validator("message", "edited_message", mode="before")
    @classmethod
    def coerce_messages(cls, v):
        return _object_or_none(v)

    @property
    def current_message(self) -> TelegramMessage | None:
        """The new message, falling back to an edited one."""
        if self.message is not None:
            return self.message
        return self.edited_message


@dataclass(frozen=True)
class ExtractedFields:
    """Fields read from one update; any of them may be absent."""

    chat_id: int | None = None
    message_id: int | None = None
    forward_timestamp: int | None = None


class ReplyPayload(BaseModel):
    """Body of a Bot API ``sendMessage`` call."""

    model_config = ConfigDict(frozen=True)

    chat_id: int
    text: str
    parse_mode: str | None = None
    reply_to_message_id: int | None = None

    def to_request(self) -> dict[str, Any]:
        """Serialize for the Bot API, omitting unset optional fields."""
        return self.model_dump(exclude_none=True)
