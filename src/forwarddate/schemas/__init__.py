from __future__ import annotations

from forwarddate.schemas.telegram import (
    ExtractedFields,
    ReplyPayload,
    TelegramChat,
    TelegramMessage,
    TelegramMessageOrigin,
    TelegramUpdate,
)

__all__ = [
    # Inbound
    "TelegramUpdate",
    "TelegramMessage",
    "TelegramMessageOrigin",
    "TelegramChat",
    "ExtractedFields",
    # Outbound
    "ReplyPayload",
]
