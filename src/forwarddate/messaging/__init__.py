from __future__ import annotations

from forwarddate.messaging.base import MessageSender
from forwarddate.messaging.telegram import TelegramBotClient

__all__ = [
    "MessageSender",
    "TelegramBotClient",
]
