from __future__ import annotations

from forwarddate.services.forward_date_service import ForwardDateService
from forwarddate.services.reply_builder import (
    DATE_NOT_FOUND_TEXT,
    MARKDOWN,
    build_reply,
)
from forwarddate.services.update_parser import parse_update

__all__ = [
    "ForwardDateService",
    "parse_update",
    "build_reply",
    "DATE_NOT_FOUND_TEXT",
    "MARKDOWN",
]
