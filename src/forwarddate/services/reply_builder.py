"""Decide what to reply to a forwarded message."""
from __future__ import annotations

from typing import Callable

import structlog

from forwarddate.schemas.telegram import ExtractedFields, ReplyPayload
from forwarddate.utils.dates import format_timestamp

logger = structlog.get_logger(__name__)

MARKDOWN = "Markdown"
DATE_NOT_FOUND_TEXT = "Could not find the date of the forwarded message"

Formatter = Callable[[int], str | None]


def build_reply(
    fields: ExtractedFields,
    formatter: Formatter = format_timestamp,
) -> ReplyPayload | None:
    """
    Build the ``sendMessage`` payload for an update.

    Args:
        fields: Fields extracted from the update
        formatter: Turns a timestamp into display text, None if it cannot

    Returns:
        ReplyPayload, or None when nothing should be sent
    """
    if fields.chat_id is None:
        return None

    if fields.forward_timestamp is None:
        return ReplyPayload(
            chat_id=fields.chat_id,
            text=DATE_NOT_FOUND_TEXT,
            reply_to_message_id=fields.message_id,
        )

    date_text = formatter(fields.forward_timestamp)
    if date_text is None:
        # No fallback reply here: an unrepresentable date is skipped like a
        # missing chat.
        logger.info(
            "forward_date_unrepresentable",
            chat_id=fields.chat_id,
            forward_timestamp=fields.forward_timestamp,
        )
        return None

    return ReplyPayload(
        chat_id=fields.chat_id,
        text=f"The message was sent on `{date_text}`",
        parse_mode=MARKDOWN,
        reply_to_message_id=fields.message_id,
    )
