"""Extract the fields needed for a reply from a raw Telegram update."""
from __future__ import annotations

from collections.abc import Mapping
from typing import Any

import structlog
from pydantic import ValidationError

from forwarddate.schemas.telegram import ExtractedFields, TelegramUpdate

logger = structlog.get_logger(__name__)


def parse_update(update: Mapping[str, Any] | Any) -> ExtractedFields:
    """
    Read chat id, message id and forward timestamp from an update.

    The ``message`` object is used when present, otherwise ``edited_message``.
    Each field is extracted independently; anything missing or malformed
    comes back as None. Never raises.

    Args:
        update: Decoded JSON body of a webhook call

    Returns:
        ExtractedFields for the update's current message
    """
    if not isinstance(update, Mapping):
        logger.debug("telegram_update_not_an_object", body_type=type(update).__name__)
        return ExtractedFields()

    try:
        parsed = TelegramUpdate.model_validate(dict(update))
    except ValidationError as exc:
        logger.warning("telegram_update_unparseable", error=str(exc))
        return ExtractedFields()

    message = parsed.current_message
    if message is None:
        return ExtractedFields()

    return ExtractedFields(
        chat_id=message.chat_id,
        message_id=message.message_id,
        forward_timestamp=message.forward_timestamp,
    )
