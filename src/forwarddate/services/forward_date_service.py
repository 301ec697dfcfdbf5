"""Glue between an inbound update and the outbound reply."""
from __future__ import annotations

from collections.abc import Mapping
from typing import Any

import structlog

from forwarddate.messaging.base import MessageSender
from forwarddate.schemas.telegram import ReplyPayload
from forwarddate.services.reply_builder import Formatter, build_reply
from forwarddate.services.update_parser import parse_update
from forwarddate.utils.dates import format_timestamp

logger = structlog.get_logger(__name__)


class ForwardDateService:
    """Reply to forwarded messages with their original send date."""

    def __init__(
        self,
        sender: MessageSender,
        formatter: Formatter = format_timestamp,
    ):
        self.sender = sender
        self.formatter = formatter

    def plan_reply(self, update: Mapping[str, Any] | Any) -> ReplyPayload | None:
        """Parse an update and build its reply without sending anything."""
        return build_reply(parse_update(update), self.formatter)

    async def handle_update(self, update: Mapping[str, Any] | Any) -> None:
        """Process one update end to end; delivery is fire-and-forget."""
        payload = self.plan_reply(update)
        if payload is None:
            logger.debug("forward_date_reply_skipped")
            return

        logger.info(
            "forward_date_reply_planned",
            chat_id=payload.chat_id,
            has_date=payload.parse_mode is not None,
        )
        # At-most-once: the sender swallows failures and nothing is retried.
        await self.sender.send(payload)
