"""Telegram Bot API client."""

from __future__ import annotations

import httpx
import structlog

from forwarddate.messaging.base import MessageSender
from forwarddate.schemas.telegram import ReplyPayload
from forwarddate.utils.exceptions import WebhookRegistrationError

logger = structlog.get_logger(__name__)


class TelegramBotClient(MessageSender):
    """Send replies and register the webhook through the Bot API."""

    def __init__(
        self,
        token: str,
        api_base_url: str = "https://api.telegram.org",
        timeout_seconds: float = 10.0,
    ):
        self.token = token
        self.timeout_seconds = timeout_seconds
        self.api_url = f"{api_base_url.rstrip('/')}/bot{self.token}"

    def validate_config(self) -> bool:
        """Validate Telegram client configuration."""
        return bool(self.token)

    async def send(self, payload: ReplyPayload) -> None:
        """Post a ``sendMessage`` call; failures are logged and dropped."""
        if not self.validate_config():
            logger.warning("telegram_client_not_configured")
            return

        try:
            async with httpx.AsyncClient(timeout=self.timeout_seconds) as client:
                response = await client.post(
                    f"{self.api_url}/sendMessage",
                    json=payload.to_request(),
                )
                response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            logger.error(
                "telegram_send_message_failed",
                chat_id=payload.chat_id,
                status_code=exc.response.status_code,
            )
            return
        except httpx.HTTPError as exc:
            logger.error(
                "telegram_send_message_failed",
                chat_id=payload.chat_id,
                error=str(exc),
            )
            return

        logger.info(
            "telegram_reply_sent",
            chat_id=payload.chat_id,
            reply_to_message_id=payload.reply_to_message_id,
        )

    async def set_webhook(self, webhook_url: str) -> None:
        """
        Register ``webhook_url`` as the bot's update callback.

        Raises:
            WebhookRegistrationError: transport failure or ``ok: false``
        """
        try:
            async with httpx.AsyncClient(timeout=self.timeout_seconds) as client:
                response = await client.post(
                    f"{self.api_url}/setWebhook",
                    json={"url": webhook_url},
                )
                response.raise_for_status()
                data = response.json()
        except httpx.HTTPError as exc:
            raise WebhookRegistrationError(webhook_url, str(exc)) from exc
        except ValueError as exc:
            raise WebhookRegistrationError(webhook_url, "invalid_json_response") from exc

        if not data.get("ok"):
            raise WebhookRegistrationError(
                webhook_url,
                str(data.get("description") or "not_ok"),
            )

        logger.info("telegram_webhook_registered", webhook_url=webhook_url)
