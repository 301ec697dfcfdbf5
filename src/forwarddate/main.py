from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI

from forwarddate.api import webhook
from forwarddate.config import Settings, get_settings
from forwarddate.messaging.telegram import TelegramBotClient
from forwarddate.utils.exceptions import ConfigurationError
from forwarddate.utils.logging import get_logger, setup_logging

# Setup logging
setup_logging()
logger = get_logger(__name__)


async def register_webhook(settings: Settings) -> str:
    """
    Register the public callback URL with Telegram.

    Returns:
        The registered webhook URL

    Raises:
        ConfigurationError: bot token or public base URL missing
        WebhookRegistrationError: Telegram rejected the registration
    """
    if not settings.telegram_bot_token:
        raise ConfigurationError("TELEGRAM_BOT_TOKEN")
    webhook_url = settings.public_webhook_url
    if webhook_url is None:
        raise ConfigurationError("WEBHOOK_URL")

    client = TelegramBotClient(
        token=settings.telegram_bot_token,
        api_base_url=settings.telegram_api_base_url,
        timeout_seconds=settings.telegram_timeout_seconds,
    )
    await client.set_webhook(webhook_url)
    return webhook_url


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Application lifespan events.

    Registers the webhook once per process; a failure aborts startup.
    """
    settings = get_settings()
    logger.info("application_startup")

    if settings.register_webhook_on_startup:
        await register_webhook(settings)
    else:
        logger.info("telegram_webhook_registration_skipped", reason="disabled")

    yield

    logger.info("application_shutdown")


# Create FastAPI app
app = FastAPI(
    title="Forward Date Bot",
    description="Replies to forwarded Telegram messages with their original send date",
    version="1.0.0",
    lifespan=lifespan,
)

app.include_router(webhook.router, tags=["telegram"])


@app.get("/health")
async def health_check() -> dict[str, str]:
    """Health check endpoint."""
    return {"status": "healthy"}
