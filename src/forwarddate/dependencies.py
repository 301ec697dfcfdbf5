from __future__ import annotations

from typing import Annotated

from fastapi import Depends

from forwarddate.config import Settings, get_settings
from forwarddate.messaging.telegram import TelegramBotClient
from forwarddate.services.forward_date_service import ForwardDateService


def get_telegram_client(
    settings: Settings = Depends(get_settings),
) -> TelegramBotClient | None:
    """Dependency to get the Bot API client, None when no token is set."""
    if not settings.telegram_bot_token:
        return None

    return TelegramBotClient(
        token=settings.telegram_bot_token,
        api_base_url=settings.telegram_api_base_url,
        timeout_seconds=settings.telegram_timeout_seconds,
    )


TelegramClientDep = Annotated[TelegramBotClient | None, Depends(get_telegram_client)]


def get_forward_date_service(
    client: TelegramClientDep,
) -> ForwardDateService | None:
    """Dependency to get the forward date service."""
    if client is None:
        return None
    return ForwardDateService(sender=client)


ForwardDateServiceDep = Annotated[
    ForwardDateService | None, Depends(get_forward_date_service)
]
