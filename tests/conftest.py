"""
Pytest configuration and shared fixtures.

No network access is needed: outbound Bot API calls go through a recording
sender or a patched ``httpx.AsyncClient``.
"""
from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from forwarddate.config import Settings, get_settings
from forwarddate.messaging.base import MessageSender
from forwarddate.schemas.telegram import ReplyPayload


class RecordingSender(MessageSender):
    """Sender that keeps every payload instead of calling Telegram."""

    def __init__(self) -> None:
        self.sent: list[ReplyPayload] = []

    def validate_config(self) -> bool:
        return True

    async def send(self, payload: ReplyPayload) -> None:
        self.sent.append(payload)


@pytest.fixture(autouse=True)
def _clear_settings_cache() -> Iterator[None]:
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def settings() -> Settings:
    """Settings with a bot token and public URL, ignoring any local .env."""
    return Settings(
        _env_file=None,
        telegram_bot_token="123456:TEST-TOKEN",
        webhook_url="https://bot.example.com/",
    )


@pytest.fixture
def recording_sender() -> RecordingSender:
    return RecordingSender()


# ── Mock HTTP client fixture ──────────────────────────────────────────────────
@pytest.fixture
def mock_httpx_client():
    """
    Patch ``httpx.AsyncClient`` for the duration of a ``with`` block.

    Usage::

        with mock_httpx_client(json_body={"ok": True}) as client:
            ...
        client.post.assert_awaited_once()
    """

    @contextmanager
    def _patch(json_body=None, side_effect=None):
        with patch("httpx.AsyncClient") as mock_cls:
            mock_client = AsyncMock()
            if side_effect is not None:
                mock_client.post = AsyncMock(side_effect=side_effect)
            else:
                mock_resp = MagicMock()
                mock_resp.status_code = 200
                mock_resp.raise_for_status = MagicMock()
                mock_resp.json = MagicMock(return_value=json_body or {"ok": True})
                mock_client.post = AsyncMock(return_value=mock_resp)
            mock_client.__aenter__ = AsyncMock(return_value=mock_client)
            mock_client.__aexit__ = AsyncMock(return_value=False)
            mock_cls.return_value = mock_client
            yield mock_client

    return _patch
