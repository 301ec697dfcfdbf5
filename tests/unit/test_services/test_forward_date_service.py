"""Unit tests for ForwardDateService."""
from __future__ import annotations

import pytest

from forwarddate.services.forward_date_service import ForwardDateService
from forwarddate.services.reply_builder import DATE_NOT_FOUND_TEXT


@pytest.mark.unit
async def test_handle_forwarded_update(recording_sender) -> None:
    service = ForwardDateService(sender=recording_sender)
    await service.handle_update(
        {"message": {"chat": {"id": 42}, "message_id": 7, "forward_date": 1690000000}}
    )

    assert len(recording_sender.sent) == 1
    payload = recording_sender.sent[0]
    assert payload.chat_id == 42
    assert payload.reply_to_message_id == 7
    assert "Saturday, July 22, 2023" in payload.text


@pytest.mark.unit
async def test_handle_plain_update_sends_fallback(recording_sender) -> None:
    service = ForwardDateService(sender=recording_sender)
    await service.handle_update({"message": {"chat": {"id": 42}}})

    assert [p.text for p in recording_sender.sent] == [DATE_NOT_FOUND_TEXT]


@pytest.mark.unit
async def test_handle_update_without_chat_sends_nothing(recording_sender) -> None:
    service = ForwardDateService(sender=recording_sender)
    await service.handle_update({"message": {"message_id": 7, "forward_date": 0}})
    await service.handle_update({})

    assert recording_sender.sent == []


@pytest.mark.unit
async def test_handle_unformattable_date_sends_nothing(recording_sender) -> None:
    service = ForwardDateService(sender=recording_sender)
    await service.handle_update({"message": {"chat": {"id": 42}, "forward_date": 10**20}})

    assert recording_sender.sent == []


@pytest.mark.unit
def test_plan_reply_has_no_side_effects(recording_sender) -> None:
    service = ForwardDateService(sender=recording_sender, formatter=lambda ts: "then")
    payload = service.plan_reply({"message": {"chat": {"id": 1}, "forward_date": 5}})

    assert payload is not None
    assert payload.text == "The message was sent on `then`"
    assert recording_sender.sent == []
