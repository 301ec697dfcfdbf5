"""Telegram webhook router."""
from __future__ import annotations

import structlog
from fastapi import APIRouter, BackgroundTasks, Request, Response

from forwarddate.config import WEBHOOK_PATH
from forwarddate.dependencies import ForwardDateServiceDep

logger = structlog.get_logger(__name__)

router = APIRouter()


@router.post(WEBHOOK_PATH, status_code=200)
async def telegram_webhook(
    request: Request,
    background_tasks: BackgroundTasks,
    service: ForwardDateServiceDep,
) -> Response:
    """
    Receive a Telegram update and schedule the reply.

    Always acknowledges with an empty 200 so Telegram never redelivers,
    whatever happens to the update.
    """
    try:
        update = await request.json()
    except ValueError:
        logger.warning("telegram_webhook_invalid_json")
        update = {}

    if service is None:
        logger.warning("telegram_webhook_called_while_disabled")
        return Response(status_code=200)

    background_tasks.add_task(service.handle_update, update)
    return Response(status_code=200)
