"""FastAPI router that receives TemboPlus payment callbacks"""

import inspect
import logging
from typing import Any, Awaitable, Callable, Union

from fastapi import APIRouter, HTTPException, Request

from temboplus.domain.exceptions import DecodeError, ValidationError
from temboplus.domain.models import WebhookPayload
from temboplus.domain.webhooks import parse_webhook
from temboplus.infrastructure.observability.metrics import record_webhook

logger = logging.getLogger(__name__)

WebhookHandler = Callable[[WebhookPayload], Union[None, Awaitable[None]]]


def build_webhook_router(handler: WebhookHandler, path: str = "/webhooks/temboplus") -> APIRouter:
    """
    Build a router that validates callbacks and hands them to ``handler``.

    Invalid bodies get a 400 so the gateway re-delivers; exceptions from
    ``handler`` propagate (500) for the same reason.
    """
    router = APIRouter()

    @router.post(path)
    async def receive_webhook(request: Request) -> dict[str, Any]:
        body = await request.body()
        try:
            payload = parse_webhook(body)
        except (DecodeError, ValidationError) as e:
            record_webhook("invalid")
            logger.warning(f"Invalid webhook payload: {e}", extra={"kind": e.kind})
            raise HTTPException(status_code=400, detail=str(e))

        record_webhook(payload.status_code)
        logger.info(
            "Webhook received",
            extra={
                "status_code": payload.status_code,
                "transaction_ref": payload.transaction_ref,
                "transaction_id": payload.transaction_id,
            },
        )

        result = handler(payload)
        if inspect.isawaitable(result):
            await result
        return {"status": "received"}

    return router
