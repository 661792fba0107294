"""Notus webhook endpoints.

Receives Svix-signed event callbacks from the Notus API, verifies them
against the raw request body and dispatches them by event type.
"""

import json
import logging
from datetime import datetime, timezone
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Request

from notus_dx.api.dependencies import (
    get_app_settings,
    get_database,
    get_dispatcher,
    require_admin_token,
)
from notus_dx.config import Settings
from notus_dx.storage.database import Database
from notus_dx.storage.repository import WebhookEventRepository
from notus_dx.webhooks.dispatcher import WebhookDispatcher
from notus_dx.webhooks.models import StoredWebhookEvent, WebhookResponse, WebhookStatus
from notus_dx.webhooks.verifier import WebhookRejected, WebhookVerifier

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/webhooks", tags=["Webhooks"])


@router.post("", response_model=WebhookResponse)
async def receive_webhook(
    request: Request,
    settings: Settings = Depends(get_app_settings),
    dispatcher: WebhookDispatcher = Depends(get_dispatcher),
) -> WebhookResponse:
    """Handle an incoming Notus webhook.

    This endpoint:
    1. Reads the raw body (the signature covers the exact bytes)
    2. Verifies headers, timestamp and signature
    3. Dispatches the event to its handler (once per delivery id)
    """
    body = await request.body()
    verifier = WebhookVerifier(
        settings.webhook_secret,
        tolerance_seconds=settings.webhook_tolerance_seconds,
    )

    try:
        delivery = verifier.verify(request.headers, body)
    except WebhookRejected as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)

    try:
        result = await dispatcher.dispatch(delivery)
    except Exception as e:
        logger.exception(f"Webhook {delivery.delivery_id} handler failed: {e}")
        raise HTTPException(status_code=500, detail="Internal server error")

    message = "Event already processed" if result.duplicate else "Webhook processed successfully"
    return WebhookResponse(success=True, message=message, event_type=result.event_type)


@router.get("", response_model=WebhookStatus)
async def webhook_status() -> WebhookStatus:
    """Liveness check for the webhook endpoint."""
    return WebhookStatus(
        message="Notus webhook endpoint is active",
        status="ready",
        timestamp=datetime.now(timezone.utc).isoformat(),
    )


@router.get("/events", response_model=list[StoredWebhookEvent])
async def list_webhook_events(
    limit: int = Query(50, ge=1, le=500),
    event_type: Optional[str] = None,
    database: Optional[Database] = Depends(get_database),
    _: bool = Depends(require_admin_token),
) -> list[StoredWebhookEvent]:
    """Recently stored deliveries (admin only)."""
    if database is None:
        raise HTTPException(status_code=503, detail="Webhook event store is disabled")

    async with database.session() as session:
        repo = WebhookEventRepository(session)
        records = await repo.list_events(limit=limit, event_type=event_type)

    return [
        StoredWebhookEvent(
            delivery_id=record.delivery_id,
            event_id=record.event_id,
            event_type=record.event_type,
            known=record.known,
            event_timestamp=record.event_timestamp,
            received_at=record.received_at.isoformat() if record.received_at else None,
            payload=json.loads(record.payload) if record.payload else None,
        )
        for record in records
    ]
