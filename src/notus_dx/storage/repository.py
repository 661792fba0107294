"""Repository for recorded webhook deliveries."""

import json
import logging
from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from notus_dx.storage.models import WebhookEventRecord

logger = logging.getLogger(__name__)


class WebhookEventRepository:
    """Data access for the ``webhook_events`` table."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def is_processed(self, delivery_id: str) -> bool:
        """Check if a delivery id was already recorded."""
        stmt = select(WebhookEventRecord.id).where(WebhookEventRecord.delivery_id == delivery_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none() is not None

    async def record_event(
        self,
        delivery_id: str,
        event_id: str,
        event_type: str,
        event_timestamp: str,
        payload: object,
        known: bool = True,
    ) -> WebhookEventRecord:
        """Store a verified delivery."""
        record = WebhookEventRecord(
            delivery_id=delivery_id,
            event_id=event_id,
            event_type=event_type,
            event_timestamp=event_timestamp,
            payload=json.dumps(payload),
            known=known,
        )
        self.session.add(record)
        await self.session.flush()
        logger.debug(f"Recorded webhook {delivery_id} ({event_type})")
        return record

    async def get_by_delivery_id(self, delivery_id: str) -> Optional[WebhookEventRecord]:
        stmt = select(WebhookEventRecord).where(WebhookEventRecord.delivery_id == delivery_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def list_events(
        self,
        limit: int = 50,
        event_type: Optional[str] = None,
    ) -> list[WebhookEventRecord]:
        """Most recent deliveries first."""
        stmt = select(WebhookEventRecord)
        if event_type:
            stmt = stmt.where(WebhookEventRecord.event_type == event_type)
        stmt = stmt.order_by(WebhookEventRecord.id.desc()).limit(limit)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())
