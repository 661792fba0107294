"""Dispatch verified webhook events to handlers by event type."""

import logging
from dataclasses import dataclass
from typing import Awaitable, Callable, Optional

from sqlalchemy.exc import IntegrityError

from notus_dx.storage.database import Database
from notus_dx.storage.repository import WebhookEventRepository
from notus_dx.webhooks.models import EventType, WebhookEvent
from notus_dx.webhooks.verifier import VerifiedDelivery

logger = logging.getLogger(__name__)

EventHandler = Callable[[WebhookEvent], Awaitable[None]]

EVENT_LABELS = {
    EventType.SWAP_COMPLETED: "Swap completed",
    EventType.CROSS_SWAP_COMPLETED: "Cross-chain swap completed",
    EventType.WITHDRAW_TRANSFER_COMPLETED: "Withdraw transfer completed",
    EventType.DEPOSIT_TRANSFER_COMPLETED: "Deposit transfer completed",
    EventType.ADD_LIQUIDITY_COMPLETED: "Liquidity added",
    EventType.KYC_COMPLETED: "KYC completed",
    EventType.ON_RAMP_COMPLETED: "On-ramp completed",
    EventType.OFF_RAMP_COMPLETED: "Off-ramp completed",
}


@dataclass
class DispatchResult:
    """Outcome of dispatching one delivery."""

    event_type: str
    known: bool
    duplicate: bool = False
    stored: bool = False


def _logging_handler(label: str) -> EventHandler:
    async def handle(event: WebhookEvent) -> None:
        logger.info(f"{label}: {event.id} {event.data}")

    return handle


class WebhookDispatcher:
    """Maps event type strings to async handlers.

    Every known :class:`EventType` starts with a handler that only logs;
    applications replace them with :meth:`register`. Unknown event types are
    logged and acknowledged.

    With a ``database``, a delivery is recorded before its handler runs. The
    unique delivery id decides duplicates, so a redelivered id is acknowledged
    without running the handler again even when both copies arrive at once.
    Unknown event types are only recorded when ``persist_unknown`` is set.
    """

    def __init__(self, database: Optional[Database] = None, persist_unknown: bool = False):
        self.database = database
        self.persist_unknown = persist_unknown
        self._handlers: dict[str, EventHandler] = {
            event_type.value: _logging_handler(label) for event_type, label in EVENT_LABELS.items()
        }

    @property
    def known_types(self) -> list[str]:
        return sorted(self._handlers)

    def register(self, event_type: str, handler: EventHandler) -> None:
        """Set the handler for an event type."""
        self._handlers[str(getattr(event_type, "value", event_type))] = handler

    def on(self, event_type: str) -> Callable[[EventHandler], EventHandler]:
        """Decorator form of :meth:`register`."""

        def decorator(handler: EventHandler) -> EventHandler:
            self.register(event_type, handler)
            return handler

        return decorator

    async def dispatch(self, delivery: VerifiedDelivery) -> DispatchResult:
        """Run the handler for a verified delivery.

        Handler exceptions propagate; when the store is enabled the record is
        rolled back with them so the sender's retry is processed again.
        """
        event = delivery.event
        handler = self._handlers.get(event.event_type)
        known = handler is not None

        if self.database is None:
            await self._run(handler, event)
            return DispatchResult(event_type=event.event_type, known=known)

        stored = False
        async with self.database.session() as session:
            repo = WebhookEventRepository(session)
            if known or self.persist_unknown:
                try:
                    await repo.record_event(
                        delivery_id=delivery.delivery_id,
                        event_id=event.id,
                        event_type=event.event_type,
                        event_timestamp=event.timestamp,
                        payload=event.data,
                        known=known,
                    )
                except IntegrityError:
                    await session.rollback()
                    logger.info(f"Webhook {delivery.delivery_id} already processed, skipping")
                    return DispatchResult(event_type=event.event_type, known=known, duplicate=True)
                stored = True

            await self._run(handler, event)

        return DispatchResult(event_type=event.event_type, known=known, stored=stored)

    async def _run(self, handler: Optional[EventHandler], event: WebhookEvent) -> None:
        if handler is None:
            logger.info(f"Unknown webhook event type: {event.event_type} ({event.id})")
            return
        await handler(event)
