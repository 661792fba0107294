"""Webhook subscription management on the Notus API.

These endpoints are not available on every API deployment; a 404 is
reported as :class:`WebhooksUnavailableError` instead of a generic API error.
Subscriptions can always be managed from the Notus dashboard.
"""

import logging
from typing import Any, Awaitable, Optional

from notus_dx.actions.base import ActionGroup, Payload, to_payload
from notus_dx.client.exceptions import NotusAPIError, WebhooksUnavailableError

logger = logging.getLogger(__name__)

UNAVAILABLE_MESSAGE = (
    "Webhook management endpoints are not available on this Notus API; "
    "configure webhooks from the dashboard"
)


class WebhookActions(ActionGroup):
    """CRUD for upstream webhook subscriptions."""

    async def _call(self, operation: str, call: Awaitable[Any]) -> Any:
        try:
            return await call
        except NotusAPIError as e:
            if e.is_not_found:
                logger.warning(f"{operation}: webhook endpoints unavailable (404)")
                raise WebhooksUnavailableError(UNAVAILABLE_MESSAGE) from e
            raise

    async def list_webhooks(self) -> Any:
        """GET /webhooks"""
        return await self._call("list_webhooks", self._get("/webhooks"))

    async def create_webhook(self, params: Payload) -> Any:
        """POST /webhooks"""
        return await self._call("create_webhook", self._post("/webhooks", params))

    async def get_webhook(self, webhook_id: str) -> Any:
        """GET /webhooks/{id}"""
        return await self._call("get_webhook", self._get(f"/webhooks/{webhook_id}"))

    async def update_webhook(self, webhook_id: str, params: Payload) -> Any:
        """PUT /webhooks/{id}"""
        return await self._call(
            "update_webhook",
            self.client.put(f"/webhooks/{webhook_id}", json=to_payload(params)),
        )

    async def delete_webhook(self, webhook_id: str) -> Any:
        """DELETE /webhooks/{id}"""
        return await self._call("delete_webhook", self.client.delete(f"/webhooks/{webhook_id}"))

    async def get_webhook_events(
        self,
        webhook_id: str,
        limit: Optional[int] = None,
        offset: Optional[int] = None,
        status: Optional[str] = None,
    ) -> Any:
        """GET /webhooks/{id}/events"""
        params = {"limit": limit, "offset": offset, "status": status}
        return await self._call(
            "get_webhook_events", self._get(f"/webhooks/{webhook_id}/events", params)
        )

    async def test_webhook(self, webhook_id: str) -> Any:
        """POST /webhooks/{id}/test"""
        return await self._call("test_webhook", self._post(f"/webhooks/{webhook_id}/test"))
