"""Shared plumbing for action groups."""

from typing import Any, Optional, Union

from notus_dx.client.http import NotusClient
from notus_dx.contracts.base import ApiModel

Payload = Union[ApiModel, dict]


def to_payload(params: Optional[Payload]) -> Optional[dict]:
    """Wire representation of a contract model (dicts pass through)."""
    if params is None:
        return None
    if isinstance(params, ApiModel):
        return params.to_api()
    return dict(params)


class ActionGroup:
    """Base for a group of related Notus API operations.

    Each group is a thin layer over a shared :class:`NotusClient`; retry,
    idempotency and error mapping all happen in the client.
    """

    def __init__(self, client: NotusClient):
        self.client = client

    async def _get(self, path: str, params: Optional[Payload] = None) -> Any:
        return await self.client.get(path, params=to_payload(params))

    async def _post(self, path: str, params: Optional[Payload] = None) -> Any:
        return await self.client.post(path, json=to_payload(params))
