"""Cross-chain swaps."""

import asyncio
import logging
from typing import Any, Awaitable, Callable, Optional

from notus_dx.actions.base import ActionGroup, Payload
from notus_dx.client.http import NotusClient
from notus_dx.contracts.swaps import ExecuteUserOpRequest
from notus_dx.utils.polling import poll_until_terminal

logger = logging.getLogger(__name__)

CROSS_SWAP_TERMINAL_STATUSES = frozenset({"completed", "failed"})


def extract_chains(data: Any) -> list:
    """Normalize the supported-chains response.

    The endpoint has returned a bare list, ``{"chains": [...]}`` and
    ``{"data": [...]}`` at different times.
    """
    if isinstance(data, list):
        return data
    if isinstance(data, dict):
        for key in ("chains", "data"):
            if isinstance(data.get(key), list):
                return data[key]
    logger.warning(f"Unexpected response format for chains: {data!r}")
    return []


class CrossChainActions(ActionGroup):
    """Quote, execute and track swaps between chains."""

    def __init__(
        self,
        client: NotusClient,
        poll_interval: float = 5.0,
        poll_timeout: Optional[float] = 600.0,
        sleep: Callable[[float], Awaitable[Any]] = asyncio.sleep,
    ):
        super().__init__(client)
        self.poll_interval = poll_interval
        self.poll_timeout = poll_timeout
        self._sleep = sleep

    async def create_quote(self, params: Payload) -> Any:
        """POST /crypto/cross-swap"""
        return await self._post("/crypto/cross-swap", params)

    async def execute(self, quote_id: str, signature: str) -> Any:
        """POST /crypto/execute-cross-swap"""
        request = ExecuteUserOpRequest(quote_id=quote_id, signature=signature)
        return await self._post("/crypto/execute-cross-swap", request)

    async def get_status(self, quote_id: str) -> Any:
        """GET /crypto/cross-swap/{quote_id}/status"""
        return await self._get(f"/crypto/cross-swap/{quote_id}/status")

    async def get_supported_chains(self) -> list:
        """GET /crypto/chains"""
        data = await self._get("/crypto/chains")
        return extract_chains(data)

    async def wait_for_completion(self, quote_id: str) -> Any:
        """Poll the swap status until it is ``completed`` or ``failed``.

        Raises:
            PollTimeoutError: if neither state is reached within ``poll_timeout``
        """
        return await poll_until_terminal(
            lambda: self.get_status(quote_id),
            lambda status: status.get("status") if isinstance(status, dict) else None,
            CROSS_SWAP_TERMINAL_STATUSES,
            interval=self.poll_interval,
            timeout=self.poll_timeout,
            sleep=self._sleep,
            description=f"cross-swap {quote_id}",
        )
