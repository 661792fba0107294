"""Transfer and same-chain swap quotes, and UserOperation execution."""

import logging
from typing import Any

from notus_dx.actions.base import ActionGroup, Payload
from notus_dx.contracts.swaps import ExecuteUserOpRequest
from notus_dx.signing.base import Signer

logger = logging.getLogger(__name__)


class TransferActions(ActionGroup):
    """Quote, sign and execute transfers and swaps."""

    async def create_transfer_quote(self, params: Payload) -> Any:
        """POST /crypto/transfer"""
        return await self._post("/crypto/transfer", params)

    async def create_swap_quote(self, params: Payload) -> Any:
        """POST /crypto/swap"""
        return await self._post("/crypto/swap", params)

    async def execute_user_operation(self, quote_id: str, signature: str) -> Any:
        """Submit a signed quote for execution.

        POST /crypto/execute-user-op
        """
        request = ExecuteUserOpRequest(quote_id=quote_id, signature=signature)
        return await self._post("/crypto/execute-user-op", request)

    async def sign_and_execute(self, quote_id: str, signer: Signer) -> Any:
        """Sign ``quote_id`` with the wallet's EOA and execute it."""
        signature = await signer.sign_quote(quote_id)
        logger.info(f"Executing quote {quote_id} signed by {signer.address}")
        return await self.execute_user_operation(quote_id, signature)
