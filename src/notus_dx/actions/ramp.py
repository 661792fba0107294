"""Fiat on/off ramp."""

from typing import Any

from notus_dx.actions.base import ActionGroup, Payload


class RampActions(ActionGroup):
    """Fiat deposit (on-ramp) and withdrawal (off-ramp) quotes and orders."""

    async def create_deposit_quote(self, params: Payload) -> Any:
        """POST /fiat/deposit/quote"""
        return await self._post("/fiat/deposit/quote", params)

    async def create_deposit_order(self, quote_id: str) -> Any:
        """POST /fiat/deposit"""
        return await self._post("/fiat/deposit", {"quoteId": quote_id})

    async def create_withdraw_quote(self, params: Payload) -> Any:
        """POST /fiat/withdraw/quote"""
        return await self._post("/fiat/withdraw/quote", params)

    async def create_withdraw_order(self, quote_id: str) -> Any:
        """POST /fiat/withdraw"""
        return await self._post("/fiat/withdraw", {"quoteId": quote_id})
