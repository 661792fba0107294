"""One object bundling every action group around a shared client."""

import asyncio
from typing import Any, Awaitable, Callable, Optional

import httpx

from notus_dx.actions.cross_chain import CrossChainActions
from notus_dx.actions.kyc import KYCActions
from notus_dx.actions.liquidity import LiquidityActions
from notus_dx.actions.ramp import RampActions
from notus_dx.actions.transfer import TransferActions
from notus_dx.actions.wallet import WalletActions
from notus_dx.actions.webhooks import WebhookActions
from notus_dx.client.http import NotusClient
from notus_dx.config import LIGHT_ACCOUNT_FACTORY, Settings


class NotusService:
    """Entry point for Notus API operations.

    Usage::

        async with NotusService.from_settings(get_settings()) as notus:
            wallet = await notus.wallets.get_or_register(eoa)
            portfolio = await notus.wallets.get_portfolio(wallet.account_abstraction)
    """

    def __init__(
        self,
        client: NotusClient,
        factory: Optional[str] = None,
        salt: str = "0",
        kyc_poll_initial_delay: float = 2.0,
        kyc_poll_interval: float = 5.0,
        cross_swap_poll_interval: float = 5.0,
        poll_timeout: Optional[float] = 600.0,
        sleep: Callable[[float], Awaitable[Any]] = asyncio.sleep,
    ):
        self.client = client
        self.wallets = WalletActions(client, factory=factory or LIGHT_ACCOUNT_FACTORY, salt=salt)
        self.transfers = TransferActions(client)
        self.cross_chain = CrossChainActions(
            client,
            poll_interval=cross_swap_poll_interval,
            poll_timeout=poll_timeout,
            sleep=sleep,
        )
        self.liquidity = LiquidityActions(client)
        self.kyc = KYCActions(
            client,
            poll_initial_delay=kyc_poll_initial_delay,
            poll_interval=kyc_poll_interval,
            poll_timeout=poll_timeout,
            sleep=sleep,
        )
        self.ramp = RampActions(client)
        self.webhooks = WebhookActions(client)

    @classmethod
    def from_settings(
        cls,
        settings: Settings,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> "NotusService":
        return cls(
            NotusClient.from_settings(settings, transport=transport),
            factory=settings.smart_wallet_factory,
            salt=settings.smart_wallet_salt,
            kyc_poll_initial_delay=settings.kyc_poll_initial_delay,
            kyc_poll_interval=settings.kyc_poll_interval,
            cross_swap_poll_interval=settings.cross_swap_poll_interval,
            poll_timeout=settings.poll_timeout,
        )

    async def __aenter__(self) -> "NotusService":
        return self

    async def __aexit__(self, *exc: Any) -> None:
        await self.close()

    async def close(self) -> None:
        await self.client.close()
