"""Smart wallet, portfolio and history operations."""

import logging
from typing import Any, Optional

from notus_dx.actions.base import ActionGroup
from notus_dx.client.exceptions import NotusAPIError
from notus_dx.client.http import NotusClient
from notus_dx.config import LIGHT_ACCOUNT_FACTORY
from notus_dx.contracts.wallet import RegisterWalletRequest, SmartWallet

logger = logging.getLogger(__name__)


def _parse_wallet(data: Any) -> SmartWallet:
    # Responses wrap the wallet as {"wallet": {...}}; older ones return it bare
    if isinstance(data, dict) and isinstance(data.get("wallet"), dict):
        data = data["wallet"]
    return SmartWallet.model_validate(data)


class WalletActions(ActionGroup):
    """Account abstraction wallets controlled by an EOA.

    Addresses are deterministic for a given (EOA, factory, salt), so a
    wallet can be looked up before it is registered.
    """

    def __init__(
        self,
        client: NotusClient,
        factory: str = LIGHT_ACCOUNT_FACTORY,
        salt: str = "0",
    ):
        super().__init__(client)
        self.factory = factory
        self.salt = salt

    async def register(self, eoa: str, metadata: Optional[dict] = None) -> SmartWallet:
        """Register the smart wallet for ``eoa``.

        POST /wallets/register
        """
        request = RegisterWalletRequest(
            externally_owned_account=eoa,
            factory=self.factory,
            salt=self.salt,
            metadata=metadata,
        )
        data = await self._post("/wallets/register", request)
        wallet = _parse_wallet(data)
        logger.info(f"Registered smart wallet {wallet.account_abstraction} for {eoa}")
        return wallet

    async def get_address(self, eoa: str) -> Optional[SmartWallet]:
        """Look up the smart wallet for ``eoa``.

        GET /wallets/address

        Returns:
            The wallet, or None if it has not been registered (404)
        """
        try:
            data = await self._get(
                "/wallets/address",
                {"externallyOwnedAccount": eoa, "factory": self.factory, "salt": self.salt},
            )
        except NotusAPIError as e:
            if e.is_not_found:
                logger.info(f"No smart wallet registered for {eoa}")
                return None
            raise
        return _parse_wallet(data)

    async def get_or_register(self, eoa: str, metadata: Optional[dict] = None) -> SmartWallet:
        wallet = await self.get_address(eoa)
        if wallet is not None:
            return wallet
        return await self.register(eoa, metadata=metadata)

    async def list_wallets(self, page: int = 1, per_page: int = 20) -> Any:
        """GET /wallets"""
        return await self._get("/wallets", {"page": page, "perPage": per_page})

    async def get_portfolio(self, wallet_address: str) -> Any:
        """GET /wallets/{address}/portfolio"""
        return await self._get(f"/wallets/{wallet_address}/portfolio")

    async def get_history(
        self,
        wallet_address: str,
        take: Optional[int] = None,
        last_id: Optional[str] = None,
        type: Optional[str] = None,
        status: Optional[str] = None,
        chains: Optional[str] = None,
        created_at: Optional[str] = None,
    ) -> Any:
        """Transaction history of a smart wallet, newest first.

        GET /wallets/{address}/history

        Args:
            wallet_address: Smart wallet address
            take: Page size
            last_id: Cursor from the previous page
            type: Transaction type filter
            status: Transaction status filter
            chains: Comma separated chain IDs
            created_at: Creation date filter
        """
        params = {
            "take": take,
            "lastId": last_id,
            "type": type,
            "status": status,
            "chains": chains,
            "createdAt": created_at,
        }
        return await self._get(f"/wallets/{wallet_address}/history", params)
