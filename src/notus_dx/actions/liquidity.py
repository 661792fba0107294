"""Liquidity pool positions."""

import logging
from typing import Any

from notus_dx.actions.base import ActionGroup, Payload
from notus_dx.contracts.liquidity import (
    CreateLiquidityParams,
    ExecuteLiquidityOpRequest,
    LiquidityPositionRequest,
)

logger = logging.getLogger(__name__)


class LiquidityActions(ActionGroup):
    """Compute amounts for, open and execute liquidity positions."""

    async def get_amounts(self, params: Payload) -> Any:
        """GET /liquidity/amounts"""
        return await self._get("/liquidity/amounts", params)

    async def create_position(self, params: Payload) -> Any:
        """POST /liquidity/create"""
        return await self._post("/liquidity/create", params)

    async def execute_user_operation(self, user_operation_hash: str, signature: str) -> Any:
        """POST /crypto/execute-user-op"""
        request = ExecuteLiquidityOpRequest(
            user_operation_hash=user_operation_hash, signature=signature
        )
        return await self._post("/crypto/execute-user-op", request)

    async def create_position_complete(self, request: LiquidityPositionRequest) -> dict:
        """Compute token amounts, then open the position with them.

        The amounts computed for the token0 maximum are used. Execution is
        left to the caller since it needs the EOA signature.

        Returns:
            ``{"amounts": ..., "position": ...}``
        """
        amounts = await self.get_amounts(request.amounts_params())
        token0_max = amounts["amounts"]["token0MaxAmount"]

        position = await self.create_position(
            CreateLiquidityParams(
                wallet_address=request.wallet_address,
                to_address=request.to_address,
                chain_id=request.chain_id,
                pay_gas_fee_token=request.pay_gas_fee_token,
                gas_fee_payment_method=request.gas_fee_payment_method,
                token0=request.token0,
                token1=request.token1,
                pool_fee_percent=request.pool_fee_percent,
                token0_amount=str(token0_max["token0Amount"]),
                token1_amount=str(token0_max["token1Amount"]),
                min_price=request.min_price,
                max_price=request.max_price,
                slippage_tolerance=request.slippage_tolerance,
            )
        )
        logger.info(f"Created liquidity position for {request.wallet_address}")
        return {"amounts": amounts, "position": position}
