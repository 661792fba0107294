"""Liquidity pool contracts."""

from pydantic import Field

from notus_dx.contracts.base import ApiModel, GasFeePaymentMethod


class LiquidityAmountsParams(ApiModel):
    """Query for GET /liquidity/amounts."""

    chain_id: int
    token0: str
    token1: str
    token0_max_amount: float
    token1_max_amount: float
    pool_fee_percent: float
    min_price: str
    max_price: str
    pay_gas_fee_token: str
    gas_fee_payment_method: GasFeePaymentMethod = GasFeePaymentMethod.ADD_TO_AMOUNT


class CreateLiquidityParams(ApiModel):
    """Body for POST /liquidity/create."""

    wallet_address: str
    to_address: str
    chain_id: int
    pay_gas_fee_token: str
    gas_fee_payment_method: GasFeePaymentMethod = GasFeePaymentMethod.ADD_TO_AMOUNT
    token0: str
    token1: str
    pool_fee_percent: float
    token0_amount: str
    token1_amount: str
    min_price: str
    max_price: str
    slippage_tolerance: float = Field(..., ge=0, le=100)


class LiquidityPositionRequest(ApiModel):
    """Everything needed to compute amounts and open a position in one go."""

    chain_id: int
    token0: str
    token1: str
    token0_max_amount: float
    token1_max_amount: float
    pool_fee_percent: float
    min_price: str
    max_price: str
    pay_gas_fee_token: str
    gas_fee_payment_method: GasFeePaymentMethod = GasFeePaymentMethod.ADD_TO_AMOUNT
    wallet_address: str
    to_address: str
    slippage_tolerance: float = Field(..., ge=0, le=100)

    def amounts_params(self) -> LiquidityAmountsParams:
        return LiquidityAmountsParams(
            chain_id=self.chain_id,
            token0=self.token0,
            token1=self.token1,
            token0_max_amount=self.token0_max_amount,
            token1_max_amount=self.token1_max_amount,
            pool_fee_percent=self.pool_fee_percent,
            min_price=self.min_price,
            max_price=self.max_price,
            pay_gas_fee_token=self.pay_gas_fee_token,
            gas_fee_payment_method=self.gas_fee_payment_method,
        )


class ExecuteLiquidityOpRequest(ApiModel):
    """Signed liquidity UserOperation."""

    user_operation_hash: str
    signature: str
