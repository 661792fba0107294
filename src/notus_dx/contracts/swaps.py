"""Transfer, swap and cross-chain swap contracts."""

from typing import Optional

from pydantic import Field

from notus_dx.contracts.base import ApiModel, GasFeePaymentMethod


class TransferParams(ApiModel):
    """Request for a transfer quote (POST /crypto/transfer)."""

    amount: str = Field(..., description="Amount in token units")
    chain_id: int = Field(..., description="EVM chain ID")
    gas_fee_payment_method: GasFeePaymentMethod = GasFeePaymentMethod.DEDUCT_FROM_AMOUNT
    pay_gas_fee_token: str = Field(..., description="Token used to pay gas")
    token: str = Field(..., description="Token to transfer")
    wallet_address: str = Field(..., description="Sending smart wallet")
    to_address: str = Field(..., description="Recipient address")
    transaction_fee_percent: Optional[float] = None


class SwapParams(ApiModel):
    """Request for a swap quote (POST /crypto/swap)."""

    pay_gas_fee_token: str
    token_in: str
    token_out: str
    amount_in: str
    wallet_address: str
    to_address: str
    signer_address: str = Field(..., description="EOA that will sign the UserOperation")
    chain_id_in: int
    chain_id_out: int
    gas_fee_payment_method: GasFeePaymentMethod = GasFeePaymentMethod.ADD_TO_AMOUNT
    transaction_fee_percent: Optional[float] = None


class ExecuteUserOpRequest(ApiModel):
    """Signed quote submitted for execution."""

    quote_id: str
    signature: str


class CrossChainSwapParams(ApiModel):
    """Request for a cross-chain swap quote (POST /crypto/cross-swap)."""

    token_in: str
    token_out: str
    amount_in: str
    chain_id_in: int
    chain_id_out: int
    wallet_address: str
    to_address: str
    signer_address: str
    slippage_tolerance: Optional[float] = None
