"""Request contracts for the Notus API."""

from notus_dx.contracts.base import ApiModel, GasFeePaymentMethod
from notus_dx.contracts.kyc import (
    DocumentCategory,
    DocumentUpload,
    KYCCreateSessionParams,
    KYCSessionStatus,
    PaymentMethodDetails,
    RampDepositQuoteParams,
    RampWithdrawQuoteParams,
)
from notus_dx.contracts.liquidity import (
    CreateLiquidityParams,
    LiquidityAmountsParams,
    LiquidityPositionRequest,
)
from notus_dx.contracts.swaps import CrossChainSwapParams, SwapParams, TransferParams
from notus_dx.contracts.wallet import SmartWallet
from notus_dx.contracts.webhooks import CreateWebhookParams, UpdateWebhookParams

__all__ = [
    "ApiModel",
    "CreateLiquidityParams",
    "CreateWebhookParams",
    "CrossChainSwapParams",
    "DocumentCategory",
    "DocumentUpload",
    "GasFeePaymentMethod",
    "KYCCreateSessionParams",
    "KYCSessionStatus",
    "LiquidityAmountsParams",
    "LiquidityPositionRequest",
    "PaymentMethodDetails",
    "RampDepositQuoteParams",
    "RampWithdrawQuoteParams",
    "SmartWallet",
    "SwapParams",
    "TransferParams",
    "UpdateWebhookParams",
]
