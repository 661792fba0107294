"""Notus API operations grouped by feature area."""

from notus_dx.actions.cross_chain import CrossChainActions
from notus_dx.actions.kyc import KYCActions
from notus_dx.actions.liquidity import LiquidityActions
from notus_dx.actions.ramp import RampActions
from notus_dx.actions.service import NotusService
from notus_dx.actions.transfer import TransferActions
from notus_dx.actions.wallet import WalletActions
from notus_dx.actions.webhooks import WebhookActions

__all__ = [
    "CrossChainActions",
    "KYCActions",
    "LiquidityActions",
    "NotusService",
    "RampActions",
    "TransferActions",
    "WalletActions",
    "WebhookActions",
]
