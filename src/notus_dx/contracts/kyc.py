"""KYC verification and fiat ramp contracts."""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field

from notus_dx.contracts.base import ApiModel


class DocumentCategory(str, Enum):
    PASSPORT = "PASSPORT"
    DRIVERS_LICENSE = "DRIVERS_LICENSE"
    IDENTITY_CARD = "IDENTITY_CARD"


class KYCSessionStatus(str, Enum):
    """Status of a verification session."""

    PENDING = "PENDING"
    VERIFYING = "VERIFYING"
    COMPLETED = "COMPLETED"
    FAILED = "FAILED"
    EXPIRED = "EXPIRED"


KYC_TERMINAL_STATUSES = frozenset(
    {KYCSessionStatus.COMPLETED.value, KYCSessionStatus.FAILED.value, KYCSessionStatus.EXPIRED.value}
)


class KYCCreateSessionParams(ApiModel):
    """Body for POST /kyc/individual-verification-sessions/standard."""

    first_name: str
    last_name: str
    birth_date: str = Field(..., description="YYYY-MM-DD")
    document_id: str
    document_category: DocumentCategory
    document_country: str = Field(..., min_length=2, max_length=3)
    liveness_required: bool = False
    email: Optional[str] = None
    address: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    postal_code: Optional[str] = None


class DocumentUpload(BaseModel):
    """Pre-signed storage upload target returned with a new session."""

    url: str
    fields: dict[str, str] = Field(default_factory=dict)


class FiatCurrency(str, Enum):
    USDC = "USDC"
    BRZ = "BRZ"


class RampDepositQuoteParams(ApiModel):
    """Body for POST /fiat/deposit/quote."""

    payment_method_to_send: str = Field(..., description="e.g. PIX")
    receive_crypto_currency: FiatCurrency
    amount_to_send_in_fiat_currency: str
    individual_id: str
    wallet_address: str
    chain_id: int


class BankAccount(ApiModel):
    account_number: str
    routing_number: str
    bank_name: str


class PaymentMethodDetails(ApiModel):
    type: str = Field(..., description="BANK_TRANSFER or PIX")
    bank_account: Optional[BankAccount] = None
    pix_key: Optional[str] = None


class RampWithdrawQuoteParams(ApiModel):
    """Body for POST /fiat/withdraw/quote."""

    individual_id: str
    amount_to_send_in_crypto_currency: str
    crypto_currency_to_send: FiatCurrency
    payment_method_to_receive_details: PaymentMethodDetails
    chain_id: int
