"""Smart wallet contracts."""

from typing import Optional

from eth_utils import is_address
from pydantic import Field, field_validator

from notus_dx.contracts.base import ApiModel


def validate_address(value: str) -> str:
    """Reject strings that are not 20-byte hex addresses."""
    if not is_address(value):
        raise ValueError(f"Invalid EVM address: {value}")
    return value


class SmartWallet(ApiModel):
    """An account abstraction wallet and the EOA that controls it."""

    account_abstraction: str = Field(..., description="Smart wallet address")
    externally_owned_account: str = Field(..., description="Controlling EOA address")
    registered_at: Optional[str] = Field(None, description="Registration time (ISO-8601)")


class RegisterWalletRequest(ApiModel):
    """Body for POST /wallets/register."""

    externally_owned_account: str
    factory: str
    salt: str = "0"
    metadata: Optional[dict] = None

    @field_validator("externally_owned_account")
    @classmethod
    def check_address(cls, value: str) -> str:
        return validate_address(value)
