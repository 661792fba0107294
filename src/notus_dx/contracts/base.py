"""Shared base for request contracts sent to the Notus API."""

from enum import Enum

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class ApiModel(BaseModel):
    """Snake_case in Python, camelCase on the wire."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_api(self) -> dict:
        """Serialize for a request body, omitting unset optional fields."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class GasFeePaymentMethod(str, Enum):
    """How gas is paid for a UserOperation."""

    ADD_TO_AMOUNT = "ADD_TO_AMOUNT"
    DEDUCT_FROM_AMOUNT = "DEDUCT_FROM_AMOUNT"
