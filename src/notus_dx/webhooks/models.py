"""Pydantic models for Notus webhook payloads."""

from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel


class EventType(str, Enum):
    """Event types sent by the Notus API."""

    SWAP_COMPLETED = "swap.completed"
    CROSS_SWAP_COMPLETED = "cross_swap.completed"
    WITHDRAW_TRANSFER_COMPLETED = "withdraw_transfer.completed"
    DEPOSIT_TRANSFER_COMPLETED = "deposit_transfer.completed"
    ADD_LIQUIDITY_COMPLETED = "add_liquidity.completed"
    KYC_COMPLETED = "kyc.completed"
    ON_RAMP_COMPLETED = "on_ramp.completed"
    OFF_RAMP_COMPLETED = "off_ramp.completed"


class WebhookEvent(BaseModel):
    """A single event delivered to the webhook endpoint."""

    event_type: str  # e.g. "swap.completed"
    data: Any = None
    timestamp: str  # ISO-8601
    id: str


class WebhookResponse(BaseModel):
    """Webhook response."""

    success: bool
    message: str
    event_type: Optional[str] = None


class WebhookStatus(BaseModel):
    """Liveness payload for GET on the webhook path."""

    message: str
    status: str
    timestamp: str


class StoredWebhookEvent(BaseModel):
    """A recorded webhook delivery."""

    delivery_id: str
    event_id: str
    event_type: str
    known: bool
    event_timestamp: str
    received_at: Optional[str] = None
    payload: Any = None
