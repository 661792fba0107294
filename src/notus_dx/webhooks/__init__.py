"""Signed webhook receiver."""

from notus_dx.webhooks.dispatcher import DispatchResult, WebhookDispatcher
from notus_dx.webhooks.models import EventType, WebhookEvent, WebhookResponse
from notus_dx.webhooks.signature import (
    compute_signature,
    decode_secret,
    sign_payload,
    verify_signature,
)
from notus_dx.webhooks.verifier import (
    RejectionReason,
    VerifiedDelivery,
    WebhookRejected,
    WebhookVerifier,
)

__all__ = [
    "DispatchResult",
    "EventType",
    "RejectionReason",
    "VerifiedDelivery",
    "WebhookDispatcher",
    "WebhookEvent",
    "WebhookRejected",
    "WebhookResponse",
    "WebhookVerifier",
    "compute_signature",
    "decode_secret",
    "sign_payload",
    "verify_signature",
]
