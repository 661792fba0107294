"""Request-level verification of inbound webhook deliveries.

Checks run cheapest first:

1. All three Svix headers are present
2. The timestamp is an integer within the replay window
3. A webhook secret is configured
4. One of the signatures matches
5. The body parses as a :class:`WebhookEvent`

Every failure raises :class:`WebhookRejected` with a reason that maps to an
HTTP status, so monitoring can tell clock skew apart from forgery.
"""

import logging
import time
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Mapping, Optional

from pydantic import ValidationError

from notus_dx.webhooks.models import WebhookEvent
from notus_dx.webhooks.signature import (
    DEFAULT_TOLERANCE_SECONDS,
    extract_signatures,
    timestamp_age,
    verify_signature,
)

logger = logging.getLogger(__name__)

ID_HEADER = "svix-id"
TIMESTAMP_HEADER = "svix-timestamp"
SIGNATURE_HEADER = "svix-signature"


class RejectionReason(str, Enum):
    """Why a delivery was rejected."""

    MISSING_HEADERS = "missing_headers"
    INVALID_TIMESTAMP = "invalid_timestamp"
    STALE_TIMESTAMP = "stale_timestamp"
    SECRET_NOT_CONFIGURED = "secret_not_configured"
    INVALID_SIGNATURE = "invalid_signature"
    MALFORMED_PAYLOAD = "malformed_payload"


REJECTION_STATUS = {
    RejectionReason.MISSING_HEADERS: 400,
    RejectionReason.INVALID_TIMESTAMP: 400,
    RejectionReason.STALE_TIMESTAMP: 400,
    RejectionReason.SECRET_NOT_CONFIGURED: 500,
    RejectionReason.INVALID_SIGNATURE: 401,
    RejectionReason.MALFORMED_PAYLOAD: 400,
}


class WebhookRejected(Exception):
    """Raised when a delivery fails verification."""

    def __init__(self, reason: RejectionReason, message: str):
        self.reason = reason
        self.message = message
        super().__init__(f"{reason.value}: {message}")

    @property
    def status_code(self) -> int:
        return REJECTION_STATUS[self.reason]


@dataclass
class VerifiedDelivery:
    """A delivery that passed every check."""

    delivery_id: str
    timestamp: str
    event: WebhookEvent
    raw_body: bytes


class WebhookVerifier:
    """Verifies Svix-signed deliveries against a shared secret."""

    def __init__(
        self,
        secret: Optional[str],
        tolerance_seconds: int = DEFAULT_TOLERANCE_SECONDS,
        clock: Callable[[], float] = time.time,
    ):
        self.secret = secret
        self.tolerance_seconds = tolerance_seconds
        self._clock = clock

    def verify(self, headers: Mapping[str, str], body: bytes) -> VerifiedDelivery:
        """Run all checks and return the parsed event.

        Args:
            headers: Request headers (case-insensitive mapping or lower-case keys)
            body: Raw request body

        Raises:
            WebhookRejected: on the first failing check
        """
        delivery_id = headers.get(ID_HEADER)
        timestamp = headers.get(TIMESTAMP_HEADER)
        signature_header = headers.get(SIGNATURE_HEADER)

        if not delivery_id or not timestamp or not signature_header:
            logger.warning(
                f"Webhook rejected: missing headers "
                f"(id={'yes' if delivery_id else 'no'}, "
                f"timestamp={'yes' if timestamp else 'no'}, "
                f"signature={'yes' if signature_header else 'no'})"
            )
            raise WebhookRejected(
                RejectionReason.MISSING_HEADERS, "Missing required webhook headers"
            )

        try:
            age = timestamp_age(timestamp, self._clock())
        except ValueError:
            logger.warning(f"Webhook {delivery_id} rejected: invalid timestamp {timestamp!r}")
            raise WebhookRejected(RejectionReason.INVALID_TIMESTAMP, "Invalid webhook timestamp")

        if age > self.tolerance_seconds:
            logger.warning(
                f"Webhook {delivery_id} rejected: timestamp too old ({age}s > "
                f"{self.tolerance_seconds}s)"
            )
            raise WebhookRejected(RejectionReason.STALE_TIMESTAMP, "Webhook timestamp too old")

        if not self.secret:
            logger.error("Webhook secret not configured")
            raise WebhookRejected(
                RejectionReason.SECRET_NOT_CONFIGURED, "Webhook secret not configured"
            )

        signatures = extract_signatures(signature_header)
        if not any(
            verify_signature(body, signature, self.secret, timestamp) for signature in signatures
        ):
            logger.warning(f"Webhook {delivery_id} rejected: invalid signature")
            raise WebhookRejected(RejectionReason.INVALID_SIGNATURE, "Invalid signature")

        try:
            event = WebhookEvent.model_validate_json(body)
        except ValidationError as e:
            logger.warning(f"Webhook {delivery_id} rejected: malformed payload ({e.error_count()} errors)")
            raise WebhookRejected(RejectionReason.MALFORMED_PAYLOAD, "Malformed webhook payload")

        logger.info(f"Webhook {delivery_id} verified: {event.event_type} ({event.id})")
        return VerifiedDelivery(
            delivery_id=delivery_id,
            timestamp=timestamp,
            event=event,
            raw_body=body,
        )
