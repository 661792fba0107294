"""Notus API client."""

from notus_dx.client.exceptions import (
    DocumentUploadError,
    NotusAPIError,
    NotusConnectionError,
    NotusError,
    NotusTimeoutError,
    PollTimeoutError,
    WebhooksUnavailableError,
)
from notus_dx.client.http import NotusClient

__all__ = [
    "DocumentUploadError",
    "NotusAPIError",
    "NotusClient",
    "NotusConnectionError",
    "NotusError",
    "NotusTimeoutError",
    "PollTimeoutError",
    "WebhooksUnavailableError",
]
