"""Exception hierarchy for calls to the Notus API."""

from typing import Any, Optional

import httpx


class NotusError(Exception):
    """Base exception for all Notus client errors."""


class NotusAPIError(NotusError):
    """Raised when the API returns a non-2xx response.

    Carries the original status code and the decoded body so callers can
    surface the upstream message.
    """

    def __init__(
        self,
        status_code: int,
        detail: str,
        body: Any = None,
        method: Optional[str] = None,
        url: Optional[str] = None,
    ):
        self.status_code = status_code
        self.detail = detail
        self.body = body
        self.method = method
        self.url = url
        super().__init__(f"HTTP {status_code}: {detail}")

    @property
    def is_not_found(self) -> bool:
        return self.status_code == 404

    @property
    def is_retryable(self) -> bool:
        return is_retryable_status(self.status_code)

    @classmethod
    def from_response(cls, response: httpx.Response) -> "NotusAPIError":
        try:
            body = response.json()
        except ValueError:
            body = response.text
        return cls(
            status_code=response.status_code,
            detail=extract_detail(body) or response.reason_phrase,
            body=body,
            method=response.request.method,
            url=str(response.request.url),
        )


class NotusConnectionError(NotusError):
    """Raised when no response was received after all retries."""


class NotusTimeoutError(NotusConnectionError):
    """Raised when the last attempt timed out."""


class PollTimeoutError(NotusError):
    """Raised when a polled resource does not reach a terminal state in time."""

    def __init__(self, message: str, last_result: Any = None):
        self.last_result = last_result
        super().__init__(message)


class DocumentUploadError(NotusError):
    """Raised when the pre-signed storage upload is rejected."""

    def __init__(self, status_code: int, body: str):
        self.status_code = status_code
        self.body = body
        super().__init__(f"Document upload failed with HTTP {status_code}")


class WebhooksUnavailableError(NotusError):
    """Raised when the webhook management endpoints are not available (404)."""


def is_retryable_status(status_code: int) -> bool:
    """429 and any 5xx are transient."""
    return status_code == 429 or 500 <= status_code < 600


def extract_detail(body: Any) -> str:
    """Pull a human readable message out of an error body."""
    if isinstance(body, dict):
        for key in ("message", "detail", "error"):
            value = body.get(key)
            if value:
                return str(value)
        return str(body)
    if body is None:
        return ""
    return str(body)
