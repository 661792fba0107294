"""Resilient HTTP client for the Notus API.

Every outbound call goes through :class:`NotusClient`, which adds the API key
header, attaches an idempotency key to mutating requests and retries
transient failures (429, 5xx, no response) with exponential backoff.

Usage::

    async with NotusClient(base_url, api_key) as client:
        wallet = await client.get("/wallets/address", params={...})
"""

import asyncio
import logging
import uuid
from typing import Any, Awaitable, Callable, Optional

import httpx

from notus_dx.client.exceptions import (
    NotusAPIError,
    NotusConnectionError,
    NotusTimeoutError,
    is_retryable_status,
)
from notus_dx.config import Settings

logger = logging.getLogger(__name__)

API_KEY_HEADER = "X-Api-Key"
IDEMPOTENCY_HEADER = "x-idempotency-key"
USER_AGENT = "notus-dx/0.1.0"

MUTATING_METHODS = frozenset({"POST", "PUT", "PATCH"})

DEFAULT_TIMEOUT = 30.0
DEFAULT_MAX_RETRIES = 3
BACKOFF_BASE_MS = 1000


def backoff_delay(attempt: int) -> float:
    """Seconds to wait before retry ``attempt`` (1-based): 2s, 4s, 8s, ..."""
    return (2 ** attempt) * BACKOFF_BASE_MS / 1000


class NotusClient:
    """Async client with API key auth, idempotency keys and bounded retries.

    The client owns an ``httpx.AsyncClient``. Tests pass a ``transport``
    (e.g. ``httpx.MockTransport``) and a fake ``sleep`` instead of patching
    module globals.
    """

    def __init__(
        self,
        base_url: str,
        api_key: str = "",
        timeout: float = DEFAULT_TIMEOUT,
        max_retries: int = DEFAULT_MAX_RETRIES,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        sleep: Callable[[float], Awaitable[Any]] = asyncio.sleep,
    ):
        self.base_url = base_url.rstrip("/") + "/"
        self.max_retries = max_retries
        self._sleep = sleep
        self._client = httpx.AsyncClient(
            base_url=self.base_url,
            headers={
                API_KEY_HEADER: api_key,
                "Content-Type": "application/json",
                "User-Agent": USER_AGENT,
            },
            timeout=timeout,
            transport=transport,
        )

    @classmethod
    def from_settings(
        cls,
        settings: Settings,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> "NotusClient":
        return cls(
            base_url=settings.notus_api_url,
            api_key=settings.notus_api_key,
            timeout=settings.request_timeout,
            max_retries=settings.max_retries,
            transport=transport,
        )

    async def __aenter__(self) -> "NotusClient":
        return self

    async def __aexit__(self, *exc: Any) -> None:
        await self.close()

    async def close(self) -> None:
        await self._client.aclose()

    async def request(
        self,
        method: str,
        path: str,
        *,
        json: Any = None,
        params: Optional[dict] = None,
        headers: Optional[dict] = None,
    ) -> httpx.Response:
        """Send one logical request, retrying transient failures.

        The same headers (including the idempotency key) and body are sent
        on every attempt.

        Raises:
            NotusAPIError: non-retryable status, or retries exhausted
            NotusConnectionError: no response after retries were exhausted
        """
        method = method.upper()
        path = path.lstrip("/")
        request_headers = httpx.Headers(headers or {})
        if method in MUTATING_METHODS and IDEMPOTENCY_HEADER not in request_headers:
            request_headers[IDEMPOTENCY_HEADER] = str(uuid.uuid4())

        attempt = 0
        while True:
            try:
                response = await self._client.request(
                    method,
                    path,
                    json=json,
                    params=_clean_params(params),
                    headers=request_headers,
                )
            except httpx.TransportError as e:
                if attempt >= self.max_retries:
                    logger.error(f"{method} /{path} failed after {attempt + 1} attempts: {e}")
                    if isinstance(e, httpx.TimeoutException):
                        raise NotusTimeoutError(f"{method} /{path} timed out: {e}") from e
                    raise NotusConnectionError(f"{method} /{path} failed: {e}") from e
                attempt += 1
                await self._backoff(method, path, attempt, reason=type(e).__name__)
                continue

            if response.is_success:
                return response

            if is_retryable_status(response.status_code) and attempt < self.max_retries:
                attempt += 1
                await self._backoff(method, path, attempt, reason=f"HTTP {response.status_code}")
                continue

            raise NotusAPIError.from_response(response)

    async def _backoff(self, method: str, path: str, attempt: int, reason: str) -> None:
        delay = backoff_delay(attempt)
        logger.warning(
            f"{method} /{path} {reason}, retry {attempt}/{self.max_retries} in {delay:.0f}s"
        )
        await self._sleep(delay)

    async def request_json(self, method: str, path: str, **kwargs: Any) -> Any:
        response = await self.request(method, path, **kwargs)
        if response.status_code == 204 or not response.content:
            return None
        return response.json()

    async def get(self, path: str, params: Optional[dict] = None) -> Any:
        return await self.request_json("GET", path, params=params)

    async def post(self, path: str, json: Any = None, headers: Optional[dict] = None) -> Any:
        return await self.request_json("POST", path, json=json, headers=headers)

    async def put(self, path: str, json: Any = None, headers: Optional[dict] = None) -> Any:
        return await self.request_json("PUT", path, json=json, headers=headers)

    async def patch(self, path: str, json: Any = None, headers: Optional[dict] = None) -> Any:
        return await self.request_json("PATCH", path, json=json, headers=headers)

    async def delete(self, path: str, params: Optional[dict] = None) -> Any:
        return await self.request_json("DELETE", path, params=params)


def _clean_params(params: Optional[dict]) -> Optional[dict]:
    """Drop ``None`` values and render booleans the way the API expects."""
    if params is None:
        return None
    cleaned = {}
    for key, value in params.items():
        if value is None:
            continue
        if isinstance(value, bool):
            value = "true" if value else "false"
        cleaned[key] = value
    return cleaned
