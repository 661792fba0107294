"""Pytest configuration and fixtures."""

import base64
import json
import os
import time
from typing import AsyncGenerator, Callable, Optional

import httpx
import pytest
import pytest_asyncio

# Set test environment
os.environ["ENVIRONMENT"] = "test"
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ["DEBUG"] = "true"
os.environ.pop("WEBHOOK_SECRET", None)
os.environ.pop("NOTUS_API_KEY", None)

from notus_dx.client.http import NotusClient
from notus_dx.config import Settings
from notus_dx.storage.database import Database
from notus_dx.webhooks.signature import sign_payload

WEBHOOK_SECRET = "whsec_" + base64.b64encode(b"notus-dx-test-webhook-secret").decode()
API_URL = "https://api.notus.test/api/v1"
API_KEY = "test-api-key"


def make_settings(**overrides) -> Settings:
    """Settings isolated from the developer's environment and .env file."""
    values = {
        "notus_api_url": API_URL,
        "notus_api_key": API_KEY,
        "webhook_secret": WEBHOOK_SECRET,
        "persist_webhook_events": False,
        "admin_token": "",
    }
    values.update(overrides)
    return Settings(_env_file=None, **values)


def make_event(event_type: str = "swap.completed", event_id: str = "evt_1", **data) -> bytes:
    """Raw JSON body of a webhook delivery."""
    payload = {
        "event_type": event_type,
        "data": data or {"quoteId": "0xabc", "status": "completed"},
        "timestamp": "2026-10-19T12:00:00Z",
        "id": event_id,
    }
    return json.dumps(payload).encode()


def signed_headers(
    body: bytes,
    secret: str = WEBHOOK_SECRET,
    timestamp: Optional[int] = None,
    delivery_id: str = "msg_test_1",
) -> dict:
    """Svix headers for ``body``."""
    ts = str(int(time.time()) if timestamp is None else timestamp)
    return {
        "svix-id": delivery_id,
        "svix-timestamp": ts,
        "svix-signature": sign_payload(ts, body, secret),
    }


class RecordingSleep:
    """Stands in for ``asyncio.sleep`` and records requested delays."""

    def __init__(self):
        self.delays: list[float] = []

    async def __call__(self, delay: float) -> None:
        self.delays.append(delay)


class RecordingTransport(httpx.MockTransport):
    """MockTransport that keeps every request it served."""

    def __init__(self, handler: Callable[[httpx.Request], httpx.Response]):
        self.requests: list[httpx.Request] = []

        def record(request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            return handler(request)

        super().__init__(record)


@pytest.fixture
def settings() -> Settings:
    return make_settings()


@pytest.fixture
def sleep() -> RecordingSleep:
    return RecordingSleep()


@pytest.fixture
def make_client(sleep) -> Callable[..., tuple[NotusClient, RecordingTransport]]:
    """Build a NotusClient over a handler function; returns (client, transport)."""

    def factory(handler, max_retries: int = 3) -> tuple[NotusClient, RecordingTransport]:
        transport = RecordingTransport(handler)
        client = NotusClient(
            API_URL,
            api_key=API_KEY,
            max_retries=max_retries,
            transport=transport,
            sleep=sleep,
        )
        return client, transport

    return factory


@pytest_asyncio.fixture
async def database(tmp_path) -> AsyncGenerator[Database, None]:
    """File-backed SQLite event store in a temp directory."""
    db = Database(f"sqlite+aiosqlite:///{tmp_path / 'events.db'}")
    await db.init()
    yield db
    await db.close()
