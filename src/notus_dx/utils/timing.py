"""Operation timing and safe printing for API calls."""

import json
import logging
import time
from typing import Any, Awaitable, Callable, TypeVar

from notus_dx.client.exceptions import NotusAPIError

logger = logging.getLogger(__name__)

T = TypeVar("T")

REDACTED = "[REDACTED]"
SENSITIVE_MARKERS = ("key", "secret", "token")


async def timed_operation(operation: str, fn: Callable[[], Awaitable[T]]) -> T:
    """Run ``fn`` and log ``[operation] ok|error ms=<n> status=<code>``.

    Errors are logged and re-raised.
    """
    started = time.monotonic()
    try:
        result = await fn()
    except NotusAPIError as e:
        ms = int((time.monotonic() - started) * 1000)
        logger.error(f"[{operation}] error ms={ms} status={e.status_code} error={e.detail}")
        raise
    except Exception as e:
        ms = int((time.monotonic() - started) * 1000)
        logger.error(f"[{operation}] error ms={ms} status=500 error={e}")
        raise

    ms = int((time.monotonic() - started) * 1000)
    logger.info(f"[{operation}] ok ms={ms} status=200")
    return result


def redact(value: Any) -> Any:
    """Copy of ``value`` with secret-looking keys replaced."""
    if isinstance(value, dict):
        return {
            key: REDACTED
            if any(marker in str(key).lower() for marker in SENSITIVE_MARKERS)
            else redact(item)
            for key, item in value.items()
        }
    if isinstance(value, list):
        return [redact(item) for item in value]
    return value


def safe_dumps(value: Any) -> str:
    """Pretty JSON with secrets redacted."""
    return json.dumps(redact(value), indent=2, default=str)
