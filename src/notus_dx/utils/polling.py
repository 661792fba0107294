"""Poll a remote resource until it reaches a terminal state.

Replaces self-rescheduling timers with a plain loop that has a fixed
interval, an explicit terminal-state set and an overall deadline. It can be
awaited from a background task, a CLI command, or skipped entirely when a
webhook pushes the final state.
"""

import asyncio
import logging
import time
from typing import Any, Awaitable, Callable, Collection, Optional, TypeVar

from notus_dx.client.exceptions import PollTimeoutError

logger = logging.getLogger(__name__)

T = TypeVar("T")


async def poll_until_terminal(
    fetch: Callable[[], Awaitable[T]],
    get_status: Callable[[T], Optional[str]],
    terminal_states: Collection[str],
    *,
    interval: float,
    timeout: Optional[float] = None,
    initial_delay: float = 0.0,
    sleep: Callable[[float], Awaitable[Any]] = asyncio.sleep,
    clock: Callable[[], float] = time.monotonic,
    description: str = "resource",
) -> T:
    """Call ``fetch`` every ``interval`` seconds until its status is terminal.

    Args:
        fetch: Coroutine function returning the current resource
        get_status: Extracts the status string from a fetched resource
        terminal_states: Statuses that end polling
        interval: Seconds between checks
        timeout: Give up after this many seconds (None = poll forever)
        initial_delay: Seconds to wait before the first check
        sleep: Injected for tests
        clock: Injected for tests
        description: Label used in log messages

    Returns:
        The first fetched resource whose status is terminal

    Raises:
        PollTimeoutError: if the deadline passes first; carries the last result
        Any error raised by ``fetch``
    """
    deadline = clock() + timeout if timeout is not None else None

    if initial_delay > 0:
        await sleep(initial_delay)

    checks = 0
    while True:
        result = await fetch()
        checks += 1
        status = get_status(result)
        if status in terminal_states:
            logger.info(f"{description} reached {status} after {checks} checks")
            return result

        if deadline is not None and clock() + interval > deadline:
            raise PollTimeoutError(
                f"{description} still {status} after {timeout:.0f}s", last_result=result
            )

        logger.debug(f"{description} is {status}, checking again in {interval}s")
        await sleep(interval)
