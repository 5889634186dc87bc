"""Route Helpers - Result unwrapping and client-disconnect cancellation.

Invariants:
    - unwrap() is the only place a service Err leaves the value world: it hands
      the PlaceShareError to the terminal handlers in api/error_handlers.py
    - cancel_on_disconnect() never leaves a task running after it returns or raises
"""

import asyncio
import logging
from typing import Awaitable, TypeVar

from starlette.requests import ClientDisconnect, Request

from placeshare.core.result import Err, Result

logger = logging.getLogger(__name__)

T = TypeVar("T")


def unwrap(result: Result[T]) -> T:
    """Return the Ok value or hand the Err to the terminal error handlers."""
    if isinstance(result, Err):
        raise result.error
    return result.value


async def cancel_on_disconnect(request: Request, awaitable: Awaitable[T]) -> T:
    """Run awaitable, cancelling it if the client disconnects first."""
    work = asyncio.ensure_future(awaitable)
    watcher = asyncio.ensure_future(_wait_for_disconnect(request))
    try:
        await asyncio.wait(
            {work, watcher}, return_when=asyncio.FIRST_COMPLETED,
        )
        if work.done():
            return work.result()
        logger.info(
            "Client disconnected, cancelling in-flight operation",
            extra={"path": request.url.path},
        )
        raise ClientDisconnect()
    finally:
        for task in (work, watcher):
            if not task.done():
                task.cancel()


async def _wait_for_disconnect(request: Request) -> None:
    # The body is already consumed, so the next ASGI message is the disconnect.
    while True:
        message = await request.receive()
        if message["type"] == "http.disconnect":
            return
