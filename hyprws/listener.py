"""Event loop feeding compositor events to a single handler."""

import asyncio
import inspect
import itertools

from .backend import parse_event
from .constants import EVENT_STREAM_MAX_RETRIES
from .handlers.interface import Handler
from .ipc import get_event_stream
from .logging_setup import get_logger
from .models import Event

__all__ = ["Listener", "get_event_stream_with_retry"]


async def get_event_stream_with_retry(
    max_retry: int = EVENT_STREAM_MAX_RETRIES,
) -> tuple[asyncio.StreamReader, asyncio.StreamWriter] | tuple[None, BaseException]:
    """Obtain the event stream, retrying if it fails.

    If retry count is exhausted, returns (None, exception).

    Args:
        max_retry: Maximum number of retries
    """
    err_count = itertools.count()
    while True:
        attempt = next(err_count)
        try:
            return await get_event_stream()
        except OSError as e:
            if attempt >= max_retry:
                return None, e
            await asyncio.sleep(1)


class Listener:
    """Read events and run them through `handler`, one at a time.

    The reader task pushes parsed events to a queue, a single consumer runs
    the handler to completion for each of them, in arrival order. Errors
    raised by the handler are logged and the loop goes on.
    """

    def __init__(self, handler: Handler) -> None:
        self.handler = handler
        self.log = get_logger("listener")
        self.queue: asyncio.Queue[Event | None] = asyncio.Queue()
        self.processed = 0

    async def read_events_loop(self, reader: asyncio.StreamReader) -> None:
        """Queue the events read from `reader` until the stream ends."""
        try:
            while True:
                try:
                    data = (await reader.readline()).decode(errors="replace")
                except (ConnectionError, RuntimeError):
                    self.log.exception("Aborting event loop")
                    return
                if not data:
                    self.log.critical("Reader starved")
                    return

                event = parse_event(data)
                if event and self.handler.handles(event.name):
                    await self.queue.put(event)
        finally:
            await self.queue.put(None)

    async def run_handler(self, event: Event) -> bool:
        """Run the handler for `event`, return False if it failed."""
        self.log.debug("%s(%r)", event.name, event.data)
        handler = getattr(self.handler, event.name)
        try:
            result = handler(event.data)
            if inspect.isawaitable(result):
                await result
        except Exception:  # pylint: disable=broad-exception-caught
            self.log.exception("%s::%s(%r) failed:", self.handler.name, event.name, event.data)
            return False
        return True

    async def runner_loop(self) -> None:
        """Consume the queue until the end marker."""
        while True:
            event = await self.queue.get()
            if event is None:
                self.log.info("Event stream ended, %d events handled", self.processed)
                return
            await self.run_handler(event)
            self.processed += 1

    async def run(self, reader: asyncio.StreamReader) -> None:
        """Run the handler against the events of `reader` until the stream ends."""
        await self.handler.init()
        await asyncio.gather(
            self.read_events_loop(reader),
            self.runner_loop(),
        )
