# file: brainstream/services/brain_watcher.py

import asyncio
import logging
from typing import List, Optional

from brainstream.schemas.models import BrainEvent
from brainstream.services.client_registry import ClientRegistry, Sink
from brainstream.services.event_buffer import EventBuffer
from brainstream.services.tail_reader import TailReader
from brainstream.worker import run_tail_periodically

log = logging.getLogger("api.services.brain_watcher")

class BrainWatcher:
    """
    Owns the tail reader, the recent-event buffer and the connected clients.

    Created once at application startup. The first consumer to connect
    triggers the one-time backfill and starts the poll loop, which then runs
    until `stop()` is called at shutdown.
    """
    def __init__(
        self,
        reader: TailReader,
        buffer: EventBuffer,
        registry: Optional[ClientRegistry] = None,
        poll_interval_sec: float = 0.5,
    ):
        self.reader = reader
        self.buffer = buffer
        self.registry = registry if registry is not None else ClientRegistry("brain")
        self.poll_interval_sec = poll_interval_sec
        self.watching = False
        self._task: Optional[asyncio.Task] = None

    def ensure_started(self) -> None:
        """Idempotent. Must be called from within the running event loop."""
        if self.watching:
            return
        self.buffer.replace(self.reader.backfill())
        self.watching = True
        self._task = asyncio.create_task(run_tail_periodically(self, self.poll_interval_sec))

    async def stop(self) -> None:
        if self._task is None:
            return
        self._task.cancel()
        try:
            await self._task
        except asyncio.CancelledError:
            log.info("Log tail worker cancelled successfully.")
        self._task = None

    def poll_once(self) -> int:
        """Runs one tail tick; returns the number of new events."""
        events = self.reader.poll()
        for event in events:
            self.publish(event)
        return len(events)

    def publish(self, event: BrainEvent) -> None:
        self.buffer.append(event)
        self.registry.broadcast(event)

    def recent_events(self) -> List[BrainEvent]:
        return self.buffer.snapshot()

    def register(self, sink: Sink) -> None:
        self.registry.register(sink)
