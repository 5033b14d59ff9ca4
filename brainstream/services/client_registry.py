# file: brainstream/services/client_registry.py

import asyncio
import logging
from typing import Optional, Protocol, Set

from pydantic import BaseModel

from brainstream.core.sse import data_frame

log = logging.getLogger("api.services.client_registry")

class SinkClosedError(Exception):
    """Raised when writing to a sink whose consumer is gone or cannot keep up."""

class Sink(Protocol):
    def send(self, frame: str) -> None: ...

class QueueSink:
    """
    One connected stream consumer. Frames are queued for the response
    generator to drain; a full queue counts as a failed write.
    """
    def __init__(self, maxsize: int = 100):
        self._queue: "asyncio.Queue[Optional[str]]" = asyncio.Queue(maxsize=maxsize)
        self.closed = False

    def send(self, frame: str) -> None:
        if self.closed:
            raise SinkClosedError("sink is closed")
        try:
            self._queue.put_nowait(frame)
        except asyncio.QueueFull:
            raise SinkClosedError("sink queue is full")

    async def receive(self) -> Optional[str]:
        """Next queued frame, or None once the sink has been closed."""
        if self.closed and self._queue.empty():
            return None
        return await self._queue.get()

    def close(self) -> None:
        if self.closed:
            return
        self.closed = True
        # Pending frames are useless to a dead consumer; make room for the wake-up sentinel.
        while not self._queue.empty():
            self._queue.get_nowait()
        self._queue.put_nowait(None)

class ClientRegistry:
    """The set of live stream sinks, with best-effort fan-out."""
    def __init__(self, name: str = "clients"):
        self.name = name
        self._sinks: Set[Sink] = set()

    def register(self, sink: Sink) -> None:
        self._sinks.add(sink)
        log.info(f"[{self.name}] Client registered ({len(self._sinks)} connected).")

    def unregister(self, sink: Sink) -> None:
        if sink in self._sinks:
            self._sinks.discard(sink)
            log.info(f"[{self.name}] Client unregistered ({len(self._sinks)} connected).")

    def __contains__(self, sink: object) -> bool:
        return sink in self._sinks

    def __len__(self) -> int:
        return len(self._sinks)

    def broadcast(self, payload: BaseModel) -> int:
        """
        Serializes the payload once and writes it to every sink.
        A sink whose write fails is dropped immediately and never retried.
        Returns the number of sinks that accepted the frame.
        """
        frame = data_frame(payload)
        delivered = 0
        # Iterate over a copy: failed sinks are removed mid-loop.
        for sink in list(self._sinks):
            try:
                sink.send(frame)
                delivered += 1
            except Exception as e:
                log.debug(f"[{self.name}] Dropping sink after failed write: {e}")
                self._sinks.discard(sink)
                close = getattr(sink, "close", None)
                if close is not None:
                    close()
        return delivered
