# file: brainstream/api/streaming.py
import asyncio
from typing import AsyncIterator, Iterable

from brainstream.core.sse import CONNECTED_FRAME, KEEPALIVE_FRAME, data_frame
from brainstream.schemas.models import BrainEvent
from brainstream.services.client_registry import ClientRegistry, QueueSink

async def sse_frames(
    sink: QueueSink,
    registry: ClientRegistry,
    backfill: Iterable[BrainEvent] = (),
    keepalive_interval_sec: float = 30.0,
) -> AsyncIterator[str]:
    """
    Yields the frames for one already-registered client: the connected
    acknowledgement, the backfill burst (oldest first), then live frames
    interleaved with keepalive comments. Unregisters the sink when the
    client goes away or the sink is dropped by a failed broadcast.
    """
    try:
        yield CONNECTED_FRAME
        for event in backfill:
            yield data_frame(event)

        while True:
            try:
                frame = await asyncio.wait_for(sink.receive(), timeout=keepalive_interval_sec)
            except asyncio.TimeoutError:
                frame = KEEPALIVE_FRAME
            if frame is None:
                break
            yield frame
    finally:
        registry.unregister(sink)
        sink.close()
