# file: brainstream/api/endpoints/brain.py
import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Request
from fastapi.responses import StreamingResponse

from brainstream.api.streaming import sse_frames
from brainstream.core.config import settings
from brainstream.core.sse import SSE_HEADERS
from brainstream.schemas.models import BrainEvent, EventCategory
from brainstream.services.brain_watcher import BrainWatcher
from brainstream.services.client_registry import QueueSink

router = APIRouter()
log = logging.getLogger("api.endpoints.brain")

def get_brain_watcher(req: Request) -> BrainWatcher:
    return req.app.state.brain_watcher

@router.get("/stream")
async def brain_stream(watcher: BrainWatcher = Depends(get_brain_watcher)):
    """Live brain feed: backfill of recent events, then live events and keepalives."""
    try:
        watcher.ensure_started()
        sink = QueueSink(maxsize=settings.SINK_QUEUE_SIZE)
        watcher.register(sink)
        backfill = watcher.recent_events()
    except Exception as e:
        log.error(f"Brain stream initialization failed: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Stream initialization failed")

    return StreamingResponse(
        sse_frames(sink, watcher.registry, backfill, settings.KEEPALIVE_INTERVAL_SEC),
        media_type="text/event-stream",
        headers=SSE_HEADERS,
    )

@router.get("/recent", response_model=List[BrainEvent])
async def recent_brain_events(
    limit: Optional[int] = Query(default=None, ge=1),
    category: Optional[EventCategory] = None,
    watcher: BrainWatcher = Depends(get_brain_watcher),
) -> List[BrainEvent]:
    """Returns the buffered events (oldest first), with optional category filter."""
    watcher.ensure_started()
    events = watcher.recent_events()
    if category is not None:
        events = [e for e in events if e.category == category]
    if limit is not None:
        events = events[-limit:]
    return events
