# file: brainstream/api/endpoints/activity.py
import logging
from typing import Any, Dict

from fastapi import APIRouter, Depends, HTTPException, Request
from fastapi.responses import StreamingResponse

from brainstream.api.streaming import sse_frames
from brainstream.core.config import settings
from brainstream.core.sse import SSE_HEADERS
from brainstream.schemas.models import ActivityRequest
from brainstream.services.activity_service import ActivityHub
from brainstream.services.client_registry import QueueSink

router = APIRouter()
log = logging.getLogger("api.endpoints.activity")

def get_activity_hub(req: Request) -> ActivityHub:
    return req.app.state.activity_hub

@router.post("")
async def post_activity(
    request: ActivityRequest,
    hub: ActivityHub = Depends(get_activity_hub),
) -> Dict[str, Any]:
    delivered = hub.broadcast_activity(request.event, request.details, request.category)
    return {"status": "ok", "delivered": delivered}

@router.get("/stream")
async def activity_stream(hub: ActivityHub = Depends(get_activity_hub)):
    try:
        sink = QueueSink(maxsize=settings.SINK_QUEUE_SIZE)
        hub.register(sink)
    except Exception as e:
        log.error(f"Activity stream initialization failed: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Stream initialization failed")

    return StreamingResponse(
        sse_frames(sink, hub.registry, (), settings.KEEPALIVE_INTERVAL_SEC),
        media_type="text/event-stream",
        headers=SSE_HEADERS,
    )
