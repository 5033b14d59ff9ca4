# file: brainstream/core/sse.py
"""Server-Sent-Events framing shared by every stream endpoint."""

from pydantic import BaseModel

CONNECTED_FRAME = ": connected\n\n"
KEEPALIVE_FRAME = ": keepalive\n\n"

SSE_HEADERS = {
    "Cache-Control": "no-cache, no-transform",
    "Connection": "keep-alive",
    # Disable response buffering in nginx-style proxies
    "X-Accel-Buffering": "no",
}

def data_frame(payload: BaseModel) -> str:
    return f"data: {payload.model_dump_json()}\n\n"
