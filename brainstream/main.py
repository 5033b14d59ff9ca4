# file: brainstream/main.py
import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI

from brainstream.api.router import api_router
from brainstream.core.config import settings
from brainstream.services.activity_service import ActivityHub
from brainstream.services.brain_watcher import BrainWatcher
from brainstream.services.event_buffer import EventBuffer
from brainstream.services.line_parser import LineParser
from brainstream.services.log_locator import LogLocator
from brainstream.services.tail_reader import TailReader

logging.basicConfig(level=settings.LOG_LEVEL, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s")
log = logging.getLogger("api")

def build_brain_watcher() -> BrainWatcher:
    reader = TailReader(
        LogLocator(settings.LOG_DIR, settings.LOG_FILE_PREFIX),
        LineParser(settings.LOG_MESSAGE_FIELD, settings.LOG_TIME_FIELD),
        backfill_max_bytes=settings.BACKFILL_MAX_BYTES,
    )
    return BrainWatcher(reader, EventBuffer(settings.EVENT_BUFFER_SIZE), poll_interval_sec=settings.POLL_INTERVAL_SEC)

@asynccontextmanager
async def lifespan(app: FastAPI):
    """On startup, create the service singletons; the tail worker starts with the first client."""
    log.info("Application startup...")
    app.state.brain_watcher = build_brain_watcher()
    app.state.activity_hub = ActivityHub()

    yield

    log.info("Application shutdown...")
    await app.state.brain_watcher.stop()

app = FastAPI(
    title="Brain Stream",
    description="Live event feed tailed from the agent log, relayed over Server-Sent Events.",
    version="1.0.0",
    lifespan=lifespan
)

app.include_router(api_router, prefix="/api")

@app.get("/health", tags=["Health"])
def health_check():
    return {"status": "ok"}
