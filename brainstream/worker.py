# file: brainstream/worker.py
import asyncio
import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from brainstream.services.brain_watcher import BrainWatcher

log = logging.getLogger("api.worker")

async def run_tail_periodically(watcher: "BrainWatcher", interval_sec: float):
    """
    Drives the tail reader on a fixed interval for the lifetime of the process.
    A failing tick is logged and retried on the next one.
    """
    log.info(f"Starting log tail worker. Polling every {interval_sec} seconds.")

    while True:
        try:
            watcher.poll_once()
        except Exception as e:
            log.error(f"Worker: An error occurred while polling the log: {e}", exc_info=True)

        await asyncio.sleep(interval_sec)
