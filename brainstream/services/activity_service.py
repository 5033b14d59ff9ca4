# file: brainstream/services/activity_service.py

import logging
from typing import Optional

from brainstream.core.timeutil import utc_now_iso
from brainstream.schemas.models import ActivityEvent
from brainstream.services.client_registry import ClientRegistry, Sink

log = logging.getLogger("api.services.activity")

class ActivityHub:
    """Relays activity notifications to connected activity-stream clients. Nothing is stored."""
    def __init__(self, registry: Optional[ClientRegistry] = None):
        self.registry = registry if registry is not None else ClientRegistry("activity")

    def register(self, sink: Sink) -> None:
        self.registry.register(sink)

    def broadcast_activity(self, event: str, details: Optional[str] = None, category: Optional[str] = None) -> int:
        activity = ActivityEvent(timestamp=utc_now_iso(), event=event, details=details, category=category)
        delivered = self.registry.broadcast(activity)
        log.info(f"Activity '{event}' delivered to {delivered} client(s).")
        return delivered
