# file: brainstream/services/event_buffer.py

from collections import deque
from typing import Deque, Iterable, List

from brainstream.schemas.models import BrainEvent

class EventBuffer:
    """Fixed-capacity ring of the most recent events; oldest evicted first."""
    def __init__(self, capacity: int = 50):
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self._events: Deque[BrainEvent] = deque(maxlen=capacity)

    @property
    def capacity(self) -> int:
        return self._events.maxlen

    def append(self, event: BrainEvent) -> None:
        self._events.append(event)

    def replace(self, events: Iterable[BrainEvent]) -> None:
        """Resets the buffer to the last `capacity` of the given events."""
        self._events = deque(events, maxlen=self.capacity)

    def snapshot(self) -> List[BrainEvent]:
        """Buffered events in arrival order (oldest first)."""
        return list(self._events)

    def __len__(self) -> int:
        return len(self._events)
