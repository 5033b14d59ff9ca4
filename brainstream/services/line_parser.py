# file: brainstream/services/line_parser.py

import json
import re
import uuid
from typing import Callable, List, Optional, Tuple

from brainstream.core.timeutil import utc_now_iso
from brainstream.schemas.models import BrainEvent, EventCategory

Match = Tuple[EventCategory, str]

MODEL_PATTERN = re.compile(r"model=(\S+)")
TOOL_PATTERN = re.compile(r"tool=(\S+)")
DURATION_PATTERN = re.compile(r"durationMs=(\d+)")

TOOL_PHRASES = {
    "exec": "hammering the terminal",
    "read": "reading the scrolls",
    "edit": "scribbling in the margins",
    "write": "writing a fresh scroll",
    "web_search": "searching the web",
    "web_fetch": "fetching a page",
    "cron": "winding the clock",
    "process": "poking a daemon",
    "memory_get": "digging through memory",
}

def _run_start(msg: str) -> Optional[Match]:
    m = MODEL_PATTERN.search(msg)
    model = m.group(1).rsplit("/", 1)[-1] if m else "unknown"
    return EventCategory.THINK, f"thinking... ({model})"

def _tool_start(msg: str) -> Optional[Match]:
    m = TOOL_PATTERN.search(msg)
    tool = m.group(1) if m else ""
    return EventCategory.TOOL, TOOL_PHRASES.get(tool, f"working with: {tool}")

def _run_done(msg: str) -> Optional[Match]:
    m = DURATION_PATTERN.search(msg)
    ms = int(m.group(1)) if m else 0
    # Ties round up: 1250 ms -> 1.3s
    tenths = (ms + 50) // 100
    return EventCategory.DONE, f"task done in {tenths // 10}.{tenths % 10}s"

def _session_state(msg: str) -> Optional[Match]:
    if "new=processing" in msg:
        return EventCategory.STATE, "waking up"
    if "new=idle" in msg:
        return EventCategory.STATE, "idle... zzz"
    return None

# Ordered allowlist: the first matching prefix decides, everything else is dropped.
MESSAGE_HANDLERS: List[Tuple[str, Callable[[str], Optional[Match]]]] = [
    ("embedded run start:", _run_start),
    ("embedded run tool start:", _tool_start),
    ("embedded run done:", _run_done),
    ("session state:", _session_state),
]

class LineParser:
    """Turns one JSON log line into a BrainEvent, or None for anything not allowlisted."""
    def __init__(self, message_field: str = "1", time_field: str = "time"):
        self.message_field = message_field
        self.time_field = time_field

    def match(self, msg: str) -> Optional[Match]:
        for prefix, handler in MESSAGE_HANDLERS:
            if msg.startswith(prefix):
                return handler(msg)
        return None

    def parse(self, line: str) -> Optional[BrainEvent]:
        try:
            record = json.loads(line)
        except (ValueError, RecursionError):
            # JSONDecodeError, oversized integer literals, pathological nesting
            return None
        if not isinstance(record, dict):
            return None

        msg = record.get(self.message_field)
        matched = self.match(msg) if isinstance(msg, str) else None
        if matched is None:
            return None

        category, text = matched
        ts = record.get(self.time_field)
        return BrainEvent(
            id=str(uuid.uuid4()),
            time=ts if isinstance(ts, str) else utc_now_iso(),
            text=text,
            category=category,
        )
