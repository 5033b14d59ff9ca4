# file: brainstream/schemas/models.py
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

# --- Brain Stream ---
class EventCategory(str, Enum):
    THINK = "think"
    TOOL = "tool"
    DONE = "done"
    STATE = "state"
    CRON = "cron"
    ERROR = "error"

class BrainEvent(BaseModel):
    """One parsed log event. Immutable once created."""
    model_config = ConfigDict(frozen=True)

    id: str
    time: str
    text: str
    category: EventCategory

# --- Activity Relay ---
class ActivityRequest(BaseModel):
    event: str = Field(min_length=1)
    details: Optional[str] = None
    category: Optional[str] = None

class ActivityEvent(BaseModel):
    model_config = ConfigDict(frozen=True)

    timestamp: str
    event: str
    details: Optional[str] = None
    category: Optional[str] = None
