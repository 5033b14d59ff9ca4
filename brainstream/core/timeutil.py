# file: brainstream/core/timeutil.py
from datetime import datetime, timezone

def utc_now() -> datetime:
    return datetime.now(timezone.utc)

def utc_now_iso() -> str:
    """ISO-8601 UTC timestamp with millisecond precision and a trailing 'Z'."""
    return utc_now().isoformat(timespec="milliseconds").replace("+00:00", "Z")
