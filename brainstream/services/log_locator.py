# file: brainstream/services/log_locator.py

import pathlib
from datetime import datetime
from typing import Callable

from brainstream.core.timeutil import utc_now

class LogLocator:
    """Resolves the path of today's log file (`<dir>/<prefix>-YYYY-MM-DD.log`, UTC day)."""
    def __init__(self, log_dir: str, prefix: str, clock: Callable[[], datetime] = utc_now):
        self.log_dir = pathlib.Path(log_dir)
        self.prefix = prefix
        self.clock = clock

    def current_log_path(self) -> pathlib.Path:
        # Never cached: day rollover must be picked up on the next tick.
        day = self.clock().strftime("%Y-%m-%d")
        return self.log_dir / f"{self.prefix}-{day}.log"
