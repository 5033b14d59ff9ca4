# file: brainstream/services/tail_reader.py

import logging
import pathlib
from typing import List, Optional

from brainstream.schemas.models import BrainEvent
from brainstream.services.line_parser import LineParser
from brainstream.services.log_locator import LogLocator

log = logging.getLogger("api.services.tail_reader")

class TailReader:
    """
    Tracks a byte offset into today's log file and parses only what was
    appended since the last poll.

    Only newline-terminated lines reach the parser. The offset always moves
    to the end of the file; an unterminated tail is carried over and joined
    with the next delta.
    """
    def __init__(self, locator: LogLocator, parser: LineParser, backfill_max_bytes: int = 2 * 1024 * 1024):
        self.locator = locator
        self.parser = parser
        self.backfill_max_bytes = backfill_max_bytes
        self.current_file: Optional[pathlib.Path] = None
        self.file_offset = 0
        self._partial = b""

    def _size(self, path: pathlib.Path) -> Optional[int]:
        try:
            return path.stat().st_size
        except FileNotFoundError:
            return None

    def _read_range(self, path: pathlib.Path, start: int, end: int) -> bytes:
        with open(path, "rb") as f:
            f.seek(start)
            return f.read(end - start)

    def _consume(self, chunk: bytes) -> List[BrainEvent]:
        """Splits the carried tail plus `chunk` into complete lines and parses them."""
        *lines, self._partial = (self._partial + chunk).split(b"\n")
        events = []
        for raw in lines:
            line = raw.decode("utf-8", errors="replace").strip()
            if not line:
                continue
            event = self.parser.parse(line)
            if event is not None:
                events.append(event)
        return events

    def backfill(self) -> List[BrainEvent]:
        """
        Parses a bounded trailing window of today's file and leaves the
        offset at its end, so later polls only see genuinely new content.
        """
        path = self.locator.current_log_path()
        self.current_file = path
        self.file_offset = 0
        self._partial = b""

        try:
            size = self._size(path)
            if not size:
                return []
            start = max(0, size - self.backfill_max_bytes)
            # One byte of lookbehind tells whether the window starts on a line boundary.
            chunk = self._read_range(path, max(0, start - 1), size)
        except OSError as e:
            log.warning(f"Backfill of '{path}' failed: {e}")
            return []

        self.file_offset = max(0, start - 1) + len(chunk)
        if start > 0:
            _, _, chunk = chunk.partition(b"\n")
        events = self._consume(chunk)
        log.info(f"Backfilled {len(events)} events from the last {len(chunk)} bytes of '{path}'.")
        return events

    def poll(self) -> List[BrainEvent]:
        """One tick: returns the events parsed from newly appended lines."""
        path = self.locator.current_log_path()

        if path != self.current_file:
            # Day rollover: only react to content appended after detection.
            self.current_file = path
            self._partial = b""
            try:
                self.file_offset = self._size(path) or 0
            except OSError as e:
                log.debug(f"Could not stat new log file '{path}': {e}")
                self.file_offset = 0
            log.info(f"Switched to log file '{path}' at offset {self.file_offset}.")
            return []

        try:
            size = self._size(path)
            if size is None:
                return []
            if size < self.file_offset:
                log.info(f"Log file '{path}' was truncated; re-reading from the start.")
                self.file_offset = 0
                self._partial = b""
                return []
            if size == self.file_offset:
                return []
            chunk = self._read_range(path, self.file_offset, size)
        except OSError as e:
            # Retried on the next tick from the same offset.
            log.debug(f"Reading '{path}' failed this tick: {e}")
            return []

        self.file_offset += len(chunk)
        return self._consume(chunk)
