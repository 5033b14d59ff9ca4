import json
from datetime import datetime, timezone

import pytest

from brainstream.services.line_parser import LineParser
from brainstream.services.log_locator import LogLocator
from brainstream.services.tail_reader import TailReader


class FakeClock:
    """Settable UTC clock for driving day rollover."""

    def __init__(self, now: datetime):
        self.now = now

    def __call__(self) -> datetime:
        return self.now


def log_line(message, time="2026-10-19T12:00:00.000Z") -> str:
    return json.dumps({"0": "{\"subsystem\":\"agent\"}", "1": message, "time": time}) + "\n"


@pytest.fixture
def clock():
    return FakeClock(datetime(2026, 10, 19, 12, 0, tzinfo=timezone.utc))


@pytest.fixture
def locator(tmp_path, clock):
    return LogLocator(str(tmp_path), "openclaw", clock=clock)


@pytest.fixture
def reader(locator):
    return TailReader(locator, LineParser())


@pytest.fixture
def log_path(locator):
    return locator.current_log_path()
