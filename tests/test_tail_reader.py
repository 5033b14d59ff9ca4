"""Offset tracking, rotation and truncation of the log tail."""

from datetime import timedelta

from brainstream.schemas.models import EventCategory
from brainstream.services.line_parser import LineParser
from brainstream.services.tail_reader import TailReader

from conftest import log_line

START = log_line("embedded run start: model=foo/bar")
TOOL = log_line("embedded run tool start: tool=exec")
DONE = log_line("embedded run done: durationMs=1500")
IDLE = log_line("session state: new=idle")
NOISE = log_line("gateway heartbeat ok")


def append(path, *lines):
    with open(path, "a", encoding="utf-8") as f:
        f.write("".join(lines))


def test_locator_uses_utc_day(locator, clock, tmp_path):
    assert locator.current_log_path() == tmp_path / "openclaw-2026-10-19.log"
    clock.now += timedelta(days=1)
    assert locator.current_log_path() == tmp_path / "openclaw-2026-10-20.log"


def test_backfill_without_file(reader, log_path):
    assert reader.backfill() == []
    assert reader.current_file == log_path
    assert reader.file_offset == 0


def test_backfill_parses_existing_lines_and_moves_to_end(reader, log_path):
    append(log_path, START, NOISE, TOOL)
    events = reader.backfill()
    assert [e.category for e in events] == [EventCategory.THINK, EventCategory.TOOL]
    assert reader.file_offset == log_path.stat().st_size
    assert reader.poll() == []


def test_backfill_window_is_bounded(locator, log_path):
    append(log_path, *([NOISE] * 20), START, DONE)
    window = len(START) + len(DONE) + 10
    reader = TailReader(locator, LineParser(), backfill_max_bytes=window)
    events = reader.backfill()
    assert [e.category for e in events] == [EventCategory.THINK, EventCategory.DONE]
    assert reader.file_offset == log_path.stat().st_size


def test_poll_reads_only_the_delta(reader, log_path):
    append(log_path, START)
    reader.backfill()
    offset = reader.file_offset

    append(log_path, NOISE, TOOL, DONE)
    events = reader.poll()
    assert [e.category for e in events] == [EventCategory.TOOL, EventCategory.DONE]
    assert reader.file_offset == log_path.stat().st_size > offset
    assert reader.poll() == []


def test_poll_missing_file_is_a_noop(reader, log_path):
    reader.backfill()
    assert reader.poll() == []
    append(log_path, IDLE)
    events = reader.poll()
    assert [e.category for e in events] == [EventCategory.STATE]


def test_partial_line_waits_for_newline(reader, log_path):
    reader.backfill()
    append(log_path, DONE[:20])
    assert reader.poll() == []
    assert reader.file_offset == log_path.stat().st_size

    append(log_path, DONE[20:])
    events = reader.poll()
    assert len(events) == 1
    assert "1.5s" in events[0].text


def test_truncation_resets_offset_then_rereads(reader, log_path):
    append(log_path, NOISE, NOISE, NOISE)
    reader.backfill()

    log_path.write_text(TOOL, encoding="utf-8")
    assert reader.poll() == []
    assert reader.file_offset == 0

    events = reader.poll()
    assert [e.category for e in events] == [EventCategory.TOOL]
    assert reader.file_offset == len(TOOL)


def test_rotation_starts_at_new_file_size(reader, locator, clock, log_path):
    append(log_path, START)
    reader.backfill()

    clock.now += timedelta(days=1)
    new_path = locator.current_log_path()
    append(new_path, TOOL, DONE)
    # Old day's file keeps growing but must not be read any more.
    append(log_path, IDLE)

    assert reader.poll() == []
    assert reader.current_file == new_path
    assert reader.file_offset == new_path.stat().st_size

    append(new_path, IDLE)
    events = reader.poll()
    assert [e.category for e in events] == [EventCategory.STATE]


def test_rotation_to_missing_file_reads_from_start_once_created(reader, clock, locator, log_path):
    reader.backfill()
    clock.now += timedelta(days=1)
    assert reader.poll() == []
    assert reader.file_offset == 0

    append(locator.current_log_path(), START)
    events = reader.poll()
    assert [e.category for e in events] == [EventCategory.THINK]


def test_backfill_window_on_line_boundary_keeps_first_line(locator, log_path):
    append(log_path, NOISE, START, DONE)
    reader = TailReader(locator, LineParser(), backfill_max_bytes=len(START) + len(DONE))
    events = reader.backfill()
    assert [e.category for e in events] == [EventCategory.THINK, EventCategory.DONE]
    assert reader.file_offset == log_path.stat().st_size


def test_unparseable_line_does_not_lose_neighbours(reader, log_path):
    reader.backfill()
    deep = "[" * 100000 + "\n"
    huge = "{\"1\": \"gateway heartbeat ok\", \"n\": " + "1" * 5000 + "}\n"
    append(log_path, START, deep, huge, DONE)

    events = reader.poll()
    assert [e.category for e in events] == [EventCategory.THINK, EventCategory.DONE]
    assert reader.file_offset == log_path.stat().st_size
