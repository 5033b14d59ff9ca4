# generate_demo_logs.py
"""Appends simulated agent log records to today's log file so the brain feed has something to show."""
import argparse
import json
import random
import time
import uuid

from brainstream.core.config import settings
from brainstream.core.timeutil import utc_now_iso
from brainstream.services.log_locator import LogLocator
from brainstream.services.line_parser import TOOL_PHRASES

MODELS = ["acme/orion-large", "acme/orion-mini", "local/llama-3-8b"]
NOISE = [
    "lane enqueue: lane=main queueSize=1",
    "embedded run prompt end: durationMs=812",
    "gateway heartbeat ok",
    "config reload skipped: unchanged",
]

def record(message: str) -> str:
    return json.dumps({"0": "{\"subsystem\":\"agent\"}", "1": message, "time": utc_now_iso()})

def simulate_run() -> list:
    run_id = uuid.uuid4().hex[:8]
    lines = [
        record("session state: prev=idle new=processing"),
        record(f"embedded run start: runId={run_id} model={random.choice(MODELS)}"),
    ]
    for _ in range(random.randint(1, 4)):
        tool = random.choice([*TOOL_PHRASES, "browser"])
        lines.append(record(f"embedded run tool start: runId={run_id} tool={tool}"))
        lines.append(record(random.choice(NOISE)))
    lines.append(record(f"embedded run done: runId={run_id} durationMs={random.randint(300, 20000)}"))
    lines.append(record("session state: prev=processing new=idle"))
    return lines

if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Write simulated agent runs to today's log file.")
    parser.add_argument("--runs", type=int, default=5, help="Number of runs to simulate.")
    parser.add_argument("--delay", type=float, default=0.5, help="Seconds between lines.")
    args = parser.parse_args()

    path = LogLocator(settings.LOG_DIR, settings.LOG_FILE_PREFIX).current_log_path()
    path.parent.mkdir(parents=True, exist_ok=True)

    for _ in range(args.runs):
        for line in simulate_run():
            with open(path, "a", encoding="utf-8") as f:
                f.write(line + "\n")
            time.sleep(args.delay)
    print(f"Wrote {args.runs} simulated runs to {path}")
