"""Reading process descriptions from text files of the form ``PID, burst, arrival, priority``."""

from __future__ import annotations

import os
import re

from cpusim.scheduler import MAX_PROCESSES, Process

_LINE = re.compile(
    r"\s*(?P<pid>[^,\s][^,]*),"
    r"\s*(?P<burst>[+-]?\d+),"
    r"\s*(?P<arrival>[+-]?\d+),"
    r"\s*(?P<priority>[+-]?\d+)\s*"
)


def parse_process_line(line: str) -> Process:
    """Parse one ``PID, burst, arrival, priority`` line."""
    match = _LINE.fullmatch(line)
    if match is None:
        raise ValueError(f"malformed process line: {line!r}")
    return Process(
        pid=match["pid"],
        burst_time=int(match["burst"]),
        arrival_time=int(match["arrival"]),
        priority=int(match["priority"]),
    )


def load_processes(path: str | os.PathLike[str], limit: int = MAX_PROCESSES) -> list[Process]:
    """Read processes from a file, stopping at the first malformed line or at the limit."""
    processes: list[Process] = []
    with open(path, encoding="utf-8") as handle:
        for line in handle:
            if not line.strip():
                continue
            try:
                processes.append(parse_process_line(line))
            except ValueError:
                break
            if len(processes) >= limit:
                break
    return processes