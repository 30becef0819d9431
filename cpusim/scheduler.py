"""CPU scheduling algorithms producing a per-cycle timeline and process statistics."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable
from dataclasses import dataclass, field, replace
from statistics import fmean

MAX_PROCESSES = 100
AGING_INTERVAL = 5


@dataclass
class Process:
    """A process description plus the statistics filled in by a simulation."""

    pid: str
    burst_time: int
    arrival_time: int = 0
    priority: int = 0
    start_time: int = 0
    finish_time: int = 0
    waiting_time: int = 0
    turnaround_time: int = 0

    @property
    def work(self) -> int:
        """Number of cycles the process actually occupies the CPU."""
        return max(self.burst_time, 0)

    def _complete(self, finish_time: int) -> None:
        self.finish_time = finish_time
        self.turnaround_time = finish_time - self.arrival_time


@dataclass
class Schedule:
    """Result of a simulation: the processes with their statistics and the timeline."""

    processes: list[Process] = field(default_factory=list)
    timeline: list[str] = field(default_factory=list)

    @property
    def cycles(self) -> int:
        return len(self.timeline)


@dataclass(frozen=True)
class Metrics:
    """Averages over a set of simulated processes."""

    avg_waiting_time: float
    avg_turnaround_time: float
    avg_completion_time: float


def _copies(processes: Iterable[Process]) -> list[Process]:
    return [replace(p) for p in processes]


def _run_whole(process: Process, time: int, timeline: list[str]) -> int:
    """Run a process to completion without preemption; return the new time."""
    process.start_time = time
    timeline.extend([process.pid] * process.work)
    time += process.work
    process._complete(time)
    process.waiting_time = process.start_time - process.arrival_time
    return time


def fifo(processes: Iterable[Process]) -> Schedule:
    """First come, first served, ordered by arrival time (stable)."""
    procs = sorted(_copies(processes), key=lambda p: p.arrival_time)
    timeline: list[str] = []
    time = 0
    for p in procs:
        time = max(time, p.arrival_time)
        time = _run_whole(p, time, timeline)
    return Schedule(procs, timeline)


def sjf(processes: Iterable[Process]) -> Schedule:
    """Non-preemptive shortest job first."""
    procs = _copies(processes)
    pending = list(procs)
    timeline: list[str] = []
    time = 0
    while pending:
        ready = [p for p in pending if p.arrival_time <= time]
        if not ready:
            time = min(p.arrival_time for p in pending)
            continue
        chosen = min(ready, key=lambda p: p.burst_time)
        time = _run_whole(chosen, time, timeline)
        pending.remove(chosen)
    return Schedule(procs, timeline)


def srt(processes: Iterable[Process]) -> Schedule:
    """Preemptive shortest remaining time, one cycle at a time."""
    procs = _copies(processes)
    for p in procs:
        if p.burst_time <= 0:
            raise ValueError(f"process {p.pid!r} needs a positive burst time")
    remaining = {id(p): p.burst_time for p in procs}
    started: set[int] = set()
    timeline: list[str] = []
    time = 0
    unfinished = list(procs)
    while unfinished:
        ready = [p for p in unfinished if p.arrival_time <= time]
        if not ready:
            time = min(p.arrival_time for p in unfinished)
            continue
        chosen = min(ready, key=lambda p: remaining[id(p)])
        if id(chosen) not in started:
            chosen.start_time = time
            started.add(id(chosen))
        remaining[id(chosen)] -= 1
        timeline.append(chosen.pid)
        time += 1
        if remaining[id(chosen)] == 0:
            chosen._complete(time)
            chosen.waiting_time = chosen.turnaround_time - chosen.burst_time
            unfinished.remove(chosen)
    return Schedule(procs, timeline)


def round_robin(processes: Iterable[Process], quantum: int) -> Schedule:
    """Round robin with the given time quantum."""
    if quantum <= 0:
        raise ValueError("quantum must be positive")
    procs = _copies(processes)
    for p in procs:
        if p.arrival_time < 0:
            raise ValueError(f"process {p.pid!r} has a negative arrival time")
    remaining = [p.work for p in procs]
    queue: deque[int] = deque(i for i, p in enumerate(procs) if p.arrival_time == 0)
    queued = set(queue)
    started: set[int] = set()
    timeline: list[str] = []
    time = 0
    done = 0

    def enqueue(i: int) -> None:
        queue.append(i)
        queued.add(i)

    while done < len(procs):
        if not queue:
            time += 1
            for i, p in enumerate(procs):
                if i not in queued and p.arrival_time == time:
                    enqueue(i)
            continue

        idx = queue.popleft()
        queued.discard(idx)
        current = procs[idx]
        if idx not in started:
            current.start_time = max(time, current.arrival_time)
            time = current.start_time
            started.add(idx)

        run = min(remaining[idx], quantum)
        timeline.extend([current.pid] * run)
        time += run
        remaining[idx] -= run

        for i, p in enumerate(procs):
            if i not in queued and remaining[i] > 0 and time - run < p.arrival_time <= time:
                enqueue(i)

        if remaining[idx] > 0:
            enqueue(idx)
        else:
            current._complete(time)
            current.waiting_time = current.turnaround_time - current.burst_time
            done += 1
    return Schedule(procs, timeline)


def priority(processes: Iterable[Process]) -> Schedule:
    """Non-preemptive priority scheduling (lower value wins) with aging."""
    procs = _copies(processes)
    pending = list(procs)
    timeline: list[str] = []
    time = 0
    while pending:
        ready = [p for p in pending if p.arrival_time <= time]
        if not ready:
            time = min(p.arrival_time for p in pending)
            continue
        chosen = min(
            ready,
            key=lambda p: p.priority - (time - p.arrival_time) // AGING_INTERVAL,
        )
        time = _run_whole(chosen, time, timeline)
        pending.remove(chosen)
    return Schedule(procs, timeline)


def compute_metrics(processes: Iterable[Process]) -> Metrics:
    """Average waiting, turnaround and completion times."""
    procs = list(processes)
    if not procs:
        raise ValueError("no processes to measure")
    return Metrics(
        avg_waiting_time=fmean(p.waiting_time for p in procs),
        avg_turnaround_time=fmean(p.turnaround_time for p in procs),
        avg_completion_time=fmean(p.finish_time for p in procs),
    )