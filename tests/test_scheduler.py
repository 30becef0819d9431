from collections import Counter

import pytest

from cpusim.scheduler import (
    Process,
    compute_metrics,
    fifo,
    priority,
    round_robin,
    sjf,
    srt,
)


def sample():
    return [
        Process("P1", 8, 0, 1),
        Process("P2", 4, 1, 2),
        Process("P3", 9, 2, 3),
        Process("P4", 5, 3, 2),
        Process("P5", 2, 12, 0),
    ]


ALGORITHMS = [
    fifo,
    sjf,
    srt,
    priority,
    lambda procs: round_robin(procs, 2),
    lambda procs: round_robin(procs, 3),
]


@pytest.mark.parametrize("algorithm", ALGORITHMS)
def test_timeline_holds_each_burst(algorithm):
    procs = sample()
    result = algorithm(procs)
    assert Counter(result.timeline) == {p.pid: p.burst_time for p in procs}
    assert result.cycles == sum(p.burst_time for p in procs)


@pytest.mark.parametrize("algorithm", ALGORITHMS)
def test_statistics_are_consistent(algorithm):
    result = algorithm(sample())
    assert sorted(p.pid for p in result.processes) == ["P1", "P2", "P3", "P4", "P5"]
    for p in result.processes:
        assert p.turnaround_time == p.finish_time - p.arrival_time
        assert p.waiting_time == p.turnaround_time - p.burst_time
        assert p.start_time >= p.arrival_time
        assert p.finish_time >= p.start_time + p.burst_time
        assert result.timeline[p.finish_time - 1] == p.pid


@pytest.mark.parametrize("algorithm", ALGORITHMS)
def test_input_is_not_modified(algorithm):
    procs = sample()
    algorithm(procs)
    assert procs == sample()


def test_fifo_orders_by_arrival_stably():
    procs = [
        Process("B", 1, 2),
        Process("A", 1, 0),
        Process("C", 1, 2),
    ]
    result = fifo(procs)
    assert [p.pid for p in result.processes] == ["A", "B", "C"]


def test_fifo_waits_for_late_arrival():
    result = fifo([Process("P1", 3, 5)])
    assert result.processes[0].start_time == 5
    assert result.timeline == ["P1", "P1", "P1"]


def test_fifo_sequence():
    result = fifo([Process("P1", 3, 0), Process("P2", 2, 1)])
    assert result.timeline == ["P1"] * 3 + ["P2"] * 2


def test_sjf_picks_shortest_ready_job():
    procs = [Process("A", 5, 0), Process("B", 3, 1), Process("C", 1, 1)]
    assert sjf(procs).timeline == ["A"] * 5 + ["C"] + ["B"] * 3


def test_srt_preempts_for_shorter_job():
    procs = [Process("A", 4, 0), Process("B", 1, 1)]
    assert srt(procs).timeline == ["A", "B", "A", "A", "A"]


def test_srt_rejects_zero_burst():
    with pytest.raises(ValueError):
        srt([Process("A", 0, 0)])


def test_round_robin_alternates_by_quantum():
    procs = [Process("A", 3, 0), Process("B", 2, 0)]
    assert round_robin(procs, 2).timeline == ["A", "A", "B", "B", "A"]


def test_round_robin_large_quantum_matches_fifo():
    procs = sample()
    assert round_robin(procs, 100).timeline == fifo(procs).timeline


@pytest.mark.parametrize("quantum", [0, -1])
def test_round_robin_rejects_bad_quantum(quantum):
    with pytest.raises(ValueError):
        round_robin(sample(), quantum)


def test_round_robin_rejects_negative_arrival():
    with pytest.raises(ValueError):
        round_robin([Process("A", 2, -1)], 2)


def test_priority_lower_value_wins():
    procs = [Process("A", 2, 0, 5), Process("B", 1, 0, 1)]
    assert priority(procs).timeline == ["B", "A", "A"]


def test_priority_aging_favours_waiting_process():
    procs = [
        Process("A", 10, 0, 1),
        Process("B", 1, 0, 3),
        Process("C", 1, 10, 2),
    ]
    assert priority(procs).timeline == ["A"] * 10 + ["B", "C"]


def test_compute_metrics_single_process():
    metrics = compute_metrics(fifo([Process("P1", 4, 0)]).processes)
    assert metrics.avg_waiting_time == 0.0
    assert metrics.avg_turnaround_time == 4.0
    assert metrics.avg_completion_time == 4.0


def test_compute_metrics_turnaround_exceeds_waiting():
    metrics = compute_metrics(sjf(sample()).processes)
    assert metrics.avg_turnaround_time > metrics.avg_waiting_time


def test_compute_metrics_empty():
    with pytest.raises(ValueError):
        compute_metrics([])