# cpusim

A small teaching simulator for two operating-systems topics:

- **Scheduling algorithms**: FIFO, SJF, SRT, Round Robin and Priority
  (with aging), shown as an animated Gantt chart with a colour legend per
  process.
- **Synchronization**: processes request named resources; each request is
  marked as executed or blocked depending on whether the resource was free.

## Installation

```
pip install .
```

The windows use Tkinter, which ships with most Python installations.
No other libraries are needed.

## Running the simulator

```
cpusim
```

A start window lets you choose between the scheduling simulator and the
synchronization simulator.

In the scheduling window, tick the algorithms to compare, set the Round
Robin quantum (2 by default), press **Upload Processes** to read
`data/procesos.txt`, then **Run Simulation**. One Gantt line per selected
algorithm (labelled FIFO, SJF, SRT, RR, Priority) is filled in, one cycle
per second, and a legend shows the colour of every process that ran. A
quantum that is not a positive whole number is reported in an error dialog.

In the synchronization window, **Cargar archivos** reads the process,
resource and action files and **Correr** replays the actions. Each action is
drawn as a square in its process's row at its cycle; a blocked request is
outlined in red.

## Input files

The simulators read plain text files from a `data/` directory in the
current working directory.

`data/procesos.txt` holds one process per line: identifier, burst time,
arrival time and priority (lower is more urgent):

```
P1, 8, 0, 1
P2, 4, 1, 2
P3, 2, 2, 3
```

Blank lines are skipped; reading stops at the first other line that does not
match the format, or after 100 processes.

`data/recursos.txt` holds one resource per line: name and available count:

```
R1, 1
R2, 2
```

`data/acciones.txt` holds one action per line: process, `READ` or `WRITE`,
resource name and cycle:

```
P1, READ, R1, 0
P2, WRITE, R1, 1
```

Lines of the resource and action files that do not match are skipped.
Anything other than `WRITE` counts as `READ`.

## Using the library

The scheduling algorithms can be used without the windows:

```python
from cpusim.loader import load_processes
from cpusim.scheduler import fifo, sjf, srt, round_robin, priority, compute_metrics

processes = load_processes("data/procesos.txt", 100)

schedule = round_robin(processes, 2)
print(schedule.timeline, schedule.cycles)
metrics = compute_metrics(schedule.processes)
print(metrics.avg_waiting_time, metrics.avg_turnaround_time, metrics.avg_completion_time)
```

Each algorithm works on copies of the given `Process` values and returns a
`Schedule` holding the per-cycle timeline (a list of process ids) and the
processes with their start, finish, waiting and turnaround times filled in.
`compute_metrics` returns the averages as a `Metrics` value and raises
`ValueError` for an empty list. `round_robin` raises `ValueError` for a
quantum that is not positive, and `srt` for a process whose burst time is
not positive. `parse_process_line` parses a single line of the process file.

`cpusim.gui.run_algorithms(processes, selected, quantum)` runs the chosen
algorithms by name (`"FIFO"`, `"SJF"`, `"SRT"`, `"Round Robin"`,
`"Priority"`) and returns `(label, Schedule)` pairs in that fixed order.

The synchronization simulation lives in `cpusim.sync`: `load_resources`
and `load_actions` read the files into `Resource` and `Action` values, and
`simulate_synchronization` replays `SyncAction` values (kind 1 requests,
kind 2 releases) against `SyncResource` values, setting each action's
`valid` flag. `find_resource` and `action_type_from_string` are small
helpers.

The colour and legend helpers for Gantt charts are in `cpusim.gantt`:
`pid_color` gives a fixed RGBA colour for a process id, and `legend_pids`
lists the distinct ids of several timelines in order of first appearance.

## What it does not do

- The scheduling window draws the Gantt chart and legend only; average
  waiting, turnaround and completion times are available through
  `compute_metrics` but are not shown in the window.
- Every resource is treated as held by one process at a time; the count
  read from `recursos.txt` is kept but does not allow several holders.
- In the synchronization window every action read from `acciones.txt` is
  replayed as a request; `READ` and `WRITE` are not told apart and nothing
  is released.

## Running the tests

```
pip install ".[test]"
pytest
```