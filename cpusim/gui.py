"""Tk front end: a start window, the scheduling simulator and the synchronization view."""

from __future__ import annotations

import os
from collections.abc import Iterable, Sequence
from typing import TYPE_CHECKING, Optional

from cpusim.gantt import legend_pids, pid_color
from cpusim.loader import load_processes
from cpusim.scheduler import Process, Schedule, fifo, priority, round_robin, sjf, srt
from cpusim.sync import (
    REQUEST,
    SyncAction,
    SyncResource,
    load_actions,
    load_resources,
    simulate_synchronization,
)

if TYPE_CHECKING:
    import tkinter as tk

ALGORITHMS = ("FIFO", "SJF", "SRT", "Round Robin", "Priority")
LINE_LABELS = {
    "FIFO": "FIFO",
    "SJF": "SJF",
    "SRT": "SRT",
    "Round Robin": "RR",
    "Priority": "Priority",
}
DEFAULT_QUANTUM = 2
ANIMATION_DELAY_MS = 1000

PROCESSES_FILE = os.path.join("data", "procesos.txt")
RESOURCES_FILE = os.path.join("data", "recursos.txt")
ACTIONS_FILE = os.path.join("data", "acciones.txt")

_CELL = 40
_Y_OFFSET = 20


def run_algorithms(
    processes: Sequence[Process], selected: Iterable[str], quantum: int = DEFAULT_QUANTUM
) -> list[tuple[str, Schedule]]:
    """Run every selected algorithm on copies of the processes.

    Results come back in the fixed order FIFO, SJF, SRT, RR, Priority, each
    paired with its Gantt line label. Unknown algorithm names raise ValueError.
    """
    chosen = set(selected)
    unknown = chosen.difference(ALGORITHMS)
    if unknown:
        raise ValueError(f"unknown algorithm(s): {', '.join(sorted(unknown))}")

    runners = {
        "FIFO": lambda: fifo(processes),
        "SJF": lambda: sjf(processes),
        "SRT": lambda: srt(processes),
        "Round Robin": lambda: round_robin(processes, quantum),
        "Priority": lambda: priority(processes),
    }
    return [(LINE_LABELS[name], runners[name]()) for name in ALGORITHMS if name in chosen]


def _hex_color(pid: str) -> str:
    red, green, blue, _alpha = pid_color(pid)
    return "#{:02x}{:02x}{:02x}".format(*(round(c * 255) for c in (red, green, blue)))


def _parse_quantum(text: str) -> int:
    try:
        return int(text.strip())
    except ValueError:
        return 0


def _window(master: Optional["tk.Misc"], title: str, geometry: str) -> tuple["tk.Misc", bool]:
    import tkinter as tk

    if master is None:
        window: tk.Misc = tk.Tk()
        owns_loop = True
    else:
        window = tk.Toplevel(master)
        owns_loop = False
    window.title(title)
    window.geometry(geometry)
    return window, owns_loop


def show_start_window() -> None:
    """Open the launcher window and run the Tk main loop until it is closed."""
    import tkinter as tk

    root = tk.Tk()
    root.title("Simulador Principal")
    root.geometry("400x200")
    frame = tk.Frame(root, padx=20, pady=20)
    frame.pack(fill=tk.BOTH, expand=True)
    tk.Label(frame, text="Seleccione qué simulador desea usar:").pack(pady=(0, 20))
    tk.Button(
        frame,
        text="🧠 A: Algoritmos de Calendarización",
        command=lambda: show_algorithms_window(root),
    ).pack(fill=tk.X, pady=(0, 20))
    tk.Button(
        frame,
        text="🔐 B: Mecanismos de Sincronización",
        command=lambda: show_sync_window(root),
    ).pack(fill=tk.X)
    root.mainloop()


def show_algorithms_window(master: Optional["tk.Misc"] = None) -> None:
    """Open the scheduling simulator window."""
    import tkinter as tk
    from tkinter import messagebox

    window, owns_loop = _window(master, "Simulador A: Algoritmos", "1000x600")
    state: dict[str, object] = {"processes": [], "job": None}

    top = tk.Frame(window)
    top.pack(side=tk.TOP, fill=tk.X, padx=2, pady=2)
    checks: dict[str, tk.BooleanVar] = {}
    for name in ALGORITHMS:
        var = tk.BooleanVar(master=window, value=True)
        checks[name] = var
        tk.Checkbutton(top, text=name, variable=var).pack(side=tk.LEFT, padx=2)

    quantum_var = tk.StringVar(master=window, value=str(DEFAULT_QUANTUM))

    canvas = tk.Canvas(window, background="white")
    scroll = tk.Scrollbar(window, orient=tk.HORIZONTAL, command=canvas.xview)
    canvas.configure(xscrollcommand=scroll.set)
    legend = tk.Frame(window)

    def load() -> None:
        try:
            loaded = load_processes(PROCESSES_FILE)
        except OSError as exc:
            messagebox.showerror("Error abriendo archivo", str(exc), parent=window)
            state["processes"] = []
            return
        state["processes"] = loaded
        messagebox.showinfo("Procesos", f"Procesos cargados: {len(loaded)}", parent=window)

    def build_legend(timelines: list[list[str]]) -> None:
        for child in legend.winfo_children():
            child.destroy()
        for pid in legend_pids(timelines):
            entry = tk.Frame(legend)
            tk.Frame(entry, width=20, height=20, background=_hex_color(pid)).pack(side=tk.LEFT, padx=2)
            tk.Label(entry, text=pid).pack(side=tk.LEFT, padx=2)
            entry.pack(side=tk.LEFT, padx=5)

    def simulate() -> None:
        if state["job"] is not None:
            window.after_cancel(state["job"])
            state["job"] = None
        canvas.delete("all")
        selected = [name for name, var in checks.items() if var.get()]
        processes = state["processes"]
        try:
            results = run_algorithms(processes, selected, _parse_quantum(quantum_var.get()))
        except ValueError as exc:
            messagebox.showerror("Simulación", str(exc), parent=window)
            return

        timelines = [schedule.timeline for _label, schedule in results]
        for row, (label, _schedule) in enumerate(results):
            canvas.create_text(5, row * 35 + 17, text=f"{label}:", anchor=tk.W)
        longest = max((len(t) for t in timelines), default=0)
        canvas.configure(scrollregion=(0, 0, 90 + longest * 27, max(len(results), 1) * 35))

        progress = [0] * len(timelines)

        def step() -> None:
            active = False
            for row, timeline in enumerate(timelines):
                cycle = progress[row]
                if cycle >= len(timeline):
                    continue
                pid = timeline[cycle]
                x = 80 + cycle * 27
                y = row * 35 + 5
                canvas.create_rectangle(x, y, x + 25, y + 25, fill=_hex_color(pid), outline="black")
                canvas.create_text(x + 12, y + 12, text=pid, fill="white")
                progress[row] += 1
                active = True
            state["job"] = window.after(ANIMATION_DELAY_MS, step) if active else None

        state["job"] = window.after(ANIMATION_DELAY_MS, step)
        build_legend(timelines)

    tk.Button(top, text="Upload Processes", command=load).pack(side=tk.LEFT, padx=5)
    tk.Button(top, text="Run Simulation", command=simulate).pack(side=tk.LEFT, padx=5)
    tk.Label(top, text="Quantum:").pack(side=tk.LEFT, padx=2)
    tk.Entry(top, textvariable=quantum_var, width=4).pack(side=tk.LEFT, padx=2)

    canvas.pack(side=tk.TOP, fill=tk.BOTH, expand=True, padx=2, pady=2)
    scroll.pack(side=tk.TOP, fill=tk.X)
    legend.pack(side=tk.TOP, fill=tk.X, padx=5, pady=5)

    if owns_loop:
        window.mainloop()


def _sync_actions(process_ids: Sequence[str], actions) -> list[SyncAction]:
    rows = {pid: i for i, pid in enumerate(process_ids)}
    result = []
    for action in actions:
        row = rows.setdefault(action.pid, len(rows))
        result.append(SyncAction(instant=action.cycle, pid=row, kind=REQUEST, resource=action.resource))
    return result


def show_sync_window(master: Optional["tk.Misc"] = None) -> None:
    """Open the synchronization simulator window."""
    import tkinter as tk

    window, owns_loop = _window(master, "Simulador B - Mecanismos de Sincronización", "900x400")
    state: dict[str, list] = {"names": [], "resources": [], "actions": []}

    buttons = tk.Frame(window)
    buttons.pack(side=tk.TOP, fill=tk.X, pady=5)

    canvas = tk.Canvas(window, width=800, height=300, background="white", scrollregion=(0, 0, 1500, 300))
    xscroll = tk.Scrollbar(window, orient=tk.HORIZONTAL, command=canvas.xview)
    yscroll = tk.Scrollbar(window, orient=tk.VERTICAL, command=canvas.yview)
    canvas.configure(xscrollcommand=xscroll.set, yscrollcommand=yscroll.set)

    def draw() -> None:
        canvas.delete("all")
        for row, name in enumerate(state["names"]):
            canvas.create_text(10, _Y_OFFSET + row * _CELL, text=name, anchor=tk.SW, fill="black")
        for action in state["actions"]:
            x = action.instant * _CELL + 100
            y = action.pid * _CELL + _Y_OFFSET
            fill = "#3399e6" if action.kind == REQUEST else "#33cc33"
            outline = "red" if action.valid is False else fill
            canvas.create_rectangle(x, y, x + 30, y + 30, fill=fill, outline=outline, width=2)
            canvas.create_text(x + 8, y + 20, text=action.resource, anchor=tk.SW, fill="white")

    def load() -> None:
        try:
            processes = load_processes(PROCESSES_FILE)
            resources = load_resources(RESOURCES_FILE)
            actions = load_actions(ACTIONS_FILE)
        except OSError as exc:
            print(f"Error al abrir archivo: {exc}")
            return
        names = [p.pid for p in processes]
        state["resources"] = [SyncResource(name=r.name, counter=r.counter) for r in resources]
        state["actions"] = _sync_actions(names, actions)
        state["names"] = names
        print("✔ Archivos cargados correctamente.")

    def run() -> None:
        simulate_synchronization(state["resources"], state["actions"])
        draw()

    tk.Button(buttons, text="📂 Cargar archivos", command=load).pack(side=tk.LEFT, padx=5)
    tk.Button(buttons, text="▶ Correr", command=run).pack(side=tk.LEFT, padx=5)

    yscroll.pack(side=tk.RIGHT, fill=tk.Y)
    xscroll.pack(side=tk.BOTTOM, fill=tk.X)
    canvas.pack(side=tk.TOP, fill=tk.BOTH, expand=True)

    if owns_loop:
        window.mainloop()


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Start the graphical simulator."""
    show_start_window()
    return 0