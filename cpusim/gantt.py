"""Helpers for drawing Gantt charts: per-process colours and legend contents."""

from __future__ import annotations

from collections.abc import Iterable

_MASK = 0xFFFFFFFF


def _hash(pid: str) -> int:
    value = 0
    for byte in pid.encode("utf-8"):
        char = byte - 256 if byte > 127 else byte
        value = (char + (value << 6) + (value << 16) - value) & _MASK
    return value


def pid_color(pid: str) -> tuple[float, float, float, float]:
    """Deterministic RGBA colour for a process id; each channel lies in [55/255, 254/255]."""
    value = _hash(pid)
    red = (value >> 16) & 0xFF
    green = (value >> 8) & 0xFF
    blue = value & 0xFF
    return (
        (red % 200 + 55) / 255.0,
        (green % 200 + 55) / 255.0,
        (blue % 200 + 55) / 255.0,
        1.0,
    )


def legend_pids(timelines: Iterable[Iterable[str]]) -> list[str]:
    """Distinct non-empty process ids across all timelines, in order of first appearance."""
    seen: dict[str, None] = {}
    for timeline in timelines:
        for pid in timeline:
            if pid:
                seen.setdefault(pid, None)
    return list(seen)