"""Resource and action files plus a simple lock-based synchronization simulation."""

from __future__ import annotations

import logging
import os
import re
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Protocol, TypeVar

MAX_RESOURCES = 50
MAX_ACTIONS = 500

REQUEST = 1
RELEASE = 2

_log = logging.getLogger(__name__)

_RESOURCE_LINE = re.compile(r"(?P<name>[^,]+),\s*(?P<counter>[+-]?\d+)")
_ACTION_LINE = re.compile(
    r"(?P<pid>[^,]+),"
    r"\s*(?P<action>[^,]+),"
    r"\s*(?P<resource>[^,]+),"
    r"\s*(?P<cycle>[+-]?\d+)"
)


class ActionType(Enum):
    """Kind of access an action performs on a resource."""

    READ = "READ"
    WRITE = "WRITE"


@dataclass
class Resource:
    """A named resource with the number of units available (1 for a mutex)."""

    name: str
    counter: int


@dataclass
class Action:
    """A process accessing a resource at a given cycle."""

    pid: str
    action: ActionType
    resource: str
    cycle: int


@dataclass
class SyncResource:
    """A resource tracked by the synchronization simulation."""

    name: str
    counter: int = 1
    busy: bool = False


@dataclass
class SyncAction:
    """A request (kind 1) or release (kind 2) of a resource by a numbered process.

    ``valid`` is True when the action went through, False when it was blocked,
    and None while it has not been simulated.
    """

    instant: int
    pid: int
    kind: int
    resource: str
    valid: Optional[bool] = None


class _Named(Protocol):
    name: str


_N = TypeVar("_N", bound=_Named)


def action_type_from_string(text: str) -> ActionType:
    """Map ``READ`` or ``WRITE`` to an action type; anything else counts as a read."""
    return ActionType.WRITE if text == "WRITE" else ActionType.READ


def _matching_lines(path: str | os.PathLike[str], pattern: re.Pattern[str], limit: int) -> Iterator[re.Match[str]]:
    count = 0
    with open(path, encoding="utf-8") as handle:
        for line in handle:
            if count >= limit:
                return
            match = pattern.match(line)
            if match is None:
                continue
            count += 1
            yield match


def load_resources(path: str | os.PathLike[str], limit: int = MAX_RESOURCES) -> list[Resource]:
    """Read ``name, counter`` lines, skipping lines that do not match."""
    return [
        Resource(name=m["name"].strip(), counter=int(m["counter"]))
        for m in _matching_lines(path, _RESOURCE_LINE, limit)
    ]


def load_actions(path: str | os.PathLike[str], limit: int = MAX_ACTIONS) -> list[Action]:
    """Read ``pid, READ|WRITE, resource, cycle`` lines, skipping lines that do not match."""
    return [
        Action(
            pid=m["pid"].strip(),
            action=action_type_from_string(m["action"].strip()),
            resource=m["resource"].strip(),
            cycle=int(m["cycle"]),
        )
        for m in _matching_lines(path, _ACTION_LINE, limit)
    ]


def find_resource(resources: Iterable[_N], name: str) -> Optional[_N]:
    """Return the first resource with the given name, or None."""
    return next((r for r in resources if r.name == name), None)


def simulate_synchronization(
    resources: Sequence[SyncResource], actions: Sequence[SyncAction]
) -> list[SyncAction]:
    """Replay actions in order against exclusively held resources.

    All resources start free. A request takes a free resource or is blocked;
    a release frees the resource. Actions naming an unknown resource are left
    untouched. The actions are updated in place and returned as a list.
    """
    for resource in resources:
        resource.busy = False

    for action in actions:
        resource = find_resource(resources, action.resource)
        if resource is None:
            _log.warning("resource %s not found", action.resource)
            continue
        if action.kind == REQUEST:
            if resource.busy:
                action.valid = False
            else:
                resource.busy = True
                action.valid = True
        elif action.kind == RELEASE:
            resource.busy = False
            action.valid = True
    return list(actions)