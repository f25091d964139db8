"""
Graph Node Model

Internal wrapper binding a registered action to the signal keys that
trigger it, plus the DFS bookkeeping marks used while ordering a run.
"""

from dataclasses import dataclass
from enum import Enum
from typing import FrozenSet, Hashable

from .action import Action


class Mark(Enum):
    """DFS visitation state of a node within a single run"""
    UNVISITED = "unvisited"
    IN_PROGRESS = "in_progress"
    DONE = "done"


@dataclass(frozen=True, eq=False)
class Node:
    """
    One registered action and its trigger set.

    A node is initially affected by an update when any incoming signal is
    in `triggers`. Node A has an edge to node B when A's action emits a key
    in B's triggers; this includes A itself.

    Marks are not stored here: each run keeps its own Node -> Mark map so a
    node ordered in one run is visited again in the next.
    """
    action: Action
    triggers: FrozenSet[Hashable]

    @property
    def emits(self) -> tuple:
        return self.action.emits

    def __repr__(self) -> str:
        return f"Node({self.action.label!r}, triggers={sorted(map(repr, self.triggers))})"
