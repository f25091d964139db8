"""
DAG Module

Update graph construction, ordering, and cycle diagnosis.
"""

from .action import Action
from .node import Node, Mark
from .errors import UpdateGraphError, DuplicateActionError, CyclicDependencyError
from .registry import CallbackRegistry
from .graph import UpdateGraph

__all__ = [
    "Action",
    "Node",
    "Mark",
    "UpdateGraphError",
    "DuplicateActionError",
    "CyclicDependencyError",
    "CallbackRegistry",
    "UpdateGraph",
]
