"""
Updater

Dependency-triggered update scheduling: actions run in response to signals,
emit signals of their own, and every affected action runs once, in
dependency order.
"""

from .dag import (
    Action,
    UpdateGraph,
    UpdateGraphError,
    DuplicateActionError,
    CyclicDependencyError,
)

__all__ = [
    "Action",
    "UpdateGraph",
    "UpdateGraphError",
    "DuplicateActionError",
    "CyclicDependencyError",
]
