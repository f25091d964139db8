"""
Update Graph Errors

Errors raised by graph registration and run ordering.
"""

from typing import List, Sequence

from .action import Action


class UpdateGraphError(ValueError):
    """Base class for update graph failures"""


class DuplicateActionError(UpdateGraphError):
    """Raised when the same action object is registered twice"""

    def __init__(self, action: Action):
        self.action = action
        super().__init__(f"Action '{action.label}' is already registered")


class CyclicDependencyError(UpdateGraphError):
    """
    Raised when the actions affected by an update form a cycle.

    Attributes:
        components: Every cycle found in the registered graph, each a list
                    of the actions in one strongly connected component
    """

    def __init__(self, components: Sequence[Sequence[Action]]):
        self.components: List[List[Action]] = [list(c) for c in components]
        cycles = "; ".join(
            "{" + ", ".join(action.label for action in component) + "}"
            for component in self.components
        )
        super().__init__(
            f"The given updates would cause a cyclic update. "
            f"Cycles: {cycles if cycles else 'none found'}"
        )
