"""
Update Action

Defines the unit of work scheduled by the update graph: an opaque callback
paired with the signal keys it emits once it has run.
"""

from dataclasses import dataclass
from typing import Any, Callable, Hashable, Optional, Tuple


Callback = Callable[[], Any]


@dataclass(frozen=True, eq=False)
class Action:
    """
    A registered unit of work.

    Actions compare and hash by identity: two actions with the same callback
    and emitted keys are still distinct registrations.

    Attributes:
        callback: Nullary callable invoked when the action runs (None = no-op)
        emits: Signal keys produced when the action runs, in caller order
        name: Optional label used in logs and cycle diagnostics

    Example usage:
        recompute = Action(callback=refresh_totals, emits=("totals",))
        graph.register(recompute, "orders", "discounts")
    """
    callback: Optional[Callback] = None
    emits: Tuple[Hashable, ...] = ()
    name: Optional[str] = None

    def __post_init__(self):
        # Freeze whatever iterable the caller passed
        object.__setattr__(self, "emits", tuple(self.emits))

    @classmethod
    def of(cls, callback: Optional[Callback], *emits: Hashable, name: Optional[str] = None) -> "Action":
        """Build an action from a callback and its emitted keys."""
        return cls(callback=callback, emits=emits, name=name)

    @property
    def label(self) -> str:
        """Human readable name for logs and error messages."""
        if self.name:
            return self.name
        callback_name = getattr(self.callback, "__name__", None)
        if callback_name and callback_name != "<lambda>":
            return callback_name
        return f"Action@{id(self):x}"

    def __repr__(self) -> str:
        return f"Action(name={self.label!r}, emits={list(self.emits)!r})"
