"""
Callback Registry

Named callbacks that declarative graph definitions refer to by string.
"""

from typing import Dict
import logging

from .action import Callback

logger = logging.getLogger(__name__)


class CallbackRegistry:
    """
    Registry mapping callback names to callables.

    Example usage:
        registry = CallbackRegistry()
        registry.register("refresh_totals", refresh_totals)

        # A YAML action with `callback: refresh_totals` now resolves to it
        graph, actions = build_graph(config, registry)
    """

    def __init__(self):
        """Initialize empty registry"""
        self._callbacks: Dict[str, Callback] = {}
        logger.debug("Initialized CallbackRegistry")

    def register(self, name: str, callback: Callback) -> None:
        """
        Register a callback under a name.

        Args:
            name: Name used by graph definitions
            callback: Nullary callable
        """
        if name in self._callbacks:
            logger.warning(f"Overwriting existing registration for callback: {name}")

        self._callbacks[name] = callback
        logger.info(f"Registered callback: {name}")

    def get(self, name: str) -> Callback:
        """
        Look up a callback by name.

        Raises:
            ValueError: If name is not registered
        """
        if name not in self._callbacks:
            available = ", ".join(self._callbacks.keys())
            raise ValueError(
                f"Unknown callback: {name}. "
                f"Available callbacks: {available if available else 'none'}"
            )
        return self._callbacks[name]

    def list_names(self) -> list[str]:
        """
        List all registered callback names.

        Returns:
            Registered names in registration order
        """
        return list(self._callbacks.keys())

    def is_registered(self, name: str) -> bool:
        """
        Check if a callback name is registered.

        Args:
            name: Callback name to check

        Returns:
            True if name is registered, False otherwise
        """
        return name in self._callbacks
