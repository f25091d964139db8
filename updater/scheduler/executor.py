"""
Action Executor

Invokes action callbacks in an already computed dependency order.
"""

from typing import Any, Sequence
import logging

logger = logging.getLogger(__name__)


class ActionExecutor:
    """
    Runs ordered actions synchronously on the caller's thread.

    The executor:
    1. Invokes each callback exactly once, in the given order
    2. Skips actions without a callback
    3. Lets callback failures propagate; actions already run stay run and
       the remaining ones are not started

    Example usage:
        executor = ActionExecutor()
        executor.execute(graph.plan("orders"))
    """

    def execute(self, actions: Sequence[Any]) -> int:
        """
        Execute actions in order.

        Args:
            actions: Actions (anything with `callback` and `label`) in
                     dependency order

        Returns:
            Number of callbacks invoked

        Raises:
            Exception: Whatever a callback raises, unchanged
        """
        invoked = 0

        for action in actions:
            if action.callback is None:
                logger.debug(f"Action '{action.label}' has no callback, skipping")
                continue

            logger.debug(f"Executing action '{action.label}'")
            try:
                action.callback()
            except Exception as e:
                logger.error(
                    f"Action '{action.label}' failed after {invoked} of "
                    f"{len(actions)} actions ran: {e}",
                    exc_info=True
                )
                raise
            invoked += 1

        logger.debug(f"Completed execution of {invoked} callbacks")
        return invoked
