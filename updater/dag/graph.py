"""
Update Graph

Registers actions against the signals that trigger them, then for each
incoming update computes every transitively affected action, orders them
so each runs before anything it can trigger, and rejects cyclic updates
before any callback is invoked.
"""

from typing import Dict, FrozenSet, Hashable, Iterable, List, Optional
import logging

from .action import Action
from .cycles import find_cycles
from .errors import CyclicDependencyError, DuplicateActionError
from .node import Mark, Node
from ..scheduler.executor import ActionExecutor

logger = logging.getLogger(__name__)


class UpdateGraph:
    """
    Dependency-triggered update scheduler.

    The graph:
    1. Finds the nodes whose triggers intersect the incoming signals
    2. Follows emits -> triggers edges depth-first to collect everything
       they can affect, recording nodes in post-order
    3. Reverses the post-order into the execution order
    4. On a back edge, runs a full SCC pass and raises CyclicDependencyError
    5. Otherwise hands the order to the executor

    Traversal follows registration order everywhere, so the same graph and
    signals always give the same execution order.

    Example usage:
        graph = UpdateGraph()
        graph.register(Action.of(load_prices, "prices"), "tick")
        graph.register(Action.of(recompute_pnl), "prices")

        graph.run("tick")  # load_prices, then recompute_pnl
    """

    def __init__(self, executor: Optional[ActionExecutor] = None):
        """
        Initialize an empty graph.

        Args:
            executor: Executor used by run() (default: ActionExecutor())
        """
        self.executor = executor or ActionExecutor()
        self._nodes: List[Node] = []
        self._by_action: Dict[Action, Node] = {}
        self._by_signal: Dict[Hashable, List[Node]] = {}
        self._position: Dict[Node, int] = {}

    def __len__(self) -> int:
        return len(self._nodes)

    def __contains__(self, action: Action) -> bool:
        return action in self._by_action

    @property
    def actions(self) -> List[Action]:
        """Registered actions in registration order"""
        return [node.action for node in self._nodes]

    def register(self, action: Action, *triggers: Hashable) -> None:
        """
        Register an action to run whenever any of the trigger signals arrive.

        Args:
            action: Action to register
            *triggers: Signal keys that trigger the action (duplicates are
                       collapsed; none at all makes the action unreachable)

        Raises:
            DuplicateActionError: If this action object is already registered
        """
        if action in self._by_action:
            raise DuplicateActionError(action)

        node = Node(action=action, triggers=frozenset(triggers))

        self._position[node] = len(self._nodes)
        self._nodes.append(node)
        self._by_action[action] = node
        for signal in node.triggers:
            self._by_signal.setdefault(signal, []).append(node)

        logger.debug(
            f"Registered action '{action.label}': "
            f"triggers={sorted(map(repr, node.triggers))}, emits={list(action.emits)}"
        )

    def run(self, *signals: Hashable) -> None:
        """
        Run every action affected by the signals, in dependency order.

        Args:
            *signals: Incoming signal keys

        Raises:
            CyclicDependencyError: If the affected actions form a cycle;
                                   no callback has run in that case
            Exception: Whatever a callback raises; earlier actions stay run
        """
        order = self.plan(*signals)
        if not order:
            return

        self.executor.execute(order)

    def plan(self, *signals: Hashable) -> List[Action]:
        """
        Compute the execution order for the signals without running it.

        Args:
            *signals: Incoming signal keys

        Returns:
            Affected actions, each before every action it can trigger

        Raises:
            CyclicDependencyError: If the affected actions form a cycle
        """
        seeds = self._affected_by(signals)
        if not seeds:
            logger.debug(f"No actions affected by signals {list(signals)}")
            return []

        order = [node.action for node in self._order(seeds)]
        logger.debug(
            f"Signals {list(signals)} affect {len(order)} actions: "
            f"{[action.label for action in order]}"
        )
        return order

    def find_cycles(self) -> List[List[Action]]:
        """
        Find every cycle among the registered actions.

        Returns:
            One list of actions per cycle, in the order components are closed
        """
        return [
            [node.action for node in component]
            for component in find_cycles(self._nodes, self._successors)
        ]

    def dependents(self, action: Action) -> List[Action]:
        """
        Get the actions directly triggered by an action's emitted signals.

        Raises:
            KeyError: If the action is not registered
        """
        return [node.action for node in self._successors(self._node_for(action))]

    def triggers_of(self, action: Action) -> FrozenSet[Hashable]:
        """Get the trigger set an action was registered with"""
        return self._node_for(action).triggers

    def _node_for(self, action: Action) -> Node:
        try:
            return self._by_action[action]
        except KeyError:
            raise KeyError(f"Action '{action.label}' is not registered") from None

    def _affected_by(self, signals: Iterable[Hashable]) -> List[Node]:
        """Nodes whose triggers intersect the signals, in registration order"""
        affected = set()
        for signal in signals:
            affected.update(self._by_signal.get(signal, ()))
        return sorted(affected, key=self._position.__getitem__)

    def _successors(self, node: Node) -> List[Node]:
        return self._affected_by(node.emits)

    def _order(self, seeds: List[Node]) -> List[Node]:
        """
        Topologically order everything reachable from the seeds.

        Three-colour DFS with an explicit stack. Marks are scoped to this
        call, so repeated runs visit the same nodes again.

        Raises:
            CyclicDependencyError: If an in-progress node is reached again
        """
        marks: Dict[Node, Mark] = {}
        post_order: List[Node] = []

        for seed in seeds:
            if marks.get(seed, Mark.UNVISITED) is not Mark.UNVISITED:
                continue

            marks[seed] = Mark.IN_PROGRESS
            work = [(seed, iter(self._successors(seed)))]
            while work:
                node, children = work[-1]

                for child in children:
                    mark = marks.get(child, Mark.UNVISITED)
                    if mark is Mark.IN_PROGRESS:
                        self._raise_cycle(node, child)
                    if mark is Mark.UNVISITED:
                        marks[child] = Mark.IN_PROGRESS
                        work.append((child, iter(self._successors(child))))
                        break
                else:
                    work.pop()
                    marks[node] = Mark.DONE
                    post_order.append(node)

        # Post-order puts dependents first
        post_order.reverse()
        return post_order

    def _raise_cycle(self, node: Node, target: Node) -> None:
        logger.warning(
            f"Cycle detected: '{node.action.label}' triggers in-progress "
            f"action '{target.action.label}'"
        )
        cycles = self.find_cycles()
        logger.error(
            f"Rejecting update, {len(cycles)} cycle(s) in graph: "
            f"{[[action.label for action in cycle] for cycle in cycles]}"
        )
        raise CyclicDependencyError(cycles)
