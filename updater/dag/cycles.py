"""
Cycle Diagnosis

Strongly connected component analysis (Tarjan's algorithm) used to report
which actions form cycles once a run has detected one.

Both functions take the node set plus a `successors` callable so they work
on any hashable node type with the graph's edge relation plugged in.
"""

from typing import Callable, Dict, Hashable, Iterable, Iterator, List, Set, Tuple, TypeVar
import logging

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=Hashable)


def strongly_connected_components(
    nodes: Iterable[T],
    successors: Callable[[T], Iterable[T]],
) -> List[List[T]]:
    """
    Partition nodes into strongly connected components.

    Tarjan's low-link algorithm driven by an explicit work stack, so graph
    depth is not limited by the interpreter's recursion limit.

    Args:
        nodes: All nodes to partition, visited in the given order
        successors: Returns the direct successors of a node

    Returns:
        Components in the order they are closed (sinks first)
    """
    index_of: Dict[T, int] = {}
    low_link: Dict[T, int] = {}
    stack: List[T] = []
    on_stack: Set[T] = set()
    components: List[List[T]] = []

    def open_node(node: T) -> Tuple[T, Iterator[T]]:
        index_of[node] = low_link[node] = len(index_of)
        stack.append(node)
        on_stack.add(node)
        return node, iter(successors(node))

    for root in nodes:
        if root in index_of:
            continue

        work = [open_node(root)]
        while work:
            node, children = work[-1]

            for child in children:
                if child not in index_of:
                    work.append(open_node(child))
                    break
                if child in on_stack:
                    low_link[node] = min(low_link[node], index_of[child])
            else:
                # All successors explored
                work.pop()
                if work:
                    parent = work[-1][0]
                    low_link[parent] = min(low_link[parent], low_link[node])

                if low_link[node] == index_of[node]:
                    component = []
                    while True:
                        member = stack.pop()
                        on_stack.discard(member)
                        component.append(member)
                        if member == node:
                            break
                    components.append(component)

    return components


def find_cycles(
    nodes: Iterable[T],
    successors: Callable[[T], Iterable[T]],
) -> List[List[T]]:
    """
    Return only the components that are cycles.

    Multi-member components are always cycles. A single node is a cycle
    only if it is its own successor; Tarjan alone cannot tell those apart
    from acyclic singletons, so the self-edge is tested explicitly.
    """
    cycles = []
    for component in strongly_connected_components(nodes, successors):
        if len(component) > 1:
            cycles.append(component)
        elif any(s == component[0] for s in successors(component[0])):
            cycles.append(component)

    logger.debug(f"Found {len(cycles)} cycle(s)")
    return cycles
