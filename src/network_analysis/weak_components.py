from collections import deque
from typing import FrozenSet, List, Set

from src.graph_construction.directed_graph import DirectedGraph


def weak_components(graph: DirectedGraph) -> List[FrozenSet[str]]:
    """
    Weakly connected components: edge a -> b also links b to a.

    Nodes are visited in insertion order and every unvisited node starts a
    BFS, so the components come out ordered by their first node.
    """
    visited: Set[str] = set()
    components: List[FrozenSet[str]] = []

    for node in graph.nodes():
        if node in visited:
            continue
        comp: Set[str] = set()
        queue = deque([node])
        visited.add(node)
        while queue:
            u = queue.popleft()
            comp.add(u)
            for v in graph.neighbors(u):
                if v not in visited:
                    visited.add(v)
                    queue.append(v)
        components.append(frozenset(comp))

    return components
