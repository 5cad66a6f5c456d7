from dataclasses import dataclass
from typing import FrozenSet, Tuple

from src.graph_construction.directed_graph import DirectedGraph
from src.network_analysis.compute_node_rankings import RankingEntry, rank_nodes
from src.network_analysis.compute_pagerank import (
    DEFAULT_JUMP_FACTOR,
    DEFAULT_MAX_ITERATIONS,
    DEFAULT_TOLERANCE,
    PageRankEngine,
)
from src.network_analysis.weak_components import weak_components


@dataclass(frozen=True)
class GraphAnalysis:
    """Everything the report needs, computed from one graph."""

    components: Tuple[FrozenSet[str], ...]
    edge_count: int
    node_count: int
    jump: float
    ranking: Tuple[RankingEntry, ...]
    iterations: int
    converged: bool

    @property
    def component_count(self) -> int:
        return len(self.components)


def analyze_graph(
    graph: DirectedGraph,
    jump: float = DEFAULT_JUMP_FACTOR,
    tolerance: float = DEFAULT_TOLERANCE,
    max_iterations: int = DEFAULT_MAX_ITERATIONS,
    verbose: bool = False,
) -> GraphAnalysis:
    """
    Run components + PageRank + ranking over an already built graph.

    The graph is only read here.
    """
    components = weak_components(graph)
    if verbose:
        print(f"  > Số thành phần liên thông yếu: {len(components)}")

    engine = PageRankEngine(graph, jump=jump, tolerance=tolerance, max_iterations=max_iterations)
    result = engine.evaluate(verbose=verbose)
    ranking = rank_nodes(result.scores, graph)

    return GraphAnalysis(
        components=tuple(components),
        edge_count=graph.edge_count(),
        node_count=graph.node_count(),
        jump=jump,
        ranking=tuple(ranking),
        iterations=result.iterations,
        converged=result.converged,
    )
