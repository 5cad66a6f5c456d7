from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Dict, List, Mapping, Optional

from src.graph_construction.directed_graph import DirectedGraph


# === THAM SỐ MẶC ĐỊNH ===

DEFAULT_JUMP_FACTOR = 0.15
DEFAULT_TOLERANCE = 1e-10
DEFAULT_MAX_ITERATIONS = 1000


class EngineState(str, Enum):
    INITIALIZED = "initialized"
    ITERATING = "iterating"
    CONVERGED = "converged"
    ITERATION_CAP = "iteration_cap"  # stopped by max_iterations, best vector kept


@dataclass(frozen=True)
class PageRankResult:
    scores: Mapping[str, float]
    iterations: int
    converged: bool
    delta: float


class PageRankEngine:
    """
    PageRank by power iteration over a DirectedGraph.

    `jump` is the random jump factor: the probability that the surfer
    teleports to a uniformly chosen node instead of following a link.
    One step is

        new(v) = jump / N + (1 - jump) * (sum_{u -> v} old(u) / out(u) + D / N)

    where D is the score held by dangling nodes (no out-links); their mass
    is spread uniformly over all nodes. Parallel edges each carry a share.

    Iteration stops when the L1 distance between two successive vectors
    drops below `tolerance`, or after `max_iterations` steps.
    """

    def __init__(
        self,
        graph: DirectedGraph,
        jump: float = DEFAULT_JUMP_FACTOR,
        tolerance: float = DEFAULT_TOLERANCE,
        max_iterations: int = DEFAULT_MAX_ITERATIONS,
    ):
        if not 0.0 <= jump <= 1.0:
            raise ValueError(f"jump factor must be in [0, 1], got {jump}")
        if tolerance <= 0:
            raise ValueError(f"tolerance must be positive, got {tolerance}")
        if max_iterations < 1:
            raise ValueError(f"max_iterations must be >= 1, got {max_iterations}")

        self.graph = graph
        self.jump = jump
        self.tolerance = tolerance
        self.max_iterations = max_iterations
        self.state = EngineState.INITIALIZED
        self._result: Optional[PageRankResult] = None

    def evaluate(self, verbose: bool = False) -> PageRankResult:
        if self._result is not None:
            return self._result

        nodes = self.graph.nodes()
        n = len(nodes)
        if n == 0:
            self.state = EngineState.CONVERGED
            self._result = PageRankResult(MappingProxyType({}), 0, True, 0.0)
            return self._result

        if verbose:
            print(f"--- Bắt đầu tính PageRank cho {n} node (jump={self.jump}) ---")

        index = {node: i for i, node in enumerate(nodes)}
        targets: List[List[int]] = [
            [index[t] for t in self.graph.out_neighbors(node)] for node in nodes
        ]
        follow = 1.0 - self.jump
        teleport = self.jump / n

        # Khởi tạo rank đều nhau
        rank = [1.0 / n] * n
        diff = 0.0
        iterations = 0
        converged = False
        self.state = EngineState.ITERATING

        while iterations < self.max_iterations:
            new_rank = [0.0] * n
            dangling_sum = 0.0

            for i in range(n):
                if not targets[i]:
                    dangling_sum += rank[i]
                    continue
                share = follow * rank[i] / len(targets[i])
                for j in targets[i]:
                    new_rank[j] += share

            base = teleport + follow * dangling_sum / n
            diff = 0.0
            for i in range(n):
                new_rank[i] += base
                diff += abs(new_rank[i] - rank[i])
            rank = new_rank
            iterations += 1

            if verbose:
                print(f"  > Iter {iterations}: diff={diff:.3e}")
            if diff < self.tolerance:
                converged = True
                break

        # Chuẩn hóa tổng = 1 (sai số số học)
        total = sum(rank)
        if total > 0:
            rank = [r / total for r in rank]

        if converged:
            self.state = EngineState.CONVERGED
            if verbose:
                print(f"  > Hội tụ sau {iterations} vòng lặp.")
        else:
            self.state = EngineState.ITERATION_CAP
            if verbose:
                print(f"⚠️  Chưa hội tụ sau {iterations} vòng lặp (diff={diff:.3e}), dùng vector hiện có.")

        scores = MappingProxyType({node: rank[index[node]] for node in nodes})
        self._result = PageRankResult(scores, iterations, converged, diff)
        return self._result

    @property
    def result(self) -> PageRankResult:
        if self._result is None:
            raise RuntimeError("PageRank has not been evaluated yet; call evaluate() first")
        return self._result

    @property
    def scores(self) -> Mapping[str, float]:
        return self.result.scores

    def score(self, node: str) -> float:
        return self.result.scores[node]


def compute_pagerank(
    graph: DirectedGraph,
    jump: float = DEFAULT_JUMP_FACTOR,
    tolerance: float = DEFAULT_TOLERANCE,
    max_iterations: int = DEFAULT_MAX_ITERATIONS,
    verbose: bool = False,
) -> Dict[str, float]:
    """
    PageRank bằng power iteration.
    Trả về dict node -> pagerank (tổng = 1); đồ thị rỗng cho dict rỗng.
    """
    engine = PageRankEngine(graph, jump=jump, tolerance=tolerance, max_iterations=max_iterations)
    return dict(engine.evaluate(verbose=verbose).scores)
