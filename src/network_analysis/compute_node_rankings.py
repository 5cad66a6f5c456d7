from typing import Dict, List, Mapping, NamedTuple, Optional

from src.graph_construction.directed_graph import DirectedGraph


class RankingEntry(NamedTuple):
    node: str
    score: float
    sequence: int


def rank_scores(
    scores: Mapping[str, float],
    sequence: Mapping[str, int],
    top_n: Optional[int] = None,
) -> List[RankingEntry]:
    """
    Sort nodes by score, highest first.

    Ties keep first-seen order (lower sequence number first), so equal
    scores always come out in the same order for the same input.
    """
    entries = [RankingEntry(node, score, sequence[node]) for node, score in scores.items()]
    entries.sort(key=lambda e: (-e.score, e.sequence))
    if top_n is not None:
        return entries[:top_n]
    return entries


def rank_nodes(
    scores: Mapping[str, float],
    graph: DirectedGraph,
    top_n: Optional[int] = None,
) -> List[RankingEntry]:
    sequence = {node: graph.sequence_number(node) for node in scores}
    return rank_scores(scores, sequence, top_n=top_n)


def rank_positions(ranking: List[RankingEntry]) -> Dict[str, int]:
    """node -> 1-based position in the ranking."""
    return {entry.node: pos for pos, entry in enumerate(ranking, start=1)}
