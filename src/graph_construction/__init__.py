"""
Helpers for constructing the directed graph analysed by the PageRank tool:
- the in-memory directed multigraph
- parsing adjacency-list lines (plain or MapReduce `[a, b]` output)
- reading a single file or a directory of part files.
"""

from src.graph_construction.adjacency_parser import (
    build_graph_from_lines,
    build_graph_from_path,
    read_adjacency_lines,
)
from src.graph_construction.directed_graph import DirectedGraph, Edge

__all__ = [
    "DirectedGraph",
    "Edge",
    "build_graph_from_lines",
    "build_graph_from_path",
    "read_adjacency_lines",
]
