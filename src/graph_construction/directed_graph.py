from typing import Dict, Iterator, List, NamedTuple, Set


class Edge(NamedTuple):
    source: str
    target: str


class DirectedGraph:
    """
    Directed multigraph kept as adjacency lists:
      - nodes in first-insertion order, each with a sequence number,
      - every edge record kept (parallel edges are not merged),
      - out/in neighbour lists per node (with repetitions).

    The graph is built once by the parser and then only read.
    """

    def __init__(self):
        self._sequence: Dict[str, int] = {}
        self._out: Dict[str, List[str]] = {}
        self._in: Dict[str, List[str]] = {}
        self._edges: List[Edge] = []

    # ---------- BUILD ----------

    def add_node(self, node: str) -> int:
        """Register a node (idempotent). Returns its sequence number."""
        seq = self._sequence.get(node)
        if seq is None:
            seq = len(self._sequence)
            self._sequence[node] = seq
            self._out[node] = []
            self._in[node] = []
        return seq

    def add_edge(self, source: str, target: str) -> Edge:
        self.add_node(source)
        self.add_node(target)
        edge = Edge(source, target)
        self._edges.append(edge)
        self._out[source].append(target)
        self._in[target].append(source)
        return edge

    # ---------- QUERY ----------

    def nodes(self) -> List[str]:
        return list(self._sequence.keys())

    def edges(self) -> List[Edge]:
        return list(self._edges)

    def out_neighbors(self, node: str) -> List[str]:
        return list(self._out[node])

    def in_neighbors(self, node: str) -> List[str]:
        return list(self._in[node])

    def neighbors(self, node: str) -> Set[str]:
        """Neighbours when edge direction is ignored (parallel edges collapse)."""
        return set(self._out[node]) | set(self._in[node])

    def out_degree(self, node: str) -> int:
        return len(self._out[node])

    def in_degree(self, node: str) -> int:
        return len(self._in[node])

    def sequence_number(self, node: str) -> int:
        return self._sequence[node]

    def node_count(self) -> int:
        return len(self._sequence)

    def edge_count(self) -> int:
        return len(self._edges)

    def __contains__(self, node: object) -> bool:
        return node in self._sequence

    def __iter__(self) -> Iterator[str]:
        return iter(self._sequence)

    def __len__(self) -> int:
        return len(self._sequence)

    def __repr__(self) -> str:
        return f"DirectedGraph(nodes={self.node_count()}, edges={self.edge_count()})"
