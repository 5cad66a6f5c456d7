import os
import re
from typing import Iterable, List, Optional, Tuple

from tqdm import tqdm

from src.common.config_paths import PART_FILE_PREFIX
from src.graph_construction.directed_graph import DirectedGraph


_WHITESPACE = re.compile(r"\s+")


def clean_line(line: str) -> str:
    """
    Normalize one adjacency-list line.

    MapReduce jobs write lines like `A\t[B, C]`: brackets are dropped and
    commas become spaces so that the line splits on whitespace only.
    """
    return line.replace("[", "").replace("]", "").replace(",", " ")


def parse_line(line: str) -> Optional[Tuple[str, List[str]]]:
    """
    Split a line into (source, targets).

    Returns None for blank lines. Empty tokens left over after cleanup are
    dropped without complaint.
    """
    tokens = [t for t in _WHITESPACE.split(clean_line(line).strip()) if t]
    if not tokens:
        return None
    return tokens[0], tokens[1:]


def build_graph_from_lines(lines: Iterable[str], verbose: bool = False) -> DirectedGraph:
    """
    Build the directed multigraph from adjacency-list lines.

    The first token of a line is the source node, the rest are link targets.
    A line with only a source still registers that node. Every (source,
    target) pair adds a new edge, duplicates included.
    """
    graph = DirectedGraph()
    skipped = 0
    for line in lines:
        parsed = parse_line(line)
        if parsed is None:
            skipped += 1
            continue
        source, targets = parsed
        graph.add_node(source)
        for target in targets:
            graph.add_edge(source, target)

    if verbose:
        print(f"  > Số dòng trống bỏ qua: {skipped}")
        print(f"  > Số node: {graph.node_count()}, số cạnh: {graph.edge_count()}")
    return graph


def list_part_files(directory: str) -> List[str]:
    """Files in `directory` whose name starts with the part prefix, sorted by name."""
    names = sorted(
        name
        for name in os.listdir(directory)
        if name.startswith(PART_FILE_PREFIX) and os.path.isfile(os.path.join(directory, name))
    )
    return [os.path.join(directory, name) for name in names]


# Byte lỗi (không phải UTF-8) được thay bằng U+FFFD, dòng vẫn được đọc
def _read_lines(path: str) -> List[str]:
    with open(path, "r", encoding="utf-8", errors="replace") as f:
        return f.read().split("\n")


def read_adjacency_lines(path: str, verbose: bool = False) -> List[str]:
    """
    Read raw lines from a single file, or from every part file of a directory.

    Raises:
        FileNotFoundError: if `path` does not exist.
    """
    if not os.path.exists(path):
        raise FileNotFoundError(path)

    if not os.path.isdir(path):
        if verbose:
            print(f"Đang đọc adjacency list từ: {path}")
        return _read_lines(path)

    part_files = list_part_files(path)
    if verbose:
        print(f"Đang đọc {len(part_files)} part file từ thư mục: {path}")

    lines: List[str] = []
    for part in tqdm(part_files, desc="Reading part files", unit="file", disable=not verbose):
        lines.extend(_read_lines(part))
    return lines


def build_graph_from_path(path: str, verbose: bool = False) -> DirectedGraph:
    lines = read_adjacency_lines(path, verbose=verbose)
    return build_graph_from_lines(lines, verbose=verbose)
