from typing import List, TextIO

from src.network_analysis.analyze_graph import GraphAnalysis


def format_report(analysis: GraphAnalysis) -> List[str]:
    """
    Report lines: graph summary, then one `score<TAB>node` line per node in
    ranking order.
    """
    lines = [
        f"Number of components: {analysis.component_count}",
        f"Number of edges: {analysis.edge_count}",
        f"Number of nodes: {analysis.node_count}",
        f"Random jump factor: {analysis.jump}",
        "",
        "PageRank of nodes, in descending order:",
    ]
    for entry in analysis.ranking:
        lines.append(f"{entry.score!r}\t{entry.node}")
    return lines


def write_report(analysis: GraphAnalysis, out: TextIO) -> None:
    for line in format_report(analysis):
        out.write(line + "\n")
