import argparse
import os
import sys
from typing import List, Optional

from src.graph_construction.adjacency_parser import build_graph_from_path
from src.network_analysis.analyze_graph import analyze_graph
from src.network_analysis.compute_node_rankings import rank_positions
from src.network_analysis.compute_pagerank import DEFAULT_JUMP_FACTOR
from src.network_analysis.report import write_report


def jump_factor(value: str) -> float:
    try:
        jump = float(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"không phải số thực: {value!r}")
    if not 0.0 <= jump <= 1.0:
        raise argparse.ArgumentTypeError(f"random jump factor phải nằm trong [0, 1], nhận được {jump}")
    return jump


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sequential-pagerank",
        description=(
            "Compute PageRank for a graph given as an adjacency list "
            "(one line per node: source id followed by its link targets)."
        ),
    )
    parser.add_argument(
        "-input",
        "--input",
        dest="input",
        metavar="path",
        help="input path: một file, hoặc thư mục chứa các file part-*",
    )
    parser.add_argument(
        "-output",
        "--output",
        dest="output",
        metavar="path",
        help="output path (mặc định: in báo cáo ra stdout)",
    )
    parser.add_argument(
        "-jump",
        "--jump",
        dest="jump",
        metavar="val",
        type=jump_factor,
        default=DEFAULT_JUMP_FACTOR,
        help=f"random jump factor (mặc định: {DEFAULT_JUMP_FACTOR})",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    raw_args = sys.argv[1:] if argv is None else argv
    parser = build_parser()
    args = parser.parse_args(raw_args)

    if not args.input:
        print(f"args: {raw_args}")
        parser.print_help(sys.stdout)
        return -1

    # Khi báo cáo in ra stdout thì không in tiến trình để tránh lẫn vào báo cáo
    verbose = args.output is not None

    try:
        graph = build_graph_from_path(args.input, verbose=verbose)
    except FileNotFoundError as e:
        print(f"❌ Thiếu file đầu vào: {e}")
        return 1
    except OSError as e:
        print(f"❌ Không đọc được input: {e}")
        return 1

    analysis = analyze_graph(graph, jump=args.jump, verbose=verbose)

    if args.output is None:
        write_report(analysis, sys.stdout)
        return 0

    try:
        out_dir = os.path.dirname(args.output)
        if out_dir:
            os.makedirs(out_dir, exist_ok=True)
        with open(args.output, "w", encoding="utf-8") as f:
            write_report(analysis, f)
    except OSError as e:
        print(f"❌ Không ghi được output: {e}")
        return 1

    print(f"✅ Đã ghi PageRank cho {analysis.node_count} node.")
    print(f"   File output: {args.output}")

    top10 = list(analysis.ranking[:10])
    positions = rank_positions(top10)
    print("\nTop 10 node theo PageRank:")
    for entry in top10:
        print(f"  #{positions[entry.node]}. {entry.node}: {entry.score:.6f}")
    return 0


if __name__ == "__main__":
    print("--- 🚀 Tính PageRank tuần tự cho đồ thị adjacency list ---", file=sys.stderr)
    sys.exit(main())
