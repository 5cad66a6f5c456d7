import os
import shutil
import tempfile
import unittest
from pathlib import Path

from src.graph_construction.adjacency_parser import (
    build_graph_from_lines,
    build_graph_from_path,
    clean_line,
    list_part_files,
    parse_line,
    read_adjacency_lines,
)


class TestParseLine(unittest.TestCase):
    def test_tab_delimited(self):
        self.assertEqual(parse_line("A\tB\tC"), ("A", ["B", "C"]))

    def test_mapreduce_bracket_form(self):
        self.assertEqual(parse_line("A\t[B, C]"), ("A", ["B", "C"]))

    def test_clean_line_strips_brackets_and_commas(self):
        cleaned = clean_line("A\t[B,C]")
        self.assertNotIn("[", cleaned)
        self.assertNotIn("]", cleaned)
        self.assertNotIn(",", cleaned)

    def test_blank_lines(self):
        self.assertIsNone(parse_line(""))
        self.assertIsNone(parse_line("   \t  "))
        self.assertIsNone(parse_line("[]"))

    def test_source_only(self):
        self.assertEqual(parse_line("D"), ("D", []))
        self.assertEqual(parse_line("D\t[]"), ("D", []))

    def test_empty_tokens_are_dropped(self):
        self.assertEqual(parse_line("A\t[B,,C]"), ("A", ["B", "C"]))
        self.assertEqual(parse_line("  A   B  "), ("A", ["B"]))


class TestBuildGraphFromLines(unittest.TestCase):
    def test_three_cycle(self):
        graph = build_graph_from_lines(["A\tB", "B\tC", "C\tA"])
        self.assertEqual(graph.nodes(), ["A", "B", "C"])
        self.assertEqual(graph.edge_count(), 3)
        self.assertEqual(graph.node_count(), 3)

    def test_isolated_node_is_registered(self):
        graph = build_graph_from_lines(["D"])
        self.assertEqual(graph.nodes(), ["D"])
        self.assertEqual(graph.edge_count(), 0)

    def test_blank_lines_are_skipped(self):
        graph = build_graph_from_lines(["", "A\tB", "   ", "B", ""])
        self.assertEqual(graph.nodes(), ["A", "B"])
        self.assertEqual(graph.edge_count(), 1)

    def test_duplicate_targets_make_parallel_edges(self):
        graph = build_graph_from_lines(["A\tB\tB"])
        self.assertEqual(graph.edge_count(), 2)
        self.assertEqual(graph.out_degree("A"), 2)

    def test_first_seen_order(self):
        graph = build_graph_from_lines(["B\tA", "A\tC", "C"])
        self.assertEqual(graph.sequence_number("B"), 0)
        self.assertEqual(graph.sequence_number("A"), 1)
        self.assertEqual(graph.sequence_number("C"), 2)

    def test_target_only_nodes_exist(self):
        graph = build_graph_from_lines(["A\tX\tY"])
        self.assertIn("X", graph)
        self.assertIn("Y", graph)
        self.assertEqual(graph.out_degree("X"), 0)


class TestReadAdjacencyLines(unittest.TestCase):
    def setUp(self):
        self.test_dir = Path(tempfile.mkdtemp(prefix="test_adjacency_parser_"))

    def tearDown(self):
        shutil.rmtree(self.test_dir)

    def test_single_file(self):
        path = self.test_dir / "graph.txt"
        path.write_text("A\tB\nB\tC\nC\tA\n", encoding="utf-8")
        lines = read_adjacency_lines(str(path))
        self.assertEqual(lines[:3], ["A\tB", "B\tC", "C\tA"])

        graph = build_graph_from_path(str(path))
        self.assertEqual(graph.node_count(), 3)
        self.assertEqual(graph.edge_count(), 3)

    def test_directory_reads_only_part_files(self):
        out_dir = self.test_dir / "mr-output"
        out_dir.mkdir()
        (out_dir / "part-00001").write_text("C\t[A]\n", encoding="utf-8")
        (out_dir / "part-00000").write_text("A\t[B, C]\nB\t[]\n", encoding="utf-8")
        (out_dir / "_SUCCESS").write_text("", encoding="utf-8")
        (out_dir / "notes.txt").write_text("X\tY\n", encoding="utf-8")
        (out_dir / "part-dir").mkdir()

        parts = list_part_files(str(out_dir))
        self.assertEqual(
            [os.path.basename(p) for p in parts],
            ["part-00000", "part-00001"],
        )

        graph = build_graph_from_path(str(out_dir))
        self.assertEqual(graph.nodes(), ["A", "B", "C"])
        self.assertEqual(graph.edge_count(), 3)
        self.assertNotIn("X", graph)

    def test_invalid_utf8_bytes_do_not_stop_parsing(self):
        path = self.test_dir / "latin1.txt"
        path.write_bytes(b"A\tB\nB\t\xe9\xff\nC\tA\n")
        graph = build_graph_from_path(str(path))
        self.assertEqual(graph.node_count(), 4)
        self.assertEqual(graph.edge_count(), 3)
        self.assertEqual(graph.out_neighbors("B"), ["\ufffd\ufffd"])
        self.assertEqual(graph.out_neighbors("C"), ["A"])

    def test_empty_directory(self):
        graph = build_graph_from_path(str(self.test_dir))
        self.assertEqual(graph.node_count(), 0)

    def test_missing_path_raises(self):
        with self.assertRaises(FileNotFoundError):
            read_adjacency_lines(str(self.test_dir / "does-not-exist"))


if __name__ == "__main__":
    unittest.main()
