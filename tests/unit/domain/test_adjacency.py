"""Unit tests for AdjacencyScanner (single-pass overload grouping)."""

import unittest

from adjacent_overloads.domain.adjacency import AdjacencyScanner, SignatureBreak


def _scan(tokens: list) -> list[tuple[int, str]]:
    """Scan a body whose members are their own identity; return (index, name) pairs."""
    scanner = AdjacencyScanner(lambda member: member)
    return [(b.index, b.name) for b in scanner.scan(tokens)]


class TestAdjacencyScanner(unittest.TestCase):
    """Violations fire exactly where a closed run is reopened."""

    def test_empty_body(self) -> None:
        self.assertEqual(_scan([]), [])

    def test_distinct_and_null_tokens_are_clean(self) -> None:
        self.assertEqual(_scan(["a", None, "b", None, "c"]), [])

    def test_contiguous_runs_are_clean(self) -> None:
        """Runs of any length and count produce nothing."""
        body = ["a"] * 5 + ["b"] + ["c"] * 3 + [None, None] + ["d"] * 2
        self.assertEqual(_scan(body), [])

    def test_reopened_run_reports_the_reopening_member(self) -> None:
        self.assertEqual(_scan(["A", "A", "B", "A"]), [(3, "A")])

    def test_interleaved_runs_report_each_reopening(self) -> None:
        self.assertEqual(_scan(["A", "B", "A", "B"]), [(2, "A"), (3, "B")])

    def test_null_member_breaks_a_run(self) -> None:
        """[A, None, A] reports the second A; the null member itself is never reported."""
        self.assertEqual(_scan(["A", None, "A"]), [(2, "A")])

    def test_every_out_of_place_member_is_reported(self) -> None:
        self.assertEqual(
            _scan(["A", "B", "A", "C", "A", "A"]),
            [(2, "A"), (4, "A")],
        )

    def test_continuing_a_reopened_run_is_not_reported_again(self) -> None:
        self.assertEqual(_scan(["A", "B", "A", "A"]), [(2, "A")])

    def test_break_carries_the_node(self) -> None:
        nodes = [{"id": "x"}, {"id": "y"}, {"id": "x"}]
        scanner = AdjacencyScanner(lambda member: member["id"])
        breaks = scanner.scan(nodes)
        self.assertEqual(breaks, [SignatureBreak(nodes[2], "x", 2)])
        self.assertIs(breaks[0].node, nodes[2])

    def test_rescan_is_identical(self) -> None:
        body = ["A", "B", "A", None, "B", "C", "C", "A"]
        scanner = AdjacencyScanner(lambda member: member)
        self.assertEqual(scanner.scan(body), scanner.scan(body))

    def test_scan_does_not_mutate_the_body(self) -> None:
        body = ["A", "B", "A"]
        AdjacencyScanner(lambda member: member).scan(body)
        self.assertEqual(body, ["A", "B", "A"])

    def test_accepts_any_iterable(self) -> None:
        scanner = AdjacencyScanner(lambda member: member)
        breaks = scanner.scan(iter(["A", "B", "A"]))
        self.assertEqual([(b.index, b.name) for b in breaks], [(2, "A")])

    def test_name_is_text_of_non_string_identity(self) -> None:
        """Hashable identity objects report their str() as the name."""
        scanner = AdjacencyScanner(lambda member: member)
        breaks = scanner.scan([1, 2, 1])
        self.assertEqual(breaks[0].name, "1")
