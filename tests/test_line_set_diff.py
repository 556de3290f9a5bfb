"""Tests for the line set difference engine."""

from textdiff.core.diff.line_set_diff import LineSetDiffEngine, get_differences


class TestEmptyInputs:
    def test_both_empty(self):
        assert get_differences([], []) == []

    def test_empty_left_returns_right_with_duplicates(self):
        right = ["b", "a", "b", "b"]
        assert get_differences([], right) == ["b", "a", "b", "b"]

    def test_empty_right_returns_left_with_duplicates(self):
        left = ["x", "x", "y"]
        assert get_differences(left, []) == ["x", "x", "y"]

    def test_short_circuit_returns_a_copy(self):
        left = ["a", "b"]
        result = get_differences(left, [])
        result.append("c")
        assert left == ["a", "b"]


class TestGeneralCase:
    def test_identical_inputs_have_no_differences(self):
        lines = ["one", "two", "two", "three"]
        assert get_differences(lines, list(lines)) == []

    def test_same_lines_in_different_order(self):
        assert get_differences(["a", "b", "c"], ["c", "a", "b"]) == []

    def test_left_duplicates_found_in_right_are_all_skipped(self):
        assert get_differences(["x", "y", "x"], ["x"]) == ["y"]

    def test_disjoint_inputs(self):
        left = ["a", "b", "a"]
        right = ["c", "d", "c", "e"]
        assert get_differences(left, right) == ["a", "b", "a", "c", "d", "e"]

    def test_left_only_lines_keep_duplicates(self):
        assert get_differences(["z", "z", "k"], ["k"]) == ["z", "z"]

    def test_right_only_lines_are_deduplicated(self):
        assert get_differences(["k"], ["k", "q", "q", "r", "q"]) == ["q", "r"]

    def test_left_only_lines_come_first(self):
        assert get_differences(["shared", "left"], ["right", "shared"]) == ["left", "right"]

    def test_comparison_is_exact(self):
        left = ["Line", "line ", "line"]
        right = ["line"]
        assert get_differences(left, right) == ["Line", "line "]

    def test_empty_strings_are_lines(self):
        assert get_differences(["", "a"], ["a"]) == [""]
        assert get_differences(["a"], ["a", "", ""]) == [""]

    def test_inputs_are_not_modified(self):
        left = ["a", "b"]
        right = ["b", "c"]
        get_differences(left, right)
        assert left == ["a", "b"]
        assert right == ["b", "c"]

    def test_accepts_tuples(self):
        assert get_differences(("a", "b"), ("b",)) == ["a"]


class TestCompare:
    def test_counts(self):
        result = LineSetDiffEngine().compare(["a", "b", "a", "c"], ["c", "d", "d"])

        assert result.lines == ["a", "b", "a", "d"]
        assert result.left_only_count == 3
        assert result.right_only_count == 1
        assert result.left_line_count == 4
        assert result.right_line_count == 3
        assert result.total_differences == 4
        assert not result.is_identical

    def test_identical(self):
        result = LineSetDiffEngine().compare(["a"], ["a"])

        assert result.is_identical
        assert result.summary() == "No differences"

    def test_empty_left_counts_everything_as_right_only(self):
        result = LineSetDiffEngine().compare([], ["a", "a"])

        assert result.lines == ["a", "a"]
        assert result.left_only_count == 0
        assert result.right_only_count == 2

    def test_summary_mentions_both_sides(self):
        result = LineSetDiffEngine().compare(["a", "b"], ["b", "c"])
        assert result.summary() == "2 different line(s): 1 only in first, 1 only in second"

    def test_get_differences_matches_compare(self):
        engine = LineSetDiffEngine()
        left = ["p", "q", "p", "s"]
        right = ["s", "t", "t"]
        assert engine.get_differences(left, right) == engine.compare(left, right).lines
