"""Tests for whole-line diffing."""

import pytest

from groot.diff import DiffKind, DiffRun, diff_lines, reconstruct


def runs_of(before: str, after: str) -> list[tuple[str, str]]:
    return [(run.kind.value, run.value) for run in diff_lines(before, after)]


class TestDiffLines:
    def test_replaced_last_line(self) -> None:
        assert runs_of("hello\nworld\n", "hello\nmoon\n") == [
            ("unchanged", "hello\n"),
            ("removed", "world\n"),
            ("added", "moon\n"),
        ]

    def test_identical_texts(self) -> None:
        assert runs_of("a\nb\n", "a\nb\n") == [("unchanged", "a\nb\n")]

    def test_both_empty(self) -> None:
        assert diff_lines("", "") == []

    def test_from_empty(self) -> None:
        assert runs_of("", "a\nb\n") == [("added", "a\nb\n")]

    def test_to_empty(self) -> None:
        assert runs_of("a\nb\n", "") == [("removed", "a\nb\n")]

    def test_insert_in_middle(self) -> None:
        assert runs_of("a\nc\n", "a\nb\nc\n") == [
            ("unchanged", "a\n"),
            ("added", "b\n"),
            ("unchanged", "c\n"),
        ]

    def test_delete_in_middle(self) -> None:
        assert runs_of("a\nb\nc\n", "a\nc\n") == [
            ("unchanged", "a\n"),
            ("removed", "b\n"),
            ("unchanged", "c\n"),
        ]

    def test_missing_trailing_newline_is_a_change(self) -> None:
        assert runs_of("a\nb", "a\nb\n") == [
            ("unchanged", "a\n"),
            ("removed", "b"),
            ("added", "b\n"),
        ]

    def test_runs_keep_individual_lines(self) -> None:
        runs = diff_lines("", "x\ny\n")

        assert runs == [DiffRun(kind=DiffKind.ADDED, lines=("x\n", "y\n"))]

    def test_adjacent_runs_never_share_kind(self) -> None:
        runs = diff_lines("a\nb\nc\nd\n", "x\nb\ny\nz\n")

        kinds = [run.kind for run in runs]
        assert all(a is not b for a, b in zip(kinds, kinds[1:], strict=False))

    def test_no_empty_runs(self) -> None:
        runs = diff_lines("a\nb\nc\n", "c\nb\na\n")

        assert all(run.lines for run in runs)


class TestReconstruct:
    @pytest.mark.parametrize(
        ("before", "after"),
        [
            ("hello\nworld\n", "hello\nmoon\n"),
            ("", "new\n"),
            ("old\n", ""),
            ("a\r\nb\r\n", "a\r\nc\r\n"),
            ("no newline", "no newline at all"),
        ],
    )
    def test_rebuilds_both_inputs(self, before: str, after: str) -> None:
        assert reconstruct(diff_lines(before, after)) == (before, after)
