"""Whole-line diffing."""

from difflib import SequenceMatcher

from groot.diff._models import DiffKind, DiffRun


def _append(runs: list[DiffRun], kind: DiffKind, lines: list[str]) -> None:
    if not lines:
        return
    if runs and runs[-1].kind is kind:
        runs[-1] = DiffRun(kind=kind, lines=runs[-1].lines + tuple(lines))
    else:
        runs.append(DiffRun(kind=kind, lines=tuple(lines)))


def diff_lines(before: str, after: str) -> list[DiffRun]:
    """Compute a line diff between two texts.

    Every line of ``before`` appears exactly once in an unchanged or removed
    run, and every line of ``after`` exactly once in an unchanged or added run,
    both in their original order. A replaced block is reported as its removed
    run followed by its added run.

    Args:
        before: Prior content.
        after: Current content.

    Returns:
        Runs in document order, adjacent runs never sharing a kind.

    Example:
        >>> [(r.kind.value, r.value) for r in diff_lines("a\\nb", "a\\nc")]
        [('unchanged', 'a\\n'), ('removed', 'b'), ('added', 'c')]
    """
    old = before.splitlines(keepends=True)
    new = after.splitlines(keepends=True)
    matcher = SequenceMatcher(None, old, new, autojunk=False)

    runs: list[DiffRun] = []
    for tag, i1, i2, j1, j2 in matcher.get_opcodes():
        if tag == "equal":
            _append(runs, DiffKind.UNCHANGED, old[i1:i2])
        elif tag == "delete":
            _append(runs, DiffKind.REMOVED, old[i1:i2])
        elif tag == "insert":
            _append(runs, DiffKind.ADDED, new[j1:j2])
        else:
            _append(runs, DiffKind.REMOVED, old[i1:i2])
            _append(runs, DiffKind.ADDED, new[j1:j2])
    return runs


def reconstruct(runs: list[DiffRun]) -> tuple[str, str]:
    """Rebuild the two inputs of :func:`diff_lines` from its runs.

    Args:
        runs: Runs produced by diff_lines.

    Returns:
        Tuple of (before, after).
    """
    before = "".join(r.value for r in runs if r.kind is not DiffKind.ADDED)
    after = "".join(r.value for r in runs if r.kind is not DiffKind.REMOVED)
    return before, after
