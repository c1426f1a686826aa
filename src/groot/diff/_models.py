"""Line diff models."""

from dataclasses import dataclass
from enum import StrEnum


class DiffKind(StrEnum):
    """Classification of a run of lines."""

    UNCHANGED = "unchanged"
    ADDED = "added"
    REMOVED = "removed"


@dataclass(frozen=True, slots=True)
class DiffRun:
    """A maximal span of lines sharing one classification.

    Attributes:
        kind: Whether the lines are unchanged, added or removed.
        lines: The lines, each with its original line ending.
    """

    kind: DiffKind
    lines: tuple[str, ...]

    @property
    def value(self) -> str:
        """The run's lines joined back into text."""
        return "".join(self.lines)
