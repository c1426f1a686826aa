"""Line-level diffing between file revisions."""

from groot.diff._lines import diff_lines, reconstruct
from groot.diff._models import DiffKind, DiffRun

__all__ = ["DiffKind", "DiffRun", "diff_lines", "reconstruct"]
