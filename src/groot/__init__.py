"""groot: a minimal content-addressed version control system.

Files are stored as content-addressed blobs, staged in an index and recorded
in a linear chain of commits whose per-file line diffs can be shown.

Example:
    >>> from groot import Repository
    >>> repo = Repository.init().repository
    >>> entry = repo.add(Path("a.txt"))
    >>> digest = repo.commit("Add a.txt")
"""

from groot.repository import InitResult, Repository

__all__ = ["InitResult", "Repository"]
