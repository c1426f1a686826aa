"""groot repository management.

Classes:
    Repository: Opens or creates a ``.groot/`` repository and exposes
        add, commit, log and show.

Models:
    InitResult: Result of Repository.init.

Example:
    >>> from groot.repository import Repository
    >>> repo = Repository.discover()
    >>> for entry in repo.log():
    ...     print(entry.digest, entry.message)
"""

from groot.repository._models import InitResult
from groot.repository._repository import Repository

__all__ = ["InitResult", "Repository"]
