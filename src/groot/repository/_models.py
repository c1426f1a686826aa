"""Repository models."""

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from groot.repository._repository import Repository


@dataclass(frozen=True, slots=True)
class InitResult:
    """Result of initializing a repository.

    Attributes:
        repository: The opened repository.
        created: False when HEAD and index already existed.
    """

    repository: "Repository"
    created: bool
