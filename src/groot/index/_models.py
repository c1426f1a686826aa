"""Staging index models."""

from typing import Annotated, ClassVar

from pydantic import BaseModel, ConfigDict, StringConstraints, TypeAdapter

Digest = Annotated[str, StringConstraints(pattern=r"^[0-9a-f]{40}$")]
"""A 40-character lowercase hex object digest."""


class StagedEntry(BaseModel):
    """A file queued for the next commit.

    Attributes:
        path: Worktree-relative POSIX path of the file.
        hash: Digest of the blob holding the file content.
    """

    model_config: ClassVar[ConfigDict] = ConfigDict(
        frozen=True, extra="forbid", strict=True
    )

    path: Annotated[str, StringConstraints(min_length=1)]
    hash: Digest


STAGED_ENTRIES: TypeAdapter[list[StagedEntry]] = TypeAdapter(list[StagedEntry])
