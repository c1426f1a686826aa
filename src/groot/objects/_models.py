"""Object store models."""

from dataclasses import dataclass
from enum import StrEnum


class ObjectKind(StrEnum):
    """Kind discriminator written into every stored object header."""

    BLOB = "blob"
    COMMIT = "commit"


@dataclass(frozen=True, slots=True)
class StoredObject:
    """A decoded object read back from the store.

    Attributes:
        digest: The object's content digest.
        kind: Whether the payload is a file blob or a serialized commit.
        data: The payload bytes, header stripped.
    """

    digest: str
    kind: ObjectKind
    data: bytes
