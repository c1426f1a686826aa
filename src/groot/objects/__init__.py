"""Content-addressed object storage.

Example:
    >>> from groot.objects import ObjectStore
    >>> store = ObjectStore(Path(".groot/objects"))
    >>> digest = store.put(b"hello")
    >>> store.get(digest)
    b'hello'
"""

from groot.objects._models import ObjectKind, StoredObject
from groot.objects._store import (
    ObjectStore,
    compute_digest,
    frame_object,
    is_digest,
    parse_object,
)

__all__ = [
    "ObjectKind",
    "ObjectStore",
    "StoredObject",
    "compute_digest",
    "frame_object",
    "is_digest",
    "parse_object",
]
