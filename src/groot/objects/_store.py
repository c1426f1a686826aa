"""Content-addressed object store.

Objects live one per file under ``objects/<digest>``. Each file holds a short
header naming the object kind and payload length, a NUL byte, then the payload:

    blob 11\\0hello world

The digest is the SHA-1 of the whole framed object, so identical payloads of the
same kind always share one file and a blob can never be mistaken for a commit.
"""

import hashlib
import os
import re
import tempfile
from collections.abc import Iterator
from pathlib import Path
from typing import Final

from structlog.typing import FilteringBoundLogger

from groot.exceptions import InvalidObjectError, ObjectNotFoundError
from groot.objects._models import ObjectKind, StoredObject
from groot.utils import create_null_logger

_DIGEST_PATTERN: Final = re.compile(r"^[0-9a-f]{40}$")


def is_digest(value: str) -> bool:
    """Check whether a string has the shape of an object digest.

    Args:
        value: Candidate digest string.

    Returns:
        True if the value is 40 lowercase hex characters.
    """
    return _DIGEST_PATTERN.fullmatch(value) is not None


def frame_object(data: bytes, kind: ObjectKind = ObjectKind.BLOB) -> bytes:
    """Prefix a payload with its kind header.

    Args:
        data: Payload bytes.
        kind: Object kind to record.

    Returns:
        The framed object as written to disk.
    """
    return f"{kind.value} {len(data)}\0".encode("ascii") + data


def compute_digest(data: bytes, kind: ObjectKind = ObjectKind.BLOB) -> str:
    """Compute the digest of a payload without storing it.

    Args:
        data: Payload bytes.
        kind: Object kind the payload will be stored as.

    Returns:
        Hex SHA-1 digest of the framed object.
    """
    return hashlib.sha1(frame_object(data, kind)).hexdigest()  # noqa: S324


def parse_object(digest: str, raw: bytes) -> StoredObject:
    """Split a framed object into kind and payload.

    Args:
        digest: Digest the bytes were read from (used in error messages).
        raw: Framed bytes as read from disk.

    Returns:
        The decoded StoredObject.

    Raises:
        InvalidObjectError: If the header is missing, unknown or disagrees
            with the payload length.
    """
    header, sep, data = raw.partition(b"\0")
    if not sep:
        msg = f"Object {digest} has no header"
        raise InvalidObjectError(msg, digest=digest)

    kind_text, _, length_text = header.decode("ascii", errors="replace").partition(" ")
    try:
        kind = ObjectKind(kind_text)
        length = int(length_text)
    except ValueError as e:
        msg = f"Object {digest} has a malformed header: {header!r}"
        raise InvalidObjectError(msg, digest=digest) from e

    if length != len(data):
        msg = (
            f"Object {digest} is truncated: header declares {length} bytes, "
            f"found {len(data)}"
        )
        raise InvalidObjectError(msg, digest=digest)

    return StoredObject(digest=digest, kind=kind, data=data)


class ObjectStore:
    """Persistent content-addressed storage for blobs and commits.

    Attributes:
        root: Directory holding one file per object.
    """

    __slots__: Final = ("_logger", "_root")
    _root: Path
    _logger: FilteringBoundLogger

    def __init__(
        self, root: Path, *, logger: FilteringBoundLogger | None = None
    ) -> None:
        self._root = root
        self._logger = logger if logger is not None else create_null_logger()

    @property
    def root(self) -> Path:
        """Directory holding the object files."""
        return self._root

    def _object_path(self, digest: str) -> Path:
        if not is_digest(digest):
            msg = f"Object not found: {digest}"
            raise ObjectNotFoundError(msg, digest=digest)
        return self._root / digest

    def put(self, data: bytes, kind: ObjectKind = ObjectKind.BLOB) -> str:
        """Store a payload and return its digest.

        Storing content that is already present is a no-op.

        Args:
            data: Payload bytes.
            kind: Object kind to record in the header.

        Returns:
            The object's digest.
        """
        framed = frame_object(data, kind)
        digest = hashlib.sha1(framed).hexdigest()  # noqa: S324
        path = self._root / digest

        if path.exists():
            self._logger.debug("object_exists", digest=digest, kind=kind.value)
            return digest

        self._root.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(dir=self._root, prefix=".tmp-")
        try:
            with os.fdopen(fd, "wb") as f:
                f.write(framed)
            os.replace(tmp_name, path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise

        self._logger.debug(
            "object_written", digest=digest, kind=kind.value, size=len(data)
        )
        return digest

    def read(self, digest: str) -> StoredObject:
        """Read and decode a stored object.

        Args:
            digest: Digest of the object.

        Returns:
            The decoded object with its kind.

        Raises:
            ObjectNotFoundError: If no object exists for the digest.
            InvalidObjectError: If the stored bytes are not a valid object.
        """
        path = self._object_path(digest)
        try:
            raw = path.read_bytes()
        except FileNotFoundError as e:
            msg = f"Object not found: {digest}"
            raise ObjectNotFoundError(msg, digest=digest) from e
        return parse_object(digest, raw)

    def get(self, digest: str, kind: ObjectKind | None = ObjectKind.BLOB) -> bytes:
        """Return the payload stored under a digest.

        Args:
            digest: Digest of the object.
            kind: Expected kind, or None to accept any kind.

        Returns:
            The payload bytes.

        Raises:
            ObjectNotFoundError: If no object exists for the digest.
            InvalidObjectError: If the object is malformed or of another kind.
        """
        obj = self.read(digest)
        if kind is not None and obj.kind is not kind:
            msg = f"Object {digest} is a {obj.kind.value}, expected a {kind.value}"
            raise InvalidObjectError(msg, digest=digest)
        return obj.data

    def contains(self, digest: str) -> bool:
        """Check whether an object exists for a digest."""
        return is_digest(digest) and (self._root / digest).is_file()

    def __contains__(self, digest: object) -> bool:
        return isinstance(digest, str) and self.contains(digest)

    def __iter__(self) -> Iterator[str]:
        if not self._root.is_dir():
            return
        for path in sorted(self._root.iterdir()):
            if path.is_file() and is_digest(path.name):
                yield path.name

    def __len__(self) -> int:
        return sum(1 for _ in self)
