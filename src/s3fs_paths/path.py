"""
S3Path - immutable hierarchical path over a bucket and object key.

An S3Path is an optional bucket name plus an ordered tuple of non-empty
segments. A path with a bucket is absolute ("/bucket/a/b"); one without is
relative ("a/b") and only meaningful once resolved against an absolute
base. Keys are flat in the store, so "." and ".." are ordinary segments
and normalize() is the identity.

The only mutable state is the attribute cache, which the store-access
layer fills in. It is guarded by its own lock and never takes part in
equality, hashing or ordering.
"""
from __future__ import annotations

import functools
import logging
import threading
from typing import Any, Iterable, Iterator, Optional, Tuple, Union

from .errors import (
    BucketMismatch,
    IllegalRelative,
    IllegalState,
    IndexOutOfRange,
    InvalidPath,
    NotAncestor,
    TypeMismatch,
    Unsupported,
)
from .parts import PATH_SEPARATOR, join_parts, key_parts, parse_path
from .storage.uri import format_s3_uri, parse_s3_uri

__all__ = ["S3Path"]

logger = logging.getLogger(__name__)


@functools.total_ordering
class S3Path:
    """
    Immutable path value for an S3 location.

    Construction forms:
    - S3Path(bucket, parts): canonical; parts are normalized (separators
      stripped, empty segments dropped)
    - S3Path.parse("/bucket/key", *more): textual form
    - S3Path.of(bucket, *parts): bucket plus varargs
    - S3Path.from_uri("s3://bucket/key")

    Examples:
        >>> p = S3Path.parse("/bucket/a/b")
        >>> p.bucket, p.parts
        ('bucket', ('a', 'b'))
        >>> str(p.get_parent())
        '/bucket/a'
        >>> p.to_uri()
        's3://bucket/a/b'
    """

    __slots__ = ("_bucket", "_parts", "_attributes", "_lock")

    def __init__(self, bucket: Optional[str] = None, parts: Iterable[Optional[str]] = ()) -> None:
        if isinstance(parts, str):
            raise TypeError("parts must be an iterable of segments, not a str; use S3Path.parse()")
        if bucket is not None and PATH_SEPARATOR in bucket:
            raise InvalidPath(f"bucket name cannot contain '{PATH_SEPARATOR}': {bucket!r}", path=bucket)

        object.__setattr__(self, "_bucket", bucket or None)
        object.__setattr__(self, "_parts", key_parts(parts))
        object.__setattr__(self, "_attributes", None)
        object.__setattr__(self, "_lock", threading.Lock())

    @classmethod
    def parse(cls, first: str, *more: str) -> "S3Path":
        """
        Build a path from its textual form.

        Args:
            first: "/{bucket}", "/{bucket}/{key}" or a relative "{key}"
            more: Further segments, each split on the separator

        Raises:
            InvalidPath: If an absolute path has a missing or empty bucket
        """
        bucket, parts = parse_path(first, *more)
        return cls(bucket, parts)

    @classmethod
    def of(cls, bucket: Optional[str], *parts: str) -> "S3Path":
        """Build a path from a bucket and individual segments."""
        return cls(bucket, parts)

    @classmethod
    def from_uri(cls, uri: str) -> "S3Path":
        """Build an absolute path from an s3://bucket/key URI."""
        parsed = parse_s3_uri(uri)
        return cls(parsed.bucket, parsed.key.split(PATH_SEPARATOR))

    def __setattr__(self, name: str, value: Any) -> None:
        if name == "file_attributes":
            object.__setattr__(self, name, value)
            return
        raise AttributeError(f"S3Path is immutable; cannot set {name!r}")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"S3Path is immutable; cannot delete {name!r}")

    def __reduce__(self):
        return (type(self), (self._bucket, self._parts))

    # ~ accessors

    @property
    def bucket(self) -> Optional[str]:
        return self._bucket

    @property
    def parts(self) -> Tuple[str, ...]:
        return self._parts

    @property
    def key(self) -> str:
        """
        Object key without the bucket and without a final slash.

        Note: a trailing slash must be appended by the store layer when
        saving a directory marker.
        """
        return join_parts(self._parts)

    @property
    def name(self) -> str:
        """Last segment, or the bucket name for a bucket root."""
        if self._parts:
            return self._parts[-1]
        return self._bucket or ""

    @property
    def file_attributes(self) -> Optional[Any]:
        """Cached attributes set by the store-access layer, if any."""
        with self._lock:
            return self._attributes

    @file_attributes.setter
    def file_attributes(self, attributes: Optional[Any]) -> None:
        with self._lock:
            object.__setattr__(self, "_attributes", attributes)
        logger.debug(f"Attribute cache {'set' if attributes is not None else 'cleared'} for {self}")

    def clear_file_attributes(self) -> None:
        self.file_attributes = None

    # ~ hierarchy

    def is_absolute(self) -> bool:
        return self._bucket is not None

    def get_root(self) -> Optional["S3Path"]:
        if self.is_absolute():
            return S3Path(self._bucket)
        return None

    def get_file_name(self) -> "S3Path":
        """
        Last segment as a relative path.

        A bucket root has no key, so its bucket name stands in as the file
        name.
        """
        if self._parts:
            return S3Path(None, self._parts[-1:])
        return S3Path(None, (self._bucket,))

    def get_parent(self) -> Optional["S3Path"]:
        # the bucket is not one of the parts
        if not self._parts:
            return None
        if len(self._parts) == 1 and self._bucket is None:
            return None
        return S3Path(self._bucket, self._parts[:-1])

    def get_name_count(self) -> int:
        return len(self._parts)

    def get_name(self, index: int) -> "S3Path":
        if not 0 <= index < len(self._parts):
            raise IndexOutOfRange(
                f"Name index {index} out of range for {self!r} with {len(self._parts)} segments"
            )
        return S3Path(None, (self._parts[index],))

    def subpath(self, begin: int, end: int) -> "S3Path":
        count = len(self._parts)
        if not 0 <= begin < count or not begin < end <= count:
            raise IndexOutOfRange(
                f"Subpath [{begin}, {end}) out of range for {self!r} with {count} segments"
            )
        return S3Path(None, self._parts[begin:end])

    def starts_with(self, other: Union["S3Path", str]) -> bool:
        if isinstance(other, str):
            other = S3Path.parse(other)
        if not isinstance(other, S3Path):
            return False

        if len(other._parts) > len(self._parts):
            return False

        # the empty relative path only starts the empty relative path
        if not other._parts and other._bucket is None and (self._parts or self._bucket is not None):
            return False

        if other._bucket != self._bucket:
            return False

        return self._parts[:len(other._parts)] == other._parts

    def ends_with(self, other: Union["S3Path", str]) -> bool:
        if isinstance(other, str):
            other = S3Path.parse(other)
        if not isinstance(other, S3Path):
            return False

        if len(other._parts) > len(self._parts):
            return False
        if not other._parts and self._parts:
            return False

        # a bucket is only required when other names one
        if other._bucket is not None and other._bucket != self._bucket:
            return False

        if not other._parts:
            return True
        return self._parts[-len(other._parts):] == other._parts

    def normalize(self) -> "S3Path":
        return self

    def resolve(self, other: Union["S3Path", str]) -> "S3Path":
        """
        Resolve other against this path.

        Absolute other paths are returned unchanged; relative ones are
        appended to this path's segments.

        Raises:
            TypeMismatch: If other is neither an S3Path nor a str
        """
        other = self._coerce(other, "resolve")

        if other.is_absolute():
            return other
        if not other._parts:
            return self
        return S3Path(self._bucket, self._parts + other._parts)

    def resolve_sibling(self, other: Union["S3Path", str]) -> "S3Path":
        other = self._coerce(other, "resolve_sibling")

        parent = self.get_parent()
        if parent is None or other.is_absolute():
            return other
        if not other._parts:
            return parent
        return S3Path(self._bucket, self._parts[:-1] + other._parts)

    def relativize(self, other: "S3Path") -> "S3Path":
        """
        Relative path that, resolved against this one, yields other.

        Both paths must be absolute, in the same bucket, and this path
        must be an ancestor of (or equal to) other.

        Raises:
            TypeMismatch: If other is not an S3Path
            IllegalRelative: If either path is relative
            BucketMismatch: If the buckets differ
            NotAncestor: If this path is not a prefix of other

        Examples:
            >>> str(S3Path.parse("/b/a").relativize(S3Path.parse("/b/a/c/d")))
            'c/d'
        """
        if not isinstance(other, S3Path):
            raise TypeMismatch(
                f"other must be an instance of {S3Path.__name__}, got {type(other).__name__}"
            )

        if self == other:
            return S3Path()

        if not self.is_absolute():
            raise IllegalRelative(f"Path is already relative: {self}", this=self, other=other)
        if not other.is_absolute():
            raise IllegalRelative(f"Cannot relativize against a relative path: {other}", this=self, other=other)
        if self._bucket != other._bucket:
            raise BucketMismatch(
                f"Cannot relativize paths with different buckets: '{self}', '{other}'", this=self, other=other
            )
        if len(self._parts) > len(other._parts):
            raise NotAncestor(
                f"Cannot relativize against a parent path: '{self}', '{other}'", this=self, other=other
            )

        common = len(self._parts)
        if other._parts[:common] != self._parts:
            raise NotAncestor(f"'{self}' is not an ancestor of '{other}'", this=self, other=other)
        return S3Path(None, other._parts[common:])

    def _coerce(self, other: Union["S3Path", str], operation: str) -> "S3Path":
        if isinstance(other, str):
            return S3Path.parse(other)
        if not isinstance(other, S3Path):
            raise TypeMismatch(
                f"{operation}: other must be an instance of {S3Path.__name__}, got {type(other).__name__}"
            )
        return other

    # ~ serialization

    def to_uri(self) -> Optional[str]:
        if self._bucket is None:
            return None
        return format_s3_uri(self._bucket, self.key)

    def to_absolute_path(self) -> "S3Path":
        if self.is_absolute():
            return self
        raise IllegalState(f"Relative path cannot be made absolute: {self}")

    def to_real_path(self) -> "S3Path":
        # no symbolic links in an object store
        return self.to_absolute_path()

    def to_file(self) -> Any:
        raise Unsupported(f"S3 paths cannot be converted to local files: {self}")

    def register(self, watcher: Any, *events: Any, **modifiers: Any) -> Any:
        raise Unsupported(f"Watch registration is not supported for S3 paths: {self}")

    def iterator(self) -> Iterator["S3Path"]:
        return iter(self)

    def __iter__(self) -> Iterator["S3Path"]:
        return (S3Path(None, (part,)) for part in self._parts)

    def __len__(self) -> int:
        return len(self._parts)

    def __truediv__(self, other: Union["S3Path", str]) -> "S3Path":
        return self.resolve(other)

    def compare_to(self, other: Any) -> int:
        """Lexical comparison of the string forms (-1, 0 or 1)."""
        mine, theirs = str(self), str(other)
        return (mine > theirs) - (mine < theirs)

    def to_string(self) -> str:
        return str(self)

    def __str__(self) -> str:
        key = self.key
        if self._bucket is None:
            return key
        if key:
            return f"{PATH_SEPARATOR}{self._bucket}{PATH_SEPARATOR}{key}"
        return f"{PATH_SEPARATOR}{self._bucket}"

    def __repr__(self) -> str:
        return f"S3Path({str(self)!r})"

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, S3Path):
            return NotImplemented
        return self._bucket == other._bucket and self._parts == other._parts

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, S3Path):
            return NotImplemented
        return self.compare_to(other) < 0

    def __hash__(self) -> int:
        return hash((self._bucket, self._parts))
