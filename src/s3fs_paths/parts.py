"""
Segment parsing and normalization for S3 paths.

Turns textual paths ("/bucket/key", "key") and raw segment lists into the
canonical form used by S3Path: an optional bucket name and a tuple of
non-empty segments free of separator characters.
"""
from __future__ import annotations

from typing import Iterable, Optional, Tuple

from .errors import InvalidPath

__all__ = ["PATH_SEPARATOR", "key_parts", "parse_path", "join_parts"]

PATH_SEPARATOR = "/"


def key_parts(parts: Iterable[Optional[str]]) -> Tuple[str, ...]:
    """
    Strip separators from each fragment and drop the empty ones.

    Args:
        parts: Raw fragments; None entries are ignored

    Returns:
        Tuple of non-empty segments in input order

    Examples:
        >>> key_parts(["a", "", "/b/", None])
        ('a', 'b')
    """
    stripped = (part.replace(PATH_SEPARATOR, "") for part in parts if part is not None)
    return tuple(part for part in stripped if part)


def parse_path(first: str, *more: str) -> Tuple[Optional[str], Tuple[str, ...]]:
    """
    Parse a textual path into (bucket, segments).

    The path must be of the form "/{bucket}", "/{bucket}/{key}" or just
    "{key}". Empty key parts are ignored, so "/bucket//key" is the same
    path as "/bucket/key"; "//key" and "/" are errors because the bucket
    is missing.

    Args:
        first: Primary path string; a leading separator makes it absolute
        more: Additional strings appended as further segments

    Returns:
        Tuple of (bucket or None, normalized segments)

    Raises:
        InvalidPath: If an absolute path has no bucket name

    Examples:
        >>> parse_path("/bucket//key/")
        ('bucket', ('key',))

        >>> parse_path("a/b", "c/d")
        (None, ('a', 'b', 'c', 'd'))
    """
    bucket = None
    fragments = first.split(PATH_SEPARATOR)

    if first.endswith(PATH_SEPARATOR):
        fragments.pop()

    if first.startswith(PATH_SEPARATOR):
        fragments = fragments[1:]
        if not fragments:
            raise InvalidPath(f"path must start with bucket name: {first!r}", path=first)
        if not fragments[0]:
            raise InvalidPath(f"bucket name must be not empty: {first!r}", path=first)
        bucket = fragments[0]
        fragments = fragments[1:]

    for part in more:
        fragments.extend(part.split(PATH_SEPARATOR))

    return bucket, key_parts(fragments)


def join_parts(parts: Iterable[str]) -> str:
    """Join segments into an object key (no leading or trailing separator)."""
    return PATH_SEPARATOR.join(parts)
