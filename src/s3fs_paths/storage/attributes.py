"""
Object attributes and the cached lookup helper.

S3ObjectAttributes is the value the store-access layer hangs on an
S3Path's attribute cache. The path model never interprets it.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import TYPE_CHECKING, Optional

from ..errors import IllegalState

if TYPE_CHECKING:
    from ..path import S3Path
    from ..settings import Settings
    from .base import AttributeStore

__all__ = ["S3ObjectAttributes", "read_attributes"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class S3ObjectAttributes:
    """
    Basic attributes of an object or common prefix.

    Invariants:
    - size: exact byte length (>= 0); 0 for directories
    - is_directory: True for a common prefix or a bucket root
    - etag, last_modified: optional, as reported by the store
    """
    key: str
    size: int
    last_modified: Optional[datetime] = None
    etag: Optional[str] = None
    is_directory: bool = False

    def __post_init__(self) -> None:
        if self.size < 0:
            raise ValueError(f"size must be non-negative, got {self.size}")

    @property
    def is_regular_file(self) -> bool:
        return not self.is_directory


def read_attributes(
    path: "S3Path",
    store: "AttributeStore",
    *,
    settings: Optional["Settings"] = None,
    refresh: bool = False
) -> S3ObjectAttributes:
    """
    Return attributes for a path, consulting its cache first.

    Args:
        path: Absolute S3 path
        store: Store used on a cache miss
        settings: Optional settings; attribute_cache=False bypasses the cache
        refresh: Ignore any cached value and fetch again

    Returns:
        Attributes for the object at path

    Raises:
        IllegalState: If path is relative
        FileNotFoundError: If the store has nothing at path
    """
    if not path.is_absolute():
        raise IllegalState(f"Cannot read attributes of relative path: {path}")

    use_cache = settings is None or settings.attribute_cache

    if use_cache and not refresh:
        cached = path.file_attributes
        if cached is not None:
            logger.debug(f"Attribute cache hit for {path}")
            return cached

    logger.debug(f"Attribute cache miss for {path}, querying store")
    attributes = store.stat(path)

    if use_cache:
        path.file_attributes = attributes
    return attributes
