"""
Storage interfaces for S3 paths.

These protocols define the boundary between the path model and the
store-access layer that fills the attribute cache, enabling clean
dependency injection and testing with fakes.
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

from .attributes import S3ObjectAttributes

if TYPE_CHECKING:
    from ..path import S3Path

__all__ = ["AttributeStore"]


@runtime_checkable
class AttributeStore(Protocol):
    """Protocol for object metadata lookups."""

    def stat(self, path: "S3Path") -> S3ObjectAttributes:
        """
        Get metadata for the object (or common prefix) at an absolute path.

        Implementations perform the network round trip; the path model
        never calls this directly.

        Args:
            path: Absolute S3 path

        Returns:
            Object metadata (size, modification time, etag, directory flag)

        Raises:
            FileNotFoundError: If no object or prefix exists at the path
            OSError: For other I/O errors
        """
        ...
