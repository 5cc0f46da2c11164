"""
Path protocol for hierarchical store locations.

Defines the operation set a generic path consumer relies on. S3Path is the
one concrete implementation; other store kinds can implement the same
protocol, and cross-kind calls are rejected by the implementations.
"""
from __future__ import annotations

from typing import Any, Iterator, Optional, Protocol, TypeVar, Union, runtime_checkable

__all__ = ["HierarchicalPath", "PathLike"]

P = TypeVar("P", bound="HierarchicalPath")

# Arguments accepted wherever an operation takes "another path"
PathLike = Union["HierarchicalPath", str]


@runtime_checkable
class HierarchicalPath(Protocol):
    """
    Protocol for immutable, hierarchical path values.

    All operations are pure: they never touch the backing store and always
    return new values instead of mutating the receiver.
    """

    def is_absolute(self) -> bool: ...

    def get_root(self: P) -> Optional[P]: ...

    def get_file_name(self: P) -> P: ...

    def get_parent(self: P) -> Optional[P]: ...

    def get_name_count(self) -> int: ...

    def get_name(self: P, index: int) -> P: ...

    def subpath(self: P, begin: int, end: int) -> P: ...

    def starts_with(self, other: PathLike) -> bool: ...

    def ends_with(self, other: PathLike) -> bool: ...

    def normalize(self: P) -> P: ...

    def resolve(self, other: PathLike) -> "HierarchicalPath": ...

    def resolve_sibling(self, other: PathLike) -> "HierarchicalPath": ...

    def relativize(self: P, other: "HierarchicalPath") -> P: ...

    def to_uri(self) -> Optional[str]: ...

    def to_absolute_path(self: P) -> P: ...

    def to_real_path(self: P) -> P: ...

    def iterator(self: P) -> Iterator[P]: ...

    def compare_to(self, other: "HierarchicalPath") -> int: ...

    def register(self, watcher: Any, *events: Any, **modifiers: Any) -> Any: ...

    def to_file(self) -> Any: ...
