"""
s3fs-paths: hierarchical path values over S3 buckets and object keys.
"""
from .errors import (
    BucketMismatch,
    IllegalRelative,
    IllegalState,
    IndexOutOfRange,
    InvalidPath,
    NotAncestor,
    S3PathError,
    TypeMismatch,
    Unsupported,
)
from .parts import PATH_SEPARATOR, key_parts, parse_path
from .path import S3Path
from .path_types import HierarchicalPath

__all__ = [
    "S3Path",
    "HierarchicalPath",
    "PATH_SEPARATOR",
    "key_parts",
    "parse_path",
    "S3PathError",
    "InvalidPath",
    "TypeMismatch",
    "IllegalRelative",
    "BucketMismatch",
    "NotAncestor",
    "IllegalState",
    "Unsupported",
    "IndexOutOfRange",
]
