"""
S3 path error classes.

Provides a clear taxonomy of errors raised by the path model. Every error
derives from S3PathError and from the builtin exception a generic caller
would expect (ValueError, TypeError, IndexError, ...), so code written
against plain pathlib-style contracts keeps working.
"""
from __future__ import annotations

from typing import Optional


class S3PathError(Exception):
    """
    Base class for all S3 path errors.
    
    Errors are raised synchronously at the call that violates a
    precondition; the path model never retries or falls back to a
    default path.
    """
    pass


class InvalidPath(S3PathError, ValueError):
    """
    Malformed textual path or URI.
    
    Raised when:
    - An absolute path has no bucket ("/", "//key")
    - A URI uses an unsupported scheme or has an empty bucket
    """
    
    def __init__(self, message: str, path: Optional[str] = None):
        super().__init__(message)
        self.path = path


class TypeMismatch(S3PathError, TypeError):
    """
    An operation received a path of an incompatible concrete kind.
    
    Raised by resolve, resolve_sibling and relativize when handed
    something other than an S3Path.
    """
    pass


class RelativizeError(S3PathError, ValueError):
    """
    Base for relativize precondition failures.
    
    Keeps both operands so callers can report them.
    """
    
    def __init__(self, message: str, this: object = None, other: object = None):
        super().__init__(message)
        self.this = this
        self.other = other


class IllegalRelative(RelativizeError):
    """One of the relativize operands is not absolute."""
    pass


class BucketMismatch(RelativizeError):
    """Relativize operands live in different buckets."""
    pass


class NotAncestor(RelativizeError):
    """
    The receiver of relativize is not an ancestor of the argument.
    
    Raised when:
    - The receiver has more segments than the argument
    - The receiver's segments are not a prefix of the argument's
    """
    pass


class IllegalState(S3PathError, RuntimeError):
    """A relative path was used where an absolute one is required."""
    pass


class Unsupported(S3PathError, NotImplementedError):
    """Watch registration and file-handle conversion are not available."""
    pass


class IndexOutOfRange(S3PathError, IndexError):
    """Segment index outside the valid range."""
    pass


__all__ = [
    "S3PathError",
    "InvalidPath",
    "TypeMismatch",
    "RelativizeError",
    "IllegalRelative",
    "BucketMismatch",
    "NotAncestor",
    "IllegalState",
    "Unsupported",
    "IndexOutOfRange",
]
