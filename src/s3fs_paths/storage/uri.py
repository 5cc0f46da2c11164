"""
URI parsing utilities for S3 paths.

Provides consistent parsing and validation of s3:// URIs, the inverse of
S3Path.to_uri().
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Literal
import re

from ..errors import InvalidPath

__all__ = ["ParsedURI", "parse_s3_uri", "format_s3_uri"]

URI_SCHEME = "s3"


@dataclass(frozen=True)
class ParsedURI:
    """
    Parsed components of an S3 URI.

    Attributes:
        scheme: Storage provider scheme (always s3)
        bucket: Bucket name
        key: Object key within the bucket (empty for the bucket root)
        original: Original URI string for error messages
    """
    scheme: Literal["s3"]
    bucket: str
    key: str
    original: str


def parse_s3_uri(uri: str) -> ParsedURI:
    """
    Parse and validate an S3 URI.

    Accepts URIs in the form: s3://bucket, s3://bucket/ or s3://bucket/key

    Validation:
    - Rejects URIs with backslashes (non-POSIX keys)
    - Rejects URIs starting with "//" after scheme (empty bucket)
    - Rejects schemes other than s3

    Args:
        uri: S3 URI to parse

    Returns:
        ParsedURI with validated components

    Raises:
        InvalidPath: If URI format is invalid

    Examples:
        >>> parse_s3_uri("s3://mybucket/models/model.pkl")
        ParsedURI(scheme='s3', bucket='mybucket', key='models/model.pkl', original='...')

        >>> parse_s3_uri("s3://mybucket/")
        ParsedURI(scheme='s3', bucket='mybucket', key='', original='...')
    """
    if not uri:
        raise InvalidPath("URI cannot be empty", path=uri)

    if "\\" in uri:
        raise InvalidPath(f"URI contains backslashes (use forward slashes): {uri}", path=uri)

    match = re.match(r"^([A-Za-z][A-Za-z0-9+.-]*)://(.*)$", uri)
    if not match:
        raise InvalidPath(f"Invalid URI format, expected s3://bucket/key: {uri}", path=uri)

    scheme, remainder = match.groups()
    if scheme != URI_SCHEME:
        raise InvalidPath(f"Unsupported URI scheme '{scheme}', expected s3: {uri}", path=uri)

    if remainder.startswith("/"):
        raise InvalidPath(f"URI path cannot start with '/': {uri}", path=uri)

    bucket, _, key = remainder.partition("/")
    if not bucket:
        raise InvalidPath(f"Bucket name cannot be empty: {uri}", path=uri)

    return ParsedURI(
        scheme="s3",
        bucket=bucket,
        key=key,
        original=uri
    )


def format_s3_uri(bucket: str, key: str) -> str:
    """Render bucket and key as s3://bucket/key (key may be empty)."""
    return f"{URI_SCHEME}://{bucket}/{key}"
