"""
Settings and configuration for S3 paths.

Centralizes configuration values and provides validation with fail-fast behavior.
Loads settings from environment variables on request.
"""
from __future__ import annotations

import logging
import os
import re
from dataclasses import dataclass
from typing import Optional

__all__ = ["Settings", "create_settings_from_env"]

logger = logging.getLogger(__name__)

# S3 bucket naming rules: 3-63 chars, lowercase, digits, dots, hyphens
_BUCKET_PATTERN = r"^[a-z0-9][a-z0-9.-]{1,61}[a-z0-9]$"


@dataclass(frozen=True)
class Settings:
    """
    Configuration settings for S3 path consumers.
    
    Attributes:
        default_bucket: Bucket used to anchor relative paths in the CLI
        attribute_cache: Store fetched attributes on the path instance
    """
    default_bucket: Optional[str] = None
    attribute_cache: bool = True
    
    def __post_init__(self):
        """Validate settings on construction."""
        if self.default_bucket is not None:
            if not re.match(_BUCKET_PATTERN, self.default_bucket):
                raise ValueError(
                    f"Invalid default_bucket format: {self.default_bucket}. Must follow S3 bucket naming rules."
                )
            if ".." in self.default_bucket:
                raise ValueError(f"Invalid default_bucket format: {self.default_bucket}. Consecutive dots are not allowed.")


def create_settings_from_env() -> Settings:
    """
    Load settings from environment variables.
    
    Environment Variables:
        - S3FS_DEFAULT_BUCKET (optional)
        - S3FS_ATTRIBUTE_CACHE (default: true)
    
    Returns:
        Settings object with validated configuration
        
    Raises:
        ValueError: If configuration is invalid
        
    Note:
        Creates a fresh Settings instance every time (no caching).
    """
    def str_to_bool(value: str) -> bool:
        return value.lower() in ('true', '1', 'yes', 'on')
    
    default_bucket = os.getenv("S3FS_DEFAULT_BUCKET") or None
    attribute_cache = str_to_bool(os.getenv("S3FS_ATTRIBUTE_CACHE", "true"))
    
    settings = Settings(
        default_bucket=default_bucket,
        attribute_cache=attribute_cache,
    )
    logger.debug(f"Loaded settings: default_bucket={settings.default_bucket}, attribute_cache={settings.attribute_cache}")
    return settings
