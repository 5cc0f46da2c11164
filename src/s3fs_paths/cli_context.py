"""
CLI Context for managing application dependencies.

Provides a clean way to manage CLI-level dependencies like settings,
avoiding global state and enabling proper dependency injection.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .path import S3Path
from .settings import Settings, create_settings_from_env


@dataclass
class CLIContext:
    """
    Shared context for CLI commands.
    
    Holds the settings for one CLI invocation and the bucket used to anchor
    relative path arguments (the --bucket option, falling back to
    Settings.default_bucket).
    """
    settings: Settings
    bucket: Optional[str] = None
    
    @classmethod
    def from_env(cls, bucket: Optional[str] = None) -> CLIContext:
        """
        Create CLI context from environment variables.
        
        Args:
            bucket: Explicit bucket override
        
        Returns:
            CLIContext with settings loaded from environment
        """
        settings = create_settings_from_env()
        return cls(settings=settings, bucket=bucket)
    
    @property
    def anchor_bucket(self) -> Optional[str]:
        return self.bucket or self.settings.default_bucket
    
    def path(self, raw: str) -> S3Path:
        """
        Parse a CLI path argument, anchoring relative input to the bucket.
        
        Arguments that look like URIs (s3://...) are parsed as URIs.
        Relative arguments stay relative when no bucket is configured.
        """
        if "://" in raw:
            return S3Path.from_uri(raw)
        path = S3Path.parse(raw)
        if path.is_absolute() or self.anchor_bucket is None:
            return path
        return S3Path(self.anchor_bucket).resolve(path)
    
    def operand(self, raw: str) -> S3Path:
        """Parse a second operand without anchoring (relative stays relative)."""
        if "://" in raw:
            return S3Path.from_uri(raw)
        return S3Path.parse(raw)
