"""
Human-readable output formatting.

Centralizes all CLI output formatting while keeping CLI commands thin
and focused.
"""
from __future__ import annotations

import typer
from typing import Optional

from ..path import S3Path

def print_path_details(path: S3Path, verbose: bool = False) -> None:
    """
    Print the parsed components of a path.
    
    Args:
        path: Path to describe
        verbose: Also list the individual segments
    """
    typer.echo(f"Path: {path}")
    typer.echo(f"Absolute: {'yes' if path.is_absolute() else 'no'}")
    typer.echo(f"Bucket: {path.bucket if path.bucket is not None else '-'}")
    typer.echo(f"Key: {path.key}")
    typer.echo(f"URI: {path.to_uri() or '-'}")
    
    if verbose:
        typer.echo(f"Segments ({path.get_name_count()}):")
        for index, part in enumerate(path.parts):
            typer.echo(f"  [{index}] {part}")

def print_path(path: Optional[S3Path]) -> None:
    """
    Print a single path result.
    
    Args:
        path: Path to print; None prints a placeholder (e.g. no parent)
    """
    if path is None:
        typer.echo("(none)")
        return
    # the empty relative path has no visible form
    typer.echo(str(path) if path.get_name_count() or path.is_absolute() else "(empty)")
