"""
s3fs-paths CLI

Exposes the path algebra for inspection:
- parse: Show bucket, key, segments and URI of a path
- resolve: Resolve a path against a base
- sibling: Resolve a path against a base's parent
- relativize: Relative path from one absolute path to another
- uri: Render the s3:// URI of a path
- parent / name: Navigate one level
"""
from __future__ import annotations

import typer
from typing import Optional

from .cli_context import CLIContext
from .operations import run_and_exit
from .operations.printers import print_path, print_path_details

app = typer.Typer(name="s3fs-paths", help="Inspect S3 paths")

_BUCKET_HELP = "Bucket used to anchor relative paths (default: S3FS_DEFAULT_BUCKET)"

@app.command()
def parse(
    path: str = typer.Argument(..., help="Path (/bucket/key, key or s3://bucket/key)"),
    bucket: Optional[str] = typer.Option(None, "--bucket", help=_BUCKET_HELP),
    verbose: bool = typer.Option(False, "--verbose", help="List individual segments")
) -> None:
    """Parse a path and show its components."""

    def _parse() -> None:
        context = CLIContext.from_env(bucket=bucket)
        print_path_details(context.path(path), verbose=verbose)

    run_and_exit(_parse)

@app.command()
def resolve(
    base: str = typer.Argument(..., help="Base path"),
    other: str = typer.Argument(..., help="Path to resolve against the base"),
    bucket: Optional[str] = typer.Option(None, "--bucket", help=_BUCKET_HELP)
) -> None:
    """Resolve OTHER against BASE."""

    def _resolve() -> None:
        context = CLIContext.from_env(bucket=bucket)
        print_path(context.path(base).resolve(context.operand(other)))

    run_and_exit(_resolve)

@app.command()
def sibling(
    base: str = typer.Argument(..., help="Base path"),
    other: str = typer.Argument(..., help="Path to resolve against the base's parent"),
    bucket: Optional[str] = typer.Option(None, "--bucket", help=_BUCKET_HELP)
) -> None:
    """Resolve OTHER against the parent of BASE."""

    def _sibling() -> None:
        context = CLIContext.from_env(bucket=bucket)
        print_path(context.path(base).resolve_sibling(context.operand(other)))

    run_and_exit(_sibling)

@app.command()
def relativize(
    base: str = typer.Argument(..., help="Ancestor path"),
    other: str = typer.Argument(..., help="Descendant path"),
    bucket: Optional[str] = typer.Option(None, "--bucket", help=_BUCKET_HELP)
) -> None:
    """Print the relative path from BASE to OTHER."""

    def _relativize() -> None:
        context = CLIContext.from_env(bucket=bucket)
        print_path(context.path(base).relativize(context.path(other)))

    run_and_exit(_relativize)

@app.command()
def uri(
    path: str = typer.Argument(..., help="Path to render"),
    bucket: Optional[str] = typer.Option(None, "--bucket", help=_BUCKET_HELP)
) -> None:
    """Print the s3:// URI of a path."""

    def _uri() -> None:
        context = CLIContext.from_env(bucket=bucket)
        typer.echo(context.path(path).to_absolute_path().to_uri())

    run_and_exit(_uri)

@app.command()
def parent(
    path: str = typer.Argument(..., help="Path to navigate from"),
    bucket: Optional[str] = typer.Option(None, "--bucket", help=_BUCKET_HELP)
) -> None:
    """Print the parent of a path."""

    def _parent() -> None:
        context = CLIContext.from_env(bucket=bucket)
        print_path(context.path(path).get_parent())

    run_and_exit(_parent)

@app.command()
def name(
    path: str = typer.Argument(..., help="Path to inspect"),
    bucket: Optional[str] = typer.Option(None, "--bucket", help=_BUCKET_HELP)
) -> None:
    """Print the file name of a path."""

    def _name() -> None:
        context = CLIContext.from_env(bucket=bucket)
        print_path(context.path(path).get_file_name())

    run_and_exit(_name)

def main() -> None:
    """CLI entry point."""
    app()

if __name__ == "__main__":
    main()
