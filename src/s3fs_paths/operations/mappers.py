"""
Error mapping and CLI utilities.

Provides centralized exception-to-exit-code mapping and CLI command wrappers
to ensure consistent error handling across all Typer commands.
"""
from __future__ import annotations

import typer
from typing import Callable, TypeVar

T = TypeVar('T')

EXIT_CODES = {
    "InvalidPath": 2,
    "ValueError": 2,
    "TypeMismatch": 2,
    "IndexOutOfRange": 2,
    "BucketMismatch": 11,
    "IllegalRelative": 12,
    "NotAncestor": 12,
    "IllegalState": 13,
    "Unsupported": 14,
}

def exit_code_for(exc: BaseException) -> int:
    """
    Map exception to standardized exit code.
    
    Returns:
    - 0: Success
    - 2: Malformed input (InvalidPath, TypeMismatch, IndexOutOfRange, ValueError)
    - 3: Unknown error
    - 11: Paths in different buckets (BucketMismatch)
    - 12: Not relativizable (IllegalRelative, NotAncestor)
    - 13: Relative path where an absolute one is needed (IllegalState)
    - 14: Unsupported operation (Unsupported)
    
    Args:
        exc: Exception to map
        
    Returns:
        Exit code (2-14, with 3 as fallback for unknown exceptions)
    """
    return EXIT_CODES.get(type(exc).__name__, 3)

def run_and_exit(func: Callable[[], T]) -> T:
    """
    Unified error wrapper for CLI commands.
    
    Executes the given function and maps any exceptions to appropriate
    exit codes using typer.Exit. The error message is echoed to stderr.
    
    Args:
        func: Function to execute
        
    Returns:
        Function result if successful
        
    Raises:
        typer.Exit: With appropriate exit code if function raises exception
    """
    try:
        return func()
    except typer.Exit:
        raise
    except Exception as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=exit_code_for(e)) from e
