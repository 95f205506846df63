"""Console output helpers for consistent CLI messages.

Logging Strategy:
- Use console output functions (success, error, info, warning) for user-facing messages
- Use structured logging (logger.debug, logger.error, etc.) for debugging and observability
"""

from __future__ import annotations

import typer


def success(message: str, *, prefix: bool = True) -> None:
    """Display a success message in green with checkmark emoji.

    Example:
        success("Chart written to chart.png")
        # Output: ✅ Chart written to chart.png
    """
    formatted = f"✅ {message}" if prefix else message
    typer.secho(formatted, fg=typer.colors.GREEN)


def error(message: str, *, prefix: bool = True, err: bool = True) -> None:
    """Display an error message in red with cross emoji.

    Args:
        message: The error message to display
        prefix: Whether to include the cross emoji prefix (default: True)
        err: Whether to write to stderr instead of stdout (default: True)
    """
    formatted = f"❌ {message}" if prefix else message
    typer.secho(formatted, fg=typer.colors.RED, err=err)


def info(message: str, *, prefix: bool = True) -> None:
    formatted = f"ℹ️  {message}" if prefix else message
    typer.secho(formatted, fg=typer.colors.CYAN)


def warning(message: str, *, prefix: bool = True) -> None:
    formatted = f"⚠️  {message}" if prefix else message
    typer.secho(formatted, fg=typer.colors.YELLOW)
