"""Console output helpers built on rich."""

import click
from rich.console import Console

_console = Console()
_error_console = Console(stderr=True)

STATUS_SYMBOLS = {
    "success": "✅",
    "error": "❌",
    "info": "💡",
    "warning": "⚠️",
}


def _get_console() -> Console:
    """Return the shared stdout console."""
    return _console


def _rich_echo(message: str, style: str = None, symbol: str = None, err: bool = False) -> None:
    """Print a message, prefixed with a status symbol when given.

    With ``err`` the message goes to stderr, keeping stdout for command output.
    """
    if symbol and symbol in STATUS_SYMBOLS:
        message = f"{STATUS_SYMBOLS[symbol]} {message}"
    try:
        console = _error_console if err else _console
        console.print(message, style=style, highlight=False, markup=False, soft_wrap=True)
    except Exception:
        click.echo(message, err=err)


def _rich_success(message: str) -> None:
    _rich_echo(message, style="green", symbol="success")


def _rich_info(message: str, err: bool = False) -> None:
    _rich_echo(message, style="cyan", symbol="info", err=err)


def _rich_warning(message: str) -> None:
    _rich_echo(message, style="yellow", symbol="warning")


def _rich_error(message: str) -> None:
    """Print an error message to stderr."""
    message = f"{STATUS_SYMBOLS['error']} {message}"
    try:
        _error_console.print(message, style="red", highlight=False, markup=False, soft_wrap=True)
    except Exception:
        click.echo(message, err=True)
