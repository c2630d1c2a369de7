"""Shared console helpers for the Clarion scaffolder.

Prompts, per-file confirmations and the final summary go through the Rich
``console`` defined here; error lines go to ``err_console`` on stderr. Tests
can capture or silence both in one place.
"""

from __future__ import annotations

from pathlib import Path

from rich.console import Console
from rich.markup import escape
from rich.prompt import Prompt

# soft_wrap keeps long paths on one line when stdout is not a terminal
console = Console(highlight=False, soft_wrap=True)
err_console = Console(stderr=True, highlight=False, soft_wrap=True)


# ---------------------------------------------------------------------------
# Prompting
# ---------------------------------------------------------------------------


def ask(message: str) -> str:
    """Prompt for a single line of input.

    An empty answer is accepted as-is. A closed input stream surfaces as
    ``EOFError`` and is left to the caller.
    """
    return Prompt.ask(message, console=console, default="", show_default=False)


# ---------------------------------------------------------------------------
# Rich output helpers
# ---------------------------------------------------------------------------


def print_created(path: str | Path) -> None:
    """Echo a confirmation line for a file or directory that was written."""
    console.print(f"Created: {escape(str(path))}")


def print_success(message: str) -> None:
    """Print a green success message."""
    console.print(f"[bold green]{escape(message)}[/bold green]")


def print_error(message: str) -> None:
    """Print a red error message to stderr."""
    err_console.print(f"[bold red]{escape(message)}[/bold red]")
