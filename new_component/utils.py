"""Shared utility functions for new-component.

Provides Rich-based progress reporting and the async file-system helpers
used by the scaffolder to create the component directory and write files.
File-system calls run in a worker thread via ``asyncio.to_thread`` and
translate ``OSError`` into ``WriteError``.
"""

from __future__ import annotations

import asyncio
from pathlib import Path

from rich.console import Console
from rich.markup import escape
from rich.rule import Rule

from new_component.errors import WriteError

console = Console()
error_console = Console(stderr=True)

ACCENT = "rgb(255,164,56)"

# ---------------------------------------------------------------------------
# Rich output helpers
# ---------------------------------------------------------------------------


def log_intro(name: str, directory: str | Path) -> None:
    """Print the banner shown before a component is generated."""
    console.print()
    console.print(f"  Creating the [bold {ACCENT}]{escape(name)}[/bold {ACCENT}] component")
    console.print()
    console.print(f"Directory:  [bold {ACCENT}]{escape(str(directory))}[/bold {ACCENT}]")
    console.print(Rule(style=ACCENT))
    console.print()


def log_item_completion(message: str) -> None:
    """Print a green check mark followed by *message*."""
    console.print(f"[bold green]✓[/bold green] {escape(message)}")


def log_conclusion() -> None:
    """Print the closing banner after every file was written."""
    console.print()
    console.print("[bold green]Component created![/bold green]")
    console.print("[dim]Thanks for using new-component.[/dim]")
    console.print()


def log_error(message: str) -> None:
    """Print a red error message to stderr."""
    error_console.print()
    error_console.print("[bold red]Error creating component.[/bold red]", soft_wrap=True)
    error_console.print(f"[red]{escape(message)}[/red]", soft_wrap=True)
    error_console.print()


# ---------------------------------------------------------------------------
# File-system helpers
# ---------------------------------------------------------------------------


async def make_dir(path: str | Path) -> Path:
    """Create a single directory; its parent must already exist.

    Raises:
        WriteError: If the directory exists already or cannot be created.
    """
    dir_path = Path(path)
    try:
        await asyncio.to_thread(dir_path.mkdir)
    except OSError as exc:
        raise WriteError(f"Could not create directory: {exc.strerror or exc}", dir_path) from exc
    return dir_path


async def write_text(path: str | Path, content: str) -> Path:
    """Write *content* to *path* as UTF-8.

    Raises:
        WriteError: If the file cannot be written.
    """
    file_path = Path(path)
    try:
        await asyncio.to_thread(file_path.write_text, content, "utf-8")
    except OSError as exc:
        raise WriteError(f"Could not write file: {exc.strerror or exc}", file_path) from exc
    return file_path
