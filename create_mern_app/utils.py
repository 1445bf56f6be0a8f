"""Shared utility functions for create-mern-app.

Provides the two filesystem primitives the generator is built on
(:func:`ensure_dir` and :func:`write_file`), name helpers, and Rich-based
progress reporting.
"""

from __future__ import annotations

import re
from pathlib import Path

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.rule import Rule
from rich.table import Table

console = Console()
err_console = Console(stderr=True)

# ---------------------------------------------------------------------------
# File-system helpers
# ---------------------------------------------------------------------------


def ensure_dir(path: str | Path) -> Path:
    """Create a directory (and parents) if it does not exist.

    Calling it on an existing directory is a no-op. If *path* exists but is
    not a directory the underlying ``FileExistsError`` propagates.

    Args:
        path: Directory path.

    Returns:
        The resolved ``Path`` object.
    """
    dir_path = Path(path)
    dir_path.mkdir(parents=True, exist_ok=True)
    return dir_path.resolve()


def write_file(path: str | Path, content: str) -> Path:
    """Write *content* to *path*, creating parent directories first.

    An existing file at *path* is truncated and overwritten.

    Returns:
        The path that was written.
    """
    file_path = Path(path)
    ensure_dir(file_path.parent)
    file_path.write_text(content, encoding="utf-8")
    return file_path


# ---------------------------------------------------------------------------
# String / name helpers
# ---------------------------------------------------------------------------


def slugify(name: str) -> str:
    """Convert an arbitrary project name to a lowercase, hyphenated slug.

    Examples::

        slugify("My Blog") -> "my-blog"
        slugify("  Shop_2 (beta) ") -> "shop-2-beta"
    """
    slug = re.sub(r"[^a-z0-9]+", "-", name.lower().strip())
    return slug.strip("-")


# ---------------------------------------------------------------------------
# Formatting helpers
# ---------------------------------------------------------------------------


def format_duration(seconds: float) -> str:
    """Format a duration in seconds to a human-readable string.

    Examples::

        format_duration(0.04)  -> "0.04s"
        format_duration(3.7)   -> "3.70s"
        format_duration(65.2)  -> "1m 5s"
    """
    if seconds < 0:
        return "0.00s"

    minutes = int(seconds // 60)
    secs = seconds % 60
    if minutes > 0:
        return f"{minutes}m {int(secs)}s"
    return f"{secs:.2f}s"


# ---------------------------------------------------------------------------
# Rich output helpers
# ---------------------------------------------------------------------------


PHASE_COLORS: dict[str, str] = {
    "client": "bright_cyan",
    "server": "bright_green",
    "shared": "bright_yellow",
    "root": "bright_magenta",
}


def print_phase_header(phase: str) -> None:
    """Print a rule announcing a generation phase."""
    color = PHASE_COLORS.get(phase, "white")
    console.print(
        Rule(
            f"[bold {color}] {phase.upper()} [/bold {color}]",
            style=color,
        )
    )


def print_summary_table(data: dict[str, str], title: str = "Summary") -> None:
    """Print a two-column key/value summary table.

    Args:
        data: Mapping of label -> value.
        title: Table title.
    """
    table = Table(title=title, show_header=True, header_style="bold cyan")
    table.add_column("Item", style="dim", no_wrap=True)
    table.add_column("Value")

    for key, value in data.items():
        table.add_row(escape(key), escape(str(value)))

    console.print(table)
    console.print()


def print_next_steps(steps: list[str]) -> None:
    """Print the follow-up commands in a panel."""
    body = "\n".join(f"  {escape(step)}" for step in steps)
    console.print(Panel(body, title="Next steps", title_align="left", border_style="green"))


def print_success(message: str) -> None:
    """Print a green success message."""
    console.print(f"[bold green]{escape(message)}[/bold green]")


def print_error(message: str) -> None:
    """Print a red error message on stderr."""
    err_console.print(f"[bold red]{escape(message)}[/bold red]")


def print_warning(message: str) -> None:
    """Print a yellow warning message."""
    console.print(f"[bold yellow]{escape(message)}[/bold yellow]")
