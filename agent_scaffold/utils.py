"""Shared utility functions for the agent scaffold.

Provides answers-file loading (JSON or YAML), file-system helpers, and
Rich-based console reporting.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import yaml
from rich.console import Console
from rich.markup import escape
from rich.table import Table

console = Console()


# ---------------------------------------------------------------------------
# Answers-file I/O
# ---------------------------------------------------------------------------


def load_mapping(path: str | Path) -> dict[str, Any]:
    """Load a JSON or YAML file whose top level is a mapping.

    The format is chosen from the file extension (``.json``, ``.yaml``,
    ``.yml``).

    Raises:
        FileNotFoundError: If the file does not exist.
        ValueError: If the extension is unsupported or the top level is not
            a mapping.
        json.JSONDecodeError / yaml.YAMLError: If the file cannot be parsed.
    """
    file_path = Path(path)
    raw = file_path.read_text(encoding="utf-8")
    suffix = file_path.suffix.lower()
    if suffix == ".json":
        data = json.loads(raw)
    elif suffix in (".yaml", ".yml"):
        data = yaml.safe_load(raw)
    else:
        raise ValueError(f"Unsupported answers file type: {file_path.suffix or '(none)'}")

    if not isinstance(data, dict):
        raise ValueError(f"Expected a mapping at the top level of {file_path}")
    return data


# ---------------------------------------------------------------------------
# File-system helpers
# ---------------------------------------------------------------------------


def write_file(path: Path, content: str) -> None:
    """Create parent directories and write *content* as UTF-8."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")


def is_non_empty_dir(path: Path) -> bool:
    """Return ``True`` if *path* is a directory containing at least one entry."""
    return path.is_dir() and any(path.iterdir())


# ---------------------------------------------------------------------------
# Rich output helpers
# ---------------------------------------------------------------------------


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


def print_success(message: str) -> None:
    """Print a green success message."""
    console.print(f"[bold green]{escape(message)}[/bold green]")


def print_error(message: str) -> None:
    """Print a red error message."""
    console.print(f"[bold red]{escape(message)}[/bold red]")


def print_warning(message: str) -> None:
    """Print a yellow warning message."""
    console.print(f"[bold yellow]{escape(message)}[/bold yellow]")
