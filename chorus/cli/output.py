"""
chorus CLI - Rich Output Helpers

Functions:
    print_table     - Print a formatted table
    print_json      - Print formatted JSON
    print_error     - Print error message
    print_key_value - Print aligned key/value pairs
"""

from __future__ import annotations

import json
from typing import Any, Optional

from rich.console import Console
from rich.json import JSON
from rich.markup import escape
from rich.table import Table

console = Console()
err_console = Console(stderr=True)


def print_table(
    title: str,
    columns: list[str],
    rows: list[list[str]],
    styles: Optional[list[str]] = None,
    show_lines: bool = False,
) -> None:
    """
    Print a rich table.

    Args:
        title: Table title
        columns: Column headers
        rows: Table rows (list of lists)
        styles: Optional column styles
        show_lines: Whether to show row separator lines
    """
    table = Table(title=title, show_lines=show_lines)

    for i, col in enumerate(columns):
        style = styles[i] if styles and i < len(styles) else None
        table.add_column(col, style=style)

    for row in rows:
        padded_row = list(row) + [""] * (len(columns) - len(row))
        table.add_row(*padded_row[:len(columns)])

    console.print(table)


def print_json(data: dict | list, indent: int = 2, raw: bool = False) -> None:
    """
    Print formatted JSON.

    Args:
        data: Data to print as JSON
        indent: Indentation level
        raw: Print plain text without highlighting, for piping
    """
    json_str = json.dumps(data, indent=indent, default=str)
    if raw:
        console.out(json_str, highlight=False)
    else:
        console.print(JSON(json_str))


def print_error(
    message: str,
    details: Optional[str] = None,
    hint: Optional[str] = None,
) -> None:
    """
    Print error message.

    Args:
        message: Error message
        details: Optional detailed error information
        hint: Optional hint for resolving the error
    """
    err_console.print(f"[bold red]Error:[/bold red] {escape(message)}", highlight=False)

    if details:
        err_console.print(f"[dim]{escape(details)}[/dim]", highlight=False)

    if hint:
        err_console.print(f"[yellow]Hint:[/yellow] {escape(hint)}", highlight=False)


def print_key_value(
    items: list[tuple[str, Any]],
    title: Optional[str] = None,
    key_style: str = "cyan",
) -> None:
    """
    Print key-value pairs in a formatted list.

    Args:
        items: List of (key, value) tuples
        title: Optional title
        key_style: Style for keys
    """
    if title:
        console.print(f"[bold]{title}[/bold]")
        console.print()

    max_key_len = max(len(str(k)) for k, _ in items) if items else 0

    for key, value in items:
        padded_key = str(key).ljust(max_key_len)
        console.print(f"  [{key_style}]{padded_key}[/{key_style}]: {escape(str(value))}")
