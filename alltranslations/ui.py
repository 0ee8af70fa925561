"""
AllTranslations UI Module - Rich formatting for the command line tool.
"""

from __future__ import annotations

from typing import Any

from rich.console import Console
from rich.table import Table

console = Console()
err_console = Console(stderr=True)

BADGE = "[bold white on dark_cyan] i18n [/bold white on dark_cyan]"


# ============================================================================
# STATUS MESSAGES
# ============================================================================


def success(message: str, details: str = "", badge: bool = True):
    """Green success message with ✓

    Args:
        message: Main success message
        details: Optional additional details (dimmed)
        badge: Show badge (default: True)
    """
    prefix = f"{BADGE} " if badge else ""
    console.print(f"{prefix}[green]✓[/green] {message}")
    if details:
        console.print(f"    [dim]{details}[/dim]")


def error(message: str, details: str = "", badge: bool = True):
    """Red error message with ✗, written to stderr"""
    prefix = f"{BADGE} " if badge else ""
    err_console.print(f"{prefix}[red]✗[/red] {message}")
    if details:
        err_console.print(f"    [red]{details}[/red]")


def warning(message: str, details: str = "", badge: bool = True):
    """Yellow warning with ⚠, written to stderr"""
    prefix = f"{BADGE} " if badge else ""
    err_console.print(f"{prefix}[yellow]⚠[/yellow] {message}")
    if details:
        err_console.print(f"    [dim]{details}[/dim]")


# ============================================================================
# TABLES
# ============================================================================


def data_table(
    columns: list[dict[str, Any]],
    rows: list[list[Any]],
    title: str | None = None,
    border_style: str = "dim",
) -> Table:
    """Create and display a data table

    Args:
        columns: List of column dicts with 'name', optional 'style', 'justify'
        rows: List of row data (list of values matching column order)
        title: Optional table title
        border_style: Border style (default: "dim")

    Returns:
        The created Table object

    Example:
        data_table(
            columns=[
                {"name": "Locale", "style": "cyan"},
                {"name": "Keys", "justify": "right"},
            ],
            rows=[["en-US", "12"], ["es-ES", "10"]],
            title="Loaded locales",
        )
    """
    table = Table(title=title, border_style=border_style, title_style="bold", padding=(0, 1))

    for col in columns:
        table.add_column(
            col["name"],
            style=col.get("style", "white"),
            justify=col.get("justify", "left"),
            no_wrap=col.get("no_wrap", False),
        )

    for row in rows:
        table.add_row(*[str(cell) for cell in row])

    console.print(table)
    return table
