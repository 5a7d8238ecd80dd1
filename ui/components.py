"""Reusable UI components for ngx."""

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from config import APP_NAME, APP_VERSION, APP_TAGLINE, APP_DESCRIPTION
from ui.styles import PRIMARY

# Global console instance
console = Console()


def clear_screen():
    """Clear the terminal screen."""
    console.clear()


def show_header():
    """Display the application header."""
    console.print()
    console.print(f"  [bold cyan]{APP_NAME.upper()}[/bold cyan]  [bold]{APP_TAGLINE}[/bold]  [dim]v{APP_VERSION}[/dim]")
    console.print(f"  [dim]{APP_DESCRIPTION}[/dim]")
    console.print()


def show_panel(content, title="", style="cyan", padding=(1, 2)):
    """
    Display content in a styled panel.

    Args:
        content: Text or Rich renderable to display
        title: Optional panel title
        style: Border style color
        padding: Tuple of (vertical, horizontal) padding
    """
    panel = Panel(
        content,
        title=title if title else None,
        border_style=style,
        padding=padding,
    )
    console.print(panel)


def show_table(title, columns, rows, show_header=True):
    """
    Display data in a formatted table.

    Args:
        title: Table title
        columns: List of column definitions, each is dict with 'name' and optional 'style', 'justify'
        rows: List of row data (list of values matching column order)
        show_header: Whether to show column headers
    """
    table = Table(title=title, show_header=show_header, border_style="dim")

    for col in columns:
        table.add_column(
            col.get("name", ""),
            style=col.get("style", None),
            justify=col.get("justify", "left"),
        )

    for row in rows:
        table.add_row(*[str(cell) for cell in row])

    console.print(table)
    console.print()


def show_info(message):
    """Display an info message."""
    console.print(f"[{PRIMARY}]→[/{PRIMARY}] {message}")


def show_spinner(message):
    """
    Return a spinner context manager for long operations.

    Usage:
        with show_spinner("Reloading nginx..."):
            reload_nginx()
    """
    return console.status(message, spinner="dots")


def press_enter_to_continue():
    """Wait for user to press Enter."""
    console.print()
    console.input("[dim]Press Enter to continue...[/dim]")
