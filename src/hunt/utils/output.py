"""Output handling utilities for hunt"""

from typing import Sequence

import pyperclip
from rich.console import Console
from rich.markup import escape
from rich.table import Table

console = Console()
err_console = Console(stderr=True)


def print_warning(message: str):
    """Print a non-fatal warning to stderr"""
    err_console.print(f"[yellow]Warning: {escape(message)}[/yellow]", highlight=False)


def print_error(message: str):
    """Print an error to stderr"""
    err_console.print(f"[red]Error: {escape(message)}[/red]", highlight=False)


def format_category_name(category: str) -> str:
    """Human-readable title for a category key"""
    if category == "search":
        return "Search Engines"
    if category == "shop":
        return "Shopping Sites"
    if not category:
        return category
    return category[0].upper() + category[1:] + " Services"


def display_selected(engines: Sequence):
    """List the engines that are about to be searched"""
    console.print("[bold cyan]Selected services:[/bold cyan]")
    for engine in engines:
        console.print(f"  - {escape(engine.name)}", highlight=False)
    console.print()


def display_engines(category: str, engines: Sequence):
    """Show a category's engines as a numbered table"""
    table = Table(title=format_category_name(category))
    table.add_column("#", style="dim", justify="right")
    table.add_column("Name", style="cyan")
    table.add_column("URL")
    table.add_column("Space")

    for i, engine in enumerate(engines, start=1):
        table.add_row(str(i), escape(engine.name), escape(engine.url), escape(engine.space_delimiter))

    console.print(table)


def copy_to_clipboard(content: str):
    """Copy content to clipboard"""
    try:
        pyperclip.copy(content)
        console.print("[green]✓ Copied to clipboard[/green]")
    except pyperclip.PyperclipException as e:
        print_error(f"Failed to copy to clipboard: {e}")
