"""Interactive category and service selection"""

from typing import Optional

import click
from rich.markup import escape

from ..engines.base import SearchEngine
from ..engines.selection import resolve_selections
from ..utils.config import Configuration
from ..utils.output import console, display_selected, format_category_name


def _ask(text: str) -> str:
    return click.prompt(text, default="", show_default=False, prompt_suffix=": ")


def prompt_category(config: Configuration) -> str:
    """Ask the user to pick a category by number"""
    categories = config.categories()

    console.print("[bold cyan]Select category:[/bold cyan]")
    console.print()
    for i, category in enumerate(categories, start=1):
        console.print(f"  {i}) {escape(format_category_name(category))}", highlight=False)
    console.print()

    answer = _ask("Enter category number").strip()
    try:
        number = int(answer)
    except ValueError:
        number = 0

    if not 1 <= number <= len(categories):
        raise click.ClickException(f"invalid category selection: {answer!r}")

    return categories[number - 1]


def prompt_services(engines: tuple[SearchEngine, ...]) -> list[SearchEngine]:
    """
    Ask the user which engines to use.

    Input is whitespace-separated numbers or names; 0 or "all" selects
    every engine.
    """
    console.print("[bold cyan]Select services to use (enter numbers, separated by spaces):[/bold cyan]")
    console.print()
    console.print("  0) All services")
    for i, engine in enumerate(engines, start=1):
        console.print(f"  {i}) {escape(engine.name)}", highlight=False)
    console.print()

    tokens = _ask("Enter selection(s)").split()
    indices = resolve_selections(tokens, engines)
    selected = [engines[i] for i in indices]

    console.print()
    display_selected(selected)
    return selected


def handle_interactive(
    config: Configuration,
    category: Optional[str] = None,
) -> tuple[str, list[SearchEngine]]:
    """
    Run the interactive flow.

    The category prompt is skipped when a category was already chosen on
    the command line.

    Returns:
        Tuple of (category, selected engines)
    """
    if category is None:
        category = prompt_category(config)
        console.print()

    engines = config.engines_for(category)
    if not engines:
        raise click.ClickException(f"no services found for category {category!r}")

    return category, prompt_services(engines)
