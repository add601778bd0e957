#!/usr/bin/env python3
"""
hunt - Open one search across many engines
Search the web, shops or news sites from your terminal
"""

from typing import Optional, Sequence

import click

from .commands.interactive import handle_interactive
from .engines.base import SearchEngine, build_search_url
from .engines.selection import NoValidSelection, looks_like_selection, resolve_selections
from .utils.browser import open_urls
from .utils.config import DEFAULT_CATEGORY, ConfigError, load_config
from .utils.output import (
    console,
    copy_to_clipboard,
    display_engines,
    display_selected,
    print_error,
)

# Subcommand aliases that exist regardless of the config file
SUBCOMMAND_ALIASES = {
    'search': 'search',
    'shop': 'shop',
    'shopping': 'shop',
}

CATEGORY_KEY = 'hunt.category'
TERM_SEPARATOR = '--'


def map_subcommand_to_category(subcommand: str, categories: Sequence[str] = ()) -> Optional[str]:
    """Map a leading argument to a category, or None if it is not one"""
    subcommand = subcommand.lower()
    if subcommand in SUBCOMMAND_ALIASES:
        return SUBCOMMAND_ALIASES[subcommand]
    for category in categories:
        if category.lower() == subcommand:
            return category
    return None


def split_selections(
    args: Sequence[str],
    engines: Sequence[SearchEngine],
) -> tuple[list[str], list[str]]:
    """Split leading selection tokens from the search term words"""
    selections = []
    for i, arg in enumerate(args):
        if arg == TERM_SEPARATOR:
            return selections, list(args[i + 1:])
        if not looks_like_selection(arg, engines):
            return selections, list(args[i:])
        selections.append(arg)
    return selections, []


def _config_option(args: Sequence[str]) -> Optional[str]:
    for i, arg in enumerate(args):
        if arg == TERM_SEPARATOR:
            break
        if arg == '--config' and i + 1 < len(args):
            return args[i + 1]
        if arg.startswith('--config='):
            return arg.split('=', 1)[1]
    return None


def _peek_categories(args: Sequence[str]) -> list[str]:
    try:
        return load_config(_config_option(args)).categories()
    except ConfigError:
        # Reported by the command itself once options are parsed
        return []


class HuntCommand(click.Command):
    """
    Command whose first argument may name a category.

    Options are only read up to the first search word, so dashed words in
    the term stay part of it. The category word is taken off before that
    parsing so ``hunt shop -i laptop`` still reads ``-i``.
    """

    def parse_args(self, ctx, args):
        args = list(args)
        if args and not args[0].startswith('-'):
            category = map_subcommand_to_category(args[0], _peek_categories(args[1:]))
            if category is not None:
                ctx.meta[CATEGORY_KEY] = category
                args = args[1:]
        return super().parse_args(ctx, args)


def _fail(ctx: click.Context, message: str):
    print_error(message)
    ctx.exit(1)


@click.command(cls=HuntCommand, context_settings={
    'help_option_names': ['-h', '--help'],
    'allow_interspersed_args': False,
})
@click.argument('args', nargs=-1)
@click.option('-i', '--interactive', is_flag=True,
              help='Interactive mode to select services')
@click.option('-s', '--services', is_flag=True,
              help='Select services by number (0 for all, 1-N) or name before the search term')
@click.option('--config', 'config_path', type=click.Path(dir_okay=False),
              help='Path to search_engines.json')
@click.option('--list', 'list_engines', is_flag=True,
              help='List categories and their services, then exit')
@click.option('--dry-run', is_flag=True,
              help='Print the search URLs instead of opening them')
@click.option('--copy', is_flag=True, help='Copy the search URLs to clipboard')
@click.version_option(version='0.1.0', prog_name='hunt')
@click.pass_context
def cli(
    ctx,
    args: tuple,
    interactive: bool,
    services: bool,
    config_path: Optional[str],
    list_engines: bool,
    dry_run: bool,
    copy: bool,
):
    """
    hunt - open a search on several engines at once

    \b
    Subcommands (optional first argument):
        search    Search engines (default)
        shop      Shopping sites
        <name>    Any other category from search_engines.json

    \b
    Examples:
        hunt 'machine learning'
        hunt shop 'laptop'
        hunt -i 'machine learning'
        hunt shop -i 'laptop'
        hunt -s 1 3 5 'machine learning'
        hunt -s Bing Google Mojeek 'machine learning'
        hunt -s 2 -- 1984 novel
    """
    try:
        config = load_config(config_path)
    except ConfigError as e:
        _fail(ctx, str(e))

    if list_engines:
        for category in config.categories():
            display_engines(category, config.engines_for(category))
        return

    args = list(args)
    category_explicit = CATEGORY_KEY in ctx.meta
    category = ctx.meta.get(CATEGORY_KEY, DEFAULT_CATEGORY)

    engines = config.engines_for(category)
    if not engines:
        _fail(ctx, f"No services found for category '{category}'")

    selections: list[str] = []
    if services:
        selections, args = split_selections(args, engines)

    search_term = ' '.join(args)
    if not search_term:
        click.echo(ctx.get_help(), err=True)
        ctx.exit(1)

    if interactive and services:
        _fail(ctx, "Cannot use both -i/--interactive and -s/--services flags together.")

    if services and not selections:
        _fail(ctx, "-s/--services flag requires at least one service selection.")

    try:
        if interactive:
            _, selected = handle_interactive(config, category if category_explicit else None)
        elif services:
            selected = [engines[i] for i in resolve_selections(selections, engines)]
            display_selected(selected)
        else:
            selected = list(engines)
    except NoValidSelection as e:
        _fail(ctx, str(e))

    urls = [build_search_url(engine, search_term) for engine in selected]
    names = [engine.name for engine in selected]

    if copy:
        copy_to_clipboard('\n'.join(urls))

    if dry_run:
        # Plain output for piping
        for url in urls:
            click.echo(url)
        return

    open_urls(urls, names)

    console.print()
    console.print(f"Opened searches for: {search_term}", highlight=False, markup=False)
    console.print(f"Total services used: {len(selected)}", highlight=False)


if __name__ == '__main__':
    cli()
