"""Open search URLs in the default browser"""

import os
import time
import webbrowser
from typing import Optional, Sequence

import click

from .output import console, print_warning

TEST_MODE_ENV_VAR = "HUNT_TEST_MODE"

# Pause between tabs so the browser treats each open separately
OPEN_DELAY = 0.3


def is_test_mode() -> bool:
    return bool(os.getenv(TEST_MODE_ENV_VAR))


def open_url(url: str) -> bool:
    """Open a URL in a new tab. Returns False if no browser could be launched."""
    try:
        return webbrowser.open_new_tab(url)
    except webbrowser.Error:
        return False


def open_urls(
    urls: Sequence[str],
    names: Sequence[str] = (),
    delay: float = OPEN_DELAY,
    test_mode: Optional[bool] = None,
) -> int:
    """
    Open URLs one after another.

    Failures are reported and skipped. In test mode the URLs are echoed
    instead of opened and no delay is applied.

    Returns:
        Number of URLs that were opened (or echoed)
    """
    if test_mode is None:
        test_mode = is_test_mode()

    opened = 0
    for i, url in enumerate(urls):
        if i < len(names):
            console.print(f"Opening {names[i]}...", highlight=False, markup=False)
        else:
            console.print(f"Opening URL {i + 1}...", highlight=False)

        if test_mode:
            click.echo(url)
            opened += 1
        elif open_url(url):
            opened += 1
        else:
            print_warning(f"Failed to open URL: {url}")

        if not test_mode and i < len(urls) - 1:
            time.sleep(delay)

    return opened
