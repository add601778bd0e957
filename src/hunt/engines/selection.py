"""Resolve user selection tokens to engine indices"""

import re
from dataclasses import dataclass
from typing import Callable, Optional, Sequence, Union

from .base import SearchEngine
from ..utils.output import print_warning

_INTEGER = re.compile(r"[+-]?[0-9]+")


class NoValidSelection(ValueError):
    """Raised when a batch of selections resolves to no engine"""

    def __init__(self, message: str = "no valid search engines selected"):
        super().__init__(message)


@dataclass(frozen=True)
class AllSelected:
    """Token asked for every engine ("all" or 0)"""


@dataclass(frozen=True)
class ResolvedIndex:
    """Token matched one engine (0-based index)"""
    index: int


@dataclass(frozen=True)
class Unresolved:
    """Token matched nothing"""
    token: str


Resolution = Union[AllSelected, ResolvedIndex, Unresolved]


def _parse_int(token: str) -> Optional[int]:
    if _INTEGER.fullmatch(token):
        return int(token)
    return None


def _find_by_name(token: str, engines: Sequence[SearchEngine]) -> Optional[int]:
    wanted = token.lower()
    for i, engine in enumerate(engines):
        if engine.name.lower() == wanted:
            return i
    return None


def resolve_token(token: str, engines: Sequence[SearchEngine]) -> Resolution:
    """
    Resolve one selection token against an ordered engine list.

    Numbers are 1-based; 0 and "all" select everything. Anything else is
    matched against engine names, case-insensitively, first match wins.
    """
    token = token.strip()

    if token.lower() == "all":
        return AllSelected()

    number = _parse_int(token)
    if number is not None:
        if number == 0:
            return AllSelected()
        if 1 <= number <= len(engines):
            return ResolvedIndex(number - 1)
        return Unresolved(token)

    index = _find_by_name(token, engines)
    if index is None:
        return Unresolved(token)
    return ResolvedIndex(index)


def warn_invalid_selection(token: str) -> None:
    """Default warning for a token that matched nothing"""
    print_warning(f"Invalid selection '{token}', skipping...")


def resolve_selections(
    tokens: Sequence[str],
    engines: Sequence[SearchEngine],
    warn: Callable[[str], None] = warn_invalid_selection,
) -> list[int]:
    """
    Turn a batch of selection tokens into distinct engine indices.

    "all" anywhere in the batch wins and returns every index in order.
    Unresolved tokens are reported through ``warn`` and skipped; duplicates
    keep their first position.

    Raises:
        NoValidSelection: nothing in the batch matched an engine
    """
    indices: list[int] = []
    seen: set[int] = set()

    for token in tokens:
        resolved = resolve_token(token, engines)

        if isinstance(resolved, AllSelected):
            return list(range(len(engines)))

        if isinstance(resolved, Unresolved):
            warn(token)
            continue

        if resolved.index not in seen:
            seen.add(resolved.index)
            indices.append(resolved.index)

    if not indices:
        raise NoValidSelection()

    return indices


def looks_like_selection(arg: str, engines: Sequence[SearchEngine]) -> bool:
    """Check if a CLI argument reads as a selection rather than search text"""
    token = arg.strip()
    if token.lower() == "all":
        return True

    number = _parse_int(token)
    if number is not None:
        return 0 <= number <= len(engines)

    return _find_by_name(token, engines) is not None
