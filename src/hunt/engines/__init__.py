"""Search engine records, selection and URL building"""

from .base import SearchEngine, encode_query, build_search_url
from .selection import (
    AllSelected,
    NoValidSelection,
    ResolvedIndex,
    Unresolved,
    looks_like_selection,
    resolve_selections,
    resolve_token,
)

__all__ = [
    'SearchEngine',
    'encode_query',
    'build_search_url',
    'AllSelected',
    'ResolvedIndex',
    'Unresolved',
    'NoValidSelection',
    'resolve_token',
    'resolve_selections',
    'looks_like_selection',
]
