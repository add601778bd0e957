"""Search engine records and URL building"""

from dataclasses import dataclass
from urllib.parse import quote_plus

DEFAULT_SPACE_DELIMITER = "+"


@dataclass(frozen=True)
class SearchEngine:
    """A single configured search target"""
    name: str
    url: str  # Prefix ending right where the encoded query belongs
    space_delimiter: str = DEFAULT_SPACE_DELIMITER

    def __post_init__(self):
        if not self.space_delimiter:
            object.__setattr__(self, "space_delimiter", DEFAULT_SPACE_DELIMITER)

    def build_search_url(self, query: str) -> str:
        """Build the search URL for a given query"""
        return build_search_url(self, query)


def encode_query(term: str, delimiter: str = DEFAULT_SPACE_DELIMITER) -> str:
    """
    Percent-encode a search term for use as a query value.

    quote_plus escapes a literal "+" to %2B, so any "+" left in the
    encoded string stands for a space and can be swapped for the
    engine's delimiter.

    Args:
        term: Free-text search term
        delimiter: Replacement for spaces ("+" when empty)

    Returns:
        Encoded query value
    """
    if not delimiter:
        delimiter = DEFAULT_SPACE_DELIMITER

    # Undecodable argv bytes arrive as surrogates; escape them byte for byte
    encoded = quote_plus(term, errors="surrogateescape")
    if delimiter != DEFAULT_SPACE_DELIMITER:
        encoded = encoded.replace("+", delimiter)
    return encoded


def build_search_url(engine: SearchEngine, term: str) -> str:
    """Concatenate the engine's URL prefix with the encoded term"""
    return engine.url + encode_query(term, engine.space_delimiter)
