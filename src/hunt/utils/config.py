"""Configuration management for hunt"""

import json
import os
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Tuple, Union

from dotenv import load_dotenv

from ..engines.base import SearchEngine

# Load environment variables
load_dotenv()

CONFIG_FILENAME = "search_engines.json"
CONFIG_ENV_VAR = "HUNT_CONFIG"
DEFAULT_CATEGORY = "search"


class ConfigError(Exception):
    """Raised when the engine configuration cannot be loaded"""


class Configuration:
    """Read-only mapping of category name to its ordered engines"""

    def __init__(self, categories: Mapping[str, Tuple[SearchEngine, ...]]):
        self._categories = MappingProxyType(
            {name: tuple(engines) for name, engines in categories.items()}
        )

    def engines_for(self, category: str) -> Tuple[SearchEngine, ...]:
        """Engines of a category, empty if the category is unknown"""
        return self._categories.get(category, ())

    def categories(self) -> list[str]:
        """Category names for display, "search" first"""
        names = list(self._categories)
        if DEFAULT_CATEGORY in self._categories:
            names.remove(DEFAULT_CATEGORY)
            names.insert(0, DEFAULT_CATEGORY)
        return names

    def __contains__(self, category: object) -> bool:
        return category in self._categories


def _bundled_config_path() -> Path:
    return Path(__file__).resolve().parent.parent / CONFIG_FILENAME


def get_config_path(explicit: Optional[Union[str, Path]] = None) -> Path:
    """
    Get the configuration file path.

    An explicit path or $HUNT_CONFIG is returned as-is, even if missing, so
    the loader can report it. Otherwise the first existing file among
    ./search_engines.json, ~/.config/hunt/search_engines.json and the copy
    bundled with the package is used.
    """
    if explicit:
        return Path(explicit)

    env_path = os.getenv(CONFIG_ENV_VAR)
    if env_path:
        return Path(env_path).expanduser()

    # Check for local config first
    local_config = Path.cwd() / CONFIG_FILENAME
    if local_config.exists():
        return local_config

    # Then check home directory
    home_config = Path.home() / ".config" / "hunt" / CONFIG_FILENAME
    if home_config.exists():
        return home_config

    return _bundled_config_path()


def _parse_engine(category: str, index: int, raw: Any) -> SearchEngine:
    if not isinstance(raw, dict):
        raise ConfigError(f"engine in category {category!r} at index {index} is not an object")

    name = raw.get("name") or ""
    url = raw.get("url") or ""
    delimiter = raw.get("space_delimiter") or ""

    for field, value in (("name", name), ("URL", url), ("space_delimiter", delimiter)):
        if not isinstance(value, str):
            raise ConfigError(
                f"engine in category {category!r} at index {index} has a non-string {field}"
            )

    if not name:
        raise ConfigError(f"engine in category {category!r} at index {index} has no name")
    if not url:
        raise ConfigError(f"engine in category {category!r} at index {index} has no URL")

    return SearchEngine(name=name, url=url, space_delimiter=delimiter)


def parse_config(data: Any) -> Configuration:
    """
    Validate a decoded config document.

    Categories with no engines are dropped; an engine without a name or
    URL fails the whole load.

    Raises:
        ConfigError: the document does not describe any usable engine
    """
    if not isinstance(data, dict):
        raise ConfigError("config must be a JSON object keyed by category")
    if not data:
        raise ConfigError("no categories found in JSON file")

    categories: Dict[str, Tuple[SearchEngine, ...]] = {}
    for category, engines in data.items():
        if not isinstance(engines, list):
            raise ConfigError(f"category {category!r} must be a list of engines")
        if not engines:
            continue  # Skip empty categories

        categories[category] = tuple(
            _parse_engine(category, i, raw) for i, raw in enumerate(engines)
        )

    if not categories:
        raise ConfigError("no valid engines found in any category")

    return Configuration(categories)


def load_config(path: Optional[Union[str, Path]] = None) -> Configuration:
    """Load the engine configuration from file"""
    config_path = get_config_path(path)

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except OSError as e:
        raise ConfigError(f"failed to read {config_path}: {e}") from e
    except json.JSONDecodeError as e:
        raise ConfigError(f"failed to parse JSON in {config_path}: {e}") from e

    return parse_config(data)
