"""List flavors: marker syntax plus block tag.

A flavor is the only thing that differs between bulleted and numbered
lists. The scanner asks it whether a line starts with a marker and which
tag wraps the finished list.

Example:
    >>> flavor = bulleted()
    >>> flavor.match_marker("- item")
    '- '
    >>> flavor.match_marker("    - nested") is None
    True
"""

from __future__ import annotations

import re
from collections.abc import Callable
from dataclasses import dataclass

from lineblocks.config import FilterConfig, get_filter_config
from lineblocks.errors import ConfigError

MarkerMatcher = Callable[[str], str | None]


@dataclass(frozen=True, slots=True)
class ListFlavor:
    """Marker capability for one kind of list.

    Attributes:
        name: Registry name (e.g., "bulleted")
        tag: Block element wrapping the list (e.g., "ul")
        match_marker: Returns the matched marker prefix, or None

    """

    name: str
    tag: str
    match_marker: MarkerMatcher


def regex_matcher(pattern: re.Pattern[str]) -> MarkerMatcher:
    """Build a marker matcher that returns the matched prefix of a line."""

    def match_marker(text: str) -> str | None:
        match = pattern.match(text)
        return match.group(0) if match else None

    return match_marker


def bulleted(config: FilterConfig | None = None) -> ListFlavor:
    """Bulleted list: ``*``, ``+`` or ``-`` followed by whitespace."""
    config = config or get_filter_config()
    if not config.bullet_chars:
        raise ConfigError("bullet_chars must not be empty")
    pattern = re.compile(rf" {{0,3}}[{re.escape(config.bullet_chars)}][ \t]+")
    return ListFlavor("bulleted", "ul", regex_matcher(pattern))


def numbered(config: FilterConfig | None = None) -> ListFlavor:
    """Numbered list: digits, a delimiter (``.`` by default), whitespace."""
    config = config or get_filter_config()
    if not config.ordered_delimiters:
        raise ConfigError("ordered_delimiters must not be empty")
    pattern = re.compile(rf" {{0,3}}\d+[{re.escape(config.ordered_delimiters)}][ \t]+")
    return ListFlavor("numbered", "ol", regex_matcher(pattern))


FlavorFactory = Callable[[FilterConfig | None], ListFlavor]

_FLAVORS: dict[str, FlavorFactory] = {
    "bulleted": bulleted,
    "numbered": numbered,
}


def register_flavor(name: str, factory: FlavorFactory) -> None:
    """Make a flavor available to ``FilterConfig.flavors`` by name."""
    _FLAVORS[name] = factory


def get_flavor(name: str, config: FilterConfig | None = None) -> ListFlavor:
    """Build the flavor registered under ``name``.

    Raises:
        ConfigError: If no flavor has that name.
    """
    try:
        factory = _FLAVORS[name]
    except KeyError:
        known = ", ".join(sorted(_FLAVORS))
        raise ConfigError(f"unknown list flavor {name!r} (known: {known})") from None
    return factory(config)


__all__ = [
    "ListFlavor",
    "bulleted",
    "get_flavor",
    "numbered",
    "regex_matcher",
    "register_flavor",
]
