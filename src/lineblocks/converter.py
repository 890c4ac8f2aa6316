"""Run list filters over a document.

Each configured flavor gets one full scan, strictly in order: by default
bulleted lists are rendered first, then numbered lists.

Example:
    >>> print(convert("1. one\\n2. two"))
    <ol>
    <li>one</li>
    <li>two</li>
    </ol>
"""

from __future__ import annotations

from lineblocks.config import FilterConfig, get_filter_config
from lineblocks.document import Document
from lineblocks.flavors import ListFlavor, get_flavor
from lineblocks.scanner import ListScanner
from lineblocks.utils.logger import get_logger

logger = get_logger(__name__)


class Converter:
    """Sequential pipeline of list scanners.

    Usage:
        >>> converter = Converter()
        >>> converter("- a")
        '<ul>\\n<li>a</li>\\n</ul>'

    Args:
        config: Filter configuration; the context's config when None
        flavors: Explicit flavors, overriding ``config.flavors``

    """

    __slots__ = ("_scanners",)

    def __init__(
        self,
        config: FilterConfig | None = None,
        *,
        flavors: tuple[ListFlavor, ...] | None = None,
    ) -> None:
        config = config or get_filter_config()
        if flavors is None:
            flavors = tuple(get_flavor(name, config) for name in config.flavors)
        self._scanners = tuple(ListScanner(flavor) for flavor in flavors)

    @property
    def flavors(self) -> tuple[ListFlavor, ...]:
        return tuple(scanner.flavor for scanner in self._scanners)

    def run(self, document: Document) -> Document:
        """Apply every scanner to ``document`` in pipeline order."""
        for scanner in self._scanners:
            logger.debug("Scanning %r for %s lists", document, scanner.flavor.name)
            scanner.scan(document)
        return document

    def __call__(self, source: str) -> str:
        return self.run(Document.from_text(source)).to_text()


def convert(source: str, config: FilterConfig | None = None) -> str:
    """Render every list in ``source`` and return the resulting text."""
    return Converter(config)(source)
