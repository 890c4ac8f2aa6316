"""
lineblocks — list block filters for line-based Markdown conversion

Recognizes bulleted and numbered lists in a document that has already
been split into numbered lines, and replaces each list with HTML. List
items may hold extra paragraphs, blockquotes and code blocks; lists
separated by blank lines render loose.

Quick Start:
    >>> from lineblocks import convert
    >>> print(convert("- a\\n- b"))
    <ul>
    <li>a</li>
    <li>b</li>
    </ul>

    >>> # Or drive the pieces directly
    >>> from lineblocks import Document, ListScanner, bulleted
    >>> doc = Document.from_text("* x")
    >>> ListScanner(bulleted()).scan(doc).to_text()
    '<ul>\\n<li>x</li>\\n</ul>'
"""

from lineblocks.config import (
    FilterConfig,
    filter_config_context,
    get_filter_config,
    reset_filter_config,
    set_filter_config,
)
from lineblocks.converter import Converter, convert
from lineblocks.document import Document, LineDocument
from lineblocks.errors import ConfigError, ContractError, LineblocksError
from lineblocks.flavors import ListFlavor, bulleted, get_flavor, numbered, register_flavor
from lineblocks.line import Line
from lineblocks.scanner import LineKind, ListScanner, classify_line
from lineblocks.stack import ListItem, ListStack

__version__ = "0.1.0"

__all__ = [
    "ConfigError",
    "ContractError",
    "Converter",
    "Document",
    "FilterConfig",
    "Line",
    "LineDocument",
    "LineKind",
    "LineblocksError",
    "ListFlavor",
    "ListItem",
    "ListScanner",
    "ListStack",
    "__version__",
    "bulleted",
    "classify_line",
    "convert",
    "filter_config_context",
    "get_filter_config",
    "get_flavor",
    "numbered",
    "register_flavor",
    "reset_filter_config",
    "set_filter_config",
]
