"""Single-pass list scanner.

Walks a document once, classifies each line against its immediate
neighbors and drives a ListStack:

- marker lines open items (a marker after a blank gap may turn the whole
  list loose, retroactively)
- indented lines continue the current item, as a blockquote, a code
  block, a new paragraph or plain text
- unindented lines directly after item content are lazy continuations
- two blank lines, or unindented text after a blank line, end the list

The scanner knows nothing about marker syntax; a ListFlavor supplies it.

Example:
    >>> from lineblocks.document import Document
    >>> from lineblocks.flavors import bulleted
    >>> doc = ListScanner(bulleted()).scan(Document.from_text("- a\\n- b"))
    >>> print(doc.to_text())
    <ul>
    <li>a</li>
    <li>b</li>
    </ul>
"""

from __future__ import annotations

from enum import Enum, auto

from lineblocks.document import LineDocument
from lineblocks.errors import ContractError
from lineblocks.flavors import ListFlavor
from lineblocks.line import Line, is_blank_or_absent, is_code_line, is_quote_line
from lineblocks.stack import ListStack
from lineblocks.utils.logger import get_logger
from lineblocks.utils.text import escape_code

logger = get_logger(__name__)


class LineKind(Enum):
    """How a line takes part in the list being scanned."""

    MARKER = auto()  # Opens a new item
    LOOSE_MARKER = auto()  # Opens a new item and makes the list loose
    OUTSIDE = auto()  # No list open
    SPACER = auto()  # Single blank line inside a list
    BLOCKQUOTE = auto()
    CODE = auto()
    PARAGRAPH = auto()  # Indented text after a blank line
    CONTINUATION = auto()  # Indented text after item content
    LAZY = auto()  # Unindented text after item content
    END_BLANK = auto()  # Second blank line in a row
    END_TEXT = auto()  # Unindented text after a blank line


def classify_line(
    line: Line,
    prev: Line | None,
    next_line: Line | None,
    *,
    marker: str | None,
    in_list: bool,
) -> LineKind:
    """Classify ``line`` given its neighbors and the scan state.

    Args:
        line: The line being scanned
        prev: Line at ``index - 1``, or None if absent
        next_line: Line at ``index + 1``, or None if absent
        marker: Marker prefix matched at the start of ``line``, if any
        in_list: Whether a list is currently open

    """
    if marker is not None:
        if in_list and prev is not None and prev.is_blank() and is_blank_or_absent(next_line):
            return LineKind.LOOSE_MARKER
        return LineKind.MARKER

    if not in_list:
        return LineKind.OUTSIDE

    if line.is_blank():
        if prev is not None and prev.is_blank():
            return LineKind.END_BLANK
        return LineKind.SPACER

    if line.is_indented():
        if is_quote_line(line):
            return LineKind.BLOCKQUOTE
        if is_code_line(line):
            return LineKind.CODE
        if is_blank_or_absent(prev):
            return LineKind.PARAGRAPH
        return LineKind.CONTINUATION

    if is_blank_or_absent(prev):
        return LineKind.END_TEXT
    return LineKind.LAZY


class ListScanner:
    """Recognizes one flavor of list and renders it in place.

    Thread Safety:
        Each scan() call owns its ListStack; a scanner can be reused, but a
        document must not be scanned by two threads at once.

    """

    __slots__ = ("flavor",)

    def __init__(self, flavor: ListFlavor) -> None:
        self.flavor = flavor

    def __repr__(self) -> str:
        return f"ListScanner({self.flavor.name!r})"

    def scan(self, document: LineDocument) -> LineDocument:
        """Replace every list of this flavor in ``document`` with markup.

        Lines that take no part in a list are left untouched.

        Returns:
            The same document, modified in place.

        Raises:
            ContractError: If the flavor or the document misbehaves.
        """
        stack = ListStack()
        tag = self.flavor.tag

        for index in document.indices():
            if index not in document:
                continue
            line = _line_at(document, index)
            prev = _line_at(document, index - 1)
            next_line = _line_at(document, index + 1)
            marker = self._match_marker(line)

            kind = classify_line(line, prev, next_line, marker=marker, in_list=bool(stack))

            match kind:
                case LineKind.MARKER | LineKind.LOOSE_MARKER:
                    loose = kind is LineKind.LOOSE_MARKER
                    if loose:
                        logger.debug("Blank-separated item at line %d, list is loose", index)
                        stack.mark_loose()
                    line.gist = line.raw[len(marker):]
                    stack.open_item(line, loose=loose)
                case LineKind.OUTSIDE | LineKind.SPACER:
                    pass
                case LineKind.END_BLANK | LineKind.END_TEXT:
                    stack.apply(document, tag)
                case LineKind.BLOCKQUOTE:
                    line.gist = line.raw.lstrip()[1:]
                    if not is_quote_line(prev):
                        line.prepend("<blockquote>")
                    if not is_quote_line(next_line):
                        line.append("</blockquote>")
                    stack.append_line(line)
                case LineKind.CODE:
                    line.gist = escape_code(line.raw).lstrip()
                    if not is_code_line(prev):
                        line.prepend("<pre><code>")
                    if not is_code_line(next_line):
                        line.append("</code></pre>")
                    stack.append_line(line)
                case LineKind.PARAGRAPH:
                    line.gist = "</p><p>" + line.raw.lstrip()
                    stack.current.loose = True
                    stack.append_line(line)
                case LineKind.CONTINUATION | LineKind.LAZY:
                    line.gist = line.raw.lstrip()
                    stack.append_line(line)

        if stack:
            stack.apply(document, tag)

        return document

    def _match_marker(self, line: Line) -> str | None:
        marker = self.flavor.match_marker(line.raw)
        if marker is not None and not marker:
            raise ContractError(self.flavor.name, "matched an empty marker", line.index)
        return marker


def _line_at(document: LineDocument, index: int) -> Line | None:
    if index not in document:
        return None
    line = document.get(index)
    if line is None:
        raise ContractError("document", "index is present but holds no line", index)
    return line
