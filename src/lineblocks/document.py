"""Sparse, index-addressable line container.

Lines keep their original line numbers for the whole conversion. Filters
that finalize a block splice a range of lines into a single rendered line,
so the set of live indices shrinks as filters run and neighbors of a line
are not guaranteed to exist.

Example:
    >>> doc = Document.from_text("a\\nb\\nc")
    >>> doc.splice(0, 1, "<p>a b</p>")
    >>> doc.indices()
    [0, 2]
    >>> 1 in doc
    False
    >>> doc.to_text()
    '<p>a b</p>\\nc'
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Protocol

from lineblocks.errors import ContractError
from lineblocks.line import Line


class LineDocument(Protocol):
    """What the list scanner needs from a document."""

    def __contains__(self, index: object) -> bool: ...

    def get(self, index: int) -> Line | None: ...

    def indices(self) -> list[int]: ...

    def splice(self, first: int, last: int, text: str) -> None: ...


class Document:
    """Ordered mapping from original line number to Line.

    Thread Safety:
        Not thread-safe. Filters run strictly one after another and a
        document has a single writer for the whole conversion.

    """

    __slots__ = ("_lines",)

    def __init__(self, lines: Iterable[Line] = ()) -> None:
        self._lines: dict[int, Line] = {}
        for line in lines:
            self._lines[line.index] = line

    @classmethod
    def from_text(cls, source: str) -> Document:
        """Split source on newlines and number the lines from 0."""
        return cls(Line(no, raw) for no, raw in enumerate(source.split("\n")))

    def __contains__(self, index: object) -> bool:
        return index in self._lines

    def __getitem__(self, index: int) -> Line:
        return self._lines[index]

    def __len__(self) -> int:
        return len(self._lines)

    def __iter__(self) -> Iterator[Line]:
        for index in self.indices():
            yield self._lines[index]

    def get(self, index: int) -> Line | None:
        return self._lines.get(index)

    def indices(self) -> list[int]:
        """Live line numbers in source order (a snapshot)."""
        return sorted(self._lines)

    def splice(self, first: int, last: int, text: str) -> None:
        """Replace every live line in ``first..last`` with one rendered line.

        The rendered line takes index ``first``; the rest of the range is no
        longer addressable.

        Raises:
            ContractError: If the range is inverted or holds no live line.
        """
        if last < first:
            raise ContractError("document", f"inverted splice range {first}..{last}", first)
        doomed = [index for index in self._lines if first <= index <= last]
        if not doomed:
            raise ContractError("document", f"no lines to splice in {first}..{last}", first)
        for index in doomed:
            del self._lines[index]
        self._lines[first] = Line(first, text)

    def to_text(self) -> str:
        """Join every live line's rendered text with newlines."""
        return "\n".join(line.render() for line in self)

    def __repr__(self) -> str:
        return f"Document({len(self._lines)} lines)"
