"""Line value type and line predicates.

A Line keeps its original text untouched. Filters that rewrite a line set
an override (the *gist*) and record markup to wrap around it; ``render()``
computes the final text from those pieces without mutating anything.

Example:
    >>> line = Line(3, "    > quoted")
    >>> line.gist = " quoted"
    >>> line.prepend("<blockquote>")
    >>> line.append("</blockquote>")
    >>> line.render()
    '<blockquote> quoted</blockquote>'
    >>> line.raw
    '    > quoted'
"""

from __future__ import annotations

from dataclasses import dataclass, field

INDENT = "    "
CODE_INDENT = INDENT * 2


@dataclass(slots=True)
class Line:
    """One source line addressed by its original line number.

    Attributes:
        index: Original line number (0-indexed)
        raw: Source text, never modified
        gist: Rewritten content used instead of ``raw`` when set
        leading: Opening markup in the order it was prepended
        trailing: Closing markup in the order it was appended

    """

    index: int
    raw: str
    gist: str | None = None
    leading: list[str] = field(default_factory=list)
    trailing: list[str] = field(default_factory=list)

    @property
    def text(self) -> str:
        """Effective content without wraps."""
        return self.raw if self.gist is None else self.gist

    def prepend(self, markup: str) -> None:
        """Wrap the line with opening markup, outside any earlier prepends."""
        self.leading.append(markup)

    def append(self, markup: str) -> None:
        """Wrap the line with closing markup, outside any earlier appends."""
        self.trailing.append(markup)

    def render(self) -> str:
        """Compute the final text of the line."""
        return "".join(reversed(self.leading)) + self.text + "".join(self.trailing)

    def is_blank(self) -> bool:
        return is_blank(self.raw)

    def is_indented(self) -> bool:
        return is_indented(self.raw)

    def __str__(self) -> str:
        return self.render()


def is_blank(text: str) -> bool:
    """Return True if text is empty after trimming whitespace."""
    return not text.strip()


def is_indented(text: str) -> bool:
    """Return True if text starts with a tab or at least four spaces."""
    return text.startswith("\t") or text.startswith(INDENT)


def is_code_line(line: Line | None) -> bool:
    """Return True if line sits one indent level deeper than list content.

    Two tabs or eight spaces. An absent line is never a code line.
    """
    if line is None:
        return False
    return line.raw.startswith("\t\t") or line.raw.startswith(CODE_INDENT)


def is_quote_line(line: Line | None) -> bool:
    """Return True if line's left-trimmed source starts with ``>``.

    An absent line is never a quote line.
    """
    if line is None:
        return False
    return line.raw.lstrip().startswith(">")


def is_blank_or_absent(line: Line | None) -> bool:
    return line is None or line.is_blank()
