"""Open list items accumulated during one scan.

The scanner opens items and appends continuation lines; the stack only
stores them. Whether an item renders loose (inside ``<p>``) is a flag that
later lines may still flip, so paragraph markup is added at ``apply`` time.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from lineblocks.document import LineDocument
from lineblocks.errors import ContractError
from lineblocks.line import Line
from lineblocks.utils.logger import get_logger

logger = get_logger(__name__)


@dataclass(slots=True)
class ListItem:
    """One list item: its retained lines keyed by original index.

    Attributes:
        lines: Retained lines in source order
        loose: Render content inside paragraph markup

    """

    lines: dict[int, Line] = field(default_factory=dict)
    loose: bool = False

    def add(self, line: Line) -> None:
        self.lines[line.index] = line

    @property
    def first_index(self) -> int:
        return next(iter(self.lines))

    @property
    def last_index(self) -> int:
        return next(reversed(self.lines))

    def render(self) -> str:
        content = "\n".join(line.render() for line in self.lines.values())
        if self.loose:
            content = f"<p>{content}</p>"
        return f"<li>{content}</li>"


class ListStack:
    """Ordered list items opened during the current scan.

    Empty whenever no list is open. ``apply`` renders the items, splices
    them into the document and empties the stack again.

    Thread Safety:
        Local to a single scan call; never shared.

    """

    __slots__ = ("items",)

    def __init__(self) -> None:
        self.items: list[ListItem] = []

    def __len__(self) -> int:
        return len(self.items)

    def __bool__(self) -> bool:
        return bool(self.items)

    def is_empty(self) -> bool:
        return not self.items

    @property
    def current(self) -> ListItem:
        """The most recently opened item."""
        if not self.items:
            raise ContractError("stack", "no open item")
        return self.items[-1]

    def open_item(self, line: Line, *, loose: bool = False) -> ListItem:
        """Start a new item seeded with the marker line."""
        item = ListItem(loose=loose)
        item.add(line)
        self.items.append(item)
        return item

    def append_line(self, line: Line) -> None:
        """Add a continuation line to the current (last) item."""
        if not self.items:
            raise ContractError("stack", "no open item to continue", line.index)
        self.current.add(line)

    def mark_loose(self) -> None:
        """Flag every item opened so far as loose."""
        for item in self.items:
            item.loose = True

    def render(self, tag: str) -> str:
        parts = [f"<{tag}>\n"]
        parts.extend(item.render() + "\n" for item in self.items)
        parts.append(f"</{tag}>")
        return "".join(parts)

    def apply(self, document: LineDocument, tag: str) -> None:
        """Render the open list into ``document`` and reset the stack.

        The lines from the first item's marker through the last retained
        line of the last item become one rendered line. A no-op on an
        empty stack.
        """
        if not self.items:
            logger.debug("apply() on an empty stack, nothing to splice")
            return

        first = self.items[0].first_index
        last = self.items[-1].last_index
        html = self.render(tag)
        logger.debug(
            "Finalized <%s> with %d items over lines %d-%d",
            tag,
            len(self.items),
            first,
            last,
        )
        document.splice(first, last, html)
        self.items.clear()
