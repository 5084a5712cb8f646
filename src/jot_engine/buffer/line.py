"""Single editable line measured in grapheme clusters."""

from __future__ import annotations

from typing import List

import grapheme

from jot_engine.runtime.config import TAB_WIDTH


class Line:
    """Mutable line of text addressed by grapheme-cluster cells.

    The line keeps its text alongside the cluster list and re-segments after
    every edit, so ``len(line)`` always equals the number of clusters in
    ``line.text`` even when an inserted combining mark fuses into its
    neighbour.
    """

    __slots__ = ("_text", "_cells", "tab_width")

    def __init__(self, text: str = "", *, tab_width: int = TAB_WIDTH) -> None:
        self.tab_width = tab_width
        self._text = ""
        self._cells: List[str] = []
        self._reset(text)

    @classmethod
    def from_text(cls, text: str, *, tab_width: int = TAB_WIDTH) -> "Line":
        return cls(text, tab_width=tab_width)

    def _reset(self, text: str) -> None:
        self._text = text
        self._cells = list(grapheme.graphemes(text))

    @property
    def text(self) -> str:
        return self._text

    @property
    def length(self) -> int:
        return len(self._cells)

    def __len__(self) -> int:
        return len(self._cells)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Line):
            return NotImplemented
        return self._text == other._text

    def __repr__(self) -> str:
        return f"Line({self._text!r})"

    def is_empty(self) -> bool:
        return not self._cells

    def insert(self, at: int, char: str) -> int:
        """Insert ``char`` before cell ``at`` and return the cells gained.

        Positions past the end append. A tab expands to ``tab_width`` spaces.
        """

        piece = " " * self.tab_width if char == "\t" else char
        before = len(self._cells)
        index = min(max(at, 0), before)
        head = "".join(self._cells[:index])
        tail = "".join(self._cells[index:])
        self._reset(head + piece + tail)
        return max(len(self._cells) - before, 0)

    def delete(self, at: int) -> bool:
        if at < 0 or at >= len(self._cells):
            return False
        cells = self._cells[:at] + self._cells[at + 1 :]
        self._reset("".join(cells))
        return True

    def split(self, at: int) -> "Line":
        """Keep cells ``[0, at)`` and return the rest as a new line."""

        index = min(max(at, 0), len(self._cells))
        suffix = Line("".join(self._cells[index:]), tab_width=self.tab_width)
        self._reset("".join(self._cells[:index]))
        return suffix

    def append(self, other: "Line") -> None:
        self._reset(self._text + other.text)

    def render(self, start: int, end: int) -> str:
        """Return the full clusters in ``[start, min(end, length))``."""

        end = min(max(end, 0), len(self._cells))
        start = min(max(start, 0), end)
        return "".join(self._cells[start:end])

    def serialize(self) -> bytes:
        return self._text.encode("utf-8")


__all__ = ["Line"]
