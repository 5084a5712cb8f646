"""Ordered-line document with file-backed persistence."""

from __future__ import annotations

import os
from typing import Iterator, List, Optional

from jot_engine.runtime import telemetry
from jot_engine.runtime.config import TAB_WIDTH

from .line import Line
from .persistence import BufferSaveError, encode_lines, split_lines
from .state import Position


class Buffer:
    """The document: a list of :class:`Line`, an optional path and a dirty flag.

    Mutations are addressed by :class:`Position`. Positions outside the
    document are ignored rather than rejected; the row equal to
    ``line_count`` is the virtual append row.
    """

    def __init__(
        self,
        lines: Optional[List[Line]] = None,
        *,
        path: str | os.PathLike[str] | None = None,
        tab_width: int = TAB_WIDTH,
    ) -> None:
        self.tab_width = tab_width
        self._lines: List[Line] = (
            list(lines) if lines is not None else [Line(tab_width=tab_width)]
        )
        self.path: Optional[str] = os.fspath(path) if path is not None else None
        self.dirty = False

    @classmethod
    def new_empty(cls, *, tab_width: int = TAB_WIDTH) -> "Buffer":
        return cls(tab_width=tab_width)

    @classmethod
    def from_text(cls, text: str, *, tab_width: int = TAB_WIDTH) -> "Buffer":
        return cls(
            [Line(value, tab_width=tab_width) for value in split_lines(text)],
            tab_width=tab_width,
        )

    @classmethod
    def open(
        cls, path: str | os.PathLike[str], *, tab_width: int = TAB_WIDTH
    ) -> "Buffer":
        """Load ``path``; an unreadable file yields an empty buffer bound to it."""

        try:
            with open(path, "r", encoding="utf-8", newline="") as handle:
                content = handle.read()
        except (OSError, UnicodeDecodeError) as exc:
            telemetry.record_event(
                "buffer.open_new",
                data={"path": os.fspath(path), "reason": str(exc)},
            )
            return cls([], path=path, tab_width=tab_width)

        lines = [Line(value, tab_width=tab_width) for value in split_lines(content)]
        telemetry.record_event(
            "buffer.open", data={"path": os.fspath(path), "lines": len(lines)}
        )
        return cls(lines, path=path, tab_width=tab_width)

    @property
    def line_count(self) -> int:
        return len(self._lines)

    def __len__(self) -> int:
        return len(self._lines)

    def __iter__(self) -> Iterator[Line]:
        return iter(self._lines)

    def is_logically_empty(self) -> bool:
        # A fresh buffer holds one empty line; a new file holds none.
        if not self._lines:
            return True
        return len(self._lines) == 1 and self._lines[0].is_empty()

    def line(self, index: int) -> Optional[Line]:
        if 0 <= index < len(self._lines):
            return self._lines[index]
        return None

    def texts(self) -> List[str]:
        return [line.text for line in self._lines]

    def save(self) -> None:
        """Rewrite the file at ``path``; a buffer without a path is left alone."""

        if self.path is None:
            return
        with telemetry.span(
            "buffer::save", component="buffer", metadata={"path": self.path}
        ):
            payload = encode_lines(line.serialize() for line in self._lines)
            try:
                with open(self.path, "wb") as handle:
                    handle.write(payload)
            except OSError as exc:
                raise BufferSaveError(self.path, exc.strerror or str(exc)) from exc
            self.dirty = False
        telemetry.record_event(
            "buffer.save", data={"path": self.path, "lines": len(self._lines)}
        )

    def insert_char(self, pos: Position, char: str) -> int:
        """Insert ``char`` at ``pos`` and return the number of cells added."""

        if not char or pos.row < 0 or pos.row > len(self._lines):
            return 0
        with telemetry.span(
            "buffer::insert_char",
            component="buffer",
            metadata={"row": pos.row, "column": pos.column},
        ):
            if pos.row == len(self._lines):
                line = Line(tab_width=self.tab_width)
                added = line.insert(0, char)
                self._lines.append(line)
                self.dirty = True
                return added
            added = self._lines[pos.row].insert(pos.column, char)
            self.dirty = True
            return added

    def insert_line_break(self, pos: Position) -> bool:
        if pos.row < 0 or pos.row > len(self._lines):
            return False
        with telemetry.span(
            "buffer::insert_line_break",
            component="buffer",
            metadata={"row": pos.row, "column": pos.column},
        ):
            if pos.row == len(self._lines):
                self._lines.append(Line(tab_width=self.tab_width))
            else:
                suffix = self._lines[pos.row].split(pos.column)
                self._lines.insert(pos.row + 1, suffix)
            self.dirty = True
            return True

    def delete_at(self, pos: Position) -> bool:
        """Delete the cell at ``pos``, merging the next line at end of line."""

        if pos.row < 0 or pos.row >= len(self._lines):
            return False
        with telemetry.span(
            "buffer::delete_at",
            component="buffer",
            metadata={"row": pos.row, "column": pos.column},
        ):
            current = self._lines[pos.row]
            if pos.column == len(current) and pos.row + 1 < len(self._lines):
                following = self._lines.pop(pos.row + 1)
                current.append(following)
                changed = True
            else:
                changed = current.delete(pos.column)
            if changed:
                self.dirty = True
            return changed


__all__ = ["Buffer"]
