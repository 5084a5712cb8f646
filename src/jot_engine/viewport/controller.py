"""Cursor movement and scroll-window arithmetic over a :class:`Buffer`."""

from __future__ import annotations

from typing import Optional

from jot_engine.buffer import Buffer, Position
from jot_engine.runtime.config import SCROLL_MARGIN

from .state import Movement, ViewportSize


class ViewportController:
    """Owns the cursor and scroll offset for one buffer.

    Every movement clamps the cursor into the document and then recomputes
    ``scroll_offset`` so the cursor stays inside the ``size`` window, keeping
    ``scroll_margin`` rows of context above and below it where the document
    allows.
    """

    def __init__(
        self,
        buffer: Buffer,
        *,
        size: Optional[ViewportSize] = None,
        scroll_margin: int = SCROLL_MARGIN,
    ) -> None:
        self.buffer = buffer
        self.size = size or ViewportSize()
        self.scroll_margin = scroll_margin
        self.cursor = Position()
        self.scroll_offset = Position()

    def row_length(self, row: int) -> int:
        line = self.buffer.line(row)
        return len(line) if line is not None else 0

    def resize(self, size: ViewportSize) -> None:
        self.size = size
        self.scroll()

    def move(self, movement: Movement) -> Position:
        self.cursor = self._step(self.cursor, movement)
        self.scroll()
        return self.cursor

    def advance(self, cells: int) -> Position:
        """Move right ``cells`` times, as after inserting that many cells."""

        cursor = self.cursor
        for _ in range(cells):
            cursor = self._step(cursor, Movement.RIGHT)
        self.cursor = cursor
        self.scroll()
        return self.cursor

    def set_cursor(self, position: Position) -> Position:
        """Place the cursor, clamping it into the document."""

        row = min(max(position.row, 0), self.buffer.line_count)
        column = min(max(position.column, 0), self.row_length(row))
        self.cursor = Position(column=column, row=row)
        self.scroll()
        return self.cursor

    def clamp(self) -> Position:
        """Re-clamp the cursor after the buffer changed underneath it."""

        return self.set_cursor(self.cursor)

    def _step(self, cursor: Position, movement: Movement) -> Position:
        column, row = cursor.column, cursor.row
        line_count = self.buffer.line_count
        width = self.row_length(row)
        height = self.size.height

        if movement is Movement.UP:
            row = max(row - 1, 0)
        elif movement is Movement.DOWN:
            if row < line_count:
                row += 1
        elif movement is Movement.LEFT:
            if column > 0:
                column -= 1
            elif row > 0:
                row -= 1
                column = self.row_length(row)
        elif movement is Movement.RIGHT:
            if column < width:
                column += 1
            elif row < line_count:
                row += 1
                column = 0
        elif movement is Movement.PAGE_UP:
            row = max(row - height, 0)
        elif movement is Movement.PAGE_DOWN:
            row = min(row + height, line_count)
        elif movement is Movement.HOME:
            column = 0
        elif movement is Movement.END:
            column = width

        column = min(column, self.row_length(row))
        return Position(column=column, row=row)

    def scroll(self) -> Position:
        """Recompute ``scroll_offset`` so the cursor is visible."""

        column, row = self.cursor.column, self.cursor.row
        width, height = self.size.width, self.size.height
        margin = self.scroll_margin
        offset_column, offset_row = self.scroll_offset.column, self.scroll_offset.row

        if row < offset_row + margin:
            offset_row = max(row - margin, 0)
        elif row >= offset_row + height - margin:
            offset_row = max(row - height + margin + 1, 0)
        # Short windows cannot honour both margins; keep the cursor on screen.
        offset_row = max(min(offset_row, row), row - height + 1, 0)

        if column < offset_column:
            offset_column = column
        elif column >= offset_column + width:
            offset_column = column - width + 1

        self.scroll_offset = Position(column=offset_column, row=offset_row)
        return self.scroll_offset

    def screen_cursor(self) -> Position:
        """Cursor position relative to the top-left of the viewport."""

        return Position(
            column=max(self.cursor.column - self.scroll_offset.column, 0),
            row=max(self.cursor.row - self.scroll_offset.row, 0),
        )


__all__ = ["ViewportController"]
