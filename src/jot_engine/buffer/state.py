"""Cursor coordinates shared by the buffer and viewport layers."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Position:
    """A ``(column, row)`` coordinate; column counts grapheme cells."""

    column: int = 0
    row: int = 0

    def with_column(self, column: int) -> "Position":
        return Position(column=column, row=self.row)

    def with_row(self, row: int) -> "Position":
        return Position(column=self.column, row=row)
