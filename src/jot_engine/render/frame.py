"""Turn an :class:`EditorSession` into the rows a host paints on screen."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

from jot_engine import __version__
from jot_engine.buffer import Line, Position
from jot_engine.session import EditorSession, Mode, gutter_width

EDITOR_NAME = "Jot"
AUTHOR = "by @aneekm"
EMPTY_ROW = "~"


@dataclass(slots=True)
class Frame:
    """One fully rendered screen.

    ``rows`` holds exactly ``height`` strings; ``cursor`` is the terminal cell
    (gutter included) where the host should place its cursor.
    """

    rows: List[str] = field(default_factory=list)
    status: str = ""
    command_line: str = ""
    cursor: Position = field(default_factory=Position)


def center_text(text: str, width: int) -> str:
    padding = max(width - len(text), 0) // 2
    return " " * padding + text


def _draw_line(session: EditorSession, line: Line, index: int) -> str:
    number_width = gutter_width(session.buffer.line_count)
    start = session.scroll_offset.column
    end = start + session.viewport.size.width
    return f"{index + 1:>{number_width}}{line.render(start, end)}"


def _welcome_rows(width: int) -> List[str]:
    inner = max(width - 1, 0)
    return [
        EMPTY_ROW + center_text(EDITOR_NAME, inner),
        EMPTY_ROW,
        EMPTY_ROW + center_text(__version__, inner),
        EMPTY_ROW + center_text(AUTHOR, inner),
    ]


def draw_rows(session: EditorSession) -> List[str]:
    height = session.height
    offset_row = session.scroll_offset.row
    welcome: List[str] = []
    if session.buffer.is_logically_empty():
        welcome = _welcome_rows(session.width)
    welcome_start = max(height // 2 - len(welcome) // 2, 0)

    rows: List[str] = []
    while len(rows) < height:
        screen_row = len(rows)
        index = offset_row + screen_row
        line = session.buffer.line(index)
        if line is not None:
            rows.append(_draw_line(session, line, index))
        elif welcome and screen_row >= welcome_start:
            rows.extend(welcome)
            welcome = []
        else:
            rows.append(EMPTY_ROW)
    return rows[:height]


def draw_status(session: EditorSession) -> str:
    buffer = session.buffer
    width = session.width
    status = session.mode.indicator + (buffer.path or "")
    if buffer.dirty:
        status += " [!]"
    indicator = (
        f"Text | {session.cursor.row + 1:>3},{session.cursor.column + 1}"
        f"/{buffer.line_count}"
    )
    padding = " " * max(width - len(status) - len(indicator), 0)
    return (status + padding + indicator)[:width]


def draw_command_line(session: EditorSession) -> str:
    if session.mode is Mode.COMMAND:
        return f":{session.command_text}"
    return session.status_message or ""


def render_frame(session: EditorSession) -> Frame:
    screen = session.viewport.screen_cursor()
    cursor = Position(
        column=screen.column + gutter_width(session.buffer.line_count),
        row=screen.row,
    )
    return Frame(
        rows=draw_rows(session),
        status=draw_status(session),
        command_line=draw_command_line(session),
        cursor=cursor,
    )


__all__ = [
    "AUTHOR",
    "EDITOR_NAME",
    "Frame",
    "center_text",
    "draw_command_line",
    "draw_rows",
    "draw_status",
    "render_frame",
]
