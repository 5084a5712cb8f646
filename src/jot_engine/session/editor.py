"""The explicit editing context threaded through the key/update/render cycle."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

from jot_engine.buffer import Buffer, Position
from jot_engine.runtime import telemetry
from jot_engine.runtime.config import EditorConfig
from jot_engine.viewport import Movement, ViewportController, ViewportSize

from .commands import run_command_line
from .keymap import Command, CommandKind, KeyInput, Mode, resolve_key


@dataclass(slots=True)
class KeyResult:
    """Result returned from ``EditorSession.handle_key``."""

    consumed: bool
    status: str = "ok"
    message: Optional[str] = None


def gutter_width(line_count: int) -> int:
    """Digits needed for the largest line number."""

    return len(str(line_count))


class EditorSession:
    """Buffer, viewport controller and mode state for one editor process.

    Hosts feed normalized :class:`KeyInput` events to :meth:`handle_key` one
    at a time and read the updated state back (usually through
    :func:`jot_engine.render.render_frame`) once it returns.
    """

    def __init__(
        self,
        buffer: Optional[Buffer] = None,
        *,
        config: Optional[EditorConfig] = None,
    ) -> None:
        self.config = config or EditorConfig()
        if buffer is None:
            buffer = Buffer.new_empty(tab_width=self.config.tab_width)
        self.buffer = buffer
        self.viewport = ViewportController(
            self.buffer, scroll_margin=self.config.scroll_margin
        )
        self.mode = Mode.NORMAL
        self.command_text = ""
        self.status_message: Optional[str] = None
        self.quit_requested = False
        self.width = self.config.default_width
        self.height = self.config.default_height
        self._sync_viewport()

    @classmethod
    def open(
        cls,
        path: str | os.PathLike[str] | None = None,
        *,
        config: Optional[EditorConfig] = None,
    ) -> "EditorSession":
        config = config or EditorConfig.from_env()
        if path is None:
            return cls(config=config)
        return cls(Buffer.open(path, tab_width=config.tab_width), config=config)

    @property
    def cursor(self) -> Position:
        return self.viewport.cursor

    @property
    def scroll_offset(self) -> Position:
        return self.viewport.scroll_offset

    def resize(self, width: int, height: int) -> None:
        """Record the terminal text area; the gutter is carved out of ``width``."""

        self.width = max(width, 1)
        self.height = max(height, 1)
        self._sync_viewport()

    def _sync_viewport(self) -> None:
        text_width = max(self.width - gutter_width(self.buffer.line_count), 1)
        size = ViewportSize(width=text_width, height=self.height)
        if size != self.viewport.size:
            self.viewport.resize(size)

    def handle_key(self, key: KeyInput) -> KeyResult:
        with telemetry.span(
            "session::key",
            component="session",
            metadata={"key": key.key, "mode": self.mode.value},
        ):
            command = resolve_key(self.mode, key)
            if command is None:
                return KeyResult(consumed=False, status="miss")
            return self.apply(command)

    def apply(self, command: Command) -> KeyResult:
        kind = command.kind
        viewport = self.viewport
        result = KeyResult(consumed=True, status=kind.value)

        if kind is CommandKind.INSERT_CHAR and command.text:
            cells = self.buffer.insert_char(viewport.cursor, command.text)
            self._sync_viewport()
            viewport.advance(cells)
        elif kind is CommandKind.INSERT_LINE_BREAK:
            if self.buffer.insert_line_break(viewport.cursor):
                self._sync_viewport()
                viewport.set_cursor(Position(column=0, row=viewport.cursor.row + 1))
        elif kind is CommandKind.DELETE_FORWARD:
            self.buffer.delete_at(viewport.cursor)
            self._sync_viewport()
            viewport.clamp()
        elif kind is CommandKind.DELETE_BACKWARD:
            if viewport.cursor.column > 0 or viewport.cursor.row > 0:
                viewport.move(Movement.LEFT)
                self.buffer.delete_at(viewport.cursor)
                self._sync_viewport()
                viewport.clamp()
        elif kind is CommandKind.MOVE and command.movement is not None:
            viewport.move(command.movement)
        elif kind is CommandKind.SWITCH_MODE and command.mode is not None:
            self.switch_mode(command.mode)
        elif kind is CommandKind.COMMAND_INPUT and command.text:
            self.command_text += command.text
        elif kind is CommandKind.COMMAND_BACKSPACE:
            if self.command_text:
                self.command_text = self.command_text[:-1]
            else:
                self.switch_mode(Mode.NORMAL)
        elif kind is CommandKind.COMMAND_SUBMIT:
            outcome = run_command_line(self, self.command_text)
            self.switch_mode(Mode.NORMAL)
            self.status_message = outcome.message
            self.quit_requested = self.quit_requested or outcome.quit
            result = KeyResult(
                consumed=True, status=outcome.status, message=outcome.message
            )
        elif kind is CommandKind.QUIT:
            self.quit_requested = True
        return result

    def switch_mode(self, mode: Mode) -> None:
        if mode is self.mode:
            return
        self.mode = mode
        self.command_text = ""
        if mode is Mode.COMMAND:
            self.status_message = None
        telemetry.record_event("mode.switch", data={"mode": mode.value})


__all__ = ["EditorSession", "KeyResult", "gutter_width"]
