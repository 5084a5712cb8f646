"""Executable Textual app that hosts the editor session."""

from __future__ import annotations

import argparse
from typing import Optional, Sequence, Tuple

import grapheme
from rich.text import Text

try:  # pragma: no cover - imported only when the editor is run
    from textual import events
    from textual.app import App, ComposeResult
    from textual.widgets import Static
except ModuleNotFoundError as exc:  # pragma: no cover - friendly error for missing dep
    raise RuntimeError(
        "Install the 'textual' package to use jot_engine.adapters.textual.app"
    ) from exc

from jot_engine.render import Frame
from jot_engine.runtime import telemetry
from jot_engine.session import EditorSession, Mode

from .controller import TextualJotAdapter, TextualUIHooks

# Rows reserved below the text area for the status and command lines.
CHROME_ROWS = 2

NAMED_KEYS = {
    "escape": "ESC",
    "enter": "ENTER",
    "return": "ENTER",
    "tab": "TAB",
    "backspace": "BACKSPACE",
    "delete": "DELETE",
    "up": "UP",
    "down": "DOWN",
    "left": "LEFT",
    "right": "RIGHT",
    "pageup": "PAGEUP",
    "pagedown": "PAGEDOWN",
    "home": "HOME",
    "end": "END",
}


def normalize_key(
    key: str, character: Optional[str]
) -> Optional[Tuple[str, Optional[str], Tuple[str, ...]]]:
    """Map a Textual key name to ``(key, text, modifiers)``."""

    if key in NAMED_KEYS:
        return (NAMED_KEYS[key], None, ())
    *prefix, base = key.split("+")
    modifiers = tuple(mod.upper() for mod in prefix if mod != "shift")
    if modifiers:
        return (base, None, modifiers)
    if character and character.isprintable():
        return (character, character, ())
    return None


def frame_to_text(frame: Frame, *, show_cursor: bool = True) -> Text:
    """Render frame rows as rich text with the cursor cell reversed."""

    result = Text(no_wrap=True, overflow="crop")
    for index, row in enumerate(frame.rows):
        if index:
            result.append("\n")
        if not show_cursor or index != frame.cursor.row:
            result.append(row)
            continue
        cells = list(grapheme.graphemes(row))
        column = frame.cursor.column
        result.append("".join(cells[:column]))
        result.append(cells[column] if column < len(cells) else " ", style="reverse")
        result.append("".join(cells[column + 1 :]))
    return result


class JotApp(App[None]):
    """Full-screen Textual editor around one EditorSession."""

    CSS = """
	Screen {
		layout: vertical;
	}

	#buffer-view {
		height: 1fr;
		padding: 0;
	}

	#status-line {
		height: 1;
		color: rgb(136, 0, 26);
		background: rgb(230, 233, 236);
	}

	#command-line {
		height: 1;
	}
	"""

    def __init__(self, session: EditorSession) -> None:
        super().__init__()
        self.session = session
        self.adapter: TextualJotAdapter | None = None
        self._buffer_widget: Static | None = None
        self._status_widget: Static | None = None
        self._command_widget: Static | None = None
        self._telemetry_logger = telemetry.get_logger("jot_engine.adapters.textual")

    def compose(self) -> ComposeResult:
        self._buffer_widget = Static("", id="buffer-view")
        self._status_widget = Static("", id="status-line")
        self._command_widget = Static("", id="command-line")
        yield self._buffer_widget
        yield self._status_widget
        yield self._command_widget

    def on_mount(self) -> None:
        hooks = TextualUIHooks(
            update_frame=self._update_frame,
            request_quit=self.exit,
            log=self._telemetry_logger.debug,
        )
        self.session.resize(self.size.width, self.size.height - CHROME_ROWS)
        self.adapter = TextualJotAdapter(self.session, hooks)

    def on_resize(self, event: events.Resize) -> None:
        if self.adapter:
            self.adapter.resize(event.size.width, event.size.height - CHROME_ROWS)

    def on_key(self, event: events.Key) -> None:
        if not self.adapter:
            return
        normalized = normalize_key(event.key, event.character)
        if normalized is None:
            return
        key, text, modifiers = normalized
        self.adapter.handle_textual_key(key, text=text, modifiers=modifiers)
        event.stop()
        event.prevent_default()

    def _update_frame(self, frame: Frame) -> None:
        in_command = self.session.mode is Mode.COMMAND
        if self._buffer_widget:
            text = frame_to_text(frame, show_cursor=not in_command)
            self._buffer_widget.update(text)
        if self._status_widget:
            self._status_widget.update(Text(frame.status, no_wrap=True))
        if self._command_widget:
            command = Text(frame.command_line, no_wrap=True)
            if in_command:
                command.append(" ", style="reverse")
            self._command_widget.update(command)


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="jot", description="Edit a text file in the terminal."
    )
    parser.add_argument(
        "path",
        nargs="?",
        help="File to edit; created on first save if it does not exist",
    )
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = _parse_args(argv)
    session = EditorSession.open(args.path)
    JotApp(session).run()


if __name__ == "__main__":  # pragma: no cover - manual run
    main()
