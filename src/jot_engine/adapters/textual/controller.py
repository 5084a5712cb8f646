"""Minimal Textual adapter that wires EditorSession results into UI callbacks."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Iterable, Optional

from jot_engine.render import Frame, render_frame
from jot_engine.session import EditorSession, KeyInput, KeyResult


def _noop(*_args, **_kwargs) -> None:  # pragma: no cover - default hook
    return None


@dataclass(slots=True)
class TextualUIHooks:
    """Callbacks invoked by the adapter to update Textual widgets."""

    update_frame: Callable[[Frame], None]
    update_status: Callable[[str], None] = _noop
    request_quit: Callable[[], None] = _noop
    log: Callable[[str], None] = _noop


class TextualJotAdapter:
    """Bridges an EditorSession to a Textual-friendly surface."""

    def __init__(self, session: EditorSession, hooks: TextualUIHooks) -> None:
        self.session = session
        self.hooks = hooks
        self._refresh()

    def handle_textual_key(
        self,
        key: str,
        *,
        text: Optional[str] = None,
        modifiers: Iterable[str] = (),
    ) -> KeyResult:
        """Translate a Textual key event into a KeyInput and dispatch it."""

        normalized_modifiers = tuple(str(mod).upper() for mod in modifiers)
        self._log_state("key ->", key=key, text=text, mods=normalized_modifiers)
        result = self.session.handle_key(
            KeyInput(key=key, text=text, modifiers=normalized_modifiers)
        )
        self._log_state(
            "result <-",
            consumed=result.consumed,
            status=result.status,
            message=result.message,
        )
        if result.message:
            self.hooks.update_status(result.message)
        self._refresh()
        if self.session.quit_requested:
            self.hooks.request_quit()
        return result

    def resize(self, width: int, height: int) -> None:
        self.session.resize(width, height)
        self._refresh()

    def _refresh(self) -> None:
        self.hooks.update_frame(render_frame(self.session))

    def _log_state(self, prefix: str, **fields: object) -> None:
        snapshot = self._state_metadata()
        snapshot.update({k: v for k, v in fields.items() if v is not None})
        parts = [prefix]
        for key, value in snapshot.items():
            parts.append(f"{key}={value!r}")
        self.hooks.log(" ".join(parts))

    def _state_metadata(self) -> Dict[str, object]:
        session = self.session
        return {
            "mode": session.mode.value,
            "cursor": (session.cursor.column, session.cursor.row),
            "offset": (session.scroll_offset.column, session.scroll_offset.row),
            "lines": session.buffer.line_count,
            "dirty": session.buffer.dirty,
        }


__all__ = ["TextualJotAdapter", "TextualUIHooks"]
