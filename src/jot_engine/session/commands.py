"""Ex-style command lines (``:w``, ``:q`` and friends)."""

from __future__ import annotations

from dataclasses import dataclass
from functools import partial
from typing import TYPE_CHECKING, Callable, Dict, List, Optional

from jot_engine.buffer import BufferSaveError
from jot_engine.runtime import telemetry

if TYPE_CHECKING:
    from .editor import EditorSession


@dataclass(frozen=True, slots=True)
class CommandOutcome:
    """Result of evaluating one command line."""

    status: str
    message: Optional[str] = None
    quit: bool = False


CommandHandler = Callable[["EditorSession", List[str]], CommandOutcome]


def run_command_line(session: "EditorSession", raw: str) -> CommandOutcome:
    text = raw.strip()
    if not text:
        return CommandOutcome(status="command_empty")
    parts = text.split()
    name, args = parts[0], parts[1:]
    handler = _COMMAND_HANDLERS.get(name)
    telemetry.record_event(
        "command.submit", data={"command": name, "known": handler is not None}
    )
    if handler is None:
        return CommandOutcome(
            status="command_error", message=f"Not an editor command: {name}"
        )
    return handler(session, args)


def _write(session: "EditorSession", args: List[str]) -> Optional[CommandOutcome]:
    buffer = session.buffer
    if args:
        buffer.path = args[0]
    if buffer.path is None:
        return CommandOutcome(status="command_error", message="No file name")
    try:
        buffer.save()
    except BufferSaveError as exc:
        telemetry.record_event(
            "command.write_failed", level="error", data={"path": exc.path}
        )
        return CommandOutcome(status="write_error", message=str(exc))
    return None


def _written_message(session: "EditorSession") -> str:
    return f'"{session.buffer.path}" {session.buffer.line_count}L written'


def _handle_write(session: "EditorSession", args: List[str]) -> CommandOutcome:
    failure = _write(session, args)
    if failure is not None:
        return failure
    return CommandOutcome(status="command_write", message=_written_message(session))


def _handle_quit(
    session: "EditorSession", args: List[str], *, force: bool = False
) -> CommandOutcome:
    del args
    if session.buffer.dirty and not force:
        return CommandOutcome(
            status="command_error",
            message="No write since last change (add ! to override)",
        )
    return CommandOutcome(status="command_quit", quit=True)


def _handle_write_quit(
    session: "EditorSession", args: List[str], *, only_if_dirty: bool = False
) -> CommandOutcome:
    if not only_if_dirty or session.buffer.dirty:
        failure = _write(session, args)
        if failure is not None:
            return failure
    return CommandOutcome(status="command_wq", quit=True)


_COMMAND_HANDLERS: Dict[str, CommandHandler] = {
    "w": _handle_write,
    "write": _handle_write,
    "q": _handle_quit,
    "quit": _handle_quit,
    "q!": partial(_handle_quit, force=True),
    "quit!": partial(_handle_quit, force=True),
    "wq": _handle_write_quit,
    "wq!": _handle_write_quit,
    "x": partial(_handle_write_quit, only_if_dirty=True),
    "x!": partial(_handle_write_quit, only_if_dirty=True),
    "exit": partial(_handle_write_quit, only_if_dirty=True),
}


__all__ = ["CommandOutcome", "run_command_line"]
