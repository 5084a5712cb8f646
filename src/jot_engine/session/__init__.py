"""Key mapping, ex commands and the editing session."""

from .commands import CommandOutcome, run_command_line
from .editor import EditorSession, KeyResult, gutter_width
from .keymap import Command, CommandKind, KeyInput, Mode, resolve_key

__all__ = [
    "Command",
    "CommandKind",
    "CommandOutcome",
    "EditorSession",
    "KeyInput",
    "KeyResult",
    "Mode",
    "gutter_width",
    "resolve_key",
    "run_command_line",
]
