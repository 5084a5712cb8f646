"""Mode-aware translation of normalized key events into editor commands."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Mapping, Optional, Tuple

from jot_engine.viewport import Movement


@dataclass(frozen=True, slots=True)
class KeyInput:
    """Normalized key event handed to the session."""

    key: str
    modifiers: Tuple[str, ...] = ()
    text: Optional[str] = None

    @property
    def token(self) -> str:
        if self.modifiers:
            modifier = "+".join(mod.lower() for mod in self.modifiers)
            return f"{modifier}+{self.key.lower()}"
        return self.key


class Mode(str, Enum):
    NORMAL = "normal"
    INSERT = "insert"
    COMMAND = "command"

    @property
    def indicator(self) -> str:
        return f" {self.value[0].upper()} "


class CommandKind(str, Enum):
    INSERT_CHAR = "insert_char"
    INSERT_LINE_BREAK = "insert_line_break"
    DELETE_FORWARD = "delete_forward"
    DELETE_BACKWARD = "delete_backward"
    MOVE = "move"
    SWITCH_MODE = "switch_mode"
    COMMAND_INPUT = "command_input"
    COMMAND_BACKSPACE = "command_backspace"
    COMMAND_SUBMIT = "command_submit"
    QUIT = "quit"


@dataclass(frozen=True, slots=True)
class Command:
    """A single editing intent produced from one key event."""

    kind: CommandKind
    text: Optional[str] = None
    movement: Optional[Movement] = None
    mode: Optional[Mode] = None


def _move(movement: Movement) -> Command:
    return Command(CommandKind.MOVE, movement=movement)


def _switch(mode: Mode) -> Command:
    return Command(CommandKind.SWITCH_MODE, mode=mode)


GLOBAL_BINDINGS: Mapping[str, Command] = MappingProxyType(
    {
        "ctrl+q": Command(CommandKind.QUIT),
        "UP": _move(Movement.UP),
        "DOWN": _move(Movement.DOWN),
        "LEFT": _move(Movement.LEFT),
        "RIGHT": _move(Movement.RIGHT),
        "PAGEUP": _move(Movement.PAGE_UP),
        "PAGEDOWN": _move(Movement.PAGE_DOWN),
        "HOME": _move(Movement.HOME),
        "END": _move(Movement.END),
    }
)

MODE_BINDINGS: Mapping[Mode, Mapping[str, Command]] = MappingProxyType(
    {
        Mode.NORMAL: MappingProxyType(
            {
                "i": _switch(Mode.INSERT),
                ":": _switch(Mode.COMMAND),
                "h": _move(Movement.LEFT),
                "j": _move(Movement.DOWN),
                "k": _move(Movement.UP),
                "l": _move(Movement.RIGHT),
                "0": _move(Movement.HOME),
                "$": _move(Movement.END),
                "x": Command(CommandKind.DELETE_FORWARD),
                "DELETE": Command(CommandKind.DELETE_FORWARD),
            }
        ),
        Mode.INSERT: MappingProxyType(
            {
                "ESC": _switch(Mode.NORMAL),
                "ENTER": Command(CommandKind.INSERT_LINE_BREAK),
                "TAB": Command(CommandKind.INSERT_CHAR, text="\t"),
                "BACKSPACE": Command(CommandKind.DELETE_BACKWARD),
                "DELETE": Command(CommandKind.DELETE_FORWARD),
            }
        ),
        Mode.COMMAND: MappingProxyType(
            {
                "ESC": _switch(Mode.NORMAL),
                "ENTER": Command(CommandKind.COMMAND_SUBMIT),
                "BACKSPACE": Command(CommandKind.COMMAND_BACKSPACE),
            }
        ),
    }
)


def resolve_key(mode: Mode, key: KeyInput) -> Optional[Command]:
    """Return the command bound to ``key`` in ``mode``, if any.

    Mode bindings win over global ones. In insert and command mode any other
    key carrying printable text becomes text input.
    """

    token = key.token
    bound = MODE_BINDINGS[mode].get(token) or GLOBAL_BINDINGS.get(token)
    if bound is not None:
        return bound
    if key.modifiers or not key.text or not key.text.isprintable():
        return None
    if mode is Mode.INSERT:
        return Command(CommandKind.INSERT_CHAR, text=key.text)
    if mode is Mode.COMMAND:
        return Command(CommandKind.COMMAND_INPUT, text=key.text)
    return None


__all__ = [
    "Command",
    "CommandKind",
    "GLOBAL_BINDINGS",
    "KeyInput",
    "MODE_BINDINGS",
    "Mode",
    "resolve_key",
]
