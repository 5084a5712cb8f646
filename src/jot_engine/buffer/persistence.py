"""On-disk layout for buffers: UTF-8 text, one ``\\n`` after every line."""

from __future__ import annotations

import os
from typing import Iterable, List

LINE_TERMINATOR = b"\n"


class BufferSaveError(RuntimeError):
    """Raised when a buffer cannot be written back to its path."""

    def __init__(self, path: str | os.PathLike[str], reason: str) -> None:
        super().__init__(f"Cannot write '{os.fspath(path)}': {reason}")
        self.path = os.fspath(path)
        self.reason = reason


def split_lines(content: str) -> List[str]:
    """Split file content into lines without their terminators.

    Only ``\\n`` separates lines; a ``\\r`` directly before it is dropped, and
    a final terminator does not open an extra empty line.
    """

    if not content:
        return []
    lines = content.split("\n")
    if content.endswith("\n"):
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def encode_lines(lines: Iterable[bytes]) -> bytes:
    return b"".join(line + LINE_TERMINATOR for line in lines)


__all__ = ["BufferSaveError", "LINE_TERMINATOR", "encode_lines", "split_lines"]
