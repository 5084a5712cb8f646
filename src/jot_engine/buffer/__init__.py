"""Line storage, the document buffer and its on-disk format."""

from .document import Buffer
from .line import Line
from .persistence import BufferSaveError, encode_lines, split_lines
from .state import Position

__all__ = [
    "Buffer",
    "BufferSaveError",
    "Line",
    "Position",
    "encode_lines",
    "split_lines",
]
