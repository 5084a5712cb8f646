"""Frame rendering for terminal hosts."""

from .frame import Frame, render_frame

__all__ = ["Frame", "render_frame"]
