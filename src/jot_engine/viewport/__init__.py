"""Cursor navigation and scrolling."""

from .controller import ViewportController
from .state import Movement, ViewportSize

__all__ = ["Movement", "ViewportController", "ViewportSize"]
