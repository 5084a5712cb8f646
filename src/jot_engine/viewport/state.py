"""Viewport dimensions and navigation intents."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Movement(str, Enum):
    """Cursor navigation intents understood by the viewport controller."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    PAGE_UP = "page_up"
    PAGE_DOWN = "page_down"
    HOME = "home"
    END = "end"


@dataclass(frozen=True, slots=True)
class ViewportSize:
    """Visible text area in character cells."""

    width: int = 80
    height: int = 24

    def __post_init__(self) -> None:
        if self.width < 1 or self.height < 1:
            raise ValueError(
                f"viewport must be at least 1x1, got {self.width}x{self.height}"
            )
