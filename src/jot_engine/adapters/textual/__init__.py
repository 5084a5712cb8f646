"""Textual host for the editor session."""

from .controller import TextualJotAdapter, TextualUIHooks

__all__ = ["TextualJotAdapter", "TextualUIHooks"]
