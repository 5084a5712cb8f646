"""Grapheme-aware text buffer and viewport engine for a terminal editor."""

__all__ = [
    "adapters",
    "buffer",
    "render",
    "runtime",
    "session",
    "viewport",
]

__version__ = "0.1.0"
