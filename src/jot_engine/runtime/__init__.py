"""Runtime services: telemetry and configuration."""

from . import telemetry
from .config import EditorConfig

__all__ = ["telemetry", "EditorConfig"]
