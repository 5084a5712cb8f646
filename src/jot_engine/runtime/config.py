"""Editor configuration and constants."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

ENV_PREFIX = "JOT_ENGINE_"

SCROLL_MARGIN = 5
TAB_WIDTH = 4


def _env_int(env: Mapping[str, str], key: str, fallback: int) -> int:
    value = env.get(f"{ENV_PREFIX}{key}")
    if value is None:
        return fallback
    try:
        parsed = int(value)
    except ValueError:
        return fallback
    return parsed if parsed >= 0 else fallback


@dataclass(frozen=True, slots=True)
class EditorConfig:
    """Tunables shared by the viewport controller and the session."""

    scroll_margin: int = SCROLL_MARGIN
    tab_width: int = TAB_WIDTH
    default_width: int = 80
    default_height: int = 24

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None) -> "EditorConfig":
        source = os.environ if env is None else env
        return cls(
            scroll_margin=_env_int(source, "SCROLL_MARGIN", SCROLL_MARGIN),
            tab_width=_env_int(source, "TAB_WIDTH", TAB_WIDTH),
        )
