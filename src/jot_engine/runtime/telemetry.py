"""Structured logging and profiling for the editor, built on telelog.

The editor owns the terminal, so nothing is written to the console unless
``JOT_ENGINE_LOG_CONSOLE`` is set; ``JOT_ENGINE_LOG_FILE`` sends records to a
file instead.
"""

from __future__ import annotations

import os
from contextlib import ExitStack, contextmanager
from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, MutableMapping, Optional, Tuple, cast

import telelog  # type: ignore[import]

tl = cast(Any, telelog)

ENV_PREFIX = "JOT_ENGINE_"
ROOT_LOGGER = "jot_engine"

_loggers: MutableMapping[str, Any] = {}
_config: Optional[Any] = None


def _env_flag(name: str) -> bool:
    raw = os.getenv(f"{ENV_PREFIX}{name}")
    return raw is not None and raw.lower() in {"1", "true", "yes", "on"}


def _pairs(data: Dict[str, Any]) -> list[tuple[str, str]]:
    return [(str(key), str(value)) for key, value in data.items()]


def build_config() -> Any:
    """Translate the ``JOT_ENGINE_LOG_*`` environment into a ``tl.Config``."""

    config = tl.Config()
    config.with_min_level(os.getenv(f"{ENV_PREFIX}LOG_LEVEL", "INFO").upper())
    console = _env_flag("LOG_CONSOLE")
    config.with_console_output(console)
    if console:
        config.with_colored_output(not _env_flag("NO_COLOR"))
    if _env_flag("LOG_JSON"):
        config.with_json_format(True)

    log_file = os.getenv(f"{ENV_PREFIX}LOG_FILE")
    if log_file:
        config.with_file_output(log_file)
    if _env_flag("LOG_BUFFERED"):
        config.with_buffering(True)
        size = os.getenv(f"{ENV_PREFIX}LOG_BUFFER_SIZE", "2048")
        config.with_buffer_size(int(size))

    config.with_profiling(True)
    return config


def get_logger(name: Optional[str] = None) -> Any:
    global _config
    key = name or ROOT_LOGGER
    if key not in _loggers:
        if _config is None:
            _config = build_config()
        _loggers[key] = tl.Logger.with_config(key, _config)
    return _loggers[key]


def _level_method(logger: Any, level: str) -> Tuple[Any, bool]:
    structured = getattr(logger, f"{level}_with", None)
    if structured is not None:
        return structured, True
    plain = getattr(logger, level, None)
    if plain is None:
        raise ValueError(f"Unsupported log level '{level}'.")
    return plain, False


def _emit(logger: Any, level: str, message: str, payload: Dict[str, Any]) -> None:
    method, structured = _level_method(logger, level.lower())
    if structured:
        method(message, _pairs(payload))
    else:
        method(f"{message} {payload}")


def record_event(
    name: str,
    *,
    level: str = "info",
    data: Optional[Dict[str, Any]] = None,
    logger_name: Optional[str] = None,
) -> None:
    """Emit an ``event::<name>`` record carrying ``data``."""

    payload = {"event": name, **(data or {})}
    _emit(get_logger(logger_name), level, f"event::{name}", payload)


@dataclass
class SpanHandle:
    logger: Any
    span_name: str
    component_name: Optional[str] = None
    metadata: Dict[str, str] = field(default_factory=dict)

    def fail(self, reason: str) -> None:
        payload: Dict[str, Any] = {"span": self.span_name, **self.metadata}
        if self.component_name:
            payload["component"] = self.component_name
        payload["reason"] = reason
        _emit(self.logger, "error", "span::fail", payload)


@contextmanager
def span(
    name: str,
    *,
    logger_name: Optional[str] = None,
    component: Optional[str | bool] = None,
    metadata: Optional[Dict[str, Any]] = None,
) -> Iterator[SpanHandle]:
    """Profile a block, optionally tracked as a component.

    ``metadata`` is attached as logger context while the block runs. An
    exception escaping the block is logged as ``span::fail`` and re-raised.
    """

    log = get_logger(logger_name)
    component_name = name if component is True else component or None
    context = {key: str(value) for key, value in (metadata or {}).items()}
    for key, value in context.items():
        log.add_context(key, value)

    with ExitStack() as stack:
        if component_name:
            stack.enter_context(log.track_component(component_name))
        stack.enter_context(log.profile(name))
        handle = SpanHandle(log, name, component_name, dict(context))
        try:
            yield handle
        except Exception as exc:
            handle.fail(str(exc))
            raise
        finally:
            for key in context:
                log.remove_context(key)


__all__ = [
    "SpanHandle",
    "build_config",
    "get_logger",
    "record_event",
    "span",
]
