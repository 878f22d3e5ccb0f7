"""Structured logging for the editor, built directly on telelog.

``configure(...)`` -- replace the active telelog configuration
``get_logger(name)`` -- fetch (and cache) a logger using that configuration
``record_event(name, ...)`` -- emit one ``event::<name>`` line with a payload
``span(name, ...)`` -- profile a block, optionally tracking it as a component

Settings come from ``VIE_LOG_LEVEL``, ``VIE_LOG_FILE``, ``VIE_LOG_JSON``,
``VIE_DISABLE_CONSOLE`` and ``VIE_NO_COLOR``.
"""

from __future__ import annotations

import os
from contextlib import ExitStack, contextmanager
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Iterator, MutableMapping, Optional, cast

import telelog  # type: ignore[import]

tl = cast(Any, telelog)

ENV_PREFIX = "VIE_"
DEFAULT_LOGGER_NAME = os.getenv(f"{ENV_PREFIX}LOGGER", "vie")

_LOGGER_CACHE: MutableMapping[str, Any] = {}
_ACTIVE_CONFIG: Optional[Any] = None


def _env(name: str) -> Optional[str]:
    return os.getenv(f"{ENV_PREFIX}{name}")


def _env_flag(name: str, default: bool) -> bool:
    raw = _env(name)
    if raw is None:
        return default
    return raw.lower() in {"1", "true", "yes", "on"}


def _stringify(value: Any) -> str:
    if isinstance(value, str):
        return value
    return repr(value) if isinstance(value, (dict, list, tuple, set)) else str(value)


def _pairs(payload: Dict[str, Any]) -> list[tuple[str, str]]:
    return [(str(key), _stringify(value)) for key, value in payload.items()]


def _build_config(
    *, console: Optional[bool] = None, log_file: Optional[str] = None
) -> Any:
    config = tl.Config()
    config.with_min_level((_env("LOG_LEVEL") or "INFO").upper())

    if console is None:
        console = not _env_flag("DISABLE_CONSOLE", False)
    config.with_console_output(console)
    if console:
        config.with_colored_output(not _env_flag("NO_COLOR", False))
    if _env_flag("LOG_JSON", False):
        config.with_json_format(True)

    if log_file is None:
        log_file = _env("LOG_FILE")
    if log_file:
        config.with_file_output(log_file)

    config.with_profiling(True)
    return config


def configure(
    *,
    config: Optional[Any] = None,
    console: Optional[bool] = None,
    log_file: Optional[str] = None,
) -> None:
    """Replace the active telelog configuration.

    ``config`` is adopted as given. Otherwise one is built from the ``VIE_*``
    environment, where ``console`` overrides ``VIE_DISABLE_CONSOLE`` and
    ``log_file`` overrides ``VIE_LOG_FILE``. The editor passes
    ``console=False`` because stdout belongs to the fullscreen display.
    """

    global _ACTIVE_CONFIG
    if config is not None and (console is not None or log_file is not None):
        raise ValueError("Provide either `config` or sink overrides, not both.")

    _ACTIVE_CONFIG = config if config is not None else _build_config(
        console=console, log_file=log_file
    )
    _LOGGER_CACHE.clear()


def get_logger(name: Optional[str] = None) -> Any:
    """Return a cached ``telelog.Logger`` for ``name``."""

    global _ACTIVE_CONFIG
    logger_name = name or DEFAULT_LOGGER_NAME
    logger = _LOGGER_CACHE.get(logger_name)
    if logger is None:
        if _ACTIVE_CONFIG is None:
            _ACTIVE_CONFIG = _build_config()
        logger = tl.Logger.with_config(logger_name, _ACTIVE_CONFIG)
        _LOGGER_CACHE[logger_name] = logger
    return logger


def _emit(logger: Any, level: str, message: str, payload: Dict[str, Any]) -> None:
    # telelog exposes ``<level>_with(message, pairs)`` for structured lines.
    name = str(level).lower()
    structured: Optional[Callable[..., Any]] = getattr(logger, f"{name}_with", None)
    if structured is not None:
        structured(message, _pairs(payload))
        return
    plain = getattr(logger, name, None)
    if plain is None:
        raise ValueError(f"Unsupported log level '{level}'.")
    plain(f"{message} {payload}")


def record_event(
    name: str,
    *,
    level: str = "info",
    data: Optional[Dict[str, Any]] = None,
    logger_name: Optional[str] = None,
) -> None:
    """Emit ``event::<name>`` with ``data`` as key/value pairs."""

    _emit(get_logger(logger_name), level, f"event::{name}", {"event": name, **(data or {})})


@dataclass
class SpanHandle:
    """Yielded by :func:`span`; metadata added here lands on the failure line."""

    logger: Any
    span_name: str
    component_name: Optional[str] = None
    metadata: Dict[str, Any] = field(default_factory=dict)

    def add_metadata(self, key: str, value: Any) -> None:
        self.metadata[key] = _stringify(value)

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
    """Profile a block under ``name``.

    ``component=True`` also tracks the block as a component of the same name;
    a string names the component explicitly. ``metadata`` is attached as
    logger context for the duration of the block. An exception escaping the
    block is logged as ``span::fail`` and re-raised.
    """

    log = get_logger(logger_name)
    component_name = name if component is True else (component or None)
    context = {key: _stringify(value) for key, value in (metadata or {}).items()}

    with ExitStack() as stack:
        for key, value in context.items():
            log.add_context(key, value)
            stack.callback(log.remove_context, key)
        if component_name:
            stack.enter_context(log.track_component(component_name))
        stack.enter_context(log.profile(name))

        handle = SpanHandle(
            logger=log,
            span_name=name,
            component_name=component_name,
            metadata=dict(context),
        )
        try:
            yield handle
        except Exception as exc:
            handle.fail(str(exc))
            raise


__all__ = ["SpanHandle", "configure", "get_logger", "record_event", "span"]
