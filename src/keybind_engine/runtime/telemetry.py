"""Telelog-backed logging for the keybind engine.

Public surface:

``configure(...)`` -- adopt an explicit telelog config or a named preset
``get_logger(name)`` -- cached logger bound to the active config
``record_event(name, ...)`` -- structured event at a chosen level
``span(name, ...)`` -- profiled block, optionally tracked as a component
"""

from __future__ import annotations

import os
from contextlib import ExitStack, contextmanager
from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, MutableMapping, Optional, Tuple, cast

import telelog  # type: ignore[import]

tl = cast(Any, telelog)

ENV_PREFIX = "KEYBIND_ENGINE_"
DEFAULT_LOGGER_NAME = os.getenv(f"{ENV_PREFIX}LOGGER", "keybind_engine")

_LOGGERS: MutableMapping[str, Any] = {}
_CONFIG: Optional[Any] = None


def _env(name: str) -> Optional[str]:
    return os.getenv(f"{ENV_PREFIX}{name}")


def _env_flag(name: str, default: bool = False) -> bool:
    raw = _env(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


def _stringify(value: Any) -> str:
    if isinstance(value, str):
        return value
    if isinstance(value, (dict, list, tuple, set, frozenset)):
        return repr(value)
    return str(value)


def _pairs(data: Dict[str, Any]) -> list[tuple[str, str]]:
    return [(str(key), _stringify(value)) for key, value in data.items()]


def _preset_config(preset: str) -> Any:
    config = tl.Config()
    key = preset.strip().lower()

    if key == "development":
        config.with_min_level("DEBUG")
        config.with_console_output(True)
        config.with_colored_output(True)
    elif key == "production":
        config.with_min_level("INFO")
        config.with_console_output(False)
        config.with_file_output(_env("LOG_FILE") or "keybind_engine.log")
        config.with_buffering(True)
    else:
        raise ValueError(f"Unknown telemetry preset '{preset}'.")

    config.with_profiling(True)
    return config


def _env_config() -> Any:
    config = tl.Config()
    config.with_min_level((_env("LOG_LEVEL") or "INFO").upper())

    console = not _env_flag("DISABLE_CONSOLE")
    config.with_console_output(console)
    if console:
        config.with_colored_output(not _env_flag("NO_COLOR"))

    if _env_flag("LOG_JSON"):
        config.with_json_format(True)

    log_file = _env("LOG_FILE")
    if log_file:
        config.with_file_output(log_file)

    config.with_profiling(True)
    return config


def configure(*, config: Optional[Any] = None, preset: Optional[str] = None) -> None:
    """Replace the active telelog configuration.

    Parameters
    ----------
    config:
        A ready ``telelog.Config``.
    preset:
        ``"development"`` or ``"production"``. Mutually exclusive with
        ``config``. With neither, the configuration is read from
        ``KEYBIND_ENGINE_*`` environment variables.
    """

    global _CONFIG
    if config is not None and preset:
        raise ValueError("Provide either `config` or `preset`, not both.")

    if preset:
        config = _preset_config(preset)
    elif config is None:
        config = _env_config()

    _CONFIG = config
    _LOGGERS.clear()


def get_logger(name: Optional[str] = None) -> Any:
    """Return the cached telelog logger for ``name``."""

    global _CONFIG
    if _CONFIG is None:
        _CONFIG = _env_config()
    logger_name = name or DEFAULT_LOGGER_NAME
    if logger_name not in _LOGGERS:
        _LOGGERS[logger_name] = tl.Logger.with_config(logger_name, _CONFIG)
    return _LOGGERS[logger_name]


def _level_method(logger: Any, level: str) -> Tuple[Any, bool]:
    name = str(level).lower()
    with_data = getattr(logger, f"{name}_with", None)
    if with_data is not None:
        return with_data, True
    plain = getattr(logger, name, None)
    if plain is None:
        raise ValueError(f"Unsupported log level '{level}'.")
    return plain, False


def record_event(
    name: str,
    *,
    level: str = "info",
    data: Optional[Dict[str, Any]] = None,
    logger_name: Optional[str] = None,
) -> None:
    """Emit ``event::<name>`` with ``data`` attached as key/value pairs."""

    log = get_logger(logger_name)
    payload = {"event": name, **(data or {})}
    method, accepts_data = _level_method(log, level)
    if accepts_data:
        method(f"event::{name}", _pairs(payload))
    else:
        method(f"event::{name} {payload}")


@dataclass
class SpanHandle:
    """Yielded by ``span``; collects metadata attached to failure records."""

    logger: Any
    span_name: str
    component_name: Optional[str] = None
    metadata: Dict[str, Any] = field(default_factory=dict)

    def add_metadata(self, key: str, value: Any) -> None:
        self.metadata[key] = _stringify(value)

    def fail(self, reason: str) -> None:
        payload = {"span": self.span_name, **self.metadata, "reason": reason}
        if self.component_name:
            payload["component"] = self.component_name
        method, accepts = _level_method(self.logger, "error")
        if accepts:
            method("span::fail", _pairs(payload))
        else:
            method(f"span::fail {payload}")


@contextmanager
def span(
    name: str,
    *,
    logger_name: Optional[str] = None,
    component: Optional[str | bool] = None,
    metadata: Optional[Dict[str, Any]] = None,
) -> Iterator[SpanHandle]:
    """Profile a block and, when ``component`` is given, track it.

    ``component=True`` reuses ``name`` as the component identifier.
    ``metadata`` is pushed as logger context for the duration of the block.
    """

    log = get_logger(logger_name)
    component_name = name if component is True else (component or None)

    serialized: Dict[str, Any] = {}
    with ExitStack() as stack:
        for key, value in (metadata or {}).items():
            serialized[key] = _stringify(value)
            log.add_context(key, serialized[key])
            stack.callback(log.remove_context, key)
        if component_name:
            stack.enter_context(log.track_component(component_name))
        stack.enter_context(log.profile(name))
        handle = SpanHandle(
            logger=log,
            span_name=name,
            component_name=component_name,
            metadata=serialized,
        )
        try:
            yield handle
        except Exception as exc:
            handle.fail(str(exc))
            raise


__all__ = [
    "SpanHandle",
    "configure",
    "get_logger",
    "record_event",
    "span",
]
