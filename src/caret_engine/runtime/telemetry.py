"""Structured logging and profiling spans on telelog.

Managers call three functions: ``get_logger``, ``record_event`` and
``span``. The logger configuration comes from ``CARET_ENGINE_*``
environment variables, read once into ``TelemetrySettings``.
"""

from __future__ import annotations

import os
from contextlib import ExitStack, contextmanager
from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, Mapping, MutableMapping, Optional, Tuple, cast

import telelog  # type: ignore[import]

tl = cast(Any, telelog)

ENV_PREFIX = "CARET_ENGINE_"

_TRUE_VALUES = {"1", "true", "yes", "on"}

_LOGGER_CACHE: MutableMapping[str, Any] = {}
_ACTIVE_CONFIG: Optional[Any] = None


@dataclass(frozen=True, slots=True)
class TelemetrySettings:
    """Logger options resolved from the environment."""

    logger_name: str = "caret_engine"
    level: str = "INFO"
    console: bool = True
    colored: bool = True
    json: bool = False
    log_file: str = ""
    buffer_size: Optional[int] = None

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "TelemetrySettings":
        env = os.environ if environ is None else environ

        def value(name: str) -> Optional[str]:
            return env.get(f"{ENV_PREFIX}{name}")

        def flag(name: str) -> bool:
            return (value(name) or "").lower() in _TRUE_VALUES

        buffer_size = None
        if flag("LOG_BUFFERED"):
            buffer_size = int(value("LOG_BUFFER_SIZE") or "2048")

        return cls(
            logger_name=value("LOGGER") or "caret_engine",
            level=(value("LOG_LEVEL") or "INFO").upper(),
            console=not flag("DISABLE_CONSOLE"),
            colored=not flag("NO_COLOR"),
            json=flag("LOG_JSON"),
            log_file=value("LOG_FILE") or "",
            buffer_size=buffer_size,
        )

    def build(self) -> Any:
        """Translate into a ``telelog.Config`` with profiling switched on."""

        config = tl.Config()
        config.with_min_level(self.level)
        config.with_console_output(self.console)
        if self.console:
            config.with_colored_output(self.colored)
        if self.json:
            config.with_json_format(True)
        if self.log_file:
            config.with_file_output(self.log_file)
        if self.buffer_size is not None:
            config.with_buffering(True)
            config.with_buffer_size(self.buffer_size)
        config.with_profiling(True)
        return config


SETTINGS = TelemetrySettings.from_env()


def _stringify(value: Any) -> str:
    if isinstance(value, str):
        return value
    return repr(value) if isinstance(value, (dict, list, tuple, set)) else str(value)


def _format_pairs(data: Dict[str, Any]) -> list[tuple[str, str]]:
    return [(str(key), _stringify(value)) for key, value in data.items()]


def get_logger(name: Optional[str] = None) -> Any:
    """Return a cached ``telelog.Logger`` built from ``SETTINGS``."""

    global _ACTIVE_CONFIG
    if _ACTIVE_CONFIG is None:
        _ACTIVE_CONFIG = SETTINGS.build()
    logger_name = name or SETTINGS.logger_name
    if logger_name not in _LOGGER_CACHE:
        _LOGGER_CACHE[logger_name] = tl.Logger.with_config(logger_name, _ACTIVE_CONFIG)
    return _LOGGER_CACHE[logger_name]


def _level_method(logger: Any, level: str) -> Tuple[Any, bool]:
    name = level.lower()
    with_data = getattr(logger, f"{name}_with", None)
    if with_data is not None:
        return with_data, True
    plain = getattr(logger, name, None)
    if plain is None:
        raise ValueError(f"Unsupported log level '{level}'.")
    return plain, False


def _log(logger: Any, level: str, message: str, payload: Dict[str, Any]) -> None:
    method, accepts_data = _level_method(logger, level)
    if accepts_data:
        method(message, _format_pairs(payload))
    else:
        method(f"{message} {payload}")


def record_event(
    name: str,
    *,
    level: str = "info",
    data: Optional[Dict[str, Any]] = None,
    logger_name: Optional[str] = None,
) -> None:
    """Emit ``event::<name>`` with ``data`` as key/value pairs."""

    _log(get_logger(logger_name), level, f"event::{name}", {"event": name, **(data or {})})


@dataclass
class SpanHandle:
    """Lets the body of a ``span`` attach metadata or report a failure."""

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
        _log(self.logger, "error", "span::fail", payload)


@contextmanager
def span(
    name: str,
    *,
    logger_name: Optional[str] = None,
    component: Optional[str | bool] = None,
    metadata: Optional[Dict[str, Any]] = None,
) -> Iterator[SpanHandle]:
    """Profile a block, optionally tracking it as a telelog component.

    ``metadata`` is pushed as logger context for the duration of the block.
    Exceptions raised inside are logged through ``SpanHandle.fail`` and
    re-raised.
    """

    log = get_logger(logger_name)
    component_name = name if component is True else component or None

    payload = {key: _stringify(value) for key, value in (metadata or {}).items()}
    for key, value in payload.items():
        log.add_context(key, value)

    with ExitStack() as stack:
        if component_name:
            stack.enter_context(log.track_component(component_name))
        stack.enter_context(log.profile(name))
        handle = SpanHandle(
            logger=log,
            span_name=name,
            component_name=component_name,
            metadata=dict(payload),
        )
        try:
            yield handle
        except Exception as exc:
            handle.fail(str(exc))
            raise
        finally:
            for key in payload:
                log.remove_context(key)


__all__ = [
    "SETTINGS",
    "SpanHandle",
    "TelemetrySettings",
    "get_logger",
    "record_event",
    "span",
]
