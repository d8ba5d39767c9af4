"""telelog wiring for buffer mutations and view borrowing.

Settings are read from ``TEXT_SLICES_*`` environment variables whenever
``configure()`` runs (once at import):

``LOG_LEVEL``        minimum level, ``WARNING`` by default
``LOG_FILE``         also write to this file
``LOG_JSON``         JSON records instead of plain text
``DISABLE_CONSOLE``  no console output at all
``NO_COLOR``         plain console output
"""

from __future__ import annotations

import os
from contextlib import contextmanager
from typing import TYPE_CHECKING, Any, Dict, Iterator, Optional, cast

import telelog  # type: ignore[import]

if TYPE_CHECKING:  # pragma: no cover
    from text_slices.buffer import BufferView, OwnedBuffer

tl = cast(Any, telelog)

ENV_PREFIX = "TEXT_SLICES_"
LOGGER_NAME = "text_slices"
DEFAULT_LEVEL = "WARNING"

_loggers: Dict[str, Any] = {}
_config: Optional[Any] = None


def _setting(name: str) -> Optional[str]:
    return os.getenv(f"{ENV_PREFIX}{name}")


def _enabled(name: str) -> bool:
    return (_setting(name) or "").lower() in {"1", "true", "yes", "on"}


def configure() -> None:
    """Rebuild the telelog config from the environment and drop cached loggers."""

    global _config
    config = tl.Config()
    config.with_min_level((_setting("LOG_LEVEL") or DEFAULT_LEVEL).upper())

    console = not _enabled("DISABLE_CONSOLE")
    config.with_console_output(console)
    if console:
        config.with_colored_output(not _enabled("NO_COLOR"))
    if _enabled("LOG_JSON"):
        config.with_json_format(True)
    log_file = _setting("LOG_FILE")
    if log_file:
        config.with_file_output(log_file)

    config.with_profiling(True)
    _config = config
    _loggers.clear()


def get_logger(name: str = LOGGER_NAME) -> Any:
    if name not in _loggers:
        if _config is None:
            configure()
        _loggers[name] = tl.Logger.with_config(name, _config)
    return _loggers[name]


def _log(level: str, message: str, data: Dict[str, Any]) -> None:
    log = get_logger()
    level = level.lower()
    with_data = getattr(log, f"{level}_with", None)
    if with_data is not None:
        with_data(message, [(key, str(value)) for key, value in data.items()])
        return
    plain = getattr(log, level, None)
    if plain is None:
        raise ValueError(f"Unsupported log level '{level}'.")
    plain(f"{message} {data}")


def record_event(
    name: str, *, level: str = "info", data: Optional[Dict[str, Any]] = None
) -> None:
    _log(level, f"event::{name}", {"event": name, **(data or {})})


def view_event(name: str, view: "BufferView", *, level: str = "debug") -> None:
    """Record ``name`` for ``view`` with its range and both versions.

    Never touches the view's data, so it is safe on stale views.
    """

    record_event(
        name,
        level=level,
        data={
            "buffer": view.buffer.name,
            "kind": view.buffer.kind,
            "range": f"{view.start}:{view.end}",
            "view_version": view.version,
            "buffer_version": view.buffer.version,
        },
    )


@contextmanager
def span(name: str, *, buffer: Optional["OwnedBuffer"] = None) -> Iterator[None]:
    """Profile a block; with ``buffer`` its name and version ride along as context."""

    log = get_logger()
    context = {}
    if buffer is not None:
        context = {"buffer": buffer.name, "version": str(buffer.version)}
    for key, value in context.items():
        log.add_context(key, value)
    try:
        with log.profile(name):
            yield
    except Exception as exc:
        _log("error", "span::fail", {"span": name, "reason": str(exc)})
        raise
    finally:
        for key in context:
            log.remove_context(key)


configure()

__all__ = [
    "configure",
    "get_logger",
    "record_event",
    "view_event",
    "span",
]
