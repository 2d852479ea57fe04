"""structlog setup for the hook process.

Events are rendered by stdlib handlers through ``ProcessorFormatter``, one
handler per configured output (stderr, stdout or an absolute file path), each
with its own format and level.

The hook writes its warning to stderr as well, so nothing below WARNING
reaches stderr unless asked for. Events logged while a hook call is being
checked carry ``session_id``, ``tool`` and ``file_path`` from
``bind_hook_context``.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import TYPE_CHECKING, TextIO

import structlog

if TYPE_CHECKING:
    from commentgate.config.models import LoggingConfig, LogOutputConfig

_HOOK_CONTEXT_KEYS = ("session_id", "tool", "file_path")


def bind_hook_context(
    session_id: str | None = None,
    tool: str | None = None,
    file_path: str | None = None,
) -> None:
    """Attach the current hook call to every subsequent log event."""
    values = {"session_id": session_id, "tool": tool, "file_path": file_path}
    structlog.contextvars.bind_contextvars(
        **{key: value for key, value in values.items() if value}
    )


def clear_hook_context() -> None:
    structlog.contextvars.unbind_contextvars(*_HOOK_CONTEXT_KEYS)


def _level_number(name: str, fallback: int = logging.WARNING) -> int:
    value = logging.getLevelNamesMapping().get(name.upper())
    return value if value is not None else fallback


def _shared_processors() -> list[structlog.types.Processor]:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", key="timestamp"),
    ]


def _open_stream(destination: str) -> logging.Handler:
    streams: dict[str, TextIO] = {"stderr": sys.stderr, "stdout": sys.stdout}
    if destination in streams:
        return logging.StreamHandler(streams[destination])
    path = Path(destination)
    path.parent.mkdir(parents=True, exist_ok=True)
    return logging.FileHandler(path, mode="a", encoding="utf-8")


def _build_handler(
    output: LogOutputConfig,
    level: int,
    shared: list[structlog.types.Processor],
) -> logging.Handler:
    handler = _open_stream(output.destination)
    renderer: structlog.types.Processor
    if output.format == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        stream = getattr(handler, "stream", None)
        colors = stream is not None and stream.isatty()
        renderer = structlog.dev.ConsoleRenderer(colors=colors)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(processor=renderer, foreign_pre_chain=shared)
    )
    handler.setLevel(level)
    return handler


def configure_logging(
    *,
    config: LoggingConfig | None = None,
    json_format: bool = False,
    level: str = "WARNING",
) -> None:
    """(Re)configure logging; safe to call more than once per process.

    Args:
        config: Full logging configuration. When omitted, a single stderr
            output at ``level`` is used.
        json_format: Render that single output as JSON lines.
        level: Level for the single-output setup.
    """
    from commentgate.config.models import LoggingConfig, LogOutputConfig

    if config is None:
        config = LoggingConfig(
            level=level,  # type: ignore[arg-type]
            outputs=[LogOutputConfig(format="json" if json_format else "console")],
        )

    root_level = _level_number(config.level)
    shared = _shared_processors()

    structlog.configure(
        processors=[*shared, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        wrapper_class=structlog.make_filtering_bound_logger(root_level),
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        # Reconfigured per run once the project config is known.
        cache_logger_on_first_use=False,
    )

    root = logging.getLogger()
    for old in list(root.handlers):
        root.removeHandler(old)
        old.close()
    root.setLevel(root_level)
    for output in config.outputs:
        level_name = output.level or config.level
        root.addHandler(_build_handler(output, _level_number(level_name, root_level), shared))
