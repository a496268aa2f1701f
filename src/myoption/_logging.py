"""Structured logging for myoption.

Every library event goes through a stdlib logger under the ``myoption``
namespace, rendered by structlog. The library never touches the root logger:
``configure_logging()`` attaches one handler to the ``myoption`` logger and
stops propagation, and without it the host application's logging decides
what, if anything, is shown.

Example:
    ```python
    import myoption

    myoption.configure_logging("DEBUG", json_output=False)
    myoption.Nothing.unwrap_or(0)  # silent
    myoption.Nothing.unwrap()  # logs "extraction failed", then raises
    ```
"""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING, Any

import structlog

if TYPE_CHECKING:
    from collections.abc import Callable

__all__ = [
    "LOGGER_NAME",
    "add_log_hook",
    "clear_log_hooks",
    "configure_logging",
    "get_logger",
    "remove_log_hook",
]

LOGGER_NAME = "myoption"

type LogHook = Callable[[dict[str, Any]], None]

_log_hooks: list[LogHook] = []
_handler: logging.Handler | None = None


def _run_hooks(_logger: Any, _method_name: str, event_dict: dict[str, Any]) -> dict[str, Any]:
    for hook in _log_hooks:
        try:
            hook(event_dict.copy())
        except Exception:
            pass  # hook errors are ignored
    return event_dict


def _enrich() -> list[Any]:
    """Processors that annotate an event, for native and stdlib records alike."""
    return [
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.stdlib.ExtraAdder(),
        _run_hooks,
    ]


def get_logger(name: str = LOGGER_NAME) -> Any:
    """Get a structlog logger backed by the stdlib logger ``name``.

    ``filter_by_level`` runs first, so a disabled level costs a single
    ``isEnabledFor`` check and never reaches the hooks.

    Args:
        name: Dotted logger name, normally a module ``__name__``.

    Returns:
        A structlog BoundLogger.
    """
    return structlog.wrap_logger(
        logging.getLogger(name),
        processors=[
            structlog.stdlib.filter_by_level,
            *_enrich(),
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.StackInfoRenderer(),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
    )


def configure_logging(level: str = "INFO", *, json_output: bool = True) -> None:
    """Send myoption's log events to stderr.

    Calling it again replaces the handler installed by the previous call.
    Loggers outside the ``myoption`` namespace, the root logger included,
    are left alone.

    Args:
        level: Logging level ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL").
        json_output: If True, emit JSON lines. If False, use console output.
    """
    global _handler

    if json_output:
        renderer: Any = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=_enrich(),
            processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, renderer],
        )
    )

    package_logger = logging.getLogger(LOGGER_NAME)
    if _handler is not None:
        package_logger.removeHandler(_handler)
    package_logger.addHandler(handler)
    package_logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    package_logger.propagate = False
    _handler = handler


def add_log_hook(hook: LogHook) -> None:
    """Register a callable that receives a copy of every emitted event dict.

    Hooks only see events whose level is enabled on the ``myoption`` logger.
    """
    _log_hooks.append(hook)


def remove_log_hook(hook: LogHook) -> None:
    if hook in _log_hooks:
        _log_hooks.remove(hook)


def clear_log_hooks() -> None:
    _log_hooks.clear()
