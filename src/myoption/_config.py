"""Package configuration: OptionConfig and initialization."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from myoption._logging import configure_logging

__all__ = [
    "OptionConfig",
    "get_config",
    "init",
]

_TRUTHY = frozenset({"1", "true", "yes", "on"})
_FALSY = frozenset({"0", "false", "no", "off"})


@dataclass(frozen=True)
class OptionConfig:
    """Configuration for myoption.

    Attributes:
        log_level: Logging level (e.g., "DEBUG", "INFO"). None = silent.
        json_output: Emit JSON log lines if True, console output otherwise.
    """

    log_level: str | None = None
    json_output: bool = True


# Global configuration (set by init())
_config: OptionConfig | None = None


def _detect_log_level() -> str | None:
    """Read the log level from MYOPTION_LOG_LEVEL, or None if unset/empty."""
    level = os.environ.get("MYOPTION_LOG_LEVEL", "").strip()
    return level.upper() or None


def _detect_json_output() -> bool:
    """Read MYOPTION_LOG_JSON as a boolean flag, defaulting to True."""
    raw = os.environ.get("MYOPTION_LOG_JSON", "").strip().lower()
    if not raw:
        return True
    if raw in _TRUTHY:
        return True
    if raw in _FALSY:
        return False
    logging.getLogger(__name__).warning(
        "Unknown MYOPTION_LOG_JSON value '%s', defaulting to true", raw
    )
    return True


def init(
    log_level: str | None = None,
    *,
    json_output: bool | None = None,
) -> OptionConfig:
    """Initialize myoption with the given configuration.

    Args:
        log_level: Logging level ("DEBUG", "INFO", etc.). Read from
            MYOPTION_LOG_LEVEL if None; silent if that is unset too.
        json_output: JSON vs console log output. Read from MYOPTION_LOG_JSON
            if None.

    Returns:
        The OptionConfig that was set.

    Example:
        ```python
        from myoption import init

        init(log_level="DEBUG", json_output=False)
        ```
    """
    global _config  # noqa: PLW0603

    resolved_level = log_level if log_level is not None else _detect_log_level()
    resolved_json = json_output if json_output is not None else _detect_json_output()

    _config = OptionConfig(log_level=resolved_level, json_output=resolved_json)

    # Configure logging if level specified
    if resolved_level is not None:
        configure_logging(resolved_level, json_output=resolved_json)

    return _config


def get_config() -> OptionConfig:
    """Get the current configuration.

    Returns:
        The current OptionConfig.

    Raises:
        RuntimeError: If init() has not been called.
    """
    if _config is None:
        msg = "myoption not initialized. Call myoption.init() first."
        raise RuntimeError(msg)
    return _config
