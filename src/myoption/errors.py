"""Exceptions raised when a value is extracted from the wrong variant.

Absence is never an error in itself: ``Nothing`` is an ordinary value. These
exceptions only signal a programming error such as calling ``unwrap()`` on
``Nothing`` or ``unwrap_err()`` on ``Ok``.
"""

from __future__ import annotations

from typing import NoReturn

from myoption._logging import get_logger

__all__ = [
    "UNWRAP_ERR_ON_OK",
    "UNWRAP_NONE_ON_SOME",
    "UNWRAP_ON_ERR",
    "UNWRAP_ON_NOTHING",
    "OptionError",
    "UnwrapError",
    "fail",
]

UNWRAP_ON_NOTHING = "called `Option.unwrap()` on a `Nothing` value"
UNWRAP_NONE_ON_SOME = "called `Option.unwrap_none()` on a `Some` value"
UNWRAP_ON_ERR = "called `Result.unwrap()` on an `Err` value"
UNWRAP_ERR_ON_OK = "called `Result.unwrap_err()` on an `Ok` value"

_logger = get_logger(__name__)


class OptionError(RuntimeError):
    """Base exception for myoption errors.

    Subclasses ``RuntimeError`` so code that already guards extraction with
    ``except RuntimeError`` keeps working.

    Attributes:
        message (str): A human-readable description of the error.
        operation (str | None): Name of the call that failed, e.g. ``"unwrap"``.
    """

    def __init__(self, message: str, operation: str | None = None) -> None:
        """Initialize an OptionError.

        Args:
            message (str): A human-readable description of the error.
            operation (str | None): Name of the call that failed.
        """
        super().__init__(message)
        self.message: str = message
        self.operation: str | None = operation


class UnwrapError(OptionError):
    """A value was extracted from a variant that does not hold one."""


def fail(message: str, operation: str) -> NoReturn:
    """Log the failed extraction and raise UnwrapError.

    Args:
        message: The diagnostic carried by the exception.
        operation: Name of the call that failed.

    Raises:
        UnwrapError: Always.
    """
    _logger.debug("extraction failed", operation=operation, reason=message)
    raise UnwrapError(message, operation)
