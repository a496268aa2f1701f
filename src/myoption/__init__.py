"""myoption: a Rust-style Option type for Python 3.13+.

``Option[T]`` is either ``Some(value)`` or ``Nothing``, with the usual
combinator surface (map, and_then, filter, or_else, xor, unwrap family, ...),
plus the small ``Result`` type that ``ok_or`` produces and an
``OptionIterator`` contract whose ``next()`` returns an Option.

Flat imports (preferred):
    from myoption import Option, Some, Nothing, Ok, Err, UnwrapError

Submodule imports (for organization):
    from myoption.types import Option, Result
    from myoption.iter import OptionIterator, from_iterable
    from myoption.codec import encode_json, decode_json
"""

from myoption._config import OptionConfig, get_config, init
from myoption._logging import add_log_hook, clear_log_hooks, configure_logging, remove_log_hook
from myoption.errors import OptionError, UnwrapError
from myoption.iter import OptionIterator, from_iterable
from myoption.types import (
    Err,
    Nothing,
    NothingType,
    Ok,
    Option,
    RefMut,
    Result,
    Some,
    from_nullable,
    is_option,
)

__all__ = [
    "Err",
    "Nothing",
    "NothingType",
    "Ok",
    "Option",
    "OptionConfig",
    "OptionError",
    "OptionIterator",
    "RefMut",
    "Result",
    "Some",
    "UnwrapError",
    "add_log_hook",
    "clear_log_hooks",
    "configure_logging",
    "from_iterable",
    "from_nullable",
    "get_config",
    "init",
    "is_option",
    "remove_log_hook",
]
