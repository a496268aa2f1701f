"""Core types: Option, Some, Nothing, Result, Ok, Err, RefMut."""

from myoption.types.option import Nothing, NothingType, Option, Some, from_nullable, is_option
from myoption.types.ref import RefMut
from myoption.types.result import Err, Ok, Result

__all__ = [
    "Err",
    "Nothing",
    "NothingType",
    "Ok",
    "Option",
    "RefMut",
    "Result",
    "Some",
    "from_nullable",
    "is_option",
]
