"""JSON / MessagePack codecs for Option and Result values.

Variants are msgspec tagged structs, so they serialize as
``{"type": "Some", "value": ...}``, ``{"type": "Nothing"}``,
``{"type": "Ok", "value": ...}`` and ``{"type": "Err", "error": ...}``
without any hooks. Decoding needs the target type; the helpers here build
the union for you and restore the ``Nothing`` singleton.
"""

from __future__ import annotations

from typing import Any

import msgspec

from myoption.types.option import Nothing, NothingType, Some
from myoption.types.result import Err, Ok

__all__ = [
    "decode_json",
    "decode_msgpack",
    "decode_result_json",
    "decode_result_msgpack",
    "encode_json",
    "encode_msgpack",
]

_json_encoder = msgspec.json.Encoder()
_msgpack_encoder = msgspec.msgpack.Encoder()


def _option_type(item_type: Any) -> Any:
    return Some[item_type] | NothingType


def _result_type(ok_type: Any, err_type: Any) -> Any:
    return Ok[ok_type] | Err[err_type]


def _normalize(value: Any) -> Any:
    # Decoding always builds fresh NothingType instances, nested ones included.
    match value:
        case NothingType():
            return Nothing
        case Some(inner):
            return Some(_normalize(inner))
        case Ok(inner):
            return Ok(_normalize(inner))
        case Err(error):
            return Err(_normalize(error))
    return value


def encode_json(obj: Any) -> bytes:
    """Encode an Option, Result, or any structure containing them as JSON."""
    return _json_encoder.encode(obj)


def encode_msgpack(obj: Any) -> bytes:
    """Encode an Option, Result, or any structure containing them as MessagePack."""
    return _msgpack_encoder.encode(obj)


def decode_json(data: bytes | str, item_type: Any = Any) -> Some[Any] | NothingType:
    """Decode JSON into ``Option[item_type]``.

    Args:
        data: JSON produced by ``encode_json``.
        item_type: Type of the Some payload, validated by msgspec.

    Returns:
        The decoded Some, or the Nothing singleton.

    Raises:
        msgspec.ValidationError: If the payload does not match the type.
        msgspec.DecodeError: If the input is not valid JSON.
    """
    return _normalize(msgspec.json.decode(data, type=_option_type(item_type)))


def decode_msgpack(data: bytes, item_type: Any = Any) -> Some[Any] | NothingType:
    """Decode MessagePack into ``Option[item_type]``."""
    return _normalize(msgspec.msgpack.decode(data, type=_option_type(item_type)))


def decode_result_json(
    data: bytes | str, ok_type: Any = Any, err_type: Any = Any
) -> Ok[Any] | Err[Any]:
    """Decode JSON into ``Result[ok_type, err_type]``."""
    return _normalize(msgspec.json.decode(data, type=_result_type(ok_type, err_type)))


def decode_result_msgpack(
    data: bytes, ok_type: Any = Any, err_type: Any = Any
) -> Ok[Any] | Err[Any]:
    """Decode MessagePack into ``Result[ok_type, err_type]``."""
    return _normalize(msgspec.msgpack.decode(data, type=_result_type(ok_type, err_type)))
