"""Conversion between DynamoDB attribute values and plain Python values.

An attribute value is a single-key mapping whose key names the kind of the
value, e.g. ``{"S": "hello"}`` or ``{"M": {"id": {"N": "7"}}}``. Stream
records carry images as maps of attribute name to attribute value; use
:func:`unmarshall` and :func:`marshall` for those, and :func:`deserialize` and
:func:`serialize` for a single attribute value.

Numbers travel as strings. They decode to :class:`decimal.Decimal` by default,
which keeps every digit DynamoDB can store (38 significant digits).
``marshall`` writes a number from its value, so a round trip keeps the value
but not the spelling: ``{"N": "1e2"}`` comes back as ``{"N": "1E+2"}``.
"""

from __future__ import annotations

import base64
import binascii
import re
from collections.abc import Mapping
from decimal import Decimal
from typing import Any

from envelope_parser.errors import MarshallError, Path, UnmarshallError
from envelope_parser.settings import NumberMode

TYPE_DESCRIPTORS = frozenset({"S", "N", "B", "BOOL", "NULL", "L", "M", "SS", "NS", "BS"})
_SET_DESCRIPTORS = ("SS", "NS", "BS")
_NUMBER_PATTERN = re.compile(r"[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?")


def unmarshall(item: Mapping[str, Any], *, number_mode: NumberMode = "decimal") -> dict[str, Any]:
    if not isinstance(item, Mapping):
        raise UnmarshallError("expected a map of attribute values")

    return {
        name: _deserialize(value, (name,), number_mode)
        for name, value in item.items()
    }


def deserialize(value: Mapping[str, Any], *, number_mode: NumberMode = "decimal") -> Any:
    return _deserialize(value, (), number_mode)


def marshall(item: Mapping[str, Any]) -> dict[str, dict[str, Any]]:
    if not isinstance(item, Mapping):
        raise MarshallError("expected a mapping")

    return {_map_key(name, ()): _serialize(value, (name,)) for name, value in item.items()}


def serialize(value: Any) -> dict[str, Any]:
    return _serialize(value, ())


def _deserialize(value: Any, path: Path, number_mode: NumberMode) -> Any:
    if not isinstance(value, Mapping):
        raise UnmarshallError("attribute value must be an object", path=path)
    if len(value) != 1:
        raise UnmarshallError(
            f"expected exactly one type descriptor, got {len(value)}",
            path=path,
        )

    ((descriptor, payload),) = value.items()

    if descriptor == "S":
        return _expect(payload, str, descriptor, path)
    if descriptor == "N":
        return _number(payload, path, number_mode)
    if descriptor == "B":
        return _binary(payload, path)
    if descriptor == "BOOL":
        return _expect(payload, bool, descriptor, path)
    if descriptor == "NULL":
        if payload is not True:
            raise UnmarshallError("NULL descriptor must be true", path=path)
        return None
    if descriptor == "L":
        elements = _expect(payload, list, descriptor, path)
        return [
            _deserialize(element, (*path, index), number_mode)
            for index, element in enumerate(elements)
        ]
    if descriptor == "M":
        entries = _expect(payload, Mapping, descriptor, path)
        return {
            key: _deserialize(element, (*path, key), number_mode)
            for key, element in entries.items()
        }
    if descriptor in _SET_DESCRIPTORS:
        return _set(descriptor, payload, path, number_mode)

    raise UnmarshallError(f"unknown type descriptor {descriptor!r}", path=path)


def _expect(payload: Any, kind: type, descriptor: str, path: Path) -> Any:
    if not isinstance(payload, kind):
        raise UnmarshallError(
            f"{descriptor} descriptor expects {kind.__name__}, got {type(payload).__name__}",
            path=path,
        )
    return payload


def _number(payload: Any, path: Path, number_mode: NumberMode) -> Decimal | float | str:
    if not isinstance(payload, str) or not _NUMBER_PATTERN.fullmatch(payload):
        raise UnmarshallError(f"invalid number {payload!r}", path=path)

    if number_mode == "string":
        return payload
    if number_mode == "float":
        return float(payload)
    return Decimal(payload)


def _binary(payload: Any, path: Path) -> bytes:
    if isinstance(payload, (bytes, bytearray)):
        return bytes(payload)
    if not isinstance(payload, str):
        raise UnmarshallError(
            f"B descriptor expects a base64 string, got {type(payload).__name__}",
            path=path,
        )

    try:
        return base64.b64decode(payload, validate=True)
    except (binascii.Error, ValueError) as exc:
        raise UnmarshallError(f"invalid base64 binary: {exc}", path=path) from exc


def _set(descriptor: str, payload: Any, path: Path, number_mode: NumberMode) -> set[Any]:
    members = _expect(payload, list, descriptor, path)
    if not members:
        raise UnmarshallError(f"{descriptor} set must not be empty", path=path)

    decoded: set[Any] = set()
    for index, member in enumerate(members):
        member_path = (*path, index)
        if descriptor == "SS":
            decoded.add(_expect(member, str, descriptor, member_path))
        elif descriptor == "NS":
            decoded.add(_number(member, member_path, number_mode))
        else:
            decoded.add(_binary(member, member_path))

    if len(decoded) != len(members):
        raise UnmarshallError(f"{descriptor} set contains duplicate members", path=path)
    return decoded


def _serialize(value: Any, path: Path) -> dict[str, Any]:
    if value is None:
        return {"NULL": True}
    # bool is an int subclass; it must be checked first.
    if isinstance(value, bool):
        return {"BOOL": value}
    if isinstance(value, (int, float, Decimal)):
        return {"N": _format_number(value, path)}
    if isinstance(value, str):
        return {"S": value}
    if isinstance(value, (bytes, bytearray)):
        return {"B": _encode_binary(value)}
    if isinstance(value, (set, frozenset)):
        return _serialize_set(value, path)
    if isinstance(value, Mapping):
        return {
            "M": {
                _map_key(key, path): _serialize(element, (*path, key))
                for key, element in value.items()
            }
        }
    if isinstance(value, (list, tuple)):
        return {"L": [_serialize(element, (*path, index)) for index, element in enumerate(value)]}

    raise MarshallError(f"unsupported type {type(value).__name__}", path=path)


def _serialize_set(value: set[Any] | frozenset[Any], path: Path) -> dict[str, list[str]]:
    if not value:
        raise MarshallError("sets must not be empty", path=path)

    if all(isinstance(member, str) for member in value):
        return {"SS": sorted(value)}
    if all(
        isinstance(member, (int, float, Decimal)) and not isinstance(member, bool)
        for member in value
    ):
        return {"NS": [_format_number(member, path) for member in sorted(value)]}
    if all(isinstance(member, (bytes, bytearray)) for member in value):
        return {"BS": [_encode_binary(member) for member in sorted(value)]}

    raise MarshallError("set members must all be strings, numbers or binary", path=path)


def _format_number(value: int | float | Decimal, path: Path) -> str:
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        if value != value or value in (float("inf"), float("-inf")):
            raise MarshallError(f"number must be finite, got {value!r}", path=path)
        return repr(value)
    if not value.is_finite():
        raise MarshallError(f"number must be finite, got {value!r}", path=path)
    return str(value)


def _encode_binary(value: bytes | bytearray) -> str:
    return base64.b64encode(bytes(value)).decode("ascii")


def _map_key(key: Any, path: Path) -> str:
    if not isinstance(key, str):
        raise MarshallError(f"map keys must be strings, got {type(key).__name__}", path=path)
    return key
