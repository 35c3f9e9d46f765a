"""Schema wrappers that decode a payload before the caller's schema sees it.

Each decoder takes a schema (anything :class:`pydantic.TypeAdapter` accepts)
and returns a new schema that first undoes a transport encoding, then
validates with the given one. Decoders nest: ``base64_encoded(json_text(M))``
base64-decodes, parses the JSON, then validates with ``M``.

A decode failure is reported once, at the field being decoded, and the
wrapped schema is never run against the still-encoded value.
"""

from __future__ import annotations

import base64
import binascii
import types
from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass
from typing import Annotated, Any, Union, get_args, get_origin

from pydantic import (
    BaseModel,
    BeforeValidator,
    GetCoreSchemaHandler,
    Json,
    ValidationError,
    ValidationInfo,
    model_validator,
)
from pydantic_core import CoreSchema, PydanticCustomError

from envelope_parser.dynamodb import unmarshall
from envelope_parser.errors import UnmarshallError, format_path
from envelope_parser.settings import NumberMode, ParserSettings

Decoder = Callable[[Any], Any]


def identity(schema: Any) -> Any:
    return schema


def json_text(schema: Any) -> Any:
    """Parse a JSON string, then validate the result with ``schema``."""
    return Json[schema]


def base64_encoded(schema: Any) -> Any:
    """Decode a base64 string; UTF-8 text is passed on as ``str``, anything else as ``bytes``."""
    return Annotated[schema, BeforeValidator(_decode_base64)]


def structured_value(schema: Any, *, number_mode: NumberMode | None = None) -> Any:
    """Unmarshall a DynamoDB attribute value map, then validate with ``schema``.

    ``number_mode`` defaults to ``PARSER_NUMBER_MODE``. Inside a
    :class:`StructuredRecord` the first field that fails stops the whole record.
    """
    return Annotated[schema, StructuredValue(number_mode)]


@dataclass(frozen=True)
class StructuredValue:
    """Annotation marking a field whose input is an attribute value map."""

    number_mode: NumberMode | None = None

    def __get_pydantic_core_schema__(
        self, source_type: Any, handler: GetCoreSchemaHandler
    ) -> CoreSchema:
        return BeforeValidator(self._validate).__get_pydantic_core_schema__(source_type, handler)

    def unmarshall(self, value: Any, field: str, info: ValidationInfo) -> Any:
        if not isinstance(value, Mapping):
            raise PydanticCustomError(
                "unmarshall_error",
                "Could not unmarshall {field}: expected a map of attribute values",
                {"field": field},
            )

        mode = self.number_mode or resolve_settings(info).number_mode
        try:
            return unmarshall(value, number_mode=mode)
        except UnmarshallError as exc:
            raise PydanticCustomError(
                "unmarshall_error",
                "Could not unmarshall {field}: {reason}",
                {"field": field, "reason": str(exc), "attribute": format_path(exc.path)},
            ) from exc

    def _validate(self, value: Any, info: ValidationInfo) -> Any:
        if isinstance(value, _Unmarshalled):
            return value.value
        return self.unmarshall(value, info.field_name or "value", info)


@dataclass(frozen=True)
class _Unmarshalled:
    value: Any


class StructuredRecord(BaseModel):
    """Base for models holding several attribute value maps.

    Structured fields are unmarshalled in declaration order before any field
    is validated. The first failure is the only issue reported for the
    record; no other field of it is validated.
    """

    @model_validator(mode="before")
    @classmethod
    def _unmarshall_structured_fields(cls, data: Any, info: ValidationInfo) -> Any:
        if not isinstance(data, Mapping):
            return data

        decoded = dict(data)
        for name, field in cls.model_fields.items():
            marker = _find_structured_value(field.annotation, field.metadata)
            value = decoded.get(name)
            if marker is None or value is None:
                continue
            try:
                decoded[name] = _Unmarshalled(marker.unmarshall(value, name, info))
            except PydanticCustomError as exc:
                raise ValidationError.from_exception_data(
                    cls.__name__,
                    [{"type": exc, "loc": (name,), "input": value}],
                ) from exc
        return decoded


def resolve_settings(info: ValidationInfo) -> ParserSettings:
    """Settings passed in the validation context, or read from the environment."""
    context = info.context
    settings = context.get("settings") if isinstance(context, Mapping) else None
    return settings if settings is not None else ParserSettings()


def _find_structured_value(annotation: Any, metadata: Sequence[Any] = ()) -> StructuredValue | None:
    for item in metadata:
        if isinstance(item, StructuredValue):
            return item

    origin = get_origin(annotation)
    if origin is Annotated:
        return _find_structured_value(get_args(annotation)[0], annotation.__metadata__)
    # Optional images: look through the union, not into containers.
    if origin is Union or origin is types.UnionType:
        for arg in get_args(annotation):
            found = _find_structured_value(arg)
            if found is not None:
                return found
    return None


def _decode_base64(value: Any) -> str | bytes:
    if not isinstance(value, (str, bytes, bytearray)):
        raise PydanticCustomError("base64_type", "Base64 input should be a string")

    try:
        decoded = base64.b64decode(value, validate=True)
    except (binascii.Error, ValueError) as exc:
        raise PydanticCustomError(
            "base64_decode",
            "Invalid base64 payload: {reason}",
            {"reason": str(exc)},
        ) from exc

    try:
        return decoded.decode("utf-8")
    except UnicodeDecodeError:
        return decoded
