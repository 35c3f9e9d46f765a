from __future__ import annotations

from copy import copy
from typing import Any

from pydantic import BaseModel, create_model


def extend(model: type[BaseModel], *, name: str | None = None, **fields: Any) -> type[BaseModel]:
    """Return a subclass of ``model`` with fields added or replaced.

    Each value is an annotation (required field) or an ``(annotation, default)``
    pair. ``model`` itself is left untouched and its validators are inherited.
    """
    definitions = {field: _definition(value) for field, value in fields.items()}
    return create_model(
        name or model.__name__,
        __base__=model,
        __module__=model.__module__,
        **definitions,
    )


def omit(model: type[BaseModel], *names: str, name: str | None = None) -> type[BaseModel]:
    """Return a copy of ``model`` without the named fields.

    Field annotations (including decoders) carry over; model-level validators
    do not, since they may depend on the omitted fields.
    """
    unknown = sorted(set(names) - set(model.model_fields))
    if unknown:
        raise KeyError(f"{model.__name__} has no fields named: {', '.join(unknown)}")

    definitions: dict[str, Any] = {
        field: (info.annotation, copy(info))
        for field, info in model.model_fields.items()
        if field not in names
    }
    return create_model(
        name or model.__name__,
        __config__=model.model_config,
        __module__=model.__module__,
        **definitions,
    )


def _definition(value: Any) -> tuple[Any, Any]:
    if isinstance(value, tuple) and len(value) == 2:
        return value
    return (value, ...)
