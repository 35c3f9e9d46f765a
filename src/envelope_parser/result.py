from __future__ import annotations

from typing import Any, Literal, Union

from pydantic import BaseModel, ConfigDict

from envelope_parser.errors import ParseError


class ParseSuccess(BaseModel):
    model_config = ConfigDict(frozen=True)

    success: Literal[True] = True
    data: Any


class ParseFailure(BaseModel):
    """Failed parse; ``original_event`` is the caller's event, untouched."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    success: Literal[False] = False
    error: ParseError
    original_event: Any


ParseOutcome = Union[ParseSuccess, ParseFailure]
