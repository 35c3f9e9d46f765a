from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any, ClassVar

from pydantic import BaseModel, RootModel, ValidationError

from envelope_parser.decoders import Decoder, identity
from envelope_parser.errors import ParseError, PathPattern, issues_from_error
from envelope_parser.result import ParseFailure, ParseOutcome, ParseSuccess
from envelope_parser.settings import ParserSettings

LOGGER = logging.getLogger(__name__)


class Envelope(ABC):
    """Locates, decodes and validates the payload(s) inside one kind of event.

    Subclasses compose the event model with the caller's schema in
    :meth:`build_model` and pull the validated payloads back out in
    :meth:`extract`. The whole event is validated in one pass, so envelope
    and payload issues share one error with paths into the original event.
    """

    name: ClassVar[str]
    payload_paths: ClassVar[tuple[PathPattern, ...]]

    def __init__(self, *, decoder: Decoder = identity) -> None:
        self._decoder = decoder

    @property
    def decoder(self) -> Decoder:
        return self._decoder

    @property
    def error_message(self) -> str:
        return f"Failed to parse {self.name} body"

    @abstractmethod
    def build_model(self, schema: Any) -> type[BaseModel]:
        ...

    @abstractmethod
    def extract(self, parsed: BaseModel) -> Any:
        ...

    def payload(self, schema: Any) -> Any:
        return self._decoder(schema)

    def safe_parse(self, event: Any, schema: Any) -> ParseOutcome:
        settings = ParserSettings()
        model = self.build_model(schema)
        try:
            parsed = model.model_validate(event, context={"settings": settings})
        except ValidationError as exc:
            error = ParseError(
                self.error_message,
                cause=exc,
                issues=issues_from_error(exc, self.payload_paths),
            )
            LOGGER.debug(
                "envelope_parse_failed",
                extra={"envelope": self.name, "issue_count": len(error.issues)},
            )
            if settings.log_events:
                LOGGER.debug("envelope_parse_failed_event", extra={"event": event})
            return ParseFailure(error=error, original_event=event)

        data = self.extract(parsed)
        LOGGER.debug(
            "envelope_parsed",
            extra={
                "envelope": self.name,
                "record_count": len(data) if isinstance(data, list) else 1,
            },
        )
        return ParseSuccess(data=data)

    def parse(self, event: Any, schema: Any) -> Any:
        outcome = self.safe_parse(event, schema)
        if isinstance(outcome, ParseFailure):
            raise outcome.error
        return outcome.data

    def __repr__(self) -> str:
        return f"{type(self).__name__}(decoder={getattr(self._decoder, '__name__', self._decoder)!r})"


class RawEventEnvelope(Envelope):
    """Applies the schema to the whole event, for events with no wrapper."""

    name = "event"
    payload_paths = ((),)

    @property
    def error_message(self) -> str:
        return "Failed to parse event"

    def build_model(self, schema: Any) -> type[BaseModel]:
        return RootModel[self.payload(schema)]

    def extract(self, parsed: BaseModel) -> Any:
        return parsed.root
