from __future__ import annotations

from typing import Any

from envelope_parser.envelopes import Envelope, RawEventEnvelope, get_envelope
from envelope_parser.result import ParseOutcome

_RAW_EVENT = RawEventEnvelope()


def safe_parse(event: Any, schema: Any, envelope: Envelope | str | None = None) -> ParseOutcome:
    """Validate ``event`` and never raise for invalid input.

    ``envelope`` is an :class:`Envelope`, a registered kind such as ``"sqs"``,
    or None to validate the whole event against ``schema``.
    """
    return _resolve(envelope).safe_parse(event, schema)


def parse(event: Any, schema: Any, envelope: Envelope | str | None = None) -> Any:
    """Like :func:`safe_parse`, but raise :class:`ParseError` on failure."""
    return _resolve(envelope).parse(event, schema)


def _resolve(envelope: Envelope | str | None) -> Envelope:
    if envelope is None:
        return _RAW_EVENT
    if isinstance(envelope, str):
        return get_envelope(envelope)
    return envelope
