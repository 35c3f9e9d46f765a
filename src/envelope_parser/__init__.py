"""Extract and validate payloads wrapped in AWS event envelopes."""

from envelope_parser.decoders import (
    StructuredRecord,
    base64_encoded,
    identity,
    json_text,
    structured_value,
)
from envelope_parser.envelopes import ENVELOPES, Envelope, get_envelope
from envelope_parser.errors import Issue, IssueKind, ParseError, ParserError
from envelope_parser.parser import parse, safe_parse
from envelope_parser.result import ParseFailure, ParseOutcome, ParseSuccess
from envelope_parser.schema import extend, omit

__all__ = [
    "ENVELOPES",
    "Envelope",
    "Issue",
    "IssueKind",
    "ParseError",
    "ParseFailure",
    "ParseOutcome",
    "ParseSuccess",
    "ParserError",
    "StructuredRecord",
    "base64_encoded",
    "extend",
    "get_envelope",
    "identity",
    "json_text",
    "omit",
    "parse",
    "safe_parse",
    "structured_value",
]
