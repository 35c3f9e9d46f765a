from __future__ import annotations

from collections.abc import Sequence
from enum import Enum

from pydantic import BaseModel, ConfigDict, ValidationError

Path = tuple[str | int, ...]
# A payload location: exact keys, ``int`` for any list index, or a set of
# alternative keys.
PathPattern = tuple[str | type[int] | frozenset[str], ...]

DECODE_ERROR_CODES = frozenset(
    {
        "json_invalid",
        "json_type",
        "base64_type",
        "base64_decode",
        "unmarshall_error",
    }
)


class ParserError(Exception):
    """Base exception for envelope parsing errors."""


class StructuredValueError(ParserError, ValueError):
    """Raised when a DynamoDB attribute value cannot be converted."""

    def __init__(self, reason: str, *, path: Path = ()) -> None:
        self.reason = reason
        self.path = path
        message = f"{reason} at {format_path(path)}" if path else reason
        super().__init__(message)


class UnmarshallError(StructuredValueError):
    """Attribute value map could not be turned into plain values."""


class MarshallError(StructuredValueError):
    """Plain value could not be turned into an attribute value."""


class IssueKind(str, Enum):
    ENVELOPE_SHAPE = "envelope_shape"
    DECODE = "decode"
    SCHEMA = "schema"


class Issue(BaseModel):
    """One validation failure, located relative to the original event."""

    model_config = ConfigDict(frozen=True)

    path: Path
    message: str
    code: str
    kind: IssueKind


class ParseError(ParserError):
    """Raised when an event or its payload fails validation.

    ``cause`` is the underlying :class:`pydantic.ValidationError`; ``issues``
    holds the same failures, classified and in validation order.
    """

    def __init__(
        self,
        message: str,
        *,
        cause: ValidationError,
        issues: Sequence[Issue] | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.cause = cause
        self.__cause__ = cause
        self.issues: tuple[Issue, ...] = (
            tuple(issues) if issues is not None else issues_from_error(cause)
        )

    def __str__(self) -> str:
        if not self.issues:
            return self.message
        details = "; ".join(
            f"{format_path(issue.path) or '<root>'}: {issue.message}" for issue in self.issues
        )
        return f"{self.message} ({details})"


def format_path(path: Path) -> str:
    rendered = ""
    for part in path:
        if isinstance(part, int):
            rendered += f"[{part}]"
        elif rendered:
            rendered += f".{part}"
        else:
            rendered = str(part)
    return rendered


def classify_issue(code: str, path: Path, payload_paths: Sequence[PathPattern]) -> IssueKind:
    if code in DECODE_ERROR_CODES:
        return IssueKind.DECODE

    for pattern in payload_paths:
        if not _matches(path, pattern):
            continue
        # A payload field that is absent is a defect of the envelope, not the payload.
        if code == "missing" and len(path) == len(pattern):
            return IssueKind.ENVELOPE_SHAPE
        return IssueKind.SCHEMA

    return IssueKind.ENVELOPE_SHAPE


def issues_from_error(
    error: ValidationError,
    payload_paths: Sequence[PathPattern] = ((),),
) -> tuple[Issue, ...]:
    issues: list[Issue] = []
    for detail in error.errors(include_url=False, include_input=False):
        path = tuple(detail["loc"])
        code = detail["type"]
        issues.append(
            Issue(
                path=path,
                message=detail["msg"],
                code=code,
                kind=classify_issue(code, path, payload_paths),
            )
        )
    return tuple(issues)


def _matches(path: Path, pattern: PathPattern) -> bool:
    if len(path) < len(pattern):
        return False

    for part, expected in zip(path, pattern):
        if expected is int:
            if not isinstance(part, int):
                return False
        elif isinstance(expected, frozenset):
            if part not in expected:
                return False
        elif part != expected:
            return False
    return True
