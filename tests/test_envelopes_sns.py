from __future__ import annotations

import pytest
from pydantic import BaseModel

from envelope_parser.decoders import json_text
from envelope_parser.envelopes import SnsEnvelope
from envelope_parser.errors import IssueKind, ParseError


class Message(BaseModel):
    message: str


def test_parse_notification_message(load_event) -> None:
    result = SnsEnvelope().parse(load_event("sns"), json_text(Message))

    assert result == [Message(message="hello world")]


def test_missing_topic_is_an_envelope_issue(load_event) -> None:
    event = load_event("sns")
    del event["Records"][0]["Sns"]["TopicArn"]

    with pytest.raises(ParseError, match="Failed to parse SNS body") as exc_info:
        SnsEnvelope().parse(event, json_text(Message))

    issue = exc_info.value.issues[0]
    assert issue.path == ("Records", 0, "Sns", "TopicArn")
    assert issue.kind == IssueKind.ENVELOPE_SHAPE


def test_missing_message_is_an_envelope_issue(load_event) -> None:
    event = load_event("sns")
    del event["Records"][0]["Sns"]["Message"]

    with pytest.raises(ParseError) as exc_info:
        SnsEnvelope().parse(event, str)

    issue = exc_info.value.issues[0]
    assert issue.path == ("Records", 0, "Sns", "Message")
    assert issue.code == "missing"
    assert issue.kind == IssueKind.ENVELOPE_SHAPE
