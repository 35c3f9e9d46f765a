from __future__ import annotations

from typing import Any

from pydantic import BaseModel

from envelope_parser.decoders import json_text
from envelope_parser.envelopes.base import Envelope
from envelope_parser.models.sns import SnsSqsNotificationModel
from envelope_parser.models.sqs import SqsModel, SqsRecordModel
from envelope_parser.schema import extend


class SqsEnvelope(Envelope):
    """Validates each SQS message ``body``; returns one payload per record."""

    name = "SQS"
    payload_paths = (("Records", int, "body"),)

    def build_model(self, schema: Any) -> type[BaseModel]:
        record = extend(SqsRecordModel, body=self.payload(schema))
        return extend(SqsModel, Records=list[record])

    def extract(self, parsed: BaseModel) -> list[Any]:
        return [record.body for record in parsed.Records]


class SnsSqsEnvelope(Envelope):
    """SNS notifications fanned out to SQS; validates each notification ``Message``."""

    name = "SNS-wrapped SQS"
    payload_paths = (("Records", int, "body", "Message"),)

    def build_model(self, schema: Any) -> type[BaseModel]:
        notification = extend(SnsSqsNotificationModel, Message=self.payload(schema))
        record = extend(SqsRecordModel, body=json_text(notification))
        return extend(SqsModel, Records=list[record])

    def extract(self, parsed: BaseModel) -> list[Any]:
        return [record.body.Message for record in parsed.Records]
