from __future__ import annotations

from typing import Any

from pydantic import BaseModel

from envelope_parser.envelopes.base import Envelope
from envelope_parser.models.sns import SnsModel, SnsNotificationModel, SnsRecordModel
from envelope_parser.schema import extend


class SnsEnvelope(Envelope):
    name = "SNS"
    payload_paths = (("Records", int, "Sns", "Message"),)

    def build_model(self, schema: Any) -> type[BaseModel]:
        notification = extend(SnsNotificationModel, Message=self.payload(schema))
        record = extend(SnsRecordModel, Sns=notification)
        return extend(SnsModel, Records=list[record])

    def extract(self, parsed: BaseModel) -> list[Any]:
        return [record.Sns.Message for record in parsed.Records]
