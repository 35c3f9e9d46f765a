from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from envelope_parser.decoders import Decoder, base64_encoded
from envelope_parser.envelopes.base import Envelope
from envelope_parser.models.firehose import KinesisFirehoseModel, KinesisFirehoseRecord
from envelope_parser.models.kinesis import (
    KinesisDataStreamModel,
    KinesisDataStreamRecord,
    KinesisDataStreamRecordPayload,
)
from envelope_parser.schema import extend


class KinesisDataStreamEnvelope(Envelope):
    """Validates each record's ``kinesis.data`` after base64 decoding.

    Pass ``decoder=lambda schema: base64_encoded(json_text(schema))`` for
    JSON payloads.
    """

    name = "Kinesis Data Stream"
    payload_paths = (("Records", int, "kinesis", "data"),)

    def __init__(self, *, decoder: Decoder = base64_encoded) -> None:
        super().__init__(decoder=decoder)

    def build_model(self, schema: Any) -> type[BaseModel]:
        payload = extend(KinesisDataStreamRecordPayload, data=self.payload(schema))
        record = extend(KinesisDataStreamRecord, kinesis=payload)
        return extend(KinesisDataStreamModel, Records=list[record])

    def extract(self, parsed: BaseModel) -> list[Any]:
        return [record.kinesis.data for record in parsed.Records]


class KinesisFirehoseEnvelope(Envelope):
    name = "Kinesis Firehose"
    payload_paths = (("records", int, "data"),)

    def __init__(self, *, decoder: Decoder = base64_encoded) -> None:
        super().__init__(decoder=decoder)

    def build_model(self, schema: Any) -> type[BaseModel]:
        record = extend(KinesisFirehoseRecord, data=self.payload(schema))
        return extend(KinesisFirehoseModel, records=(list[record], Field(min_length=1)))

    def extract(self, parsed: BaseModel) -> list[Any]:
        return [record.data for record in parsed.records]
