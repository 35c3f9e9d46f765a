from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel, Field

from envelope_parser.decoders import Decoder, identity, structured_value
from envelope_parser.envelopes.base import Envelope
from envelope_parser.models.dynamodb import (
    DynamoDBStreamChangeRecordBase,
    DynamoDBStreamModel,
    DynamoDBStreamRecordModel,
)
from envelope_parser.schema import extend


class DynamoDBStreamEnvelope(Envelope):
    """Validates ``NewImage`` and ``OldImage`` of each stream record with the schema.

    Returns one ``{"Keys": ..., "NewImage": ..., "OldImage": ...}`` mapping
    per record, in stream order. Every mapping has all three keys: an image
    the record does not carry (``OldImage`` of an INSERT) is None rather than
    absent.

    ``keys_decoder`` and ``image_decoder`` choose how each field is decoded;
    pass ``identity`` to keep a field as raw attribute values. Fields are
    unmarshalled in the order ``Keys``, ``NewImage``, ``OldImage`` and the
    first failure is the only issue reported for its record.
    """

    name = "DynamoDB Stream"
    payload_paths = (("Records", int, "dynamodb", frozenset({"NewImage", "OldImage"})),)

    def __init__(
        self,
        *,
        keys_decoder: Decoder = structured_value,
        image_decoder: Decoder = structured_value,
    ) -> None:
        super().__init__(decoder=image_decoder)
        self._keys_decoder = keys_decoder

    def build_model(self, schema: Any) -> type[BaseModel]:
        image = self.payload(schema)
        fields: dict[str, Any] = {
            "NewImage": (Optional[image], None),
            "OldImage": (Optional[image], None),
        }
        # Without a decoder, Keys keeps the attribute value shape check of the base record.
        if self._keys_decoder is not identity:
            fields["Keys"] = self._keys_decoder(dict[str, Any])
        change_record = extend(
            DynamoDBStreamChangeRecordBase,
            name="DynamoDBStreamChangeRecord",
            **fields,
        )
        record = extend(DynamoDBStreamRecordModel, dynamodb=change_record)
        return extend(DynamoDBStreamModel, Records=(list[record], Field(min_length=1)))

    def extract(self, parsed: BaseModel) -> list[dict[str, Any]]:
        return [
            {
                "Keys": record.dynamodb.Keys,
                "NewImage": record.dynamodb.NewImage,
                "OldImage": record.dynamodb.OldImage,
            }
            for record in parsed.Records
        ]
