"""DynamoDB Streams event models.

Stream images arrive as attribute value maps. ``DynamoDBStreamChangeRecord``
unmarshalls ``Keys``, ``NewImage`` and ``OldImage`` into plain values, in that
order; the first one that fails is the only issue reported for the record.
``DynamoDBStreamChangeRecordBase`` keeps them encoded, which is the starting
point for custom records that decode a single image with their own schema::

    Record = extend(
        DynamoDBStreamChangeRecordBase,
        NewImage=(structured_value(Order) | None, None),
    )
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Literal

from pydantic import BaseModel, Field, model_validator

from envelope_parser.decoders import StructuredRecord, structured_value
from envelope_parser.schema import extend, omit

StreamViewKind = Literal["NEW_IMAGE", "OLD_IMAGE", "NEW_AND_OLD_IMAGES", "KEYS_ONLY"]
AttributeValueMap = dict[str, dict[str, Any]]
UnmarshalledImage = structured_value(dict[str, Any])

_FORBIDDEN_IMAGES: dict[str, tuple[str, ...]] = {
    "KEYS_ONLY": ("NewImage", "OldImage"),
    "NEW_IMAGE": ("OldImage",),
    "OLD_IMAGE": ("NewImage",),
    "NEW_AND_OLD_IMAGES": (),
}


class DynamoDBStreamToKinesisChangeRecord(StructuredRecord):
    """Change record as published to a Kinesis data stream: no sequence number or view type."""

    ApproximateCreationDateTime: float | None = None
    Keys: AttributeValueMap
    NewImage: AttributeValueMap | None = None
    OldImage: AttributeValueMap | None = None
    SizeBytes: int


class DynamoDBStreamChangeRecordBase(DynamoDBStreamToKinesisChangeRecord):
    SequenceNumber: str
    StreamViewType: StreamViewKind

    @model_validator(mode="after")
    def _validate_stream_view(self) -> DynamoDBStreamChangeRecordBase:
        present = [
            image
            for image in _FORBIDDEN_IMAGES[self.StreamViewType]
            if getattr(self, image) is not None
        ]
        if present:
            raise ValueError(
                f"{' and '.join(present)} not allowed when StreamViewType is {self.StreamViewType}"
            )
        return self


class DynamoDBStreamChangeRecord(DynamoDBStreamChangeRecordBase):
    Keys: UnmarshalledImage
    NewImage: UnmarshalledImage | None = None
    OldImage: UnmarshalledImage | None = None


class UserIdentity(BaseModel):
    type: Literal["Service"]
    principalId: Literal["dynamodb.amazonaws.com"]


class DynamoDBStreamRecordModel(BaseModel):
    eventID: str
    eventName: Literal["INSERT", "MODIFY", "REMOVE"]
    eventVersion: str
    eventSource: Literal["aws:dynamodb"]
    awsRegion: str
    eventSourceARN: str
    dynamodb: DynamoDBStreamChangeRecord
    userIdentity: UserIdentity | None = None


class DynamoDBStreamWindow(BaseModel):
    start: datetime
    end: datetime


class DynamoDBStreamModel(BaseModel):
    Records: list[DynamoDBStreamRecordModel] = Field(min_length=1)
    window: DynamoDBStreamWindow | None = None
    state: dict[str, str] | None = None
    shardId: str | None = None
    eventSourceARN: str | None = None
    isFinalInvokeForWindow: bool | None = None
    isWindowTerminatedEarly: bool | None = None


# A DynamoDB change as published to a Kinesis data stream: each Kinesis record
# carries one of these as JSON. Images are unmarshalled.
DynamoDBStreamToKinesisRecord = omit(
    extend(
        DynamoDBStreamRecordModel,
        name="DynamoDBStreamToKinesisRecord",
        recordFormat=Literal["application/json"],
        tableName=str,
        userIdentity=(UserIdentity | None, None),
        dynamodb=extend(
            DynamoDBStreamToKinesisChangeRecord,
            Keys=UnmarshalledImage,
            NewImage=(UnmarshalledImage | None, None),
            OldImage=(UnmarshalledImage | None, None),
        ),
    ),
    "eventVersion",
    "eventSourceARN",
    name="DynamoDBStreamToKinesisRecord",
)
